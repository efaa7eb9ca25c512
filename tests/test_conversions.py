"""Tests for fluri.conversions — explicit parse_uri / render_uri."""

from fluri.conversions import parse_uri, render_uri
from fluri.encoding import NoopDecoder, NoopEncoder
from fluri.path import StringPathPart


class TestParseUri:
    def test_default_decoder(self) -> None:
        assert parse_uri("/a%20b").path_parts == (StringPathPart("a b"),)

    def test_custom_decoder(self) -> None:
        assert parse_uri("/a%20b", NoopDecoder()).path_parts == (StringPathPart("a%20b"),)


class TestRenderUri:
    def test_default_encoder(self) -> None:
        assert render_uri(parse_uri("//h/a%20b")) == "//h/a%20b"

    def test_matches_str(self) -> None:
        uri = parse_uri("http://h/p?q=a%26b#f")
        assert render_uri(uri) == str(uri)

    def test_custom_encoder(self) -> None:
        assert render_uri(parse_uri("/a%20b"), encoder=NoopEncoder()) == "/a b"

    def test_fluent_round_trip(self) -> None:
        uri = parse_uri("http://example.com/search?q=python")
        uri = (uri / "page").param("lang", "en").with_fragment("top")
        assert render_uri(uri) == "http://example.com/search/page?q=python&lang=en#top"
