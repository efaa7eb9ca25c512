"""Tests for fluri.config — UriConfig defaults and validation."""

import dataclasses

import pytest

from fluri.config import DEFAULT_CONFIG, UriConfig
from fluri.encoding import NoopDecoder, NoopEncoder, PercentDecoder, PercentEncoder
from fluri.errors import CharsetError, ConfigurationError


class TestDefaults:
    def test_default_values(self) -> None:
        config = UriConfig()
        assert config.charset == "UTF-8"
        assert config.encoder == PercentEncoder()
        assert config.decoder == PercentDecoder()

    def test_default_config_is_default(self) -> None:
        assert DEFAULT_CONFIG == UriConfig()

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.charset = "ascii"  # type: ignore[misc]


class TestValidation:
    def test_unknown_charset(self) -> None:
        with pytest.raises(CharsetError):
            UriConfig(charset="no-such-charset")

    def test_bad_encoder(self) -> None:
        with pytest.raises(ConfigurationError, match="encoder"):
            UriConfig(encoder="percent")  # type: ignore[arg-type]

    def test_bad_decoder(self) -> None:
        with pytest.raises(ConfigurationError, match="decoder"):
            UriConfig(decoder=object())  # type: ignore[arg-type]


class TestParseAndRender:
    def test_round_trip(self) -> None:
        uri = DEFAULT_CONFIG.parse("http://h/a%20b?q=%C3%BC")
        assert uri.path_raw() == "/a b"
        assert DEFAULT_CONFIG.render(uri) == "http://h/a%20b?q=%C3%BC"
        assert DEFAULT_CONFIG.render_raw(uri) == "http://h/a b?q=ü"

    def test_latin1(self) -> None:
        latin1 = UriConfig(charset="ISO-8859-1", decoder=PercentDecoder("ISO-8859-1"))
        uri = latin1.parse("/caf%E9")
        assert uri.path_raw() == "/café"
        assert latin1.render(uri) == "/caf%E9"

    def test_noop_config(self) -> None:
        raw = UriConfig(encoder=NoopEncoder(), decoder=NoopDecoder())
        uri = raw.parse("/a%20b")
        assert raw.render(uri) == "/a%20b"
