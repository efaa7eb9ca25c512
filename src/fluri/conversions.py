"""Explicit string <-> Uri conversions.

``parse_uri`` and ``render_uri`` are the named entry points; nothing in
fluri coerces between strings and ``Uri`` implicitly.
"""

from fluri.encoding.charset import DEFAULT_CHARSET
from fluri.encoding.decoder import UriDecoder
from fluri.encoding.encoder import UriEncoder
from fluri.parser import parse
from fluri.uri import Uri


def parse_uri(text: str, decoder: UriDecoder | None = None) -> Uri:
    """Parse *text* into a ``Uri``, percent-decoding tokens by default."""
    return parse(str(text), decoder)


def render_uri(
    uri: Uri,
    charset: str = DEFAULT_CHARSET,
    encoder: UriEncoder | None = None,
) -> str:
    """Render *uri* to text, percent-encoding by default."""
    return uri.to_string(charset, encoder)
