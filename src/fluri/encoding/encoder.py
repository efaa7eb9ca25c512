"""URI encoders — turn raw text into wire-safe text.

Every encoder implements ``encode(text, charset)``. Encoders compose with
``+``: ``PercentEncoder() + other`` builds a ``ChainedUriEncoder`` that
feeds the output of each encoder into the next.

Usage::

    from fluri.encoding import PercentEncoder, encode

    encode("a b", PercentEncoder())            # "a%20b"
    encode("a b", PercentEncoder(safe=" "))    # "a b"
"""

import string
from dataclasses import dataclass
from urllib.parse import quote

from fluri.encoding.charset import DEFAULT_CHARSET, resolve_charset

# RFC 3986 unreserved characters; quote() never percent-encodes these
UNRESERVED = frozenset(string.ascii_letters + string.digits + "-_.~")

# Extra characters that may stay literal in a given context. ";" and "=" are
# left out of PATH_SAFE because they delimit matrix params inside a segment.
PATH_SAFE = "!$&'()*+,:@"
QUERY_SAFE = "!$'()*,:@/?"
FRAGMENT_SAFE = "!$&'()*+,;=:@/?"


class UriEncoder:
    """Base for all encoders.

    Subclasses override ``encode``. ``+`` is shared so any two encoders
    can be chained.
    """

    __slots__ = ()

    def encode(self, text: str, charset: str = DEFAULT_CHARSET) -> str:
        raise NotImplementedError

    def __add__(self, other: "UriEncoder") -> "ChainedUriEncoder":
        if not isinstance(other, UriEncoder):
            return NotImplemented
        return ChainedUriEncoder(_flatten(self) + _flatten(other))


def _flatten(encoder: UriEncoder) -> tuple[UriEncoder, ...]:
    if isinstance(encoder, ChainedUriEncoder):
        return encoder.encoders
    return (encoder,)


@dataclass(frozen=True, slots=True)
class NoopEncoder(UriEncoder):
    """Identity encoder. Renders the raw, unencoded form."""

    def encode(self, text: str, charset: str = DEFAULT_CHARSET) -> str:
        return text


@dataclass(frozen=True, slots=True)
class PercentEncoder(UriEncoder):
    """Percent-encode every character outside the safe set.

    The safe set is ``UNRESERVED`` plus the characters in *safe*. Each
    other character is encoded under the charset and every resulting byte
    is written as ``%XX`` with uppercase hex digits.
    """

    safe: str = ""

    def encode(self, text: str, charset: str = DEFAULT_CHARSET) -> str:
        # Unrepresentable characters degrade to "?" rather than fail
        return quote(text, safe=self.safe, encoding=resolve_charset(charset), errors="replace")


@dataclass(frozen=True, slots=True)
class ChainedUriEncoder(UriEncoder):
    """Apply several encoders in order, each to the previous output."""

    encoders: tuple[UriEncoder, ...] = ()

    def encode(self, text: str, charset: str = DEFAULT_CHARSET) -> str:
        for encoder in self.encoders:
            text = encoder.encode(text, charset)
        return text


def encode(text: str, encoder: UriEncoder, charset: str = DEFAULT_CHARSET) -> str:
    """Encode *text* with *encoder* under *charset*."""
    return encoder.encode(text, charset)
