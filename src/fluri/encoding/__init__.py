"""Encoding subsystem — percent, no-op, and chained encoders plus decoders.

Every string that crosses the wire-text boundary passes through an
encoder on the way out and a decoder on the way in.
"""

from fluri.encoding.charset import DEFAULT_CHARSET, resolve_charset
from fluri.encoding.decoder import NoopDecoder, PercentDecoder, UriDecoder
from fluri.encoding.encoder import (
    FRAGMENT_SAFE,
    PATH_SAFE,
    QUERY_SAFE,
    UNRESERVED,
    ChainedUriEncoder,
    NoopEncoder,
    PercentEncoder,
    UriEncoder,
    encode,
)

__all__ = [
    "DEFAULT_CHARSET",
    "FRAGMENT_SAFE",
    "PATH_SAFE",
    "QUERY_SAFE",
    "UNRESERVED",
    "ChainedUriEncoder",
    "NoopDecoder",
    "NoopEncoder",
    "PercentDecoder",
    "PercentEncoder",
    "UriDecoder",
    "UriEncoder",
    "encode",
    "resolve_charset",
]
