"""Default charset, encoder, and decoder bundled as one value.

UriConfig is a frozen dataclass, immutable after creation, so a single
instance can be shared by every caller that parses and renders URIs::

    latin1 = UriConfig(charset="ISO-8859-1", decoder=PercentDecoder("ISO-8859-1"))
    uri = latin1.parse("/caf%E9")
    latin1.render(uri)  # "/caf%E9"
"""

from dataclasses import dataclass, field

from fluri.encoding.charset import DEFAULT_CHARSET, resolve_charset
from fluri.encoding.decoder import PercentDecoder, UriDecoder
from fluri.encoding.encoder import PercentEncoder, UriEncoder
from fluri.errors import ConfigurationError
from fluri.parser import parse
from fluri.uri import Uri


@dataclass(frozen=True, slots=True)
class UriConfig:
    """Parse and render settings. Validated on creation.

    Raises ``CharsetError`` for an unknown *charset* and
    ``ConfigurationError`` when *encoder* or *decoder* has the wrong shape.
    """

    charset: str = DEFAULT_CHARSET
    encoder: UriEncoder = field(default_factory=PercentEncoder)
    decoder: UriDecoder = field(default_factory=PercentDecoder)

    def __post_init__(self) -> None:
        resolve_charset(self.charset)
        if not isinstance(self.encoder, UriEncoder):
            msg = f"encoder must be a UriEncoder, got {type(self.encoder).__name__}"
            raise ConfigurationError(msg)
        if not isinstance(self.decoder, UriDecoder):
            msg = f"decoder must provide decode(text), got {type(self.decoder).__name__}"
            raise ConfigurationError(msg)

    def parse(self, text: str) -> Uri:
        return parse(text, self.decoder)

    def render(self, uri: Uri) -> str:
        return uri.to_string(self.charset, self.encoder)

    def render_raw(self, uri: Uri) -> str:
        return uri.to_string_raw(self.charset)


DEFAULT_CONFIG = UriConfig()
