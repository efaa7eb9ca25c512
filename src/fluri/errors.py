"""fluri exception hierarchy.

Parsing and rendering never raise for text input or a valid ``Uri``.
These types cover caller mistakes, such as an unknown charset name.
"""


class FluriError(Exception):
    """Base for all fluri-specific errors."""


class ConfigurationError(FluriError):
    """Raised when an encoder, decoder, or ``UriConfig`` is misconfigured."""


class CharsetError(ConfigurationError, LookupError):
    """Raised when a charset name is not known to the codec registry.

    Also a ``LookupError`` so code written against ``codecs.lookup``
    keeps working.
    """

    def __init__(self, charset: str) -> None:
        self.charset = charset
        super().__init__(f"Unknown charset: {charset!r}")
