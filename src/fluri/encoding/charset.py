"""Charset name resolution shared by encoders and decoders."""

import codecs
from functools import lru_cache

from fluri.errors import CharsetError

DEFAULT_CHARSET = "UTF-8"


@lru_cache(maxsize=32)
def resolve_charset(charset: str) -> str:
    """Return the canonical codec name for *charset*.

    Accepts the names Java and the WHATWG use (``"UTF-8"``, ``"ISO-8859-1"``)
    as well as Python aliases. Raises ``CharsetError`` for unknown names.
    """
    try:
        return codecs.lookup(charset).name
    except LookupError:
        raise CharsetError(charset) from None
