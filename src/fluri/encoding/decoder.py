"""URI decoders — applied once to every raw token at parse time.

Decoding is lenient: a malformed escape or an undecodable byte is
kept literally instead of failing the parse.
"""

import logging
import re
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from fluri.encoding.charset import DEFAULT_CHARSET, resolve_charset

logger = logging.getLogger("fluri.encoding")

# A run of consecutive %XX triplets; multi-byte characters span several
_ESCAPE_RUN = re.compile(r"(?:%[0-9A-Fa-f]{2})+")
_MALFORMED = re.compile(r"%(?![0-9A-Fa-f]{2})")


@runtime_checkable
class UriDecoder(Protocol):
    """Anything that can turn a raw URI token back into plain text."""

    def decode(self, text: str) -> str: ...


@dataclass(frozen=True, slots=True)
class NoopDecoder:
    """Identity decoder, for input that is already decoded."""

    def decode(self, text: str) -> str:
        return text


@dataclass(frozen=True, slots=True)
class PercentDecoder:
    """Reverse percent-encoding under *charset*.

    ``%`` not followed by two hex digits is passed through unchanged.
    Raises ``CharsetError`` at construction if *charset* is unknown.
    """

    charset: str = DEFAULT_CHARSET

    def __post_init__(self) -> None:
        resolve_charset(self.charset)

    def decode(self, text: str) -> str:
        if "%" not in text:
            return text
        if _MALFORMED.search(text):
            logger.debug("Passing through malformed percent escape in %r", text)
        return _ESCAPE_RUN.sub(self._decode_run, text)

    def _decode_run(self, match: re.Match[str]) -> str:
        run = match.group(0)
        raw = bytes(int(run[i + 1 : i + 3], 16) for i in range(0, len(run), 3))
        codec = resolve_charset(self.charset)
        out: list[str] = []
        pos = 0
        while pos < len(raw):
            try:
                out.append(raw[pos:].decode(codec))
                break
            except UnicodeDecodeError as exc:
                # Keep the decodable prefix; only the offending bytes stay escaped
                bad_start, bad_end = pos + exc.start, pos + exc.end
                out.append(raw[pos:bad_start].decode(codec))
                out.append(run[bad_start * 3 : bad_end * 3])
                logger.debug(
                    "Keeping undecodable escape %r (charset %s)",
                    run[bad_start * 3 : bad_end * 3],
                    self.charset,
                )
                pos = bad_end
        return "".join(out)
