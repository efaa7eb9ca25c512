"""Path segments — a bare name, optionally carrying ``;key=value`` params.

``StringPathPart`` and ``MatrixParams`` form a closed variant set. Adding a
parameter to a ``StringPathPart`` always returns a ``MatrixParams``::

    StringPathPart("users").add_param(("v", "2"))
    # MatrixParams(part="users", parameters=(("v", "2"),))
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar, TypeAlias

from fluri._internal.types import Param, Params
from fluri.encoding.charset import DEFAULT_CHARSET
from fluri.encoding.encoder import PercentEncoder, UriEncoder
from fluri.parameters import Parameters


def _part_encoded(part: str, encoder: UriEncoder | None, charset: str) -> str:
    if encoder is None:
        encoder = PercentEncoder()
    return encoder.encode(part, charset)


@dataclass(frozen=True, slots=True)
class StringPathPart:
    """A path segment with no matrix parameters."""

    part: str

    @property
    def parameters(self) -> Params:
        return ()

    def add_param(self, kv: Param) -> "MatrixParams":
        return MatrixParams(self.part, (kv,))

    def part_encoded(self, encoder: UriEncoder | None = None, charset: str = DEFAULT_CHARSET) -> str:
        return _part_encoded(self.part, encoder, charset)

    def encoded(self, encoder: UriEncoder | None = None, charset: str = DEFAULT_CHARSET) -> str:
        return self.part_encoded(encoder, charset)


@dataclass(frozen=True, slots=True)
class MatrixParams(Parameters):
    """A path segment followed by ``;key=value`` matrix parameters."""

    separator: ClassVar[str] = ";"

    part: str
    parameters: Params = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", tuple(self.parameters))

    def add_param(self, kv: Param) -> "MatrixParams":
        return self.add(kv)

    def part_encoded(self, encoder: UriEncoder | None = None, charset: str = DEFAULT_CHARSET) -> str:
        return _part_encoded(self.part, encoder, charset)

    def encoded(self, encoder: UriEncoder | None = None, charset: str = DEFAULT_CHARSET) -> str:
        return self.part_encoded(encoder, charset) + ";" + self.params_encoded(encoder, charset)


PathPart: TypeAlias = StringPathPart | MatrixParams


def path_part(name: str, params: Iterable[Param] = ()) -> PathPart:
    """Build the right variant: ``StringPathPart`` unless *params* is non-empty."""
    params = tuple(params)
    if not params:
        return StringPathPart(name)
    return MatrixParams(name, params)
