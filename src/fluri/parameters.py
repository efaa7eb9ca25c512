"""Ordered multi-map of string parameters — query strings and matrix params.

``Parameters`` holds the add/replace/remove/encode algorithms once. Each
concrete type supplies ``parameters``, a ``separator`` and ``with_params``.
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any, ClassVar, Self

from fluri._internal.types import Param, Params
from fluri.encoding.charset import DEFAULT_CHARSET
from fluri.encoding.encoder import NoopEncoder, PercentEncoder, UriEncoder


class Parameters:
    """Mixin for immutable dataclasses carrying ``parameters: Params``.

    Keys may repeat and insertion order is preserved. Every operation
    returns a new instance.
    """

    __slots__ = ()

    separator: ClassVar[str]
    parameters: Params

    def with_params(self, params: Iterable[Param]) -> Self:
        """Copy with the parameter list replaced by *params*."""
        return replace(self, parameters=tuple(params))  # type: ignore[type-var]

    def add(self, kv: Param) -> Self:
        """Append one ``(key, value)`` pair."""
        return self.with_params((*self.parameters, kv))

    def add_params(self, kvs: Iterable[Param]) -> Self:
        """Append several pairs, in order."""
        return self.with_params((*self.parameters, *kvs))

    def replace_all(self, key: str, value: Any | None) -> Self:
        """Drop every pair with *key*, then append ``(key, value)``.

        With ``value=None`` this is the same as ``remove_all(key)``.
        """
        if value is None:
            return self.remove_all(key)
        kept = (kv for kv in self.parameters if kv[0] != key)
        return self.with_params((*kept, (key, str(value))))

    def remove_all(self, key: str) -> Self:
        """Drop every pair with *key*, keeping the order of the rest."""
        return self.with_params(kv for kv in self.parameters if kv[0] != key)

    def params_encoded(
        self,
        encoder: UriEncoder | None = None,
        charset: str = DEFAULT_CHARSET,
    ) -> str:
        """Render ``k=v`` pairs joined by the separator. Empty renders ``""``."""
        if encoder is None:
            encoder = PercentEncoder()
        return self.separator.join(
            f"{encoder.encode(k, charset)}={encoder.encode(v, charset)}"
            for k, v in self.parameters
        )

    def params_raw(self) -> str:
        """Render the pairs with no encoding."""
        return self.params_encoded(NoopEncoder())


@dataclass(frozen=True, slots=True)
class QueryString(Parameters):
    """Query string parameters, in the order they were added."""

    separator: ClassVar[str] = "&"

    parameters: Params = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", tuple(self.parameters))

    def params(self, key: str) -> list[str]:
        """Return all values for *key*, in order."""
        return [v for k, v in self.parameters if k == key]

    def param(self, key: str) -> str | None:
        """Return the first value for *key*, or ``None`` if missing."""
        for k, v in self.parameters:
            if k == key:
                return v
        return None

    def add_param(self, key: str, value: Any) -> "QueryString":
        """Append ``(key, str(value))``."""
        return self.add((key, str(value)))

    def encoded(
        self,
        encoder: UriEncoder | None = None,
        charset: str = DEFAULT_CHARSET,
    ) -> str:
        """Render with a leading ``?``, or ``""`` when there are no pairs."""
        if not self.parameters:
            return ""
        return "?" + self.params_encoded(encoder, charset)

    def __len__(self) -> int:
        return len(self.parameters)

    def __bool__(self) -> bool:
        return bool(self.parameters)
