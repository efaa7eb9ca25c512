"""The immutable ``Uri`` value and its fluent builders.

Every builder returns a new ``Uri`` with one field replaced::

    uri = parse_uri("http://example.com/search")
    uri = uri.with_scheme("https").param("q", "fluri") / "page"
    str(uri)  # "https://example.com/search/page?q=fluri"
"""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any

from fluri._internal.types import Params
from fluri.encoding.charset import DEFAULT_CHARSET
from fluri.encoding.encoder import NoopEncoder, PercentEncoder, UriEncoder
from fluri.parameters import QueryString
from fluri.path import PathPart, StringPathPart


@dataclass(frozen=True, slots=True)
class Uri:
    """A parsed or hand-built URI. Immutable after creation.

    All fields are optional. ``Uri()`` renders as ``"/"``.
    """

    protocol: str | None = None
    user: str | None = None
    password: str | None = None
    host: str | None = None
    port: int | None = None
    path_parts: tuple[PathPart, ...] = ()
    query: QueryString = field(default_factory=QueryString)
    fragment: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "path_parts", tuple(self.path_parts))

    # -- Derived accessors --

    @property
    def scheme(self) -> str | None:
        """Alias of ``protocol``."""
        return self.protocol

    @property
    def host_parts(self) -> tuple[str, ...]:
        """The host split on ``.``; empty when there is no host."""
        if self.host is None:
            return ()
        return tuple(self.host.split("."))

    @property
    def subdomain(self) -> str | None:
        """The first label of the host, e.g. ``"www"``."""
        parts = self.host_parts
        return parts[0] if parts else None

    @property
    def matrix_params(self) -> Params:
        """Matrix parameters of the last path segment."""
        if not self.path_parts:
            return ()
        return self.path_parts[-1].parameters

    def path_part(self, name: str) -> PathPart | None:
        """Return the first path segment named *name*, or ``None``."""
        for part in self.path_parts:
            if part.part == name:
                return part
        return None

    # -- Builders --

    def with_scheme(self, scheme: str) -> "Uri":
        return replace(self, protocol=scheme)

    def with_host(self, host: str) -> "Uri":
        return replace(self, host=host)

    def with_user(self, user: str) -> "Uri":
        return replace(self, user=user)

    def with_password(self, password: str) -> "Uri":
        return replace(self, password=password)

    def with_port(self, port: int) -> "Uri":
        return replace(self, port=port)

    def with_fragment(self, fragment: str) -> "Uri":
        """Set the fragment. ``""`` still renders a trailing ``#``."""
        return replace(self, fragment=fragment)

    def append_path(self, part: str) -> "Uri":
        """Append one plain path segment."""
        return replace(self, path_parts=(*self.path_parts, StringPathPart(part)))

    def param(self, key: str, value: Any) -> "Uri":
        """Add a query parameter. A ``None`` value leaves the Uri unchanged."""
        if value is None:
            return self
        return replace(self, query=self.query.add_param(key, value))

    def params(self, kvs: Iterable[tuple[str, Any]]) -> "Uri":
        """Add several query parameters, skipping ``None`` values."""
        clean = [(k, str(v)) for k, v in kvs if v is not None]
        return replace(self, query=self.query.add_params(clean))

    def replace_params(self, key: str, value: Any) -> "Uri":
        """Replace every ``key`` parameter with one ``(key, value)`` pair.

        A ``None`` value removes all ``key`` parameters instead.
        """
        return replace(self, query=self.query.replace_all(key, value))

    def remove_params(self, key: str) -> "Uri":
        """Remove every query parameter named *key*."""
        return replace(self, query=self.query.remove_all(key))

    def matrix_param(self, key: str, value: str, part: str | None = None) -> "Uri":
        """Add a matrix parameter to a path segment.

        With *part*, every segment of that name gets the parameter. Without
        it, the last segment does. A Uri with no path is returned unchanged.
        """
        if not self.path_parts:
            return self
        if part is None:
            last = self.path_parts[-1].add_param((key, value))
            return replace(self, path_parts=(*self.path_parts[:-1], last))
        return replace(
            self,
            path_parts=tuple(
                p.add_param((key, value)) if p.part == part else p for p in self.path_parts
            ),
        )

    def __truediv__(self, part: str) -> "Uri":
        return self.append_path(part)

    def __and__(self, kv: tuple[str, Any]) -> "Uri":
        key, value = kv
        return self.param(key, value)

    # -- Rendering --

    def path(self, charset: str = DEFAULT_CHARSET, encoder: UriEncoder | None = None) -> str:
        """The encoded path, always starting with ``/``."""
        if encoder is None:
            encoder = PercentEncoder()
        return "/" + "/".join(p.encoded(encoder, charset) for p in self.path_parts)

    def path_raw(self) -> str:
        """The path with no encoding."""
        return self.path(DEFAULT_CHARSET, NoopEncoder())

    def to_string(self, charset: str = DEFAULT_CHARSET, encoder: UriEncoder | None = None) -> str:
        """Render the Uri, percent-encoding path, query and fragment."""
        if encoder is None:
            encoder = PercentEncoder()

        if self.protocol is not None:
            prefix = self.protocol + "://"
        elif self.host is not None:
            # Protocol relative
            prefix = "//"
        else:
            prefix = ""

        user_info = ""
        if self.user is not None:
            user_info = self.user
            if self.password is not None:
                user_info += ":" + self.password
            user_info += "@"

        authority = self.host or ""
        if self.port is not None:
            authority += f":{self.port}"

        fragment = ""
        if self.fragment is not None:
            fragment = "#" + encoder.encode(self.fragment, charset)

        return (
            prefix
            + user_info
            + authority
            + self.path(charset, encoder)
            + self.query.encoded(encoder, charset)
            + fragment
        )

    def to_string_raw(self, charset: str = DEFAULT_CHARSET) -> str:
        """Render the Uri with no encoding (non-ASCII stays as-is)."""
        return self.to_string(charset, NoopEncoder())

    def __str__(self) -> str:
        return self.to_string()
