"""Shared type aliases used across fluri modules."""

from typing import TypeAlias

# One (key, value) pair of a query string or a path segment's matrix params
Param: TypeAlias = tuple[str, str]

# Ordered multi-map: keys may repeat, insertion order is preserved
Params: TypeAlias = tuple[Param, ...]
