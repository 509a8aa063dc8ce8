"""Capability protocols shared by the stack containers."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
U = TypeVar("U")


@runtime_checkable
class OptionalLike(Protocol[T]):
    """Optional-value capability over the active (most recent) slot.

    Value1 and Value2 satisfy this structurally; neither inherits from it.
    """

    def is_present(self) -> bool: ...
    def is_empty(self) -> bool: ...
    def get(self) -> T: ...
    def map(self, fn: Callable[[T], U | None]) -> Any: ...
    def filter(self, predicate: Callable[[T], bool]) -> Any: ...
    def or_(self, value: Any) -> Any: ...
    def or_else(self, other: T | None) -> T | None: ...
    def to_optional(self) -> T | None: ...
    def __iter__(self) -> Iterator[T]: ...
