"""Value2 - the two-slot stack container."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

from valuestack.kernel.errors import NoValuePresentError
from valuestack.kernel.extensions import ExtensionRegistry
from valuestack.kernel.value1 import Value1

B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
U = TypeVar("U")


@dataclass(frozen=True)
class Value2(Generic[B, C]):
    """A stack holding two optional values.

    The second slot is the active one: ``map``, ``filter``, ``or_`` and the
    terminal operations act on it alone and carry the first slot through.
    ``reduce_all`` / ``flat_reduce_all`` / ``if_all_present`` see both.

    Presence and emptiness are not complements. ``is_present()`` asks
    "are both values here?", ``is_empty()`` asks "is anything missing?".
    With only the first slot filled, ``is_present()`` is False and
    ``is_empty()`` is True.

    As with Value1, test emptiness with ``is_empty()`` or ``==``, never by
    identity against ``Value2.empty()``.
    """

    _first: B | None = None
    _second: C | None = None

    _extensions: ClassVar[ExtensionRegistry] = ExtensionRegistry("Value2")

    @classmethod
    def register_op(cls, name: str, fn: Callable[..., Any]) -> None:
        """Register an operation capability on the Value2 class."""
        cls._extensions.register(name, fn)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__"):
            raise AttributeError(name)
        return self._extensions.bind(self, name)

    @staticmethod
    def empty() -> Value2[Any, Any]:
        """Return an empty Value2."""
        return _EMPTY

    def _replace_last(self, value: D | None) -> Value2[B, D]:
        return Value2(self._first, value)

    # Presence

    def get(self) -> C:
        """Return the second value, or raise NoValuePresentError."""
        if self._second is None:
            raise NoValuePresentError(self)
        return self._second

    def is_present(self) -> bool:
        return self._first is not None and self._second is not None

    def is_empty(self) -> bool:
        return self._first is None or self._second is None

    # Side effects, returning self for chaining

    def if_present(self, action: Callable[[C], Any]) -> Value2[B, C]:
        """Run ``action`` on the second value if it is present."""
        if self._second is not None:
            action(self._second)
        return self

    def if_present_or_else(
        self,
        action: Callable[[C], Any],
        empty_action: Callable[[], Any],
    ) -> Value2[B, C]:
        if self._second is not None:
            action(self._second)
        else:
            empty_action()
        return self

    def if_all_present(self, action: Callable[[B, C], Any]) -> Value2[B, C]:
        """Run ``action(first, second)`` only when both values are present."""
        if self.is_present():
            action(self._first, self._second)  # type: ignore[arg-type]
        return self

    def if_empty(self, empty_action: Callable[[], Any]) -> Value2[B, C]:
        """Run ``empty_action`` if either value is absent."""
        if self.is_empty():
            empty_action()
        return self

    # Transformations of the second slot

    def filter(self, predicate: Callable[[C], bool]) -> Value2[B, C]:
        if self.is_empty():
            return self
        return self if predicate(self._second) else self._replace_last(None)  # type: ignore[arg-type]

    def map(self, fn: Callable[[C], U | None]) -> Value2[B, U]:
        if self.is_empty():
            return Value2.empty()
        return self._replace_last(fn(self._second))  # type: ignore[arg-type]

    def flat_map(self, fn: Callable[[C], U | None | Value1[U]]) -> Value2[B, U]:
        """Like ``map``, flattening a Value1 result into the second slot."""
        if self.is_empty():
            return Value2.empty()
        result = fn(self._second)  # type: ignore[arg-type]
        if isinstance(result, Value1):
            result = result.to_optional()
        return self._replace_last(result)

    # Reduction

    def reduce_all(self, fn: Callable[[B, C], D | None]) -> Value1[D]:
        """Combine both values into a Value1.

        ``fn`` only runs when both values are present; otherwise the result
        is an empty Value1.
        """
        if self.is_empty():
            return Value1.empty()
        return Value1(fn(self._first, self._second))  # type: ignore[arg-type]

    def flat_reduce_all(self, fn: Callable[[B, C], Value1[D]]) -> Value1[D]:
        """Combine both values with a function that returns a Value1 itself."""
        if self.is_empty():
            return Value1.empty()
        return fn(self._first, self._second)  # type: ignore[arg-type]

    # Substitution of the second slot

    def or_(self, value: C | None | Value1[C]) -> Value2[B, C]:
        """Use ``value`` as the second value unless it is already present."""
        if self._second is not None:
            return self
        if isinstance(value, Value1):
            value = value.to_optional()
        return self._replace_last(value)

    def or_get(self, supplier: Callable[[], C | None | Value1[C]]) -> Value2[B, C]:
        if self._second is not None:
            return self
        value = supplier()
        if isinstance(value, Value1):
            value = value.to_optional()
        return self._replace_last(value)

    def or_derive(self, fn: Callable[[B], C | None]) -> Value2[B, C]:
        """Fill a missing second value from the first one.

        A no-op when the second is present, or when the first is absent.
        """
        if self._second is not None or self._first is None:
            return self
        return self._replace_last(fn(self._first))

    # Terminal extraction of the second slot

    def or_else(self, other: C | None) -> C | None:
        return self._second if self._second is not None else other

    def or_else_get(self, supplier: Callable[[], C | None]) -> C | None:
        return self._second if self._second is not None else supplier()

    def or_else_raise(self, exc_supplier: Callable[[], BaseException] | None = None) -> C:
        if self._second is not None:
            return self._second
        if exc_supplier is None:
            raise NoValuePresentError(self)
        raise exc_supplier()

    def to_optional(self) -> C | None:
        return self._second

    def to_optionals(self) -> tuple[B | None, C | None]:
        """Return both slots as a ``(first, second)`` tuple."""
        return self._first, self._second

    def __iter__(self) -> Iterator[C]:
        if self._second is not None:
            yield self._second

    def __repr__(self) -> str:
        return f"Value2[{self._first},{self._second}]"


_EMPTY: Value2[Any, Any] = Value2()
