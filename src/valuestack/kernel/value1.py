"""Value1 - the single-slot stack container."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from valuestack.kernel.errors import NoValuePresentError
from valuestack.kernel.extensions import ExtensionRegistry

if TYPE_CHECKING:
    from valuestack.kernel.value2 import Value2

A = TypeVar("A")
D = TypeVar("D")
U = TypeVar("U")


@dataclass(frozen=True)
class Value1(Generic[A]):
    """A stack holding one optional value.

    ``None`` in the slot means absent. Callbacks are never invoked on an
    absent value, and any exception a callback raises propagates unchanged.

    Do not compare against ``Value1.empty()`` with ``is``; the empty instance
    is not guaranteed to be shared. Use ``is_empty()`` or ``==``.
    """

    _value: A | None = None

    _extensions: ClassVar[ExtensionRegistry] = ExtensionRegistry("Value1")

    @classmethod
    def register_op(cls, name: str, fn: Callable[..., Any]) -> None:
        """Register an operation capability on the Value1 class.

        Args:
            name: The operation name (e.g., "shout")
            fn: The function to register
        """
        cls._extensions.register(name, fn)

    def __getattr__(self, name: str) -> Any:
        """Allow calling registered extension methods."""
        if name.startswith("__"):
            raise AttributeError(name)
        return self._extensions.bind(self, name)

    @staticmethod
    def empty() -> Value1[Any]:
        """Return an empty Value1."""
        return _EMPTY

    # Promotion

    def and_of(self, value: D | None) -> Value2[A, D]:
        """Push a second value, returning a Value2.

        An empty stack stays empty: the result is ``Value2.empty()``.
        """
        from valuestack.kernel.value2 import Value2

        if self.is_empty():
            return Value2.empty()
        return Value2(self._value, value)

    def and_derive(self, fn: Callable[[A], D | None]) -> Value2[A, D]:
        """Push ``fn(value)`` as a second value, returning a Value2.

        ``fn`` is not called when this stack is empty.
        """
        from valuestack.kernel.value2 import Value2

        if self.is_empty():
            return Value2.empty()
        return Value2(self._value, fn(self._value))  # type: ignore[arg-type]

    # Presence

    def get(self) -> A:
        if self._value is None:
            raise NoValuePresentError(self)
        return self._value

    def is_present(self) -> bool:
        return self._value is not None

    def is_empty(self) -> bool:
        return self._value is None

    # Side effects, returning self for chaining

    def if_present(self, action: Callable[[A], Any]) -> Value1[A]:
        if self._value is not None:
            action(self._value)
        return self

    def if_present_or_else(
        self,
        action: Callable[[A], Any],
        empty_action: Callable[[], Any],
    ) -> Value1[A]:
        if self._value is not None:
            action(self._value)
        else:
            empty_action()
        return self

    def if_empty(self, empty_action: Callable[[], Any]) -> Value1[A]:
        if self._value is None:
            empty_action()
        return self

    # Transformations

    def filter(self, predicate: Callable[[A], bool]) -> Value1[A]:
        if self._value is None:
            return self
        return self if predicate(self._value) else Value1.empty()

    def map(self, fn: Callable[[A], U | None]) -> Value1[U]:
        """Map the value; a ``None`` result becomes an empty Value1."""
        if self._value is None:
            return Value1.empty()
        return Value1(fn(self._value))

    def flat_map(self, fn: Callable[[A], U | None | Value1[U]]) -> Value1[U]:
        """Map the value with a function that itself returns an optional value.

        The function may return a plain optional value or a Value1; either is
        flattened into the result.
        """
        if self._value is None:
            return Value1.empty()
        return _coerce(fn(self._value))

    # Substitution

    def or_(self, value: A | None | Value1[A]) -> Value1[A]:
        """Use ``value`` when this stack is empty.

        ``value`` may be a raw value, ``None`` or another Value1.
        """
        if self._value is not None:
            return self
        return _coerce(value)

    def or_get(self, supplier: Callable[[], A | None | Value1[A]]) -> Value1[A]:
        """Use the supplier's result when this stack is empty.

        The supplier is not called when a value is present.
        """
        if self._value is not None:
            return self
        return _coerce(supplier())

    # Terminal extraction

    def or_else(self, other: A | None) -> A | None:
        return self._value if self._value is not None else other

    def or_else_get(self, supplier: Callable[[], A | None]) -> A | None:
        return self._value if self._value is not None else supplier()

    def or_else_raise(self, exc_supplier: Callable[[], BaseException] | None = None) -> A:
        """Return the value, or raise.

        Args:
            exc_supplier: Builds the exception to raise when empty;
                defaults to NoValuePresentError.
        """
        if self._value is not None:
            return self._value
        if exc_supplier is None:
            raise NoValuePresentError(self)
        raise exc_supplier()

    def to_optional(self) -> A | None:
        return self._value

    def __iter__(self) -> Iterator[A]:
        if self._value is not None:
            yield self._value

    def __repr__(self) -> str:
        return f"Value1[{self._value}]"


def _coerce(value: Any) -> Value1[Any]:
    if isinstance(value, Value1):
        return value
    return Value1(value)


_EMPTY: Value1[Any] = Value1()
