"""Factory entry points for building stacks."""

from __future__ import annotations

from typing import Any, TypeVar, overload

from valuestack.kernel import Value1, Value2

A = TypeVar("A")
B = TypeVar("B")

_MISSING: Any = object()


@overload
def of(value: A | None) -> Value1[A]: ...
@overload
def of(value: A | None, value2: B | None) -> Value2[A, B]: ...


def of(value: Any, value2: Any = _MISSING) -> Value1[Any] | Value2[Any, Any]:
    """Create a stack from one or two values.

    Example:
        >>> of("Cora").and_derive(len).reduce_all(lambda n, size: f"{n}{size}").get()
        'Cora4'
    """
    if value2 is _MISSING:
        return Value1(value)
    return Value2(value, value2)


@overload
def of_nullable(value: A | None) -> Value1[A]: ...
@overload
def of_nullable(value: A | None, value2: B | None) -> Value2[A, B]: ...


def of_nullable(value: Any, value2: Any = _MISSING) -> Value1[Any] | Value2[Any, Any]:
    """Create a stack from values that may be ``None``."""
    return of(value, value2)


@overload
def of_optional(value: A | None) -> Value1[A]: ...
@overload
def of_optional(value: A | None, value2: B | None) -> Value2[A, B]: ...


def of_optional(value: Any, value2: Any = _MISSING) -> Value1[Any] | Value2[Any, Any]:
    """Create a stack from existing optional values.

    Lossless against ``to_optional()`` / ``to_optionals()``:
    ``of_optional(*stack.to_optionals()) == stack``.
    """
    return of(value, value2)
