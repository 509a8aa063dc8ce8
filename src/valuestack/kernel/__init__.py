"""Kernel layer - the stack containers and their shared abstractions."""

from valuestack.kernel.errors import NoValuePresentError
from valuestack.kernel.extensions import ExtensionRegistry
from valuestack.kernel.functions import Consumer2, Predicate2, and_then, both, either, negate
from valuestack.kernel.ports import OptionalLike
from valuestack.kernel.value1 import Value1
from valuestack.kernel.value2 import Value2

__all__ = [
    "Value1",
    "Value2",
    "NoValuePresentError",
    "OptionalLike",
    "ExtensionRegistry",
    # Two-argument helpers
    "Predicate2",
    "Consumer2",
    "both",
    "either",
    "negate",
    "and_then",
]
