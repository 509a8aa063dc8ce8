from .kernel import (
    NoValuePresentError,
    OptionalLike,
    Value1,
    Value2,
)
from .stack import of, of_nullable, of_optional

__all__ = [
    # Containers
    "Value1",
    "Value2",
    "OptionalLike",
    # Factories
    "of",
    "of_nullable",
    "of_optional",
    # Errors
    "NoValuePresentError",
]
