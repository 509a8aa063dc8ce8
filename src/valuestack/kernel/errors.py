"""Error types for terminal extraction on absent slots."""

from __future__ import annotations


class NoValuePresentError(ValueError):
    """Raised when a value is extracted from an absent slot without a fallback."""

    def __init__(self, container: object, message: str = "No value present") -> None:
        self.container = container
        super().__init__(message)

    def __repr__(self) -> str:
        return f"NoValuePresentError({super().__repr__()}, container={self.container!r})"
