"""Operation registry for attaching call-site sugar to containers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class ExtensionRegistry:
    """Named operations bound to container instances on attribute lookup.

    Attributes:
        owner: Name of the container class, used in errors and logs.
        _ops: Internal mapping of operation names to functions.
    """

    def __init__(self, owner: str) -> None:
        self.owner = owner
        self._ops: dict[str, Callable[..., Any]] = {}

    def register(self, name: str, fn: Callable[..., Any]) -> None:
        """Register an operation.

        Args:
            name: The operation name (e.g., "shout")
            fn: Function taking the container as its first argument
        """
        if name in self._ops and self._ops[name] is not fn:
            logger.warning("Replacing %s operation %r", self.owner, name)
        else:
            logger.debug("Registering %s operation %r", self.owner, name)
        self._ops[name] = fn

    def __contains__(self, name: str) -> bool:
        return name in self._ops

    def bind(self, instance: Any, name: str) -> Callable[..., Any]:
        """Bind a registered operation to an instance."""
        if name not in self._ops:
            raise AttributeError(f"'{self.owner}' object has no attribute '{name}'")
        fn = self._ops[name]
        return lambda *args, **kwargs: fn(instance, *args, **kwargs)
