from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class CallCounter:
    """Callable double that records its arguments and returns a fixed result."""

    result: Any = None
    error: BaseException | None = None
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        if self.error is not None:
            raise self.error
        return self.result

    @property
    def count(self) -> int:
        return len(self.calls)


def must_not_call(*args: Any) -> Any:
    raise AssertionError(f"callback should not have been called with {args!r}")


@dataclass(frozen=True)
class TestUser:
    __test__ = False

    name: str
    user_id: int


def find_user_id(name: str) -> int:
    return sum(ord(c) for c in name)


def login_user(name: str, user_id: int) -> TestUser:
    return TestUser(name=name, user_id=user_id)
