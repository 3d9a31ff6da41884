"""
Per-step outcome of a collaborator call.

Every external step (language detection, content analysis, fact check) yields a
`StepResult` that is either a success carrying a value or "unavailable" carrying
a reason. The pipeline picks the local fallback with `or_else`, so a remote
failure never travels as an exception past the integration layer.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class StepResult(Generic[T]):
    value: Optional[T] = None
    reason: Optional[str] = None

    @classmethod
    def success(cls, value: T) -> "StepResult[T]":
        return cls(value=value)

    @classmethod
    def unavailable(cls, reason: str) -> "StepResult[T]":
        return cls(reason=reason or "unavailable")

    @property
    def ok(self) -> bool:
        return self.reason is None

    def map(self, func: Callable[[T], U]) -> "StepResult[U]":
        if not self.ok:
            return StepResult.unavailable(self.reason)
        return StepResult.success(func(self.value))

    def or_else(self, fallback: Callable[[], T]) -> T:
        """Return the value on success, otherwise compute the local fallback."""
        if self.ok:
            return self.value
        return fallback()
