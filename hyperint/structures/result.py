"""Tagged success/failure values returned by container operations."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from ..core.errors import HyperintError

T = TypeVar("T")


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """
    Outcome of a container operation.

    Container operations report failures through this value instead of
    raising, so bulk pipelines can continue past a single bad index. The
    ``error`` field keeps the specific error kind for callers that need it.
    """
    success: bool
    value: Optional[T] = None
    error: Optional[HyperintError] = None

    @classmethod
    def ok(cls, value: Optional[T] = None) -> "OperationResult[T]":
        return cls(True, value, None)

    @classmethod
    def fail(cls, error: HyperintError) -> "OperationResult[T]":
        return cls(False, None, error)

    @property
    def message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None

    def unwrap(self) -> T:
        """Return the value, or raise the stored error."""
        if not self.success:
            raise self.error
        return self.value

    def __bool__(self) -> bool:
        return self.success
