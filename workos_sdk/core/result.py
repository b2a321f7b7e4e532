"""
ApiResult: value-or-error return type of the client facade.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from workos_sdk.exceptions import ClientError

T = TypeVar("T")


@dataclass(frozen=True)
class ApiResult(Generic[T]):
    """
    Outcome of one API call

    Exactly one of value/error is meaningful: check `ok` (or `error is None`)
    before reading `value`. A successful no-content call has ok=True and
    value=None.
    """

    value: Optional[T] = None
    error: Optional[ClientError] = None

    @classmethod
    def success(cls, value: Optional[T]) -> "ApiResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ClientError) -> "ApiResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Optional[T]:
        """Return the value, or raise the classified error"""
        if self.error is not None:
            raise self.error
        return self.value
