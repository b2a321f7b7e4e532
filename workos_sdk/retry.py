"""
Optional retry wrapper

The client never retries on its own. RetryingExecutor wraps a client's
execute() and re-runs failed calls with exponential backoff (1s, 2s, 4s, ...)
on server errors, rate limits and transport failures. Non-idempotent
methods (POST) are only retried when explicitly allowed.

    executor = RetryingExecutor(client.execute)
    result = await directory_sync_api.get_directory_user(executor, "directory_user_123")
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from pydantic import ValidationError

from workos_sdk.constants import IDEMPOTENT_METHODS
from workos_sdk.core.operation import OperationDescriptor
from workos_sdk.core.result import ApiResult
from workos_sdk.exceptions import ClientError, ConfigError, RateLimitError, ServerError, TransportError

logger = logging.getLogger(__name__)

ExecuteFunc = Callable[..., Awaitable[ApiResult]]


@dataclass(frozen=True)
class RetryPolicy:
    max_retries: int = 3
    base_delay: float = 1.0
    max_delay: float = 30.0
    retry_non_idempotent: bool = False

    @classmethod
    def from_settings(cls) -> "RetryPolicy":
        try:
            from workos_sdk.config import settings
        except ValidationError as e:
            raise ConfigError(f"Invalid WORKOS_* settings: {e}") from e
        return cls(max_retries=settings.max_retries, base_delay=settings.retry_base_delay)

    def is_retryable(self, descriptor: OperationDescriptor, error: ClientError) -> bool:
        if not isinstance(error, (ServerError, RateLimitError, TransportError)):
            return False
        return self.retry_non_idempotent or descriptor.method.value in IDEMPOTENT_METHODS

    def delay_for(self, attempt: int, error: ClientError) -> float:
        """Seconds to wait before retry number `attempt` (0-based)"""
        if isinstance(error, RateLimitError) and error.retry_after is not None:
            return min(error.retry_after, self.max_delay)
        return min(self.base_delay * (2 ** attempt), self.max_delay)


async def execute_with_retry(
    execute_func: ExecuteFunc,
    descriptor: OperationDescriptor,
    response_type: Any = None,
    policy: Optional[RetryPolicy] = None,
) -> ApiResult:
    """
    Run execute_func, retrying retryable failures per the policy

    Returns:
        The first successful result, the first non-retryable failure, or the
        last failure once retries are exhausted
    """
    policy = policy or RetryPolicy()
    attempt = 0
    while True:
        result = await execute_func(descriptor, response_type)
        if result.ok or attempt >= policy.max_retries or not policy.is_retryable(descriptor, result.error):
            if not result.ok and attempt > 0:
                logger.error(f"❌ {descriptor.name} failed after {attempt + 1} attempts: {result.error}")
            return result

        wait_time = policy.delay_for(attempt, result.error)
        logger.warning(
            f"⚠️  {descriptor.name} failed ({result.error}), retrying in {wait_time}s... "
            f"(attempt {attempt + 1}/{policy.max_retries})"
        )
        await asyncio.sleep(wait_time)
        attempt += 1


class RetryingExecutor:
    """execute()-compatible callable that applies a RetryPolicy"""

    def __init__(self, execute_func: ExecuteFunc, policy: Optional[RetryPolicy] = None):
        self._execute_func = execute_func
        self._policy = policy or RetryPolicy()

    async def __call__(self, descriptor: OperationDescriptor, response_type: Any = None) -> ApiResult:
        return await execute_with_retry(self._execute_func, descriptor, response_type, self._policy)
