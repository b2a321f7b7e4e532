"""
WorkOS SDK

Async client for the WorkOS API with typed responses and classified errors.

Usage:
    from workos_sdk import WorkOSClient

    async with WorkOSClient(api_key="sk_test_...") as client:
        result = await client.list_directory_users(directory_id="directory_123")
        if result.ok:
            for user in result.value.data:
                print(user.primary_email)
        else:
            print(result.error)
"""

from workos_sdk.client import WorkOSClient
from workos_sdk.constants import SDK_VERSION
from workos_sdk.core.operation import HttpMethod, OperationDescriptor
from workos_sdk.core.result import ApiResult
from workos_sdk.core.transport import HttpxTransport, RawResponse, Transport
from workos_sdk.exceptions import (
    ApiError,
    ClientError,
    ConfigError,
    DecodeError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportError,
    TransportErrorKind,
    UnauthorizedError,
    UnexpectedStatusError,
)
from workos_sdk.retry import RetryingExecutor, RetryPolicy

__version__ = SDK_VERSION

__all__ = [
    "ApiError",
    "ApiResult",
    "ClientError",
    "ConfigError",
    "DecodeError",
    "HttpMethod",
    "HttpxTransport",
    "NotFoundError",
    "OperationDescriptor",
    "RateLimitError",
    "RawResponse",
    "RetryPolicy",
    "RetryingExecutor",
    "ServerError",
    "Transport",
    "TransportError",
    "TransportErrorKind",
    "UnauthorizedError",
    "UnexpectedStatusError",
    "WorkOSClient",
]
