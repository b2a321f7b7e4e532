"""
Transport layer

Transport is the "send a request, get a response" capability the client
depends on. HttpxTransport is the default implementation over a pooled
httpx.AsyncClient; tests substitute their own objects with the same shape.

invoke() runs one exchange with a timeout and classifies anything that is
not an HTTP completion as a TransportError. 4xx/5xx responses are returned
untouched; status classification belongs to the response decoder.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol, runtime_checkable

import httpx

from workos_sdk.core.request_builder import BuiltRequest
from workos_sdk.exceptions import TransportError, TransportErrorKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    body: bytes = b""
    reason_phrase: str = ""

    def __post_init__(self):
        # Custom transports may hand back a plain dict
        if not isinstance(self.headers, httpx.Headers):
            object.__setattr__(self, "headers", httpx.Headers(self.headers or {}))


@runtime_checkable
class Transport(Protocol):
    """Anything that can execute a BuiltRequest. Must be safe for concurrent calls."""

    async def send(self, request: BuiltRequest, timeout: float) -> RawResponse:
        ...


class HttpxTransport:
    """
    Transport backed by httpx.AsyncClient

    One AsyncClient (and its connection pool) is shared by all calls.
    Pass an existing client to control pooling, proxies or mounts;
    otherwise one is created and closed by aclose().
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(follow_redirects=False)

    async def send(self, request: BuiltRequest, timeout: float) -> RawResponse:
        response = await self._client.request(
            request.method.value,
            request.url,
            headers=request.headers,
            content=request.body,
            timeout=timeout,
        )
        return RawResponse(
            status_code=response.status_code,
            headers=response.headers,
            body=response.content,
            reason_phrase=response.reason_phrase,
        )

    async def aclose(self):
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()


def classify_transport_failure(exc: BaseException) -> TransportError:
    """Map a transport-level exception to a TransportError"""
    if isinstance(exc, TransportError):
        return exc
    if isinstance(exc, (asyncio.TimeoutError, httpx.TimeoutException)):
        return TransportError(TransportErrorKind.TIMEOUT, str(exc) or "request timed out")
    if isinstance(exc, (httpx.ConnectError, httpx.NetworkError, OSError)):
        return TransportError(TransportErrorKind.CONNECTION_FAILED, str(exc) or type(exc).__name__)
    return TransportError(TransportErrorKind.OTHER, f"{type(exc).__name__}: {exc}")


async def invoke(transport: Transport, request: BuiltRequest, timeout: float) -> RawResponse:
    """
    Send one request through the transport

    Args:
        transport: Transport capability to use
        request: Request produced by the request builder
        timeout: Seconds before the call is abandoned

    Returns:
        RawResponse for any HTTP completion, including 4xx/5xx

    Raises:
        TransportError: Timeout, connection failure or any other transport failure
    """
    try:
        return await asyncio.wait_for(transport.send(request, timeout), timeout=timeout)
    except asyncio.CancelledError:
        raise
    except Exception as e:
        error = classify_transport_failure(e)
        logger.warning(f"{request.method.value} {request.url} failed: {error.message}")
        raise error from e
