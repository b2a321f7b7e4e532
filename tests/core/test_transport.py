"""
Tests for workos_sdk/core/transport.py

Covers HttpxTransport against httpx.MockTransport and the failure
classification done by invoke().
"""

import asyncio
import json

import httpx
import pytest

from workos_sdk.core.operation import HttpMethod
from workos_sdk.core.request_builder import BuiltRequest
from workos_sdk.core.transport import (
    HttpxTransport,
    RawResponse,
    Transport,
    classify_transport_failure,
    invoke,
)
from workos_sdk.exceptions import TransportError, TransportErrorKind


def _request(method=HttpMethod.GET, body=None):
    headers = {"Authorization": "Bearer sk_test_abc"}
    if body is not None:
        headers["Content-Type"] = "application/json"
    return BuiltRequest(
        method=method,
        url="https://api.workos.test/organizations/org_1",
        headers=headers,
        body=body,
    )


# ---------------------------------------------------------------------------
# HttpxTransport
# ---------------------------------------------------------------------------


class TestHttpxTransport:
    """Tests for HttpxTransport"""

    @pytest.mark.asyncio
    async def test_sends_request_and_wraps_response(self):
        """Happy path: method, URL, headers and body reach httpx; response is wrapped."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = request.content
            return httpx.Response(201, json={"id": "org_1"}, headers={"X-Request-ID": "req_1"})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
            transport = HttpxTransport(http_client)
            response = await transport.send(_request(HttpMethod.POST, b'{"name":"Foo"}'), timeout=5.0)

        assert seen == {
            "method": "POST",
            "url": "https://api.workos.test/organizations/org_1",
            "auth": "Bearer sk_test_abc",
            "body": b'{"name":"Foo"}',
        }
        assert response.status_code == 201
        assert json.loads(response.body) == {"id": "org_1"}
        assert response.headers["x-request-id"] == "req_1"
        assert response.reason_phrase == "Created"

    @pytest.mark.asyncio
    async def test_error_statuses_are_not_raised(self):
        """Edge case: 4xx/5xx come back as responses, not exceptions."""
        handler = lambda request: httpx.Response(503, content=b"")  # noqa: E731

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
            response = await HttpxTransport(http_client).send(_request(), timeout=5.0)

        assert response.status_code == 503
        assert response.body == b""

    @pytest.mark.asyncio
    async def test_does_not_close_injected_client(self):
        """Edge case: aclose() leaves a caller-owned AsyncClient open."""
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        await HttpxTransport(http_client).aclose()
        assert not http_client.is_closed
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_closes_own_client(self):
        """Happy path: context manager closes the client it created."""
        async with HttpxTransport() as transport:
            inner = transport._client
        assert inner.is_closed

    def test_satisfies_transport_protocol(self):
        """Happy path: HttpxTransport is a structural Transport."""
        assert isinstance(HttpxTransport(), Transport)


# ---------------------------------------------------------------------------
# classify_transport_failure
# ---------------------------------------------------------------------------


class TestClassifyTransportFailure:
    """Tests for classify_transport_failure()"""

    @pytest.mark.parametrize(
        "exc,kind",
        [
            (asyncio.TimeoutError(), TransportErrorKind.TIMEOUT),
            (httpx.ReadTimeout("read timed out"), TransportErrorKind.TIMEOUT),
            (httpx.ConnectTimeout("connect timed out"), TransportErrorKind.TIMEOUT),
            (httpx.ConnectError("connection refused"), TransportErrorKind.CONNECTION_FAILED),
            (httpx.ReadError("connection reset"), TransportErrorKind.CONNECTION_FAILED),
            (ConnectionResetError("reset by peer"), TransportErrorKind.CONNECTION_FAILED),
            (httpx.TooManyRedirects("loop"), TransportErrorKind.OTHER),
            (ValueError("boom"), TransportErrorKind.OTHER),
        ],
    )
    def test_maps_exception_to_kind(self, exc, kind):
        """Happy path: each failure type maps to its TransportError kind."""
        assert classify_transport_failure(exc).kind == kind

    def test_passes_through_transport_error(self):
        """Edge case: an existing TransportError is returned unchanged."""
        original = TransportError(TransportErrorKind.OTHER, "custom")
        assert classify_transport_failure(original) is original


# ---------------------------------------------------------------------------
# invoke
# ---------------------------------------------------------------------------


class TestInvoke:
    """Tests for invoke()"""

    @pytest.mark.asyncio
    async def test_returns_response(self, fake_transport):
        """Happy path: response from the transport is returned as-is."""
        fake_transport.queue(404, {"message": "not found"})

        response = await invoke(fake_transport, _request(), timeout=2.0)

        assert isinstance(response, RawResponse)
        assert response.status_code == 404
        assert fake_transport.timeouts == [2.0]

    @pytest.mark.asyncio
    async def test_slow_transport_times_out(self):
        """Failure: a transport that never answers surfaces a TIMEOUT error."""

        class HangingTransport:
            async def send(self, request, timeout):
                await asyncio.sleep(10)

        with pytest.raises(TransportError) as exc_info:
            await invoke(HangingTransport(), _request(), timeout=0.05)

        assert exc_info.value.kind == TransportErrorKind.TIMEOUT

    @pytest.mark.asyncio
    async def test_connection_error_is_classified(self, fake_transport):
        """Failure: connection errors become CONNECTION_FAILED."""
        fake_transport.queue_exception(httpx.ConnectError("connection refused"))

        with pytest.raises(TransportError) as exc_info:
            await invoke(fake_transport, _request(), timeout=1.0)

        assert exc_info.value.kind == TransportErrorKind.CONNECTION_FAILED
        assert "connection refused" in exc_info.value.detail

    @pytest.mark.asyncio
    async def test_sends_exactly_once(self, fake_transport):
        """Edge case: no retry after a failure."""
        fake_transport.queue_exception(httpx.ConnectError("down"))
        fake_transport.queue(200, {})

        with pytest.raises(TransportError):
            await invoke(fake_transport, _request(), timeout=1.0)

        assert len(fake_transport.requests) == 1


# ---------------------------------------------------------------------------
# RawResponse
# ---------------------------------------------------------------------------


class TestRawResponse:
    """Tests for RawResponse"""

    def test_plain_dict_headers_become_case_insensitive(self):
        """Edge case: dict headers are wrapped so lookups ignore case."""
        response = RawResponse(status_code=429, headers={"retry-after": "3"})

        assert isinstance(response.headers, httpx.Headers)
        assert response.headers["Retry-After"] == "3"

    def test_missing_headers_default_to_empty(self):
        """Edge case: None headers become an empty Headers object."""
        response = RawResponse(status_code=200, headers=None)
        assert len(response.headers) == 0
