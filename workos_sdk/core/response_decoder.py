"""
Response decoder

Classifies a RawResponse by status code and decodes it:
- 2xx: body validated against the requested type (pydantic TypeAdapter)
- 4xx: ApiError (UnauthorizedError / NotFoundError / RateLimitError for 401/404/429;
  a 400 invalid_client or unauthorized_client is also an UnauthorizedError)
- 5xx: ServerError
- other: UnexpectedStatusError

Malformed error bodies only degrade the error message; they never block
classification. The decoder returns errors, it does not raise them.
"""

import json
import logging
from functools import lru_cache
from typing import Any, Dict, List, Optional, Tuple, Type, Union

import httpx
from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError

from workos_sdk.constants import REQUEST_ID_HEADER
from workos_sdk.core.transport import RawResponse
from workos_sdk.exceptions import (
    ApiError,
    ClientError,
    ConfigError,
    DecodeError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    UnexpectedStatusError,
)

logger = logging.getLogger(__name__)

_STATUS_ERRORS: Dict[int, Type[ApiError]] = {
    401: UnauthorizedError,
    404: NotFoundError,
    429: RateLimitError,
}

# OAuth error codes the authenticate endpoint sends with a 400 for a rejected client
_UNAUTHORIZED_CODES = frozenset({"invalid_client", "unauthorized_client"})


@lru_cache(maxsize=256)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def resolve_adapter(response_type: Any) -> TypeAdapter:
    """
    TypeAdapter for a response type

    Raises:
        ConfigError: If pydantic cannot validate into the type
    """
    try:
        return _adapter(response_type)
    except (TypeError, PydanticSchemaGenerationError) as e:
        raise ConfigError(f"Unsupported response type {response_type!r}: {e}") from e


def status_text(response: RawResponse) -> str:
    """Reason phrase for the status (e.g. "Not Found")"""
    return (
        response.reason_phrase
        or httpx.codes.get_reason_phrase(response.status_code)
        or f"HTTP {response.status_code}"
    )


def parse_error_payload(body: bytes) -> Optional[Tuple[Optional[str], str, Optional[List[Any]]]]:
    """
    Parse a WorkOS error body into (code, message, errors)

    Accepts {"code", "message", "errors"} and the OAuth-style
    {"error", "error_description"} shape. Returns None when the body is not
    a usable error payload.
    """
    if not body:
        return None
    try:
        payload = json.loads(body)
    except (ValueError, UnicodeDecodeError, RecursionError):
        return None
    if not isinstance(payload, dict):
        return None

    message = payload.get("message")
    code = payload.get("code")
    if not isinstance(message, str):
        message = payload.get("error_description")
        if code is None:
            code = payload.get("error")
    if not isinstance(message, str) or not message:
        return None

    errors = payload.get("errors")
    if not isinstance(errors, list):
        errors = None

    return (code if isinstance(code, str) else None), message, errors


def parse_retry_after(headers: httpx.Headers) -> Optional[float]:
    """Retry-After in seconds (delta-seconds form only)"""
    value = headers.get("Retry-After")
    if value is None:
        return None
    try:
        seconds = float(value)
    except ValueError:
        return None
    return seconds if seconds >= 0 else None


def _decode_body(response: RawResponse, response_type: Any) -> Any:
    if not response.body:
        raise DecodeError(f"Empty response body for HTTP {response.status_code}", response.body)

    if response_type is None:
        try:
            return json.loads(response.body)
        except (ValueError, UnicodeDecodeError, RecursionError) as e:
            raise DecodeError(f"Response body is not valid JSON: {e}", response.body) from e

    adapter = resolve_adapter(response_type)
    try:
        return adapter.validate_json(response.body)
    except ValidationError as e:
        name = getattr(response_type, "__name__", str(response_type))
        raise DecodeError(
            f"Response body does not match {name}: {e.error_count()} validation error(s)",
            response.body,
        ) from e


def _api_error(response: RawResponse) -> ApiError:
    request_id = response.headers.get(REQUEST_ID_HEADER)
    body_text = response.body.decode("utf-8", errors="replace")
    parsed = parse_error_payload(response.body)
    if parsed is None:
        code, message, errors = None, status_text(response), None
    else:
        code, message, errors = parsed

    if 500 <= response.status_code <= 599:
        return ServerError(
            response.status_code, message, code=code, errors=errors,
            request_id=request_id, body=body_text,
        )

    error_cls = _STATUS_ERRORS.get(response.status_code, ApiError)
    if response.status_code == 400 and code in _UNAUTHORIZED_CODES:
        error_cls = UnauthorizedError
    kwargs: Dict[str, Any] = {}
    if error_cls is RateLimitError:
        kwargs["retry_after"] = parse_retry_after(response.headers)
    return error_cls(
        response.status_code, message, code=code, errors=errors,
        request_id=request_id, body=body_text, **kwargs,
    )


def decode_response(
    response: RawResponse,
    response_type: Any = None,
    no_content: bool = False,
) -> Tuple[Any, Optional[ClientError]]:
    """
    Decode a raw response into (value, None) or (None, error)

    Args:
        response: Raw response from the transport
        response_type: Pydantic model (or any TypeAdapter-compatible type);
            None returns the parsed JSON unchanged
        no_content: Success responses carry no payload; value is None

    Returns:
        Tuple of (value, error) where exactly one side is meaningful
    """
    status = response.status_code

    if 200 <= status <= 299:
        if no_content:
            return None, None
        try:
            return _decode_body(response, response_type), None
        except (DecodeError, ConfigError) as e:
            logger.warning(f"Failed to decode HTTP {status} response: {e.message}")
            return None, e

    if 400 <= status <= 599:
        error: Union[ApiError, ServerError] = _api_error(response)
        logger.debug(f"Classified HTTP {status} as {type(error).__name__}")
        return None, error

    return None, UnexpectedStatusError(status)
