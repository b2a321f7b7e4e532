"""
Request builder

Pure translation of an OperationDescriptor plus Credentials into a
BuiltRequest. Never performs I/O: identical inputs always produce equal
BuiltRequest values, which keeps the whole request side testable offline.
"""

import json
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import quote

from pydantic import BaseModel

from workos_sdk.constants import JSON_CONTENT_TYPE, USER_AGENT
from workos_sdk.core.credentials import Credentials
from workos_sdk.core.operation import HttpMethod, OperationDescriptor, QueryParams
from workos_sdk.exceptions import ConfigError

_PLACEHOLDER_RE = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


@dataclass(frozen=True)
class BuiltRequest:
    method: HttpMethod
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None


def build_path(path_template: str, path_params: Mapping[str, str]) -> str:
    """
    Substitute every {name} placeholder with its percent-encoded value

    Raises:
        ConfigError: If a placeholder has no entry in path_params
    """
    missing: List[str] = []

    def _substitute(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name not in path_params:
            missing.append(name)
            return match.group(0)
        return quote(str(path_params[name]), safe="")

    path = _PLACEHOLDER_RE.sub(_substitute, path_template)
    if missing:
        raise ConfigError(
            f"Missing path parameter(s) {', '.join(sorted(set(missing)))} for {path_template!r}"
        )
    return path


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def build_query(query_params: QueryParams) -> str:
    """Encode query params in the given order. None values are dropped."""
    pairs: List[Tuple[str, str]] = [
        (str(key), _stringify(value)) for key, value in query_params if value is not None
    ]
    if not pairs:
        return ""
    return "&".join(f"{quote(key, safe='')}={quote(value, safe='')}" for key, value in pairs)


def serialize_body(body: Any) -> bytes:
    """Canonical JSON: sorted keys, compact separators, UTF-8"""
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json", exclude_none=True)
    try:
        text = json.dumps(body, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Request body is not JSON serializable: {e}") from e
    return text.encode("utf-8")


def build_request(descriptor: OperationDescriptor, credentials: Credentials) -> BuiltRequest:
    """
    Build the outbound request for one operation

    Args:
        descriptor: Operation to perform
        credentials: Secret key and base URL

    Returns:
        BuiltRequest with absolute URL, headers and optional body bytes

    Raises:
        ConfigError: Unresolved placeholder, relative path or unserializable body
    """
    if not descriptor.path_template.startswith("/"):
        raise ConfigError(f"Path must begin with '/', got {descriptor.path_template!r}")

    url = credentials.base_url + build_path(descriptor.path_template, descriptor.path_params)
    query = build_query(descriptor.query_params)
    if query:
        url = f"{url}?{query}"

    headers = {
        "Accept": JSON_CONTENT_TYPE,
        "Authorization": credentials.authorization_header,
        "User-Agent": USER_AGENT,
    }

    body = None
    if descriptor.body is not None:
        body = serialize_body(descriptor.body)
        headers["Content-Type"] = JSON_CONTENT_TYPE

    return BuiltRequest(method=descriptor.method, url=url, headers=headers, body=body)
