"""
Operation descriptors

An OperationDescriptor describes one API call: method, path template with
{placeholders}, path params, ordered query params and an optional JSON body.
Resource wrappers build one per call and hand it to the client.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Sequence, Tuple


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


QueryParams = Sequence[Tuple[str, Any]]


@dataclass(frozen=True)
class OperationDescriptor:
    method: HttpMethod
    path_template: str
    path_params: Mapping[str, str] = field(default_factory=dict)
    query_params: QueryParams = ()
    body: Optional[Any] = None
    # Success responses carry no payload (e.g. DELETE -> 202/204)
    no_content: bool = False

    @property
    def name(self) -> str:
        """Short label used in log lines"""
        return f"{self.method.value} {self.path_template}"
