"""
Events operations
Handles the events feed
"""

from datetime import datetime
from typing import Callable, List, Optional

from workos_sdk.core.operation import HttpMethod, OperationDescriptor
from workos_sdk.core.result import ApiResult
from workos_sdk.schemas.common import PaginatedList
from workos_sdk.schemas.events import Event


async def list_events(
    execute_func: Callable,
    events: Optional[List[str]] = None,
    organization_id: Optional[str] = None,
    range_start: Optional[datetime] = None,
    range_end: Optional[datetime] = None,
    limit: Optional[int] = None,
    after: Optional[str] = None,
) -> ApiResult[PaginatedList[Event]]:
    """
    List events in ascending order, oldest first

    Args:
        execute_func: Client execute() callable
        events: Event types to include (e.g. ["dsync.user.created"])
        organization_id: Only events for this organization
        range_start: Only events created at or after this time
        range_end: Only events created before this time
        limit: Page size
        after: Event ID to continue after, from the previous page

    Returns:
        ApiResult with a page of events; each one is a typed event model or
        UnknownEvent
    """
    descriptor = OperationDescriptor(
        method=HttpMethod.GET,
        path_template="/events",
        query_params=[
            # Repeated key: events=a&events=b
            *[("events", name) for name in (events or [])],
            ("organization_id", organization_id),
            ("range_start", range_start.isoformat() if range_start else None),
            ("range_end", range_end.isoformat() if range_end else None),
            ("limit", limit),
            ("after", after),
        ],
    )
    return await execute_func(descriptor, PaginatedList[Event])
