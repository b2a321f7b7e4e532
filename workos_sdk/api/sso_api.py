"""
SSO operations
Handles SSO connections
"""

from typing import Callable, Optional

from workos_sdk.core.operation import HttpMethod, OperationDescriptor
from workos_sdk.core.result import ApiResult
from workos_sdk.schemas.common import PaginatedList, PaginationParams
from workos_sdk.schemas.sso import Connection


async def list_connections(
    execute_func: Callable,
    connection_type: Optional[str] = None,
    domain: Optional[str] = None,
    organization_id: Optional[str] = None,
    pagination: Optional[PaginationParams] = None,
) -> ApiResult[PaginatedList[Connection]]:
    """List connections, optionally filtered by type, domain or organization"""
    pagination = pagination or PaginationParams()
    descriptor = OperationDescriptor(
        method=HttpMethod.GET,
        path_template="/connections",
        query_params=[
            ("connection_type", connection_type),
            ("domain", domain),
            ("organization_id", organization_id),
            *pagination.to_query(),
        ],
    )
    return await execute_func(descriptor, PaginatedList[Connection])


async def get_connection(execute_func: Callable, connection_id: str) -> ApiResult[Connection]:
    descriptor = OperationDescriptor(
        method=HttpMethod.GET,
        path_template="/connections/{connection_id}",
        path_params={"connection_id": connection_id},
    )
    return await execute_func(descriptor, Connection)


async def delete_connection(execute_func: Callable, connection_id: str) -> ApiResult[None]:
    descriptor = OperationDescriptor(
        method=HttpMethod.DELETE,
        path_template="/connections/{connection_id}",
        path_params={"connection_id": connection_id},
        no_content=True,
    )
    return await execute_func(descriptor, None)
