"""
Directory Sync operations
Handles directories, directory users and directory groups
"""

from typing import Callable, Optional

from workos_sdk.core.operation import HttpMethod, OperationDescriptor
from workos_sdk.core.result import ApiResult
from workos_sdk.schemas.common import PaginatedList, PaginationParams
from workos_sdk.schemas.directory_sync import Directory, DirectoryGroup, DirectoryUser


async def list_directories(
    execute_func: Callable,
    organization_id: Optional[str] = None,
    search: Optional[str] = None,
    pagination: Optional[PaginationParams] = None,
) -> ApiResult[PaginatedList[Directory]]:
    """List directories, optionally filtered by organization or name search"""
    pagination = pagination or PaginationParams()
    descriptor = OperationDescriptor(
        method=HttpMethod.GET,
        path_template="/directories",
        query_params=[
            ("organization_id", organization_id),
            ("search", search),
            *pagination.to_query(),
        ],
    )
    return await execute_func(descriptor, PaginatedList[Directory])


async def get_directory(execute_func: Callable, directory_id: str) -> ApiResult[Directory]:
    """Get a directory by ID"""
    descriptor = OperationDescriptor(
        method=HttpMethod.GET,
        path_template="/directories/{directory_id}",
        path_params={"directory_id": directory_id},
    )
    return await execute_func(descriptor, Directory)


async def delete_directory(execute_func: Callable, directory_id: str) -> ApiResult[None]:
    """Permanently delete a directory"""
    descriptor = OperationDescriptor(
        method=HttpMethod.DELETE,
        path_template="/directories/{directory_id}",
        path_params={"directory_id": directory_id},
        no_content=True,
    )
    return await execute_func(descriptor, None)


async def list_directory_users(
    execute_func: Callable,
    directory_id: Optional[str] = None,
    group_id: Optional[str] = None,
    pagination: Optional[PaginationParams] = None,
) -> ApiResult[PaginatedList[DirectoryUser]]:
    """
    List users of a directory or of a directory group

    Args:
        execute_func: Client execute() callable
        directory_id: Directory to list users from
        group_id: Directory group to list users from
        pagination: Cursor/limit/order parameters

    Returns:
        ApiResult wrapping a page of DirectoryUser records
    """
    pagination = pagination or PaginationParams()
    descriptor = OperationDescriptor(
        method=HttpMethod.GET,
        path_template="/directory_users",
        query_params=[
            ("directory", directory_id),
            ("group", group_id),
            *pagination.to_query(),
        ],
    )
    return await execute_func(descriptor, PaginatedList[DirectoryUser])


async def get_directory_user(execute_func: Callable, user_id: str) -> ApiResult[DirectoryUser]:
    """Get a directory user by ID"""
    descriptor = OperationDescriptor(
        method=HttpMethod.GET,
        path_template="/directory_users/{user_id}",
        path_params={"user_id": user_id},
    )
    return await execute_func(descriptor, DirectoryUser)


async def list_directory_groups(
    execute_func: Callable,
    directory_id: Optional[str] = None,
    user_id: Optional[str] = None,
    pagination: Optional[PaginationParams] = None,
) -> ApiResult[PaginatedList[DirectoryGroup]]:
    """List groups of a directory, or the groups a directory user belongs to"""
    pagination = pagination or PaginationParams()
    descriptor = OperationDescriptor(
        method=HttpMethod.GET,
        path_template="/directory_groups",
        query_params=[
            ("directory", directory_id),
            ("user", user_id),
            *pagination.to_query(),
        ],
    )
    return await execute_func(descriptor, PaginatedList[DirectoryGroup])


async def get_directory_group(execute_func: Callable, group_id: str) -> ApiResult[DirectoryGroup]:
    """Get a directory group by ID"""
    descriptor = OperationDescriptor(
        method=HttpMethod.GET,
        path_template="/directory_groups/{group_id}",
        path_params={"group_id": group_id},
    )
    return await execute_func(descriptor, DirectoryGroup)
