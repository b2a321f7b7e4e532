"""
Organization operations
"""

from typing import Callable, List, Optional

from workos_sdk.core.operation import HttpMethod, OperationDescriptor
from workos_sdk.core.result import ApiResult
from workos_sdk.schemas.common import PaginatedList, PaginationParams
from workos_sdk.schemas.organizations import (
    CreateOrganizationParams,
    Organization,
    UpdateOrganizationParams,
)


async def list_organizations(
    execute_func: Callable,
    domains: Optional[List[str]] = None,
    pagination: Optional[PaginationParams] = None,
) -> ApiResult[PaginatedList[Organization]]:
    """List organizations, optionally filtered by one or more domains"""
    pagination = pagination or PaginationParams()
    # Repeated key: domains=a.com&domains=b.com
    domain_params = [("domains", domain) for domain in (domains or [])]
    descriptor = OperationDescriptor(
        method=HttpMethod.GET,
        path_template="/organizations",
        query_params=[*domain_params, *pagination.to_query()],
    )
    return await execute_func(descriptor, PaginatedList[Organization])


async def get_organization(execute_func: Callable, organization_id: str) -> ApiResult[Organization]:
    """Get an organization by ID"""
    descriptor = OperationDescriptor(
        method=HttpMethod.GET,
        path_template="/organizations/{organization_id}",
        path_params={"organization_id": organization_id},
    )
    return await execute_func(descriptor, Organization)


async def get_organization_by_external_id(
    execute_func: Callable, external_id: str
) -> ApiResult[Organization]:
    """Get an organization by the external ID assigned by the caller's system"""
    descriptor = OperationDescriptor(
        method=HttpMethod.GET,
        path_template="/organizations/external_id/{external_id}",
        path_params={"external_id": external_id},
    )
    return await execute_func(descriptor, Organization)


async def create_organization(
    execute_func: Callable, params: CreateOrganizationParams
) -> ApiResult[Organization]:
    """Create an organization"""
    descriptor = OperationDescriptor(
        method=HttpMethod.POST,
        path_template="/organizations",
        body=params,
    )
    return await execute_func(descriptor, Organization)


async def update_organization(
    execute_func: Callable, organization_id: str, params: UpdateOrganizationParams
) -> ApiResult[Organization]:
    """Update an organization. Fields left as None are not sent."""
    descriptor = OperationDescriptor(
        method=HttpMethod.PUT,
        path_template="/organizations/{organization_id}",
        path_params={"organization_id": organization_id},
        body=params,
    )
    return await execute_func(descriptor, Organization)


async def delete_organization(execute_func: Callable, organization_id: str) -> ApiResult[None]:
    """Delete an organization"""
    descriptor = OperationDescriptor(
        method=HttpMethod.DELETE,
        path_template="/organizations/{organization_id}",
        path_params={"organization_id": organization_id},
        no_content=True,
    )
    return await execute_func(descriptor, None)
