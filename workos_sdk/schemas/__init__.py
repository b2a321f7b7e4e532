"""Pydantic schemas for WorkOS API resources"""

from workos_sdk.schemas.common import ListMetadata, Order, PaginatedList, PaginationParams
from workos_sdk.schemas.directory_sync import Directory, DirectoryGroup, DirectoryUser
from workos_sdk.schemas.events import Event, UnknownEvent
from workos_sdk.schemas.mfa import AuthenticationChallenge, AuthenticationFactor, VerifyChallengeResponse
from workos_sdk.schemas.organizations import Organization
from workos_sdk.schemas.sso import Connection
from workos_sdk.schemas.user_management import (
    AuthenticationResponse,
    Invitation,
    OrganizationMembership,
    PasswordReset,
    User,
)

__all__ = [
    "AuthenticationChallenge",
    "AuthenticationFactor",
    "AuthenticationResponse",
    "Connection",
    "Directory",
    "DirectoryGroup",
    "DirectoryUser",
    "Event",
    "Invitation",
    "ListMetadata",
    "Order",
    "Organization",
    "OrganizationMembership",
    "PaginatedList",
    "PaginationParams",
    "PasswordReset",
    "UnknownEvent",
    "User",
    "VerifyChallengeResponse",
]
