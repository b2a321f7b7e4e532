"""
User Management operations
Handles AuthKit users, authentication, organization memberships, invitations
and password resets. The authorization, logout and JWKS URL helpers are pure
functions and perform no I/O.
"""

from typing import Any, Callable, Dict, List, Optional

from workos_sdk.core.operation import HttpMethod, OperationDescriptor
from workos_sdk.core.request_builder import build_path, build_query
from workos_sdk.core.result import ApiResult
from workos_sdk.exceptions import ConfigError
from workos_sdk.schemas.common import PaginatedList, PaginationParams
from workos_sdk.schemas.mfa import AuthenticationFactor
from workos_sdk.schemas.user_management import (
    AuthenticationResponse,
    CreateMembershipParams,
    Invitation,
    MembershipStatus,
    OrganizationMembership,
    PasswordReset,
    SendInvitationParams,
    UpdateUserParams,
    User,
)


async def list_users(
    execute_func: Callable,
    email: Optional[str] = None,
    organization_id: Optional[str] = None,
    pagination: Optional[PaginationParams] = None,
) -> ApiResult[PaginatedList[User]]:
    """List users, optionally filtered by email or organization membership"""
    pagination = pagination or PaginationParams()
    descriptor = OperationDescriptor(
        method=HttpMethod.GET,
        path_template="/user_management/users",
        query_params=[
            ("email", email),
            ("organization_id", organization_id),
            *pagination.to_query(),
        ],
    )
    return await execute_func(descriptor, PaginatedList[User])


async def get_user(execute_func: Callable, user_id: str) -> ApiResult[User]:
    """Get a user by ID"""
    descriptor = OperationDescriptor(
        method=HttpMethod.GET,
        path_template="/user_management/users/{user_id}",
        path_params={"user_id": user_id},
    )
    return await execute_func(descriptor, User)


async def get_user_by_external_id(execute_func: Callable, external_id: str) -> ApiResult[User]:
    """Get a user by the external ID assigned by the caller's system"""
    descriptor = OperationDescriptor(
        method=HttpMethod.GET,
        path_template="/user_management/users/external_id/{external_id}",
        path_params={"external_id": external_id},
    )
    return await execute_func(descriptor, User)


async def update_user(execute_func: Callable, user_id: str, params: UpdateUserParams) -> ApiResult[User]:
    """Update a user. Fields left as None are not sent."""
    descriptor = OperationDescriptor(
        method=HttpMethod.PUT,
        path_template="/user_management/users/{user_id}",
        path_params={"user_id": user_id},
        body=params,
    )
    return await execute_func(descriptor, User)


async def delete_user(execute_func: Callable, user_id: str) -> ApiResult[None]:
    """Delete a user"""
    descriptor = OperationDescriptor(
        method=HttpMethod.DELETE,
        path_template="/user_management/users/{user_id}",
        path_params={"user_id": user_id},
        no_content=True,
    )
    return await execute_func(descriptor, None)


# =============================================================================
# Authentication
# =============================================================================


def _without_none(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in fields.items() if value is not None}


async def authenticate_with_code(
    execute_func: Callable,
    client_id: str,
    client_secret: str,
    code: str,
    code_verifier: Optional[str] = None,
    invitation_token: Optional[str] = None,
    ip_address: Optional[str] = None,
    user_agent: Optional[str] = None,
) -> ApiResult[AuthenticationResponse]:
    """
    Exchange an authorization code for a user and session tokens

    Args:
        execute_func: Client execute() callable
        client_id: AuthKit client ID (client_...)
        client_secret: WorkOS secret key
        code: Code received on the redirect URI
        code_verifier: PKCE verifier matching the code_challenge sent to authorize
        invitation_token: Accept this invitation as part of sign-in
        ip_address: End user's IP, recorded on the session
        user_agent: End user's user agent, recorded on the session
    """
    descriptor = OperationDescriptor(
        method=HttpMethod.POST,
        path_template="/user_management/authenticate",
        body=_without_none({
            "grant_type": "authorization_code",
            "client_id": client_id,
            "client_secret": client_secret,
            "code": code,
            "code_verifier": code_verifier,
            "invitation_token": invitation_token,
            "ip_address": ip_address,
            "user_agent": user_agent,
        }),
    )
    return await execute_func(descriptor, AuthenticationResponse)


async def authenticate_with_refresh_token(
    execute_func: Callable,
    client_id: str,
    client_secret: str,
    refresh_token: str,
    organization_id: Optional[str] = None,
    ip_address: Optional[str] = None,
    user_agent: Optional[str] = None,
) -> ApiResult[AuthenticationResponse]:
    """Exchange a refresh token for new tokens, optionally switching organization"""
    descriptor = OperationDescriptor(
        method=HttpMethod.POST,
        path_template="/user_management/authenticate",
        body=_without_none({
            "grant_type": "refresh_token",
            "client_id": client_id,
            "client_secret": client_secret,
            "refresh_token": refresh_token,
            "organization_id": organization_id,
            "ip_address": ip_address,
            "user_agent": user_agent,
        }),
    )
    return await execute_func(descriptor, AuthenticationResponse)


def get_authorization_url(
    base_url: str,
    client_id: str,
    redirect_uri: str,
    provider: Optional[str] = None,
    connection_id: Optional[str] = None,
    organization_id: Optional[str] = None,
    state: Optional[str] = None,
    code_challenge: Optional[str] = None,
    code_challenge_method: Optional[str] = None,
    login_hint: Optional[str] = None,
    domain_hint: Optional[str] = None,
    screen_hint: Optional[str] = None,
) -> str:
    """
    URL to send the browser to for AuthKit sign-in

    Exactly one of provider, connection_id or organization_id selects where
    the user authenticates.

    Raises:
        ConfigError: If zero or several of the selectors are given
    """
    selectors = [name for name, value in (
        ("provider", provider),
        ("connection_id", connection_id),
        ("organization_id", organization_id),
    ) if value is not None]
    if len(selectors) != 1:
        raise ConfigError(
            "Exactly one of provider, connection_id or organization_id is required"
            + (f", got {', '.join(selectors)}" if selectors else "")
        )

    query = build_query([
        ("client_id", client_id),
        ("redirect_uri", redirect_uri),
        ("response_type", "code"),
        ("provider", provider),
        ("connection_id", connection_id),
        ("organization_id", organization_id),
        ("state", state),
        ("code_challenge", code_challenge),
        ("code_challenge_method", code_challenge_method),
        ("login_hint", login_hint),
        ("domain_hint", domain_hint),
        ("screen_hint", screen_hint),
    ])
    return f"{base_url}/user_management/authorize?{query}"


def get_logout_url(base_url: str, session_id: str, return_to: Optional[str] = None) -> str:
    """URL that ends a session and optionally redirects to return_to"""
    query = build_query([("session_id", session_id), ("return_to", return_to)])
    return f"{base_url}/user_management/sessions/logout?{query}"


def get_jwks_url(base_url: str, client_id: str) -> str:
    """URL of the JSON Web Key Set used to verify access tokens"""
    return base_url + build_path("/sso/jwks/{client_id}", {"client_id": client_id})


# =============================================================================
# Organization memberships
# =============================================================================


async def list_organization_memberships(
    execute_func: Callable,
    user_id: Optional[str] = None,
    organization_id: Optional[str] = None,
    statuses: Optional[List[MembershipStatus]] = None,
    pagination: Optional[PaginationParams] = None,
) -> ApiResult[PaginatedList[OrganizationMembership]]:
    """List memberships of a user or of an organization"""
    pagination = pagination or PaginationParams()
    descriptor = OperationDescriptor(
        method=HttpMethod.GET,
        path_template="/user_management/organization_memberships",
        query_params=[
            ("user_id", user_id),
            ("organization_id", organization_id),
            *[("statuses", status) for status in (statuses or [])],
            *pagination.to_query(),
        ],
    )
    return await execute_func(descriptor, PaginatedList[OrganizationMembership])


async def get_organization_membership(
    execute_func: Callable, membership_id: str
) -> ApiResult[OrganizationMembership]:
    descriptor = OperationDescriptor(
        method=HttpMethod.GET,
        path_template="/user_management/organization_memberships/{membership_id}",
        path_params={"membership_id": membership_id},
    )
    return await execute_func(descriptor, OrganizationMembership)


async def create_organization_membership(
    execute_func: Callable, params: CreateMembershipParams
) -> ApiResult[OrganizationMembership]:
    """Add a user to an organization"""
    descriptor = OperationDescriptor(
        method=HttpMethod.POST,
        path_template="/user_management/organization_memberships",
        body=params,
    )
    return await execute_func(descriptor, OrganizationMembership)


async def update_organization_membership(
    execute_func: Callable, membership_id: str, role_slug: Optional[str] = None
) -> ApiResult[OrganizationMembership]:
    """Change a membership's role"""
    descriptor = OperationDescriptor(
        method=HttpMethod.PUT,
        path_template="/user_management/organization_memberships/{membership_id}",
        path_params={"membership_id": membership_id},
        body=_without_none({"role_slug": role_slug}),
    )
    return await execute_func(descriptor, OrganizationMembership)


async def deactivate_organization_membership(
    execute_func: Callable, membership_id: str
) -> ApiResult[OrganizationMembership]:
    descriptor = OperationDescriptor(
        method=HttpMethod.PUT,
        path_template="/user_management/organization_memberships/{membership_id}/deactivate",
        path_params={"membership_id": membership_id},
    )
    return await execute_func(descriptor, OrganizationMembership)


async def delete_organization_membership(execute_func: Callable, membership_id: str) -> ApiResult[None]:
    descriptor = OperationDescriptor(
        method=HttpMethod.DELETE,
        path_template="/user_management/organization_memberships/{membership_id}",
        path_params={"membership_id": membership_id},
        no_content=True,
    )
    return await execute_func(descriptor, None)


# =============================================================================
# Invitations
# =============================================================================


async def send_invitation(execute_func: Callable, params: SendInvitationParams) -> ApiResult[Invitation]:
    """Invite an email address, optionally into an organization"""
    descriptor = OperationDescriptor(
        method=HttpMethod.POST,
        path_template="/user_management/invitations",
        body=params,
    )
    return await execute_func(descriptor, Invitation)


async def get_invitation(execute_func: Callable, invitation_id: str) -> ApiResult[Invitation]:
    descriptor = OperationDescriptor(
        method=HttpMethod.GET,
        path_template="/user_management/invitations/{invitation_id}",
        path_params={"invitation_id": invitation_id},
    )
    return await execute_func(descriptor, Invitation)


async def find_invitation_by_token(execute_func: Callable, invitation_token: str) -> ApiResult[Invitation]:
    """Look up an invitation by the token from its accept URL"""
    descriptor = OperationDescriptor(
        method=HttpMethod.GET,
        path_template="/user_management/invitations/by_token/{invitation_token}",
        path_params={"invitation_token": invitation_token},
    )
    return await execute_func(descriptor, Invitation)


async def list_invitations(
    execute_func: Callable,
    email: Optional[str] = None,
    organization_id: Optional[str] = None,
    pagination: Optional[PaginationParams] = None,
) -> ApiResult[PaginatedList[Invitation]]:
    pagination = pagination or PaginationParams()
    descriptor = OperationDescriptor(
        method=HttpMethod.GET,
        path_template="/user_management/invitations",
        query_params=[
            ("email", email),
            ("organization_id", organization_id),
            *pagination.to_query(),
        ],
    )
    return await execute_func(descriptor, PaginatedList[Invitation])


async def accept_invitation(execute_func: Callable, invitation_id: str) -> ApiResult[Invitation]:
    descriptor = OperationDescriptor(
        method=HttpMethod.POST,
        path_template="/user_management/invitations/{invitation_id}/accept",
        path_params={"invitation_id": invitation_id},
    )
    return await execute_func(descriptor, Invitation)


async def revoke_invitation(execute_func: Callable, invitation_id: str) -> ApiResult[Invitation]:
    """Revoke a pending invitation so its link stops working"""
    descriptor = OperationDescriptor(
        method=HttpMethod.POST,
        path_template="/user_management/invitations/{invitation_id}/revoke",
        path_params={"invitation_id": invitation_id},
    )
    return await execute_func(descriptor, Invitation)


# =============================================================================
# Password reset / auth factors
# =============================================================================


async def create_password_reset(execute_func: Callable, email: str) -> ApiResult[PasswordReset]:
    """Create a password reset token; sending the email is left to the caller"""
    descriptor = OperationDescriptor(
        method=HttpMethod.POST,
        path_template="/user_management/password_reset",
        body={"email": email},
    )
    return await execute_func(descriptor, PasswordReset)


async def list_auth_factors(
    execute_func: Callable,
    user_id: str,
    pagination: Optional[PaginationParams] = None,
) -> ApiResult[PaginatedList[AuthenticationFactor]]:
    """List the MFA factors enrolled by a user"""
    pagination = pagination or PaginationParams()
    descriptor = OperationDescriptor(
        method=HttpMethod.GET,
        path_template="/user_management/users/{user_id}/auth_factors",
        path_params={"user_id": user_id},
        query_params=pagination.to_query(),
    )
    return await execute_func(descriptor, PaginatedList[AuthenticationFactor])
