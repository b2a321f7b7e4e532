"""
WorkOS API Client

Single entry point for all WorkOS calls. Each execute() call is independent:
build request -> send through the transport -> decode response. The client
only holds immutable credentials, a default timeout and the transport, so one
instance can be shared by any number of concurrent tasks.

Errors are returned inside ApiResult instead of being raised; use
request() or ApiResult.unwrap() to get exceptions instead.
"""

import logging
from datetime import datetime
from typing import Any, List, Optional

from pydantic import ValidationError

from workos_sdk.api import (
    directory_sync_api,
    events_api,
    mfa_api,
    organizations_api,
    sso_api,
    user_management_api,
)
from workos_sdk.core.credentials import Credentials
from workos_sdk.core.operation import OperationDescriptor
from workos_sdk.core.request_builder import build_request
from workos_sdk.core.response_decoder import decode_response, resolve_adapter
from workos_sdk.core.result import ApiResult
from workos_sdk.core.transport import HttpxTransport, Transport, invoke
from workos_sdk.exceptions import ConfigError, TransportError
from workos_sdk.schemas.common import PaginationParams
from workos_sdk.schemas.mfa import EnrollFactorParams
from workos_sdk.schemas.organizations import CreateOrganizationParams, UpdateOrganizationParams
from workos_sdk.schemas.user_management import (
    CreateMembershipParams,
    MembershipStatus,
    SendInvitationParams,
    UpdateUserParams,
)

logger = logging.getLogger(__name__)


class WorkOSClient:
    """
    WorkOS API client facade

    Missing constructor arguments fall back to settings (WORKOS_API_KEY,
    WORKOS_BASE_URL, WORKOS_REQUEST_TIMEOUT).
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[Transport] = None,
    ):
        """
        Args:
            api_key: WorkOS secret key
            base_url: API origin (defaults to production)
            timeout: Default per-request timeout in seconds
            transport: Transport to send requests through; an HttpxTransport
                is created (and closed by aclose()) when omitted

        Raises:
            ConfigError: Empty API key, invalid base URL or non-positive timeout
        """
        if api_key is None or base_url is None or timeout is None:
            try:
                from workos_sdk.config import settings
            except ValidationError as e:
                raise ConfigError(f"Invalid WORKOS_* settings: {e}") from e
            api_key = api_key if api_key is not None else settings.api_key
            base_url = base_url if base_url is not None else settings.base_url
            timeout = timeout if timeout is not None else settings.request_timeout

        if timeout <= 0:
            raise ConfigError(f"Timeout must be greater than zero, got {timeout}")

        self._credentials = Credentials(secret_key=api_key, base_url=base_url)
        self._timeout = float(timeout)
        self._owns_transport = transport is None
        self._transport: Transport = transport if transport is not None else HttpxTransport()

        logger.info(
            f"WorkOSClient initialized (base_url={self._credentials.base_url}, "
            f"key={self._credentials.masked_key}, timeout={self._timeout}s)"
        )

    @property
    def base_url(self) -> str:
        return self._credentials.base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    # ===== Core =====

    async def execute(
        self,
        descriptor: OperationDescriptor,
        response_type: Any = None,
        timeout: Optional[float] = None,
    ) -> ApiResult:
        """
        Execute one operation

        Args:
            descriptor: Operation to perform
            response_type: Type to decode a success body into (None = raw JSON)
            timeout: Override of the default timeout for this call

        Returns:
            ApiResult holding either the decoded value or a ClientError
        """
        if timeout is not None and timeout <= 0:
            error = ConfigError(f"Timeout must be greater than zero, got {timeout}")
            logger.error(f"Invalid request for {descriptor.name}: {error.message}")
            return ApiResult.failure(error)

        try:
            request = build_request(descriptor, self._credentials)
            if response_type is not None:
                resolve_adapter(response_type)
        except ConfigError as e:
            logger.error(f"Invalid request for {descriptor.name}: {e.message}")
            return ApiResult.failure(e)

        logger.debug(f"→ {request.method.value} {request.url}")
        try:
            response = await invoke(self._transport, request, timeout if timeout is not None else self._timeout)
        except TransportError as e:
            return ApiResult.failure(e)

        logger.debug(f"← {response.status_code} {request.method.value} {request.url}")
        value, error = decode_response(response, response_type, no_content=descriptor.no_content)
        if error is not None:
            logger.warning(f"{descriptor.name} failed: {error}")
            return ApiResult.failure(error)
        return ApiResult.success(value)

    async def request(
        self,
        descriptor: OperationDescriptor,
        response_type: Any = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """Like execute(), but returns the value directly and raises ClientError on failure"""
        result = await self.execute(descriptor, response_type, timeout)
        return result.unwrap()

    async def aclose(self):
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            await self._transport.aclose()

    async def __aenter__(self) -> "WorkOSClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    # ===== Directory Sync =====

    async def list_directories(
        self,
        organization_id: Optional[str] = None,
        search: Optional[str] = None,
        pagination: Optional[PaginationParams] = None,
    ) -> ApiResult:
        return await directory_sync_api.list_directories(self.execute, organization_id, search, pagination)

    async def get_directory(self, directory_id: str) -> ApiResult:
        return await directory_sync_api.get_directory(self.execute, directory_id)

    async def delete_directory(self, directory_id: str) -> ApiResult:
        return await directory_sync_api.delete_directory(self.execute, directory_id)

    async def list_directory_users(
        self,
        directory_id: Optional[str] = None,
        group_id: Optional[str] = None,
        pagination: Optional[PaginationParams] = None,
    ) -> ApiResult:
        return await directory_sync_api.list_directory_users(self.execute, directory_id, group_id, pagination)

    async def get_directory_user(self, user_id: str) -> ApiResult:
        return await directory_sync_api.get_directory_user(self.execute, user_id)

    async def list_directory_groups(
        self,
        directory_id: Optional[str] = None,
        user_id: Optional[str] = None,
        pagination: Optional[PaginationParams] = None,
    ) -> ApiResult:
        return await directory_sync_api.list_directory_groups(self.execute, directory_id, user_id, pagination)

    async def get_directory_group(self, group_id: str) -> ApiResult:
        return await directory_sync_api.get_directory_group(self.execute, group_id)

    # ===== MFA =====

    async def enroll_factor(self, params: EnrollFactorParams) -> ApiResult:
        return await mfa_api.enroll_factor(self.execute, params)

    async def get_factor(self, factor_id: str) -> ApiResult:
        return await mfa_api.get_factor(self.execute, factor_id)

    async def delete_factor(self, factor_id: str) -> ApiResult:
        return await mfa_api.delete_factor(self.execute, factor_id)

    async def challenge_factor(self, factor_id: str, sms_template: Optional[str] = None) -> ApiResult:
        return await mfa_api.challenge_factor(self.execute, factor_id, sms_template)

    async def verify_challenge(self, challenge_id: str, code: str) -> ApiResult:
        return await mfa_api.verify_challenge(self.execute, challenge_id, code)

    # ===== Organizations =====

    async def list_organizations(
        self,
        domains: Optional[List[str]] = None,
        pagination: Optional[PaginationParams] = None,
    ) -> ApiResult:
        return await organizations_api.list_organizations(self.execute, domains, pagination)

    async def get_organization(self, organization_id: str) -> ApiResult:
        return await organizations_api.get_organization(self.execute, organization_id)

    async def get_organization_by_external_id(self, external_id: str) -> ApiResult:
        return await organizations_api.get_organization_by_external_id(self.execute, external_id)

    async def create_organization(self, params: CreateOrganizationParams) -> ApiResult:
        return await organizations_api.create_organization(self.execute, params)

    async def update_organization(self, organization_id: str, params: UpdateOrganizationParams) -> ApiResult:
        return await organizations_api.update_organization(self.execute, organization_id, params)

    async def delete_organization(self, organization_id: str) -> ApiResult:
        return await organizations_api.delete_organization(self.execute, organization_id)

    # ===== User Management =====

    async def list_users(
        self,
        email: Optional[str] = None,
        organization_id: Optional[str] = None,
        pagination: Optional[PaginationParams] = None,
    ) -> ApiResult:
        return await user_management_api.list_users(self.execute, email, organization_id, pagination)

    async def get_user(self, user_id: str) -> ApiResult:
        return await user_management_api.get_user(self.execute, user_id)

    async def get_user_by_external_id(self, external_id: str) -> ApiResult:
        return await user_management_api.get_user_by_external_id(self.execute, external_id)

    async def update_user(self, user_id: str, params: UpdateUserParams) -> ApiResult:
        return await user_management_api.update_user(self.execute, user_id, params)

    async def delete_user(self, user_id: str) -> ApiResult:
        return await user_management_api.delete_user(self.execute, user_id)

    # ----- Authentication -----

    async def authenticate_with_code(
        self,
        client_id: str,
        code: str,
        code_verifier: Optional[str] = None,
        invitation_token: Optional[str] = None,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> ApiResult:
        # The secret key doubles as the OAuth client secret
        return await user_management_api.authenticate_with_code(
            self.execute, client_id, self._credentials.secret_key, code,
            code_verifier, invitation_token, ip_address, user_agent,
        )

    async def authenticate_with_refresh_token(
        self,
        client_id: str,
        refresh_token: str,
        organization_id: Optional[str] = None,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> ApiResult:
        return await user_management_api.authenticate_with_refresh_token(
            self.execute, client_id, self._credentials.secret_key, refresh_token,
            organization_id, ip_address, user_agent,
        )

    def get_authorization_url(self, client_id: str, redirect_uri: str, **options: Optional[str]) -> str:
        """
        AuthKit sign-in URL on this client's base URL

        Keyword options are those of user_management_api.get_authorization_url
        (provider, connection_id, organization_id, state, code_challenge, ...).
        """
        return user_management_api.get_authorization_url(self.base_url, client_id, redirect_uri, **options)

    def get_logout_url(self, session_id: str, return_to: Optional[str] = None) -> str:
        return user_management_api.get_logout_url(self.base_url, session_id, return_to)

    def get_jwks_url(self, client_id: str) -> str:
        return user_management_api.get_jwks_url(self.base_url, client_id)

    # ----- Organization memberships -----

    async def list_organization_memberships(
        self,
        user_id: Optional[str] = None,
        organization_id: Optional[str] = None,
        statuses: Optional[List[MembershipStatus]] = None,
        pagination: Optional[PaginationParams] = None,
    ) -> ApiResult:
        return await user_management_api.list_organization_memberships(
            self.execute, user_id, organization_id, statuses, pagination
        )

    async def get_organization_membership(self, membership_id: str) -> ApiResult:
        return await user_management_api.get_organization_membership(self.execute, membership_id)

    async def create_organization_membership(self, params: CreateMembershipParams) -> ApiResult:
        return await user_management_api.create_organization_membership(self.execute, params)

    async def update_organization_membership(self, membership_id: str, role_slug: Optional[str] = None) -> ApiResult:
        return await user_management_api.update_organization_membership(self.execute, membership_id, role_slug)

    async def deactivate_organization_membership(self, membership_id: str) -> ApiResult:
        return await user_management_api.deactivate_organization_membership(self.execute, membership_id)

    async def delete_organization_membership(self, membership_id: str) -> ApiResult:
        return await user_management_api.delete_organization_membership(self.execute, membership_id)

    # ----- Invitations -----

    async def send_invitation(self, params: SendInvitationParams) -> ApiResult:
        return await user_management_api.send_invitation(self.execute, params)

    async def get_invitation(self, invitation_id: str) -> ApiResult:
        return await user_management_api.get_invitation(self.execute, invitation_id)

    async def find_invitation_by_token(self, invitation_token: str) -> ApiResult:
        return await user_management_api.find_invitation_by_token(self.execute, invitation_token)

    async def list_invitations(
        self,
        email: Optional[str] = None,
        organization_id: Optional[str] = None,
        pagination: Optional[PaginationParams] = None,
    ) -> ApiResult:
        return await user_management_api.list_invitations(self.execute, email, organization_id, pagination)

    async def accept_invitation(self, invitation_id: str) -> ApiResult:
        return await user_management_api.accept_invitation(self.execute, invitation_id)

    async def revoke_invitation(self, invitation_id: str) -> ApiResult:
        return await user_management_api.revoke_invitation(self.execute, invitation_id)

    # ----- Password reset / auth factors -----

    async def create_password_reset(self, email: str) -> ApiResult:
        return await user_management_api.create_password_reset(self.execute, email)

    async def list_auth_factors(self, user_id: str, pagination: Optional[PaginationParams] = None) -> ApiResult:
        return await user_management_api.list_auth_factors(self.execute, user_id, pagination)

    # ===== SSO =====

    async def list_connections(
        self,
        connection_type: Optional[str] = None,
        domain: Optional[str] = None,
        organization_id: Optional[str] = None,
        pagination: Optional[PaginationParams] = None,
    ) -> ApiResult:
        return await sso_api.list_connections(self.execute, connection_type, domain, organization_id, pagination)

    async def get_connection(self, connection_id: str) -> ApiResult:
        return await sso_api.get_connection(self.execute, connection_id)

    async def delete_connection(self, connection_id: str) -> ApiResult:
        return await sso_api.delete_connection(self.execute, connection_id)

    # ===== Events =====

    async def list_events(
        self,
        events: Optional[List[str]] = None,
        organization_id: Optional[str] = None,
        range_start: Optional[datetime] = None,
        range_end: Optional[datetime] = None,
        limit: Optional[int] = None,
        after: Optional[str] = None,
    ) -> ApiResult:
        return await events_api.list_events(
            self.execute, events, organization_id, range_start, range_end, limit, after
        )
