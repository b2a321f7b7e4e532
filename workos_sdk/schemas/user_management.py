"""User Management schemas (users, authentication, memberships, invitations)"""

from datetime import datetime
from enum import Enum
from typing import Dict, Optional, Union

from pydantic import BaseModel, Field

from workos_sdk.schemas.common import Timestamps, WorkOSModel


class User(Timestamps):
    """https://workos.com/docs/reference/user-management/user"""

    id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email_verified: bool = False
    profile_picture_url: Optional[str] = None
    last_sign_in_at: Optional[datetime] = None
    external_id: Optional[str] = None
    metadata: Dict[str, str] = Field(default_factory=dict)


class UpdateUserParams(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email_verified: Optional[bool] = None
    password: Optional[str] = None
    external_id: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None


# =============================================================================
# Authentication
# =============================================================================


class Impersonator(WorkOSModel):
    email: str
    reason: Optional[str] = None


class AuthenticationResponse(WorkOSModel):
    """Result of exchanging a code or refresh token for a session"""

    user: User
    organization_id: Optional[str] = None
    access_token: str
    refresh_token: str
    # e.g. "SSO", "Password", "GoogleOAuth"; kept as a string so new methods decode
    authentication_method: Optional[str] = None
    impersonator: Optional[Impersonator] = None


# =============================================================================
# Organization memberships
# =============================================================================


class MembershipStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"


class MembershipRole(WorkOSModel):
    slug: str


class OrganizationMembership(Timestamps):
    """https://workos.com/docs/reference/user-management/organization-membership"""

    id: str
    user_id: str
    organization_id: str
    role: Optional[MembershipRole] = None
    status: Union[MembershipStatus, str] = Field(union_mode="left_to_right")


class CreateMembershipParams(BaseModel):
    user_id: str
    organization_id: str
    role_slug: Optional[str] = None


# =============================================================================
# Invitations
# =============================================================================


class InvitationState(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    EXPIRED = "expired"
    REVOKED = "revoked"


class Invitation(Timestamps):
    """https://workos.com/docs/reference/user-management/invitation"""

    id: str
    email: str
    state: Union[InvitationState, str] = Field(union_mode="left_to_right")
    accepted_at: Optional[datetime] = None
    revoked_at: Optional[datetime] = None
    expires_at: datetime
    # Absent from invitation.* webhook events
    token: Optional[str] = None
    accept_invitation_url: Optional[str] = None
    organization_id: Optional[str] = None
    inviter_user_id: Optional[str] = None
    accepted_user_id: Optional[str] = None


class SendInvitationParams(BaseModel):
    email: str = Field(..., min_length=1)
    organization_id: Optional[str] = None
    # WorkOS accepts 1-30 days
    expires_in_days: Optional[int] = Field(default=None, ge=1, le=30)
    inviter_user_id: Optional[str] = None
    role_slug: Optional[str] = None


# =============================================================================
# Password reset
# =============================================================================


class PasswordReset(WorkOSModel):
    id: str
    user_id: str
    email: str
    password_reset_token: str
    password_reset_url: str
    expires_at: datetime
    created_at: datetime


# =============================================================================
# Sessions
# =============================================================================


class SessionStatus(str, Enum):
    ACTIVE = "active"
    EXPIRED = "expired"
    REVOKED = "revoked"


class Session(Timestamps):
    id: str
    user_id: str
    organization_id: Optional[str] = None
    status: Union[SessionStatus, str] = Field(union_mode="left_to_right")
    auth_method: str
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    expires_at: datetime
    ended_at: Optional[datetime] = None
