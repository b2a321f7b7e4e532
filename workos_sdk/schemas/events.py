"""
Events schemas

An Event carries its type in `event` and its payload in `data`. Known event
types decode into a model whose `data` is typed for that event; anything
else (new event types, or types without a dedicated payload model here)
decodes as UnknownEvent with `data` left as a plain dict.
"""

from datetime import datetime
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import Field

from workos_sdk.schemas.common import Timestamps, WorkOSModel
from workos_sdk.schemas.directory_sync import DirectoryGroup, DirectoryUser
from workos_sdk.schemas.organizations import Organization, OrganizationDomain
from workos_sdk.schemas.sso import Connection
from workos_sdk.schemas.user_management import Invitation, OrganizationMembership, Session, User


# =============================================================================
# Payloads without a resource of their own
# =============================================================================


class DirectoryGroupMembership(WorkOSModel):
    directory_id: str
    user: DirectoryUser
    group: DirectoryGroup


class Role(Timestamps):
    slug: str
    permissions: List[str] = Field(default_factory=list)


class AuthenticationEventError(WorkOSModel):
    code: str
    message: str


class AuthenticationEventData(WorkOSModel):
    # e.g. "sso", "password", "mfa"
    type: str
    # "failed" or "succeeded"
    status: str
    user_id: Optional[str] = None
    email: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    error: Optional[AuthenticationEventError] = None


# =============================================================================
# Events
# =============================================================================


class EventBase(WorkOSModel):
    id: str
    created_at: datetime
    context: Optional[Dict[str, Any]] = None


class AuthenticationEvent(EventBase):
    event: Literal[
        "authentication.email_verification_failed",
        "authentication.email_verification_succeeded",
        "authentication.magic_auth_failed",
        "authentication.magic_auth_succeeded",
        "authentication.mfa_failed",
        "authentication.mfa_succeeded",
        "authentication.oauth_failed",
        "authentication.oauth_succeeded",
        "authentication.passkey_failed",
        "authentication.passkey_succeeded",
        "authentication.password_failed",
        "authentication.password_succeeded",
        "authentication.sso_failed",
        "authentication.sso_succeeded",
        "authentication.radar_risk_detected",
    ]
    data: AuthenticationEventData


class ConnectionEvent(EventBase):
    event: Literal["connection.activated", "connection.deactivated", "connection.deleted"]
    data: Connection


class DirectoryUserEvent(EventBase):
    event: Literal["dsync.user.created", "dsync.user.updated", "dsync.user.deleted"]
    data: DirectoryUser


class DirectoryGroupEvent(EventBase):
    event: Literal["dsync.group.created", "dsync.group.updated", "dsync.group.deleted"]
    data: DirectoryGroup


class DirectoryGroupMembershipEvent(EventBase):
    event: Literal["dsync.group.user_added", "dsync.group.user_removed"]
    data: DirectoryGroupMembership


class InvitationEvent(EventBase):
    event: Literal["invitation.accepted", "invitation.created", "invitation.revoked"]
    data: Invitation


class OrganizationEvent(EventBase):
    event: Literal["organization.created", "organization.updated", "organization.deleted"]
    data: Organization


class OrganizationDomainEvent(EventBase):
    event: Literal[
        "organization_domain.created",
        "organization_domain.updated",
        "organization_domain.deleted",
        "organization_domain.verified",
        "organization_domain.verification_failed",
    ]
    data: OrganizationDomain


class OrganizationMembershipEvent(EventBase):
    event: Literal[
        "organization_membership.created",
        "organization_membership.updated",
        "organization_membership.deleted",
    ]
    data: OrganizationMembership


class RoleEvent(EventBase):
    event: Literal["role.created", "role.updated", "role.deleted"]
    data: Role


class SessionEvent(EventBase):
    event: Literal["session.created", "session.revoked"]
    data: Session


class UserEvent(EventBase):
    event: Literal["user.created", "user.updated", "user.deleted"]
    data: User


class UnknownEvent(EventBase):
    event: str
    data: Dict[str, Any] = Field(default_factory=dict)


KnownEvent = Annotated[
    Union[
        AuthenticationEvent,
        ConnectionEvent,
        DirectoryUserEvent,
        DirectoryGroupEvent,
        DirectoryGroupMembershipEvent,
        InvitationEvent,
        OrganizationEvent,
        OrganizationDomainEvent,
        OrganizationMembershipEvent,
        RoleEvent,
        SessionEvent,
        UserEvent,
    ],
    Field(discriminator="event"),
]

# Falls back to UnknownEvent when the type is unrecognized or its payload does not match
Event = Annotated[Union[KnownEvent, UnknownEvent], Field(union_mode="left_to_right")]
