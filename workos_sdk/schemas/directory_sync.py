"""Directory Sync schemas (directories, directory users, directory groups)"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import Field, field_validator

from workos_sdk.schemas.common import Timestamps, WorkOSModel


class DirectoryState(str, Enum):
    INACTIVE = "inactive"
    VALIDATING = "validating"
    ACTIVE = "active"
    INVALID_CREDENTIALS = "invalid_credentials"
    DELETING = "deleting"


# Legacy state names still returned by older directories
_LEGACY_STATES = {"linked": "active", "unlinked": "inactive"}


class DirectoryUserState(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


class Directory(Timestamps):
    """https://workos.com/docs/reference/directory-sync/directory"""

    id: str
    organization_id: Optional[str] = None
    # Provider type, e.g. "okta scim v2.0" or "gsuite directory"
    type: str
    # Unknown states are kept as plain strings
    state: Union[DirectoryState, str] = Field(union_mode="left_to_right")
    name: str
    domain: Optional[str] = None

    @field_validator("state", mode="before")
    @classmethod
    def map_legacy_state(cls, v: Any) -> Any:
        if isinstance(v, str):
            return _LEGACY_STATES.get(v, v)
        return v


class DirectoryUserEmail(WorkOSModel):
    primary: Optional[bool] = None
    type: Optional[str] = None
    value: Optional[str] = None


class DirectoryGroup(Timestamps):
    """https://workos.com/docs/reference/directory-sync/directory-group"""

    id: str
    idp_id: str
    directory_id: str
    organization_id: Optional[str] = None
    name: str
    raw_attributes: Dict[str, Any] = Field(default_factory=dict)


class DirectoryUser(Timestamps):
    """https://workos.com/docs/reference/directory-sync/directory-user"""

    id: str
    idp_id: str
    directory_id: str
    organization_id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    job_title: Optional[str] = None
    emails: List[DirectoryUserEmail] = Field(default_factory=list)
    username: Optional[str] = None
    groups: List[DirectoryGroup] = Field(default_factory=list)
    state: Union[DirectoryUserState, str] = Field(union_mode="left_to_right")
    custom_attributes: Dict[str, Any] = Field(default_factory=dict)
    raw_attributes: Dict[str, Any] = Field(default_factory=dict)

    @property
    def primary_email(self) -> Optional[str]:
        for email in self.emails:
            if email.primary:
                return email.value
        return None
