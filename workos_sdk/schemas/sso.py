"""Single Sign-On schemas"""

from enum import Enum
from typing import Optional, Union

from pydantic import Field

from workos_sdk.schemas.common import Timestamps


class ConnectionState(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Connection(Timestamps):
    """https://workos.com/docs/reference/sso/connection"""

    id: str
    organization_id: Optional[str] = None
    # e.g. "OktaSAML", "GoogleOAuth"; new provider types must still decode
    connection_type: str
    name: str
    state: Union[ConnectionState, str] = Field(union_mode="left_to_right")
