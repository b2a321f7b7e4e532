"""Organization schemas"""

from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

from workos_sdk.schemas.common import Timestamps, WorkOSModel


class DomainState(str, Enum):
    PENDING = "pending"
    VERIFIED = "verified"
    FAILED = "failed"
    LEGACY_VERIFIED = "legacy_verified"


class OrganizationDomain(WorkOSModel):
    id: str
    domain: str
    organization_id: Optional[str] = None
    state: Optional[Union[DomainState, str]] = Field(default=None, union_mode="left_to_right")
    verification_strategy: Optional[str] = None
    verification_token: Optional[str] = None


class Organization(Timestamps):
    """https://workos.com/docs/reference/organization"""

    id: str
    name: str
    allow_profiles_outside_organization: bool = False
    domains: List[OrganizationDomain] = Field(default_factory=list)
    external_id: Optional[str] = None
    metadata: Dict[str, str] = Field(default_factory=dict)


class OrganizationDomainData(BaseModel):
    domain: str
    state: DomainState = DomainState.PENDING


class CreateOrganizationParams(BaseModel):
    name: str = Field(..., min_length=1)
    domain_data: List[OrganizationDomainData] = Field(default_factory=list)
    external_id: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None


class UpdateOrganizationParams(BaseModel):
    name: Optional[str] = None
    domain_data: Optional[List[OrganizationDomainData]] = None
    external_id: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None
