"""Multi-factor authentication schemas (factors, challenges, verification)"""

from datetime import datetime
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field, model_validator

from workos_sdk.schemas.common import Timestamps, WorkOSModel


class FactorType(str, Enum):
    TOTP = "totp"
    SMS = "sms"


class TotpFactor(WorkOSModel):
    # Data URL of the QR code to scan with an authenticator app
    qr_code: Optional[str] = None
    secret: Optional[str] = None
    uri: Optional[str] = None
    issuer: Optional[str] = None
    user: Optional[str] = None


class SmsFactor(WorkOSModel):
    phone_number: str


class AuthenticationFactor(Timestamps):
    """https://workos.com/docs/reference/mfa/authentication-factor"""

    id: str
    type: Union[FactorType, str] = Field(union_mode="left_to_right")
    user_id: Optional[str] = None
    totp: Optional[TotpFactor] = None
    sms: Optional[SmsFactor] = None


class AuthenticationChallenge(Timestamps):
    """https://workos.com/docs/reference/mfa/authentication-challenge"""

    id: str
    authentication_factor_id: str
    expires_at: Optional[datetime] = None
    # Only returned in test environments
    code: Optional[str] = None


class VerifyChallengeResponse(WorkOSModel):
    challenge: AuthenticationChallenge
    valid: bool


class EnrollFactorParams(BaseModel):
    type: FactorType
    totp_issuer: Optional[str] = None
    totp_user: Optional[str] = None
    phone_number: Optional[str] = None

    @model_validator(mode="after")
    def check_type_fields(self) -> "EnrollFactorParams":
        if self.type == FactorType.TOTP and not (self.totp_issuer and self.totp_user):
            raise ValueError("TOTP factors require totp_issuer and totp_user")
        if self.type == FactorType.SMS and not self.phone_number:
            raise ValueError("SMS factors require phone_number")
        return self


class ChallengeFactorParams(BaseModel):
    # Custom SMS text; must contain the {{code}} token
    sms_template: Optional[str] = None


class VerifyChallengeParams(BaseModel):
    code: str = Field(..., min_length=1)
