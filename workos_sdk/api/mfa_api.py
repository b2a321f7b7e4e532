"""
Multi-factor authentication operations
Enrolls factors, issues challenges and verifies one-time codes
"""

from typing import Callable, Optional

from workos_sdk.core.operation import HttpMethod, OperationDescriptor
from workos_sdk.core.result import ApiResult
from workos_sdk.schemas.mfa import (
    AuthenticationChallenge,
    AuthenticationFactor,
    ChallengeFactorParams,
    EnrollFactorParams,
    VerifyChallengeParams,
    VerifyChallengeResponse,
)


async def enroll_factor(execute_func: Callable, params: EnrollFactorParams) -> ApiResult[AuthenticationFactor]:
    """Enroll a TOTP or SMS authentication factor"""
    descriptor = OperationDescriptor(
        method=HttpMethod.POST,
        path_template="/auth/factors/enroll",
        body=params,
    )
    return await execute_func(descriptor, AuthenticationFactor)


async def get_factor(execute_func: Callable, factor_id: str) -> ApiResult[AuthenticationFactor]:
    """Get an authentication factor by ID"""
    descriptor = OperationDescriptor(
        method=HttpMethod.GET,
        path_template="/auth/factors/{factor_id}",
        path_params={"factor_id": factor_id},
    )
    return await execute_func(descriptor, AuthenticationFactor)


async def delete_factor(execute_func: Callable, factor_id: str) -> ApiResult[None]:
    """Delete an authentication factor"""
    descriptor = OperationDescriptor(
        method=HttpMethod.DELETE,
        path_template="/auth/factors/{factor_id}",
        path_params={"factor_id": factor_id},
        no_content=True,
    )
    return await execute_func(descriptor, None)


async def challenge_factor(
    execute_func: Callable,
    factor_id: str,
    sms_template: Optional[str] = None,
) -> ApiResult[AuthenticationChallenge]:
    """
    Create a challenge for a factor

    For SMS factors WorkOS sends the code to the enrolled phone number;
    sms_template may customize the message and must contain {{code}}.
    """
    descriptor = OperationDescriptor(
        method=HttpMethod.POST,
        path_template="/auth/factors/{factor_id}/challenge",
        path_params={"factor_id": factor_id},
        body=ChallengeFactorParams(sms_template=sms_template),
    )
    return await execute_func(descriptor, AuthenticationChallenge)


async def verify_challenge(
    execute_func: Callable,
    challenge_id: str,
    code: str,
) -> ApiResult[VerifyChallengeResponse]:
    """
    Verify a one-time code against a challenge

    A wrong code is not an error: the response has valid=False. Expired or
    already-verified challenges come back as ApiError.
    """
    descriptor = OperationDescriptor(
        method=HttpMethod.POST,
        path_template="/auth/challenges/{challenge_id}/verify",
        path_params={"challenge_id": challenge_id},
        body=VerifyChallengeParams(code=code),
    )
    return await execute_func(descriptor, VerifyChallengeResponse)
