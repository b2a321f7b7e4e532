"""
Tests for workos_sdk/api/mfa_api.py
"""

import json

import pytest

from workos_sdk.core.operation import HttpMethod
from workos_sdk.exceptions import ApiError
from workos_sdk.schemas.mfa import (
    AuthenticationChallenge,
    AuthenticationFactor,
    EnrollFactorParams,
    FactorType,
    VerifyChallengeResponse,
)


class TestFactors:
    """Tests for factor enrollment and lookup"""

    @pytest.mark.asyncio
    async def test_enroll_totp_factor(self, client, fake_transport, factor_payload):
        """Happy path: enrollment posts the params and decodes the factor."""
        fake_transport.queue(201, factor_payload)
        params = EnrollFactorParams(type=FactorType.TOTP, totp_issuer="Foo Corp", totp_user="alan.turing@example.com")

        result = await client.enroll_factor(params)

        assert isinstance(result.value, AuthenticationFactor)
        request = fake_transport.last_request
        assert request.method == HttpMethod.POST
        assert request.url == "https://api.workos.test/auth/factors/enroll"
        assert request.headers["Content-Type"] == "application/json"
        assert request.body == b'{"totp_issuer":"Foo Corp","totp_user":"alan.turing@example.com","type":"totp"}'

    @pytest.mark.asyncio
    async def test_get_factor(self, client, fake_transport, factor_payload):
        """Happy path: factor is fetched by ID with its TOTP details."""
        fake_transport.queue(200, factor_payload)

        result = await client.get_factor("auth_factor_01FVYZ5QM8N98T9ME5BCB2BBMJ")

        assert isinstance(result.value, AuthenticationFactor)
        assert result.value.type == FactorType.TOTP
        assert result.value.totp.secret == "NAGCCFS3EYRB422HNAKAKY3XDUORMSRF"
        request = fake_transport.last_request
        assert request.method == HttpMethod.GET
        assert request.url == "https://api.workos.test/auth/factors/auth_factor_01FVYZ5QM8N98T9ME5BCB2BBMJ"
        assert request.body is None

    @pytest.mark.asyncio
    async def test_delete_factor(self, client, fake_transport):
        """Happy path: delete returns no value."""
        fake_transport.queue(204)

        result = await client.delete_factor("auth_factor_1")

        assert result.ok
        assert result.value is None
        assert fake_transport.last_request.url == "https://api.workos.test/auth/factors/auth_factor_1"


class TestChallenges:
    """Tests for challenge and verify"""

    @pytest.mark.asyncio
    async def test_challenge_without_template_sends_empty_object(self, client, fake_transport, challenge_payload):
        """Edge case: no SMS template gives an empty JSON object body."""
        fake_transport.queue(201, challenge_payload)

        result = await client.challenge_factor("auth_factor_01FVYZ5QM8N98T9ME5BCB2BBMJ")

        assert isinstance(result.value, AuthenticationChallenge)
        assert fake_transport.last_request.body == b"{}"
        assert fake_transport.last_request.url.endswith("/auth/factors/auth_factor_01FVYZ5QM8N98T9ME5BCB2BBMJ/challenge")

    @pytest.mark.asyncio
    async def test_challenge_with_sms_template(self, client, fake_transport, challenge_payload):
        """Happy path: SMS template is sent in the body."""
        fake_transport.queue(201, challenge_payload)

        await client.challenge_factor("auth_factor_1", sms_template="Your code is {{code}}")

        assert json.loads(fake_transport.last_request.body) == {"sms_template": "Your code is {{code}}"}

    @pytest.mark.asyncio
    async def test_verify_invalid_code_is_not_an_error(self, client, fake_transport, challenge_payload):
        """Edge case: a wrong code is a successful response with valid=False."""
        fake_transport.queue(200, {"challenge": challenge_payload, "valid": False})

        result = await client.verify_challenge("auth_challenge_1", "000000")

        assert isinstance(result.value, VerifyChallengeResponse)
        assert result.value.valid is False
        assert json.loads(fake_transport.last_request.body) == {"code": "000000"}

    @pytest.mark.asyncio
    async def test_verify_expired_challenge(self, client, fake_transport):
        """Failure: expired challenges come back as ApiError with a code."""
        fake_transport.queue(422, {"code": "authentication_challenge_expired", "message": "The challenge has expired."})

        result = await client.verify_challenge("auth_challenge_1", "123456")

        assert isinstance(result.error, ApiError)
        assert result.error.code == "authentication_challenge_expired"
