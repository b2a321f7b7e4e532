"""
Shared test fixtures for the WorkOS SDK tests.

Provides reusable fixtures for:
- A fake transport that records requests and replays queued responses
- Raw response factories
- Credentials and a client wired to the fake transport
- Sample API payloads (directory users/groups, factors, organizations, users,
  memberships, invitations, connections)
"""

import json

import httpx
import pytest

from workos_sdk.client import WorkOSClient
from workos_sdk.core.credentials import Credentials
from workos_sdk.core.transport import RawResponse

TEST_API_KEY = "sk_test_1234567890abcdef"
TEST_BASE_URL = "https://api.workos.test"


def _make_response(status_code=200, json_body=None, body=b"", headers=None, reason_phrase=""):
    if json_body is not None:
        body = json.dumps(json_body).encode("utf-8")
    return RawResponse(
        status_code=status_code,
        headers=httpx.Headers(headers or {}),
        body=body,
        reason_phrase=reason_phrase,
    )


class FakeTransport:
    """
    In-memory transport

    Responses (or exceptions to raise) are replayed in queue order; set
    `handler` to compute a response from each request instead.
    """

    def __init__(self):
        self.requests = []
        self.timeouts = []
        self.handler = None
        self._queue = []

    def queue(self, status_code=200, json_body=None, body=b"", headers=None):
        self._queue.append(_make_response(status_code, json_body, body, headers))

    def queue_exception(self, exc):
        self._queue.append(exc)

    async def send(self, request, timeout):
        self.requests.append(request)
        self.timeouts.append(timeout)
        if self.handler is not None:
            return await self.handler(request)
        if not self._queue:
            raise AssertionError(f"No response queued for {request.method.value} {request.url}")
        item = self._queue.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    @property
    def last_request(self):
        return self.requests[-1]


# ---------------------------------------------------------------------------
# Transport / client fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_response():
    """Factory for RawResponse objects."""
    return _make_response


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def credentials():
    return Credentials(secret_key=TEST_API_KEY, base_url=TEST_BASE_URL)


@pytest.fixture
def client(fake_transport):
    """WorkOSClient sending through the fake transport."""
    return WorkOSClient(
        api_key=TEST_API_KEY,
        base_url=TEST_BASE_URL,
        timeout=5.0,
        transport=fake_transport,
    )


# ---------------------------------------------------------------------------
# Sample payloads
# ---------------------------------------------------------------------------


@pytest.fixture
def directory_group_payload():
    return {
        "object": "directory_group",
        "id": "directory_group_01E1JJS84MFPPQ3G655FHTKX6Z",
        "idp_id": "02grqrue4294w24",
        "directory_id": "directory_01ECAZ4NV9QMV47GW873HDCX74",
        "organization_id": "org_01EZTR6WYX1A0DSE2CYMGXQ24Y",
        "name": "Developers",
        "created_at": "2021-06-25T19:07:33.155Z",
        "updated_at": "2021-06-25T19:07:33.155Z",
        "raw_attributes": {"id": "02grqrue4294w24"},
    }


@pytest.fixture
def directory_user_payload(directory_group_payload):
    return {
        "object": "directory_user",
        "id": "directory_user_01E1JG7J09H96KYP8HM9B0G5SJ",
        "idp_id": "2836",
        "directory_id": "directory_01ECAZ4NV9QMV47GW873HDCX74",
        "organization_id": "org_01EZTR6WYX1A0DSE2CYMGXQ24Y",
        "first_name": "Marcelina",
        "last_name": "Davis",
        "job_title": "Software Engineer",
        "emails": [
            {"primary": True, "type": "work", "value": "marcelina@example.com"},
        ],
        "username": "marcelina@example.com",
        "groups": [directory_group_payload],
        "state": "active",
        "created_at": "2021-06-25T19:07:33.155Z",
        "updated_at": "2021-06-25T19:07:33.155Z",
        "custom_attributes": {"department": "Engineering"},
        "raw_attributes": {},
    }


@pytest.fixture
def factor_payload():
    return {
        "object": "authentication_factor",
        "id": "auth_factor_01FVYZ5QM8N98T9ME5BCB2BBMJ",
        "created_at": "2022-02-15T15:14:19.392Z",
        "updated_at": "2022-02-15T15:14:19.392Z",
        "type": "totp",
        "totp": {
            "qr_code": "data:image/png;base64,{base64EncodedPng}",
            "secret": "NAGCCFS3EYRB422HNAKAKY3XDUORMSRF",
            "uri": "otpauth://totp/FooCorp:alan.turing@example.com?secret=NAGCCFS3EYRB422HNAKAKY3XDUORMSRF",
        },
    }


@pytest.fixture
def challenge_payload():
    return {
        "object": "authentication_challenge",
        "id": "auth_challenge_01FVYZWQTZQ5VB6BC5MPG2EYC5",
        "created_at": "2022-02-15T15:26:53.274Z",
        "updated_at": "2022-02-15T15:26:53.274Z",
        "expires_at": "2022-02-15T15:36:53.279Z",
        "authentication_factor_id": "auth_factor_01FVYZ5QM8N98T9ME5BCB2BBMJ",
    }


@pytest.fixture
def organization_payload():
    return {
        "object": "organization",
        "id": "org_01EHZNVPK3SFK441A1RGBFSHRT",
        "name": "Foo Corp",
        "allow_profiles_outside_organization": False,
        "domains": [
            {
                "object": "organization_domain",
                "id": "org_domain_01EHZNVPK2QXHMVWCEDQEKY69A",
                "domain": "foo-corp.com",
                "state": "verified",
            }
        ],
        "external_id": "ext_123",
        "metadata": {"tier": "enterprise"},
        "created_at": "2021-06-25T19:07:33.155Z",
        "updated_at": "2021-06-25T19:07:33.155Z",
    }


@pytest.fixture
def user_payload():
    return {
        "object": "user",
        "id": "user_01E4ZCR3C56J083X43JQXF3JK5",
        "email": "marcelina.davis@example.com",
        "first_name": "Marcelina",
        "last_name": "Davis",
        "email_verified": True,
        "profile_picture_url": "https://workoscdn.com/images/v1/123abc",
        "last_sign_in_at": "2021-06-25T19:07:33.155Z",
        "external_id": None,
        "metadata": {},
        "created_at": "2021-06-25T19:07:33.155Z",
        "updated_at": "2021-06-25T19:07:33.155Z",
    }


@pytest.fixture
def membership_payload():
    return {
        "object": "organization_membership",
        "id": "om_01E4ZCR3C56J083X43JQXF3JK5",
        "user_id": "user_01E4ZCR3C56J083X43JQXF3JK5",
        "organization_id": "org_01E4ZCR3C56J083X43JQXF3JK5",
        "role": {"slug": "member"},
        "status": "active",
        "created_at": "2021-06-25T19:07:33.155Z",
        "updated_at": "2021-06-25T19:07:33.155Z",
    }


@pytest.fixture
def invitation_payload():
    return {
        "object": "invitation",
        "id": "invitation_01E4ZCR3C56J083X43JQXF3JK5",
        "email": "marcelina.davis@example.com",
        "state": "pending",
        "accepted_at": None,
        "revoked_at": None,
        "expires_at": "2021-07-01T19:07:33.155Z",
        "token": "Z1uX3RbwcIl5fIGJJJCXXisdI",
        "accept_invitation_url": "https://your-app.com/invite?invitation_token=Z1uX3RbwcIl5fIGJJJCXXisdI",
        "organization_id": "org_01E4ZCR3C56J083X43JQXF3JK5",
        "inviter_user_id": "user_01HYGBX8ZGD19949T3BM4FW1C3",
        "created_at": "2021-06-25T19:07:33.155Z",
        "updated_at": "2021-06-25T19:07:33.155Z",
    }


@pytest.fixture
def connection_payload():
    return {
        "object": "connection",
        "id": "conn_01E4ZCR3C56J083X43JQXF3JK5",
        "organization_id": "org_01EHWNCE74X7JSDV0X3SZ3KJNY",
        "connection_type": "GoogleOAuth",
        "name": "Foo Corp",
        "state": "active",
        "created_at": "2021-06-25T19:07:33.155Z",
        "updated_at": "2021-06-25T19:07:33.155Z",
    }
