"""
Tests for workos_sdk/config.py
"""

import pytest
from pydantic import ValidationError

from workos_sdk.config import Settings
from workos_sdk.constants import DEFAULT_BASE_URL, DEFAULT_REQUEST_TIMEOUT


class TestSettings:
    """Tests for Settings"""

    def test_defaults(self, monkeypatch):
        """Happy path: defaults apply when nothing is configured."""
        for name in ("WORKOS_API_KEY", "WORKOS_BASE_URL", "WORKOS_REQUEST_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)

        s = Settings(_env_file=None)

        assert s.api_key == ""
        assert s.base_url == DEFAULT_BASE_URL
        assert s.request_timeout == DEFAULT_REQUEST_TIMEOUT
        assert s.max_retries == 3

    def test_reads_prefixed_environment(self, monkeypatch):
        """Happy path: WORKOS_* environment variables are picked up."""
        monkeypatch.setenv("WORKOS_API_KEY", "sk_test_env")
        monkeypatch.setenv("WORKOS_BASE_URL", "http://localhost:8080/")
        monkeypatch.setenv("WORKOS_REQUEST_TIMEOUT", "2.5")

        s = Settings(_env_file=None)

        assert s.api_key == "sk_test_env"
        assert s.base_url == "http://localhost:8080"
        assert s.request_timeout == 2.5

    def test_strips_trailing_slash(self):
        """Edge case: trailing slashes and whitespace are removed."""
        assert Settings(base_url=" https://api.workos.com// ", _env_file=None).base_url == "https://api.workos.com"

    @pytest.mark.parametrize("field", ["request_timeout", "retry_base_delay"])
    def test_rejects_non_positive_durations(self, field):
        """Failure: zero durations are rejected."""
        with pytest.raises(ValidationError, match="greater than zero"):
            Settings(**{field: 0}, _env_file=None)

    def test_rejects_negative_retries(self):
        """Failure: max_retries cannot be negative."""
        with pytest.raises(ValidationError, match="must not be negative"):
            Settings(max_retries=-1, _env_file=None)
