from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from workos_sdk.constants import DEFAULT_BASE_URL, DEFAULT_REQUEST_TIMEOUT


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WORKOS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # WorkOS secret key (sk_live_... / sk_test_...)
    api_key: str = ""

    # API origin, e.g. a local mock server during integration tests
    base_url: str = DEFAULT_BASE_URL

    # Per-request timeout in seconds
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    # Optional retry wrapper defaults (the core itself never retries)
    max_retries: int = 3
    retry_base_delay: float = 1.0

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URL so path templates can be appended directly"""
        return v.strip().rstrip("/")

    @field_validator("request_timeout", "retry_base_delay")
    @classmethod
    def must_be_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("must be greater than zero")
        return v

    @field_validator("max_retries")
    @classmethod
    def must_not_be_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("must not be negative")
        return v


settings = Settings()
