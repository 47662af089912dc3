from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Shortest secret accepted for signing
MIN_SECRET_LENGTH = 32


class TokenConfig(BaseSettings):
    """
    Token settings loaded from HELOQ_* environment variables.
    """
    secret: SecretStr = Field(..., description="Shared HMAC secret, at least 32 characters")
    ttl_seconds: Optional[int] = Field(default=None, description="Default token lifetime in seconds")

    model_config = SettingsConfigDict(
        env_prefix="HELOQ_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("secret")
    @classmethod
    def check_secret_length(cls, value: SecretStr) -> SecretStr:
        if len(value.get_secret_value()) < MIN_SECRET_LENGTH:
            raise ValueError(f"secret must be at least {MIN_SECRET_LENGTH} characters")
        return value


@lru_cache()
def get_token_config() -> TokenConfig:
    return TokenConfig(_env_file=".env.local")
