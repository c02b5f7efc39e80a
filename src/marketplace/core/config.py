from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Sustainability Marketplace API"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    enable_openapi: bool = True  # Set to False in production

    # Security
    log_user_ids: bool = True

    # Database
    database_url: str
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_ssl_mode: str = "prefer"  # disable, prefer, require, verify-ca, verify-full
    database_statement_cache_size: int = 100

    # Auth (tokens are issued by the identity service, we only verify them)
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 30

    # Matching
    match_min_score: float = 0.30
    match_max_candidates: int = 10

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Metrics
    metrics_api_key: str | None = None  # If set, /metrics requires this key

    @field_validator("jwt_secret_key")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        if v == "change-this-to-a-secure-random-string":
            raise ValueError(
                "JWT_SECRET_KEY must be changed from default value. "
                "Generate a secure secret with: openssl rand -hex 32"
            )
        if len(v) < 32:
            raise ValueError("JWT_SECRET_KEY must be at least 32 characters")
        return v

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Validate CORS origins - reject wildcards when credentials are used."""
        for origin in v:
            if origin == "*":
                raise ValueError(
                    "CORS wildcard '*' is not allowed when allow_credentials=True. "
                    "Specify explicit origins instead."
                )
        return v

    @field_validator("database_ssl_mode")
    @classmethod
    def validate_ssl_mode(cls, v: str) -> str:
        allowed = {"disable", "prefer", "require", "verify-ca", "verify-full"}
        if v not in allowed:
            raise ValueError(f"DATABASE_SSL_MODE must be one of: {', '.join(sorted(allowed))}")
        return v

    @field_validator("match_min_score")
    @classmethod
    def validate_match_min_score(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError("MATCH_MIN_SCORE must be between 0 and 1")
        return v

    @field_validator("match_max_candidates")
    @classmethod
    def validate_match_max_candidates(cls, v: int) -> int:
        if v < 1:
            raise ValueError("MATCH_MAX_CANDIDATES must be at least 1")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
