"""
Application settings using Pydantic BaseSettings.
"""

from typing import List, Optional, Union

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Application
    APP_NAME: str = "Route Planning Service"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    # API Configuration
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_PREFIX: str = "/api/v1"
    CORS_ORIGINS: Union[str, List[str]] = "*"

    # Database
    DATABASE_URL: Optional[str] = None
    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: Optional[str] = None
    POSTGRES_SERVER: Optional[str] = None
    POSTGRES_DB: Optional[str] = None
    DATABASE_POOL_SIZE: int = 10
    DATABASE_MAX_OVERFLOW: int = 20
    DATABASE_ECHO: bool = False
    DATABASE_POOL_TIMEOUT: int = 30
    DATABASE_POOL_RECYCLE: int = 3600

    # Route planning
    ROUTE_DEFAULT_MAX_PER_DAY: int = 5
    ROUTE_MAX_PER_DAY_LIMIT: int = 10
    ROUTE_SKIP_WEEKDAY: int = 6  # date.weekday() numbering, 6 == Sunday

    # Monitoring
    ENABLE_METRICS: bool = True
    HEALTH_CHECK_TIMEOUT: int = 5

    # Development
    ENABLE_SWAGGER: bool = True

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            if v == "*":
                return ["*"]
            return [i.strip() for i in v.split(",")]
        elif isinstance(v, list):
            return v
        return ["*"]

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        if v not in ["development", "staging", "production", "test"]:
            raise ValueError(
                "Environment must be one of: development, staging, production, test"
            )
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("ROUTE_SKIP_WEEKDAY")
    @classmethod
    def validate_skip_weekday(cls, v: int) -> int:
        if not 0 <= v <= 6:
            raise ValueError("Skip weekday must be between 0 (Monday) and 6 (Sunday)")
        return v

    @model_validator(mode="after")
    def assemble_db_connection(self) -> "Settings":
        if self.DATABASE_URL:
            return self
        # Build from individual components if DATABASE_URL is not provided
        user = self.POSTGRES_USER or "route_planner"
        password = self.POSTGRES_PASSWORD or "route_planner"
        host = self.POSTGRES_SERVER or "localhost"
        db = self.POSTGRES_DB or "route_planning"
        self.DATABASE_URL = f"postgresql+asyncpg://{user}:{password}@{host}:5432/{db}"
        return self

    @model_validator(mode="after")
    def validate_route_limits(self) -> "Settings":
        if self.ROUTE_MAX_PER_DAY_LIMIT < 1:
            raise ValueError("ROUTE_MAX_PER_DAY_LIMIT must be at least 1")
        if not 1 <= self.ROUTE_DEFAULT_MAX_PER_DAY <= self.ROUTE_MAX_PER_DAY_LIMIT:
            raise ValueError(
                "ROUTE_DEFAULT_MAX_PER_DAY must be between 1 and ROUTE_MAX_PER_DAY_LIMIT"
            )
        return self

    model_config = {"env_file": ".env", "case_sensitive": True, "extra": "ignore"}


# Global settings instance
settings = Settings()
