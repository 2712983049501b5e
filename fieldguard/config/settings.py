"""Configuration settings for fieldguard."""

from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for logging and the request-pipeline adaptor.

    The rule library and the validator itself never read these; they only
    supply defaults for ``setup_logging`` and ``ValidationMiddleware``.
    """

    model_config = SettingsConfigDict(
        env_prefix="FIELDGUARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging Configuration
    DEBUG: bool = Field(default=False, description="Debug mode")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FILE: Optional[Path] = Field(
        default=None, description="Optional log file path"
    )

    # Middleware Configuration
    VALIDATION_ERROR_STATUS: int = Field(
        default=422, ge=400, le=599, description="Status code for rejected requests"
    )
    VALIDATION_STRICT: bool = Field(
        default=True, description="Report missing required fields"
    )
    VALIDATED_METHODS: List[str] = Field(
        default_factory=lambda: ["POST", "PUT", "PATCH"],
        description="HTTP methods whose body is validated",
    )

    @field_validator("VALIDATED_METHODS")
    @classmethod
    def _upper_methods(cls, value: List[str]) -> List[str]:
        return [method.upper() for method in value]

    def create_directories(self) -> None:
        """Create the log file directory if a log file is configured."""
        if self.LOG_FILE is not None:
            self.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return self.model_dump()

    def __repr__(self) -> str:
        """String representation of settings."""
        return (
            f"Settings(log_level={self.LOG_LEVEL}, "
            f"error_status={self.VALIDATION_ERROR_STATUS}, strict={self.VALIDATION_STRICT})"
        )
