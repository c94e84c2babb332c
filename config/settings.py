"""
Request Log Service Configuration.

Manages logging, sampling and metrics settings via environment variables.
"""

import os

from internal.domain.errors import ConfigurationError
from internal.domain.request_log import MAX_STATUS, MIN_STATUS

LOG_FORMATS = ("json", "text")


class Settings:
    """Request log service settings."""

    # Application settings
    APP_NAME: str = os.getenv("APP_NAME", "request-log-service")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "json")
    LOG_QUEUED: bool = os.getenv("LOG_QUEUED", "true").lower() == "true"

    # Error log sampling
    ERROR_LOG_SAMPLE_INTERVAL: float = float(os.getenv("ERROR_LOG_SAMPLE_INTERVAL", "1.0"))  # seconds
    ERROR_STATUS_THRESHOLD: int = int(os.getenv("ERROR_STATUS_THRESHOLD", "500"))

    # Handler failures
    FALLBACK_STATUS_CODE: int = int(os.getenv("FALLBACK_STATUS_CODE", "500"))
    RESPECT_ERROR_STATUS: bool = os.getenv("RESPECT_ERROR_STATUS", "false").lower() == "true"

    # Metrics
    METRICS_NAMESPACE: str = os.getenv("METRICS_NAMESPACE", "")

    @classmethod
    def json_logs(cls) -> bool:
        """
        Check whether logs are written as JSON.

        Returns:
            True for the json log format.
        """
        return cls.LOG_FORMAT.lower() == "json"

    @classmethod
    def validate(cls) -> None:
        """
        Validate settings.

        Raises:
            ConfigurationError: If a setting holds an unusable value.
        """
        if cls.ERROR_LOG_SAMPLE_INTERVAL <= 0:
            raise ConfigurationError(
                f"ERROR_LOG_SAMPLE_INTERVAL must be positive, got {cls.ERROR_LOG_SAMPLE_INTERVAL}"
            )
        if cls.LOG_FORMAT.lower() not in LOG_FORMATS:
            raise ConfigurationError(
                f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got {cls.LOG_FORMAT}"
            )
        for name in ("ERROR_STATUS_THRESHOLD", "FALLBACK_STATUS_CODE"):
            value = getattr(cls, name)
            if not MIN_STATUS <= value <= MAX_STATUS:
                raise ConfigurationError(
                    f"{name} must be between {MIN_STATUS} and {MAX_STATUS}, got {value}"
                )


settings = Settings()
