# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration — all env-driven, zero hardcode.
Single source of truth for every tunable parameter.
"""

import os


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "syncup-kickoff")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    SERVICE_PORT: int = int(os.getenv("SERVICE_PORT", "8000"))

    # Session tokens (HS256 JWT)
    SESSION_SECRET: str = os.getenv("SESSION_SECRET", "change-me-in-production")
    SESSION_ALGORITHM: str = os.getenv("SESSION_ALGORITHM", "HS256")
    SESSION_TTL_HOURS: int = int(os.getenv("SESSION_TTL_HOURS", "24"))

    GROUP_CODE_LENGTH: int = int(os.getenv("GROUP_CODE_LENGTH", "6"))
    CONFLICT_THRESHOLD: float = float(os.getenv("CONFLICT_THRESHOLD", "1.4"))
    DEFAULT_MEETING_TIME: str = os.getenv("DEFAULT_MEETING_TIME", "TBD")

    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
