# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration — all env-driven, zero hardcode.
Single source of truth for every tunable rotation parameter.
"""

import os


def _split_names(raw: str) -> list[str]:
    return [name.strip() for name in raw.split(",") if name.strip()]


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "standup-wheel")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # ── Round guards / exclusion thresholds ──
    MIN_ACTIVE_MEMBERS: int = int(os.getenv("MIN_ACTIVE_MEMBERS", "2"))
    EXCLUDE_PREVIOUS_MODERATOR_ABOVE: int = int(
        os.getenv("EXCLUDE_PREVIOUS_MODERATOR_ABOVE", "2")
    )
    EXCLUDE_PREVIOUS_NOTE_TAKER_ABOVE: int = int(
        os.getenv("EXCLUDE_PREVIOUS_NOTE_TAKER_ABOVE", "3")
    )

    # ── Skew rule (empty name disables it) ──
    SKEWED_MEMBER_NAME: str = os.getenv("SKEWED_MEMBER_NAME", "Gino")
    SKEW_ACCEPT_PROBABILITY: float = float(
        os.getenv("SKEW_ACCEPT_PROBABILITY", "0.05")
    )

    # ── Defaults for a fresh roster ──
    DEFAULT_MODERATOR: str = os.getenv("DEFAULT_MODERATOR", "Gino")
    DEFAULT_NOTE_TAKER: str = os.getenv("DEFAULT_NOTE_TAKER", "Robert")
    DEFAULT_TEAM_NAMES: list[str] = _split_names(
        os.getenv(
            "DEFAULT_TEAM_NAMES",
            "Gino,Robert,Ann-Christine,Alina,Sebastian,Mauritz,Andreas,Anna,"
            "Aditya,Joshua,Noor,Max,Justus,Johannes,Alessandro,Kenan",
        )
    )
    SEED_DEFAULT_TEAM: bool = (
        os.getenv("SEED_DEFAULT_TEAM", "true").lower() == "true"
    )

    # ── History log ──
    DEFAULT_HISTORY_LIMIT: int = int(os.getenv("DEFAULT_HISTORY_LIMIT", "100"))
    MAX_HISTORY_SIZE: int = int(os.getenv("MAX_HISTORY_SIZE", "1000"))


settings = Settings()
