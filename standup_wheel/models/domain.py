# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures shared by stores and services.
Members are immutable values; stores replace them with updated copies.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RoleKey(str, Enum):
    """Which last-served timestamp a selection ranks by."""

    MODERATOR = "last_moderator_at"
    NOTE_TAKER = "last_note_taker_at"

    @property
    def role(self) -> str:
        return "moderator" if self is RoleKey.MODERATOR else "note_taker"

    @classmethod
    def for_role(cls, role: str) -> "RoleKey":
        """Map a role label ("moderator" / "note_taker") to its key."""
        for key in cls:
            if key.role == role:
                return key
        raise ValueError(f"Unknown role '{role}'")


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Member(BaseModel):
    """A single roster member."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    is_active: bool = Field(default=True, description="Takes part in this week's round")
    last_moderator_at: Optional[datetime] = None
    last_note_taker_at: Optional[datetime] = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    @field_validator("last_moderator_at", "last_note_taker_at")
    @classmethod
    def assume_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(v)

    def last_served(self, role_key: RoleKey) -> Optional[datetime]:
        return getattr(self, role_key.value)

    def has_name(self, name: str) -> bool:
        """Case-insensitive name match."""
        return self.name.lower() == name.strip().lower()


class SpinResult(BaseModel):
    """One completed round: who got which role, and when."""

    model_config = ConfigDict(frozen=True)

    round_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    moderator: Member
    note_taker: Member
    timestamp: datetime

    @field_validator("timestamp")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        return _as_utc(v)


class CurrentWeekRoles(BaseModel):
    """Names of this week's already-fixed role holders."""

    moderator: str = Field(..., min_length=1)
    note_taker: str = Field(..., min_length=1)

    def pins(self, member: Member) -> bool:
        return member.has_name(self.moderator) or member.has_name(self.note_taker)

    def holder_of(self, role: str) -> str:
        return self.moderator if role == "moderator" else self.note_taker
