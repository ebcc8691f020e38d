# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Standup Wheel — fair moderator / note-taker rotation.
"""

from standup_wheel.models.domain import CurrentWeekRoles, Member, RoleKey, SpinResult
from standup_wheel.services.selection import (
    EmptyRosterError,
    SkewRule,
    select_with_fair_rotation,
)

__all__ = [
    "CurrentWeekRoles",
    "EmptyRosterError",
    "Member",
    "RoleKey",
    "SkewRule",
    "SpinResult",
    "select_with_fair_rotation",
]
