# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: This week's pinned role holders (by name).
"""

from standup_wheel.core.config import settings
from standup_wheel.models.domain import CurrentWeekRoles


class CurrentRolesRepository:
    """In-memory holder for the current-week moderator and note-taker."""

    def __init__(self) -> None:
        self._roles = self._defaults()

    @staticmethod
    def _defaults() -> CurrentWeekRoles:
        return CurrentWeekRoles(
            moderator=settings.DEFAULT_MODERATOR,
            note_taker=settings.DEFAULT_NOTE_TAKER,
        )

    def get(self) -> CurrentWeekRoles:
        return self._roles

    def save(self, roles: CurrentWeekRoles) -> CurrentWeekRoles:
        self._roles = roles
        return roles

    def clear(self) -> None:
        self._roles = self._defaults()
