# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Roster management — business logic for member CRUD.
Coordinates repository writes with metrics, logging, and validation.
"""

from typing import Any, Optional

from pydantic import ValidationError

from standup_wheel.core.config import settings
from standup_wheel.core.logging import get_logger
from standup_wheel.metrics.prometheus import ACTIVE_MEMBERS
from standup_wheel.models.domain import Member
from standup_wheel.repositories.current_roles_repository import CurrentRolesRepository
from standup_wheel.repositories.history_repository import HistoryRepository
from standup_wheel.repositories.roster_repository import RosterRepository

logger = get_logger(__name__)


class RosterService:
    """Business logic for the team roster."""

    def __init__(
        self,
        roster_repo: RosterRepository,
        history_repo: HistoryRepository,
        current_roles_repo: CurrentRolesRepository,
    ) -> None:
        self._roster = roster_repo
        self._history = history_repo
        self._current_roles = current_roles_repo

    # ── Commands ──

    def add_member(self, name: str) -> Member:
        """Add an active member with no role history. Raises ValueError on blank name."""
        try:
            member = Member(name=name)
        except ValidationError as exc:
            logger.warning("Rejected member name %r", name)
            raise ValueError(f"Invalid member name: {name!r}") from exc

        self._roster.save(member)
        self._refresh_gauges()
        logger.info("Member added: id=%s, name=%s", member.id, member.name)
        return member

    def update_member(
        self,
        member_id: str,
        name: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> Member:
        """Rename and/or toggle a member. Raises KeyError / ValueError."""
        if not self._roster.exists(member_id):
            raise KeyError(f"No member found with id '{member_id}'")

        changes: dict[str, Any] = {}
        if name is not None:
            changes["name"] = name
        if is_active is not None:
            changes["is_active"] = is_active

        try:
            member = self._roster.update(member_id, **changes)
        except ValidationError as exc:
            logger.warning("Rejected update for member id=%s", member_id)
            raise ValueError(f"Invalid member update: {sorted(changes)}") from exc
        if changes:
            self._refresh_gauges()
            logger.info("Member updated: id=%s, changes=%s", member_id, sorted(changes))
        return member

    def remove_member(self, member_id: str) -> Member:
        """Remove a member from the roster. Raises KeyError if not found."""
        member = self._roster.delete(member_id)
        if member is None:
            raise KeyError(f"No member found with id '{member_id}'")
        self._refresh_gauges()
        logger.info("Member removed: id=%s, name=%s", member.id, member.name)
        return member

    def reset_week(self) -> list[Member]:
        """Re-activate everyone except this week's pinned role holders."""
        roles = self._current_roles.get()
        for member in self._roster.get_all():
            self._roster.update(member.id, is_active=not roles.pins(member))
        self._refresh_gauges()
        logger.info(
            "Week reset: active=%d, pinned=%s/%s",
            self._roster.count_active(), roles.moderator, roles.note_taker,
        )
        return self._roster.get_all()

    # ── Queries ──

    def list_members(self) -> list[Member]:
        return self._roster.get_all()

    def list_active(self) -> list[Member]:
        return self._roster.get_active()

    def get_member(self, member_id: str) -> Member:
        member = self._roster.get_by_id(member_id)
        if member is None:
            raise KeyError(f"No member found with id '{member_id}'")
        return member

    # ── Seed ──

    def seed_defaults(self) -> list[Member]:
        """Create the default team so the wheel is usable immediately."""
        if self._roster.count() > 0:
            return self._roster.get_all()

        roles = self._current_roles.get()
        for name in settings.DEFAULT_TEAM_NAMES:
            pinned = roles.pins(Member(name=name))
            self._roster.save(Member(name=name, is_active=not pinned))
        self._refresh_gauges()
        logger.info("Seeded %d default roster members", self._roster.count())
        return self._roster.get_all()

    # ── Stats helpers ──

    def get_stats(self) -> dict[str, Any]:
        """Aggregated roster and rotation statistics."""
        per_member = self._history.count_by_member()
        return {
            "total_members": self._roster.count(),
            "active_members": self._roster.count_active(),
            "total_rounds": self._history.count(),
            "role_counts": [
                {
                    "id": m.id,
                    "name": m.name,
                    **per_member.get(m.id, {"moderator": 0, "note_taker": 0}),
                }
                for m in self._roster.get_all()
            ],
        }

    def _refresh_gauges(self) -> None:
        ACTIVE_MEMBERS.set(self._roster.count_active())
