# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Round orchestration.
Computes adjacency exclusions, drives the selector once per role, stamps
timestamps, records history, and applies manual overrides.
"""

import random
from datetime import datetime, timezone
from typing import Optional, Union

from standup_wheel.core.config import settings
from standup_wheel.core.logging import get_logger, round_logger
from standup_wheel.metrics.prometheus import (
    ACTIVE_MEMBERS,
    EXCLUSION_FALLBACKS,
    HISTORY_SIZE,
    MANUAL_OVERRIDES,
    ROUNDS_COMPLETED,
    SELECTIONS_TOTAL,
)
from standup_wheel.models.domain import CurrentWeekRoles, Member, RoleKey, SpinResult
from standup_wheel.repositories.current_roles_repository import CurrentRolesRepository
from standup_wheel.repositories.history_repository import HistoryRepository
from standup_wheel.repositories.roster_repository import RosterRepository
from standup_wheel.services.selection import (
    RandomSource,
    SkewRule,
    select_with_fair_rotation,
)

logger = get_logger(__name__)


class NotEnoughMembersError(ValueError):
    """Raised when too few members are active to run a round."""


class RotationService:
    """Business logic for running moderator / note-taker rounds."""

    def __init__(
        self,
        roster_repo: RosterRepository,
        history_repo: HistoryRepository,
        current_roles_repo: CurrentRolesRepository,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self._roster = roster_repo
        self._history = history_repo
        self._current_roles = current_roles_repo
        self._rng = rng if rng is not None else random.Random()

    # ── Draws ──

    def pick_moderator(self) -> Member:
        """Select this round's moderator. Raises NotEnoughMembersError."""
        active = self._require_active()
        excluded = self._pinned_ids()

        last = self._history.get_last()
        if last is not None and len(active) > settings.EXCLUDE_PREVIOUS_MODERATOR_ABOVE:
            excluded.add(last.moderator.id)

        return self._select(active, RoleKey.MODERATOR, excluded)

    def pick_note_taker(self, moderator: Member) -> Member:
        """Select this round's note-taker, never the given moderator if avoidable."""
        active = self._require_active()
        excluded = {moderator.id} | self._pinned_ids()

        last = self._history.get_last()
        if last is not None and len(active) > settings.EXCLUDE_PREVIOUS_NOTE_TAKER_ABOVE:
            excluded.add(last.note_taker.id)

        # Pins and the previous note-taker give way before the moderator does.
        if all(m.id in excluded for m in active):
            logger.info(
                "Soft exclusions cover every active member; keeping only moderator=%s out",
                moderator.name,
            )
            excluded = {moderator.id}

        return self._select(active, RoleKey.NOTE_TAKER, excluded)

    # ── Round lifecycle ──

    def complete_round(self, moderator: Member, note_taker: Member) -> SpinResult:
        """Stamp both winners, append history, and pin them for the week."""
        for member in (moderator, note_taker):
            if not self._roster.exists(member.id):
                raise KeyError(f"No member found with id '{member.id}'")

        now = datetime.now(timezone.utc)
        stamped_moderator = self._roster.stamp_role(moderator.id, RoleKey.MODERATOR, now)
        stamped_note_taker = self._roster.stamp_role(
            note_taker.id, RoleKey.NOTE_TAKER, now
        )

        result = self._history.append(
            SpinResult(
                moderator=stamped_moderator,
                note_taker=stamped_note_taker,
                timestamp=now,
            )
        )
        self._current_roles.save(
            CurrentWeekRoles(
                moderator=stamped_moderator.name,
                note_taker=stamped_note_taker.name,
            )
        )

        ROUNDS_COMPLETED.inc()
        HISTORY_SIZE.set(self._history.count())
        round_logger(logger, result.round_id).info(
            "Round completed: moderator=%s, note_taker=%s",
            stamped_moderator.name, stamped_note_taker.name,
        )
        return result

    def spin(self) -> SpinResult:
        """Run a whole round: moderator, then note-taker, then bookkeeping."""
        moderator = self.pick_moderator()
        note_taker = self.pick_note_taker(moderator)
        return self.complete_round(moderator, note_taker)

    # ── Manual adjustments ──

    def override_assignment(
        self, role: Union[str, RoleKey], member_id: str
    ) -> SpinResult:
        """
        Reassign a role in the latest round directly, with no fairness check.
        Raises LookupError if no round exists yet, KeyError if member unknown.
        """
        role_key = role if isinstance(role, RoleKey) else RoleKey.for_role(role)
        last = self._history.get_last()
        if last is None:
            logger.warning("Override rejected: no completed round")
            raise LookupError("No completed round to override")
        if not self._roster.exists(member_id):
            logger.warning("Override rejected: unknown member id=%s", member_id)
            raise KeyError(f"No member found with id '{member_id}'")

        now = datetime.now(timezone.utc)
        member = self._roster.stamp_role(member_id, role_key, now)
        result = self._history.replace_last(
            last.model_copy(update={role_key.role: member, "timestamp": now})
        )
        roles = self._current_roles.get()
        self._current_roles.save(roles.model_copy(update={role_key.role: member.name}))

        MANUAL_OVERRIDES.labels(role=role_key.role).inc()
        round_logger(logger, result.round_id, role=role_key.role).info(
            "Override applied: role=%s, member=%s",
            role_key.role, member.name,
            extra={"member_id": member.id, "member_name": member.name},
        )
        return result

    def set_current_role(self, role: Union[str, RoleKey], name: str) -> CurrentWeekRoles:
        """
        Pin a different member as this week's holder of ``role``.
        The old holder comes back into the pool unless they hold the other role.
        Raises ValueError if no member carries ``name``.
        """
        role_key = role if isinstance(role, RoleKey) else RoleKey.for_role(role)
        if not self._roster.find_by_name(name):
            raise ValueError(f"No member named '{name}'")

        roles = self._current_roles.get()
        old_holder = roles.holder_of(role_key.role)
        other_holder = roles.holder_of(
            "note_taker" if role_key is RoleKey.MODERATOR else "moderator"
        )

        for member in self._roster.get_all():
            if member.has_name(name):
                self._roster.update(member.id, is_active=False)
            elif member.has_name(old_holder) and not member.has_name(other_holder):
                self._roster.update(member.id, is_active=True)

        updated = self._current_roles.save(
            roles.model_copy(update={role_key.role: name.strip()})
        )
        ACTIVE_MEMBERS.set(self._roster.count_active())
        logger.info("Current %s set: %s -> %s", role_key.role, old_holder, name.strip())
        return updated

    # ── Queries ──

    def get_last_result(self) -> Optional[SpinResult]:
        return self._history.get_last()

    def list_history(self, limit: Optional[int] = None) -> list[SpinResult]:
        """Most recent rounds, oldest first. Raises ValueError for a limit below 1."""
        if limit is not None and limit < 1:
            logger.warning("History listing rejected: limit=%d", limit)
            raise ValueError(f"History limit must be at least 1, got {limit}")
        return self._history.get_all(limit=limit)

    def get_current_roles(self) -> CurrentWeekRoles:
        return self._current_roles.get()

    # ── Internal ──

    def _require_active(self) -> list[Member]:
        active = self._roster.get_active()
        if len(active) < settings.MIN_ACTIVE_MEMBERS:
            logger.warning(
                "Not enough active members: have=%d, need=%d",
                len(active), settings.MIN_ACTIVE_MEMBERS,
            )
            raise NotEnoughMembersError(
                f"At least {settings.MIN_ACTIVE_MEMBERS} active members are required"
            )
        return active

    def _pinned_ids(self) -> set[str]:
        roles = self._current_roles.get()
        return {m.id for m in self._roster.get_all() if roles.pins(m)}

    def _skew_rule(self) -> Optional[SkewRule]:
        if not settings.SKEWED_MEMBER_NAME.strip():
            return None
        return SkewRule.for_name(
            settings.SKEWED_MEMBER_NAME, settings.SKEW_ACCEPT_PROBABILITY
        )

    def _select(
        self, active: list[Member], role_key: RoleKey, excluded: set[str]
    ) -> Member:
        if all(m.id in excluded for m in active):
            EXCLUSION_FALLBACKS.labels(role=role_key.role).inc()
            logger.info(
                "Exclusions cover every active member; drawing %s from all %d",
                role_key.role, len(active),
            )

        winner = select_with_fair_rotation(
            active, role_key, excluded, rng=self._rng, skew=self._skew_rule()
        )
        SELECTIONS_TOTAL.labels(role=role_key.role).inc()
        logger.debug(
            "Drew %s from %d active, %d excluded",
            role_key.role, len(active), len(excluded),
            extra={"role": role_key.role, "member_id": winner.id, "member_name": winner.name},
        )
        return winner
