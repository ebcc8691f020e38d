# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Shared fixtures and random-source stubs.
"""

import random
from datetime import datetime, timezone

import pytest

from standup_wheel.core.config import settings
from standup_wheel.models.domain import Member
from standup_wheel.repositories.current_roles_repository import CurrentRolesRepository
from standup_wheel.repositories.history_repository import HistoryRepository
from standup_wheel.repositories.roster_repository import RosterRepository
from standup_wheel.services.roster_service import RosterService
from standup_wheel.services.rotation_service import RotationService


class ScriptedRandom:
    """Returns the given values in order; fails loudly when exhausted."""

    def __init__(self, *values: float) -> None:
        self._values = list(values)
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        if not self._values:
            raise AssertionError("random source called more often than scripted")
        return self._values.pop(0)


class ExplodingRandom:
    """Random source that must never be consulted."""

    def random(self) -> float:
        raise AssertionError("random source must not be called")


def ts(year: int, month: int = 1, day: int = 1) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def make_member(name: str, moderator_at=None, note_taker_at=None, active=True) -> Member:
    return Member(
        id=name.lower(),
        name=name,
        is_active=active,
        last_moderator_at=moderator_at,
        last_note_taker_at=note_taker_at,
    )


@pytest.fixture(autouse=True)
def neutral_settings(monkeypatch):
    """No skew and no default pins unless a test asks for them."""
    monkeypatch.setattr(settings, "SKEWED_MEMBER_NAME", "")
    monkeypatch.setattr(settings, "DEFAULT_MODERATOR", "Nobody-Mod")
    monkeypatch.setattr(settings, "DEFAULT_NOTE_TAKER", "Nobody-Notes")
    yield


@pytest.fixture
def repos():
    return RosterRepository(), HistoryRepository(), CurrentRolesRepository()


@pytest.fixture
def roster_service(repos):
    roster_repo, history_repo, current_roles_repo = repos
    return RosterService(
        roster_repo=roster_repo,
        history_repo=history_repo,
        current_roles_repo=current_roles_repo,
    )


@pytest.fixture
def rotation_service(repos):
    roster_repo, history_repo, current_roles_repo = repos
    return RotationService(
        roster_repo=roster_repo,
        history_repo=history_repo,
        current_roles_repo=current_roles_repo,
        rng=random.Random(7),
    )
