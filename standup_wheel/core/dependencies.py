# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Dependency wiring — singleton repositories and services.
"""

from standup_wheel.core.config import settings
from standup_wheel.repositories.current_roles_repository import CurrentRolesRepository
from standup_wheel.repositories.history_repository import HistoryRepository
from standup_wheel.repositories.roster_repository import RosterRepository
from standup_wheel.services.roster_service import RosterService
from standup_wheel.services.rotation_service import RotationService

# ── Singleton repository instances (in-memory stores) ──
_roster_repo = RosterRepository()
_history_repo = HistoryRepository()
_current_roles_repo = CurrentRolesRepository()

# ── Service instances (with injected dependencies) ──
_roster_service = RosterService(
    roster_repo=_roster_repo,
    history_repo=_history_repo,
    current_roles_repo=_current_roles_repo,
)
_rotation_service = RotationService(
    roster_repo=_roster_repo,
    history_repo=_history_repo,
    current_roles_repo=_current_roles_repo,
)


# ── Accessors ──
def get_roster_service() -> RosterService:
    return _roster_service


def get_rotation_service() -> RotationService:
    return _rotation_service


def get_roster_repo() -> RosterRepository:
    return _roster_repo


def get_history_repo() -> HistoryRepository:
    return _history_repo


def get_current_roles_repo() -> CurrentRolesRepository:
    return _current_roles_repo


# ── Startup ──
def startup() -> None:
    """Seed the default roster when configured and the roster is empty."""
    if settings.SEED_DEFAULT_TEAM:
        _roster_service.seed_defaults()
