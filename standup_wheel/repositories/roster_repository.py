# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Roster data access.
Encapsulates all read/write operations on the in-memory member store.
NO business rules here — pure CRUD, insertion order preserved.
"""

from datetime import datetime
from typing import Optional

from standup_wheel.models.domain import Member, RoleKey


class RosterRepository:
    """In-memory roster storage keyed by member id."""

    def __init__(self) -> None:
        self._store: dict[str, Member] = {}

    # ── Read ──

    def get_all(self) -> list[Member]:
        return list(self._store.values())

    def get_active(self) -> list[Member]:
        return [m for m in self._store.values() if m.is_active]

    def get_by_id(self, member_id: str) -> Optional[Member]:
        return self._store.get(member_id)

    def find_by_name(self, name: str) -> list[Member]:
        return [m for m in self._store.values() if m.has_name(name)]

    def exists(self, member_id: str) -> bool:
        return member_id in self._store

    def count(self) -> int:
        return len(self._store)

    def count_active(self) -> int:
        return len(self.get_active())

    # ── Write ──

    def save(self, member: Member) -> Member:
        self._store[member.id] = member
        return member

    def update(self, member_id: str, **changes) -> Optional[Member]:
        member = self._store.get(member_id)
        if member is None:
            return None
        updated = Member.model_validate({**member.model_dump(), **changes})
        self._store[member_id] = updated
        return updated

    def stamp_role(
        self, member_id: str, role_key: RoleKey, at: datetime
    ) -> Optional[Member]:
        return self.update(member_id, **{role_key.value: at})

    def delete(self, member_id: str) -> Optional[Member]:
        return self._store.pop(member_id, None)

    # ── Bulk / internal ──

    def clear(self) -> None:
        self._store.clear()
