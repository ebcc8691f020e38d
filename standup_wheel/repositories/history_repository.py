# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Round history data access.
Bounded append-only log of completed rounds.
"""

from typing import Optional

from standup_wheel.core.config import settings
from standup_wheel.models.domain import SpinResult


class HistoryRepository:
    """In-memory round log (bounded ring buffer)."""

    def __init__(self) -> None:
        self._results: list[SpinResult] = []

    # ── Read ──

    def get_all(self, limit: Optional[int] = None) -> list[SpinResult]:
        effective_limit = settings.DEFAULT_HISTORY_LIMIT if limit is None else limit
        if effective_limit <= 0:
            return []
        return self._results[-effective_limit:]

    def get_last(self) -> Optional[SpinResult]:
        if not self._results:
            return None
        return self._results[-1]

    def count(self) -> int:
        return len(self._results)

    def count_by_member(self) -> dict[str, dict[str, int]]:
        """Return member id -> {"moderator": n, "note_taker": n}."""
        counts: dict[str, dict[str, int]] = {}
        for result in self._results:
            for role, member in (
                ("moderator", result.moderator),
                ("note_taker", result.note_taker),
            ):
                per_member = counts.setdefault(
                    member.id, {"moderator": 0, "note_taker": 0}
                )
                per_member[role] += 1
        return counts

    # ── Write ──

    def append(self, result: SpinResult) -> SpinResult:
        """Append a round, trimming oldest if over max."""
        self._results.append(result)
        if len(self._results) > settings.MAX_HISTORY_SIZE:
            del self._results[: len(self._results) - settings.MAX_HISTORY_SIZE]
        return result

    def replace_last(self, result: SpinResult) -> SpinResult:
        """Swap the most recent round for an amended copy."""
        if not self._results:
            raise LookupError("History is empty")
        self._results[-1] = result
        return result

    # ── Bulk / internal ──

    def clear(self) -> None:
        self._results.clear()
