# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Fair-rotation selection — pure computation, no side effects.

Narrows the eligible members to the tier that has waited longest for a role
(never served first, then earliest timestamp), draws uniformly from that tier,
and optionally applies a skew rule that lets one designated member keep a win
only with a small probability. No I/O, no metrics, no logging.
"""

import math
import random
from typing import Callable, Iterable, Optional, Protocol, Sequence

from pydantic import BaseModel, ConfigDict, Field

from standup_wheel.models.domain import Member, RoleKey


class EmptyRosterError(ValueError):
    """Raised when the selector is handed zero members."""


class RandomSource(Protocol):
    def random(self) -> float: ...


class SkewRule(BaseModel):
    """Reduced-probability override for members matched by ``matcher``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    matcher: Callable[[Member], bool]
    accept_probability: float = Field(default=0.05, ge=0.0, le=1.0)

    @classmethod
    def for_name(cls, name: str, accept_probability: float = 0.05) -> "SkewRule":
        """Skew a member by case-insensitive name."""
        return cls(
            matcher=lambda member: member.has_name(name),
            accept_probability=accept_probability,
        )

    def matches(self, member: Member) -> bool:
        return bool(self.matcher(member))


def priority_key(member: Member, role_key: RoleKey) -> tuple:
    """Sort key: never served sorts first, then longest-idle first."""
    served_at = member.last_served(role_key)
    if served_at is None:
        return (0,)
    return (1, served_at)


def _draw(candidates: Sequence[Member], rng: RandomSource) -> Member:
    index = math.floor(rng.random() * len(candidates))
    return candidates[min(index, len(candidates) - 1)]


def select_with_fair_rotation(
    members: Sequence[Member],
    role_key: RoleKey,
    exclude_ids: Iterable[str] = (),
    *,
    rng: Optional[RandomSource] = None,
    skew: Optional[SkewRule] = None,
) -> Member:
    """
    Pick one member for ``role_key``.
    Exclusions are soft: if they would leave nobody, they are dropped.
    Raises EmptyRosterError if ``members`` is empty.
    """
    if not members:
        raise EmptyRosterError("No members available for selection")

    excluded = set(exclude_ids)
    eligible = [m for m in members if m.id not in excluded] or list(members)
    if len(eligible) == 1:
        return eligible[0]

    rng = rng if rng is not None else random.Random()

    ranked = sorted(eligible, key=lambda m: priority_key(m, role_key))
    best = priority_key(ranked[0], role_key)
    tier = [m for m in ranked if priority_key(m, role_key) == best]

    winner = _draw(tier, rng)
    if skew is None or not skew.matches(winner):
        return winner
    if rng.random() <= skew.accept_probability:
        return winner

    # May reach past the tier into members with a worse priority.
    fallback = [m for m in tier if not skew.matches(m)] or [
        m for m in eligible if not skew.matches(m)
    ]
    if not fallback:
        return winner
    return _draw(fallback, rng)
