# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Updated by the service layer only. The selector never touches them.
"""

from prometheus_client import Counter, Gauge, generate_latest

SELECTIONS_TOTAL = Counter(
    "standup_selections_total",
    "Total role selections performed by the fair-rotation selector",
    ["role"],
)
EXCLUSION_FALLBACKS = Counter(
    "standup_exclusion_fallbacks_total",
    "Selections where the exclusion set emptied the pool and was discarded",
    ["role"],
)
ROUNDS_COMPLETED = Counter(
    "standup_rounds_completed_total",
    "Total rounds completed (moderator and note-taker assigned)",
)
MANUAL_OVERRIDES = Counter(
    "standup_manual_overrides_total",
    "Total manual after-the-fact role assignments",
    ["role"],
)
ACTIVE_MEMBERS = Gauge(
    "standup_active_members",
    "Number of roster members active this week",
)
HISTORY_SIZE = Gauge(
    "standup_history_entries",
    "Number of round outcomes in the history log",
)


def render_latest() -> bytes:
    """Current metric values in the Prometheus text exposition format."""
    return generate_latest()
