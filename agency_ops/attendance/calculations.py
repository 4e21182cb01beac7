"""Pure attendance arithmetic shared by models, jobs and HR analytics."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

# Older rows were tagged by hand with a lowercase variant.
AUTO_CLOCKOUT_MARKERS = ("[AUTO CLOCK-OUT", "[Auto clock-out")


def work_minutes(
    clock_in: datetime | None,
    clock_out: datetime | None,
    break_minutes: int | None = 0,
) -> int:
    """Whole minutes worked, net of breaks and never negative.

    Returns 0 while the session is still open or was never started.
    """
    if clock_in is None or clock_out is None:
        return 0
    gross = int((clock_out - clock_in).total_seconds() // 60)
    return max(0, gross - int(break_minutes or 0))


def is_auto_clockout(notes: str | None) -> bool:
    if not notes:
        return False
    return any(marker in notes for marker in AUTO_CLOCKOUT_MARKERS)
