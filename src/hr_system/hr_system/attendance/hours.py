from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.constants import HOURS_PRECISION


def hours_between(clock_in: datetime, clock_out: Optional[datetime]) -> Optional[float]:
    """Elapsed time from clock-in to clock-out in fractional hours.

    None while the record is still open. A clock-out before the clock-in gives a
    negative value; rejecting that is the caller's decision.
    """

    if clock_out is None:
        return None
    return round((clock_out - clock_in).total_seconds() / 3600, HOURS_PRECISION)
