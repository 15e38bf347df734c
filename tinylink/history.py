"""Synthesized per-day click history.

Links only store a running total, so the per-day breakdown shown on the
stats view is a random split of that total over the last few days. It is
display filler, not analytics.
"""

import math
import random
from datetime import date, timedelta
from typing import List, Optional

from .models import ClickHistoryPoint


def synthesize_click_history(
    total_clicks: int,
    days: int = 7,
    today: Optional[date] = None,
    rng: Optional[random.Random] = None,
) -> List[ClickHistoryPoint]:
    """Split ``total_clicks`` randomly over the last ``days`` days.

    Days are returned oldest first and named by short weekday ("Mon").
    Each day but the last takes ``floor(random() * remaining / 2)``; the
    last day takes whatever is left, so the values always sum to the total.

    Args:
        total_clicks: Click total to distribute
        days: Number of days, ending today
        today: Last day of the window (defaults to the local date)
        rng: Random source

    Returns:
        List of history points
    """
    if days < 1:
        return []

    rng = rng or random.Random()
    today = today or date.today()
    remaining = max(0, int(total_clicks))

    points = []
    for i in range(days):
        if i == days - 1:
            value = remaining
        else:
            value = math.floor(rng.random() * (remaining / 2))
        remaining -= value
        day = today - timedelta(days=days - 1 - i)
        points.append(ClickHistoryPoint(name=day.strftime("%a"), clicks=max(0, value)))

    return points
