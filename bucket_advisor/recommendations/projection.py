"""
Illustrative return projection for display next to a recommendation.

``expected_returns`` on a bucket is free text ("6-8% p.a.", "Varies wildly:
-50% to +100%+"). For display we take the first number in that text as an
annual percentage and compound the user's capital over their horizon.
This is a teaching aid, not a forecast. Volatility and tax are ignored and
only the low end of a range is used.

A projected value can also be placed on a wealth milestone ladder
(1 Lakh Club up to the 5 Crore Club) for the share summary.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Optional

DEFAULT_RETURN_PCT = 7.0

_FIRST_NUMBER = re.compile(r"(\d+(?:\.\d+)?)")


@dataclass(frozen=True)
class Milestone:
    """One rung of the wealth milestone ladder.

    Attributes:
        level:     1 for the lowest rung.
        title:     Display name, e.g. "1 Lakh Club".
        emoji:     Badge shown next to the title.
        min_value: Smallest value (rupees) that reaches this rung.
        next_at:   Value at which the next rung starts.
    """

    level: int
    title: str
    emoji: str
    min_value: float
    next_at: float


MILESTONES: tuple[Milestone, ...] = (
    Milestone(1, "1 Lakh Club", "🥉", 100_000, 500_000),
    Milestone(2, "5 Lakh Club", "🥈", 500_000, 1_000_000),
    Milestone(3, "10 Lakh Club", "🥇", 1_000_000, 2_500_000),
    Milestone(4, "25 Lakh Club", "💎", 2_500_000, 5_000_000),
    Milestone(5, "50 Lakh Club", "👑", 5_000_000, 10_000_000),
    Milestone(6, "Crorepati Club", "🏆", 10_000_000, 50_000_000),
    Milestone(7, "5 Crore Club", "🚀", 50_000_000, 100_000_000),
)


def parse_expected_return_pct(text: str) -> float:
    """Return the first number in ``text``, or ``DEFAULT_RETURN_PCT`` if none."""
    match = _FIRST_NUMBER.search(text or "")
    if match:
        return float(match.group(1))
    return DEFAULT_RETURN_PCT


def project_future_value(principal: float, annual_rate_pct: float, months: int) -> float:
    """Compound ``principal`` annually at ``annual_rate_pct`` for ``months``.

    Args:
        principal:       Starting amount in rupees.
        annual_rate_pct: Annual rate in percent (7.0 = 7%).
        months:          Holding period; fractional years are compounded.

    Returns:
        Projected value in rupees (not rounded). Growth too large for a
        float yields ``math.inf`` with the sign of ``principal``.
    """
    years = months / 12
    try:
        growth = (1 + annual_rate_pct / 100) ** years
    except OverflowError:
        if principal == 0:
            return 0.0
        return math.copysign(math.inf, principal)
    return principal * growth


def milestone_for(value: float) -> Optional[Milestone]:
    """Return the highest milestone ``value`` has reached, or None below the first."""
    for milestone in reversed(MILESTONES):
        if value >= milestone.min_value:
            return milestone
    return None
