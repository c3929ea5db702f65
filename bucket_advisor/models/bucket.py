"""
Investment bucket model.

An ``InvestmentBucket`` is an archetype of investment vehicle ("Fixed
Deposit", "Index Fund"), not a specific product. It carries two kinds of
fields:

  - Decision attributes (risk, liquidity, minimum ticket, horizon, lock-in,
    goals, experience, effort, tax benefit) read by the scoring rules.
  - Descriptive attributes (what it is, reasons, warnings, how to start,
    platforms) carried through to output untouched.

Buckets are created once when the catalog module is imported and are
shared read-only by every evaluation, so the model is frozen and every
collection field is a tuple or frozenset.

``lock_in_period`` presence is meaningful on its own: the liquidity rule
treats any lock-in text as a withdrawal restriction regardless of duration.
"""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from bucket_advisor.taxonomy.investment_taxonomy import (
    ExperienceLevel,
    Goal,
    LiquidityLevel,
    RiskLevel,
    TimeHorizon,
)

PASSIVE_EFFORT = "0 mins"

_ID_PATTERN = re.compile(r"^[a-z][a-z0-9_]*$")


class InvestmentBucket(BaseModel):
    """A named investment vehicle archetype with fixed attributes.

    Attributes:
        id: Stable snake_case identifier, e.g. ``"index_fund"``.
        name: Display name.
        emoji: Single display glyph.
        description: One-line summary.
        category: Free-text category label, e.g. ``"Extremely Safe"``.
        risk_level: ``RiskLevel`` classification.
        liquidity: ``LiquidityLevel`` classification.
        min_investment: Minimum ticket in rupees (>= 0).
        expected_returns: Display-only returns annotation.
        time_horizon: ``TimeHorizon`` class the bucket suits.
        lock_in_period: Optional lock-in descriptor; ``None`` = no lock-in.
        goals: Non-empty set of ``Goal`` values the bucket serves.
        experience_required: Minimum ``ExperienceLevel``.
        effort_per_week: Time commitment text; ``"0 mins"`` = passive.
        what_it_is: Plain-language explanation.
        why_consider: Reasons to consider.
        warnings: Known drawbacks.
        how_to_start: Ordered getting-started steps.
        platforms: Example platforms.
        tax_benefit: Optional deduction descriptor (e.g. Section 80C).
        tax_on_returns: Optional taxation-of-returns descriptor.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    emoji: str = ""
    description: str = ""
    category: str
    risk_level: RiskLevel
    liquidity: LiquidityLevel
    min_investment: int
    expected_returns: str
    time_horizon: TimeHorizon
    lock_in_period: Optional[str] = None
    goals: frozenset[Goal]
    experience_required: ExperienceLevel
    effort_per_week: str = PASSIVE_EFFORT
    what_it_is: str = ""
    why_consider: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    how_to_start: tuple[str, ...] = ()
    platforms: tuple[str, ...] = ()
    tax_benefit: Optional[str] = None
    tax_on_returns: Optional[str] = None

    @field_validator("id")
    @classmethod
    def validate_id_format(cls, v: str) -> str:
        if not _ID_PATTERN.match(v):
            raise ValueError(
                f"Bucket id '{v}' must be lowercase snake_case."
            )
        return v

    @field_validator("min_investment")
    @classmethod
    def validate_min_investment(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"min_investment must be >= 0, got {v}.")
        return v

    @field_validator("goals")
    @classmethod
    def validate_goals_not_empty(cls, v: frozenset[Goal]) -> frozenset[Goal]:
        if not v:
            raise ValueError("goals must contain at least one Goal.")
        return v

    @property
    def has_lock_in(self) -> bool:
        return bool(self.lock_in_period)

    @property
    def is_passive(self) -> bool:
        """True when the bucket needs no weekly effort."""
        return self.effort_per_week == PASSIVE_EFFORT
