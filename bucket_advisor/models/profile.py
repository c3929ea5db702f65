"""
User profile model - the single input to the recommendation engine.

A ``UserProfile`` is built per request and discarded after ranking; it is
never persisted. The choice fields are closed enums and are validated by
pydantic. The numeric fields are not range-checked: a negative capital
simply fails every minimum-investment check and a non-positive horizon
falls into the short-term branch. Capital must be finite: infinity and
NaN are rejected.

Callers that accept raw form input (the CLI) should go through
``UserProfile.from_form()``, which applies the coercions a form layer is
expected to perform before calling the engine.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from bucket_advisor.taxonomy.investment_taxonomy import (
    ExperienceLevel,
    Goal,
    RiskLevel,
)

DEFAULT_FALLBACK_HORIZON_MONTHS = 12


class UserProfile(BaseModel):
    """Immutable financial profile of one user.

    Attributes:
        capital: Amount available to invest, in rupees.
        time_horizon_months: Intended holding period in months.
        risk_preference: Tolerated ``RiskLevel``.
        needs_liquidity: Whether the money may be needed at short notice.
        goal: Primary ``Goal``.
        experience: Investor ``ExperienceLevel``.
    """

    model_config = ConfigDict(frozen=True)

    capital: float = Field(allow_inf_nan=False)
    time_horizon_months: int
    risk_preference: RiskLevel
    needs_liquidity: bool = False
    goal: Goal
    experience: ExperienceLevel

    @classmethod
    def from_form(
        cls,
        capital: Optional[float],
        time_horizon_months: Optional[int],
        risk_preference: RiskLevel | str,
        needs_liquidity: bool,
        goal: Goal | str,
        experience: ExperienceLevel | str,
        fallback_horizon_months: int = DEFAULT_FALLBACK_HORIZON_MONTHS,
    ) -> "UserProfile":
        """Build a profile from raw form values, coercing numbers to sane defaults.

        Missing or negative capital becomes 0. A missing or non-positive
        horizon becomes ``fallback_horizon_months``.

        Raises:
            pydantic.ValidationError: If a choice field is not a valid member
                or capital is infinite or NaN.
        """
        if capital is None or capital < 0:
            capital = 0
        if time_horizon_months is None or time_horizon_months <= 0:
            time_horizon_months = fallback_horizon_months

        return cls(
            capital=capital,
            time_horizon_months=time_horizon_months,
            risk_preference=risk_preference,
            needs_liquidity=needs_liquidity,
            goal=goal,
            experience=experience,
        )
