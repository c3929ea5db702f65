"""
Investment taxonomy: the closed vocabularies used by the catalog and scorer.

Every decision attribute on an ``InvestmentBucket`` and every choice on a
``UserProfile`` is one of the enums below. The scoring lookup tables (e.g.
the risk alignment matrix) are keyed on these enums and must cover every
member, so adding a member here means extending those tables too.

Run ``tests/test_taxonomy/test_investment_taxonomy.py`` to verify the
ordering and coverage contracts.

This module has NO imports from any other ``bucket_advisor`` package.
"""

from enum import StrEnum


class RiskLevel(StrEnum):
    """How much the value of the bucket can swing."""

    LOW = "LOW"
    """Capital protected or near-protected (deposits, government schemes)."""

    MEDIUM = "MEDIUM"
    """Some market exposure; drawdowns are possible but usually moderate."""

    HIGH = "HIGH"
    """Full equity-style exposure; large drawdowns are expected."""


class LiquidityLevel(StrEnum):
    """How quickly money can be taken out without penalty."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class TimeHorizon(StrEnum):
    """Holding period the bucket is designed for."""

    SHORT = "SHORT"
    MEDIUM = "MEDIUM"
    LONG = "LONG"


class Goal(StrEnum):
    """User investment objective."""

    SAFETY = "SAFETY"
    GROWTH = "GROWTH"
    INCOME = "INCOME"
    TAX_SAVING = "TAX_SAVING"

    @property
    def label(self) -> str:
        """Lowercase display form, e.g. ``"tax saving"``."""
        return self.value.lower().replace("_", " ")


class ExperienceLevel(StrEnum):
    """Investor experience, ordered BEGINNER < INTERMEDIATE < ADVANCED."""

    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"


class FitLevel(StrEnum):
    """Qualitative fit tier derived purely from a bucket's score."""

    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    MODERATE = "MODERATE"
    POOR = "POOR"


class SortOrder(StrEnum):
    """Display orderings for a ranked recommendation list."""

    FIT = "fit"
    """Engine order: score descending, catalog order on ties."""

    EARNINGS = "earnings"
    """Highest headline expected return first."""

    RISK = "risk"
    """Lowest risk first."""


# ── Ordering contracts ────────────────────────────────────────────────────────

EXPERIENCE_ORDER: tuple[ExperienceLevel, ...] = (
    ExperienceLevel.BEGINNER,
    ExperienceLevel.INTERMEDIATE,
    ExperienceLevel.ADVANCED,
)

RISK_ORDER: tuple[RiskLevel, ...] = (
    RiskLevel.LOW,
    RiskLevel.MEDIUM,
    RiskLevel.HIGH,
)


def experience_rank(level: ExperienceLevel) -> int:
    """Return the 0-based ordinal position of an experience level."""
    return EXPERIENCE_ORDER.index(level)


def risk_rank(level: RiskLevel) -> int:
    """Return the 0-based ordinal position of a risk level (LOW = 0)."""
    return RISK_ORDER.index(level)
