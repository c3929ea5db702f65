"""
Recommendation scoring: converts one (InvestmentBucket, UserProfile) pair
into a ScoredBucket with score, fit tier, reasons, and a short rationale.

Score
-----
    score = clamp(BASE_SCORE + sum(rule.delta for rule in SCORING_RULES), 0, 100)

A bucket the user cannot afford keeps its place in the scored set with a
near-zero score (the -100 capital penalty) so the "why not" stays
inspectable; removal happens in the ranker's display filter.

Fit tier (from the clamped score)
---------------------------------
    >= 80  EXCELLENT
    >= 60  GOOD
    >= 40  MODERATE
    else   POOR

Rationale ("why this fits you")
-------------------------------
Clauses are collected in priority order and the first three are joined:
    1. opening, keyed to the fit tier (always present)
    2. risk alignment, when bucket risk equals the user's preference
    3. goal clause, keyed to the user's goal
    4. beginner suitability, when bucket and user are both BEGINNER
    5. liquidity, when the user needs liquidity and the bucket is HIGH
    6. compounding, when horizon >= 60 months and the bucket is LONG
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from bucket_advisor.models.bucket import InvestmentBucket
from bucket_advisor.models.profile import UserProfile
from bucket_advisor.recommendations.rules import BASE_SCORE, SCORING_RULES
from bucket_advisor.taxonomy.investment_taxonomy import (
    ExperienceLevel,
    FitLevel,
    Goal,
    LiquidityLevel,
    RiskLevel,
    TimeHorizon,
)
from bucket_advisor.utils.money import format_rupees, horizon_label

MIN_SCORE = 0
MAX_SCORE = 100
MAX_RATIONALE_CLAUSES = 3
COMPOUNDING_HORIZON_MONTHS = 60

_FIT_THRESHOLDS: tuple[tuple[int, FitLevel], ...] = (
    (80, FitLevel.EXCELLENT),
    (60, FitLevel.GOOD),
    (40, FitLevel.MODERATE),
)


@dataclass(frozen=True)
class ScoredBucket:
    """A catalog bucket evaluated against one profile (immutable).

    Attributes:
        bucket:            The originating catalog bucket (shared, read-only).
        score:             Suitability score in [0, 100].
        match_reasons:     Positive reasons, in rule order.
        warning_reasons:   Negative reasons, in rule order.
        fit_level:         Tier derived from ``score``.
        why_this_fits_you: Generated rationale (one to three sentences).
    """

    bucket:            InvestmentBucket
    score:             int
    match_reasons:     tuple[str, ...]
    warning_reasons:   tuple[str, ...]
    fit_level:         FitLevel
    why_this_fits_you: str


def score_bucket(bucket: InvestmentBucket, profile: UserProfile) -> ScoredBucket:
    """Evaluate every rule group for one bucket and assemble the result.

    Never raises for a structurally valid bucket and profile.
    """
    total = BASE_SCORE
    match_reasons: list[str] = []
    warning_reasons: list[str] = []

    for rule in SCORING_RULES:
        outcome = rule(bucket, profile)
        total += outcome.delta
        match_reasons.extend(outcome.match_reasons)
        warning_reasons.extend(outcome.warning_reasons)

    score = _clamp(total, MIN_SCORE, MAX_SCORE)
    fit_level = determine_fit_level(score)

    return ScoredBucket(
        bucket=bucket,
        score=score,
        match_reasons=tuple(match_reasons),
        warning_reasons=tuple(warning_reasons),
        fit_level=fit_level,
        why_this_fits_you=build_why_this_fits_you(
            bucket, profile, match_reasons, fit_level
        ),
    )


def determine_fit_level(score: float) -> FitLevel:
    """Map a score to its fit tier (first threshold met wins)."""
    for threshold, level in _FIT_THRESHOLDS:
        if score >= threshold:
            return level
    return FitLevel.POOR


def build_why_this_fits_you(
    bucket:        InvestmentBucket,
    profile:       UserProfile,
    match_reasons: Sequence[str],
    fit_level:     FitLevel,
) -> str:
    """Compose the personalised rationale for one scored bucket.

    ``match_reasons`` is accepted so callers can pass the full evaluation
    context; the current clause set is driven by bucket and profile fields.

    Returns:
        Non-empty string of at most ``MAX_RATIONALE_CLAUSES`` sentences.
    """
    time_label = horizon_label(profile.time_horizon_months)
    clauses: list[str] = []

    # Opening
    if fit_level == FitLevel.EXCELLENT:
        clauses.append(
            f"This is a great match for your {format_rupees(profile.capital)} "
            f"over {time_label}."
        )
    elif fit_level == FitLevel.GOOD:
        clauses.append(f"This works well for your {time_label} investment horizon.")
    else:
        clauses.append("Consider this option for your portfolio.")

    # Risk alignment
    if bucket.risk_level == profile.risk_preference:
        if profile.risk_preference == RiskLevel.LOW:
            clauses.append(
                f"Your capital stays safe with {bucket.risk_level.value.lower()} risk."
            )
        elif profile.risk_preference == RiskLevel.HIGH:
            clauses.append("Matches your appetite for higher growth potential.")
        else:
            clauses.append("Balanced risk-reward suits your preference.")

    # Goal
    if profile.goal == Goal.TAX_SAVING and bucket.tax_benefit:
        clauses.append("Saves you tax under Section 80C.")
    elif profile.goal == Goal.GROWTH and bucket.risk_level != RiskLevel.LOW:
        clauses.append("Built for wealth accumulation over time.")
    elif profile.goal == Goal.SAFETY:
        clauses.append("Focuses on protecting your principal.")
    elif profile.goal == Goal.INCOME:
        clauses.append("Provides regular income stream.")

    # Beginner suitability
    if (
        bucket.experience_required == ExperienceLevel.BEGINNER
        and profile.experience == ExperienceLevel.BEGINNER
    ):
        clauses.append("Perfect for beginners - no complex decisions needed.")

    # Liquidity
    if profile.needs_liquidity and bucket.liquidity == LiquidityLevel.HIGH:
        clauses.append("You can access your money anytime if needed.")

    # Compounding
    if (
        profile.time_horizon_months >= COMPOUNDING_HORIZON_MONTHS
        and bucket.time_horizon == TimeHorizon.LONG
    ):
        clauses.append(f"Your {time_label} horizon allows compounding to work its magic.")

    return " ".join(clauses[:MAX_RATIONALE_CLAUSES])


# ── Helper ────────────────────────────────────────────────────────────────────

def _clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, value))
