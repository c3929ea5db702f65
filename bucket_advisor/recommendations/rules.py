"""
Scoring rule groups: each one maps (bucket, profile) to a score delta plus
match / warning reason strings.

Every bucket starts at ``BASE_SCORE`` (50) and the deltas of all rule groups
are added. Groups are evaluated in the order of ``SCORING_RULES``; the order
only affects the sequence of reason strings, never the numeric total.

Rule groups (weights are fixed product constants, not derived)
--------------------------------------------------------------
1. capital_adequacy  : capital < minimum            -100  (disqualifying)
                       capital >= 10x minimum        +5
2. time_horizon      : short  (<6 mo)   HIGH risk -40, LONG horizon -30,
                                        short-term parking +25
                       medium (6-35 mo) SHORT/MEDIUM horizon +15,
                                        15-year lock-in -20, medium-term +15
                       long   (>=36 mo) LONG horizon +20,
                                        HIGH risk and >=60 mo +10,
                                        wealth builders +15
3. risk_preference   : RISK_MATRIX[user][bucket], -40 .. +30
4. liquidity         : needs liquidity: HIGH +20, LOW -25, lock-in -15
                       otherwise:       lock-in +5
5. goal              : goal served +25 else -10;
                       TAX_SAVING: tax benefit +20 else -15;
                       INCOME: income payers +15
6. experience        : above user -20, below +5, equal +10;
                       beginners: passive +10, direct stocks -15
7. capital_band      : < 50,000: small-ticket +10, large-ticket -10
                       > 1,000,000: extra tax capacity +10, diversifiers +10

Rules that single out archetypes by id use the frozensets below so the
designation lives next to the rule that reads it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from bucket_advisor.models.bucket import InvestmentBucket
from bucket_advisor.models.profile import UserProfile
from bucket_advisor.taxonomy.investment_taxonomy import (
    ExperienceLevel,
    Goal,
    LiquidityLevel,
    RiskLevel,
    TimeHorizon,
    experience_rank,
)
from bucket_advisor.utils.money import format_rupees

BASE_SCORE = 50

CAPITAL_SHORTFALL_PENALTY = -100
COMFORTABLE_CAPITAL_MULTIPLE = 10

SHORT_HORIZON_MAX_MONTHS = 6      # exclusive upper bound of "short"
LONG_HORIZON_MIN_MONTHS = 36      # inclusive lower bound of "long"
VOLATILITY_HORIZON_MONTHS = 60

LOW_CAPITAL_THRESHOLD = 50_000
HIGH_CAPITAL_THRESHOLD = 1_000_000

FIFTEEN_YEAR_LOCK_IN = "15 years"

# user risk preference -> bucket risk level -> delta
RISK_MATRIX: dict[RiskLevel, dict[RiskLevel, int]] = {
    RiskLevel.LOW:    {RiskLevel.LOW: 30, RiskLevel.MEDIUM: -10, RiskLevel.HIGH: -40},
    RiskLevel.MEDIUM: {RiskLevel.LOW: 10, RiskLevel.MEDIUM: 25,  RiskLevel.HIGH: 0},
    RiskLevel.HIGH:   {RiskLevel.LOW: 0,  RiskLevel.MEDIUM: 15,  RiskLevel.HIGH: 30},
}
RISK_MATCH_THRESHOLD = 20
RISK_MISMATCH_THRESHOLD = -20

SHORT_TERM_PARKING_IDS = frozenset({"liquid_fund", "savings_account"})
MEDIUM_TERM_IDS = frozenset({"fd", "debt_fund"})
WEALTH_BUILDER_IDS = frozenset({"index_fund", "equity_mf", "ppf"})
INCOME_PAYER_IDS = frozenset({"fd", "reit", "debt_fund"})
HANDS_ON_IDS = frozenset({"direct_stocks"})
SMALL_TICKET_IDS = frozenset({"index_fund", "liquid_fund"})
LARGE_TICKET_IDS = frozenset({"direct_stocks", "reit"})
EXTRA_TAX_CAPACITY_IDS = frozenset({"nps"})
DIVERSIFIER_IDS = frozenset({"reit", "sgb"})


@dataclass
class RuleOutcome:
    """Result of one rule group for one bucket.

    Attributes:
        delta:           Signed score adjustment.
        match_reasons:   Positive explanations, in emission order.
        warning_reasons: Negative explanations, in emission order.
    """

    delta: int = 0
    match_reasons: list[str] = field(default_factory=list)
    warning_reasons: list[str] = field(default_factory=list)

    def reward(self, points: int, reason: str | None = None) -> None:
        self.delta += points
        if reason:
            self.match_reasons.append(reason)

    def penalize(self, points: int, reason: str | None = None) -> None:
        """Subtract ``points`` (given as a positive number)."""
        self.delta -= points
        if reason:
            self.warning_reasons.append(reason)


RuleFn = Callable[[InvestmentBucket, UserProfile], RuleOutcome]


# ── 1. Capital adequacy ───────────────────────────────────────────────────────

def capital_adequacy_rule(bucket: InvestmentBucket, profile: UserProfile) -> RuleOutcome:
    out = RuleOutcome()
    if profile.capital < bucket.min_investment:
        out.penalize(
            -CAPITAL_SHORTFALL_PENALTY,
            f"Minimum investment is {format_rupees(bucket.min_investment)}",
        )
    elif profile.capital >= bucket.min_investment * COMFORTABLE_CAPITAL_MULTIPLE:
        out.reward(5, "Well within investment range")
    return out


# ── 2. Time horizon ───────────────────────────────────────────────────────────

def time_horizon_rule(bucket: InvestmentBucket, profile: UserProfile) -> RuleOutcome:
    """Branch on the profile horizon: short (<6), medium (6-35), long (>=36)."""
    out = RuleOutcome()
    months = profile.time_horizon_months

    if months < SHORT_HORIZON_MAX_MONTHS:
        if bucket.risk_level == RiskLevel.HIGH:
            out.penalize(40, "Too risky for short-term")
        if bucket.time_horizon == TimeHorizon.LONG:
            out.penalize(30, "This needs longer time commitment")
        if bucket.id in SHORT_TERM_PARKING_IDS:
            out.reward(25, "Perfect for short-term parking")

    elif months < LONG_HORIZON_MIN_MONTHS:
        if bucket.time_horizon in (TimeHorizon.SHORT, TimeHorizon.MEDIUM):
            out.reward(15, "Good time horizon match")
        if bucket.lock_in_period and FIFTEEN_YEAR_LOCK_IN in bucket.lock_in_period:
            out.penalize(20, "Lock-in too long for your horizon")
        if bucket.id in MEDIUM_TERM_IDS:
            out.reward(15, "Ideal for medium-term")

    else:
        if bucket.time_horizon == TimeHorizon.LONG:
            out.reward(20, "Long-term horizon matches well")
        if bucket.risk_level == RiskLevel.HIGH and months >= VOLATILITY_HORIZON_MONTHS:
            out.reward(10, "Time horizon allows for volatility")
        if bucket.id in WEALTH_BUILDER_IDS:
            out.reward(15, "Great for wealth building")

    return out


# ── 3. Risk preference ────────────────────────────────────────────────────────

def risk_preference_rule(bucket: InvestmentBucket, profile: UserProfile) -> RuleOutcome:
    out = RuleOutcome()
    adjustment = RISK_MATRIX[profile.risk_preference][bucket.risk_level]
    out.delta = adjustment
    if adjustment > RISK_MATCH_THRESHOLD:
        out.match_reasons.append("Risk level matches your preference")
    elif adjustment < RISK_MISMATCH_THRESHOLD:
        out.warning_reasons.append("Risk level doesn't match your preference")
    return out


# ── 4. Liquidity ──────────────────────────────────────────────────────────────

def liquidity_rule(bucket: InvestmentBucket, profile: UserProfile) -> RuleOutcome:
    out = RuleOutcome()
    if profile.needs_liquidity:
        if bucket.liquidity == LiquidityLevel.HIGH:
            out.reward(20, "Highly liquid - access anytime")
        elif bucket.liquidity == LiquidityLevel.LOW:
            out.penalize(25, "Money will be locked")
        if bucket.has_lock_in:
            out.penalize(15, f"Lock-in: {bucket.lock_in_period}")
    elif bucket.has_lock_in:
        out.reward(5, "Lock-in is okay for you")
    return out


# ── 5. Goal ───────────────────────────────────────────────────────────────────

def goal_rule(bucket: InvestmentBucket, profile: UserProfile) -> RuleOutcome:
    out = RuleOutcome()
    if profile.goal in bucket.goals:
        out.reward(25, f"Matches your {profile.goal.label} goal")
    else:
        out.penalize(10)

    if profile.goal == Goal.TAX_SAVING:
        if bucket.tax_benefit:
            out.reward(20, f"Tax benefit: {bucket.tax_benefit}")
        else:
            out.penalize(15, "No tax benefit")

    if profile.goal == Goal.INCOME and bucket.id in INCOME_PAYER_IDS:
        out.reward(15, "Provides regular income")

    return out


# ── 6. Experience ─────────────────────────────────────────────────────────────

def experience_rule(bucket: InvestmentBucket, profile: UserProfile) -> RuleOutcome:
    out = RuleOutcome()
    required = experience_rank(bucket.experience_required)
    user = experience_rank(profile.experience)

    if required > user:
        out.penalize(20, "May require more experience")
    elif required < user:
        out.reward(5, "Within your experience level")
    else:
        out.reward(10, "Perfect for your experience level")

    if profile.experience == ExperienceLevel.BEGINNER:
        if bucket.is_passive:
            out.reward(10, "Passive investment - no active effort")
        if bucket.id in HANDS_ON_IDS:
            out.penalize(15, "Direct stocks require learning")

    return out


# ── 7. Capital bands ──────────────────────────────────────────────────────────

def capital_band_rule(bucket: InvestmentBucket, profile: UserProfile) -> RuleOutcome:
    out = RuleOutcome()
    if profile.capital < LOW_CAPITAL_THRESHOLD:
        if bucket.id in SMALL_TICKET_IDS:
            out.reward(10, "Great for starting with small amounts")
        if bucket.id in LARGE_TICKET_IDS:
            out.penalize(10, "Consider building base first")

    if profile.capital > HIGH_CAPITAL_THRESHOLD:
        if bucket.id in EXTRA_TAX_CAPACITY_IDS:
            out.reward(10, "Extra ₹50K tax benefit adds up")
        if bucket.id in DIVERSIFIER_IDS:
            out.reward(10, "Good for diversification at your level")

    return out


SCORING_RULES: tuple[RuleFn, ...] = (
    capital_adequacy_rule,
    time_horizon_rule,
    risk_preference_rule,
    liquidity_rule,
    goal_rule,
    experience_rule,
    capital_band_rule,
)
