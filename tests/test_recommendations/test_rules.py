"""
Tests for bucket_advisor/recommendations/rules.py.

Each rule group is exercised in isolation against hand-built buckets and
profiles; deltas and reason strings are asserted exactly because both are
user-visible.
"""

from __future__ import annotations

import pytest

from bucket_advisor.recommendations.rules import (
    RISK_MATRIX,
    SCORING_RULES,
    RuleOutcome,
    capital_adequacy_rule,
    capital_band_rule,
    experience_rule,
    goal_rule,
    liquidity_rule,
    risk_preference_rule,
    time_horizon_rule,
)
from bucket_advisor.taxonomy.investment_taxonomy import (
    ExperienceLevel,
    Goal,
    LiquidityLevel,
    RiskLevel,
    TimeHorizon,
)


# ── RuleOutcome ───────────────────────────────────────────────────────────────

class TestRuleOutcome:
    def test_reward_and_penalize(self):
        out = RuleOutcome()
        out.reward(10, "good")
        out.penalize(4, "bad")
        out.penalize(1)
        assert out.delta == 5
        assert out.match_reasons == ["good"]
        assert out.warning_reasons == ["bad"]

    def test_rule_order(self):
        names = [rule.__name__ for rule in SCORING_RULES]
        assert names == [
            "capital_adequacy_rule",
            "time_horizon_rule",
            "risk_preference_rule",
            "liquidity_rule",
            "goal_rule",
            "experience_rule",
            "capital_band_rule",
        ]


# ── 1. Capital adequacy ───────────────────────────────────────────────────────

class TestCapitalAdequacy:
    def test_shortfall_is_disqualifying(self, make_bucket, make_profile):
        out = capital_adequacy_rule(make_bucket(min_investment=1000), make_profile(capital=100))
        assert out.delta == -100
        assert out.warning_reasons == ["Minimum investment is ₹1,000"]
        assert out.match_reasons == []

    def test_minimum_formatted_with_indian_grouping(self, make_bucket, make_profile):
        out = capital_adequacy_rule(make_bucket(min_investment=100_000), make_profile(capital=0))
        assert out.warning_reasons == ["Minimum investment is ₹1,00,000"]

    def test_exactly_minimum_is_neutral(self, make_bucket, make_profile):
        out = capital_adequacy_rule(make_bucket(min_investment=1000), make_profile(capital=1000))
        assert out.delta == 0
        assert out.match_reasons == [] and out.warning_reasons == []

    def test_ten_times_minimum_is_rewarded(self, make_bucket, make_profile):
        out = capital_adequacy_rule(make_bucket(min_investment=1000), make_profile(capital=10_000))
        assert out.delta == 5
        assert out.match_reasons == ["Well within investment range"]

    def test_zero_minimum_with_zero_capital(self, make_bucket, make_profile):
        out = capital_adequacy_rule(make_bucket(min_investment=0), make_profile(capital=0))
        assert out.delta == 5

    def test_negative_capital_fails_even_zero_minimum(self, make_bucket, make_profile):
        out = capital_adequacy_rule(make_bucket(min_investment=0), make_profile(capital=-1))
        assert out.delta == -100


# ── 2. Time horizon ───────────────────────────────────────────────────────────

class TestTimeHorizonShort:
    def test_high_risk_long_bucket_doubly_penalised(self, make_bucket, make_profile):
        bucket = make_bucket(risk_level=RiskLevel.HIGH, time_horizon=TimeHorizon.LONG)
        out = time_horizon_rule(bucket, make_profile(time_horizon_months=3))
        assert out.delta == -70
        assert out.warning_reasons == [
            "Too risky for short-term",
            "This needs longer time commitment",
        ]

    def test_short_term_parking(self, make_bucket, make_profile):
        out = time_horizon_rule(make_bucket(id="liquid_fund"), make_profile(time_horizon_months=5))
        assert out.delta == 25
        assert out.match_reasons == ["Perfect for short-term parking"]

    def test_zero_months_is_short(self, make_bucket, make_profile):
        out = time_horizon_rule(make_bucket(id="savings_account"), make_profile(time_horizon_months=0))
        assert out.delta == 25


class TestTimeHorizonMedium:
    @pytest.mark.parametrize("months", [6, 12, 35])
    def test_boundaries_are_medium(self, make_bucket, make_profile, months):
        out = time_horizon_rule(make_bucket(), make_profile(time_horizon_months=months))
        assert out.delta == 15
        assert out.match_reasons == ["Good time horizon match"]

    def test_medium_term_id_bonus(self, make_bucket, make_profile):
        out = time_horizon_rule(make_bucket(id="fd"), make_profile(time_horizon_months=12))
        assert out.delta == 30
        assert out.match_reasons == ["Good time horizon match", "Ideal for medium-term"]

    def test_fifteen_year_lock_in_penalised(self, make_bucket, make_profile):
        bucket = make_bucket(
            time_horizon=TimeHorizon.LONG,
            lock_in_period="15 years (partial withdrawal after 6 years)",
        )
        out = time_horizon_rule(bucket, make_profile(time_horizon_months=24))
        assert out.delta == -20
        assert out.warning_reasons == ["Lock-in too long for your horizon"]

    def test_long_bucket_no_match(self, make_bucket, make_profile):
        out = time_horizon_rule(
            make_bucket(time_horizon=TimeHorizon.LONG), make_profile(time_horizon_months=24),
        )
        assert out.delta == 0


class TestTimeHorizonLong:
    def test_long_bucket_at_36_months(self, make_bucket, make_profile):
        bucket = make_bucket(risk_level=RiskLevel.HIGH, time_horizon=TimeHorizon.LONG)
        out = time_horizon_rule(bucket, make_profile(time_horizon_months=36))
        assert out.delta == 20
        assert out.match_reasons == ["Long-term horizon matches well"]

    def test_volatility_bonus_from_60_months(self, make_bucket, make_profile):
        bucket = make_bucket(risk_level=RiskLevel.HIGH, time_horizon=TimeHorizon.LONG)
        out = time_horizon_rule(bucket, make_profile(time_horizon_months=60))
        assert out.delta == 30
        assert out.match_reasons == [
            "Long-term horizon matches well",
            "Time horizon allows for volatility",
        ]

    def test_wealth_builder(self, make_bucket, make_profile):
        bucket = make_bucket(id="index_fund", time_horizon=TimeHorizon.LONG)
        out = time_horizon_rule(bucket, make_profile(time_horizon_months=120))
        assert out.delta == 35

    def test_short_bucket_no_match(self, make_bucket, make_profile):
        out = time_horizon_rule(make_bucket(), make_profile(time_horizon_months=48))
        assert out.delta == 0


# ── 3. Risk preference ────────────────────────────────────────────────────────

class TestRiskPreference:
    @pytest.mark.parametrize(
        "preference, bucket_risk, expected",
        [
            (RiskLevel.LOW, RiskLevel.LOW, 30),
            (RiskLevel.LOW, RiskLevel.MEDIUM, -10),
            (RiskLevel.LOW, RiskLevel.HIGH, -40),
            (RiskLevel.MEDIUM, RiskLevel.LOW, 10),
            (RiskLevel.MEDIUM, RiskLevel.MEDIUM, 25),
            (RiskLevel.MEDIUM, RiskLevel.HIGH, 0),
            (RiskLevel.HIGH, RiskLevel.LOW, 0),
            (RiskLevel.HIGH, RiskLevel.MEDIUM, 15),
            (RiskLevel.HIGH, RiskLevel.HIGH, 30),
        ],
    )
    def test_matrix(self, make_bucket, make_profile, preference, bucket_risk, expected):
        out = risk_preference_rule(
            make_bucket(risk_level=bucket_risk), make_profile(risk_preference=preference),
        )
        assert out.delta == expected == RISK_MATRIX[preference][bucket_risk]

    def test_strong_match_reason(self, make_bucket, make_profile):
        out = risk_preference_rule(
            make_bucket(risk_level=RiskLevel.MEDIUM),
            make_profile(risk_preference=RiskLevel.MEDIUM),
        )
        assert out.match_reasons == ["Risk level matches your preference"]

    def test_strong_mismatch_reason(self, make_bucket, make_profile):
        out = risk_preference_rule(
            make_bucket(risk_level=RiskLevel.HIGH),
            make_profile(risk_preference=RiskLevel.LOW),
        )
        assert out.warning_reasons == ["Risk level doesn't match your preference"]

    def test_mild_adjustments_have_no_reason(self, make_bucket, make_profile):
        out = risk_preference_rule(
            make_bucket(risk_level=RiskLevel.MEDIUM),
            make_profile(risk_preference=RiskLevel.LOW),
        )
        assert out.delta == -10
        assert out.match_reasons == [] and out.warning_reasons == []


# ── 4. Liquidity ──────────────────────────────────────────────────────────────

class TestLiquidity:
    def test_needs_liquidity_high_bucket(self, make_bucket, make_profile):
        out = liquidity_rule(make_bucket(), make_profile(needs_liquidity=True))
        assert out.delta == 20
        assert out.match_reasons == ["Highly liquid - access anytime"]

    def test_needs_liquidity_locked_low_bucket(self, make_bucket, make_profile):
        bucket = make_bucket(liquidity=LiquidityLevel.LOW, lock_in_period="5 years")
        out = liquidity_rule(bucket, make_profile(needs_liquidity=True))
        assert out.delta == -40
        assert out.warning_reasons == ["Money will be locked", "Lock-in: 5 years"]

    def test_needs_liquidity_medium_bucket_with_lock_in(self, make_bucket, make_profile):
        bucket = make_bucket(liquidity=LiquidityLevel.MEDIUM, lock_in_period="8 years")
        out = liquidity_rule(bucket, make_profile(needs_liquidity=True))
        assert out.delta == -15
        assert out.warning_reasons == ["Lock-in: 8 years"]

    def test_lock_in_acceptable_without_liquidity_need(self, make_bucket, make_profile):
        bucket = make_bucket(liquidity=LiquidityLevel.LOW, lock_in_period="3 years")
        out = liquidity_rule(bucket, make_profile(needs_liquidity=False))
        assert out.delta == 5
        assert out.match_reasons == ["Lock-in is okay for you"]

    def test_no_need_no_lock_in_is_neutral(self, make_bucket, make_profile):
        out = liquidity_rule(make_bucket(), make_profile(needs_liquidity=False))
        assert out.delta == 0


# ── 5. Goal ───────────────────────────────────────────────────────────────────

class TestGoal:
    def test_goal_served(self, make_bucket, make_profile):
        out = goal_rule(make_bucket(goals={Goal.GROWTH}), make_profile(goal=Goal.GROWTH))
        assert out.delta == 25
        assert out.match_reasons == ["Matches your growth goal"]

    def test_goal_not_served_has_no_reason(self, make_bucket, make_profile):
        out = goal_rule(make_bucket(goals={Goal.SAFETY}), make_profile(goal=Goal.GROWTH))
        assert out.delta == -10
        assert out.match_reasons == [] and out.warning_reasons == []

    def test_tax_saving_without_benefit(self, make_bucket, make_profile):
        out = goal_rule(make_bucket(goals={Goal.GROWTH}), make_profile(goal=Goal.TAX_SAVING))
        assert out.delta == -25
        assert out.warning_reasons == ["No tax benefit"]

    def test_tax_saving_with_benefit(self, make_bucket, make_profile):
        bucket = make_bucket(goals={Goal.TAX_SAVING}, tax_benefit="Section 80C")
        out = goal_rule(bucket, make_profile(goal=Goal.TAX_SAVING))
        assert out.delta == 45
        assert out.match_reasons == [
            "Matches your tax saving goal",
            "Tax benefit: Section 80C",
        ]

    def test_income_payer_bonus(self, make_bucket, make_profile):
        bucket = make_bucket(id="reit", goals={Goal.INCOME, Goal.GROWTH})
        out = goal_rule(bucket, make_profile(goal=Goal.INCOME))
        assert out.delta == 40
        assert out.match_reasons[-1] == "Provides regular income"

    def test_income_bonus_needs_income_goal(self, make_bucket, make_profile):
        bucket = make_bucket(id="reit", goals={Goal.INCOME, Goal.GROWTH})
        out = goal_rule(bucket, make_profile(goal=Goal.GROWTH))
        assert out.delta == 25


# ── 6. Experience ─────────────────────────────────────────────────────────────

class TestExperience:
    def test_bucket_above_user(self, make_bucket, make_profile):
        bucket = make_bucket(experience_required=ExperienceLevel.ADVANCED)
        out = experience_rule(bucket, make_profile(experience=ExperienceLevel.INTERMEDIATE))
        assert out.delta == -20
        assert out.warning_reasons == ["May require more experience"]

    def test_bucket_below_user(self, make_bucket, make_profile):
        out = experience_rule(make_bucket(), make_profile(experience=ExperienceLevel.ADVANCED))
        assert out.delta == 5
        assert out.match_reasons == ["Within your experience level"]

    def test_exact_match(self, make_bucket, make_profile):
        bucket = make_bucket(experience_required=ExperienceLevel.INTERMEDIATE)
        out = experience_rule(bucket, make_profile(experience=ExperienceLevel.INTERMEDIATE))
        assert out.delta == 10
        assert out.match_reasons == ["Perfect for your experience level"]

    def test_beginner_passive_bonus(self, make_bucket, make_profile):
        bucket = make_bucket(effort_per_week="0 mins")
        out = experience_rule(bucket, make_profile(experience=ExperienceLevel.BEGINNER))
        assert out.delta == 20
        assert out.match_reasons[-1] == "Passive investment - no active effort"

    def test_passive_bonus_only_for_beginners(self, make_bucket, make_profile):
        bucket = make_bucket(effort_per_week="0 mins")
        out = experience_rule(bucket, make_profile(experience=ExperienceLevel.INTERMEDIATE))
        assert out.delta == 5

    def test_beginner_direct_stocks(self, make_bucket, make_profile):
        bucket = make_bucket(
            id="direct_stocks", experience_required=ExperienceLevel.ADVANCED,
        )
        out = experience_rule(bucket, make_profile(experience=ExperienceLevel.BEGINNER))
        assert out.delta == -35
        assert out.warning_reasons == [
            "May require more experience",
            "Direct stocks require learning",
        ]


# ── 7. Capital bands ──────────────────────────────────────────────────────────

class TestCapitalBand:
    def test_small_ticket_bonus(self, make_bucket, make_profile):
        out = capital_band_rule(make_bucket(id="index_fund"), make_profile(capital=10_000))
        assert out.delta == 10
        assert out.match_reasons == ["Great for starting with small amounts"]

    def test_large_ticket_penalty(self, make_bucket, make_profile):
        out = capital_band_rule(make_bucket(id="reit"), make_profile(capital=10_000))
        assert out.delta == -10
        assert out.warning_reasons == ["Consider building base first"]

    def test_low_threshold_is_strict(self, make_bucket, make_profile):
        out = capital_band_rule(make_bucket(id="index_fund"), make_profile(capital=50_000))
        assert out.delta == 0

    def test_extra_tax_capacity(self, make_bucket, make_profile):
        out = capital_band_rule(make_bucket(id="nps"), make_profile(capital=2_000_000))
        assert out.delta == 10
        assert out.match_reasons == ["Extra ₹50K tax benefit adds up"]

    def test_diversifier(self, make_bucket, make_profile):
        out = capital_band_rule(make_bucket(id="sgb"), make_profile(capital=2_000_000))
        assert out.match_reasons == ["Good for diversification at your level"]

    def test_high_threshold_is_strict(self, make_bucket, make_profile):
        out = capital_band_rule(make_bucket(id="reit"), make_profile(capital=1_000_000))
        assert out.delta == 0

    def test_unlisted_bucket_unaffected(self, make_bucket, make_profile):
        assert capital_band_rule(make_bucket(), make_profile(capital=100)).delta == 0
        assert capital_band_rule(make_bucket(), make_profile(capital=5_000_000)).delta == 0
