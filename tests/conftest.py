"""
Shared pytest fixtures for the Bucket Advisor test suite.

Provides:
  - ``make_bucket`` / ``make_profile``: factories that build valid domain
    objects from a neutral baseline plus keyword overrides.
  - Named sample profiles used by several test modules.
  - ``tmp_config``: a minimal TOML config under ``tmp_path`` that logs to
    the console only.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from bucket_advisor.models.bucket import InvestmentBucket
from bucket_advisor.models.profile import UserProfile
from bucket_advisor.taxonomy.investment_taxonomy import (
    ExperienceLevel,
    Goal,
    LiquidityLevel,
    RiskLevel,
    TimeHorizon,
)


# ── Factories ─────────────────────────────────────────────────────────────────

@pytest.fixture
def make_bucket() -> Callable[..., InvestmentBucket]:
    """Return a factory for test buckets.

    The baseline is a LOW risk, HIGH liquidity, SHORT horizon SAFETY bucket
    with a 1,000 minimum, no lock-in, and a non-passive effort value. Its id
    is not referenced by any id-based rule.
    """

    def _make(**overrides: Any) -> InvestmentBucket:
        fields: dict[str, Any] = {
            "id": "test_bucket",
            "name": "Test Bucket",
            "category": "Test",
            "risk_level": RiskLevel.LOW,
            "liquidity": LiquidityLevel.HIGH,
            "min_investment": 1000,
            "expected_returns": "7% p.a.",
            "time_horizon": TimeHorizon.SHORT,
            "goals": frozenset({Goal.SAFETY}),
            "experience_required": ExperienceLevel.BEGINNER,
            "effort_per_week": "10 mins",
        }
        fields.update(overrides)
        return InvestmentBucket(**fields)

    return _make


@pytest.fixture
def make_profile() -> Callable[..., UserProfile]:
    """Return a factory for test profiles.

    Baseline: 5,000 capital, 12 months, MEDIUM risk, no liquidity need,
    GROWTH goal, INTERMEDIATE experience.
    """

    def _make(**overrides: Any) -> UserProfile:
        fields: dict[str, Any] = {
            "capital": 5000,
            "time_horizon_months": 12,
            "risk_preference": RiskLevel.MEDIUM,
            "needs_liquidity": False,
            "goal": Goal.GROWTH,
            "experience": ExperienceLevel.INTERMEDIATE,
        }
        fields.update(overrides)
        return UserProfile(**fields)

    return _make


# ── Sample profiles ───────────────────────────────────────────────────────────

@pytest.fixture
def cautious_beginner() -> UserProfile:
    """One lakh, one year, safety first, needs access to the money."""
    return UserProfile(
        capital=100_000,
        time_horizon_months=12,
        risk_preference=RiskLevel.LOW,
        needs_liquidity=True,
        goal=Goal.SAFETY,
        experience=ExperienceLevel.BEGINNER,
    )


@pytest.fixture
def long_term_grower() -> UserProfile:
    """One lakh for ten years, high risk appetite, experienced."""
    return UserProfile(
        capital=100_000,
        time_horizon_months=120,
        risk_preference=RiskLevel.HIGH,
        needs_liquidity=False,
        goal=Goal.GROWTH,
        experience=ExperienceLevel.ADVANCED,
    )


@pytest.fixture
def default_profile() -> UserProfile:
    """Matches the [profile_defaults] section of config/default.toml."""
    return UserProfile(
        capital=100_000,
        time_horizon_months=36,
        risk_preference=RiskLevel.MEDIUM,
        needs_liquidity=False,
        goal=Goal.GROWTH,
        experience=ExperienceLevel.BEGINNER,
    )


# ── Config fixture ────────────────────────────────────────────────────────────

@pytest.fixture
def tmp_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Write a console-only config file and clear BUCKET_ADVISOR_* env vars."""
    for var in (
        "BUCKET_ADVISOR_LOG_LEVEL",
        "BUCKET_ADVISOR_OUTPUT_DIR",
        "BUCKET_ADVISOR_DEBUG",
    ):
        monkeypatch.delenv(var, raising=False)

    config_dir = tmp_path / "config"
    config_dir.mkdir()
    path = config_dir / "default.toml"
    path.write_text(
        "[project]\n"
        "debug = false\n"
        "\n"
        "[logging]\n"
        'level = "WARNING"\n'
        'log_file = ""\n'
        "\n"
        "[recommend]\n"
        "top_n = 5\n"
        'sort_order = "fit"\n'
        f'output_dir = "{(tmp_path / "out").as_posix()}"\n'
        "\n"
        "[profile_defaults]\n"
        "capital = 100000\n"
        "time_horizon_months = 36\n"
        'risk_preference = "MEDIUM"\n'
        "needs_liquidity = false\n"
        'goal = "GROWTH"\n'
        'experience = "BEGINNER"\n'
        "fallback_horizon_months = 12\n",
        encoding="utf-8",
    )
    return path
