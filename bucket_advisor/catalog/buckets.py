"""
Investment bucket catalog for Indian retail investors.

``INVESTMENT_BUCKETS`` is the canonical, immutable reference table. Its
declaration order is part of the contract: the ranker uses a stable sort,
so buckets with equal scores are shown in the order they appear here.

Integrity contract (checked by ``validate_catalog`` and the test suite):
  - The catalog is non-empty.
  - Bucket ids are unique.
  - Every bucket serves at least one goal.

The scorer never mutates or re-validates this data at runtime.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, Optional

from bucket_advisor.models.bucket import InvestmentBucket
from bucket_advisor.taxonomy.investment_taxonomy import (
    ExperienceLevel,
    Goal,
    LiquidityLevel,
    RiskLevel,
    TimeHorizon,
    experience_rank,
)

logger = logging.getLogger(__name__)

_SECTION_80C = "Section 80C - up to ₹1.5L deduction"
_EQUITY_TAX = "10% LTCG above ₹1L, 15% STCG"


INVESTMENT_BUCKETS: tuple[InvestmentBucket, ...] = (
    # ── Low risk ──────────────────────────────────────────────────────────────
    InvestmentBucket(
        id="savings_account",
        name="High-Yield Savings Account",
        emoji="🏦",
        description="Park money in high-interest savings accounts",
        category="Extremely Safe",
        risk_level=RiskLevel.LOW,
        liquidity=LiquidityLevel.HIGH,
        min_investment=0,
        expected_returns="3-7% p.a.",
        time_horizon=TimeHorizon.SHORT,
        goals=frozenset({Goal.SAFETY}),
        experience_required=ExperienceLevel.BEGINNER,
        effort_per_week="0 mins",
        what_it_is=(
            "A savings account with a bank that offers higher than average "
            "interest rates. Some digital banks offer up to 7% on savings."
        ),
        why_consider=(
            "Completely liquid - withdraw anytime",
            "Zero risk of capital loss",
            "DICGC insured up to ₹5 lakhs",
            "No effort required",
        ),
        warnings=(
            "Returns barely beat inflation",
            "Interest is fully taxable",
        ),
        how_to_start=(
            "Compare interest rates across banks",
            "Consider Airtel Payments Bank, Jupiter, Fi for higher rates",
            "Open account online in minutes",
        ),
        platforms=("Jupiter", "Fi Money", "Airtel Payments Bank", "IndusInd Bank"),
        tax_on_returns="Interest taxed as per income slab",
    ),
    InvestmentBucket(
        id="fd",
        name="Fixed Deposit (FD)",
        emoji="🔒",
        description="Lock money for guaranteed returns",
        category="Extremely Safe",
        risk_level=RiskLevel.LOW,
        liquidity=LiquidityLevel.LOW,
        min_investment=1000,
        expected_returns="6-8% p.a.",
        time_horizon=TimeHorizon.SHORT,
        lock_in_period="7 days to 10 years",
        goals=frozenset({Goal.SAFETY, Goal.INCOME}),
        experience_required=ExperienceLevel.BEGINNER,
        effort_per_week="0 mins",
        what_it_is=(
            "You lend money to a bank for a fixed period and get guaranteed "
            "interest. Senior citizens get 0.5% extra."
        ),
        why_consider=(
            "Guaranteed returns - no market risk",
            "DICGC insured up to ₹5 lakhs per bank",
            "Higher rates than savings accounts",
            "Senior citizens get bonus rates",
        ),
        warnings=(
            "Premature withdrawal has penalty",
            "Interest is fully taxable",
            "TDS deducted if interest > ₹40,000/year",
        ),
        how_to_start=(
            "Compare FD rates across banks and NBFCs",
            "Choose tenure based on when you need money",
            "Create FD through net banking or branch",
        ),
        platforms=("Any Bank", "Bajaj Finserv", "Shriram Finance", "Mahindra Finance"),
        tax_on_returns="Interest taxed as per income slab. TDS applicable.",
    ),
    InvestmentBucket(
        id="liquid_fund",
        name="Liquid Mutual Fund",
        emoji="💧",
        description="Park short-term money with better returns than savings",
        category="Very Safe",
        risk_level=RiskLevel.LOW,
        liquidity=LiquidityLevel.HIGH,
        min_investment=500,
        expected_returns="5-7% p.a.",
        time_horizon=TimeHorizon.SHORT,
        goals=frozenset({Goal.SAFETY}),
        experience_required=ExperienceLevel.BEGINNER,
        effort_per_week="0 mins",
        what_it_is=(
            "Mutual funds that invest in very short-term debt instruments. "
            "Money can be redeemed within 24 hours."
        ),
        why_consider=(
            "Slightly better returns than FD",
            "No lock-in period",
            "More tax-efficient than FD for longer holding",
            "Good for emergency fund",
        ),
        warnings=(
            "Not DICGC insured (but very low risk)",
            "Returns can vary slightly",
        ),
        how_to_start=(
            "Open demat account on any platform",
            'Search for "Liquid Fund"',
            "Choose one with low expense ratio",
            "Start with any amount ₹500+",
        ),
        platforms=("Groww", "Zerodha Coin", "Kuvera", "Paytm Money"),
        tax_on_returns="Taxed at slab rate. More tax-efficient if held > 3 years.",
    ),
    InvestmentBucket(
        id="ppf",
        name="Public Provident Fund (PPF)",
        emoji="🏛️",
        description="Government-backed long-term savings with tax benefits",
        category="Extremely Safe",
        risk_level=RiskLevel.LOW,
        liquidity=LiquidityLevel.LOW,
        min_investment=500,
        expected_returns="7-7.5% p.a.",
        time_horizon=TimeHorizon.LONG,
        lock_in_period="15 years (partial withdrawal after 6 years)",
        goals=frozenset({Goal.SAFETY, Goal.TAX_SAVING}),
        experience_required=ExperienceLevel.BEGINNER,
        effort_per_week="0 mins",
        what_it_is=(
            "A government savings scheme with 15-year lock-in. Interest rate "
            "is set by government quarterly. Triple tax benefit (EEE)."
        ),
        why_consider=(
            "Completely tax-free returns (EEE status)",
            "Section 80C deduction up to ₹1.5L",
            "Government guarantee",
            "Compounding magic over 15 years",
        ),
        warnings=(
            "15-year lock-in is very long",
            "Max ₹1.5L per year contribution",
            "Interest rate can change quarterly",
        ),
        how_to_start=(
            "Open PPF account at any bank or post office",
            "Available online through most banks",
            "Invest minimum ₹500, maximum ₹1.5L per year",
        ),
        platforms=("SBI", "Post Office", "ICICI", "HDFC"),
        tax_benefit=_SECTION_80C,
        tax_on_returns="Completely tax-free (EEE)",
    ),
    InvestmentBucket(
        id="nsc",
        name="National Savings Certificate (NSC)",
        emoji="📜",
        description="Post office savings with tax benefit",
        category="Very Safe",
        risk_level=RiskLevel.LOW,
        liquidity=LiquidityLevel.LOW,
        min_investment=1000,
        expected_returns="7-7.5% p.a.",
        time_horizon=TimeHorizon.MEDIUM,
        lock_in_period="5 years",
        goals=frozenset({Goal.SAFETY, Goal.TAX_SAVING}),
        experience_required=ExperienceLevel.BEGINNER,
        effort_per_week="0 mins",
        what_it_is=(
            "A post office savings scheme with 5-year lock-in. Interest "
            "compounds annually but is paid at maturity."
        ),
        why_consider=(
            "Section 80C tax deduction",
            "Government guarantee",
            "Shorter lock-in than PPF",
            "Interest earned is also eligible for 80C",
        ),
        warnings=(
            "5-year lock-in",
            "Interest at maturity is taxable",
            "Cannot withdraw early except on death",
        ),
        how_to_start=(
            "Visit any post office with KYC documents",
            "Available online through India Post",
            "No maximum investment limit",
        ),
        platforms=("Post Office", "India Post App"),
        tax_benefit=_SECTION_80C,
        tax_on_returns="Interest at maturity is taxable at slab rate",
    ),
    InvestmentBucket(
        id="sgb",
        name="Sovereign Gold Bonds (SGB)",
        emoji="🪙",
        description="Invest in gold with government backing + interest",
        category="Safe (Gold)",
        risk_level=RiskLevel.MEDIUM,
        liquidity=LiquidityLevel.MEDIUM,
        min_investment=5000,
        expected_returns="2.5% interest + gold price movement",
        time_horizon=TimeHorizon.LONG,
        lock_in_period="8 years (exit after 5 years allowed)",
        goals=frozenset({Goal.SAFETY, Goal.GROWTH}),
        experience_required=ExperienceLevel.BEGINNER,
        effort_per_week="0 mins",
        what_it_is=(
            "Government securities denominated in grams of gold. You get 2.5% "
            "annual interest plus returns based on gold price."
        ),
        why_consider=(
            "2.5% annual interest on top of gold returns",
            "No storage/purity concerns",
            "Tax-free if held till maturity",
            "Can be traded on stock exchange",
        ),
        warnings=(
            "Gold prices can fall",
            "8-year lock-in (5 years for early exit)",
            "Limited issue windows by RBI",
        ),
        how_to_start=(
            "Buy during RBI issue windows (4-5 times per year)",
            "Or buy from stock exchange (NSE/BSE)",
            "Need demat account for exchange-traded SGBs",
        ),
        platforms=("RBI Direct", "Banks", "Zerodha", "Groww"),
        tax_on_returns="Tax-free if held till maturity. Otherwise capital gains tax.",
    ),
    # ── Medium risk ───────────────────────────────────────────────────────────
    InvestmentBucket(
        id="debt_fund",
        name="Debt Mutual Funds",
        emoji="📊",
        description="Mutual funds investing in bonds and fixed income",
        category="Moderate",
        risk_level=RiskLevel.MEDIUM,
        liquidity=LiquidityLevel.HIGH,
        min_investment=500,
        expected_returns="6-9% p.a.",
        time_horizon=TimeHorizon.MEDIUM,
        goals=frozenset({Goal.SAFETY, Goal.INCOME}),
        experience_required=ExperienceLevel.BEGINNER,
        effort_per_week="0 mins",
        what_it_is=(
            "Mutual funds that invest in government/corporate bonds. Different "
            "types: short duration, corporate bond, banking & PSU, etc."
        ),
        why_consider=(
            "Better returns than FD",
            "More tax-efficient than FD for 3+ years",
            "Professional management",
            "No lock-in period",
        ),
        warnings=(
            "Not guaranteed like FD",
            "Can have negative returns in rare cases",
            "Choose based on duration matching",
        ),
        how_to_start=(
            "Start with low duration or banking & PSU funds",
            "Match fund duration to your investment horizon",
            "Invest via SIP or lump sum",
        ),
        platforms=("Groww", "Zerodha Coin", "Kuvera", "AMC websites"),
        tax_on_returns="Taxed at slab rate (new rules from 2023)",
    ),
    InvestmentBucket(
        id="hybrid_fund",
        name="Hybrid/Balanced Funds",
        emoji="⚖️",
        description="Mix of stocks and bonds for balanced growth",
        category="Moderate",
        risk_level=RiskLevel.MEDIUM,
        liquidity=LiquidityLevel.HIGH,
        min_investment=500,
        expected_returns="8-12% p.a.",
        time_horizon=TimeHorizon.MEDIUM,
        goals=frozenset({Goal.GROWTH, Goal.SAFETY}),
        experience_required=ExperienceLevel.BEGINNER,
        effort_per_week="5 mins",
        what_it_is=(
            "Funds that invest in both equity and debt. Balanced Advantage "
            "funds dynamically shift between equity and debt based on market "
            "conditions."
        ),
        why_consider=(
            "Best of both worlds",
            "Lower volatility than pure equity",
            "Automatic rebalancing",
            "Good for first-time equity investors",
        ),
        warnings=(
            "Returns lower than pure equity in bull markets",
            "Still has market risk",
        ),
        how_to_start=(
            "Look for Balanced Advantage or Aggressive Hybrid funds",
            "Start SIP to average out entry points",
            "Good for 3-5 year horizon",
        ),
        platforms=("Groww", "Zerodha Coin", "Kuvera", "MF Central"),
        tax_on_returns="Equity taxation if 65%+ in stocks, else debt taxation",
    ),
    InvestmentBucket(
        id="index_fund",
        name="Index Funds / ETFs",
        emoji="📈",
        description="Low-cost way to invest in the entire market",
        category="Growth",
        risk_level=RiskLevel.MEDIUM,
        liquidity=LiquidityLevel.HIGH,
        min_investment=100,
        expected_returns="10-14% p.a. (long term average)",
        time_horizon=TimeHorizon.LONG,
        goals=frozenset({Goal.GROWTH}),
        experience_required=ExperienceLevel.BEGINNER,
        effort_per_week="0 mins",
        what_it_is=(
            "Funds that track an index like Nifty 50 or Sensex. No fund "
            "manager picking stocks - just buys all stocks in the index."
        ),
        why_consider=(
            "Lowest cost (expense ratio 0.1-0.2%)",
            "Beats most actively managed funds",
            "Simple and transparent",
            "Best for long-term wealth building",
        ),
        warnings=(
            "Market risk - can fall 30-50% in crashes",
            "No downside protection",
            "Requires patience for 7-10+ years",
        ),
        how_to_start=(
            "Choose Nifty 50 or Nifty Next 50 index fund",
            "Look for lowest expense ratio",
            "Start SIP - even ₹100/month works",
        ),
        platforms=("Groww", "Zerodha Coin", "Kuvera", "UTI, Nippon, HDFC AMC"),
        tax_on_returns=_EQUITY_TAX,
    ),
    InvestmentBucket(
        id="gold_etf",
        name="Gold ETF",
        emoji="✨",
        description="Invest in gold without physical storage hassles",
        category="Moderate",
        risk_level=RiskLevel.MEDIUM,
        liquidity=LiquidityLevel.HIGH,
        min_investment=500,
        expected_returns="8-10% p.a. (historical average)",
        time_horizon=TimeHorizon.LONG,
        goals=frozenset({Goal.SAFETY, Goal.GROWTH}),
        experience_required=ExperienceLevel.BEGINNER,
        effort_per_week="0 mins",
        what_it_is=(
            "Exchange-traded funds backed by physical gold. Each unit "
            "represents a fixed amount of gold (usually 1 gram)."
        ),
        why_consider=(
            "Easy to buy/sell on stock exchange",
            "No storage/purity worries",
            "Good for diversification",
            "Tracks gold prices accurately",
        ),
        warnings=(
            "No interest like SGB",
            "Capital gains tax applies",
            "Gold can underperform stocks for years",
        ),
        how_to_start=(
            "Need demat account",
            "Buy during market hours like stocks",
            "SIP available through some platforms",
        ),
        platforms=("Zerodha", "Groww", "Upstox", "Angel One"),
        tax_on_returns="20% LTCG with indexation for 3+ years",
    ),
    # ── High risk ─────────────────────────────────────────────────────────────
    InvestmentBucket(
        id="equity_mf",
        name="Equity Mutual Funds",
        emoji="🚀",
        description="Professionally managed stock portfolios",
        category="Growth",
        risk_level=RiskLevel.HIGH,
        liquidity=LiquidityLevel.HIGH,
        min_investment=500,
        expected_returns="12-18% p.a. (long term)",
        time_horizon=TimeHorizon.LONG,
        goals=frozenset({Goal.GROWTH}),
        experience_required=ExperienceLevel.INTERMEDIATE,
        effort_per_week="15 mins",
        what_it_is=(
            "Funds that invest primarily in stocks. Types: Large Cap (safer), "
            "Mid Cap (growth), Small Cap (aggressive), Flexi Cap (flexible)."
        ),
        why_consider=(
            "Higher return potential than index funds",
            "Professional stock selection",
            "Diversification across many stocks",
            "SIP helps average entry price",
        ),
        warnings=(
            "Can fall 40-60% in crashes",
            "Requires 7-10 year commitment",
            "Many funds underperform index",
            "Higher expense ratio than index funds",
        ),
        how_to_start=(
            "Start with Flexi Cap or Large Cap for stability",
            "Research fund performance (5-10 years)",
            "Check expense ratio and fund manager track record",
            "Use SIP to reduce timing risk",
        ),
        platforms=("Groww", "Zerodha Coin", "Kuvera", "Paytm Money"),
        tax_on_returns=_EQUITY_TAX,
    ),
    InvestmentBucket(
        id="elss",
        name="ELSS (Tax Saving Mutual Fund)",
        emoji="💰",
        description="Equity fund with tax benefits under Section 80C",
        category="Growth + Tax Saving",
        risk_level=RiskLevel.HIGH,
        liquidity=LiquidityLevel.LOW,
        min_investment=500,
        expected_returns="12-16% p.a. (long term)",
        time_horizon=TimeHorizon.LONG,
        lock_in_period="3 years",
        goals=frozenset({Goal.TAX_SAVING, Goal.GROWTH}),
        experience_required=ExperienceLevel.BEGINNER,
        effort_per_week="5 mins",
        what_it_is=(
            "Equity mutual funds that qualify for Section 80C tax deduction. "
            "Shortest lock-in among all 80C options."
        ),
        why_consider=(
            "Section 80C deduction up to ₹1.5L",
            "Lowest lock-in (3 years) among 80C options",
            "Equity returns with tax benefit",
            "SIP investments each have separate 3-year lock-in",
        ),
        warnings=(
            "3-year lock-in per investment",
            "Market risk - can have losses",
            "Returns are taxable (LTCG)",
        ),
        how_to_start=(
            "Choose ELSS fund with good 5-year track record",
            "Invest via SIP for rupee cost averaging",
            "Each SIP has its own 3-year lock-in",
        ),
        platforms=("Groww", "Zerodha Coin", "Kuvera", "MF Central"),
        tax_benefit=_SECTION_80C,
        tax_on_returns="10% LTCG above ₹1L",
    ),
    InvestmentBucket(
        id="direct_stocks",
        name="Direct Stock Investing",
        emoji="📱",
        description="Buy and hold individual company stocks",
        category="Aggressive Growth",
        risk_level=RiskLevel.HIGH,
        liquidity=LiquidityLevel.HIGH,
        min_investment=100,
        expected_returns="Varies wildly: -50% to +100%+",
        time_horizon=TimeHorizon.LONG,
        goals=frozenset({Goal.GROWTH}),
        experience_required=ExperienceLevel.ADVANCED,
        effort_per_week="2-5 hours",
        what_it_is=(
            "Buying shares of individual companies directly. You become a "
            "part-owner of the company."
        ),
        why_consider=(
            "Highest return potential",
            "You control what you own",
            "Can outperform mutual funds",
            "Dividends from some stocks",
        ),
        warnings=(
            "Requires significant research",
            "Individual stocks can go to zero",
            "Emotional discipline is crucial",
            "Most retail investors underperform index",
        ),
        how_to_start=(
            "Open demat + trading account",
            "Start with large-cap, stable companies",
            "Never put all money in one stock",
            "Learn fundamental analysis basics",
        ),
        platforms=("Zerodha", "Groww", "Upstox", "Angel One", "ICICI Direct"),
        tax_on_returns=_EQUITY_TAX,
    ),
    InvestmentBucket(
        id="smallcap_mf",
        name="Small Cap Mutual Funds",
        emoji="🎯",
        description="Invest in high-growth small companies",
        category="Aggressive Growth",
        risk_level=RiskLevel.HIGH,
        liquidity=LiquidityLevel.HIGH,
        min_investment=500,
        expected_returns="15-25% p.a. (if you get timing right)",
        time_horizon=TimeHorizon.LONG,
        goals=frozenset({Goal.GROWTH}),
        experience_required=ExperienceLevel.ADVANCED,
        effort_per_week="30 mins",
        what_it_is=(
            "Mutual funds that invest in small-cap stocks (companies ranked "
            "251+ by market cap). High growth potential but very volatile."
        ),
        why_consider=(
            "Highest growth potential",
            "Can multiply money in bull runs",
            "Access to tomorrow's large caps",
        ),
        warnings=(
            "Can fall 50-70% in downturns",
            "Requires 10+ year horizon",
            "Very volatile - emotionally tough",
            "Not for core portfolio",
        ),
        how_to_start=(
            "Only after you have large-cap base",
            "Limit to 10-20% of equity portfolio",
            "SIP through market cycles",
            "Don't check daily - seriously",
        ),
        platforms=("Groww", "Zerodha Coin", "Kuvera"),
        tax_on_returns=_EQUITY_TAX,
    ),
    InvestmentBucket(
        id="reit",
        name="REITs (Real Estate Investment Trusts)",
        emoji="🏢",
        description="Own commercial real estate without buying property",
        category="Alternative",
        risk_level=RiskLevel.MEDIUM,
        liquidity=LiquidityLevel.MEDIUM,
        min_investment=10000,
        expected_returns="8-12% p.a. (rental yield + growth)",
        time_horizon=TimeHorizon.MEDIUM,
        goals=frozenset({Goal.INCOME, Goal.GROWTH}),
        experience_required=ExperienceLevel.INTERMEDIATE,
        effort_per_week="15 mins",
        what_it_is=(
            "Companies that own income-generating commercial real estate. "
            "They distribute 90% of income as dividends."
        ),
        why_consider=(
            "Earn from rent without buying property",
            "Regular dividend income",
            "Professional property management",
            "Liquid compared to physical real estate",
        ),
        warnings=(
            "Real estate market risk",
            "Limited REITs in India",
            "Dividends are taxable",
        ),
        how_to_start=(
            "Buy REITs like Embassy, Mindspace, Brookfield on stock exchange",
            "Need demat account",
            "Research occupancy rates and lease expiry",
        ),
        platforms=("Zerodha", "Groww", "Upstox"),
        tax_on_returns="Dividends taxed at slab rate. Capital gains as per equity.",
    ),
    InvestmentBucket(
        id="nps",
        name="National Pension System (NPS)",
        emoji="👴",
        description="Government pension scheme with extra tax benefits",
        category="Retirement",
        risk_level=RiskLevel.MEDIUM,
        liquidity=LiquidityLevel.LOW,
        min_investment=500,
        expected_returns="9-12% p.a.",
        time_horizon=TimeHorizon.LONG,
        lock_in_period="Till age 60",
        goals=frozenset({Goal.TAX_SAVING, Goal.GROWTH}),
        experience_required=ExperienceLevel.BEGINNER,
        effort_per_week="0 mins",
        what_it_is=(
            "A government pension scheme where you can choose asset allocation "
            "(equity/debt/government bonds). Extra ₹50K tax benefit under "
            "80CCD(1B)."
        ),
        why_consider=(
            "Extra ₹50K deduction beyond 80C limit",
            "Lowest-cost fund management",
            "Flexible asset allocation",
            "Forces long-term discipline",
        ),
        warnings=(
            "Locked till 60 (partial withdrawal allowed)",
            "Must buy annuity with 40% at retirement",
            "Annuity portion taxable",
        ),
        how_to_start=(
            "Open NPS account online at eNPS portal",
            "Choose Tier 1 for tax benefits",
            "Select auto or active choice for allocation",
        ),
        platforms=("eNPS Portal", "Banks", "NPS Apps"),
        tax_benefit="Section 80CCD(1B) - additional ₹50K beyond 80C",
        tax_on_returns="60% corpus is tax-free at withdrawal",
    ),
)

_BUCKETS_BY_ID: dict[str, InvestmentBucket] = {b.id: b for b in INVESTMENT_BUCKETS}


# ── Public accessors ──────────────────────────────────────────────────────────

def all_buckets() -> list[InvestmentBucket]:
    """Return the full catalog in declaration order."""
    return list(INVESTMENT_BUCKETS)


def get_bucket(bucket_id: str) -> InvestmentBucket:
    """Return the bucket with ``bucket_id``.

    Raises:
        KeyError: If no bucket has that id.
    """
    try:
        return _BUCKETS_BY_ID[bucket_id]
    except KeyError:
        raise KeyError(
            f"Unknown bucket id '{bucket_id}'. "
            f"Known ids: {', '.join(_BUCKETS_BY_ID)}"
        ) from None


def filter_buckets(
    risk_level: Optional[RiskLevel] = None,
    liquidity:  Optional[LiquidityLevel] = None,
    goal:       Optional[Goal] = None,
    experience: Optional[ExperienceLevel] = None,
) -> list[InvestmentBucket]:
    """Return catalog buckets matching every criterion that is given.

    ``experience`` is a ceiling: buckets requiring more experience than the
    given level are excluded. With no criteria the full catalog is returned.
    Declaration order is preserved.

    Args:
        risk_level: Exact risk level to match.
        liquidity:  Exact liquidity level to match.
        goal:       Goal the bucket must serve.
        experience: Highest experience level the reader has.

    Returns:
        Matching buckets (possibly empty).
    """
    result: list[InvestmentBucket] = []
    for bucket in INVESTMENT_BUCKETS:
        if risk_level is not None and bucket.risk_level != risk_level:
            continue
        if liquidity is not None and bucket.liquidity != liquidity:
            continue
        if goal is not None and goal not in bucket.goals:
            continue
        if experience is not None and (
            experience_rank(bucket.experience_required) > experience_rank(experience)
        ):
            continue
        result.append(bucket)
    return result


def validate_catalog(buckets: Iterable[InvestmentBucket]) -> list[str]:
    """Check a bucket collection against the catalog integrity contract.

    Returns:
        List of human-readable problems; empty when the catalog is valid.
    """
    buckets = list(buckets)
    problems: list[str] = []

    if not buckets:
        problems.append("Catalog is empty.")

    id_counts = Counter(b.id for b in buckets)
    for bucket_id, count in id_counts.items():
        if count > 1:
            problems.append(f"Duplicate bucket id '{bucket_id}' ({count} entries).")

    for bucket in buckets:
        if not bucket.goals:
            problems.append(f"Bucket '{bucket.id}' has no goals.")

    if problems:
        logger.warning("Catalog integrity check found %d problem(s).", len(problems))
    return problems
