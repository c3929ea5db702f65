"""
Recommendation ranker: scores the whole catalog for one profile, orders the
results, and drops the ones not worth showing.

Usage flow
----------
1. score_catalog(profile)
   -> list[ScoredBucket]  (every bucket, catalog order, unfiltered)

2. rank(profile)
   -> list[ScoredBucket]  (score descending, ties in catalog order,
                           score <= MIN_DISPLAY_SCORE removed)

3. top_n(profile, n)
   -> list[ScoredBucket]  (first n of rank())

4. sort_recommendations(ranked, order)
   -> list[ScoredBucket]  (alternative display orderings)

An empty result from rank() is a valid "no matches" state, not an error.
Nothing here holds state between calls; the catalog is read-only.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from bucket_advisor.catalog.buckets import INVESTMENT_BUCKETS
from bucket_advisor.models.bucket import InvestmentBucket
from bucket_advisor.models.profile import UserProfile
from bucket_advisor.recommendations.projection import parse_expected_return_pct
from bucket_advisor.recommendations.scorer import ScoredBucket, score_bucket
from bucket_advisor.taxonomy.investment_taxonomy import SortOrder, risk_rank

logger = logging.getLogger(__name__)

MIN_DISPLAY_SCORE = 20


def score_catalog(
    profile: UserProfile,
    catalog: Optional[Sequence[InvestmentBucket]] = None,
) -> list[ScoredBucket]:
    """Score every bucket in ``catalog`` (default: the full catalog).

    Returns:
        One ScoredBucket per bucket, in catalog order, nothing filtered.
    """
    buckets = INVESTMENT_BUCKETS if catalog is None else catalog
    return [score_bucket(bucket, profile) for bucket in buckets]


def rank(
    profile: UserProfile,
    catalog: Optional[Sequence[InvestmentBucket]] = None,
) -> list[ScoredBucket]:
    """Return the ranked, filtered recommendation list for ``profile``.

    Sorting is stable, so equal scores keep catalog declaration order.
    Entries scoring at or below ``MIN_DISPLAY_SCORE`` are removed.

    Args:
        profile: The user's profile.
        catalog: Buckets to rank; defaults to ``INVESTMENT_BUCKETS``.

    Returns:
        Possibly empty list, score non-increasing.
    """
    scored = score_catalog(profile, catalog)
    ordered = sorted(scored, key=lambda sb: -sb.score)
    shown = [sb for sb in ordered if sb.score > MIN_DISPLAY_SCORE]

    logger.debug(
        "Ranked %d bucket(s); %d above display threshold %d.",
        len(scored), len(shown), MIN_DISPLAY_SCORE,
    )
    return shown


def top_n(
    profile: UserProfile,
    n:       int,
    catalog: Optional[Sequence[InvestmentBucket]] = None,
) -> list[ScoredBucket]:
    """Return the first ``n`` entries of ``rank(profile)``.

    If ``n`` exceeds the number of ranked entries, the full list is returned.

    Raises:
        ValueError: If ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}.")
    return rank(profile, catalog)[:n]


def sort_recommendations(
    scored: Sequence[ScoredBucket],
    order:  SortOrder = SortOrder.FIT,
) -> list[ScoredBucket]:
    """Reorder an already-ranked list for display.

    FIT keeps the given order. EARNINGS puts the highest headline expected
    return first. RISK puts LOW risk first. All orderings are stable.
    """
    if order == SortOrder.EARNINGS:
        return sorted(
            scored,
            key=lambda sb: -parse_expected_return_pct(sb.bucket.expected_returns),
        )
    if order == SortOrder.RISK:
        return sorted(scored, key=lambda sb: risk_rank(sb.bucket.risk_level))
    return list(scored)
