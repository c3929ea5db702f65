"""
ASCII terminal formatters for CLI commands.

All formatters accept in-memory catalog / ranking objects and return plain
multi-line strings suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).

``format_share_summary`` renders the top pick as a short shareable card
with the projected value placed on the wealth milestone ladder.

Fit badges
----------
Each recommendation row carries a short fit badge so the tier is readable
without colour::

  [EXCELLENT]  [GOOD]  [MODERATE]  [NOT IDEAL]
"""

from __future__ import annotations

from typing import Sequence

from bucket_advisor.models.bucket import InvestmentBucket
from bucket_advisor.models.profile import UserProfile
from bucket_advisor.recommendations.projection import (
    MILESTONES,
    milestone_for,
    parse_expected_return_pct,
    project_future_value,
)
from bucket_advisor.recommendations.scorer import ScoredBucket
from bucket_advisor.taxonomy.investment_taxonomy import FitLevel
from bucket_advisor.utils.money import (
    amount_in_words,
    duration_label,
    format_rupees,
    horizon_label,
)

FIT_BADGES: dict[FitLevel, str] = {
    FitLevel.EXCELLENT: "[EXCELLENT]",
    FitLevel.GOOD:      "[GOOD]",
    FitLevel.MODERATE:  "[MODERATE]",
    FitLevel.POOR:      "[NOT IDEAL]",
}


# ── Profile header ────────────────────────────────────────────────────────────


def format_profile_summary(profile: UserProfile) -> str:
    """Return a short block describing the profile being ranked."""
    lines = [
        f"  Capital:          {format_rupees(profile.capital)}",
        f"  Horizon:          {profile.time_horizon_months} months "
        f"({horizon_label(profile.time_horizon_months)})",
        f"  Risk preference:  {profile.risk_preference.value}",
        f"  Needs liquidity:  {'yes' if profile.needs_liquidity else 'no'}",
        f"  Goal:             {profile.goal.value}",
        f"  Experience:       {profile.experience.value}",
    ]
    return "\n".join(lines)


# ── Recommendations ───────────────────────────────────────────────────────────


def format_recommendation_table(
    scored:       Sequence[ScoredBucket],
    profile:      UserProfile,
    show_reasons: bool = True,
) -> str:
    """Format a ranked recommendation list as an ASCII table.

    One row per bucket in the order given, followed (when ``show_reasons``)
    by the rationale and any warnings::

        Rank  Bucket                          Score  Fit          Returns            Projected
        ----------------------------------------------------------------------------------------
           1  Liquid Mutual Fund                100  [EXCELLENT]  5-7% p.a.          ₹1,05,000
                This is a great match for your ₹1,00,000 over 1 year. ...
                ! Lock-in: 5 years

    Args:
        scored:       Ranked ScoredBucket list.
        profile:      Profile used for the ranking (projection + header).
        show_reasons: Include rationale and warning lines under each row.

    Returns:
        Multi-line string.
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Investment Recommendations ===")
    lines.append(format_profile_summary(profile))

    if not scored:
        lines.append("")
        lines.append("  (no matching investments for this profile; try a longer horizon")
        lines.append("   or a different goal)")
        return "\n".join(lines)

    lines.append("")
    header = (
        f"  {'Rank':>4}  {'Bucket':<30}  {'Score':>5}  {'Fit':<11}  "
        f"{'Returns':<18}  {'Projected':>12}"
    )
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))

    for rank, sb in enumerate(scored, start=1):
        projected = project_future_value(
            profile.capital,
            parse_expected_return_pct(sb.bucket.expected_returns),
            profile.time_horizon_months,
        )
        lines.append(
            f"  {rank:>4}  {sb.bucket.name[:30]:<30}  {sb.score:>5}  "
            f"{FIT_BADGES[sb.fit_level]:<11}  {sb.bucket.expected_returns[:18]:<18}  "
            f"{format_rupees(projected, max_fraction_digits=0):>12}"
        )
        if show_reasons:
            lines.append(f"          {sb.why_this_fits_you}")
            for warning in sb.warning_reasons:
                lines.append(f"          ! {warning}")

    lines.append("")
    lines.append("  Projections compound capital at the low end of each returns range.")
    lines.append("  Educational heuristic only, not financial advice.")
    return "\n".join(lines)


# ── Bucket detail ─────────────────────────────────────────────────────────────


def format_bucket_detail(
    bucket: InvestmentBucket,
    scored: ScoredBucket | None = None,
) -> str:
    """Format the full description of one bucket.

    When ``scored`` is given, the profile-specific score, reasons and
    rationale are appended.
    """
    lines: list[str] = []
    lines.append("")
    title = f"{bucket.emoji} {bucket.name}" if bucket.emoji else bucket.name
    lines.append(f"=== {title} ===")
    lines.append(f"  {bucket.description}")
    lines.append("")
    lines.append(f"  Category:          {bucket.category}")
    lines.append(f"  Risk / liquidity:  {bucket.risk_level.value} / {bucket.liquidity.value}")
    lines.append(f"  Minimum:           {format_rupees(bucket.min_investment)}")
    lines.append(f"  Expected returns:  {bucket.expected_returns}")
    lines.append(f"  Horizon:           {bucket.time_horizon.value}")
    lines.append(f"  Lock-in:           {bucket.lock_in_period or 'none'}")
    lines.append(f"  Goals:             {', '.join(sorted(g.value for g in bucket.goals))}")
    lines.append(f"  Experience:        {bucket.experience_required.value}")
    lines.append(f"  Effort per week:   {bucket.effort_per_week}")
    if bucket.tax_benefit:
        lines.append(f"  Tax benefit:       {bucket.tax_benefit}")
    if bucket.tax_on_returns:
        lines.append(f"  Tax on returns:    {bucket.tax_on_returns}")

    if bucket.what_it_is:
        lines.append("")
        lines.append(f"  {bucket.what_it_is}")

    for heading, items in (
        ("Why consider", bucket.why_consider),
        ("Watch out for", bucket.warnings),
        ("How to start", bucket.how_to_start),
    ):
        if items:
            lines.append("")
            lines.append(f"  {heading}:")
            lines.extend(f"    - {item}" for item in items)

    if bucket.platforms:
        lines.append("")
        lines.append(f"  Platforms: {', '.join(bucket.platforms)}")

    if scored is not None:
        lines.append("")
        lines.append(f"  Your score: {scored.score}  {FIT_BADGES[scored.fit_level]}")
        lines.append(f"  {scored.why_this_fits_you}")
        lines.extend(f"    + {reason}" for reason in scored.match_reasons)
        lines.extend(f"    ! {reason}" for reason in scored.warning_reasons)

    return "\n".join(lines)


# ── Catalog ───────────────────────────────────────────────────────────────────


def format_catalog_table(buckets: Sequence[InvestmentBucket]) -> str:
    """Format a bucket list (e.g. from ``filter_buckets``) as an ASCII table."""
    lines: list[str] = []
    lines.append("")
    lines.append(f"=== Investment Buckets ({len(buckets)}) ===")

    if not buckets:
        lines.append("")
        lines.append("  (no buckets match these filters)")
        return "\n".join(lines)

    lines.append("")
    header = (
        f"  {'Id':<16}  {'Name':<30}  {'Risk':<6}  {'Liquid':<6}  "
        f"{'Minimum':>9}  {'Horizon':<7}  {'Experience':<12}"
    )
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))
    for b in buckets:
        lines.append(
            f"  {b.id:<16}  {b.name[:30]:<30}  {b.risk_level.value:<6}  "
            f"{b.liquidity.value:<6}  {format_rupees(b.min_investment):>9}  "
            f"{b.time_horizon.value:<7}  {b.experience_required.value:<12}"
        )
    return "\n".join(lines)


# ── Share summary ─────────────────────────────────────────────────────────────


def format_share_summary(top: ScoredBucket, profile: UserProfile) -> str:
    """Format the top recommendation as a short card for sharing.

    Example::

        === My Top Investment Pick ===
          Amount:            ₹1,00,000 (One Lakh Rupees)
          Duration:          3 years
          Recommendation:    🏛️ Public Provident Fund (PPF)
          Expected returns:  7-7.5% p.a.
          Projected value:   ₹1,22,504
          Milestone:         🥉 1 Lakh Club (next: ₹5,00,000)
    """
    bucket = top.bucket
    projected = project_future_value(
        profile.capital,
        parse_expected_return_pct(bucket.expected_returns),
        profile.time_horizon_months,
    )
    milestone = milestone_for(projected)
    if milestone is None:
        first = MILESTONES[0]
        milestone_text = f"{format_rupees(first.min_value)} reaches the {first.title}"
    elif milestone is MILESTONES[-1]:
        milestone_text = f"{milestone.emoji} {milestone.title}"
    else:
        milestone_text = (
            f"{milestone.emoji} {milestone.title} "
            f"(next: {format_rupees(milestone.next_at)})"
        )
    name = f"{bucket.emoji} {bucket.name}" if bucket.emoji else bucket.name

    lines = [
        "",
        "=== My Top Investment Pick ===",
        f"  Amount:            {format_rupees(profile.capital, max_fraction_digits=0)} "
        f"({amount_in_words(profile.capital)})",
        f"  Duration:          {duration_label(profile.time_horizon_months)}",
        f"  Recommendation:    {name}",
        f"  Expected returns:  {bucket.expected_returns}",
        f"  Projected value:   {format_rupees(projected, max_fraction_digits=0)}",
        f"  Milestone:         {milestone_text}",
        f"  Fit:               {top.score}  {FIT_BADGES[top.fit_level]}",
    ]
    return "\n".join(lines)
