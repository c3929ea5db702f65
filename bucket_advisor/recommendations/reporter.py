"""
Recommendation report writer: JSON and CSV output for ranked buckets.

All functions are pure I/O. They consume in-memory ScoredBucket lists and
write human-readable + machine-readable files; nothing is read back.

Output files
------------
  data/outputs/recommendations/
    recommendations_{label}_{date}.json  -- profile + ranked results
    recommendations_{label}_{date}.csv   -- one row per ranked bucket

The JSON shape mirrors the in-process objects: a ``profile`` object with
the UserProfile fields and a ``results`` array of ScoredBucket-shaped
objects.
"""

from __future__ import annotations

import csv
import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Sequence

from bucket_advisor.models.profile import UserProfile
from bucket_advisor.recommendations.projection import (
    parse_expected_return_pct,
    project_future_value,
)
from bucket_advisor.recommendations.scorer import ScoredBucket

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "v1.0.0"


def serialize_scored_bucket(sb: ScoredBucket) -> dict[str, Any]:
    """Convert one ScoredBucket to a JSON-ready dict."""
    bucket = sb.bucket
    return {
        "bucket": {
            "id":                  bucket.id,
            "name":                bucket.name,
            "category":            bucket.category,
            "risk_level":          bucket.risk_level.value,
            "liquidity":           bucket.liquidity.value,
            "min_investment":      bucket.min_investment,
            "expected_returns":    bucket.expected_returns,
            "time_horizon":        bucket.time_horizon.value,
            "lock_in_period":      bucket.lock_in_period,
            "goals":               sorted(g.value for g in bucket.goals),
            "experience_required": bucket.experience_required.value,
            "tax_benefit":         bucket.tax_benefit,
        },
        "score":             sb.score,
        "fit_level":         sb.fit_level.value,
        "match_reasons":     list(sb.match_reasons),
        "warning_reasons":   list(sb.warning_reasons),
        "why_this_fits_you": sb.why_this_fits_you,
    }


def write_recommendation_json(
    scored:     Sequence[ScoredBucket],
    profile:    UserProfile,
    output_dir: Path,
    run_date:   date | None = None,
    label:      str = "profile",
) -> Path:
    """Write ranked recommendations to a structured JSON file.

    Args:
        scored:     Ranked ScoredBucket list (e.g. from ``rank()``).
        profile:    Profile the list was ranked for.
        output_dir: Target directory (created if missing).
        run_date:   Date label for the filename. Defaults to today.
        label:      Free-form tag used in the filename.

    Returns:
        Path to the written JSON file.
    """
    if run_date is None:
        run_date = date.today()

    output_dir.mkdir(parents=True, exist_ok=True)
    json_path = output_dir / f"recommendations_{label}_{run_date}.json"

    payload: dict[str, Any] = {
        "schema_version": SCHEMA_VERSION,
        "generated_at":   run_date.isoformat(),
        "profile":        profile.model_dump(mode="json"),
        "results": [
            {"rank": rank, **serialize_scored_bucket(sb)}
            for rank, sb in enumerate(scored, start=1)
        ],
    }

    json_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("Recommendation JSON written: %s (%d results)", json_path, len(scored))
    return json_path


def write_recommendation_csv(
    scored:     Sequence[ScoredBucket],
    profile:    UserProfile,
    output_dir: Path,
    run_date:   date | None = None,
    label:      str = "profile",
) -> Path:
    """Write ranked recommendations to a CSV file.

    Columns: rank, bucket_id, name, risk_level, liquidity, min_investment,
             expected_returns, projected_value, score, fit_level,
             why_this_fits_you, warnings.

    ``projected_value`` is the illustrative compounded value of the
    profile's capital over its horizon at the bucket's headline rate.

    Returns:
        Path to the written CSV file.
    """
    if run_date is None:
        run_date = date.today()

    output_dir.mkdir(parents=True, exist_ok=True)
    csv_path = output_dir / f"recommendations_{label}_{run_date}.csv"

    fieldnames = [
        "rank", "bucket_id", "name", "risk_level", "liquidity", "min_investment",
        "expected_returns", "projected_value", "score", "fit_level",
        "why_this_fits_you", "warnings",
    ]

    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for rank, sb in enumerate(scored, start=1):
            projected = project_future_value(
                profile.capital,
                parse_expected_return_pct(sb.bucket.expected_returns),
                profile.time_horizon_months,
            )
            writer.writerow(
                {
                    "rank":              rank,
                    "bucket_id":         sb.bucket.id,
                    "name":              sb.bucket.name,
                    "risk_level":        sb.bucket.risk_level.value,
                    "liquidity":         sb.bucket.liquidity.value,
                    "min_investment":    sb.bucket.min_investment,
                    "expected_returns":  sb.bucket.expected_returns,
                    "projected_value":   round(projected, 2),
                    "score":             sb.score,
                    "fit_level":         sb.fit_level.value,
                    "why_this_fits_you": sb.why_this_fits_you,
                    "warnings":          "; ".join(sb.warning_reasons),
                }
            )

    logger.info("Recommendation CSV written: %s", csv_path)
    return csv_path
