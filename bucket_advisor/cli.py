"""
Bucket Advisor CLI entry point.

Catalog and ranking commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Coerce raw options into domain objects (the "form layer"), if any.
  4. Call the pure catalog / ranking functions.
  5. Report result to stdout.

``validate-config`` only loads and prints the config; it does not touch
logging handlers.

Install and run::

    pip install -e .
    bucket-advisor --help
    bucket-advisor recommend --capital 250000 --months 60 --risk HIGH --goal GROWTH
    bucket-advisor recommend --goal TAX_SAVING --explain elss
    bucket-advisor recommend --capital 500000 --months 120 --share
    bucket-advisor buckets --risk LOW --goal SAFETY
    bucket-advisor show-bucket ppf
    bucket-advisor validate-catalog
    bucket-advisor validate-config
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from bucket_advisor.taxonomy.investment_taxonomy import (
    ExperienceLevel,
    Goal,
    LiquidityLevel,
    RiskLevel,
    SortOrder,
)

app = typer.Typer(
    name="bucket-advisor",
    help="Rule-based investment bucket recommendations for Indian retail investors.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from bucket_advisor.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from bucket_advisor.utils.logging import configure_logging
    configure_logging(config.logging)


def _build_profile_or_exit(
    config,
    capital:         Optional[float],
    months:          Optional[int],
    risk:            Optional[RiskLevel],
    needs_liquidity: Optional[bool],
    goal:            Optional[Goal],
    experience:      Optional[ExperienceLevel],
):
    """Fill unset options from config defaults and coerce into a UserProfile."""
    from bucket_advisor.models.profile import UserProfile

    defaults = config.profile_defaults
    try:
        return UserProfile.from_form(
            capital=defaults.capital if capital is None else capital,
            time_horizon_months=defaults.time_horizon_months if months is None else months,
            risk_preference=risk or defaults.risk_preference,
            needs_liquidity=defaults.needs_liquidity if needs_liquidity is None else needs_liquidity,
            goal=goal or defaults.goal,
            experience=experience or defaults.experience,
            fallback_horizon_months=defaults.fallback_horizon_months,
        )
    except ValueError as exc:
        typer.echo(f"[ERROR] Invalid profile: {exc}", err=True)
        raise typer.Exit(code=1)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("recommend")
def recommend(
    capital: Optional[float] = typer.Option(
        None, "--capital", help="Amount to invest in rupees (negative is treated as 0).",
    ),
    months: Optional[int] = typer.Option(
        None, "--months", help="Investment horizon in months (<= 0 uses the fallback).",
    ),
    risk: Optional[RiskLevel] = typer.Option(
        None, "--risk", case_sensitive=False, help="Risk preference.",
    ),
    needs_liquidity: Optional[bool] = typer.Option(
        None, "--liquidity/--no-liquidity", help="Whether the money may be needed anytime.",
    ),
    goal: Optional[Goal] = typer.Option(
        None, "--goal", case_sensitive=False, help="Primary investment goal.",
    ),
    experience: Optional[ExperienceLevel] = typer.Option(
        None, "--experience", case_sensitive=False, help="Investing experience.",
    ),
    top: Optional[int] = typer.Option(
        None, "--top", help="Show only the top N results (default from config).",
    ),
    show_all: bool = typer.Option(
        False, "--all", help="Show every ranked result instead of the top N.",
    ),
    sort_order: Optional[SortOrder] = typer.Option(
        None, "--sort", case_sensitive=False, help="Display order: fit, earnings, risk.",
    ),
    explain: Optional[str] = typer.Option(
        None, "--explain", help="Show the full evaluation of one bucket id, even if filtered out.",
    ),
    share: bool = typer.Option(
        False, "--share", help="Print a shareable summary of the top pick instead of the table.",
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print results as JSON instead of a table.",
    ),
    export: bool = typer.Option(
        False, "--export", help="Also write JSON + CSV reports to the output directory.",
    ),
    label: str = typer.Option(
        "profile", "--label", help="Tag used in exported file names.",
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file.",
    ),
) -> None:
    """Rank the investment buckets for one profile.

    Buckets scoring 20 or less are hidden; an empty list is a valid
    "no matches" result, not an error.
    """
    from bucket_advisor.catalog.buckets import get_bucket
    from bucket_advisor.recommendations.ranker import (
        rank,
        sort_recommendations,
        top_n,
    )
    from bucket_advisor.recommendations.reporter import (
        serialize_scored_bucket,
        write_recommendation_csv,
        write_recommendation_json,
    )
    from bucket_advisor.recommendations.scorer import score_bucket
    from bucket_advisor.reporting.formatters import (
        format_bucket_detail,
        format_recommendation_table,
        format_share_summary,
    )

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    profile = _build_profile_or_exit(
        config, capital, months, risk, needs_liquidity, goal, experience,
    )

    if explain is not None:
        try:
            bucket = get_bucket(explain)
        except KeyError as exc:
            typer.echo(f"[ERROR] {exc.args[0]}", err=True)
            raise typer.Exit(code=1)
        typer.echo(format_bucket_detail(bucket, score_bucket(bucket, profile)))
        return

    if share:
        ranked = rank(profile)
        if not ranked:
            typer.echo("  (no matching investments to share for this profile)")
            return
        typer.echo(format_share_summary(ranked[0], profile))
        return

    if show_all:
        results = rank(profile)
    else:
        n = top if top is not None else config.recommend.top_n
        try:
            results = top_n(profile, n)
        except ValueError as exc:
            typer.echo(f"[ERROR] {exc}", err=True)
            raise typer.Exit(code=1)

    results = sort_recommendations(results, sort_order or config.recommend.sort_order)

    if as_json:
        typer.echo(
            json.dumps(
                {
                    "profile": profile.model_dump(mode="json"),
                    "results": [serialize_scored_bucket(sb) for sb in results],
                },
                indent=2,
                ensure_ascii=False,
            )
        )
    else:
        typer.echo(format_recommendation_table(results, profile))

    if export:
        output_dir = Path(config.recommend.output_dir)
        json_path = write_recommendation_json(results, profile, output_dir, label=label)
        csv_path = write_recommendation_csv(results, profile, output_dir, label=label)
        typer.echo(f"  Exported: {json_path}", err=as_json)
        typer.echo(f"  Exported: {csv_path}", err=as_json)


@app.command("buckets")
def buckets(
    risk: Optional[RiskLevel] = typer.Option(
        None, "--risk", case_sensitive=False, help="Only this risk level.",
    ),
    liquidity: Optional[LiquidityLevel] = typer.Option(
        None, "--liquidity", case_sensitive=False, help="Only this liquidity level.",
    ),
    goal: Optional[Goal] = typer.Option(
        None, "--goal", case_sensitive=False, help="Only buckets serving this goal.",
    ),
    experience: Optional[ExperienceLevel] = typer.Option(
        None, "--experience", case_sensitive=False,
        help="Hide buckets needing more experience than this.",
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file.",
    ),
) -> None:
    """List catalog buckets, optionally filtered."""
    from bucket_advisor.catalog.buckets import filter_buckets
    from bucket_advisor.reporting.formatters import format_catalog_table

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    matches = filter_buckets(
        risk_level=risk, liquidity=liquidity, goal=goal, experience=experience,
    )
    typer.echo(format_catalog_table(matches))


@app.command("show-bucket")
def show_bucket(
    bucket_id: str = typer.Argument(..., help="Bucket id, e.g. 'ppf'."),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file.",
    ),
) -> None:
    """Print the full description of one bucket."""
    from bucket_advisor.catalog.buckets import get_bucket
    from bucket_advisor.reporting.formatters import format_bucket_detail

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    try:
        bucket = get_bucket(bucket_id)
    except KeyError as exc:
        typer.echo(f"[ERROR] {exc.args[0]}", err=True)
        raise typer.Exit(code=1)

    typer.echo(format_bucket_detail(bucket))


@app.command("validate-catalog")
def validate_catalog_cmd(
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file.",
    ),
) -> None:
    """Check the bucket catalog integrity contract.

    Exits with code 1 if any problem is found.
    """
    from bucket_advisor.catalog.buckets import INVESTMENT_BUCKETS, validate_catalog

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    problems = validate_catalog(INVESTMENT_BUCKETS)
    if problems:
        typer.echo(f"[ERROR] {len(problems)} catalog problem(s):", err=True)
        for msg in problems:
            typer.echo(f"  {msg}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"  Buckets: {len(INVESTMENT_BUCKETS)} validated.")
    typer.echo("[OK] Catalog valid.")


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)
    defaults = config.profile_defaults

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Top N:            {config.recommend.top_n}")
    typer.echo(f"  Sort order:       {config.recommend.sort_order.value}")
    typer.echo(f"  Output dir:       {config.recommend.output_dir}")
    typer.echo(
        f"  Default profile:  {defaults.capital:g} / {defaults.time_horizon_months} months / "
        f"{defaults.risk_preference.value} / {defaults.goal.value} / "
        f"{defaults.experience.value}"
    )
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(mode="json"), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


if __name__ == "__main__":
    app()
