"""
Bucket Advisor configuration: a frozen ``AppConfig`` built from layered sources.

Layers, later ones winning:
  1. ``config/default.toml``      - committed static defaults
  2. ``config/local.toml``        - optional local overrides (gitignored)
  3. ``.env``                     - local env overrides (gitignored)
  4. Environment variables        - ``BUCKET_ADVISOR_*`` prefix

Most callers only need ``load_config()``.

Only the surroundings of the engine are configurable (logging, output
paths, CLI defaults). The scoring weights and the display threshold are
fixed constants in ``bucket_advisor.recommendations`` and are NOT exposed
here: changing them silently changes every ranking.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Callable, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from bucket_advisor.taxonomy.investment_taxonomy import (
    ExperienceLevel,
    Goal,
    RiskLevel,
    SortOrder,
)

# ── Sub-config models ─────────────────────────────────────────────────────────


class LoggingConfig(BaseModel):
    """Where log lines go and how they look."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = "data/logs/bucket_advisor.log"
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def normalise_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}  # stdlib level names
        if v.upper() not in valid:
            raise ValueError(f"Log level '{v}' is not one of {sorted(valid)}.")
        return v.upper()


class RecommendConfig(BaseModel):
    """Recommendation output settings."""

    model_config = ConfigDict(frozen=True)

    top_n: int = 5
    sort_order: SortOrder = SortOrder.FIT
    output_dir: str = "data/outputs/recommendations"

    @field_validator("top_n")
    @classmethod
    def validate_top_n(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"top_n must be >= 1, got {v}.")
        return v


class ProfileDefaultsConfig(BaseModel):
    """Form defaults used when the CLI is not given a profile field.

    ``fallback_horizon_months`` replaces a missing or non-positive horizon.
    """

    model_config = ConfigDict(frozen=True)

    capital: float = 100_000
    time_horizon_months: int = 36
    risk_preference: RiskLevel = RiskLevel.MEDIUM
    needs_liquidity: bool = False
    goal: Goal = Goal.GROWTH
    experience: ExperienceLevel = ExperienceLevel.BEGINNER
    fallback_horizon_months: int = 12

    @field_validator("fallback_horizon_months")
    @classmethod
    def validate_fallback(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"fallback_horizon_months must be >= 1, got {v}.")
        return v


class AppConfig(BaseModel):
    """Everything the CLI reads at startup, one frozen model per TOML table."""

    model_config = ConfigDict(frozen=True)

    logging: LoggingConfig = LoggingConfig()
    recommend: RecommendConfig = RecommendConfig()
    profile_defaults: ProfileDefaultsConfig = ProfileDefaultsConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_SECTIONS: dict[str, type[BaseModel]] = {
    "logging":          LoggingConfig,
    "recommend":        RecommendConfig,
    "profile_defaults": ProfileDefaultsConfig,
}

# env var -> (section or None for top level, key, parser)
_ENV_OVERRIDES: dict[str, tuple[Optional[str], str, Callable[[str], Any]]] = {
    "BUCKET_ADVISOR_LOG_LEVEL":  ("logging", "level", str),
    "BUCKET_ADVISOR_OUTPUT_DIR": ("recommend", "output_dir", str),
    "BUCKET_ADVISOR_DEBUG":      (None, "debug", lambda s: s.lower() in ("1", "true", "yes")),
}


def _find_project_root() -> Path:
    """Return the nearest ancestor of this module holding pyproject.toml.

    Falls back to the package's parent directory for non-editable installs.
    """
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents[:4]):
        if (candidate / "pyproject.toml").exists():
            return candidate
    return here.parent


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: TOML file to start from. Defaults to
            ``<project_root>/config/default.toml``. A ``local.toml`` in the
            same directory is merged on top when present.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the config file does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()
    load_dotenv(dotenv_path=root / ".env", override=False)

    path = Path(config_path) if config_path is not None else root / "config" / "default.toml"
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            "Create config/default.toml or pass --config."
        )

    raw = _read_toml(path)
    local_path = path.parent / "local.toml"
    if local_path.exists():
        raw = _deep_merge(raw, _read_toml(local_path))

    return _build_app_config(_apply_env_overrides(raw))


def _read_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as f:
        return tomllib.load(f)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` with ``override`` merged in; nested tables merge key by key."""
    merged = dict(base)
    for key, val in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(val, dict):
            merged[key] = _deep_merge(current, val)
        else:
            merged[key] = val
    return merged


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply the ``_ENV_OVERRIDES`` table to the raw config dict.

    Empty variables are ignored.
    """
    for var, (section, key, parse) in _ENV_OVERRIDES.items():
        value = os.environ.get(var)
        if not value:
            continue
        target = raw if section is None else raw.setdefault(section, {})
        target[key] = parse(value)
    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map the raw TOML dict onto ``AppConfig``.

    ``[project] debug`` is the file location of the debug flag; a top-level
    ``debug`` key (set by ``BUCKET_ADVISOR_DEBUG``) wins over it.
    """
    project = raw.get("project", {})
    sections = {
        name: model(**raw.get(name, {})) for name, model in _SECTIONS.items()
    }
    return AppConfig(**sections, debug=raw.get("debug", project.get("debug", False)))
