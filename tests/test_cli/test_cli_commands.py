"""
Tests for the Typer CLI in bucket_advisor/cli.py.

Commands run through ``typer.testing.CliRunner`` against a console-only
temp config, so nothing is written outside ``tmp_path``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from bucket_advisor.catalog.buckets import INVESTMENT_BUCKETS
from bucket_advisor.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """configure_logging() replaces root handlers; put them back afterwards."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def _recommend(tmp_config: Path, *args: str):
    return runner.invoke(app, ["recommend", "--config", str(tmp_config), *args])


# ── recommend ─────────────────────────────────────────────────────────────────

class TestRecommend:
    def test_table_output(self, tmp_config):
        result = _recommend(tmp_config)
        assert result.exit_code == 0, result.output
        assert "Investment Recommendations" in result.output
        assert "Public Provident Fund (PPF)" in result.output

    def test_json_output(self, tmp_config):
        result = _recommend(tmp_config, "--json")
        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload["profile"]["time_horizon_months"] == 36
        assert len(payload["results"]) == 5
        assert payload["results"][0]["bucket"]["id"] == "ppf"

    def test_top_and_profile_options(self, tmp_config):
        result = _recommend(
            tmp_config, "--json", "--top", "2",
            "--capital", "100000", "--months", "12", "--risk", "low",
            "--liquidity", "--goal", "SAFETY", "--experience", "BEGINNER",
        )
        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload["profile"]["needs_liquidity"] is True
        assert len(payload["results"]) == 2
        assert payload["results"][0]["bucket"]["id"] == "savings_account"

    def test_all_flag(self, tmp_config):
        result = _recommend(tmp_config, "--json", "--all")
        payload = json.loads(result.stdout)
        assert len(payload["results"]) > 5
        assert len(payload["results"]) <= len(INVESTMENT_BUCKETS)

    def test_sort_by_risk(self, tmp_config):
        result = _recommend(tmp_config, "--json", "--all", "--sort", "risk")
        levels = [r["bucket"]["risk_level"] for r in json.loads(result.stdout)["results"]]
        order = {"LOW": 0, "MEDIUM": 1, "HIGH": 2}
        assert levels == sorted(levels, key=order.__getitem__)

    def test_form_coercion(self, tmp_config):
        result = _recommend(tmp_config, "--json", "--capital=-50", "--months=0")
        assert result.exit_code == 0, result.output
        profile = json.loads(result.stdout)["profile"]
        assert profile["capital"] == 0
        assert profile["time_horizon_months"] == 12

    def test_empty_result_is_not_an_error(self, tmp_config):
        result = _recommend(tmp_config, "--capital", "0", "--months", "2", "--top", "0")
        assert result.exit_code == 0, result.output
        assert "no matching investments" in result.output

    def test_negative_top_fails(self, tmp_config):
        result = _recommend(tmp_config, "--top", "-1")
        assert result.exit_code == 1
        assert "[ERROR]" in result.output

    def test_invalid_goal_rejected(self, tmp_config):
        result = _recommend(tmp_config, "--goal", "RETIREMENT")
        assert result.exit_code != 0

    def test_explain(self, tmp_config):
        result = _recommend(tmp_config, "--capital", "100", "--explain", "reit")
        assert result.exit_code == 0, result.output
        assert "REITs (Real Estate Investment Trusts)" in result.output
        assert "Your score:" in result.output
        assert "Minimum investment is ₹10,000" in result.output

    def test_explain_unknown_bucket(self, tmp_config):
        result = _recommend(tmp_config, "--explain", "crypto")
        assert result.exit_code == 1
        assert "Unknown bucket id" in result.output

    def test_export_writes_reports(self, tmp_config, tmp_path):
        result = _recommend(tmp_config, "--export", "--label", "demo")
        assert result.exit_code == 0, result.output
        out_dir = tmp_path / "out"
        assert len(list(out_dir.glob("recommendations_demo_*.json"))) == 1
        assert len(list(out_dir.glob("recommendations_demo_*.csv"))) == 1
        assert "Exported:" in result.output

    def test_very_long_horizon(self, tmp_config):
        result = _recommend(
            tmp_config, "--capital", "100000", "--months", "1500",
            "--risk", "HIGH", "--goal", "GROWTH", "--experience", "ADVANCED", "--all",
        )
        assert result.exit_code == 0, result.output
        assert "Investment Recommendations" in result.output

    def test_overflowing_projection(self, tmp_config):
        result = _recommend(tmp_config, "--months", "2000000", "--all")
        assert result.exit_code == 0, result.output
        assert "₹∞" in result.output

    def test_huge_capital(self, tmp_config):
        result = _recommend(tmp_config, "--capital", "1e30", "--months", "1500")
        assert result.exit_code == 0, result.output
        assert "₹10,00,00," in result.output

    @pytest.mark.parametrize("capital", ["inf", "nan"])
    def test_non_finite_capital_rejected(self, tmp_config, capital):
        result = _recommend(tmp_config, "--capital", capital)
        assert result.exit_code == 1
        assert "Invalid profile" in result.output

    def test_share(self, tmp_config):
        result = _recommend(tmp_config, "--share")
        assert result.exit_code == 0, result.output
        assert "=== My Top Investment Pick ===" in result.output
        assert "₹1,00,000 (One Lakh Rupees)" in result.output
        assert "Public Provident Fund (PPF)" in result.output
        assert "Investment Recommendations" not in result.output

    def test_share_with_no_matches(self, tmp_config, monkeypatch):
        monkeypatch.setattr(
            "bucket_advisor.recommendations.ranker.rank", lambda profile: []
        )
        result = _recommend(tmp_config, "--share")
        assert result.exit_code == 0, result.output
        assert "no matching investments to share" in result.output

    def test_missing_config(self, tmp_path):
        result = runner.invoke(app, ["recommend", "--config", str(tmp_path / "missing.toml")])
        assert result.exit_code == 1
        assert "Config file not found" in result.output


# ── catalog commands ──────────────────────────────────────────────────────────

class TestCatalogCommands:
    def test_buckets_lists_catalog(self, tmp_config):
        result = runner.invoke(app, ["buckets", "--config", str(tmp_config)])
        assert result.exit_code == 0, result.output
        assert f"Investment Buckets ({len(INVESTMENT_BUCKETS)})" in result.output

    def test_buckets_filtered(self, tmp_config):
        result = runner.invoke(
            app, ["buckets", "--goal", "TAX_SAVING", "--config", str(tmp_config)]
        )
        assert result.exit_code == 0, result.output
        assert "Investment Buckets (4)" in result.output
        assert "elss" in result.output

    def test_show_bucket(self, tmp_config):
        result = runner.invoke(app, ["show-bucket", "nps", "--config", str(tmp_config)])
        assert result.exit_code == 0, result.output
        assert "National Pension System (NPS)" in result.output
        assert "Till age 60" in result.output

    def test_show_unknown_bucket(self, tmp_config):
        result = runner.invoke(app, ["show-bucket", "crypto", "--config", str(tmp_config)])
        assert result.exit_code == 1
        assert "[ERROR]" in result.output

    def test_validate_catalog(self, tmp_config):
        result = runner.invoke(app, ["validate-catalog", "--config", str(tmp_config)])
        assert result.exit_code == 0, result.output
        assert "[OK] Catalog valid." in result.output

    @pytest.mark.parametrize(
        "args", [["buckets"], ["show-bucket", "ppf"], ["validate-catalog"]],
    )
    def test_configures_logging_from_config(self, tmp_config, monkeypatch, args):
        monkeypatch.setenv("BUCKET_ADVISOR_LOG_LEVEL", "DEBUG")
        result = runner.invoke(app, [*args, "--config", str(tmp_config)])
        assert result.exit_code == 0, result.output
        assert logging.getLogger().level == logging.DEBUG

    @pytest.mark.parametrize(
        "args", [["buckets"], ["show-bucket", "ppf"], ["validate-catalog"]],
    )
    def test_missing_config(self, tmp_path, args):
        result = runner.invoke(app, [*args, "--config", str(tmp_path / "missing.toml")])
        assert result.exit_code == 1
        assert "Config file not found" in result.output


# ── validate-config ───────────────────────────────────────────────────────────

class TestValidateConfig:
    def test_valid(self, tmp_config):
        result = runner.invoke(app, ["validate-config", "--config", str(tmp_config)])
        assert result.exit_code == 0, result.output
        assert "[OK] Config valid." in result.output

    def test_full(self, tmp_config):
        result = runner.invoke(
            app, ["validate-config", "--config", str(tmp_config), "--full"]
        )
        assert result.exit_code == 0, result.output
        assert '"top_n": 5' in result.output

    def test_invalid(self, tmp_config):
        tmp_config.write_text(
            tmp_config.read_text(encoding="utf-8").replace("top_n = 5", "top_n = 0"),
            encoding="utf-8",
        )
        result = runner.invoke(app, ["validate-config", "--config", str(tmp_config)])
        assert result.exit_code == 1
        assert "Config validation failed" in result.output
