"""Tests for the wellscore command-line interface."""

import json
import logging

import pytest
from click.testing import CliRunner

from wellscore.cli import cli
from wellscore.themes import DEFAULT_THEME, set_theme

POOR_READINGS = [
    "--resting-heart-rate", "110",
    "--heart-rate", "150",
    "--bmi", "35",
    "--weight", "120",
    "--height", "170",
    "--sex", "male",
    "--steps", "1000",
    "--active-energy", "20",
]


@pytest.fixture
def runner():
    yield CliRunner()
    set_theme(DEFAULT_THEME)


class TestScoreCommand:
    def test_empty_snapshot_json(self, runner):
        result = runner.invoke(cli, ["score", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["overall"] == 100
        assert data["risk_level"] == "low"
        assert len(data["recommendations"]) == 2

    def test_reading_options(self, runner):
        result = runner.invoke(cli, ["score", "--steps", "2000", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["breakdown"]["activity"] == 60
        assert data["overall"] == 90

    def test_very_high_risk_exit_code(self, runner):
        result = runner.invoke(cli, ["score", *POOR_READINGS, "--age", "70", "--json"])
        assert result.exit_code == 2
        assert json.loads(result.output)["risk_level"] == "very-high"

    def test_high_risk_exit_code(self, runner):
        result = runner.invoke(cli, ["score", *POOR_READINGS, "--age", "40", "--json"])
        assert result.exit_code == 1
        assert json.loads(result.output)["overall"] == 55

    def test_snapshot_file_with_override(self, runner, tmp_path):
        path = tmp_path / "snapshot.json"
        path.write_text(json.dumps({"stepCount": 2000, "restingHeartRate": 110}))
        result = runner.invoke(
            cli, ["score", "--snapshot", str(path), "--steps", "9000", "--json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["breakdown"]["activity"] == 100
        assert data["breakdown"]["cardiovascular"] == 75

    def test_snapshot_file_with_huge_integers(self, runner, tmp_path):
        path = tmp_path / "big.json"
        path.write_text(json.dumps({"weight": 10**400, "height": 180, "activeEnergyBurned": 10**400}))
        result = runner.invoke(cli, ["score", "--snapshot", str(path), "--json"])
        assert result.exception is None or isinstance(result.exception, SystemExit)
        data = json.loads(result.output)
        assert data["breakdown"]["metabolic"] == 70
        assert data["breakdown"]["activity"] == 100

    def test_invalid_snapshot_file(self, runner, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{oops")
        result = runner.invoke(cli, ["score", "--snapshot", str(path)])
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_text_report(self, runner):
        result = runner.invoke(cli, ["score", "--steps", "2000"])
        assert result.exit_code == 0
        assert "WELLNESS REPORT" in result.output
        assert "Low risk" in result.output
        assert "Activity" in result.output

    def test_theme_option(self, runner):
        result = runner.invoke(cli, ["--theme", "traffic", "score"])
        assert result.exit_code == 0
        assert "GREEN" in result.output

    def test_verbose_flag(self, runner, monkeypatch):
        calls = []
        monkeypatch.setattr(
            "wellscore.cli.logging.basicConfig", lambda **kw: calls.append(kw)
        )
        result = runner.invoke(cli, ["--verbose", "score", "--json", "--age", "30"])
        assert result.exit_code == 0
        assert calls and calls[0]["level"] == logging.DEBUG


class TestStatusCommand:
    def test_reading_statuses(self, runner):
        result = runner.invoke(cli, ["status", "--steps", "12000", "--bmi", "31"])
        assert result.exit_code == 0
        assert "Excellent" in result.output
        assert "Needs improvement" in result.output
        assert "No data" in result.output


class TestThemesCommand:
    def test_lists_themes(self, runner):
        result = runner.invoke(cli, ["themes"])
        assert result.exit_code == 0
        assert "clinical (default)" in result.output
        assert "traffic" in result.output
