"""Command-line interface for wellscore."""

from __future__ import annotations

import dataclasses
import json
import logging
import sys
from pathlib import Path

import click

from wellscore.health import RiskLevel, ScoreResult, compute_score
from wellscore.snapshot import BiologicalSex, HealthSnapshot, SnapshotError, load_snapshot
from wellscore.themes import (
    METRIC_HINTS,
    METRIC_STATUS_LABELS,
    MetricStatus,
    get_theme,
    label_for_risk_level,
    list_themes,
    metric_status,
    set_theme,
)

# (option, dest, help) for each numeric reading
_READING_OPTIONS = [
    ("--steps", "step_count", "Step count for the day"),
    ("--heart-rate", "heart_rate", "Current heart rate (bpm)"),
    ("--resting-heart-rate", "resting_heart_rate", "Resting heart rate (bpm)"),
    ("--weight", "weight", "Body weight (kg)"),
    ("--height", "height", "Height (cm)"),
    ("--bmi", "bmi", "Body-mass index"),
    ("--active-energy", "active_energy_burned", "Active energy burned (kcal)"),
    ("--age", "age", "Age in years"),
]

_DIMENSION_ICONS = {
    "cardiovascular": "❤️",
    "metabolic": "⚖️",
    "activity": "🏃",
    "lifestyle": "🌱",
}

_STATUS_COLORS = {
    MetricStatus.EXCELLENT: "green",
    MetricStatus.GOOD: "bright_green",
    MetricStatus.FAIR: "yellow",
    MetricStatus.POOR: "red",
    MetricStatus.UNKNOWN: "white",
}


def snapshot_options(func):
    """Attach --snapshot and the per-reading override options to a command."""
    for flag, dest, help_text in reversed(_READING_OPTIONS):
        func = click.option(flag, dest, type=float, default=None, help=help_text)(func)
    func = click.option(
        "--sex",
        "biological_sex",
        type=click.Choice([s.value for s in BiologicalSex]),
        default=None,
        help="Biological sex",
    )(func)
    func = click.option(
        "--snapshot", "-s",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Path to a JSON snapshot export",
    )(func)
    return func


def build_snapshot(snapshot: Path | None, **readings) -> HealthSnapshot:
    """Load the snapshot file (if any) and apply command-line overrides."""
    base = load_snapshot(snapshot) if snapshot is not None else HealthSnapshot()

    overrides = {k: v for k, v in readings.items() if v is not None}
    if "biological_sex" in overrides:
        overrides["biological_sex"] = BiologicalSex(overrides["biological_sex"])
    return dataclasses.replace(base, **overrides)


def _bar(score: int, width: int = 20) -> str:
    filled = int(score * width / 100)
    return "█" * filled + "░" * (width - filled)


def print_score_report(result: ScoreResult) -> None:
    """Print a formatted wellness report to stdout."""
    theme = get_theme()

    click.echo()
    click.echo("═" * 50)
    click.echo("  WELLNESS REPORT")
    click.echo("═" * 50)
    click.echo()

    level = result.risk_level
    click.echo(
        f"  Overall:   {theme.emoji_for(level)} "
        + click.style(
            f"{result.overall} [{_bar(result.overall)}] {theme.label_for(level).upper()}",
            fg=theme.color_for(level),
            bold=True,
        )
    )
    click.echo(f"  Risk:      {label_for_risk_level(level)}")
    click.echo()

    for name, score in result.breakdown.to_dict().items():
        click.echo(
            f"  {_DIMENSION_ICONS[name]}  {name.title():15}"
            + click.style(f"{score:>3}", fg=theme.color_for_score(score))
            + f" [{_bar(score, 10)}]"
        )
    click.echo()

    if result.recommendations:
        click.echo("  💡 Recommendations:")
        click.echo()
        for rec in result.recommendations:
            click.echo(f"     • {rec}")
        click.echo()


@click.group()
@click.version_option(version="0.1.0")
@click.option(
    "--theme", "-t",
    type=click.Choice(list_themes()),
    default="clinical",
    help="Risk label theme (default: clinical)",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Log scoring details to stderr",
)
def cli(theme: str, verbose: bool):
    """WellScore - Wellness score and health-risk tiers from biometric readings."""
    set_theme(theme)
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


@cli.command()
@snapshot_options
@click.option(
    "--json", "json_output",
    is_flag=True,
    help="Output as JSON",
)
def score(snapshot: Path | None, json_output: bool, **readings):
    """Compute the wellness score for a snapshot."""
    try:
        health = build_snapshot(snapshot, **readings)
    except SnapshotError as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    result = compute_score(health)

    if json_output:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_score_report(result)

    # Exit code based on risk tier (theme-independent)
    # very-high -> exit 2, high -> exit 1, low/moderate -> exit 0
    if result.risk_level == RiskLevel.VERY_HIGH:
        sys.exit(2)
    elif result.risk_level == RiskLevel.HIGH:
        sys.exit(1)
    sys.exit(0)


@cli.command()
@snapshot_options
def status(snapshot: Path | None, **readings):
    """Show the status of each individual reading."""
    try:
        health = build_snapshot(snapshot, **readings)
    except SnapshotError as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    click.echo()
    click.echo(f"  {'READING':<24}{'VALUE':>10}  {'STATUS':<20}")
    for metric, hint in METRIC_HINTS.items():
        value = getattr(health, metric)
        state = metric_status(value, metric)
        shown = "--" if value is None else f"{value:g}"
        click.echo(
            f"  {metric.replace('_', ' '):<24}{shown:>10}  "
            + click.style(f"{METRIC_STATUS_LABELS[state]:<20}", fg=_STATUS_COLORS[state])
        )
        click.echo(click.style(f"    {hint}", dim=True))
    click.echo()


@cli.command()
def themes():
    """List all available risk themes."""
    from wellscore.themes import DEFAULT_THEME, THEMES

    click.echo()
    click.echo("Available Risk Themes:")
    click.echo("=" * 60)
    click.echo()

    for name, theme in THEMES.items():
        is_default = " (default)" if name == DEFAULT_THEME else ""
        click.echo(click.style(f"  {name}{is_default}", bold=True))
        click.echo(f"    {theme.emoji_0} {theme.level_0} → {theme.emoji_1} {theme.level_1} → {theme.emoji_2} {theme.level_2} → {theme.emoji_3} {theme.level_3}")
        click.echo()

    click.echo("Use --theme <name> to select a theme.")
    click.echo()


def main():
    """Main entry point for wellscore CLI."""
    cli()


if __name__ == "__main__":
    main()
