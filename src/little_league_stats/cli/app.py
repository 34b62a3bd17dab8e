from pathlib import Path
from typing import Annotated

import typer

from little_league_stats.cli._logging import configure_logging
from little_league_stats.cli._output import (
    print_batch_results,
    print_error,
    print_leaderboard,
    print_parsed_box_score,
    print_recent_games,
    print_season_totals,
)
from little_league_stats.cli.factory import build_ingest_service, build_ocr, build_stats_context
from little_league_stats.config import AppSettings, create_config, load_settings
from little_league_stats.domain.season import LeaderboardCategory
from little_league_stats.exceptions import ConfigError
from little_league_stats.ingest.folder import expand_inputs
from little_league_stats.parsing.box_score import parse_box_score
from little_league_stats.services.sample_data import seed_sample_data
from little_league_stats.stats.leaderboard import parse_category

app = typer.Typer(name="lls", help="Little League stats — box score ingestion and season leaderboards")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
    db: Annotated[str | None, typer.Option("--db", help="Path to the stats database")] = None,
    config_file: Annotated[str, typer.Option("--config", help="YAML config file")] = "lls.yaml",
) -> None:
    """Little League stats — box score ingestion and season leaderboards."""
    configure_logging(verbose=verbose)
    try:
        ctx.obj = load_settings(create_config(yaml_path=config_file, db_path=db))
    except ConfigError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1) from exc
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _settings(ctx: typer.Context) -> AppSettings:
    return ctx.obj


_LimitOpt = Annotated[int | None, typer.Option("--limit", "-n", min=1, help="Maximum number of rows")]


@app.command()
def parse(
    file: Annotated[Path, typer.Argument(help="Text file holding OCR output of one box score")],
) -> None:
    """Parse box score text and print the result without storing it."""
    try:
        text = file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print_error(f"cannot read {file}: {exc}")
        raise typer.Exit(code=1) from exc
    print_parsed_box_score(parse_box_score(text))


@app.command()
def ingest(
    ctx: typer.Context,
    paths: Annotated[list[Path], typer.Argument(help="Box score files or folders to scan")],
    text: Annotated[bool, typer.Option("--text", help="Inputs are already-extracted .txt files")] = False,
) -> None:
    """OCR, parse and store box scores, one outcome per file."""
    settings = _settings(ctx)
    extensions = (".txt",) if text else settings.image_extensions
    inputs = expand_inputs(paths, extensions)
    ocr = build_ocr(settings, plain_text=text)
    with build_stats_context(settings.db_path) as stats:
        results = build_ingest_service(stats, ocr).ingest_batch(inputs)
    print_batch_results(results)
    if any(not r.success for r in results):
        raise typer.Exit(code=1)


@app.command()
def games(ctx: typer.Context, limit: _LimitOpt = None) -> None:
    """Show the most recent games."""
    settings = _settings(ctx)
    with build_stats_context(settings.db_path) as stats:
        recent = stats.leaderboard.recent_games(limit or settings.recent_games_limit)
    print_recent_games(recent)


@app.command()
def leaders(
    ctx: typer.Context,
    category: Annotated[str, typer.Argument(help="Category, e.g. batting_avg, home_runs, rbi, runs, stolen_bases")] = (
        LeaderboardCategory.BATTING_AVG.value
    ),
    limit: _LimitOpt = None,
) -> None:
    """Show season leaders for a category."""
    settings = _settings(ctx)
    resolved = parse_category(category)
    with build_stats_context(settings.db_path) as stats:
        entries = stats.leaderboard.get_leaderboard(resolved, limit or settings.leaderboard_limit)
    print_leaderboard(resolved, entries)


@app.command()
def totals(ctx: typer.Context) -> None:
    """Show season totals for every player."""
    with build_stats_context(_settings(ctx).db_path) as stats:
        season = stats.leaderboard.season_totals()
    print_season_totals(season)


@app.command()
def seed(ctx: typer.Context) -> None:
    """Add the demo games when the database is empty."""
    with build_stats_context(_settings(ctx).db_path) as stats:
        added = seed_sample_data(stats.game_repo, stats.line_repo)
        stats.conn.commit()
    typer.echo(f"Added {added} sample games." if added else "Database already has games; nothing added.")
