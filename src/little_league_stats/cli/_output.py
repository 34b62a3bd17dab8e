from rich.console import Console
from rich.table import Table

from little_league_stats.domain.game import GameRecord, ParsedBoxScore
from little_league_stats.domain.season import (
    CATEGORY_LABELS,
    BatchItemResult,
    LeaderboardCategory,
    LeaderboardEntry,
    PlayerSeasonTotals,
)

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def print_parsed_box_score(parsed: ParsedBoxScore) -> None:
    game = parsed.game
    console.print(f"[bold]{game.away_team}[/bold] {game.away_score} @ [bold]{game.home_team}[/bold] {game.home_score}")
    console.print(f"  Date: {game.date.isoformat()}")
    console.print(f"  Venue: {game.venue}")
    if not parsed.players:
        console.print("  No player lines found.")
        return
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Player")
    table.add_column("Team")
    for header in ("AB", "H", "R", "RBI", "AVG"):
        table.add_column(header, justify="right")
    for p in parsed.players:
        table.add_row(p.name, p.team, str(p.at_bats), str(p.hits), str(p.runs), str(p.rbi), f"{p.batting_avg:.3f}")
    console.print(table)


def print_batch_results(results: list[BatchItemResult]) -> None:
    if not results:
        console.print("No box scores to process.")
        return
    for r in results:
        color = "green" if r.success else "red"
        console.print(f"[{color}]{r.source}[/{color}]: {r.message}")
    succeeded = sum(1 for r in results if r.success)
    console.print(f"[bold]{succeeded}[/bold] of {len(results)} box scores processed")


def print_recent_games(games: list[GameRecord]) -> None:
    if not games:
        console.print("No games have been added yet.")
        return
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Date")
    table.add_column("Teams")
    table.add_column("Score", justify="right")
    table.add_column("Venue")
    table.add_column("Status")
    for g in games:
        table.add_row(
            g.date.isoformat(),
            f"{g.away_team} @ {g.home_team}",
            f"{g.away_score} - {g.home_score}",
            g.venue,
            "Processed" if g.processed else "Pending",
        )
    console.print(table)


def print_leaderboard(category: LeaderboardCategory, entries: list[LeaderboardEntry]) -> None:
    label = CATEGORY_LABELS[category]
    if not entries:
        console.print(f"No qualifying players for {label}.")
        return
    table = Table(title=f"{label} Leaders", show_edge=False, pad_edge=False)
    table.add_column("Rank", justify="right")
    table.add_column("Player")
    table.add_column("Team")
    table.add_column(label, justify="right")
    for e in entries:
        table.add_row(str(e.rank), e.name, e.team, e.value)
    console.print(table)


def print_season_totals(totals: list[PlayerSeasonTotals]) -> None:
    if not totals:
        console.print("No player lines stored.")
        return
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Player")
    table.add_column("Team")
    for header in ("G", "AB", "H", "R", "RBI", "2B", "3B", "HR", "SB", "AVG", "SLG"):
        table.add_column(header, justify="right")
    for t in sorted(totals, key=lambda t: (t.team, t.name)):
        table.add_row(
            t.name,
            t.team,
            str(t.games),
            str(t.at_bats),
            str(t.hits),
            str(t.runs),
            str(t.rbi),
            str(t.doubles),
            str(t.triples),
            str(t.home_runs),
            str(t.stolen_bases),
            f"{t.batting_avg:.3f}",
            f"{t.slugging_pct:.3f}",
        )
    console.print(table)
