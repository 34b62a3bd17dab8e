from little_league_stats.cli.app import app

__all__ = ["app"]
