from little_league_stats.domain.game import GameRecord
from little_league_stats.domain.season import LeaderboardCategory, LeaderboardEntry, PlayerSeasonTotals
from little_league_stats.repos.protocols import GameRepo, PlayerGameLineRepo
from little_league_stats.stats.aggregation import aggregate_season_totals
from little_league_stats.stats.leaderboard import parse_category, rank_leaderboard


class LeaderboardService:
    def __init__(self, line_repo: PlayerGameLineRepo, game_repo: GameRepo | None = None) -> None:
        self._line_repo = line_repo
        self._game_repo = game_repo

    def season_totals(self) -> list[PlayerSeasonTotals]:
        return list(aggregate_season_totals(self._line_repo.all()).values())

    def get_leaderboard(self, category: LeaderboardCategory | str, limit: int = 10) -> list[LeaderboardEntry]:
        """Season leaders in ``category`` over every stored player line."""
        if limit <= 0:
            raise ValueError(f"limit must be positive, got {limit}")
        totals = aggregate_season_totals(self._line_repo.all())
        return rank_leaderboard(totals, parse_category(category), limit)

    def recent_games(self, limit: int = 5) -> list[GameRecord]:
        if self._game_repo is None:
            return []
        return self._game_repo.list_recent(limit)
