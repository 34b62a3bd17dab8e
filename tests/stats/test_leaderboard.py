import logging

import pytest

from little_league_stats.domain.season import LeaderboardCategory, LeaderboardEntry, PlayerSeasonTotals
from little_league_stats.stats.leaderboard import QUALIFYING_AT_BATS, format_value, parse_category, rank_leaderboard


def _totals(name: str, team: str = "Tigers", *, at_bats: int = 20, hits: int = 5, **counts: int) -> PlayerSeasonTotals:
    return PlayerSeasonTotals(
        name=name,
        team=team,
        games=1,
        at_bats=at_bats,
        hits=hits,
        batting_avg=hits / at_bats if at_bats else 0.0,
        **counts,
    )


class TestBattingAverageLeaderboard:
    def test_qualifier_excludes_short_seasons(self) -> None:
        population = [_totals("Alex Smith", at_bats=40, hits=20), _totals("Jordan Lee", at_bats=5, hits=5)]
        entries = rank_leaderboard(population, LeaderboardCategory.BATTING_AVG, 10)
        assert entries == [LeaderboardEntry(rank=1, name="Alex Smith", team="Tigers", value="0.500")]

    def test_exactly_qualifying_is_included(self) -> None:
        entries = rank_leaderboard(
            [_totals("Alex Smith", at_bats=QUALIFYING_AT_BATS, hits=3)], LeaderboardCategory.BATTING_AVG, 10
        )
        assert [e.value for e in entries] == ["0.300"]

    def test_accepts_mapping(self) -> None:
        t = _totals("Alex Smith", at_bats=10, hits=1)
        entries = rank_leaderboard({(t.name, t.team): t}, LeaderboardCategory.BATTING_AVG, 10)
        assert entries[0].value == "0.100"

    def test_descending_with_name_tiebreak(self) -> None:
        population = [
            _totals("Casey", at_bats=10, hits=3),
            _totals("Bailey", at_bats=10, hits=5),
            _totals("Avery", at_bats=20, hits=6),
        ]
        entries = rank_leaderboard(population, LeaderboardCategory.BATTING_AVG, 10)
        assert [(e.rank, e.name, e.value) for e in entries] == [
            (1, "Bailey", "0.500"),
            (2, "Avery", "0.300"),
            (3, "Casey", "0.300"),
        ]


class TestCountingLeaderboards:
    @pytest.mark.parametrize(
        ("category", "field"),
        [
            (LeaderboardCategory.HOME_RUNS, "home_runs"),
            (LeaderboardCategory.RBI, "rbi"),
            (LeaderboardCategory.RUNS, "runs"),
            (LeaderboardCategory.STOLEN_BASES, "stolen_bases"),
        ],
    )
    def test_sorted_by_category_total(self, category: LeaderboardCategory, field: str) -> None:
        population = [_totals("Low", **{field: 1}), _totals("High", **{field: 4}), _totals("Mid", **{field: 2})]
        entries = rank_leaderboard(population, category, 10)
        assert [(e.name, e.value) for e in entries] == [("High", "4"), ("Mid", "2"), ("Low", "1")]

    def test_no_qualifier_for_counting_stats(self) -> None:
        entries = rank_leaderboard([_totals("Rookie", at_bats=2, hits=1, home_runs=1)], LeaderboardCategory.HOME_RUNS, 5)
        assert [e.name for e in entries] == ["Rookie"]

    def test_ties_break_by_name_then_team(self) -> None:
        population = [
            _totals("Jordan", "Sharks", rbi=2),
            _totals("Alex", "Tigers", rbi=2),
            _totals("Jordan", "Eagles", rbi=2),
        ]
        entries = rank_leaderboard(population, LeaderboardCategory.RBI, 10)
        assert [(e.name, e.team) for e in entries] == [("Alex", "Tigers"), ("Jordan", "Eagles"), ("Jordan", "Sharks")]

    def test_truncates_to_limit(self) -> None:
        population = [_totals(f"Player {i}", runs=i) for i in range(20)]
        entries = rank_leaderboard(population, LeaderboardCategory.RUNS, 5)
        assert len(entries) == 5
        assert [e.rank for e in entries] == [1, 2, 3, 4, 5]
        values = [int(e.value) for e in entries]
        assert values == sorted(values, reverse=True)

    def test_empty_population(self) -> None:
        assert rank_leaderboard([], LeaderboardCategory.RUNS, 5) == []


class TestPitchingCategories:
    def test_era_orders_by_average_and_shows_placeholder(self) -> None:
        population = [_totals("Short", at_bats=2, hits=2), _totals("Long", at_bats=20, hits=5)]
        entries = rank_leaderboard(population, LeaderboardCategory.ERA, 10)
        # Unranked categories skip the qualifier.
        assert [(e.name, e.value) for e in entries] == [("Short", "0.00"), ("Long", "0.00")]

    def test_wins_shows_zero(self) -> None:
        entries = rank_leaderboard([_totals("Alex Smith")], LeaderboardCategory.WINS, 10)
        assert entries[0].value == "0"


class TestParseCategory:
    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("batting_avg", LeaderboardCategory.BATTING_AVG),
            ("battingAvg", LeaderboardCategory.BATTING_AVG),
            ("homeRuns", LeaderboardCategory.HOME_RUNS),
            ("home-runs", LeaderboardCategory.HOME_RUNS),
            ("RBI", LeaderboardCategory.RBI),
            (" runs ", LeaderboardCategory.RUNS),
            ("stolenBases", LeaderboardCategory.STOLEN_BASES),
            ("era", LeaderboardCategory.ERA),
        ],
    )
    def test_known_tags(self, tag: str, expected: LeaderboardCategory) -> None:
        assert parse_category(tag) is expected

    def test_enum_passes_through(self) -> None:
        assert parse_category(LeaderboardCategory.RUNS) is LeaderboardCategory.RUNS

    def test_unknown_tag_maps_to_unknown(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            assert parse_category("saves") is LeaderboardCategory.UNKNOWN
        assert "saves" in caplog.text


class TestFormatValue:
    def test_batting_average_has_three_decimals(self) -> None:
        assert format_value(_totals("A", at_bats=3, hits=1), LeaderboardCategory.BATTING_AVG) == "0.333"

    def test_counting_stat_is_integer(self) -> None:
        assert format_value(_totals("A", stolen_bases=7), LeaderboardCategory.STOLEN_BASES) == "7"

    def test_unknown_category_shows_batting_average(self) -> None:
        assert format_value(_totals("A", at_bats=4, hits=1), LeaderboardCategory.UNKNOWN) == "0.250"


class TestUnknownCategory:
    def test_short_at_bat_players_are_ranked(self) -> None:
        population = [_totals("Short", at_bats=5, hits=5), _totals("Long", at_bats=20, hits=6)]
        entries = rank_leaderboard(population, LeaderboardCategory.UNKNOWN, 10)
        assert [(e.rank, e.name, e.value) for e in entries] == [(1, "Short", "1.000"), (2, "Long", "0.300")]
