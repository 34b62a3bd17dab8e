from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from little_league_stats.domain.game import GameRecord, PlayerGameLine


@runtime_checkable
class GameRepo(Protocol):
    def append(self, game: GameRecord) -> int: ...

    def get(self, game_id: int) -> GameRecord | None: ...

    def list_recent(self, limit: int = 5) -> list[GameRecord]: ...


@runtime_checkable
class PlayerGameLineRepo(Protocol):
    def append_many(self, lines: Sequence[PlayerGameLine], game_id: int) -> list[int]: ...

    def get_by_game(self, game_id: int) -> list[PlayerGameLine]: ...

    def all(self) -> list[PlayerGameLine]: ...
