from enum import Enum


class BattingSide(Enum):
    NO_TEAM = "no_team"
    AWAY_ACTIVE = "away_active"
    HOME_ACTIVE = "home_active"


class TeamTracker:
    """Tracks which team's batter list is being read.

    Section headers move the tracker between ``NO_TEAM``, ``AWAY_ACTIVE`` and
    ``HOME_ACTIVE``. A header that names neither team leaves the state as it
    was, so a batter list keeps its team across an unrelated header.
    """

    def __init__(self, away_team: str, home_team: str) -> None:
        self._away_team = away_team
        self._home_team = home_team
        self._state = BattingSide.NO_TEAM

    @property
    def state(self) -> BattingSide:
        return self._state

    @property
    def current_team(self) -> str | None:
        if self._state is BattingSide.AWAY_ACTIVE:
            return self._away_team
        if self._state is BattingSide.HOME_ACTIVE:
            return self._home_team
        return None

    def on_section_header(self, header: str, previous_line: str | None) -> BattingSide:
        context = [header] if previous_line is None else [header, previous_line]
        # Away is checked first, so a header naming both teams goes to the away side.
        if any(self._away_team in text for text in context):
            self._state = BattingSide.AWAY_ACTIVE
        elif any(self._home_team in text for text in context):
            self._state = BattingSide.HOME_ACTIVE
        return self._state
