from pydantic import BaseModel, ConfigDict

from cardleague.models.db.override import OverrideValue
from cardleague.models.db.team import Team
from cardleague.utils.id_types import TeamId

ExportCell = str | int | float


class RoundResult(BaseModel):
    """Result of one team in one round.

    Values are typed loosely because operator overrides replace computed values verbatim.
    """

    model_config = ConfigDict(frozen=True)

    wl: OverrideValue = ""
    points: OverrideValue = 0
    hands: OverrideValue = 0
    boston: OverrideValue = 0

    @classmethod
    def placeholder(cls) -> "RoundResult":
        return cls(wl="", points=0, hands=0, boston=0)


class TeamTotals(BaseModel):
    model_config = ConfigDict(frozen=True)

    wins: int = 0
    points: int | float = 0
    hands: int | float = 0
    boston: int | float = 0


class TeamResults(BaseModel):
    model_config = ConfigDict(frozen=True)

    rounds: dict[int, RoundResult]
    total_points: TeamTotals


class Standings(BaseModel):
    model_config = ConfigDict(frozen=True)

    num_rounds: int
    sorted_teams: list[Team]
    results_matrix: dict[TeamId, TeamResults]


class ResultsTable(BaseModel):
    header: list[str]
    rows: list[list[ExportCell]]
