from pydantic import Field

from cardleague.models.db.shared import BaseModelORM
from cardleague.utils.id_types import TeamId, TournamentId


class BracketSeed(BaseModelORM):
    seed: int = Field(ge=1)
    team_id: TeamId
    team_name: str
    team_number: int | None = None


class BracketMatch(BaseModelORM):
    round: int = Field(ge=1)
    table_number: int = Field(ge=1)
    team1: BracketSeed | None = None
    team2: BracketSeed | None = None
    score1: int | None = None
    score2: int | None = None
    winner: BracketSeed | None = None


class Bracket(BaseModelORM):
    tournament_id: TournamentId
    size: int
    seeds: list[BracketSeed]
    matches: list[BracketMatch]


class BracketBody(BaseModelORM):
    size: int


class BracketScoreBody(BaseModelORM):
    score1: int = Field(ge=0)
    score2: int = Field(ge=0)
