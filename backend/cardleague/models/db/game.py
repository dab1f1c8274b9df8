from enum import auto
from typing import Self

from heliclockter import datetime_utc
from pydantic import Field, model_validator

from cardleague.models.db.shared import BaseModelORM
from cardleague.utils.id_types import GameId, TeamId, TournamentId
from cardleague.utils.types import EnumAutoStr


class BostonSide(EnumAutoStr):
    NONE = auto()
    TEAM1 = auto()
    TEAM2 = auto()


class GameInsertable(BaseModelORM):
    tournament_id: TournamentId
    round: int = Field(ge=1)
    table_number: int | None = None
    team1_id: TeamId
    team2_id: TeamId
    score1: int | None = None
    score2: int | None = None
    hands1: int | None = None
    hands2: int | None = None
    boston: BostonSide = BostonSide.NONE
    confirmed: bool = True
    submitted_by: TeamId | None = None
    confirmed_by: TeamId | None = None
    created: datetime_utc

    @model_validator(mode="after")
    def teams_must_differ(self) -> Self:
        if self.team1_id == self.team2_id:
            raise ValueError("A game must be played between two different teams")
        return self

    @property
    def team_ids(self) -> tuple[TeamId, TeamId]:
        return self.team1_id, self.team2_id

    def opponent_of(self, team_id: TeamId) -> TeamId | None:
        if team_id == self.team1_id:
            return self.team2_id
        if team_id == self.team2_id:
            return self.team1_id
        return None

    def get_winner_id(self) -> TeamId | None:
        if self.score1 is None or self.score2 is None or self.score1 == self.score2:
            return None
        return self.team1_id if self.score1 > self.score2 else self.team2_id

    def get_loser_id(self) -> TeamId | None:
        winner_id = self.get_winner_id()
        return self.opponent_of(winner_id) if winner_id is not None else None


class Game(GameInsertable):
    id: GameId


class GameScoreBody(BaseModelORM):
    score1: int = Field(ge=0)
    score2: int = Field(ge=0)
    hands1: int | None = Field(default=None, ge=0)
    hands2: int | None = Field(default=None, ge=0)
    boston: BostonSide = BostonSide.NONE
    submitted_by: TeamId


class GameConfirmBody(BaseModelORM):
    confirmed_by: TeamId
