from heliclockter import datetime_utc
from pydantic import Field

from cardleague.models.db.shared import BaseModelORM
from cardleague.utils.id_types import TeamId, TournamentId


class TeamInsertable(BaseModelORM):
    tournament_id: TournamentId
    team_number: int | None = None
    name: str = ""
    city: str | None = None
    phone_number: str | None = None
    email: str | None = None
    created: datetime_utc


class Team(TeamInsertable):
    id: TeamId


class TeamBody(BaseModelORM):
    team_number: int | None = Field(default=None, ge=1)
    name: str = Field(min_length=1, max_length=80)
    city: str | None = None
    phone_number: str | None = None
    email: str | None = None
