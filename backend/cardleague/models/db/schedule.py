from pydantic import Field

from cardleague.models.db.shared import BaseModelORM
from cardleague.utils.id_types import TournamentId


class Schedule(BaseModelORM):
    tournament_id: TournamentId
    rounds: int = Field(ge=1)


class ScheduleBody(BaseModelORM):
    rounds: int = Field(ge=1, le=50)
