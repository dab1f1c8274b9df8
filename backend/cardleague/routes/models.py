from pydantic import BaseModel

from cardleague.logic.notifications import DeliveryReceipt
from cardleague.models.db.bracket import Bracket
from cardleague.models.db.game import Game
from cardleague.models.db.override import OverrideValue
from cardleague.models.db.schedule import Schedule
from cardleague.models.db.team import Team
from cardleague.models.standings import Standings


class SuccessResponse(BaseModel):
    success: bool = True


class DataResponse[DataT](BaseModel):
    data: DataT


class TeamsResponse(DataResponse[list[Team]]):
    pass


class SingleTeamResponse(DataResponse[Team]):
    pass


class GamesResponse(DataResponse[list[Game]]):
    pass


class ScheduleResponse(DataResponse[Schedule | None]):
    pass


class ScoreSubmission(BaseModel):
    game: Game
    notifications: list[DeliveryReceipt]


class ScoreSubmissionResponse(DataResponse[ScoreSubmission]):
    pass


class SingleGameResponse(DataResponse[Game]):
    pass


class StandingsResponse(DataResponse[Standings]):
    pass


class OverridesResponse(DataResponse[dict[str, OverrideValue]]):
    pass


class ExportArchiveResponse(DataResponse[list[str]]):
    pass


class BracketResponse(DataResponse[Bracket | None]):
    pass


class SingleBracketResponse(DataResponse[Bracket]):
    pass
