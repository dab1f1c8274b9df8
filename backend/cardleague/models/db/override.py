from pydantic import Field

from cardleague.models.db.shared import BaseModelORM
from cardleague.utils.id_types import TeamId
from cardleague.utils.types import EnumValues

OverrideValue = str | int | float


class OverrideField(EnumValues):
    WL = "wl"
    POINTS = "points"
    HANDS = "hands"
    BOSTON = "boston"


class OverrideUpsertBody(BaseModelORM):
    team_id: TeamId
    round: int = Field(ge=1)
    field: OverrideField
    value: OverrideValue
