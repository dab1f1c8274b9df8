import math
from collections.abc import Iterable, Mapping

from cardleague.logic.standings.scoring import game_is_played
from cardleague.models.db.game import Game
from cardleague.models.db.override import OverrideField, OverrideValue
from cardleague.models.standings import RoundResult
from cardleague.utils.id_types import TeamId


def override_key(team_id: TeamId | str, round_: int, field: OverrideField) -> str:
    return f"{team_id}_{round_}_{field.value}"


def parse_override_key(key: str) -> tuple[TeamId, int, OverrideField] | None:
    # Team ids may contain underscores, the round and field never do.
    team_id, separator, remainder = key.rpartition("_")
    if separator == "" or team_id == "":
        return None
    field_value = remainder
    team_id, separator, round_value = team_id.rpartition("_")
    if separator == "" or team_id == "":
        return None
    if not (round_value.isascii() and round_value.isdecimal()) or int(round_value) < 1:
        return None
    if field_value not in OverrideField.values():
        return None
    return TeamId(team_id), int(round_value), OverrideField(field_value)


def apply_overrides(
    team_id: TeamId,
    round_: int,
    computed: RoundResult,
    overrides: Mapping[str, OverrideValue],
) -> RoundResult:
    updates = {
        field.value: overrides[key]
        for field in OverrideField
        if (key := override_key(team_id, round_, field)) in overrides
    }
    if len(updates) < 1:
        return computed
    return computed.model_copy(update=updates)


def as_number(value: OverrideValue | None) -> int | float:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else 0
    normalized = str(value or "").strip()
    if normalized == "":
        return 0
    try:
        return int(normalized)
    except ValueError:
        pass
    try:
        parsed = float(normalized)
    except ValueError:
        return 0
    return parsed if math.isfinite(parsed) else 0


def is_win(wl: OverrideValue) -> bool:
    return isinstance(wl, str) and wl.strip().upper() == "W"


def clear_overrides_for_confirmed_games(
    overrides: Mapping[str, OverrideValue], games: Iterable[Game]
) -> dict[str, OverrideValue]:
    """
    Drop the cell overrides of every team/round that now has a confirmed, scored game.

    Once both teams agreed on a result the computed values take over again. Keys that do not
    belong to such a cell are kept untouched.
    """
    stale_keys = {
        override_key(team_id, game.round, field)
        for game in games
        if game_is_played(game)
        for team_id in game.team_ids
        for field in OverrideField
    }
    return {key: value for key, value in overrides.items() if key not in stale_keys}


def build_reset_overrides(
    team_ids: Iterable[TeamId], num_rounds: int
) -> dict[str, OverrideValue]:
    blank: dict[OverrideField, OverrideValue] = {
        OverrideField.WL: "",
        OverrideField.POINTS: 0,
        OverrideField.HANDS: 0,
        OverrideField.BOSTON: 0,
    }
    return {
        override_key(team_id, round_, field): value
        for team_id in team_ids
        for round_ in range(1, num_rounds + 1)
        for field, value in blank.items()
    }
