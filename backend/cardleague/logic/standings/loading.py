import asyncio

from cardleague.logic.standings.calculation import compute_standings, resolve_round_count
from cardleague.models.standings import Standings
from cardleague.sql.games import get_games_for_tournament
from cardleague.sql.overrides import get_overrides
from cardleague.sql.schedules import get_schedule
from cardleague.sql.teams import get_teams_for_tournament
from cardleague.utils.id_types import TournamentId


async def load_standings(tournament_id: TournamentId) -> Standings:
    """Fetch a tournament's data and run the standings engine on it.

    Both the results view and the spreadsheet export go through this function.
    """
    teams, games, schedule, overrides = await asyncio.gather(
        get_teams_for_tournament(tournament_id),
        get_games_for_tournament(tournament_id),
        get_schedule(tournament_id),
        get_overrides(tournament_id),
    )
    num_rounds = resolve_round_count(schedule, tournament_id)
    return compute_standings(teams, games, schedule, overrides, num_rounds)
