from fastapi import APIRouter

from cardleague.config import config
from cardleague.database import database
from cardleague.logic.scheduling.round_robin import build_games_for_round_robin
from cardleague.models.db.schedule import ScheduleBody
from cardleague.routes.models import GamesResponse, ScheduleResponse
from cardleague.sql.games import delete_games_for_tournament, insert_games
from cardleague.sql.schedules import get_schedule, upsert_schedule
from cardleague.sql.teams import get_teams_for_tournament
from cardleague.utils.id_types import TournamentId
from cardleague.utils.logging import logger

router = APIRouter(prefix=config.api_prefix)


@router.get("/tournaments/{tournament_id}/schedule", response_model=ScheduleResponse)
async def get_tournament_schedule(tournament_id: TournamentId) -> ScheduleResponse:
    return ScheduleResponse(data=await get_schedule(tournament_id))


@router.put("/tournaments/{tournament_id}/schedule", response_model=ScheduleResponse)
async def put_tournament_schedule(
    tournament_id: TournamentId, body: ScheduleBody
) -> ScheduleResponse:
    return ScheduleResponse(data=await upsert_schedule(tournament_id, body.rounds))


@router.post("/tournaments/{tournament_id}/schedule/generate", response_model=GamesResponse)
async def generate_tournament_schedule(
    tournament_id: TournamentId, body: ScheduleBody
) -> GamesResponse:
    teams = await get_teams_for_tournament(tournament_id)
    games_to_insert = build_games_for_round_robin(tournament_id, teams, body.rounds)

    async with database.transaction():
        await delete_games_for_tournament(tournament_id)
        games = await insert_games(games_to_insert)
        await upsert_schedule(tournament_id, body.rounds)

    logger.info(
        f"Generated {len(games)} games over {body.rounds} rounds for tournament {tournament_id}"
    )
    return GamesResponse(data=games)
