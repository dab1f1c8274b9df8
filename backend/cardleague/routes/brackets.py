from fastapi import APIRouter, HTTPException
from starlette import status

from cardleague.config import config
from cardleague.logic.scheduling.bracket import advance_winner, build_bracket, get_champion
from cardleague.logic.standings.loading import load_standings
from cardleague.models.db.bracket import BracketBody, BracketScoreBody
from cardleague.routes.models import BracketResponse, SingleBracketResponse, SuccessResponse
from cardleague.sql.brackets import delete_bracket, get_bracket, upsert_bracket
from cardleague.utils.id_types import TournamentId
from cardleague.utils.logging import logger

router = APIRouter(prefix=config.api_prefix)


@router.get("/tournaments/{tournament_id}/bracket", response_model=BracketResponse)
async def get_tournament_bracket(tournament_id: TournamentId) -> BracketResponse:
    return BracketResponse(data=await get_bracket(tournament_id))


@router.post("/tournaments/{tournament_id}/bracket", response_model=SingleBracketResponse)
async def create_tournament_bracket(
    tournament_id: TournamentId, body: BracketBody
) -> SingleBracketResponse:
    standings = await load_standings(tournament_id)
    bracket = build_bracket(tournament_id, standings, body.size)
    await upsert_bracket(bracket)

    logger.info(f"Created bracket of {bracket.size} teams for tournament {tournament_id}")
    return SingleBracketResponse(data=bracket)


@router.post(
    "/tournaments/{tournament_id}/bracket/matches/{round_}/{table_number}/score",
    response_model=SingleBracketResponse,
)
async def score_bracket_match(
    tournament_id: TournamentId, round_: int, table_number: int, body: BracketScoreBody
) -> SingleBracketResponse:
    bracket = await get_bracket(tournament_id)
    if bracket is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "No bracket for this tournament")

    bracket = advance_winner(bracket, round_, table_number, body.score1, body.score2)
    await upsert_bracket(bracket)

    if (champion := get_champion(bracket)) is not None:
        logger.info(f"{champion.team_name} won the bracket of tournament {tournament_id}")
    return SingleBracketResponse(data=bracket)


@router.delete("/tournaments/{tournament_id}/bracket", response_model=SuccessResponse)
async def delete_tournament_bracket(tournament_id: TournamentId) -> SuccessResponse:
    await delete_bracket(tournament_id)
    return SuccessResponse()
