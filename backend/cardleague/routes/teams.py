from fastapi import APIRouter

from cardleague.config import config
from cardleague.models.db.team import TeamBody
from cardleague.routes.models import SingleTeamResponse, TeamsResponse
from cardleague.sql.teams import get_teams_for_tournament, insert_team
from cardleague.utils.id_types import TournamentId
from cardleague.utils.logging import logger

router = APIRouter(prefix=config.api_prefix)


@router.get("/tournaments/{tournament_id}/teams", response_model=TeamsResponse)
async def get_teams(tournament_id: TournamentId) -> TeamsResponse:
    return TeamsResponse(data=await get_teams_for_tournament(tournament_id))


@router.post("/tournaments/{tournament_id}/teams", response_model=SingleTeamResponse)
async def create_team(tournament_id: TournamentId, team_body: TeamBody) -> SingleTeamResponse:
    team = await insert_team(tournament_id, team_body)
    logger.info(f"Registered team {team.name} ({team.id}) for tournament {tournament_id}")
    return SingleTeamResponse(data=team)
