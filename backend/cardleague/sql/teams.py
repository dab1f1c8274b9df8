from uuid import uuid4

from heliclockter import datetime_utc

from cardleague.database import database
from cardleague.models.db.team import Team, TeamBody
from cardleague.utils.id_types import TeamId, TournamentId


async def get_teams_for_tournament(tournament_id: TournamentId) -> list[Team]:
    query = """
        SELECT *
        FROM teams
        WHERE tournament_id = :tournament_id
        ORDER BY team_number NULLS LAST, created, id
        """
    result = await database.fetch_all(query=query, values={"tournament_id": tournament_id})
    return [Team.model_validate(dict(x._mapping)) for x in result]


async def get_team_by_id(tournament_id: TournamentId, team_id: TeamId) -> Team | None:
    query = """
        SELECT *
        FROM teams
        WHERE id = :team_id
        AND tournament_id = :tournament_id
        """
    result = await database.fetch_one(
        query=query, values={"team_id": team_id, "tournament_id": tournament_id}
    )
    return Team.model_validate(dict(result._mapping)) if result is not None else None


async def insert_team(tournament_id: TournamentId, team_body: TeamBody) -> Team:
    team = Team(
        id=TeamId(uuid4().hex),
        tournament_id=tournament_id,
        created=datetime_utc.now(),
        **team_body.model_dump(),
    )
    query = """
        INSERT INTO teams (id, tournament_id, team_number, name, city, phone_number, email, created)
        VALUES (
            :id, :tournament_id, :team_number, :name, :city, :phone_number, :email, :created
        )
        """
    await database.execute(query=query, values=team.model_dump())
    return team
