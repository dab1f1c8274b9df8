from cardleague.database import database
from cardleague.models.db.schedule import Schedule
from cardleague.utils.id_types import TournamentId


async def get_schedule(tournament_id: TournamentId) -> Schedule | None:
    query = """
        SELECT tournament_id, rounds
        FROM schedules
        WHERE tournament_id = :tournament_id
        """
    result = await database.fetch_one(query=query, values={"tournament_id": tournament_id})
    return Schedule.model_validate(dict(result._mapping)) if result is not None else None


async def upsert_schedule(tournament_id: TournamentId, rounds: int) -> Schedule:
    query = """
        INSERT INTO schedules (tournament_id, rounds)
        VALUES (:tournament_id, :rounds)
        ON CONFLICT (tournament_id) DO UPDATE
        SET rounds = EXCLUDED.rounds
        """
    await database.execute(query=query, values={"tournament_id": tournament_id, "rounds": rounds})
    return Schedule(tournament_id=tournament_id, rounds=rounds)
