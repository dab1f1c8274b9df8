from cardleague.database import database
from cardleague.models.db.bracket import Bracket
from cardleague.utils.id_types import TournamentId


async def get_bracket(tournament_id: TournamentId) -> Bracket | None:
    query = """
        SELECT data::text AS data
        FROM brackets
        WHERE tournament_id = :tournament_id
        """
    result = await database.fetch_one(query=query, values={"tournament_id": tournament_id})
    return Bracket.model_validate_json(result._mapping["data"]) if result is not None else None


async def upsert_bracket(bracket: Bracket) -> None:
    query = """
        INSERT INTO brackets (tournament_id, data)
        VALUES (:tournament_id, CAST(:data AS JSON))
        ON CONFLICT (tournament_id) DO UPDATE
        SET data = EXCLUDED.data
        """
    await database.execute(
        query=query,
        values={"tournament_id": bracket.tournament_id, "data": bracket.model_dump_json()},
    )


async def delete_bracket(tournament_id: TournamentId) -> None:
    query = "DELETE FROM brackets WHERE tournament_id = :tournament_id"
    await database.execute(query=query, values={"tournament_id": tournament_id})
