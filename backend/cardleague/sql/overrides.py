import json
from collections.abc import Mapping

from cardleague.database import database
from cardleague.models.db.override import OverrideValue
from cardleague.utils.id_types import TournamentId


def _decode_value(raw: str) -> OverrideValue:
    # `raw` is always the JSON text of the column, see the `::text` casts below.
    value = json.loads(raw)
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, str | int | float):
        return value
    return "" if value is None else json.dumps(value)


async def get_overrides(tournament_id: TournamentId) -> dict[str, OverrideValue]:
    query = """
        SELECT key, value::text AS value
        FROM result_overrides
        WHERE tournament_id = :tournament_id
        ORDER BY key
        """
    result = await database.fetch_all(query=query, values={"tournament_id": tournament_id})
    return {row._mapping["key"]: _decode_value(row._mapping["value"]) for row in result}


async def upsert_override(tournament_id: TournamentId, key: str, value: OverrideValue) -> None:
    query = """
        INSERT INTO result_overrides (tournament_id, key, value)
        VALUES (:tournament_id, :key, CAST(:value AS JSON))
        ON CONFLICT (tournament_id, key) DO UPDATE
        SET value = EXCLUDED.value
        """
    await database.execute(
        query=query,
        values={"tournament_id": tournament_id, "key": key, "value": json.dumps(value)},
    )


async def delete_override(tournament_id: TournamentId, key: str) -> None:
    query = """
        DELETE FROM result_overrides
        WHERE tournament_id = :tournament_id
        AND key = :key
        """
    await database.execute(query=query, values={"tournament_id": tournament_id, "key": key})


async def replace_overrides(
    tournament_id: TournamentId, overrides: Mapping[str, OverrideValue]
) -> None:
    async with database.transaction():
        await database.execute(
            "DELETE FROM result_overrides WHERE tournament_id = :tournament_id",
            values={"tournament_id": tournament_id},
        )
        if len(overrides) > 0:
            await database.execute_many(
                query="""
                    INSERT INTO result_overrides (tournament_id, key, value)
                    VALUES (:tournament_id, :key, CAST(:value AS JSON))
                    """,
                values=[
                    {"tournament_id": tournament_id, "key": key, "value": json.dumps(value)}
                    for key, value in overrides.items()
                ],
            )
