from uuid import uuid4

from cardleague.database import database
from cardleague.models.db.game import Game, GameInsertable, GameScoreBody
from cardleague.utils.id_types import GameId, TeamId, TournamentId


async def get_games_for_tournament(
    tournament_id: TournamentId, round_: int | None = None
) -> list[Game]:
    round_filter = "AND round = :round" if round_ is not None else ""
    query = f"""
        SELECT *
        FROM games
        WHERE tournament_id = :tournament_id
        {round_filter}
        ORDER BY round, table_number NULLS LAST, created, id
        """
    values: dict[str, object] = {"tournament_id": tournament_id}
    if round_ is not None:
        values["round"] = round_

    result = await database.fetch_all(query=query, values=values)
    return [Game.model_validate(dict(x._mapping)) for x in result]


async def get_game_by_id(tournament_id: TournamentId, game_id: GameId) -> Game | None:
    query = """
        SELECT *
        FROM games
        WHERE id = :game_id
        AND tournament_id = :tournament_id
        """
    result = await database.fetch_one(
        query=query, values={"game_id": game_id, "tournament_id": tournament_id}
    )
    return Game.model_validate(dict(result._mapping)) if result is not None else None


async def insert_games(games: list[GameInsertable]) -> list[Game]:
    inserted = [Game(id=GameId(uuid4().hex), **game.model_dump()) for game in games]
    query = """
        INSERT INTO games (
            id, tournament_id, round, table_number, team1_id, team2_id,
            score1, score2, hands1, hands2, boston, confirmed, submitted_by, confirmed_by, created
        )
        VALUES (
            :id, :tournament_id, :round, :table_number, :team1_id, :team2_id,
            :score1, :score2, :hands1, :hands2, :boston, :confirmed, :submitted_by,
            :confirmed_by, :created
        )
        """
    if len(inserted) > 0:
        await database.execute_many(
            query=query,
            values=[
                game.model_dump(mode="python") | {"boston": game.boston.value}
                for game in inserted
            ],
        )
    return inserted


async def delete_games_for_tournament(tournament_id: TournamentId) -> None:
    query = """
        DELETE FROM games
        WHERE tournament_id = :tournament_id
        """
    await database.execute(query=query, values={"tournament_id": tournament_id})


async def sql_update_game_scores(game_id: GameId, body: GameScoreBody) -> None:
    query = """
        UPDATE games
        SET
            score1 = :score1,
            score2 = :score2,
            hands1 = :hands1,
            hands2 = :hands2,
            boston = :boston,
            submitted_by = :submitted_by,
            confirmed = FALSE,
            confirmed_by = NULL
        WHERE id = :game_id
        """
    await database.execute(
        query=query,
        values={**body.model_dump(), "boston": body.boston.value, "game_id": game_id},
    )


async def sql_confirm_game(game_id: GameId, confirmed_by: TeamId) -> None:
    query = """
        UPDATE games
        SET confirmed = TRUE, confirmed_by = :confirmed_by
        WHERE id = :game_id
        """
    await database.execute(query=query, values={"game_id": game_id, "confirmed_by": confirmed_by})
