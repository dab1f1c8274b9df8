from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from cardleague.config import config
from cardleague.logic.notifications import (
    DeliveryReceipt,
    NotificationSender,
    get_notification_sender,
    notify_losing_team,
)
from cardleague.logic.standings.overrides import clear_overrides_for_confirmed_games
from cardleague.models.db.game import Game, GameConfirmBody, GameScoreBody
from cardleague.routes.models import (
    GamesResponse,
    ScoreSubmission,
    ScoreSubmissionResponse,
    SingleGameResponse,
)
from cardleague.sql.games import (
    get_game_by_id,
    get_games_for_tournament,
    sql_confirm_game,
    sql_update_game_scores,
)
from cardleague.sql.overrides import get_overrides, replace_overrides
from cardleague.sql.teams import get_teams_for_tournament
from cardleague.utils.id_types import GameId, TeamId, TournamentId
from cardleague.utils.logging import logger
from cardleague.utils.types import assert_some

router = APIRouter(prefix=config.api_prefix)


async def game_dependency(tournament_id: TournamentId, game_id: GameId) -> Game:
    game = await get_game_by_id(tournament_id, game_id)
    if game is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, f"Could not find game {game_id}")
    return game


async def get_next_game_for_team(
    tournament_id: TournamentId, team_id: TeamId, round_: int
) -> Game | None:
    next_round_games = await get_games_for_tournament(tournament_id, round_ + 1)
    return next(
        (game for game in next_round_games if team_id in game.team_ids),
        None,
    )


@router.get("/tournaments/{tournament_id}/games", response_model=GamesResponse)
async def get_games(tournament_id: TournamentId, round: int | None = None) -> GamesResponse:
    return GamesResponse(data=await get_games_for_tournament(tournament_id, round))


@router.post(
    "/tournaments/{tournament_id}/games/{game_id}/score",
    response_model=ScoreSubmissionResponse,
)
async def submit_game_score(
    tournament_id: TournamentId,
    body: GameScoreBody,
    game: Game = Depends(game_dependency),
    sender: NotificationSender = Depends(get_notification_sender),
) -> ScoreSubmissionResponse:
    if body.submitted_by not in game.team_ids:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST, "Only teams playing this game can submit its score"
        )

    await sql_update_game_scores(game.id, body)
    updated_game = assert_some(await get_game_by_id(tournament_id, game.id))

    receipts: list[DeliveryReceipt] = []
    loser_id = updated_game.get_loser_id()
    if loser_id is not None:
        next_game = await get_next_game_for_team(tournament_id, loser_id, updated_game.round)
        teams = await get_teams_for_tournament(tournament_id)
        receipts = await notify_losing_team(sender, updated_game, teams, next_game)

    return ScoreSubmissionResponse(
        data=ScoreSubmission(game=updated_game, notifications=receipts)
    )


@router.post(
    "/tournaments/{tournament_id}/games/{game_id}/confirm",
    response_model=SingleGameResponse,
)
async def confirm_game_score(
    tournament_id: TournamentId,
    body: GameConfirmBody,
    game: Game = Depends(game_dependency),
) -> SingleGameResponse:
    if game.score1 is None or game.score2 is None:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "No score has been submitted yet")
    if body.confirmed_by not in game.team_ids:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST, "Only teams playing this game can confirm its score"
        )
    if game.submitted_by is not None and body.confirmed_by == game.submitted_by:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST, "The opposing team has to confirm the submitted score"
        )

    await sql_confirm_game(game.id, body.confirmed_by)
    confirmed_game = assert_some(await get_game_by_id(tournament_id, game.id))

    overrides = await get_overrides(tournament_id)
    remaining_overrides = clear_overrides_for_confirmed_games(overrides, [confirmed_game])
    if len(remaining_overrides) != len(overrides):
        await replace_overrides(tournament_id, remaining_overrides)

    logger.info(
        f"Game {game.id} of round {game.round} confirmed by team {body.confirmed_by}, "
        f"cleared {len(overrides) - len(remaining_overrides)} overrides"
    )
    return SingleGameResponse(data=confirmed_game)
