from collections.abc import Callable

from cardleague.models.db.game import BostonSide, Game
from cardleague.models.standings import RoundResult
from cardleague.utils.id_types import TeamId

GameScorer = Callable[[Game], dict[TeamId, RoundResult]]


def game_is_played(game: Game) -> bool:
    return game.confirmed and game.score1 is not None and game.score2 is not None


def _win_loss(own_score: int, opponent_score: int) -> str:
    if own_score > opponent_score:
        return "W"
    if own_score < opponent_score:
        return "L"
    # Equal scores record no winner for either team.
    return ""


def score_game(game: Game) -> dict[TeamId, RoundResult]:
    """
    Derive the per-team round results of a single game.

    Unplayed games (unconfirmed, or missing either score) produce no results, so both teams
    receive the zero placeholder for that round.
    """
    if not game_is_played(game):
        return {}

    score1 = game.score1 or 0
    score2 = game.score2 or 0
    return {
        game.team1_id: RoundResult(
            wl=_win_loss(score1, score2),
            points=score1,
            hands=game.hands1 or 0,
            boston=1 if game.boston is BostonSide.TEAM1 else 0,
        ),
        game.team2_id: RoundResult(
            wl=_win_loss(score2, score1),
            points=score2,
            hands=game.hands2 or 0,
            boston=1 if game.boston is BostonSide.TEAM2 else 0,
        ),
    }
