import warnings
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import pydantic

from cardleague.config import config
from cardleague.logic.standings.overrides import apply_overrides, as_number, is_win
from cardleague.logic.standings.scoring import GameScorer, score_game
from cardleague.models.db.game import Game
from cardleague.models.db.override import OverrideValue
from cardleague.models.db.schedule import Schedule
from cardleague.models.db.team import Team
from cardleague.models.standings import RoundResult, Standings, TeamResults, TeamTotals
from cardleague.utils.errors import MissingScheduleWarning, ValidationError
from cardleague.utils.id_types import TeamId, TournamentId
from cardleague.utils.logging import logger


def resolve_round_count(
    schedule: Schedule | None, tournament_id: TournamentId | None = None
) -> int:
    if schedule is not None:
        return schedule.rounds

    message = (
        f"No schedule found for tournament {tournament_id}, "
        f"using the default of {config.default_round_count} rounds"
    )
    logger.warning(message)
    warnings.warn(message, MissingScheduleWarning, stacklevel=2)
    return config.default_round_count


def _validate_teams(teams: Any) -> list[Team]:
    if not isinstance(teams, list | tuple):
        raise ValidationError(f"teams should be a list of teams, got {type(teams).__name__}")

    seen_ids: set[TeamId] = set()
    for team in teams:
        if not isinstance(team, Team):
            raise ValidationError(f"teams should only contain teams, got {type(team).__name__}")
        if team.id in seen_ids:
            raise ValidationError(f"Duplicate team id: {team.id}")
        seen_ids.add(team.id)
    return list(teams)


def _validate_games(games: Any) -> list[Game]:
    if isinstance(games, str | bytes | Mapping) or not isinstance(games, Iterable):
        raise ValidationError(f"games should be a sequence of games, got {type(games).__name__}")

    validated: list[Game] = []
    for game in games:
        if isinstance(game, Game):
            validated.append(game)
        elif isinstance(game, Mapping):
            try:
                validated.append(Game.model_validate(game))
            except pydantic.ValidationError as exc:
                raise ValidationError(f"Malformed game record: {exc}") from exc
        else:
            raise ValidationError(f"games should only contain games, got {type(game).__name__}")
    return validated


def _validate_round_count(num_rounds: Any) -> int:
    if isinstance(num_rounds, bool) or not isinstance(num_rounds, int) or num_rounds < 1:
        raise ValidationError(f"Number of rounds should be a positive integer, got {num_rounds!r}")
    return num_rounds


def _compute_round_results(
    team_ids: set[TeamId], games: list[Game], num_rounds: int, scorer: GameScorer
) -> dict[tuple[TeamId, int], RoundResult]:
    round_results: dict[tuple[TeamId, int], RoundResult] = {}
    for game in games:
        if not 1 <= game.round <= num_rounds:
            continue

        for team_id, result in scorer(game).items():
            if team_id not in team_ids:
                continue
            if (team_id, game.round) in round_results:
                logger.warning(
                    f"Team {team_id} has more than one result in round {game.round}, "
                    f"ignoring game {game.id}"
                )
                continue
            round_results[(team_id, game.round)] = result

    return round_results


def _aggregate(rounds: Iterable[RoundResult]) -> TeamTotals:
    wins = 0
    points: int | float = 0
    hands: int | float = 0
    boston: int | float = 0
    for result in rounds:
        wins += 1 if is_win(result.wl) else 0
        points += as_number(result.points)
        hands += as_number(result.hands)
        boston += as_number(result.boston)
    return TeamTotals(wins=wins, points=points, hands=hands, boston=boston)


def _ranking_key(totals: TeamTotals) -> tuple[float, float, float]:
    return -totals.wins, -totals.points, -totals.hands


def compute_standings(
    teams: Sequence[Team],
    games: Iterable[Game],
    schedule: Schedule | None,
    overrides: Mapping[str, OverrideValue],
    num_rounds: int | None = None,
    *,
    scorer: GameScorer = score_game,
) -> Standings:
    """
    Compute the results matrix and the leaderboard order of a tournament.

    `games` must already be restricted to the tournament under evaluation. When `num_rounds`
    is omitted it is taken from `schedule`, falling back to the configured default.

    Every team gets a result for every round, overrides replace computed cells verbatim and
    the totals are summed from the overridden cells. Teams are ranked on wins, points and
    hands (all descending); remaining ties keep the order of `teams`.
    """
    validated_teams = _validate_teams(teams)
    validated_games = _validate_games(games)
    if not isinstance(overrides, Mapping):
        raise ValidationError(f"overrides should be a mapping, got {type(overrides).__name__}")
    if num_rounds is None:
        tournament_id = validated_teams[0].tournament_id if len(validated_teams) > 0 else None
        num_rounds = resolve_round_count(schedule, tournament_id)
    num_rounds = _validate_round_count(num_rounds)

    round_results = _compute_round_results(
        {team.id for team in validated_teams}, validated_games, num_rounds, scorer
    )

    results_matrix: dict[TeamId, TeamResults] = {}
    for team in validated_teams:
        rounds = {
            round_: apply_overrides(
                team.id,
                round_,
                round_results.get((team.id, round_), RoundResult.placeholder()),
                overrides,
            )
            for round_ in range(1, num_rounds + 1)
        }
        results_matrix[team.id] = TeamResults(
            rounds=rounds, total_points=_aggregate(rounds.values())
        )

    sorted_teams = sorted(
        validated_teams, key=lambda team: _ranking_key(results_matrix[team.id].total_points)
    )
    return Standings(
        num_rounds=num_rounds,
        sorted_teams=sorted_teams,
        results_matrix=results_matrix,
    )
