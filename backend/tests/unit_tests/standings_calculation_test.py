import copy
import logging
import warnings
from typing import Any

import pytest

from cardleague.logic.standings.calculation import compute_standings, resolve_round_count
from cardleague.models.db.game import Game
from cardleague.models.db.override import OverrideValue
from cardleague.models.db.schedule import Schedule
from cardleague.models.standings import RoundResult
from cardleague.utils.dummy_records import (
    DUMMY_GAME1,
    DUMMY_GAME2,
    DUMMY_GAME3,
    DUMMY_MOCK_TIME,
    DUMMY_TEAM1,
    DUMMY_TEAM2,
    DUMMY_TEAM3,
    DUMMY_TEAM4,
    DUMMY_TEAMS,
    DUMMY_TOURNAMENT_ID,
)
from cardleague.utils.errors import MissingScheduleWarning, ValidationError
from cardleague.utils.id_types import GameId, TeamId

SCHEDULE_TWO_ROUNDS = Schedule(tournament_id=DUMMY_TOURNAMENT_ID, rounds=2)


def _game(game_id: str, round_: int, team1: str, team2: str, **kwargs: Any) -> Game:
    return Game(
        id=GameId(game_id),
        tournament_id=DUMMY_TOURNAMENT_ID,
        round=round_,
        team1_id=TeamId(team1),
        team2_id=TeamId(team2),
        created=DUMMY_MOCK_TIME,
        **kwargs,
    )


def test_four_teams_two_rounds() -> None:
    standings = compute_standings(
        DUMMY_TEAMS, [DUMMY_GAME1, DUMMY_GAME2, DUMMY_GAME3], SCHEDULE_TWO_ROUNDS, {}
    )

    assert standings.num_rounds == 2
    assert [team.id for team in standings.sorted_teams] == ["T1", "T3", "T4", "T2"]
    assert standings.results_matrix[DUMMY_TEAM2.id].rounds[2] == RoundResult(
        wl="", points=0, hands=0, boston=0
    )
    assert standings.results_matrix[DUMMY_TEAM1.id].rounds[1] == RoundResult(
        wl="W", points=10, hands=3, boston=1
    )
    assert standings.results_matrix[DUMMY_TEAM4.id].rounds[1] == RoundResult(
        wl="L", points=7, hands=2, boston=0
    )

    totals = standings.results_matrix[DUMMY_TEAM1.id].total_points
    assert (totals.wins, totals.points, totals.hands, totals.boston) == (1, 10, 3, 1)


def test_every_team_has_every_round() -> None:
    standings = compute_standings(DUMMY_TEAMS, [], None, {}, 3)

    assert set(standings.results_matrix) == {team.id for team in DUMMY_TEAMS}
    for team_results in standings.results_matrix.values():
        assert set(team_results.rounds) == {1, 2, 3}
        assert all(result == RoundResult.placeholder() for result in team_results.rounds.values())


def test_compute_standings_leaves_inputs_untouched() -> None:
    teams = list(DUMMY_TEAMS)
    games = [DUMMY_GAME1, DUMMY_GAME2, DUMMY_GAME3]
    overrides: dict[str, OverrideValue] = {"T4_1_wl": "W", "T2_1_points": "12", "T1_2_hands": 3}
    teams_before = copy.deepcopy(teams)
    games_before = copy.deepcopy(games)
    overrides_before = copy.deepcopy(overrides)

    standings = compute_standings(teams, games, SCHEDULE_TWO_ROUNDS, overrides)

    assert standings.results_matrix[DUMMY_TEAM4.id].rounds[1].wl == "W"
    assert teams == teams_before
    assert [team.id for team in teams] == ["T1", "T2", "T3", "T4"]
    assert games == games_before
    assert overrides == overrides_before


def test_compute_standings_is_deterministic() -> None:
    args = (DUMMY_TEAMS, [DUMMY_GAME1, DUMMY_GAME2], SCHEDULE_TWO_ROUNDS, {"T2_2_points": 4})

    assert compute_standings(*args) == compute_standings(*args)


def test_override_wins_over_computed_value() -> None:
    overrides = {"T4_1_wl": "W", "T2_1_points": "12", "T3_2_hands": 5}
    standings = compute_standings(
        DUMMY_TEAMS, [DUMMY_GAME1, DUMMY_GAME2], SCHEDULE_TWO_ROUNDS, overrides
    )

    assert standings.results_matrix[DUMMY_TEAM4.id].rounds[1].wl == "W"
    assert standings.results_matrix[DUMMY_TEAM2.id].rounds[1].points == "12"
    assert standings.results_matrix[DUMMY_TEAM2.id].total_points.points == 12
    assert standings.results_matrix[DUMMY_TEAM3.id].rounds[2].hands == 5
    assert standings.results_matrix[DUMMY_TEAM3.id].total_points.hands == 7


def test_win_override_adds_a_win() -> None:
    games = [DUMMY_GAME1, DUMMY_GAME2]
    plain = compute_standings(DUMMY_TEAMS, games, SCHEDULE_TWO_ROUNDS, {})
    overridden = compute_standings(DUMMY_TEAMS, games, SCHEDULE_TWO_ROUNDS, {"T4_1_wl": "W"})

    assert (
        overridden.results_matrix[DUMMY_TEAM4.id].total_points.wins
        == plain.results_matrix[DUMMY_TEAM4.id].total_points.wins + 1
    )


def test_lowercase_win_override_counts_as_win() -> None:
    standings = compute_standings(DUMMY_TEAMS, [], SCHEDULE_TWO_ROUNDS, {"T2_2_wl": "w"})

    assert standings.results_matrix[DUMMY_TEAM2.id].total_points.wins == 1
    assert standings.sorted_teams[0].id == DUMMY_TEAM2.id


def test_unparseable_override_counts_as_zero() -> None:
    standings = compute_standings(
        DUMMY_TEAMS, [DUMMY_GAME1], SCHEDULE_TWO_ROUNDS, {"T1_1_points": "forfeit"}
    )

    assert standings.results_matrix[DUMMY_TEAM1.id].rounds[1].points == "forfeit"
    assert standings.results_matrix[DUMMY_TEAM1.id].total_points.points == 0


def test_overrides_for_unknown_rounds_or_teams_are_ignored() -> None:
    standings = compute_standings(
        DUMMY_TEAMS, [], SCHEDULE_TWO_ROUNDS, {"T1_3_points": 99, "T9_1_points": 99}
    )

    assert all(
        team_results.total_points.points == 0
        for team_results in standings.results_matrix.values()
    )


def test_sorting_is_stable_for_full_ties() -> None:
    teams = [DUMMY_TEAM4, DUMMY_TEAM2, DUMMY_TEAM3, DUMMY_TEAM1]
    standings = compute_standings(teams, [], SCHEDULE_TWO_ROUNDS, {})

    assert [team.id for team in standings.sorted_teams] == ["T4", "T2", "T3", "T1"]


def test_sorting_tie_breaks_on_points_then_hands() -> None:
    games = [
        _game("A", 1, "T1", "T2", score1=10, score2=4, hands1=1, hands2=0),
        _game("B", 1, "T3", "T4", score1=10, score2=4, hands1=2, hands2=0),
        _game("C", 2, "T2", "T4", score1=2, score2=1),
    ]
    standings = compute_standings(DUMMY_TEAMS, games, SCHEDULE_TWO_ROUNDS, {})

    # T2 has as many wins as T1 and T3 but fewer points.
    assert [team.id for team in standings.sorted_teams] == ["T3", "T1", "T2", "T4"]


def test_tied_game_records_no_winner() -> None:
    game = _game("tie", 1, "T1", "T2", score1=6, score2=6, hands1=2, hands2=2)
    standings = compute_standings([DUMMY_TEAM1, DUMMY_TEAM2], [game], SCHEDULE_TWO_ROUNDS, {})

    for team_id in (DUMMY_TEAM1.id, DUMMY_TEAM2.id):
        result = standings.results_matrix[team_id].rounds[1]
        assert result == RoundResult(wl="", points=6, hands=2, boston=0)
        assert standings.results_matrix[team_id].total_points.wins == 0


def test_unconfirmed_or_unscored_games_are_skipped() -> None:
    games = [
        _game("a", 1, "T1", "T2", score1=10, score2=2, confirmed=False),
        _game("b", 1, "T3", "T4", score1=10),
    ]
    standings = compute_standings(DUMMY_TEAMS, games, SCHEDULE_TWO_ROUNDS, {})

    for team_results in standings.results_matrix.values():
        assert team_results.rounds[1] == RoundResult.placeholder()


def test_games_outside_the_round_range_are_skipped() -> None:
    game = _game("late", 3, "T1", "T2", score1=10, score2=2)
    standings = compute_standings(DUMMY_TEAMS, [game], SCHEDULE_TWO_ROUNDS, {})

    assert standings.results_matrix[DUMMY_TEAM1.id].total_points.points == 0


def test_games_with_unknown_teams_are_ignored() -> None:
    game = _game("x", 1, "T1", "T9", score1=10, score2=2)
    standings = compute_standings(DUMMY_TEAMS, [game], SCHEDULE_TWO_ROUNDS, {})

    assert "T9" not in standings.results_matrix
    assert standings.results_matrix[DUMMY_TEAM1.id].rounds[1].wl == "W"


def test_first_result_in_a_round_wins(caplog: pytest.LogCaptureFixture) -> None:
    games = [
        _game("first", 1, "T1", "T2", score1=10, score2=2),
        _game("second", 1, "T1", "T3", score1=1, score2=9),
    ]
    with caplog.at_level(logging.WARNING, logger="cardleague"):
        standings = compute_standings(DUMMY_TEAMS, games, SCHEDULE_TWO_ROUNDS, {})

    assert standings.results_matrix[DUMMY_TEAM1.id].rounds[1].wl == "W"
    assert standings.results_matrix[DUMMY_TEAM3.id].rounds[1].wl == "W"
    assert "more than one result in round 1" in caplog.text


def test_empty_team_list() -> None:
    standings = compute_standings([], [DUMMY_GAME1], SCHEDULE_TWO_ROUNDS, {})

    assert standings.sorted_teams == []
    assert standings.results_matrix == {}


def test_games_given_as_mappings() -> None:
    standings = compute_standings(
        DUMMY_TEAMS, [DUMMY_GAME1.model_dump()], SCHEDULE_TWO_ROUNDS, {}
    )

    assert standings.results_matrix[DUMMY_TEAM1.id].rounds[1].wl == "W"


def test_explicit_round_count_takes_precedence() -> None:
    standings = compute_standings(DUMMY_TEAMS, [], SCHEDULE_TWO_ROUNDS, {}, 4)

    assert standings.num_rounds == 4


def test_missing_schedule_uses_default_round_count() -> None:
    with pytest.warns(MissingScheduleWarning):
        standings = compute_standings(DUMMY_TEAMS, [DUMMY_GAME1], None, {})

    assert standings.num_rounds == 5
    assert set(standings.results_matrix[DUMMY_TEAM1.id].rounds) == {1, 2, 3, 4, 5}


def test_resolve_round_count_with_schedule_does_not_warn() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert resolve_round_count(SCHEDULE_TWO_ROUNDS) == 2


@pytest.mark.parametrize(
    ("teams", "games", "overrides", "num_rounds"),
    [
        ("T1", [], {}, 2),
        ([DUMMY_TEAM1, {"id": "T2"}], [], {}, 2),
        ([DUMMY_TEAM1, DUMMY_TEAM1], [], {}, 2),
        (DUMMY_TEAMS, "games", {}, 2),
        (DUMMY_TEAMS, {"G1": DUMMY_GAME1}, {}, 2),
        (DUMMY_TEAMS, [42], {}, 2),
        (DUMMY_TEAMS, [{"id": "broken"}], {}, 2),
        (DUMMY_TEAMS, [], ["T1_1_wl"], 2),
        (DUMMY_TEAMS, [], {}, 0),
        (DUMMY_TEAMS, [], {}, True),
    ],
)
def test_malformed_input_raises_validation_error(
    teams: Any, games: Any, overrides: Any, num_rounds: Any
) -> None:
    with pytest.raises(ValidationError):
        compute_standings(teams, games, SCHEDULE_TWO_ROUNDS, overrides, num_rounds)
