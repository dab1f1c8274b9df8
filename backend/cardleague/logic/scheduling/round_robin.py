from collections.abc import Sequence

from fastapi import HTTPException
from heliclockter import datetime_utc
from starlette import status

from cardleague.models.db.game import GameInsertable
from cardleague.models.db.team import Team
from cardleague.utils.id_types import TeamId, TournamentId

Pairing = tuple[TeamId, TeamId | None]
Slot = TeamId | None


def get_number_of_rounds_to_create_round_robin(team_count: int) -> int:
    if team_count < 1:
        return 0
    return team_count if team_count % 2 != 0 else team_count - 1


def _city_key(team: Team) -> str:
    city = (team.city or "").strip().lower()
    # Teams without a city never count as neighbours of each other.
    return city if city != "" else f"#{team.id}"


def split_teams_by_city(teams: Sequence[Team]) -> tuple[list[Team], list[Team]]:
    """
    Split teams into two columns of (nearly) equal size, keeping every city in one column.

    Cities are placed whole, largest first, into the smaller column. When that leaves the
    columns more than one team apart, the last city placed in the larger column is split:
    its remaining teams sit at the bottom of the left column and the moved teams at the top
    of the right column, so they only meet in the last rotations.
    """
    cities: dict[str, list[Team]] = {}
    for team in teams:
        cities.setdefault(_city_key(team), []).append(team)

    left: list[list[Team]] = []
    right: list[list[Team]] = []
    left_count = right_count = 0
    for city_teams in sorted(cities.values(), key=len, reverse=True):
        if left_count <= right_count:
            left.append(city_teams)
            left_count += len(city_teams)
        else:
            right.append(city_teams)
            right_count += len(city_teams)

    if right_count > left_count:
        left, right = right, left
        left_count, right_count = right_count, left_count

    to_move = (left_count - right_count) // 2
    if to_move > 0:
        split_city = left.pop()
        left.append(split_city[: len(split_city) - to_move])
        right.insert(0, split_city[len(split_city) - to_move :])

    return (
        [team for city_teams in left for team in city_teams],
        [team for city_teams in right for team in city_teams],
    )


def _pairing(home: Slot, away: Slot) -> Pairing:
    if home is None:
        home, away = away, None
    assert home is not None
    return home, away


def _rotate_columns(left: list[Slot], right: list[Slot], num_rounds: int) -> list[list[Pairing]]:
    rounds: list[list[Pairing]] = []
    for _ in range(num_rounds):
        rounds.append([_pairing(home, away) for home, away in zip(left, right, strict=True)])
        right = [right[-1], *right[:-1]]
    return rounds


def _circle_method(slots: list[Slot], num_rounds: int) -> list[list[Pairing]]:
    half = len(slots) // 2
    rounds: list[list[Pairing]] = []
    for _ in range(num_rounds):
        rounds.append([_pairing(slots[i], slots[-i - 1]) for i in range(half)])
        slots = [slots[0], slots[-1], *slots[1:-1]]
    return rounds


def schedule_round_robin(teams: Sequence[Team], num_rounds: int) -> list[list[Pairing]]:
    """
    Pair teams for `num_rounds` rounds, preferring opponents from another city.

    Teams are split into two city-separated columns (see `split_teams_by_city`). As long as
    the requested rounds fit in a column, every round pairs the left column against the
    rotating right column, so teams of one city never meet unless their city had to be
    split. Longer schedules use the circle method, seeded so that its first round is the
    same cross-column round.

    A team paired with `None` has a bye in that round.
    """
    max_rounds = get_number_of_rounds_to_create_round_robin(len(teams))
    if len(teams) < 2 or not 1 <= num_rounds <= max_rounds:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST,
            f"Number of rounds invalid, should be between 1 and {max_rounds} "
            f"for {len(teams)} teams",
        )

    left_teams, right_teams = split_teams_by_city(teams)
    left: list[Slot] = [team.id for team in left_teams]
    right: list[Slot] = [team.id for team in right_teams]
    while len(left) < len(right):
        left.append(None)
    while len(right) < len(left):
        right.append(None)

    if num_rounds <= len(left):
        return _rotate_columns(left, right, num_rounds)
    return _circle_method([*left, *reversed(right)], num_rounds)


def build_games_for_round_robin(
    tournament_id: TournamentId, teams: Sequence[Team], num_rounds: int
) -> list[GameInsertable]:
    ordered_teams = sorted(
        teams,
        key=lambda team: (team.team_number is None, team.team_number or 0, team.name),
    )
    schedule = schedule_round_robin(ordered_teams, num_rounds)
    now = datetime_utc.now()

    games: list[GameInsertable] = []
    for round_, pairings in enumerate(schedule, start=1):
        played = [(home, away) for home, away in pairings if away is not None]
        for table_number, (home, away) in enumerate(played, start=1):
            games.append(
                GameInsertable(
                    tournament_id=tournament_id,
                    round=round_,
                    table_number=table_number,
                    team1_id=home,
                    team2_id=away,
                    confirmed=False,
                    created=now,
                )
            )

    return games
