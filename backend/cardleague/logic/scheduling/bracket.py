from fastapi import HTTPException
from starlette import status

from cardleague.models.db.bracket import Bracket, BracketMatch, BracketSeed
from cardleague.models.standings import Standings
from cardleague.utils.id_types import TournamentId

BRACKET_SIZES = (4, 8, 16, 32)


def _seed_order(bracket_size: int) -> list[int]:
    if bracket_size == 1:
        return [1]

    previous = _seed_order(bracket_size // 2)
    return [seed for prev_seed in previous for seed in (prev_seed, bracket_size + 1 - prev_seed)]


def get_number_of_bracket_rounds(size: int) -> int:
    return size.bit_length() - 1


def get_first_round_pairs(size: int) -> list[tuple[int, int]]:
    """
    Seed pairs of the first round, e.g. 1v8, 4v5, 2v7, 3v6 for eight teams.

    Seeds 1 and 2 can only meet in the final.
    """
    if size not in BRACKET_SIZES:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST,
            f"Bracket size invalid, should be one of {', '.join(map(str, BRACKET_SIZES))}",
        )

    order = _seed_order(size)
    return [(order[i], order[i + 1]) for i in range(0, size, 2)]


def get_next_round_table(table_number: int, round_: int, size: int) -> int:
    """Table the winner of `table_number` in `round_` plays at in the next round."""
    tables_in_next_round = size // 2 ** (round_ + 1)
    if table_number <= tables_in_next_round:
        return table_number
    return (tables_in_next_round + 1) - (table_number - tables_in_next_round)


def build_bracket(tournament_id: TournamentId, standings: Standings, size: int) -> Bracket:
    pairs = get_first_round_pairs(size)
    if len(standings.sorted_teams) < size:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST,
            f"Not enough teams for a bracket of {size}, got {len(standings.sorted_teams)}",
        )

    # A seed is the team's line on the results page.
    seeds = [
        BracketSeed(
            seed=seed, team_id=team.id, team_name=team.name, team_number=team.team_number
        )
        for seed, team in enumerate(standings.sorted_teams[:size], start=1)
    ]
    seeds_by_number = {seed.seed: seed for seed in seeds}

    matches = [
        BracketMatch(
            round=1,
            table_number=min(seed1, seed2),
            team1=seeds_by_number[seed1],
            team2=seeds_by_number[seed2],
        )
        for seed1, seed2 in pairs
    ]
    for round_ in range(2, get_number_of_bracket_rounds(size) + 1):
        matches.extend(
            BracketMatch(round=round_, table_number=table_number)
            for table_number in range(1, size // 2**round_ + 1)
        )

    return Bracket(tournament_id=tournament_id, size=size, seeds=seeds, matches=matches)


def get_bracket_match(bracket: Bracket, round_: int, table_number: int) -> BracketMatch | None:
    return next(
        (
            match
            for match in bracket.matches
            if match.round == round_ and match.table_number == table_number
        ),
        None,
    )


def get_champion(bracket: Bracket) -> BracketSeed | None:
    final = get_bracket_match(bracket, get_number_of_bracket_rounds(bracket.size), 1)
    return final.winner if final is not None else None


def advance_winner(
    bracket: Bracket, round_: int, table_number: int, score1: int, score2: int
) -> Bracket:
    """
    Record the score of a match and move its winner into the next round.

    The winner coming from the table with the same number as the next round's table takes the
    `team1` slot, the other feeder takes `team2`. Returns a new bracket.
    """
    match = get_bracket_match(bracket, round_, table_number)
    if match is None:
        raise HTTPException(
            status.HTTP_404_NOT_FOUND,
            f"No bracket match at round {round_}, table {table_number}",
        )
    if match.team1 is None or match.team2 is None:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST, "Both teams of a bracket match must be known"
        )
    if match.winner is not None:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST, "The winner of this bracket match already advanced"
        )
    if score1 == score2:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Bracket matches cannot end in a tie")

    winner = match.team1 if score1 > score2 else match.team2
    next_table = (
        get_next_round_table(table_number, round_, bracket.size)
        if round_ < get_number_of_bracket_rounds(bracket.size)
        else None
    )
    slot = "team1" if table_number == next_table else "team2"

    matches = []
    for other in bracket.matches:
        if other is match:
            other = other.model_copy(update={"score1": score1, "score2": score2, "winner": winner})
        elif other.round == round_ + 1 and other.table_number == next_table:
            other = other.model_copy(update={slot: winner})
        matches.append(other)

    return bracket.model_copy(update={"matches": matches})
