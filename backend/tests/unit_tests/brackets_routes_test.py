import pytest
from starlette.exceptions import HTTPException

from cardleague.logic.scheduling.bracket import build_bracket
from cardleague.models.db.bracket import Bracket, BracketBody, BracketScoreBody
from cardleague.models.standings import Standings
from cardleague.routes import brackets as brackets_routes
from cardleague.utils.dummy_records import DUMMY_TEAMS, DUMMY_TOURNAMENT_ID
from cardleague.utils.id_types import TournamentId

DUMMY_STANDINGS = Standings(num_rounds=2, sorted_teams=DUMMY_TEAMS, results_matrix={})


@pytest.mark.asyncio
async def test_create_bracket(monkeypatch: pytest.MonkeyPatch) -> None:
    stored: list[Bracket] = []

    async def fake_load_standings(_: TournamentId) -> Standings:
        return DUMMY_STANDINGS

    async def fake_upsert(bracket: Bracket) -> None:
        stored.append(bracket)

    monkeypatch.setattr(brackets_routes, "load_standings", fake_load_standings)
    monkeypatch.setattr(brackets_routes, "upsert_bracket", fake_upsert)

    response = await brackets_routes.create_tournament_bracket(
        DUMMY_TOURNAMENT_ID, BracketBody(size=4)
    )

    assert stored == [response.data]
    assert [seed.team_name for seed in response.data.seeds] == [
        team.name for team in DUMMY_TEAMS
    ]
    assert len(response.data.matches) == 3


@pytest.mark.asyncio
async def test_create_bracket_larger_than_league(monkeypatch: pytest.MonkeyPatch) -> None:
    async def fake_load_standings(_: TournamentId) -> Standings:
        return DUMMY_STANDINGS

    monkeypatch.setattr(brackets_routes, "load_standings", fake_load_standings)

    with pytest.raises(HTTPException) as exc_info:
        await brackets_routes.create_tournament_bracket(DUMMY_TOURNAMENT_ID, BracketBody(size=8))

    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_score_bracket_match(monkeypatch: pytest.MonkeyPatch) -> None:
    stored: list[Bracket] = []

    async def fake_get_bracket(_: TournamentId) -> Bracket:
        return build_bracket(DUMMY_TOURNAMENT_ID, DUMMY_STANDINGS, 4)

    async def fake_upsert(bracket: Bracket) -> None:
        stored.append(bracket)

    monkeypatch.setattr(brackets_routes, "get_bracket", fake_get_bracket)
    monkeypatch.setattr(brackets_routes, "upsert_bracket", fake_upsert)

    response = await brackets_routes.score_bracket_match(
        DUMMY_TOURNAMENT_ID, 1, 2, BracketScoreBody(score1=4, score2=9)
    )

    assert stored == [response.data]
    final = response.data.matches[-1]
    assert final.team2 is not None and final.team2.team_id == "T3"


@pytest.mark.asyncio
async def test_score_without_bracket(monkeypatch: pytest.MonkeyPatch) -> None:
    async def fake_get_bracket(_: TournamentId) -> None:
        return None

    monkeypatch.setattr(brackets_routes, "get_bracket", fake_get_bracket)

    with pytest.raises(HTTPException) as exc_info:
        await brackets_routes.score_bracket_match(
            DUMMY_TOURNAMENT_ID, 1, 1, BracketScoreBody(score1=4, score2=9)
        )

    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_delete_bracket(monkeypatch: pytest.MonkeyPatch) -> None:
    deleted: list[TournamentId] = []

    async def fake_delete(tournament_id: TournamentId) -> None:
        deleted.append(tournament_id)

    monkeypatch.setattr(brackets_routes, "delete_bracket", fake_delete)

    response = await brackets_routes.delete_tournament_bracket(DUMMY_TOURNAMENT_ID)

    assert response.success
    assert deleted == [DUMMY_TOURNAMENT_ID]
