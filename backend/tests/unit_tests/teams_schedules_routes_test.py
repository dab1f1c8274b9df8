import json

import pytest

from cardleague.app import validation_error_handler
from cardleague.models.db.schedule import Schedule, ScheduleBody
from cardleague.models.db.team import Team, TeamBody
from cardleague.routes import schedules as schedules_routes
from cardleague.routes import teams as teams_routes
from cardleague.utils.dummy_records import DUMMY_TEAM1, DUMMY_TEAMS, DUMMY_TOURNAMENT_ID
from cardleague.utils.errors import ValidationError
from cardleague.utils.id_types import TournamentId


@pytest.mark.asyncio
async def test_get_teams(monkeypatch: pytest.MonkeyPatch) -> None:
    async def fake_get_teams(_: TournamentId) -> list[Team]:
        return DUMMY_TEAMS

    monkeypatch.setattr(teams_routes, "get_teams_for_tournament", fake_get_teams)

    response = await teams_routes.get_teams(DUMMY_TOURNAMENT_ID)

    assert [team.name for team in response.data] == [team.name for team in DUMMY_TEAMS]


@pytest.mark.asyncio
async def test_create_team(monkeypatch: pytest.MonkeyPatch) -> None:
    bodies: list[TeamBody] = []

    async def fake_insert_team(_: TournamentId, team_body: TeamBody) -> Team:
        bodies.append(team_body)
        return DUMMY_TEAM1

    monkeypatch.setattr(teams_routes, "insert_team", fake_insert_team)

    body = TeamBody(team_number=1, name="Aces High", phone_number="3175550101")
    response = await teams_routes.create_team(DUMMY_TOURNAMENT_ID, body)

    assert response.data == DUMMY_TEAM1
    assert bodies == [body]


@pytest.mark.asyncio
async def test_get_missing_schedule(monkeypatch: pytest.MonkeyPatch) -> None:
    async def fake_get_schedule(_: TournamentId) -> None:
        return None

    monkeypatch.setattr(schedules_routes, "get_schedule", fake_get_schedule)

    response = await schedules_routes.get_tournament_schedule(DUMMY_TOURNAMENT_ID)

    assert response.data is None


@pytest.mark.asyncio
async def test_put_schedule(monkeypatch: pytest.MonkeyPatch) -> None:
    async def fake_upsert_schedule(tournament_id: TournamentId, rounds: int) -> Schedule:
        return Schedule(tournament_id=tournament_id, rounds=rounds)

    monkeypatch.setattr(schedules_routes, "upsert_schedule", fake_upsert_schedule)

    response = await schedules_routes.put_tournament_schedule(
        DUMMY_TOURNAMENT_ID, ScheduleBody(rounds=7)
    )

    assert response.data == Schedule(tournament_id=DUMMY_TOURNAMENT_ID, rounds=7)


@pytest.mark.asyncio
async def test_validation_error_maps_to_422() -> None:
    error = ValidationError("Duplicate team id: T1")
    response = await validation_error_handler(None, error)  # type: ignore[arg-type]

    assert response.status_code == 422
    assert json.loads(bytes(response.body)) == {"detail": "Duplicate team id: T1"}
