from fastapi import APIRouter, HTTPException
from starlette import status
from starlette.responses import Response

from cardleague.config import config
from cardleague.logic.export import (
    CsvFileExportSink,
    ExportSink,
    XlsxFileExportSink,
    build_results_table,
    results_table_to_csv,
    results_table_to_xlsx,
)
from cardleague.logic.standings.calculation import resolve_round_count
from cardleague.logic.standings.loading import load_standings
from cardleague.logic.standings.overrides import (
    build_reset_overrides,
    override_key,
    parse_override_key,
)
from cardleague.models.db.override import OverrideUpsertBody
from cardleague.models.standings import ResultsTable
from cardleague.routes.models import (
    ExportArchiveResponse,
    OverridesResponse,
    StandingsResponse,
    SuccessResponse,
)
from cardleague.sql.overrides import (
    delete_override,
    get_overrides,
    replace_overrides,
    upsert_override,
)
from cardleague.sql.schedules import get_schedule
from cardleague.sql.teams import get_team_by_id, get_teams_for_tournament
from cardleague.utils.id_types import TournamentId
from cardleague.utils.logging import logger

router = APIRouter(prefix=config.api_prefix)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


async def load_results_table(tournament_id: TournamentId) -> ResultsTable:
    standings = await load_standings(tournament_id)
    if len(standings.sorted_teams) < 1:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "No results to export")
    return build_results_table(standings)


@router.get("/tournaments/{tournament_id}/results", response_model=StandingsResponse)
async def get_results(tournament_id: TournamentId) -> StandingsResponse:
    return StandingsResponse(data=await load_standings(tournament_id))


@router.get("/tournaments/{tournament_id}/results/export.csv")
async def export_results_csv(tournament_id: TournamentId) -> Response:
    table = await load_results_table(tournament_id)
    logger.info(f"Exporting {len(table.rows)} result rows of tournament {tournament_id} as CSV")
    return Response(
        content=results_table_to_csv(table),
        media_type="text/csv",
        headers={
            "Content-Disposition": f'attachment; filename="tournament_results_{tournament_id}.csv"'
        },
    )


@router.get("/tournaments/{tournament_id}/results/export.xlsx")
async def export_results_xlsx(tournament_id: TournamentId) -> Response:
    table = await load_results_table(tournament_id)
    logger.info(f"Exporting {len(table.rows)} result rows of tournament {tournament_id} as XLSX")
    return Response(
        content=results_table_to_xlsx(table),
        media_type=XLSX_MEDIA_TYPE,
        headers={
            "Content-Disposition": f'attachment; filename="tournament_results_{tournament_id}.xlsx"'
        },
    )


@router.get("/tournaments/{tournament_id}/results/overrides", response_model=OverridesResponse)
async def get_result_overrides(tournament_id: TournamentId) -> OverridesResponse:
    return OverridesResponse(data=await get_overrides(tournament_id))


@router.put("/tournaments/{tournament_id}/results/overrides", response_model=SuccessResponse)
async def put_result_override(
    tournament_id: TournamentId, body: OverrideUpsertBody
) -> SuccessResponse:
    if await get_team_by_id(tournament_id, body.team_id) is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, f"Could not find team {body.team_id}")

    await upsert_override(
        tournament_id, override_key(body.team_id, body.round, body.field), body.value
    )
    return SuccessResponse()


@router.delete(
    "/tournaments/{tournament_id}/results/overrides/{key}", response_model=SuccessResponse
)
async def delete_result_override(tournament_id: TournamentId, key: str) -> SuccessResponse:
    if parse_override_key(key) is None:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, f"Invalid override key: {key}")

    await delete_override(tournament_id, key)
    return SuccessResponse()


@router.post("/tournaments/{tournament_id}/results/overrides/reset", response_model=SuccessResponse)
async def reset_result_overrides(tournament_id: TournamentId) -> SuccessResponse:
    teams = await get_teams_for_tournament(tournament_id)
    num_rounds = resolve_round_count(await get_schedule(tournament_id), tournament_id)
    await replace_overrides(
        tournament_id, build_reset_overrides([team.id for team in teams], num_rounds)
    )
    logger.info(f"Reset result table of tournament {tournament_id} ({len(teams)} teams)")
    return SuccessResponse()


@router.post("/tournaments/{tournament_id}/results/archive", response_model=ExportArchiveResponse)
async def archive_results(tournament_id: TournamentId) -> ExportArchiveResponse:
    table = await load_results_table(tournament_id)
    sinks: list[ExportSink] = [
        CsvFileExportSink(config.export_dir),
        XlsxFileExportSink(config.export_dir),
    ]
    name = f"tournament_results_{tournament_id}"
    return ExportArchiveResponse(data=[await sink.write(table, name) for sink in sinks])
