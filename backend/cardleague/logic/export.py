import csv
import io
from pathlib import Path
from typing import Protocol

import aiofiles
import aiofiles.os
from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from cardleague.models.standings import ExportCell, ResultsTable, Standings
from cardleague.utils.logging import logger

RESULTS_SHEET_TITLE = "Results"
TOTALS_HEADERS = ["Wins", "Points", "Hands", "Bostons"]


def build_results_header(num_rounds: int) -> list[str]:
    round_headers = [
        header
        for round_ in range(1, num_rounds + 1)
        for header in (
            f"R{round_} W/L",
            f"R{round_} Points",
            f"R{round_} Hands",
            f"R{round_} Boston",
        )
    ]
    return ["Team #", "Team Name", *round_headers, *TOTALS_HEADERS]


def build_results_table(standings: Standings) -> ResultsTable:
    """
    Project computed standings onto the spreadsheet column layout.

    The cells are copied from the results matrix as-is, so an export always shows the same
    numbers as the results view.
    """
    rows: list[list[ExportCell]] = []
    for team in standings.sorted_teams:
        team_results = standings.results_matrix[team.id]
        row: list[ExportCell] = [
            team.team_number if team.team_number is not None else team.id,
            team.name or "",
        ]
        for round_ in range(1, standings.num_rounds + 1):
            result = team_results.rounds[round_]
            row.extend([result.wl, result.points, result.hands, result.boston])

        totals = team_results.total_points
        row.extend([totals.wins, totals.points, totals.hands, totals.boston])
        rows.append(row)

    return ResultsTable(header=build_results_header(standings.num_rounds), rows=rows)


def results_table_to_csv(table: ResultsTable) -> str:
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(table.header)
    writer.writerows(table.rows)
    return output.getvalue()


def results_table_to_xlsx(table: ResultsTable) -> bytes:
    workbook = Workbook()
    sheet = workbook.active
    assert sheet is not None
    sheet.title = RESULTS_SHEET_TITLE
    sheet.append(table.header)
    for cell in sheet[1]:
        cell.font = Font(bold=True)
    for row in table.rows:
        sheet.append(row)

    for col_idx, header in enumerate(table.header, start=1):
        max_len = max([len(header), *(len(str(row[col_idx - 1])) for row in table.rows)])
        sheet.column_dimensions[get_column_letter(col_idx)].width = min(max(max_len + 2, 8), 30)

    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


class ExportSink(Protocol):
    async def write(self, table: ResultsTable, name: str) -> str: ...


class CsvFileExportSink:
    def __init__(self, directory: str) -> None:
        self.directory = directory

    async def write(self, table: ResultsTable, name: str) -> str:
        await aiofiles.os.makedirs(self.directory, exist_ok=True)
        path = str(Path(self.directory) / f"{name}.csv")
        async with aiofiles.open(path, "w", encoding="utf-8", newline="") as f:
            await f.write(results_table_to_csv(table))

        logger.info(f"Exported {len(table.rows)} result rows to {path}")
        return path


class XlsxFileExportSink:
    def __init__(self, directory: str) -> None:
        self.directory = directory

    async def write(self, table: ResultsTable, name: str) -> str:
        await aiofiles.os.makedirs(self.directory, exist_ok=True)
        path = str(Path(self.directory) / f"{name}.xlsx")
        async with aiofiles.open(path, "wb") as f:
            await f.write(results_table_to_xlsx(table))

        logger.info(f"Exported {len(table.rows)} result rows to {path}")
        return path
