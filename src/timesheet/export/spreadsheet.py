"""
Excel rendering of an export report.

Receives rows and a summary that are already computed and only deals with
layout and styling.
"""

# SPDX-License-Identifier: MIT

from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from timesheet.logger import get_logger
from timesheet.model.report import ExportReport, ExportRow, ExportSummary
from timesheet.model.status import EntryStatus

logger = get_logger(__name__)

COLUMNS: list[tuple[str, str, int]] = [
    ("Date", "date", 18),
    ("Day of Week", "day_of_week", 15),
    ("Start Time", "start_time", 12),
    ("End Time", "end_time", 12),
    ("Break Duration", "break_duration", 15),
    ("Total Worked", "total_worked", 15),
    ("Status", "status", 12),
    ("Created Date", "created", 20),
]
STATUS_COLUMN = 7
TIME_COLUMNS = range(3, 7)

HEADER_COLOR = "2563EB"
SUMMARY_HEADER_COLOR = "7C3AED"
EVEN_ROW_COLOR = "F8FAFC"
ODD_ROW_COLOR = "FFFFFF"
WEEKEND_ROW_COLOR = "FEF3C7"
STATUS_COLORS: dict[str, str] = {
    EntryStatus.COMPLETE: "10B981",
    EntryStatus.IN_PROGRESS: "F59E0B",
    EntryStatus.PENDING: "6B7280",
    EntryStatus.NO_ENTRY: "EF4444",
}
DEFAULT_STATUS_COLOR = "6B7280"


class ExportError(Exception):
    """Raised when the spreadsheet cannot be written."""

    pass


def _solid(color: str) -> PatternFill:
    return PatternFill(fill_type="solid", start_color=color, end_color=color)


def _border(color: str) -> Border:
    side = Side(style="thin", color=color)
    return Border(top=side, left=side, bottom=side, right=side)


def _write_header(worksheet: Worksheet) -> None:
    worksheet.append([title for title, _, _ in COLUMNS])
    for index, (_, _, width) in enumerate(COLUMNS, start=1):
        worksheet.column_dimensions[get_column_letter(index)].width = width

    for cell in worksheet[1]:
        cell.font = Font(bold=True, color="FFFFFF", size=12)
        cell.fill = _solid(HEADER_COLOR)
        cell.alignment = Alignment(vertical="center", horizontal="center")
        cell.border = _border("000000")
    worksheet.row_dimensions[1].height = 25


def _write_row(worksheet: Worksheet, row: ExportRow) -> None:
    worksheet.append([str(row[key]) for _, key, _ in COLUMNS])  # type: ignore[literal-required]
    row_number = worksheet.max_row
    worksheet.row_dimensions[row_number].height = 20

    fill_color = EVEN_ROW_COLOR if row_number % 2 == 0 else ODD_ROW_COLOR
    if row["is_weekend"]:
        fill_color = WEEKEND_ROW_COLOR

    for column_number, cell in enumerate(worksheet[row_number], start=1):
        cell.alignment = Alignment(vertical="center", horizontal="center")
        cell.border = _border("E5E7EB")
        if column_number == STATUS_COLUMN:
            cell.font = Font(bold=True, color="FFFFFF")
            cell.fill = _solid(STATUS_COLORS.get(row["status"], DEFAULT_STATUS_COLOR))
            continue
        cell.fill = _solid(fill_color)
        if column_number in TIME_COLUMNS:
            cell.font = Font(name="Consolas", size=10)


def _write_summary(worksheet: Worksheet, summary: ExportSummary) -> None:
    worksheet.append([])
    worksheet.append([])

    worksheet.append(["SUMMARY REPORT"])
    header_row = worksheet.max_row
    header_cell = worksheet.cell(row=header_row, column=1)
    header_cell.font = Font(bold=True, size=14, color="FFFFFF")
    header_cell.fill = _solid(SUMMARY_HEADER_COLOR)
    worksheet.merge_cells(
        start_row=header_row,
        start_column=1,
        end_row=header_row,
        end_column=len(COLUMNS),
    )

    counts = summary["status_counts"]
    summary_data = [
        ("Total Entries", str(summary["total_entries"])),
        ("Total Hours Worked", summary["total_hours"]),
        ("Average Hours/Day", f"{summary['average_hours_per_day']} hours"),
        ("Complete Days", str(counts[EntryStatus.COMPLETE])),
        ("In Progress Days", str(counts[EntryStatus.IN_PROGRESS])),
        ("Pending Days", str(counts[EntryStatus.PENDING])),
        ("Export Date", summary["export_date"]),
    ]
    for label, value in summary_data:
        worksheet.append([label, value])
        row_number = worksheet.max_row
        worksheet.cell(row=row_number, column=1).font = Font(bold=True)
        worksheet.cell(row=row_number, column=2).font = Font(
            bold=True, color=HEADER_COLOR
        )


def _apply_sheet_settings(worksheet: Worksheet) -> None:
    worksheet.freeze_panes = "A2"
    worksheet.auto_filter.ref = f"A1:{get_column_letter(len(COLUMNS))}1"
    worksheet.page_setup.paperSize = worksheet.PAPERSIZE_A4
    worksheet.page_setup.orientation = worksheet.ORIENTATION_LANDSCAPE
    worksheet.page_setup.fitToWidth = 1
    worksheet.page_setup.fitToHeight = 0
    worksheet.sheet_properties.pageSetUpPr.fitToPage = True


def build_workbook(
    report: ExportReport,
    worksheet_name: str = "Time Entries",
    include_summary: bool = True,
) -> Workbook:
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = worksheet_name

    _write_header(worksheet)
    for row in report["rows"]:
        _write_row(worksheet, row)
    if include_summary:
        _write_summary(worksheet, report["summary"])
    _apply_sheet_settings(worksheet)

    return workbook


def write_spreadsheet(
    report: ExportReport,
    path: Path,
    worksheet_name: str = "Time Entries",
    include_summary: bool = True,
) -> Path:
    """Write the report to an .xlsx file and return the path written."""
    if path.suffix != ".xlsx":
        path = path.with_name(f"{path.name}.xlsx")

    try:
        workbook = build_workbook(report, worksheet_name, include_summary)
        path.parent.mkdir(parents=True, exist_ok=True)
        workbook.save(path)
    except (OSError, ValueError) as e:
        logger.error("spreadsheet export failed", path=str(path), error=str(e))
        raise ExportError("Failed to export Excel file. Please try again.") from e

    logger.info("spreadsheet exported", path=str(path), rows=len(report["rows"]))
    return path
