import pendulum
import pytest
from openpyxl import load_workbook

from timesheet.export.spreadsheet import (
    COLUMNS,
    ExportError,
    build_workbook,
    write_spreadsheet,
)
from timesheet.repository.fixture import load_fixture_time_entries
from timesheet.service.date_range import normalize_date_range
from timesheet.service.export import build_export_report
from timesheet.service.time_entry import filter_time_entries


@pytest.fixture
def report():
    entries = filter_time_entries(load_fixture_time_entries(), {"user_id": "u1"})
    date_range = normalize_date_range(
        pendulum.date(2025, 7, 1), pendulum.date(2025, 7, 7)
    )
    return build_export_report(entries, date_range, pendulum.date(2025, 7, 31))


def _fill(cell) -> str:
    return str(cell.fill.start_color.rgb)


def test_written_file_has_header_and_rows(report, tmp_path):
    path = write_spreadsheet(report, tmp_path / "out.xlsx")

    worksheet = load_workbook(path)["Time Entries"]
    assert [cell.value for cell in worksheet[1]] == [title for title, _, _ in COLUMNS]
    assert worksheet["A2"].value == "Tue, 01 Jul 2025"
    assert worksheet["B2"].value == "Tuesday"
    assert worksheet["F2"].value == "08:00"
    assert worksheet["G2"].value == "Complete"
    assert worksheet["A8"].value == "Mon, 07 Jul 2025"


def test_styling(report, tmp_path):
    path = write_spreadsheet(report, tmp_path / "out.xlsx")

    worksheet = load_workbook(path)["Time Entries"]
    assert _fill(worksheet["A1"]).endswith("2563EB")
    assert worksheet["A1"].font.bold
    assert _fill(worksheet["G2"]).endswith("10B981")
    assert _fill(worksheet["G3"]).endswith("F59E0B")
    # Saturday row
    assert worksheet["A6"].value == "Sat, 05 Jul 2025"
    assert _fill(worksheet["A6"]).endswith("FEF3C7")
    assert _fill(worksheet["G6"]).endswith("EF4444")
    assert worksheet.freeze_panes == "A2"
    assert worksheet.auto_filter.ref == "A1:H1"


def test_summary_block(report, tmp_path):
    path = write_spreadsheet(report, tmp_path / "out.xlsx")

    worksheet = load_workbook(path)["Time Entries"]
    values = {
        row[0].value: row[1].value
        for row in worksheet.iter_rows(min_row=9)
        if row[0].value is not None
    }
    assert "SUMMARY REPORT" in values
    assert values["Total Entries"] == "5"
    assert values["Total Hours Worked"] == "39:45"
    assert values["Complete Days"] == "3"
    assert values["In Progress Days"] == "2"
    assert values["Pending Days"] == "0"
    assert values["Export Date"] == "2025-07-31"


def test_without_summary(report):
    worksheet = build_workbook(report, "July", include_summary=False).active

    assert worksheet.title == "July"
    assert worksheet.max_row == 8


def test_extension_is_added(report, tmp_path):
    path = write_spreadsheet(report, tmp_path / "timesheet")

    assert path.name == "timesheet.xlsx"
    assert path.is_file()


def test_unwritable_path(report, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")

    with pytest.raises(ExportError, match="Failed to export Excel file"):
        write_spreadsheet(report, blocker / "out.xlsx")
