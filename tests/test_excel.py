from io import BytesIO

import pytest
from openpyxl import Workbook, load_workbook

from lecturer_portal.errors import ValidationFailed
from lecturer_portal.repositories.students import StudentRepository
from lecturer_portal.utils.excel_export import ROSTER_COLUMNS, make_filename, students_to_xlsx_bytes
from lecturer_portal.utils.excel_import import read_roster, to_str

from conftest import student_fields


def workbook_bytes(rows):
    wb = Workbook()
    ws = wb.active
    for row in rows:
        ws.append(row)
    buf = BytesIO()
    wb.save(buf)
    buf.seek(0)
    return buf


def test_export_then_import_roster(client, lecturer):
    repo = StudentRepository(client)
    repo.create(lecturer, student_fields(student_id="S-1", phone="555-0100"))
    repo.create(lecturer, student_fields(student_id="S-2", student_name="Bob Ray"))

    data = students_to_xlsx_bytes(repo.list(lecturer))
    sheet = load_workbook(BytesIO(data)).active
    assert [c.value for c in sheet[1]] == ROSTER_COLUMNS

    rows = read_roster(BytesIO(data))
    assert [r["student_id"] for r in rows] == ["S-2", "S-1"]
    assert rows[1]["phone"] == "555-0100"
    assert rows[0]["phone"] is None

    for s in repo.list(lecturer):
        repo.delete(s.id)
    result = repo.import_rows(lecturer, rows + [rows[0]])
    assert (result.inserted, result.skipped) == (2, 1)
    assert result.errors[0].startswith("row 3: ")


def test_header_aliases_and_numeric_ids():
    rows = read_roster(
        workbook_bytes(
            [
                ["Name", "Email", "Student ID", "Class Name"],
                ["Jane Doe", "jane@uni.test", 12345, "CS101"],
                [None, None, None, None],
            ]
        )
    )

    assert rows == [
        {
            "student_name": "Jane Doe",
            "student_email": "jane@uni.test",
            "student_id": "12345",
            "class": "CS101",
            "phone": None,
        }
    ]


def test_missing_columns_are_reported():
    with pytest.raises(ValidationFailed) as exc:
        read_roster(workbook_bytes([["Name", "Email"], ["Jane", "j@uni.test"]]))
    assert "student_id" in exc.value.message


def test_unreadable_file():
    with pytest.raises(ValidationFailed):
        read_roster(BytesIO(b"definitely not a spreadsheet"))


def test_to_str():
    assert to_str(float("nan")) is None
    assert to_str("  ") is None
    assert to_str(7.0) == "7"
    assert to_str(" CS101 ") == "CS101"


def test_filename_has_prefix_and_extension():
    name = make_filename("students")
    assert name.startswith("students_")
    assert name.endswith(".xlsx")
