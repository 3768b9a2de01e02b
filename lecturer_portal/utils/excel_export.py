
from __future__ import annotations
from typing import List, Dict, Any
from io import BytesIO
from datetime import datetime

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.styles import Font, Alignment

ROSTER_COLUMNS = ["student_name", "student_email", "student_id", "class", "phone"]


def rows_to_xlsx_bytes(rows: List[Dict[str, Any]], sheet_name: str = "Students", headers: List[str] | None = None) -> bytes:
    """
    rows: list of dict, each dict is a row
    headers: column order, defaults to the keys of the first row
    """
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name[:31]

    headers = headers or (list(rows[0].keys()) if rows else [])
    if not headers:
        ws.append(["No data"])
        buf = BytesIO()
        wb.save(buf)
        return buf.getvalue()

    ws.append(headers)

    # header style
    header_font = Font(bold=True)
    for col_idx, _h in enumerate(headers, start=1):
        cell = ws.cell(row=1, column=col_idx)
        cell.font = header_font
        cell.alignment = Alignment(horizontal="center", vertical="center")

    for r in rows:
        ws.append([r.get(h) for h in headers])

    # autosize columns
    for col_idx, h in enumerate(headers, start=1):
        max_len = len(str(h))
        for row_idx in range(2, ws.max_row + 1):
            v = ws.cell(row=row_idx, column=col_idx).value
            if v is None:
                continue
            max_len = max(max_len, len(str(v)))
        ws.column_dimensions[get_column_letter(col_idx)].width = min(max_len + 2, 60)

    buf = BytesIO()
    wb.save(buf)
    return buf.getvalue()


def students_to_xlsx_bytes(students) -> bytes:
    rows = [s.model_dump(by_alias=True, include={"student_name", "student_email", "student_id", "class_name", "phone"}) for s in students]
    return rows_to_xlsx_bytes(rows, sheet_name="Students", headers=ROSTER_COLUMNS)


def make_filename(prefix: str = "students") -> str:
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{prefix}_{ts}.xlsx"
