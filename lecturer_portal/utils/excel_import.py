import zipfile
from typing import BinaryIO, List, Dict, Any

import pandas as pd

from lecturer_portal.errors import ValidationFailed

REQUIRED_COLUMNS = ("student_name", "student_email", "student_id", "class")

# header spellings seen in exported class lists
HEADER_ALIASES = {
    "name": "student_name",
    "student name": "student_name",
    "email": "student_email",
    "student email": "student_email",
    "student id": "student_id",
    "id": "student_id",
    "class_name": "class",
    "class name": "class",
    "phone number": "phone",
}


def to_str(v):
    if pd.isna(v):
        return None
    s = str(v).strip()
    # 12345.0 -> "12345" for numeric ids read as floats
    if isinstance(v, float) and v.is_integer():
        s = str(int(v))
    return None if s == "" or s.lower() == "nan" else s


def _normalize_header(h) -> str:
    key = str(h).strip().lower()
    return HEADER_ALIASES.get(key, key)


def read_roster(file: BinaryIO) -> List[Dict[str, Any]]:
    """
    First sheet, first row is the header.
    Returns one dict per non-empty row with the student columns.
    """
    try:
        df = pd.read_excel(file, dtype=object)
    except (ValueError, zipfile.BadZipFile) as e:
        raise ValidationFailed(f"Cannot read Excel file: {e}") from e

    df.columns = [_normalize_header(c) for c in df.columns]
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValidationFailed(f"Missing columns: {', '.join(missing)}")

    rows = []
    for _, row in df.iterrows():
        item = {
            "student_name": to_str(row.get("student_name")),
            "student_email": to_str(row.get("student_email")),
            "student_id": to_str(row.get("student_id")),
            "class": to_str(row.get("class")),
            "phone": to_str(row.get("phone")) if "phone" in df.columns else None,
        }
        if not any(item.values()):
            continue
        rows.append(item)
    return rows
