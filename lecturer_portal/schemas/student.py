from typing import Optional

from pydantic import Field

from lecturer_portal.schemas.common import FormIn, PatchIn, TimestampedRowOut


class StudentCreate(FormIn):
    student_name: str = Field(..., min_length=1)
    student_email: str = Field(..., min_length=3)
    student_id: str = Field(..., min_length=1, max_length=64)
    class_name: str = Field(..., alias="class", min_length=1)
    phone: Optional[str] = None


class StudentUpdate(PatchIn):
    not_null = ("student_name", "student_email", "student_id", "class_name")

    student_name: Optional[str] = Field(None, min_length=1)
    student_email: Optional[str] = None
    student_id: Optional[str] = Field(None, min_length=1, max_length=64)
    class_name: Optional[str] = Field(None, alias="class", min_length=1)
    phone: Optional[str] = None


class StudentOut(TimestampedRowOut):
    student_name: str
    student_email: str
    student_id: str
    class_name: str = Field(..., alias="class")
    phone: Optional[str] = None


class StudentImportOut(FormIn):
    inserted: int
    skipped: int
    errors: list[str] = []
