from typing import Literal

from pydantic import Field

from lecturer_portal.schemas.common import FormIn, RowOut

ReportType = Literal["sent", "received"]


class ReportCreate(FormIn):
    report_type: ReportType
    student_name: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)


class ReportOut(RowOut):
    report_type: ReportType
    student_name: str
    title: str
    content: str
