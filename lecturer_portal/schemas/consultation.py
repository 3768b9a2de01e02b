from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

from lecturer_portal.schemas.common import FormIn, PatchIn, TimestampedRowOut

ConsultationStatus = Literal["pending", "approved", "declined"]
ConsultationDecision = Literal["approved", "declined"]


class ConsultationCreate(FormIn):
    student_name: str = Field(..., min_length=1)
    student_email: str = Field(..., min_length=3)
    consultation_date: datetime
    reason: str = Field(..., min_length=1)


class ConsultationUpdate(PatchIn):
    # status only moves through set_status
    not_null = ("student_name", "student_email", "consultation_date", "reason")

    student_name: Optional[str] = None
    student_email: Optional[str] = None
    consultation_date: Optional[datetime] = None
    reason: Optional[str] = None


class ConsultationOut(TimestampedRowOut):
    student_name: str
    student_email: str
    consultation_date: datetime
    reason: str
    status: ConsultationStatus


class ConsultationStatusIn(BaseModel):
    status: ConsultationDecision
