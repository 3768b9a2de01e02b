from datetime import time
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from lecturer_portal.schemas.common import FormIn, PatchIn, TimestampedRowOut

DayOfWeek = Literal["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]


class TimetableSlotCreate(FormIn):
    day_of_week: DayOfWeek
    start_time: time
    end_time: time
    subject: str = Field(..., min_length=1)
    class_name: str = Field(..., alias="class", min_length=1)
    room: Optional[str] = None


class TimetableSlotUpdate(PatchIn):
    not_null = ("day_of_week", "start_time", "end_time", "subject", "class_name")

    day_of_week: Optional[DayOfWeek] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    subject: Optional[str] = None
    class_name: Optional[str] = Field(None, alias="class")
    room: Optional[str] = None


class TimetableSlotOut(TimestampedRowOut):
    day_of_week: DayOfWeek
    start_time: time
    end_time: time
    subject: str
    class_name: str = Field(..., alias="class")
    room: Optional[str] = None


class SlotConflictOut(BaseModel):
    day_of_week: DayOfWeek
    first: TimetableSlotOut
    second: TimetableSlotOut


class TimetableWeekOut(BaseModel):
    grid: Dict[str, List[TimetableSlotOut]]  # "Monday".."Friday"
    conflicts: List[SlotConflictOut] = []
