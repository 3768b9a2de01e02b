from __future__ import annotations

from sqlalchemy import case

from lecturer_portal.models.registry import TimetableSlot
from lecturer_portal.models.timetable import WEEKDAYS
from lecturer_portal.repositories.base import MutableRepository
from lecturer_portal.schemas.timetable import (
    SlotConflictOut,
    TimetableSlotCreate,
    TimetableSlotOut,
    TimetableSlotUpdate,
    TimetableWeekOut,
)
from lecturer_portal.utils.conflict import find_conflicts

# Monday=0 ... Friday=4, the text itself would sort alphabetically
DAY_ORDER = case(
    {day: i for i, day in enumerate(WEEKDAYS)},
    value=TimetableSlot.day_of_week,
    else_=len(WEEKDAYS),
)


class TimetableRepository(MutableRepository):
    model = TimetableSlot
    out_schema = TimetableSlotOut
    create_schema = TimetableSlotCreate
    update_schema = TimetableSlotUpdate
    label = "Timetable slot"

    def order_by(self) -> tuple:
        return (DAY_ORDER, TimetableSlot.start_time.asc())

    def week(self, owner_id) -> TimetableWeekOut:
        slots = self.list(owner_id)
        grid = {day: [] for day in WEEKDAYS}
        for s in slots:
            grid[s.day_of_week].append(s)
        conflicts = [
            SlotConflictOut(day_of_week=a.day_of_week, first=a, second=b)
            for a, b in find_conflicts(slots)
        ]
        return TimetableWeekOut(grid=grid, conflicts=conflicts)
