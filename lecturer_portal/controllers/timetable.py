from lecturer_portal.controllers.base import ListScreen
from lecturer_portal.models.timetable import WEEKDAYS
from lecturer_portal.repositories.timetable import TimetableRepository
from lecturer_portal.utils.conflict import find_conflicts, is_conflict


class TimetableScreen(ListScreen):
    repository_class = TimetableRepository
    noun = "slot"
    plural = "timetable"
    created_title = "Timetable slot added"
    updated_title = "Timetable slot updated"
    deleted_title = "Timetable slot deleted"

    @property
    def grid(self) -> dict:
        grid = {day: [] for day in WEEKDAYS}
        for slot in self.items:
            grid[slot.day_of_week].append(slot)
        return grid

    @property
    def conflicts(self) -> list:
        return find_conflicts(self.items)

    async def after_save(self, row):
        others = [s for s in self.items if s.id != row.id]
        if is_conflict(others, [row]):
            self.notify(
                "Timetable clash",
                f"{row.subject} overlaps another slot on {row.day_of_week}",
            )
