from pydantic import BaseModel


class DashboardStats(BaseModel):
    students: int = 0
    timetable_slots: int = 0
    assignments: int = 0
    pending_consultations: int = 0
    materials: int = 0
    updates: int = 0
