from lecturer_portal.client import PortalClient
from lecturer_portal.models.registry import (
    Assignment,
    Consultation,
    Student,
    StudyMaterial,
    TimetableSlot,
    Update,
)
from lecturer_portal.schemas.dashboard import DashboardStats


class DashboardRepository:
    def __init__(self, client: PortalClient):
        self.client = client

    def stats(self, owner_id) -> DashboardStats:
        count = self.client.count
        return DashboardStats(
            students=count(Student, Student.lecturer_id == owner_id),
            timetable_slots=count(TimetableSlot, TimetableSlot.lecturer_id == owner_id),
            assignments=count(Assignment, Assignment.lecturer_id == owner_id),
            pending_consultations=count(
                Consultation,
                Consultation.lecturer_id == owner_id,
                Consultation.status == "pending",
            ),
            materials=count(StudyMaterial, StudyMaterial.lecturer_id == owner_id),
            updates=count(Update, Update.lecturer_id == owner_id),
        )
