# importing this module registers every table on Base.metadata
from lecturer_portal.models.auth_user import AuthUser
from lecturer_portal.models.profile import Profile
from lecturer_portal.models.student import Student
from lecturer_portal.models.timetable import TimetableSlot
from lecturer_portal.models.assignment import Assignment
from lecturer_portal.models.consultation import Consultation
from lecturer_portal.models.report import Report
from lecturer_portal.models.study_material import StudyMaterial
from lecturer_portal.models.update import Update

__all__ = [
    "AuthUser",
    "Profile",
    "Student",
    "TimetableSlot",
    "Assignment",
    "Consultation",
    "Report",
    "StudyMaterial",
    "Update",
]
