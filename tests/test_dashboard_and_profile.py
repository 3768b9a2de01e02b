import pytest

from lecturer_portal.errors import ValidationFailed
from lecturer_portal.repositories.consultations import ConsultationRepository
from lecturer_portal.repositories.dashboard import DashboardRepository
from lecturer_portal.repositories.profiles import ProfileRepository
from lecturer_portal.repositories.students import StudentRepository
from lecturer_portal.repositories.updates import UpdateRepository

from conftest import student_fields


def test_dashboard_counts_own_rows(client, other_client, lecturer, other_lecturer):
    StudentRepository(client).create(lecturer, student_fields(student_id="S-1"))
    StudentRepository(client).create(lecturer, student_fields(student_id="S-2"))
    StudentRepository(other_client).create(other_lecturer, student_fields(student_id="S-3"))
    consultations = ConsultationRepository(client)
    first = consultations.create(
        lecturer,
        {"student_name": "A", "student_email": "a@uni.test", "consultation_date": "2025-02-01T10:00", "reason": "x"},
    )
    consultations.create(
        lecturer,
        {"student_name": "B", "student_email": "b@uni.test", "consultation_date": "2025-02-02T10:00", "reason": "y"},
    )
    consultations.set_status(first.id, "approved")
    UpdateRepository(client).create(lecturer, {"title": "Hi", "content": "Welcome"})

    stats = DashboardRepository(client).stats(lecturer)

    assert stats.students == 2
    assert stats.pending_consultations == 1
    assert stats.updates == 1
    assert stats.assignments == 0
    assert stats.timetable_slots == 0
    assert stats.materials == 0


def test_profile_partial_update(client, lecturer):
    repo = ProfileRepository(client)
    before = repo.get(lecturer)

    after = repo.update(lecturer, {"department": "Computer Science", "bio": "Teaches algorithms"})

    assert after.department == "Computer Science"
    assert after.bio == "Teaches algorithms"
    assert after.full_name == before.full_name
    assert after.updated_at > before.updated_at
    assert repo.list(lecturer) == [after]


def test_avatar_upload(client, lecturer, store):
    repo = ProfileRepository(client)

    profile = repo.set_avatar(lecturer, "me.png", b"\x89PNG", store)

    assert profile.avatar_url.startswith(f"/static/storage/avatars/{lecturer}/")
    with pytest.raises(ValidationFailed):
        repo.set_avatar(lecturer, "me.gif", b"GIF89a", store)
