import pytest

from lecturer_portal.errors import ValidationFailed
from lecturer_portal.repositories.reports import ReportRepository
from lecturer_portal.repositories.updates import UpdateRepository


def report(**overrides):
    fields = {
        "report_type": "sent",
        "student_name": "Jane Doe",
        "title": "Midterm progress",
        "content": "On track.",
    }
    fields.update(overrides)
    return fields


def test_reports_have_no_update_path(client, lecturer):
    repo = ReportRepository(client)
    created = repo.create(lecturer, report())

    assert not hasattr(repo, "update")
    assert not hasattr(created, "updated_at")


def test_report_type_is_checked(client, lecturer):
    with pytest.raises(ValidationFailed):
        ReportRepository(client).create(lecturer, report(report_type="draft"))


def test_reports_newest_first_with_type_filter(client, lecturer):
    repo = ReportRepository(client)
    repo.create(lecturer, report(title="first"))
    repo.create(lecturer, report(title="second", report_type="received"))
    repo.create(lecturer, report(title="third"))

    assert [r.title for r in repo.list(lecturer)] == ["third", "second", "first"]
    assert [r.title for r in repo.list(lecturer, report_type="received")] == ["second"]


def test_reports_can_be_deleted(client, lecturer):
    repo = ReportRepository(client)
    created = repo.create(lecturer, report())
    repo.delete(created.id)
    assert repo.list(lecturer) == []


def test_updates_without_target_reach_every_class(client, lecturer):
    repo = UpdateRepository(client)
    repo.create(lecturer, {"title": "Holiday", "content": "No classes Monday"})
    repo.create(lecturer, {"title": "Lab moved", "content": "Room B12", "target_class": "CS101"})
    repo.create(lecturer, {"title": "Quiz", "content": "Friday", "target_class": "CS202"})

    assert [u.title for u in repo.list(lecturer)] == ["Quiz", "Lab moved", "Holiday"]
    assert sorted(u.title for u in repo.list_for_class(lecturer, "CS101")) == ["Holiday", "Lab moved"]


def test_update_can_be_retargeted_to_all_classes(client, lecturer):
    repo = UpdateRepository(client)
    created = repo.create(lecturer, {"title": "Lab", "content": "B12", "target_class": "CS101"})

    edited = repo.update(created.id, {"target_class": None})

    assert edited.target_class is None
    assert edited.title == "Lab"
