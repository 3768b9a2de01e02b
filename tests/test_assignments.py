import uuid
from pathlib import Path

import pytest

from lecturer_portal.errors import NotFound
from lecturer_portal.repositories.assignments import AssignmentRepository
from lecturer_portal.storage import ASSIGNMENT_BUCKET


def hw1():
    return {
        "title": "HW1",
        "class": "CS101",
        "submission_date": "2025-01-10T10:00",
        "portal_open": False,
    }


def test_assignment_lifecycle(client, lecturer):
    repo = AssignmentRepository(client)

    created = repo.create(lecturer, hw1())
    listed = repo.list(lecturer)
    assert [a.id for a in listed] == [created.id]
    assert listed[0].portal_open is False
    assert listed[0].title == "HW1"
    assert listed[0].class_name == "CS101"

    repo.set_portal_open(created.id, True)
    reopened = repo.list(lecturer)[0]
    assert reopened.portal_open is True
    assert reopened.updated_at > created.updated_at
    assert reopened.title == "HW1"

    repo.delete(created.id)
    assert all(a.id != created.id for a in repo.list(lecturer))


def test_list_orders_by_submission_date_descending(client, lecturer):
    repo = AssignmentRepository(client)
    repo.create(lecturer, {**hw1(), "title": "early", "submission_date": "2025-01-01T09:00"})
    repo.create(lecturer, {**hw1(), "title": "late", "submission_date": "2025-03-01T09:00"})
    repo.create(lecturer, {**hw1(), "title": "middle", "submission_date": "2025-02-01T09:00"})

    assert [a.title for a in repo.list(lecturer)] == ["late", "middle", "early"]


def test_portal_toggle_on_missing_assignment(client):
    with pytest.raises(NotFound):
        AssignmentRepository(client).set_portal_open(uuid.uuid4(), True)


def test_attach_files_keeps_good_files_and_reports_bad_ones(client, lecturer, store):
    repo = AssignmentRepository(client)
    created = repo.create(lecturer, hw1())

    result = repo.attach_files(
        created.id,
        [("Brief.PDF", b"%PDF-1.4"), ("photo.png", b"\x89PNG"), ("notes.docx", b"PK")],
        store,
    )

    assert len(result.uploaded) == 2
    assert [f.filename for f in result.failed] == ["photo.png"]
    for key in result.uploaded:
        assert key.startswith(f"{created.id}/")
        assert store.download(ASSIGNMENT_BUCKET, key)
    assert result.assignment.file_paths == result.uploaded
    assert Path(result.uploaded[0]).suffix == ".pdf"


def test_attach_files_appends_to_existing_paths(client, lecturer, store):
    repo = AssignmentRepository(client)
    created = repo.create(lecturer, hw1())

    first = repo.attach_files(created.id, [("a.pdf", b"1")], store)
    second = repo.attach_files(created.id, [("b.doc", b"2")], store)

    assert second.assignment.file_paths == first.uploaded + second.uploaded
    urls = repo.file_urls(second.assignment, store)
    assert all(u.startswith("/static/storage/assignments/") for u in urls.values())


def test_nothing_uploaded_leaves_assignment_untouched(client, lecturer, store):
    repo = AssignmentRepository(client)
    created = repo.create(lecturer, hw1())

    result = repo.attach_files(created.id, [("virus.exe", b"MZ")], store)

    assert result.uploaded == []
    assert result.assignment.file_paths is None
    assert result.assignment.updated_at == created.updated_at
