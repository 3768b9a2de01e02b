import pytest

from lecturer_portal.errors import ConstraintViolation, NotFound, ValidationFailed
from lecturer_portal.repositories.students import StudentRepository
from lecturer_portal.schemas.student import StudentCreate

from conftest import student_fields


def test_create_then_list_returns_row_with_server_defaults(client, lecturer):
    repo = StudentRepository(client)
    created = repo.create(lecturer, student_fields(phone="555-0100"))

    rows = repo.list(lecturer)
    assert [r.id for r in rows] == [created.id]
    row = rows[0]
    assert row.lecturer_id == lecturer
    assert row.student_name == "Jane Doe"
    assert row.class_name == "CS101"
    assert row.phone == "555-0100"
    assert row.id is not None
    assert row.created_at is not None


def test_list_is_ordered_by_name_and_never_none(client, lecturer):
    repo = StudentRepository(client)
    assert repo.list(lecturer) == []

    repo.create(lecturer, student_fields(student_name="Zoe", student_id="S-3"))
    repo.create(lecturer, student_fields(student_name="Adam", student_id="S-1"))
    repo.create(lecturer, student_fields(student_name="Mia", student_id="S-2"))

    assert [r.student_name for r in repo.list(lecturer)] == ["Adam", "Mia", "Zoe"]


def test_create_accepts_typed_input(client, lecturer):
    data = StudentCreate(**student_fields())
    assert StudentRepository(client).create(lecturer, data).student_id == "S-001"


def test_create_rejects_missing_fields(client, lecturer):
    with pytest.raises(ValidationFailed) as exc:
        StudentRepository(client).create(lecturer, {"student_name": "No Id"})
    assert "student_id" in exc.value.message


def test_student_id_is_unique_across_lecturers(client, other_client, lecturer, other_lecturer):
    StudentRepository(client).create(lecturer, student_fields())

    with pytest.raises(ConstraintViolation) as exc:
        StudentRepository(other_client).create(other_lecturer, student_fields(student_name="Other"))
    assert "UNIQUE" in exc.value.message.upper()

    # the failed insert left nothing behind
    assert StudentRepository(other_client).list(other_lecturer) == []


def test_update_changes_only_patched_fields(client, lecturer):
    repo = StudentRepository(client)
    created = repo.create(lecturer, student_fields(phone="111"))

    updated = repo.update(created.id, {"class": "CS202"})

    assert updated.class_name == "CS202"
    assert updated.student_name == created.student_name
    assert updated.student_email == created.student_email
    assert updated.phone == "111"
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at


def test_update_with_same_values_still_moves_updated_at(client, lecturer):
    repo = StudentRepository(client)
    created = repo.create(lecturer, student_fields())

    updated = repo.update(created.id, {"student_name": "Jane Doe"})

    assert updated.updated_at > created.updated_at


def test_update_missing_row_raises_not_found(client, lecturer):
    repo = StudentRepository(client)
    created = repo.create(lecturer, student_fields())
    repo.delete(created.id)

    with pytest.raises(NotFound):
        repo.update(created.id, {"student_name": "Ghost"})


def test_delete_is_idempotent(client, lecturer):
    repo = StudentRepository(client)
    created = repo.create(lecturer, student_fields())

    repo.delete(created.id)
    repo.delete(created.id)

    assert repo.list(lecturer) == []


def test_import_rows_skips_bad_and_duplicate_rows(client, lecturer):
    repo = StudentRepository(client)
    repo.create(lecturer, student_fields(student_id="S-1"))

    result = repo.import_rows(
        lecturer,
        [
            student_fields(student_name="New", student_id="S-2"),
            student_fields(student_name="Dup", student_id="S-1"),
            {"student_name": "Incomplete"},
        ],
    )

    assert result.inserted == 1
    assert result.skipped == 2
    assert result.errors[0].startswith("row 2:")
    assert result.errors[1].startswith("row 3:")
    assert sorted(s.student_id for s in repo.list(lecturer)) == ["S-1", "S-2"]


@pytest.mark.parametrize("field", ["student_name", "student_email", "student_id", "class"])
def test_required_columns_cannot_be_patched_to_null(client, lecturer, field):
    repo = StudentRepository(client)
    created = repo.create(lecturer, student_fields())

    with pytest.raises(ValidationFailed) as exc:
        repo.update(created.id, {field: None})

    assert "cannot be null" in exc.value.message
    assert repo.get(created.id).student_name == "Jane Doe"


def test_optional_column_can_be_patched_to_null(client, lecturer):
    repo = StudentRepository(client)
    created = repo.create(lecturer, student_fields(phone="555-0100"))

    assert repo.update(created.id, {"phone": None}).phone is None
