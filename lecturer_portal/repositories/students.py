from __future__ import annotations

import logging

from lecturer_portal.errors import ConstraintViolation, ValidationFailed
from lecturer_portal.models.registry import Student
from lecturer_portal.repositories.base import MutableRepository, validate_input
from lecturer_portal.schemas.student import StudentCreate, StudentImportOut, StudentOut, StudentUpdate

logger = logging.getLogger("app.repositories.students")


class StudentRepository(MutableRepository):
    model = Student
    out_schema = StudentOut
    create_schema = StudentCreate
    update_schema = StudentUpdate
    label = "Student"

    def order_by(self) -> tuple:
        return (Student.student_name.asc(),)

    def import_rows(self, owner_id, rows) -> StudentImportOut:
        """
        Insert roster rows one by one; a bad or duplicate row is skipped and
        reported, the rest still go in.
        """
        inserted, skipped, errors = 0, 0, []
        for i, raw in enumerate(rows, start=1):
            try:
                data = validate_input(StudentCreate, raw)
                self.create(owner_id, data)
                inserted += 1
            except (ValidationFailed, ConstraintViolation) as e:
                skipped += 1
                errors.append(f"row {i}: {e.message}")
        logger.info("roster import owner=%s inserted=%d skipped=%d", owner_id, inserted, skipped)
        return StudentImportOut(inserted=inserted, skipped=skipped, errors=errors)
