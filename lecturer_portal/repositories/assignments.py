from __future__ import annotations

import logging
from pathlib import PurePosixPath

from lecturer_portal.errors import ValidationFailed
from lecturer_portal.models.registry import Assignment
from lecturer_portal.repositories.base import MutableRepository
from lecturer_portal.schemas.assignment import (
    AssignmentCreate,
    AssignmentOut,
    AssignmentUpdate,
    AttachmentFailure,
    AttachmentResultOut,
)
from lecturer_portal.storage import ASSIGNMENT_BUCKET, DOCUMENT_EXT, BlobStore, check_upload, make_object_key

logger = logging.getLogger("app.repositories.assignments")


class AssignmentRepository(MutableRepository):
    model = Assignment
    out_schema = AssignmentOut
    create_schema = AssignmentCreate
    update_schema = AssignmentUpdate
    label = "Assignment"

    def order_by(self) -> tuple:
        return (Assignment.submission_date.desc(),)

    def set_portal_open(self, row_id, portal_open: bool):
        return self._apply(row_id, {"portal_open": bool(portal_open)})

    def attach_files(self, row_id, files, store: BlobStore) -> AttachmentResultOut:
        """
        files: iterable of (filename, bytes)

        Files are uploaded one at a time under "{assignment_id}/{token}.{ext}".
        A rejected or failed file is reported and skipped; the assignment itself
        is never rolled back.
        """
        assignment = self.get(row_id)
        uploaded, failed = [], []

        for filename, content in files:
            try:
                check_upload(filename, content, DOCUMENT_EXT)
                key = make_object_key(assignment.id, filename)
                store.upload(ASSIGNMENT_BUCKET, key, content)
            except ValidationFailed as e:
                failed.append(AttachmentFailure(filename=filename, reason=e.message))
                continue
            except OSError as e:
                logger.warning("upload failed for %s on assignment %s: %s", filename, row_id, e)
                failed.append(AttachmentFailure(filename=filename, reason=f"Failed to upload {filename}"))
                continue
            uploaded.append(key)

        if uploaded:
            paths = list(assignment.file_paths or []) + uploaded
            assignment = self._apply(row_id, {"file_paths": paths})

        return AttachmentResultOut(assignment=assignment, uploaded=uploaded, failed=failed)

    def file_urls(self, assignment: AssignmentOut, store: BlobStore) -> dict:
        return {
            PurePosixPath(p).name: store.public_url(ASSIGNMENT_BUCKET, p)
            for p in (assignment.file_paths or [])
        }
