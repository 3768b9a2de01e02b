from __future__ import annotations

from pathlib import PurePosixPath

from lecturer_portal.controllers.base import ListScreen
from lecturer_portal.errors import PortalError
from lecturer_portal.repositories.assignments import AssignmentRepository
from lecturer_portal.storage import DOCUMENT_EXT, BlobStore, get_blob_store


class AssignmentsScreen(ListScreen):
    repository_class = AssignmentRepository
    noun = "assignment"
    plural = "assignments"
    add_verb = "creating"
    created_title = "Assignment created successfully"
    updated_title = "Assignment updated successfully"
    deleted_title = "Assignment deleted successfully"

    def __init__(self, client, store: BlobStore | None = None):
        super().__init__(client)
        self.store = store or get_blob_store()
        self.uploading_files: list[tuple[str, bytes]] = []

    def add_files(self, files):
        """Queue (filename, bytes) pairs; only PDF and Word documents are kept."""
        files = list(files)
        accepted = [f for f in files if PurePosixPath(f[0]).suffix.lower() in DOCUMENT_EXT]
        if len(accepted) != len(files):
            self.notify(
                "Invalid file type",
                "Only PDF and Word documents are allowed",
                variant="destructive",
            )
        self.uploading_files.extend(accepted)

    def remove_file(self, index: int):
        del self.uploading_files[index]

    def close_dialog(self):
        super().close_dialog()
        self.uploading_files = []

    async def after_save(self, row):
        if not self.uploading_files:
            return
        files, self.uploading_files = self.uploading_files, []
        try:
            result = await self.call(self.repository.attach_files, row.id, files, self.store)
        except PortalError as e:
            # the assignment stays, only the attachments are missing
            self.fail("Error updating assignment files", e)
            return
        for failure in result.failed:
            self.notify("Error uploading file", failure.reason, variant="destructive")

    async def toggle_portal(self, row):
        action = ("portal", row.id)
        if self.is_pending(action):
            return None
        with self.busy(action):
            opening = not row.portal_open
            try:
                updated = await self.call(self.repository.set_portal_open, row.id, opening)
            except PortalError as e:
                self.fail("Error updating portal status", e)
                return None
            self.notify(f"Portal {'opened' if opening else 'closed'}")
            await self.refresh()
            return updated

    def file_urls(self, row) -> dict:
        return self.repository.file_urls(row, self.store)
