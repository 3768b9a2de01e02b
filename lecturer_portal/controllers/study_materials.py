from __future__ import annotations

from lecturer_portal.controllers.base import ListScreen
from lecturer_portal.errors import PortalError
from lecturer_portal.repositories.study_materials import StudyMaterialRepository
from lecturer_portal.storage import BlobStore, get_blob_store


class StudyMaterialsScreen(ListScreen):
    repository_class = StudyMaterialRepository
    noun = "material"
    plural = "materials"
    created_title = "Study material added successfully"
    updated_title = "Study material updated successfully"
    deleted_title = "Study material deleted successfully"

    def __init__(self, client, store: BlobStore | None = None):
        super().__init__(client)
        self.store = store or get_blob_store()
        self.pending_file: tuple[str, bytes] | None = None

    def choose_file(self, filename: str, content: bytes):
        self.pending_file = (filename, content)

    def close_dialog(self):
        super().close_dialog()
        self.pending_file = None

    async def after_save(self, row):
        if self.pending_file is None or row.type != "document":
            return
        (filename, content), self.pending_file = self.pending_file, None
        try:
            await self.call(self.repository.attach_file, row.id, filename, content, self.store)
        except PortalError as e:
            self.fail("Error uploading file", e)
