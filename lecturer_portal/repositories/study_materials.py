from __future__ import annotations

import logging

from lecturer_portal.errors import ValidationFailed
from lecturer_portal.models.registry import StudyMaterial
from lecturer_portal.repositories.base import MutableRepository, validate_input
from lecturer_portal.schemas.study_material import (
    DocumentContent,
    StudyMaterialCreate,
    StudyMaterialOut,
    StudyMaterialUpdate,
    content_columns,
)
from lecturer_portal.storage import DOCUMENT_EXT, MATERIAL_BUCKET, BlobStore, check_upload, make_object_key

logger = logging.getLogger("app.repositories.study_materials")

MATERIAL_EXT = DOCUMENT_EXT | {".ppt", ".pptx", ".xls", ".xlsx", ".txt", ".zip"}


class StudyMaterialRepository(MutableRepository):
    model = StudyMaterial
    out_schema = StudyMaterialOut
    create_schema = StudyMaterialCreate
    update_schema = StudyMaterialUpdate
    label = "Study material"

    def insert_fields(self, data) -> dict:
        fields = data.model_dump(exclude={"content"})
        fields.update(content_columns(data.content))
        return fields

    def patch_fields(self, patch) -> dict:
        fields = patch.model_dump(exclude_unset=True, exclude={"content"})
        if patch.content is not None:
            fields.update(content_columns(patch.content))
        return fields

    def update(self, row_id, patch):
        data = validate_input(StudyMaterialUpdate, patch)
        fields = self.patch_fields(data)
        # a document edit without a new file keeps the uploaded one
        content = data.content
        if isinstance(content, DocumentContent) and "file_url" not in content.model_fields_set:
            if self.get(row_id).type == "document":
                del fields["file_url"]
        if not fields:
            return self.get(row_id)
        return self._apply(row_id, fields)

    def attach_file(self, row_id, filename: str, content: bytes, store: BlobStore):
        material = self.get(row_id)
        if material.type != "document":
            raise ValidationFailed("Only document materials take an uploaded file")

        check_upload(filename, content, MATERIAL_EXT)
        key = make_object_key(material.id, filename)
        store.upload(MATERIAL_BUCKET, key, content)
        # the blob stays even if this update fails
        return self._apply(row_id, {"file_url": store.public_url(MATERIAL_BUCKET, key)})
