from __future__ import annotations

from sqlalchemy import or_

from lecturer_portal.models.registry import Update
from lecturer_portal.repositories.base import MutableRepository
from lecturer_portal.schemas.update import UpdateCreate, UpdateOut, UpdatePatch


class UpdateRepository(MutableRepository):
    model = Update
    out_schema = UpdateOut
    create_schema = UpdateCreate
    update_schema = UpdatePatch
    label = "Update"

    def list_for_class(self, owner_id, class_name: str):
        # NULL target_class reaches every class
        return self.list(
            owner_id,
            or_(Update.target_class == class_name, Update.target_class.is_(None)),
        )
