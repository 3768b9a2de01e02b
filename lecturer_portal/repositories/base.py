from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import BaseModel, ValidationError

from lecturer_portal.client import PortalClient
from lecturer_portal.errors import NotFound, ValidationFailed

logger = logging.getLogger("app.repositories")


def validate_input(schema: type[BaseModel], data: BaseModel | Mapping[str, Any]) -> BaseModel:
    """Accept a ready schema instance or raw form fields."""
    if isinstance(data, schema):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump(exclude_unset=True)
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise ValidationFailed(_describe(e)) from e


def _describe(e: ValidationError) -> str:
    parts = []
    for err in e.errors():
        loc = ".".join(str(x) for x in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else err.get("msg", ""))
    return "; ".join(parts)


class OwnedRepository:
    """
    list / get / create / delete for a table owned through ``lecturer_id``.

    Subclasses set ``model``, ``out_schema``, ``create_schema`` and ``label``
    and override ``order_by`` for their list ordering.
    """

    model: Any = None
    out_schema: type[BaseModel]
    create_schema: type[BaseModel]
    label = "Row"

    def __init__(self, client: PortalClient):
        self.client = client

    def order_by(self) -> tuple:
        return (self.model.created_at.desc(),)

    def _out(self, row):
        return self.out_schema.model_validate(row)

    def list(self, owner_id, *criteria):
        rows = self.client.query(
            self.model,
            self.model.lecturer_id == owner_id,
            *criteria,
            order_by=self.order_by(),
        )
        return [self._out(r) for r in rows]

    def get(self, row_id):
        rows = self.client.query(self.model, self.model.id == row_id)
        if not rows:
            raise NotFound(f"{self.label} not found")
        return self._out(rows[0])

    def insert_fields(self, data: BaseModel) -> dict:
        return data.model_dump()

    def create(self, owner_id, data):
        fields = self.insert_fields(validate_input(self.create_schema, data))
        fields["lecturer_id"] = owner_id
        row = self.client.insert(self.model, [fields])[0]
        logger.info("%s created id=%s owner=%s", self.label, row.id, owner_id)
        return self._out(row)

    def delete(self, row_id) -> None:
        # already gone (or never visible) is not an error
        deleted = self.client.delete(self.model, self.model.id == row_id)
        if not deleted:
            logger.debug("%s delete id=%s matched nothing", self.label, row_id)


class MutableRepository(OwnedRepository):
    update_schema: type[BaseModel]

    def patch_fields(self, patch: BaseModel) -> dict:
        return patch.model_dump(exclude_unset=True)

    def update(self, row_id, patch):
        fields = self.patch_fields(validate_input(self.update_schema, patch))
        if not fields:
            return self.get(row_id)
        return self._apply(row_id, fields)

    def _apply(self, row_id, fields: dict, *criteria):
        rows = self.client.update(self.model, fields, self.model.id == row_id, *criteria)
        if not rows:
            raise NotFound(f"{self.label} not found")
        return self._out(rows[0])
