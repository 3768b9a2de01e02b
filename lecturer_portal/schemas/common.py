import uuid
from datetime import datetime
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, model_validator


class RowOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: uuid.UUID
    lecturer_id: uuid.UUID
    created_at: Optional[datetime] = None


class TimestampedRowOut(RowOut):
    updated_at: Optional[datetime] = None


class FormIn(BaseModel):
    # "class" is a keyword, fields use class_name with the column name as alias
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)


class PatchIn(FormIn):
    """
    Partial update: every field optional, only the ones sent are written.
    Fields listed in ``not_null`` back NOT NULL columns and refuse an explicit null.
    """

    not_null: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_nulls(self):
        nulls = [f for f in self.not_null if f in self.model_fields_set and getattr(self, f) is None]
        if nulls:
            raise ValueError(f"{', '.join(nulls)} cannot be null")
        return self


class DeletedOut(BaseModel):
    detail: str = "deleted"
