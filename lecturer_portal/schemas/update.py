from typing import Optional

from pydantic import Field

from lecturer_portal.schemas.common import FormIn, PatchIn, TimestampedRowOut


class UpdateCreate(FormIn):
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    target_class: Optional[str] = None  # None = all classes


class UpdatePatch(PatchIn):
    not_null = ("title", "content")

    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=1)
    target_class: Optional[str] = None


class UpdateOut(TimestampedRowOut):
    title: str
    content: str
    target_class: Optional[str] = None
