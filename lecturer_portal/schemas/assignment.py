from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from lecturer_portal.schemas.common import FormIn, PatchIn, TimestampedRowOut


class AssignmentCreate(FormIn):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    class_name: str = Field(..., alias="class", min_length=1)
    submission_date: datetime
    portal_open: bool = False


class AssignmentUpdate(PatchIn):
    not_null = ("title", "class_name", "submission_date", "portal_open")

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    class_name: Optional[str] = Field(None, alias="class", min_length=1)
    submission_date: Optional[datetime] = None
    portal_open: Optional[bool] = None


class AssignmentOut(TimestampedRowOut):
    title: str
    description: Optional[str] = None
    class_name: str = Field(..., alias="class")
    submission_date: datetime
    portal_open: bool = False
    file_paths: Optional[List[str]] = None


class PortalToggleIn(BaseModel):
    portal_open: bool


class AttachmentFailure(BaseModel):
    filename: str
    reason: str


class AttachmentResultOut(BaseModel):
    assignment: AssignmentOut
    uploaded: List[str] = []
    failed: List[AttachmentFailure] = []
