from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator

from lecturer_portal.schemas.common import FormIn, PatchIn, TimestampedRowOut

MaterialType = Literal["document", "video", "folder"]


class DocumentContent(BaseModel):
    type: Literal["document"] = "document"
    file_url: Optional[str] = None  # filled later by an upload


class VideoContent(BaseModel):
    type: Literal["video"] = "video"
    video_links: List[str] = Field(..., min_length=1)


class FolderItem(BaseModel):
    name: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)


class FolderContent(BaseModel):
    type: Literal["folder"] = "folder"
    folder_items: List[FolderItem] = Field(..., min_length=1)


MaterialContent = Annotated[
    Union[DocumentContent, VideoContent, FolderContent],
    Field(discriminator="type"),
]


def content_columns(content) -> dict:
    """Spread a content variant over the storage columns, clearing the others."""
    cols = {"type": content.type, "file_url": None, "video_links": None, "folder_items": None}
    if isinstance(content, DocumentContent):
        cols["file_url"] = content.file_url
    elif isinstance(content, VideoContent):
        cols["video_links"] = list(content.video_links)
    else:
        cols["folder_items"] = [item.model_dump() for item in content.folder_items]
    return cols


class StudyMaterialCreate(FormIn):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    class_name: str = Field(..., alias="class", min_length=1)
    subject: str = Field(..., min_length=1)
    content: MaterialContent


class StudyMaterialUpdate(PatchIn):
    not_null = ("title", "class_name", "subject")

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    class_name: Optional[str] = Field(None, alias="class", min_length=1)
    subject: Optional[str] = Field(None, min_length=1)
    content: Optional[MaterialContent] = None


class StudyMaterialOut(TimestampedRowOut):
    title: str
    description: Optional[str] = None
    class_name: str = Field(..., alias="class")
    subject: str
    content: MaterialContent

    @model_validator(mode="before")
    @classmethod
    def _collect_content(cls, data: Any):
        if isinstance(data, dict):
            return data
        # ORM row: fold type/file_url/video_links/folder_items into one variant
        content: dict = {"type": data.type}
        if data.type == "document":
            content["file_url"] = data.file_url
        elif data.type == "video":
            content["video_links"] = data.video_links or []
        else:
            content["folder_items"] = data.folder_items or []
        return {
            "id": data.id,
            "lecturer_id": data.lecturer_id,
            "created_at": data.created_at,
            "updated_at": data.updated_at,
            "title": data.title,
            "description": data.description,
            "class_name": data.class_name,
            "subject": data.subject,
            "content": content,
        }

    @property
    def type(self) -> MaterialType:
        return self.content.type
