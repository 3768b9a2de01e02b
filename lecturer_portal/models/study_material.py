from sqlalchemy import CheckConstraint, Column, JSON, String, Text
from sqlalchemy.orm import relationship

from lecturer_portal.database import Base
from lecturer_portal.models.mixins import OwnedMixin, TimestampMixin, UuidPkMixin

MATERIAL_TYPES = ("document", "video", "folder")


class StudyMaterial(UuidPkMixin, OwnedMixin, TimestampMixin, Base):
    __tablename__ = "study_materials"
    __table_args__ = (
        CheckConstraint("type IN ('document', 'video', 'folder')", name="ck_study_materials_type"),
        # only the content column that matches the type may be filled
        CheckConstraint(
            "(type = 'document' AND video_links IS NULL AND folder_items IS NULL)"
            " OR (type = 'video' AND file_url IS NULL AND folder_items IS NULL)"
            " OR (type = 'folder' AND file_url IS NULL AND video_links IS NULL)",
            name="ck_study_materials_content",
        ),
    )

    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    class_name = Column("class", Text, nullable=False)
    subject = Column(Text, nullable=False)
    type = Column(String(16), nullable=False, default="document")

    file_url = Column(Text, nullable=True)
    video_links = Column(JSON(none_as_null=True), nullable=True)
    folder_items = Column(JSON(none_as_null=True), nullable=True)

    lecturer = relationship("Profile", back_populates="study_materials")
