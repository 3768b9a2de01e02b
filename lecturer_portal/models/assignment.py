from sqlalchemy import Boolean, Column, DateTime, JSON, Text
from sqlalchemy.orm import relationship

from lecturer_portal.database import Base
from lecturer_portal.models.mixins import OwnedMixin, TimestampMixin, UuidPkMixin


class Assignment(UuidPkMixin, OwnedMixin, TimestampMixin, Base):
    __tablename__ = "assignments"

    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    class_name = Column("class", Text, nullable=False)
    submission_date = Column(DateTime(timezone=True), nullable=False)
    portal_open = Column(Boolean, nullable=False, default=False)
    # blob store keys: "{assignment_id}/{token}.{ext}"
    file_paths = Column(JSON(none_as_null=True), nullable=True)

    lecturer = relationship("Profile", back_populates="assignments")
