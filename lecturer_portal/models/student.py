from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship

from lecturer_portal.database import Base
from lecturer_portal.models.mixins import OwnedMixin, TimestampMixin, UuidPkMixin


class Student(UuidPkMixin, OwnedMixin, TimestampMixin, Base):
    __tablename__ = "students"

    student_name = Column(Text, nullable=False)
    student_email = Column(Text, nullable=False)
    # unique across every lecturer, not per owner
    student_id = Column(String(64), unique=True, nullable=False, index=True)
    class_name = Column("class", Text, nullable=False)
    phone = Column(String(30), nullable=True)

    lecturer = relationship("Profile", back_populates="students")
