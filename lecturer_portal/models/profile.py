from sqlalchemy import Column, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import relationship

from lecturer_portal.database import Base
from lecturer_portal.models.mixins import TimestampMixin


class Profile(TimestampMixin, Base):
    __tablename__ = "profiles"
    __owner_column__ = "id"

    id = Column(Uuid, ForeignKey("auth_users.id", ondelete="CASCADE"), primary_key=True)
    full_name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    department = Column(Text, nullable=True)
    phone = Column(String(30), nullable=True)
    bio = Column(Text, nullable=True)
    avatar_url = Column(Text, nullable=True)

    students = relationship("Student", back_populates="lecturer", passive_deletes=True)
    timetable_slots = relationship("TimetableSlot", back_populates="lecturer", passive_deletes=True)
    assignments = relationship("Assignment", back_populates="lecturer", passive_deletes=True)
    consultations = relationship("Consultation", back_populates="lecturer", passive_deletes=True)
    reports = relationship("Report", back_populates="lecturer", passive_deletes=True)
    study_materials = relationship("StudyMaterial", back_populates="lecturer", passive_deletes=True)
    updates = relationship("Update", back_populates="lecturer", passive_deletes=True)
