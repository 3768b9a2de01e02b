from sqlalchemy import CheckConstraint, Column, String, Text, Time
from sqlalchemy.orm import relationship

from lecturer_portal.database import Base
from lecturer_portal.models.mixins import OwnedMixin, TimestampMixin, UuidPkMixin

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")


class TimetableSlot(UuidPkMixin, OwnedMixin, TimestampMixin, Base):
    __tablename__ = "timetable"
    __table_args__ = (
        CheckConstraint(
            "day_of_week IN ('Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday')",
            name="ck_timetable_day_of_week",
        ),
    )

    day_of_week = Column(String(16), nullable=False)
    # start_time < end_time is expected but not enforced
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    subject = Column(Text, nullable=False)
    class_name = Column("class", Text, nullable=False)
    room = Column(String(50), nullable=True)

    lecturer = relationship("Profile", back_populates="timetable_slots")
