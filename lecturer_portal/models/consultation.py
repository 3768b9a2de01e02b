from sqlalchemy import CheckConstraint, Column, DateTime, String, Text
from sqlalchemy.orm import relationship

from lecturer_portal.database import Base
from lecturer_portal.models.mixins import OwnedMixin, TimestampMixin, UuidPkMixin

# pending -> approved | declined, both terminal
CONSULTATION_STATUSES = ("pending", "approved", "declined")


class Consultation(UuidPkMixin, OwnedMixin, TimestampMixin, Base):
    __tablename__ = "consultations"
    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'approved', 'declined')",
            name="ck_consultations_status",
        ),
    )

    student_name = Column(Text, nullable=False)
    student_email = Column(Text, nullable=False)
    consultation_date = Column(DateTime(timezone=True), nullable=False)
    reason = Column(Text, nullable=False)
    status = Column(String(16), nullable=False, default="pending", index=True)

    lecturer = relationship("Profile", back_populates="consultations")
