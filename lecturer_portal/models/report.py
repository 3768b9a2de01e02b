from sqlalchemy import CheckConstraint, Column, String, Text
from sqlalchemy.orm import relationship

from lecturer_portal.database import Base
from lecturer_portal.models.mixins import CreatedAtMixin, OwnedMixin, UuidPkMixin


class Report(UuidPkMixin, OwnedMixin, CreatedAtMixin, Base):
    __tablename__ = "reports"
    __table_args__ = (
        CheckConstraint("report_type IN ('sent', 'received')", name="ck_reports_report_type"),
    )

    report_type = Column(String(16), nullable=False, index=True)
    student_name = Column(Text, nullable=False)
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)

    lecturer = relationship("Profile", back_populates="reports")
