from sqlalchemy import Column, Text
from sqlalchemy.orm import relationship

from lecturer_portal.database import Base
from lecturer_portal.models.mixins import OwnedMixin, TimestampMixin, UuidPkMixin


class Update(UuidPkMixin, OwnedMixin, TimestampMixin, Base):
    """Announcement posted by a lecturer."""

    __tablename__ = "updates"

    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    # NULL means every class
    target_class = Column(Text, nullable=True, index=True)

    lecturer = relationship("Profile", back_populates="updates")
