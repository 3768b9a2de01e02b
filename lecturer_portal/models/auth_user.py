from sqlalchemy import Column, DateTime, JSON, String

from lecturer_portal.database import Base
from lecturer_portal.models.mixins import CreatedAtMixin, UuidPkMixin


class AuthUser(UuidPkMixin, CreatedAtMixin, Base):
    __tablename__ = "auth_users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    # signup metadata, e.g. {"full_name": "..."}
    user_metadata = Column(JSON, nullable=False, default=dict)
    last_sign_in_at = Column(DateTime(timezone=True), nullable=True)
