import uuid
from datetime import datetime, timedelta, timezone

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from lecturer_portal.client import PortalClient
from lecturer_portal.config import settings
from lecturer_portal.database import get_db
from lecturer_portal.errors import NotAuthenticated

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")


def create_access_token(data: dict, expires_minutes: int | None = None):
    to_encode = data.copy()
    minutes = expires_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES
    expire = datetime.now(timezone.utc) + timedelta(minutes=minutes)
    to_encode.update({"exp": expire})
    token = jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
    return token


def decode_identity(token: str) -> uuid.UUID:
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        raise NotAuthenticated("Invalid authentication token") from e
    sub = payload.get("sub")
    if sub is None:
        raise NotAuthenticated("Invalid token")
    try:
        return uuid.UUID(sub)
    except ValueError as e:
        raise NotAuthenticated("Invalid token") from e


def get_client(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> PortalClient:
    return PortalClient(db, decode_identity(token))


def get_current_identity(client: PortalClient = Depends(get_client)) -> uuid.UUID:
    user = client.current_user()
    if not user:
        raise NotAuthenticated("User not found")
    return user.id
