from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from lecturer_portal.client import PortalClient
from lecturer_portal.database import get_db
from lecturer_portal.models.registry import AuthUser
from lecturer_portal.schemas.user import SignupIn, TokenOut, UserOut
from lecturer_portal.utils.auth import create_access_token, get_client
from lecturer_portal.utils.hashing import hash_password, verify_password

import logging
logger = logging.getLogger("app.auth")


router = APIRouter(prefix="/auth", tags=["Auth"])


# sign up (the profile row is created by the signup hook)
@router.post("/signup", response_model=UserOut, status_code=201)
def signup(body: SignupIn, db: Session = Depends(get_db)):
    email = body.email.strip().lower()
    exists = db.query(AuthUser).filter(AuthUser.email == email).first()
    if exists:
        raise HTTPException(status_code=400, detail="User already registered")

    meta = {"full_name": body.full_name.strip()} if body.full_name and body.full_name.strip() else {}
    user = AuthUser(
        email=email,
        password_hash=hash_password(body.password),
        user_metadata=meta,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("signup %s", user.id)
    return user


# log in, username field carries the email
@router.post("/login", response_model=TokenOut)
def login(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    user = db.query(AuthUser).filter(AuthUser.email == form_data.username.strip().lower()).first()
    if not user or not verify_password(form_data.password, user.password_hash):
        raise HTTPException(status_code=400, detail="Invalid login credentials")

    user.last_sign_in_at = datetime.now(timezone.utc)
    db.commit()
    token = create_access_token({"sub": str(user.id)})
    return TokenOut(access_token=token)


@router.get("/me", response_model=UserOut)
def get_me(client: PortalClient = Depends(get_client)):
    user = client.current_user()
    if not user:
        raise HTTPException(status_code=401, detail="User not found")
    return user
