from fastapi import APIRouter, Depends, HTTPException
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from timetable_backend.database import get_db
from timetable_backend.utils.hashing import verify_password
from timetable_backend.utils.auth import create_access_token, get_current_user
from timetable_backend.schemas.user import UserOut, TokenOut
from timetable_backend.models.user import User

import logging
logger = logging.getLogger("timetable_backend.auth")


router = APIRouter(prefix="/api/auth", tags=["Auth"])


# 登入
@router.post("/login", response_model=TokenOut)
def login(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    user = db.query(User).filter(User.username == form_data.username).first()
    if not user or not verify_password(form_data.password, user.password_hash):
        logger.info("failed login for %s", form_data.username)
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_access_token({"sub": user.username, "role": user.role})
    return TokenOut(access_token=token)


# 取得目前登入者
@router.get("/me", response_model=UserOut)
def get_me(current_user: User = Depends(get_current_user)):
    return current_user
