from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError
from fastapi import HTTPException, Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from timetable_backend.config import settings
from timetable_backend.database import get_db
from timetable_backend.models.user import User, ROLE_TEACHER, ROLE_STUDENT

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)

def create_access_token(data: dict, expires_minutes: Optional[int] = None):
    if expires_minutes is None:
        expires_minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    to_encode.update({"exp": expire})
    token = jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
    return token

def get_current_user(token: Optional[str] = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> User:
    """Resolve the caller from the bearer token (the `protect` gate)."""
    if not token:
        raise HTTPException(status_code=401, detail="Not authorized, no token")
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        raise HTTPException(status_code=401, detail="Not authorized, token failed")

    username = payload.get("sub")
    if username is None:
        raise HTTPException(status_code=401, detail="Not authorized, token failed")

    user = db.query(User).filter(User.username == username).first()
    if not user:
        raise HTTPException(status_code=401, detail="User not found")
    return user

def require_teacher(user: User = Depends(get_current_user)) -> User:
    if user.role != ROLE_TEACHER:
        raise HTTPException(status_code=403, detail="Not authorized as a teacher")
    return user

def require_student(user: User = Depends(get_current_user)) -> User:
    if user.role != ROLE_STUDENT:
        raise HTTPException(status_code=403, detail="Not authorized as a student")
    return user
