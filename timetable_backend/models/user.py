from sqlalchemy import Column, Integer, String, TIMESTAMP
from datetime import datetime
from timetable_backend.database import Base

ROLE_TEACHER = "teacher"
ROLE_STUDENT = "student"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, nullable=False)
    password_hash = Column(String, nullable=False)
    name = Column(String(100), nullable=False, default="")
    # teacher / student
    role = Column(String(20), nullable=False)
    created_at = Column(TIMESTAMP, default=datetime.utcnow)
