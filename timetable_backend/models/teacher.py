from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from timetable_backend.database import Base

class Teacher(Base):
    __tablename__ = "teachers"

    # 跟 users.id 同一個值
    id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    name = Column(String(100), nullable=False)

    timetable = relationship(
        "TimetableEntry",
        back_populates="teacher",
        cascade="all, delete-orphan",
        order_by="TimetableEntry.id",
    )
    semesters = relationship("Semester", back_populates="teacher")
