from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from timetable_backend.database import Base

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


class TimetableEntry(Base):
    __tablename__ = "timetable_entries"

    id = Column(Integer, primary_key=True)
    teacher_id = Column(Integer, ForeignKey("teachers.id", ondelete="CASCADE"), nullable=False, index=True)

    day = Column(String(3), nullable=False)
    # "HH:MM"
    start_time = Column(String(10), nullable=False)
    end_time = Column(String(10), nullable=False)

    semester_id = Column(Integer, ForeignKey("semesters.id", ondelete="CASCADE"), nullable=False)

    teacher = relationship("Teacher", back_populates="timetable")
    semester = relationship("Semester")
