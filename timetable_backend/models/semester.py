from sqlalchemy import Column, Integer, String, ForeignKey, Table
from sqlalchemy.orm import relationship
from timetable_backend.database import Base

semester_students = Table(
    "semester_students",
    Base.metadata,
    Column("semester_id", Integer, ForeignKey("semesters.id", ondelete="CASCADE"), primary_key=True),
    Column("student_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)


class Semester(Base):
    __tablename__ = "semesters"

    id = Column(Integer, primary_key=True, index=True)
    subject_name = Column(String(255), nullable=False)
    subject_code = Column(String(20), nullable=False)
    semester_number = Column(Integer, nullable=False)

    teacher_id = Column(Integer, ForeignKey("teachers.id"), nullable=False, index=True)

    teacher = relationship("Teacher", back_populates="semesters")
    students = relationship("User", secondary=semester_students)
