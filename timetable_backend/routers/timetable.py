from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session, joinedload, selectinload

from timetable_backend.database import get_db
from timetable_backend.utils.auth import require_teacher, require_student

from timetable_backend.models.user import User
from timetable_backend.models.teacher import Teacher
from timetable_backend.models.semester import Semester
from timetable_backend.models.timetable_entry import TimetableEntry, WEEKDAYS

from timetable_backend.schemas.timetable import (
    TimetableEntryCreate,
    TimetableEntryOut,
    TimetableEntryDetailOut,
    SemesterBriefOut,
    StudentTimetableRowOut,
    TeacherTimetableOut,
    TimetableEntryListOut,
    StudentTimetableOut,
)

import logging
logger = logging.getLogger("timetable_backend.timetable")


router = APIRouter(prefix="/api/timetable", tags=["Timetable"])

# 學生課表的時間還沒有真正的資料，先用 now ~ now+1h 代替
PLACEHOLDER_DURATION = timedelta(hours=1)


def _iso_utc(dt: datetime) -> str:
    # 2026-10-18T20:08:03.273Z
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _get_teacher_or_404(db: Session, teacher_id: int, with_semesters: bool = False) -> Teacher:
    q = db.query(Teacher)
    if with_semesters:
        q = q.options(selectinload(Teacher.timetable).joinedload(TimetableEntry.semester))
    teacher = q.filter(Teacher.id == teacher_id).first()
    if not teacher:
        # 登入了卻沒有 teacher 資料 = 資料不一致
        logger.warning("teacher record missing for user %s", teacher_id)
        raise HTTPException(status_code=404, detail="Teacher not found")
    return teacher


def _entry_out(e: TimetableEntry) -> TimetableEntryOut:
    return TimetableEntryOut(
        id=e.id,
        day=e.day,
        start_time=e.start_time,
        end_time=e.end_time,
        semester=e.semester_id,
    )


def _entry_detail_out(e: TimetableEntry) -> TimetableEntryDetailOut:
    sem = e.semester
    return TimetableEntryDetailOut(
        id=e.id,
        day=e.day,
        start_time=e.start_time,
        end_time=e.end_time,
        semester=SemesterBriefOut(
            id=sem.id,
            subject_name=sem.subject_name,
            subject_code=sem.subject_code,
            semester_number=sem.semester_number,
        ) if sem else None,
    )


# 老師：查看自己的課表
@router.get("/teacher", response_model=TeacherTimetableOut)
def get_teacher_timetable(db: Session = Depends(get_db), user: User = Depends(require_teacher)):
    teacher = _get_teacher_or_404(db, user.id, with_semesters=True)
    return TeacherTimetableOut(
        message="Timetable fetched successfully",
        timetable=[_entry_detail_out(e) for e in teacher.timetable],
    )


# 老師：新增一筆課表
@router.post("", status_code=201, response_model=TimetableEntryListOut)
@router.post("/", status_code=201, response_model=TimetableEntryListOut, include_in_schema=False)
def add_timetable_entry(
    body: Optional[TimetableEntryCreate] = None,
    db: Session = Depends(get_db),
    user: User = Depends(require_teacher),
):
    body = body or TimetableEntryCreate()
    if not body.semester_id or not body.day or not body.start_time or not body.end_time:
        raise HTTPException(status_code=400, detail="All fields are required")

    teacher = _get_teacher_or_404(db, user.id)

    semester = db.query(Semester).filter(Semester.id == body.semester_id).first()
    if not semester:
        raise HTTPException(status_code=404, detail="Semester not found")

    # 只能替自己負責的學期排課
    if semester.teacher_id != teacher.id:
        logger.info("teacher %s refused for semester %s (owner %s)", teacher.id, semester.id, semester.teacher_id)
        raise HTTPException(status_code=403, detail="You are not authorized to add a class for this semester.")

    if body.day not in WEEKDAYS:
        raise HTTPException(status_code=400, detail="Invalid day")

    # 單筆 INSERT，不會蓋掉同時間其他請求新增的資料
    entry = TimetableEntry(
        teacher_id=teacher.id,
        day=body.day,
        start_time=body.start_time,
        end_time=body.end_time,
        semester_id=semester.id,
    )
    db.add(entry)
    db.commit()
    logger.info("teacher %s added entry %s (semester %s, %s %s-%s)",
                teacher.id, entry.id, semester.id, entry.day, entry.start_time, entry.end_time)

    return TimetableEntryListOut(
        message="Timetable entry added successfully",
        timetable=[_entry_out(e) for e in teacher.timetable],
    )


# 老師：刪除一筆課表
@router.delete("/{entry_id}", response_model=TimetableEntryListOut)
def delete_timetable_entry(entry_id: int, db: Session = Depends(get_db), user: User = Depends(require_teacher)):
    teacher = _get_teacher_or_404(db, user.id)

    # 只在自己的課表裡找
    entry = db.query(TimetableEntry).filter(
        TimetableEntry.id == entry_id,
        TimetableEntry.teacher_id == teacher.id,
    ).first()
    if not entry:
        raise HTTPException(status_code=404, detail="Timetable entry not found")

    db.delete(entry)
    db.commit()
    logger.info("teacher %s deleted entry %s", teacher.id, entry_id)

    return TimetableEntryListOut(
        message="Timetable entry deleted successfully",
        timetable=[_entry_out(e) for e in teacher.timetable],
    )


# 學生：查看自己的課表
@router.get("/student", response_model=StudentTimetableOut)
def get_student_timetable(db: Session = Depends(get_db), user: User = Depends(require_student)):
    semesters = (
        db.query(Semester)
        .options(joinedload(Semester.teacher))
        .filter(Semester.students.any(User.id == user.id))
        .order_by(Semester.id)
        .all()
    )

    now = datetime.now(timezone.utc)
    timetable = [
        StudentTimetableRowOut(
            id=sem.id,
            subject=sem.subject_name,
            subject_code=sem.subject_code,
            teacher=sem.teacher.name if sem.teacher else None,
            start_time=_iso_utc(now),
            end_time=_iso_utc(now + PLACEHOLDER_DURATION),
        )
        for sem in semesters
    ]

    return StudentTimetableOut(
        message="Student timetable fetched successfully",
        timetable=timetable,
    )
