from timetable_backend.models.user import User, ROLE_TEACHER
from timetable_backend.models.teacher import Teacher
from timetable_backend.models.semester import Semester
from timetable_backend.utils.auth import create_access_token


def auth_headers(user: User) -> dict:
    token = create_access_token({"sub": user.username})
    return {"Authorization": f"Bearer {token}"}


def make_user(db, username: str, role: str, name: str = "", password_hash: str = "x") -> User:
    user = User(username=username, password_hash=password_hash, role=role, name=name or username)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_teacher(db, username: str, name: str = "") -> User:
    user = make_user(db, username, ROLE_TEACHER, name)
    db.add(Teacher(id=user.id, name=user.name))
    db.commit()
    return user


def make_semester(db, teacher: User, code: str = "CS101", name: str = "Intro", number: int = 1, students=()) -> Semester:
    sem = Semester(subject_name=name, subject_code=code, semester_number=number, teacher_id=teacher.id)
    sem.students.extend(students)
    db.add(sem)
    db.commit()
    db.refresh(sem)
    return sem
