import os

# 要在 import app 之前設定
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient

from timetable_backend.database import Base, SessionLocal, engine
from timetable_backend.main import app
from timetable_backend.models.user import ROLE_STUDENT
from tests.factories import make_semester, make_teacher, make_user


@pytest.fixture
def db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def teacher(db):
    return make_teacher(db, "t.wang", "Wang")


@pytest.fixture
def other_teacher(db):
    return make_teacher(db, "t.lin", "Lin")


@pytest.fixture
def student(db):
    return make_user(db, "s.chen", ROLE_STUDENT, "Chen")


@pytest.fixture
def semester(db, teacher):
    return make_semester(db, teacher)
