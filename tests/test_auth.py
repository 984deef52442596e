from tests.factories import auth_headers, make_user
from timetable_backend.models.user import ROLE_TEACHER
from timetable_backend.utils.auth import create_access_token
from timetable_backend.utils.hashing import hash_password, verify_password


def test_hash_and_verify():
    hashed = hash_password("s3cret")
    assert hashed != "s3cret"
    assert verify_password("s3cret", hashed)
    assert not verify_password("wrong", hashed)


def test_login_and_me(client, db):
    make_user(db, "t.wang", ROLE_TEACHER, "Wang", password_hash=hash_password("s3cret"))

    res = client.post("/api/auth/login", data={"username": "t.wang", "password": "s3cret"})
    assert res.status_code == 200
    token = res.json()["access_token"]
    assert res.json()["token_type"] == "bearer"

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["username"] == "t.wang"
    assert me.json()["role"] == ROLE_TEACHER


def test_login_with_wrong_password(client, db):
    make_user(db, "t.wang", ROLE_TEACHER, password_hash=hash_password("s3cret"))
    res = client.post("/api/auth/login", data={"username": "t.wang", "password": "nope"})
    assert res.status_code == 401
    assert res.json() == {"success": False, "message": "Invalid credentials"}


def test_login_with_too_long_password(client, db):
    make_user(db, "t.wang", ROLE_TEACHER, password_hash=hash_password("s3cret"))
    res = client.post("/api/auth/login", data={"username": "t.wang", "password": "x" * 80})
    assert res.status_code == 400


def test_missing_token(client):
    res = client.get("/api/timetable/teacher")
    assert res.status_code == 401
    assert res.json()["message"] == "Not authorized, no token"


def test_invalid_token(client):
    res = client.get("/api/timetable/teacher", headers={"Authorization": "Bearer not-a-jwt"})
    assert res.status_code == 401
    assert res.json()["message"] == "Not authorized, token failed"


def test_expired_token(client, teacher):
    token = create_access_token({"sub": teacher.username}, expires_minutes=-1)
    res = client.get("/api/timetable/teacher", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401


def test_token_for_unknown_user(client):
    token = create_access_token({"sub": "nobody"})
    res = client.get("/api/timetable/teacher", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401
    assert res.json()["message"] == "User not found"


def test_me_uses_bearer_header(client, teacher):
    res = client.get("/api/auth/me", headers=auth_headers(teacher))
    assert res.json()["name"] == "Wang"
