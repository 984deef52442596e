from passlib.context import CryptContext
from fastapi import HTTPException

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# bcrypt 只吃前 72 bytes
BCRYPT_MAX_BYTES = 72

def _check_bcrypt_len(password: str):
    if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise HTTPException(status_code=400, detail="Password too long (bcrypt max 72 bytes)")

def hash_password(password: str) -> str:
    _check_bcrypt_len(password)
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    _check_bcrypt_len(plain_password)
    return pwd_context.verify(plain_password, hashed_password)
