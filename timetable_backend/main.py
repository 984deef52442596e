# timetable_backend/main.py
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from timetable_backend.config import settings
from timetable_backend.database import Base, engine
from timetable_backend.routers import auth, timetable

import time
import logging
import traceback
from fastapi import Request
from timetable_backend.logging_config import setup_logging


setup_logging()
logger = logging.getLogger("timetable_backend")


# 建立資料表（若不存在）
Base.metadata.create_all(bind=engine)

app = FastAPI(title="Timetable Backend", version="1.0.0")


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    try:
        response = await call_next(request)
        ms = int((time.time() - start) * 1000)
        logger.info("%s %s -> %s (%dms)", request.method, request.url.path, response.status_code, ms)
        return response
    except Exception:
        ms = int((time.time() - start) * 1000)
        logger.exception("Unhandled error %s %s (%dms)", request.method, request.url.path, ms)
        raise


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# 錯誤統一回 {"success": false, "message": ...}
def error_response(status_code: int, message: str, headers=None, **extra) -> JSONResponse:
    body = {"success": False, "message": message}
    body.update(extra)
    return JSONResponse(status_code=status_code, content=body, headers=headers)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    # 沒有對應的路由
    if exc.status_code == 404 and message == "Not Found":
        message = f"Not Found - {request.url.path}"
    return error_response(exc.status_code, message, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        err = errors[0]
        loc = ".".join(str(p) for p in err.get("loc", ())[1:])
        message = f"{loc}: {err.get('msg')}" if loc else str(err.get("msg"))
    else:
        message = "Invalid request"
    return error_response(400, message)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    if settings.DEBUG:
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        return error_response(500, "Internal Server Error", stack=stack)
    return error_response(500, "Internal Server Error")


# Routers
app.include_router(auth.router)
app.include_router(timetable.router)

@app.get("/")
def root():
    return {"message": "Timetable backend is running!"}
