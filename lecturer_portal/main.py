# lecturer_portal/main.py
import time
import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from lecturer_portal import row_security  # noqa: F401  registers the row policies
from lecturer_portal.config import settings
from lecturer_portal.database import Base, engine
from lecturer_portal.errors import PortalError
from lecturer_portal.logging_config import setup_logging
from lecturer_portal.routers import (
    assignments,
    auth,
    consultations,
    dashboard,
    profile,
    reports,
    students,
    study_materials,
    timetable,
    updates,
)


setup_logging()
logger = logging.getLogger("app")


# create tables if missing
Base.metadata.create_all(bind=engine)

app = FastAPI(title="Lecturer Portal Backend", version="1.0.0")

Path(settings.STATIC_DIR).mkdir(parents=True, exist_ok=True)
Path(settings.STORAGE_DIR).mkdir(parents=True, exist_ok=True)
app.mount("/static", StaticFiles(directory=settings.STATIC_DIR), name="static")


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


@app.exception_handler(PortalError)
async def portal_error_handler(request: Request, exc: PortalError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(dashboard.router)
app.include_router(students.router)
app.include_router(timetable.router)
app.include_router(assignments.router)
app.include_router(consultations.router)
app.include_router(reports.router)
app.include_router(study_materials.router)
app.include_router(updates.router)


@app.get("/")
def root():
    return {"message": "Lecturer portal backend is running!"}
