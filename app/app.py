"""
FastAPI application: JSON view of the student directory.

Run as a script:
    python app/app.py

Or as a module:
    uvicorn app.app:app --reload

The student batch is fetched from randomuser.me once, at startup. If that
fetch fails the server still starts, and every /students endpoint answers
503 with the generic load-failure message. There is no retry; restart the
server to try again.

Endpoints:
    GET /students?q=...&page=N
        returns: {"items": [...], "total": int, "page": int, "pages": int, "per_page": int}
    GET /students/{student_id}
        returns: a single student, 404 if unknown
    GET /navigation
        returns: {"brand": str, "items": [{"name", "href", "submenu": [...]}]}

Logs each query and wall-clock response time to stdout and logs/app.log
(rotating, 5 MB max, 3 backups).
"""

import asyncio
import locale
import logging
import logging.handlers
import sys
import time
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

# Ensure project root is on sys.path when running as a script (python app/app.py)
sys.path.insert(0, str(Path(__file__).parent.parent))

# Before the etl imports: they read RANDOMUSER_* at import time
load_dotenv()

from directory.models import Student
from directory.navigation import BRAND, MENU_ITEMS
from directory.search import PAGE_SIZE, search
from etl.pipeline import run as load_students
from etl.randomuser import LOAD_ERROR_MESSAGE, LoadError

LOG_DIR  = Path(__file__).parent.parent / "logs"
LOG_FILE = LOG_DIR / "app.log"

def _setup_logging() -> None:
    LOG_DIR.mkdir(exist_ok=True)
    fmt = logging.Formatter("%(asctime)s  %(levelname)s  %(message)s")

    stream = logging.StreamHandler(sys.stdout)
    stream.setFormatter(fmt)

    # Rotate at 5 MB, keep 3 backups
    rotating = logging.handlers.RotatingFileHandler(
        LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
    )
    rotating.setFormatter(fmt)

    root = logging.getLogger()
    root.setLevel(logging.INFO)
    root.addHandler(stream)
    root.addHandler(rotating)

_setup_logging()
log = logging.getLogger("api")

# Birth dates are rendered with the host's short date format
try:
    locale.setlocale(locale.LC_TIME, "")
except locale.Error as exc:
    log.warning("Could not apply host locale for dates: %s", exc)


# ---------------------------------------------------------------------------
# App + lifespan
# ---------------------------------------------------------------------------

_students: tuple[Student, ...] | None = None
_load_error: str | None = None


@asynccontextmanager
async def lifespan(_: FastAPI):
    global _students, _load_error

    log.info("Loading students from randomuser.me…")
    try:
        _students = load_students()
        _load_error = None
        log.info("  %d students loaded.", len(_students))
    except LoadError as exc:
        _students = None
        _load_error = str(exc)
        log.error("  Load failed; /students will answer 503.")

    yield  # server runs here


app = FastAPI(title="Student Directory", lifespan=lifespan)


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

class StudentPage(BaseModel):
    items: list[Student]
    total: int
    page: int
    pages: int
    per_page: int


class MenuEntry(BaseModel):
    name: str
    href: str
    submenu: list["MenuEntry"] = []


class Navigation(BaseModel):
    brand: str
    items: list[MenuEntry]


def _require_students() -> tuple[Student, ...]:
    if _students is None:
        raise HTTPException(status_code=503, detail=_load_error or LOAD_ERROR_MESSAGE)
    return _students


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get("/students", response_model=StudentPage)
def list_students(
    q: str = "",
    page: int = Query(1, ge=1),
) -> StudentPage:
    students = _require_students()
    t0 = time.perf_counter()

    result = search(students, q, page, PAGE_SIZE)

    elapsed = time.perf_counter() - t0
    log.info("q=%r  page=%d/%d  hits=%d  %.4fs", q, result.page, result.pages, result.total, elapsed)

    return StudentPage(
        items=result.items,
        total=result.total,
        page=result.page,
        pages=result.pages,
        per_page=result.per_page,
    )


@app.get("/students/{student_id}", response_model=Student)
def get_student(student_id: str) -> Student:
    students = _require_students()
    for student in students:
        if student.id == student_id:
            return student
    raise HTTPException(status_code=404, detail="Student not found.")


@app.get("/navigation", response_model=Navigation)
def navigation() -> Navigation:
    return Navigation(
        brand=BRAND,
        items=[MenuEntry(**item.to_dict()) for item in MENU_ITEMS],
    )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def _launch_server() -> None:
    config = uvicorn.Config(app, host="0.0.0.0", port=8000, reload=False)
    server = uvicorn.Server(config)

    try:
        asyncio.get_running_loop()
    except RuntimeError:
        uvicorn.run(app, host="0.0.0.0", port=8000, reload=False)
        return

    log.warning(
        "Detected an existing asyncio event loop; serving with create_task() instead of asyncio.run()."
    )
    asyncio.create_task(server.serve())


if __name__ == "__main__":
    log.info("=== Student Directory — launching server on http://0.0.0.0:8000 ===")
    _launch_server()
