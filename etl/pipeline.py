"""
Loader pipeline: fetches the randomuser.me batch and normalizes it into
Student records.

Field mapping:
  - id       ← login.uuid
  - name     ← "name.first name.last"
  - email    ← email (verbatim)
  - phone    ← phone (verbatim)
  - picture  ← picture.large
  - dob      ← dob.date, in local time, host-locale short date ("%x")
  - location ← "location.city, location.country"
  - major    ← one of MAJORS, picked at random (independent of the person)
  - gpa      ← random value in [1.0, 4.0], two decimals

major and gpa are placeholder data. They are re-drawn on every load, so two
loads of the same seeded batch pair the same people with different majors and
GPAs. Pass a seeded `rng` to make a load reproducible.
"""

import logging
import random
from datetime import datetime

import requests

from directory.models import Student
from etl.randomuser import LoadError, fetch_users

MAJORS = ("Computer Science", "Engineering", "Biology", "Psychology")

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def format_dob(iso_date: str) -> str:
    """'1993-07-20T09:44:18.674Z' → locale short date, e.g. '07/20/93'."""
    parsed = datetime.fromisoformat(iso_date.replace("Z", "+00:00"))
    return parsed.astimezone().strftime("%x")


def random_gpa(rng: random.Random) -> str:
    return f"{rng.random() * 3 + 1:.2f}"


# ---------------------------------------------------------------------------
# Core normalization
# ---------------------------------------------------------------------------

def normalize_user(raw: dict, rng: random.Random) -> Student:
    """Map one raw randomuser.me item onto a Student. Malformed input → LoadError."""
    try:
        return Student(
            id=raw["login"]["uuid"],
            name=f"{raw['name']['first']} {raw['name']['last']}",
            email=raw["email"],
            phone=raw["phone"],
            picture=raw["picture"]["large"],
            dob=format_dob(raw["dob"]["date"]),
            location=f"{raw['location']['city']}, {raw['location']['country']}",
            major=rng.choice(MAJORS),
            gpa=random_gpa(rng),
        )
    except (KeyError, TypeError, ValueError, AttributeError, OSError) as exc:
        log.error("Malformed user record: %s", exc)
        raise LoadError() from exc


# ---------------------------------------------------------------------------
# Entry point (importable, not a CLI)
# ---------------------------------------------------------------------------

def run(
    session: requests.Session | None = None,
    rng: random.Random | None = None,
) -> tuple[Student, ...]:
    """Fetch once, normalize every user, drop duplicate ids (first wins)."""
    rng = rng or random.Random()
    users = fetch_users(session)

    students: dict[str, Student] = {}
    for raw in users:
        student = normalize_user(raw, rng)
        if student.id in students:
            log.warning("Duplicate student id %s — keeping first occurrence.", student.id)
            continue
        students[student.id] = student

    log.info("Loaded %d students.", len(students))
    return tuple(students.values())
