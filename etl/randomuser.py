"""
Client for the randomuser.me API.

One GET per load, no retry: the directory is all-or-nothing, so any failure
(connection error, non-OK status, invalid JSON, missing `results` array)
surfaces as a single LoadError carrying a generic, user-facing message.

Request:  GET https://randomuser.me/api/?results=50&seed=abc123
Response: {"results": [{name, email, phone, picture, dob, location, login, ...}], "info": {...}}

The fixed seed means the same 50 people come back on every run.
"""

import logging
import os

import requests

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

RANDOMUSER_URL = os.getenv("RANDOMUSER_URL", "https://randomuser.me/api/")
RESULTS = int(os.getenv("RANDOMUSER_RESULTS", "50"))
SEED = os.getenv("RANDOMUSER_SEED", "abc123")

# None = wait forever, same as the browser fetch this replaces
_timeout = os.getenv("RANDOMUSER_TIMEOUT")
REQUEST_TIMEOUT: float | None = float(_timeout) if _timeout else None

LOAD_ERROR_MESSAGE = "Failed to fetch students. Please try again later."

log = logging.getLogger(__name__)

SESSION = requests.Session()
SESSION.headers["User-Agent"] = "Student-Directory/1.0"


class LoadError(Exception):
    """The student batch could not be loaded. Always carries the generic message."""

    def __init__(self, message: str = LOAD_ERROR_MESSAGE):
        super().__init__(message)


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

def fetch_users(session: requests.Session | None = None) -> list[dict]:
    """Fetch the raw `results` array. Exactly one request attempt."""
    session = session or SESSION
    params = {"results": RESULTS, "seed": SEED}
    log.info("GET %s results=%d seed=%s", RANDOMUSER_URL, RESULTS, SEED)

    try:
        resp = session.get(RANDOMUSER_URL, params=params, timeout=REQUEST_TIMEOUT)
        resp.raise_for_status()
        data = resp.json()
    except (requests.RequestException, ValueError) as exc:
        log.error("Student fetch failed: %s", exc)
        raise LoadError() from exc

    users = data.get("results") if isinstance(data, dict) else None
    if not isinstance(users, list):
        log.error("Student fetch returned no results array: %r", type(data).__name__)
        raise LoadError()

    return users
