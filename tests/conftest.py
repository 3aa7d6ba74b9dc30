import pytest

from directory.models import Student
from etl.pipeline import MAJORS


def _make_student(i: int, major: str = "Biology", **overrides) -> Student:
    fields = {
        "id": f"uuid-{i:03d}",
        "name": f"Person{i:03d} Lastname",
        "email": f"person{i:03d}@example.com",
        "phone": f"(555) 000-{i:04d}",
        "picture": f"https://randomuser.me/api/portraits/women/{i}.jpg",
        "dob": "07/20/93",
        "location": "Lyon, France",
        "major": major,
        "gpa": "3.25",
    }
    fields.update(overrides)
    return Student(**fields)


@pytest.fixture
def make_student():
    """Factory: make_student(i, major="Biology", **overrides) → Student."""
    return _make_student


@pytest.fixture
def students():
    """50 students, majors cycling through MAJORS in order."""
    return tuple(_make_student(i, MAJORS[i % len(MAJORS)]) for i in range(50))


@pytest.fixture
def raw_user():
    """One item of a randomuser.me `results` array."""
    return {
        "gender": "female",
        "name": {"title": "Ms", "first": "Jane", "last": "Doe"},
        "location": {"city": "Lyon", "country": "France", "postcode": 69001},
        "email": "jane.doe@example.com",
        "login": {"uuid": "0f2d4c1a-aaaa-bbbb-cccc-000000000001", "username": "jdoe"},
        "dob": {"date": "1993-07-20T09:44:18.674Z", "age": 31},
        "phone": "04-12-34-56-78",
        "picture": {
            "large": "https://randomuser.me/api/portraits/women/1.jpg",
            "medium": "https://randomuser.me/api/portraits/med/women/1.jpg",
            "thumbnail": "https://randomuser.me/api/portraits/thumb/women/1.jpg",
        },
    }
