"""
Student record shared by the loader, the search pipeline, the JSON service
and the Streamlit frontend.

Records are immutable; a loaded collection is a tuple and is replaced
wholesale on reload.
"""

from pydantic import BaseModel, ConfigDict


class Student(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str
    phone: str
    picture: str
    dob: str
    location: str
    major: str
    gpa: str

    @property
    def initials(self) -> str:
        """Avatar fallback: 'Jane Doe' → 'JD'."""
        return "".join(part[0] for part in self.name.split() if part)

    def field_values(self) -> list[str]:
        """String form of every field, in declaration order."""
        return [str(value) for value in self.model_dump().values()]
