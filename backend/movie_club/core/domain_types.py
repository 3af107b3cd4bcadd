"""Domain Types — small value types shared across layers.

Invariants:
    - FieldViolation is immutable and ordered by the rule that produced it
    - Username and MovieRef are plain strings at runtime (NewType)
"""

from dataclasses import dataclass
from typing import NewType


Username = NewType("Username", str)
MovieRef = NewType("MovieRef", str)   # movie id as stored in FavoriteMovies


@dataclass(frozen=True)
class FieldViolation:
    """One failed boundary check on a request field."""
    field: str
    message: str
    location: str = "body"

    def to_dict(self) -> dict:
        return {
            "field": self.field,
            "message": self.message,
            "location": self.location,
        }
