"""User Schemas — request and response models for /users and /login.

Invariants:
    - Wire names are PascalCase via aliases; _id is the stringified UUID
    - UserCreate fields are all optional at the type level: presence and shape
      are checked by core/validate_signup.py so every violation is reported together
    - UserOut exposes the stored hash, never a plaintext password
    - UserUpdate only touches fields the client actually sent
"""

from datetime import date
from uuid import UUID

from pydantic import Field

from movie_club.schemas.movie import WireModel


class UserCreate(WireModel):
    username: str | None = Field(None, alias="Username")
    password: str | None = Field(None, alias="Password")
    email: str | None = Field(None, alias="Email")
    birthday: date | None = Field(None, alias="Birthday")


class UserUpdate(WireModel):
    """Profile update — Username is the match key and cannot be changed here."""
    password: str | None = Field(None, alias="Password")
    email: str | None = Field(None, alias="Email")
    birthday: date | None = Field(None, alias="Birthday")

    def changed_fields(self) -> dict:
        """Fields present in the request body and not null."""
        return {
            name: value
            for name, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class UserOut(WireModel):
    id: UUID = Field(alias="_id")
    username: str = Field(alias="Username")
    password: str = Field(alias="Password")
    email: str = Field(alias="Email")
    birthday: date | None = Field(None, alias="Birthday")
    favorite_movies: list[str] = Field(default_factory=list, alias="FavoriteMovies")


class LoginRequest(WireModel):
    username: str = Field(min_length=1, alias="Username")
    password: str = Field(min_length=1, alias="Password")


class LoginResponse(WireModel):
    user: UserOut
    token: str
