"""Movie Schemas — wire shape for the movies collection.

Invariants:
    - Wire names are PascalCase (Title, ImagePath, Genre.Name, ...) via aliases
    - _id is the stringified UUID primary key
    - Every embedded field is optional: catalog entries may be partial
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    """Base for PascalCase wire models readable from ORM rows and dicts."""
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class GenreOut(WireModel):
    name: str | None = Field(None, alias="Name")
    description: str | None = Field(None, alias="Description")


class DirectorOut(WireModel):
    name: str | None = Field(None, alias="Name")
    bio: str | None = Field(None, alias="Bio")
    birth: str | None = Field(None, alias="Birth")
    death: str | None = Field(None, alias="Death")


class MovieOut(WireModel):
    """A movie document as returned by every /movies route."""
    id: UUID = Field(alias="_id")
    title: str = Field(alias="Title")
    description: str | None = Field(None, alias="Description")
    genre: GenreOut = Field(default_factory=GenreOut, alias="Genre")
    director: DirectorOut = Field(default_factory=DirectorOut, alias="Director")
    image_path: str | None = Field(None, alias="ImagePath")
    featured: bool = Field(False, alias="Featured")


class MovieSeed(WireModel):
    """One catalog entry accepted by the seed command."""
    title: str = Field(min_length=1, max_length=200, alias="Title")
    description: str | None = Field(None, alias="Description")
    genre: GenreOut = Field(default_factory=GenreOut, alias="Genre")
    director: DirectorOut = Field(default_factory=DirectorOut, alias="Director")
    image_path: str | None = Field(None, alias="ImagePath")
    featured: bool = Field(False, alias="Featured")
