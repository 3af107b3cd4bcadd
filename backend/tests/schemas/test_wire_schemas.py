"""Wire schemas — PascalCase aliases and partial updates."""

from datetime import date
from uuid import uuid4

from movie_club.models.user import User
from movie_club.schemas.movie import MovieOut
from movie_club.schemas.user import UserCreate, UserOut, UserUpdate


def test_user_create_reads_pascal_case_body():
    body = UserCreate.model_validate({
        "Username": "alice1", "Password": "secret",
        "Email": "a@example.com", "Birthday": "1999-01-01",
    })
    assert body.username == "alice1"
    assert body.birthday == date(1999, 1, 1)


def test_user_update_changed_fields_skips_unset_and_null():
    body = UserUpdate.model_validate({"Email": "n@example.com", "Birthday": None})
    assert body.changed_fields() == {"email": "n@example.com"}


def test_user_update_ignores_username():
    body = UserUpdate.model_validate({"Username": "mallory", "Password": "pw"})
    assert body.changed_fields() == {"password": "pw"}


def test_user_out_from_orm_row_uses_aliases():
    user = User(
        id=uuid4(), username="alice1", password="$2b$hash", email="a@example.com",
        birthday=None, favorite_movies=["m1"],
    )
    dumped = UserOut.model_validate(user).model_dump(by_alias=True, mode="json")
    assert dumped == {
        "_id": str(user.id),
        "Username": "alice1",
        "Password": "$2b$hash",
        "Email": "a@example.com",
        "Birthday": None,
        "FavoriteMovies": ["m1"],
    }


def test_movie_out_tolerates_partial_embedded_documents():
    movie = MovieOut.model_validate({
        "_id": str(uuid4()), "Title": "Untitled", "Genre": {"Name": "Drama"},
    })
    dumped = movie.model_dump(by_alias=True)
    assert dumped["Genre"] == {"Name": "Drama", "Description": None}
    assert dumped["Director"]["Name"] is None
    assert dumped["Featured"] is False
