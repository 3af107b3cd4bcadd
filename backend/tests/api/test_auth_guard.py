"""Authentication Guard & Login — bearer token checks on protected routes.

Tests cover:
    - Missing, malformed, expired, foreign-signed, and orphaned tokens → 401
    - Rejected requests cause no store mutation
    - Login issues a token the guard accepts; bad credentials → 400
    - Password checks run in the threadpool
"""

import threading
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from movie_club.api.routes import auth as auth_routes
from movie_club.infrastructure import passwords
from movie_club.infrastructure.tokens import TokenService


# ─── Guard ───────────────────────────────────────────────────────

@pytest.mark.parametrize("method,path", [
    ("GET", "/movies"),
    ("GET", "/movies/Inception"),
    ("GET", "/movies/genre/Thriller"),
    ("GET", "/movies/director/Alfred Hitchcock"),
    ("GET", "/users"),
    ("GET", "/users/alice1"),
    ("PUT", "/users/alice1"),
    ("POST", "/users/alice1/m1"),
    ("DELETE", "/users/alice1/m1"),
    ("DELETE", "/users/alice1/unregister"),
])
async def test_protected_routes_reject_missing_token(client, alice, method, path):
    res = await client.request(method, path, json={} if method == "PUT" else None)
    assert res.status_code == 401
    assert res.headers["www-authenticate"] == "Bearer"
    assert res.json()["error"]["code"] == "UNAUTHORIZED"


async def test_garbage_token_rejected(client, alice):
    res = await client.get("/movies", headers={"Authorization": "Bearer not-a-jwt"})
    assert res.status_code == 401


async def test_non_bearer_scheme_rejected(client, alice):
    res = await client.get("/movies", headers={"Authorization": "Basic YWxpY2U6c2VjcmV0"})
    assert res.status_code == 401


async def test_expired_token_rejected(client, alice, tokens):
    long_ago = datetime.now(timezone.utc) - timedelta(days=30)
    token = tokens.issue(alice.username, str(alice.id), now=long_ago)
    res = await client.get("/movies", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401
    assert res.json()["error"]["message"] == "Token has expired"


async def test_token_signed_with_other_secret_rejected(client, alice):
    forged = TokenService("someone-else").issue(alice.username, str(alice.id))
    res = await client.get("/movies", headers={"Authorization": f"Bearer {forged}"})
    assert res.status_code == 401


async def test_token_for_missing_user_rejected(client, alice, tokens):
    token = tokens.issue("ghost1", str(uuid4()))
    res = await client.get("/movies", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401


async def test_rejected_favorite_add_leaves_store_untouched(client, alice, fetch_user):
    res = await client.post("/users/alice1/m1")
    assert res.status_code == 401
    assert (await fetch_user("alice1")).favorite_movies == []


async def test_rejected_unregister_keeps_user(client, alice, fetch_user):
    res = await client.delete(
        "/users/alice1/unregister", headers={"Authorization": "Bearer bogus"},
    )
    assert res.status_code == 401
    assert await fetch_user("alice1") is not None


async def test_rejected_update_keeps_email(client, alice, fetch_user):
    res = await client.put("/users/alice1", json={"Email": "evil@example.com"})
    assert res.status_code == 401
    assert (await fetch_user("alice1")).email == "alice1@example.com"


# ─── Login ───────────────────────────────────────────────────────

async def test_login_returns_token_accepted_by_guard(client, alice, seed_movies):
    res = await client.post("/login", json={"Username": "alice1", "Password": "secret"})
    assert res.status_code == 200
    body = res.json()
    assert body["user"]["Username"] == "alice1"
    assert body["user"]["_id"] == str(alice.id)

    movies = await client.get(
        "/movies", headers={"Authorization": f"Bearer {body['token']}"},
    )
    assert movies.status_code == 201


async def test_login_accepts_query_parameters(client, alice):
    res = await client.post("/login", params={"Username": "alice1", "Password": "secret"})
    assert res.status_code == 200
    assert res.json()["token"]


async def test_login_wrong_password_rejected(client, alice):
    res = await client.post("/login", json={"Username": "alice1", "Password": "nope"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_CREDENTIALS"


async def test_login_unknown_user_rejected(client):
    res = await client.post("/login", json={"Username": "nobody", "Password": "x"})
    assert res.status_code == 400


async def test_login_without_credentials_rejected(client):
    res = await client.post("/login")
    assert res.status_code == 400


async def test_login_checks_password_off_the_event_loop_thread(client, alice, monkeypatch):
    loop_thread = threading.get_ident()
    checking_threads = []

    def recording_check(plain, hashed):
        checking_threads.append(threading.get_ident())
        return passwords.check_password(plain, hashed)

    monkeypatch.setattr(auth_routes, "check_password", recording_check)
    res = await client.post("/login", json={"Username": "alice1", "Password": "secret"})
    assert res.status_code == 200
    assert len(checking_threads) == 1
    assert checking_threads[0] != loop_thread
