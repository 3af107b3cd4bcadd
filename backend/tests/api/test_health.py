"""Health probes — liveness always up, readiness follows the store."""

from movie_club.main import app


async def test_liveness_probe(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"
    assert res.json()["service"] == "movie-club-api"


async def test_readiness_probe_with_store(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_probe_without_store(client):
    manager = app.state.db
    app.state.db = None
    try:
        res = await client.get("/health/ready")
    finally:
        app.state.db = manager
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
