"""Global Error Handlers — every failure leaves as {"error": {message, status}}.

Invariants:
    - Unknown routes → 404 envelope
    - Unclassified exceptions → 500 with the exception message, no traceback
    - Readiness reflects database reachability
"""

from books_api.services.book_repository import SqlBookRepository


async def test_unknown_route_uses_envelope(client):
    res = await client.get("/authors")
    assert res.status_code == 404
    assert res.json() == {"error": {"message": "Not Found", "status": 404}}


async def test_unsupported_method_uses_envelope(client):
    res = await client.patch("/books/1843430851", json={})
    assert res.status_code == 405
    assert res.json()["error"]["status"] == 405


async def test_unhandled_exception_returns_500(lenient_client, monkeypatch):
    async def explode(self):
        raise RuntimeError("connection reset")

    monkeypatch.setattr(SqlBookRepository, "list_all", explode)
    res = await lenient_client.get("/books")
    assert res.status_code == 500
    assert res.json() == {
        "error": {"message": "connection reset", "status": 500},
    }


async def test_health_liveness(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_health_readiness_with_database(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_health_readiness_without_database(client, monkeypatch):
    import books_api.infrastructure.database as db_module

    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
