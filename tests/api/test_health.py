"""Health probes — liveness never touches the database, readiness does."""


async def test_health_returns_200_with_empty_body(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.headers["content-length"] == "0"
    assert res.content == b""


async def test_health_is_independent_of_database(unreachable_client):
    res = await unreachable_client.get("/health")
    assert res.status_code == 200
    assert res.headers["content-length"] == "0"


async def test_ready_returns_200_when_database_reachable(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.content == b""


async def test_ready_returns_503_when_database_unreachable(unreachable_client):
    res = await unreachable_client.get("/health/ready")
    assert res.status_code == 503
    assert res.content == b""
