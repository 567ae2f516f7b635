"""Health probes, root endpoint and generated API documentation."""

import agency_api.infrastructure.database as db_module


async def test_liveness_always_healthy(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_ok_when_database_answers(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readiness_503_without_database(client):
    db_module.db_manager = None
    res = await client.get("/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_root_points_to_docs(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert res.json()["docs"] == "/docs"


async def test_openapi_documents_every_route(client):
    res = await client.get("/openapi.json")
    assert res.status_code == 200
    paths = res.json()["paths"]

    assert set(paths["/customers"]) == {"get"}
    assert set(paths["/customers/{cust_code}"]) == {"get"}
    assert set(paths["/customer/update/{cust_code}"]) == {"put", "patch"}
    assert set(paths["/agents"]) == {"get"}
    assert set(paths["/agents/create"]) == {"post"}
    assert set(paths["/agents/delete/{agent_code}"]) == {"delete"}
    assert "404" in paths["/customers/{cust_code}"]["get"]["responses"]
    assert paths["/agents"]["get"]["tags"] == ["Agents"]


async def test_swagger_ui_served(client):
    res = await client.get("/docs")
    assert res.status_code == 200
    assert "swagger-ui" in res.text.lower()
