"""End-to-end tests wiring the app the way app.py does."""

import json

import pytest
from httpx import ASGITransport, AsyncClient

from tinylink.config import Config
from tinylink.factory import create_service, create_slot
from web_app import create_app


@pytest.fixture
def file_config(tmp_path):
    return Config(
        storage_backend="file",
        storage_path=str(tmp_path),
        base_url="http://testserver",
    )


async def _client_for(config):
    slot = await create_slot(config)
    service = create_service(config, slot)
    app = create_app(service_instance=service, config=config)
    return service, AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver")


@pytest.mark.asyncio
async def test_link_lifecycle(file_config):
    """Create, follow, inspect and delete a link against the file backend."""
    service, client = await _client_for(file_config)
    async with client:
        created = await client.post("/api/links", json={"url": "example.com/launch"})
        assert created.status_code == 201
        code = created.json()["code"]

        redirect = await client.get(f"/{code}", follow_redirects=False)
        assert redirect.status_code == 302
        assert redirect.headers["location"] == "https://example.com/launch"

        stats = (await client.get(f"/api/links/{code}/stats")).json()
        assert stats["link"]["clicks"] == 1

        assert (await client.delete(f"/api/links/{code}")).status_code == 200
        assert (await client.get(f"/{code}", follow_redirects=False)).status_code == 404
    await service.close()


@pytest.mark.asyncio
async def test_links_survive_restart(file_config, tmp_path):
    service, client = await _client_for(file_config)
    async with client:
        await client.post("/api/links", json={"url": "https://example.com", "code": "persist1"})
        await client.get("/persist1")
    await service.close()

    stored = json.loads((tmp_path / "tinylink_db.json").read_text())
    assert stored[0]["code"] == "persist1"
    assert stored[0]["clicks"] == 1
    assert stored[0]["lastClickedAt"].endswith("Z")

    service, client = await _client_for(file_config)
    async with client:
        link = (await client.get("/api/links/persist1")).json()
        assert link["clicks"] == 1
    await service.close()


@pytest.mark.asyncio
async def test_reads_existing_browser_store(file_config, tmp_path):
    records = [
        {
            "code": "Ab12Cd",
            "originalUrl": "https://example.com/older",
            "createdAt": "2024-05-01T10:00:00.000Z",
            "clicks": 2,
            "lastClickedAt": "2024-05-02T10:00:00.000Z",
        },
        {
            "code": "Zz99Yy",
            "originalUrl": "https://example.com/newer",
            "createdAt": "2024-06-01T10:00:00.000Z",
            "clicks": 0,
            "lastClickedAt": None,
        },
    ]
    (tmp_path / "tinylink_db.json").write_text(json.dumps(records))

    service, client = await _client_for(file_config)
    async with client:
        listed = (await client.get("/api/links")).json()
    await service.close()

    assert [link["code"] for link in listed["links"]] == ["Zz99Yy", "Ab12Cd"]


@pytest.mark.asyncio
async def test_corrupt_store_is_generic_500(file_config, tmp_path):
    (tmp_path / "tinylink_db.json").write_text("{broken")

    service, client = await _client_for(file_config)
    async with client:
        response = await client.get("/api/links")
    await service.close()

    assert response.status_code == 500
    assert response.json()["detail"] == "An unexpected error occurred."


@pytest.mark.asyncio
async def test_memory_backend():
    config = Config(storage_backend="memory", base_url="http://testserver")
    service, client = await _client_for(config)
    async with client:
        assert (await client.get("/healthz")).status_code == 200
    await service.close()


@pytest.mark.asyncio
async def test_unknown_backend_rejected():
    config = Config.model_construct(storage_backend="carrier-pigeon")

    with pytest.raises(ValueError):
        await create_slot(config)
