"""Tests for API endpoints."""

import re

import pytest
from httpx import ASGITransport, AsyncClient

from url_shortener.lib.database.models import URLStatus


@pytest.mark.asyncio
class TestEncodeDecodeEndpoints:
    """Test encode and decode endpoints."""

    async def test_encode(self, client):
        """Test POST /api/url/encode."""
        response = await client.post("/api/url/encode", json={"url": "https://indicina.co/"})

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["statusCode"] == 201
        assert body["message"] == "Success"
        code = body["data"]["code"]
        assert re.fullmatch(r"[a-z0-9]{6}", code)
        assert body["data"]["shortUrl"] == f"https://sho.rt/{code}"

    @pytest.mark.parametrize("url", ["not-a-url", "ftp://example.com", "https://", ""])
    async def test_encode_invalid_url(self, client, url):
        """Test POST /api/url/encode with invalid URL."""
        response = await client.post("/api/url/encode", json={"url": url})

        assert response.status_code == 400
        body = response.json()
        assert body == {
            "success": False,
            "statusCode": 400,
            "message": body["message"],
        }
        assert body["message"].startswith("url:")

    async def test_encode_missing_body(self, client):
        response = await client.post("/api/url/encode", json={})

        assert response.status_code == 400
        assert response.json()["success"] is False

    async def test_decode(self, client):
        """Test GET /api/url/decode/{code}."""
        create = await client.post("/api/url/encode", json={"url": "https://indicina.co/"})
        code = create.json()["data"]["code"]

        response = await client.get(f"/api/url/decode/{code}")

        assert response.status_code == 200
        assert response.json()["data"] == {"originalUrl": "https://indicina.co/"}

    async def test_decode_not_found(self, client):
        response = await client.get("/api/url/decode/nonexistent")

        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "statusCode": 404,
            "message": "Short URL not found",
        }

    async def test_decode_inactive_same_as_unknown(self, client, store, make_record):
        await store.insert(make_record("deadcd", status=URLStatus.INACTIVE))

        inactive = await client.get("/api/url/decode/deadcd")
        unknown = await client.get("/api/url/decode/nonexistent")

        assert inactive.status_code == unknown.status_code == 404
        assert inactive.json() == unknown.json()


@pytest.mark.asyncio
class TestListEndpoint:
    """Test the list endpoint."""

    async def test_list_default_pagination(self, client, store, make_record):
        for i in range(12):
            await store.insert(make_record(f"code{i:02d}", f"https://example.com/{i}", minutes=i))

        response = await client.get("/api/url/list")

        assert response.status_code == 200
        data = response.json()["data"]
        assert len(data["urls"]) == 10
        assert data["urls"][0]["shortCode"] == "code11"
        assert data["pagination"] == {
            "totalCount": 12,
            "totalPages": 2,
            "currentPage": 1,
            "hasNextPage": True,
            "hasPreviousPage": False,
        }

    async def test_list_record_shape(self, client, store, make_record):
        await store.insert(make_record("abc123", "https://indicina.co"))

        response = await client.get("/api/url/list")

        record = response.json()["data"]["urls"][0]
        assert set(record) == {
            "id", "shortCode", "originalUrl", "createdAt",
            "visitCount", "searchCount", "status",
        }
        assert record["status"] == "ACTIVE"

    async def test_list_search(self, client, store, make_record):
        await store.insert(make_record("indi01", "https://indicina.co", minutes=0))
        await store.insert(make_record("goog01", "https://google.com", minutes=1))

        response = await client.get("/api/url/list", params={"search": "indicina"})

        urls = response.json()["data"]["urls"]
        assert [u["shortCode"] for u in urls] == ["indi01"]
        assert urls[0]["searchCount"] == 1

    async def test_list_page_clamped(self, client, store, make_record):
        for i in range(3):
            await store.insert(make_record(f"code{i:02d}", minutes=i))

        response = await client.get("/api/url/list", params={"page": 10, "limit": 2})

        pagination = response.json()["data"]["pagination"]
        assert pagination["currentPage"] == 2
        assert pagination["hasPreviousPage"] is True

    @pytest.mark.parametrize("limit", [0, -1, 101, "abc"])
    async def test_list_invalid_limit(self, client, limit):
        response = await client.get("/api/url/list", params={"limit": limit})

        assert response.status_code == 400
        assert response.json()["success"] is False


@pytest.mark.asyncio
class TestStatisticAndUpdateEndpoints:
    """Test statistics and status update endpoints."""

    async def test_statistic(self, client, store, make_record):
        await store.insert(make_record("abc123", "https://indicina.co"))

        first = await client.get("/api/url/statistic/abc123")
        second = await client.get("/api/url/statistic/abc123")

        assert first.status_code == 200
        assert first.json()["data"]["visitCount"] == 1
        assert second.json()["data"]["visitCount"] == 2
        assert second.json()["data"]["originalUrl"] == "https://indicina.co"

    async def test_statistic_not_found(self, client):
        response = await client.get("/api/url/statistic/nonexistent")

        assert response.status_code == 404
        assert response.json()["success"] is False

    async def test_update_status(self, client, store, make_record):
        await store.insert(make_record("abc123", "https://indicina.co"))

        response = await client.patch("/api/url/abc123", json={"status": "INACTIVE"})

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "URL status updated"
        assert body["data"]["status"] == "INACTIVE"
        assert (await store.get("abc123")).status == URLStatus.INACTIVE

    @pytest.mark.parametrize("raw", ["active", "Active", "ACTIVE"])
    async def test_update_status_case_insensitive(self, client, store, make_record, raw):
        await store.insert(make_record("abc123", status=URLStatus.INACTIVE))

        response = await client.patch("/api/url/abc123", json={"status": raw})

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "ACTIVE"

    async def test_update_invalid_status(self, client, store, make_record):
        await store.insert(make_record("abc123"))

        response = await client.patch("/api/url/abc123", json={"status": "DELETED"})

        assert response.status_code == 400
        assert "Invalid URL status" in response.json()["message"]

    async def test_update_not_found(self, client):
        response = await client.patch("/api/url/nonexistent", json={"status": "ACTIVE"})

        assert response.status_code == 404

    async def test_unknown_codes_leave_store_unchanged(self, client, store):
        for i in range(50):
            await client.get(f"/api/url/statistic/missing{i}")
            await client.patch(f"/api/url/missing{i}", json={"status": "INACTIVE"})
            await client.get(f"/missing{i}")

        assert await store.count() == 0
        assert len(store._locks) == 0


@pytest.mark.asyncio
class TestServiceEndpoints:
    """Test health, docs and error rendering."""

    async def test_health_check(self, client):
        """Test GET /api/health."""
        response = await client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["store"] == "healthy"
        assert data["totalUrls"] == 0
        assert "success" not in data

    async def test_openapi_docs(self, client):
        response = await client.get("/api/openapi.json")

        assert response.status_code == 200
        assert "/api/url/encode" in response.json()["paths"]

    async def test_method_not_allowed_uses_envelope(self, client):
        response = await client.delete("/api/url/encode")

        assert response.status_code == 405
        assert response.json()["success"] is False

    async def test_unexpected_error_is_generic(self, app, service, monkeypatch):
        async def boom(short_code):
            raise RuntimeError("store exploded: secret detail")

        monkeypatch.setattr(service, "get_url_statistics", boom)
        transport = ASGITransport(app=app, raise_app_exceptions=False)

        async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
            response = await ac.get("/api/url/statistic/abc123")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "statusCode": 500,
            "message": "Internal server error, please try again",
        }

    async def test_generator_exhausted_is_503(self, client, service, monkeypatch):
        from url_shortener.lib.exceptions import GeneratorExhaustedError

        async def exhausted(original_url):
            raise GeneratorExhaustedError("no codes left")

        monkeypatch.setattr(service, "encode_long_url", exhausted)

        response = await client.post("/api/url/encode", json={"url": "https://indicina.co"})

        assert response.status_code == 503
        assert response.json()["success"] is False
