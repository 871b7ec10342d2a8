# tests/services/test_client.py

"""
`SampleStoreClient`를 httpx.MockTransport로 검증하는 단위 테스트입니다.
"""

import json

import httpx
import pytest

from sampletrack.services.sample_table.client import SampleStoreClient

BASE_URL = "http://api.test/api/v1"


def make_client(handler):
    return SampleStoreClient(BASE_URL, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_fetch_team_samples_path():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path))
        return httpx.Response(200, json=[{"id": "s1"}])

    async with make_client(handler) as client:
        samples = await client.fetch_team_samples("qa-lab")

    assert samples == [{"id": "s1"}]
    assert seen == [("GET", "/api/v1/samples/team/qa-lab")]


@pytest.mark.asyncio
async def test_fetch_fields_paths():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        return httpx.Response(200, json=[])

    async with make_client(handler) as client:
        await client.fetch_all_fields()
        await client.fetch_team_fields("qa-lab")
        await client.fetch_all_samples()

    assert seen == ["/api/v1/fields", "/api/v1/fields/team/qa-lab", "/api/v1/samples"]


@pytest.mark.asyncio
async def test_update_sample_sends_payload():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["method"] = request.method
        captured["path"] = request.url.path
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"id": "s1", **captured["body"]})

    payload = {"team_name": "qa-lab", "data": {"batch": "B8"}}
    async with make_client(handler) as client:
        updated = await client.update_sample("s1", payload)

    assert captured == {"method": "PUT", "path": "/api/v1/samples/s1", "body": payload}
    assert updated["data"] == {"batch": "B8"}


@pytest.mark.asyncio
async def test_delete_sample_and_audit():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path))
        if request.method == "DELETE":
            return httpx.Response(204)
        return httpx.Response(200, json={"sample_id": "s1", "entries": []})

    async with make_client(handler) as client:
        assert await client.delete_sample("s1") is None
        audit = await client.fetch_sample_audit("s1")

    assert audit["sample_id"] == "s1"
    assert seen == [("DELETE", "/api/v1/samples/s1"), ("GET", "/api/v1/samples/s1/audit")]


@pytest.mark.asyncio
async def test_http_errors_propagate():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"detail": "Sample not found"})

    async with make_client(handler) as client:
        with pytest.raises(httpx.HTTPStatusError):
            await client.delete_sample("missing")


@pytest.mark.asyncio
async def test_transport_errors_propagate():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with make_client(handler) as client:
        with pytest.raises(httpx.TransportError):
            await client.fetch_all_samples()


@pytest.mark.asyncio
async def test_team_name_is_escaped_in_path():
    """팀 이름의 '/'와 '?'는 경로 구분자나 쿼리로 해석되지 않도록 인코딩됩니다."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.url.raw_path, request.url.query))
        return httpx.Response(200, json=[])

    async with make_client(handler) as client:
        await client.fetch_team_samples("qa/lab?x=1")
        await client.fetch_team_fields("qa/lab?x=1")

    assert seen == [
        (b"/api/v1/samples/team/qa%2Flab%3Fx%3D1", b""),
        (b"/api/v1/fields/team/qa%2Flab%3Fx%3D1", b""),
    ]
