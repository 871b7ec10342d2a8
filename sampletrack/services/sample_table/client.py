# sampletrack/services/sample_table/client.py

"""
SampleTrack REST API를 호출하는 비동기 HTTP 클라이언트입니다.

HTTP 오류(`httpx.HTTPStatusError`)와 네트워크 오류(`httpx.TransportError`)는
잡지 않고 호출한 쪽으로 전달합니다.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import quote

import httpx

from sampletrack.core.config import settings

logger = logging.getLogger(__name__)


class SampleStoreClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout if timeout is not None else settings.API_TIMEOUT_SECONDS,
            transport=transport,
        )

    async def __aenter__(self) -> "SampleStoreClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        response = await self._client.request(method, path, **kwargs)
        logger.debug("%s %s -> %s", method, path, response.status_code)
        response.raise_for_status()
        return response

    # --- 시료 ---
    async def fetch_all_samples(self) -> List[Dict[str, Any]]:
        return (await self._request("GET", "/samples")).json()

    async def fetch_team_samples(self, team_name: str) -> List[Dict[str, Any]]:
        return (await self._request("GET", f"/samples/team/{quote(team_name, safe='')}")).json()

    async def update_sample(self, sample_id: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        return (await self._request("PUT", f"/samples/{sample_id}", json=dict(payload))).json()

    async def delete_sample(self, sample_id: str) -> None:
        await self._request("DELETE", f"/samples/{sample_id}")

    async def fetch_sample_audit(self, sample_id: str) -> Dict[str, Any]:
        return (await self._request("GET", f"/samples/{sample_id}/audit")).json()

    # --- 필드 정의 ---
    async def fetch_all_fields(self) -> List[Dict[str, Any]]:
        return (await self._request("GET", "/fields")).json()

    async def fetch_team_fields(self, team_name: str) -> List[Dict[str, Any]]:
        return (await self._request("GET", f"/fields/team/{quote(team_name, safe='')}")).json()
