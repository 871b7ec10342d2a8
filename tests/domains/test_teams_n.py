# tests/domains/test_teams_n.py

"""
'teams' 도메인 API 엔드포인트에 대한 통합 테스트 모듈입니다.
"""

import pytest
from httpx import AsyncClient

from sampletrack.domains.teams import models as teams_models


@pytest.mark.asyncio
async def test_create_team(client: AsyncClient):
    """(성공) 새 팀 생성"""
    response = await client.post("/api/v1/teams", json={"name": "chem-lab"})
    assert response.status_code == 201
    assert response.json()["name"] == "chem-lab"
    assert "created_at" in response.json()


@pytest.mark.asyncio
async def test_create_duplicate_team(client: AsyncClient, test_team: teams_models.Team):
    """(실패) 이미 존재하는 팀 이름으로 생성 시 400 에러"""
    response = await client.post("/api/v1/teams", json={"name": test_team.name})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_create_team_with_empty_name(client: AsyncClient):
    """(실패) 유효성: 빈 팀 이름은 422 에러"""
    response = await client.post("/api/v1/teams", json={"name": ""})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_read_teams_ordered_by_name(
    client: AsyncClient, test_team: teams_models.Team, test_other_team: teams_models.Team
):
    """(성공) 팀 목록은 이름순으로 정렬됩니다."""
    response = await client.get("/api/v1/teams")
    assert response.status_code == 200
    names = [t["name"] for t in response.json()]
    assert names == sorted(names)
    assert {test_team.name, test_other_team.name} <= set(names)


@pytest.mark.asyncio
async def test_read_single_team(client: AsyncClient, test_team: teams_models.Team):
    response = await client.get(f"/api/v1/teams/{test_team.name}")
    assert response.status_code == 200
    assert response.json()["name"] == test_team.name


@pytest.mark.asyncio
async def test_read_nonexistent_team(client: AsyncClient):
    """(실패) 예외: 존재하지 않는 팀 조회 시 404 에러"""
    response = await client.get("/api/v1/teams/no-such-team")
    assert response.status_code == 404
