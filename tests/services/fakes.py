# tests/services/fakes.py

"""
시료 테이블 코어 테스트에서 사용하는 메모리 저장소입니다.
"""

import httpx


class FakeSampleStore:
    """SampleStoreClient와 같은 메서드를 가진 메모리 저장소."""

    def __init__(self, samples=None, fields=None, failing_ids=()):
        self.samples = list(samples or [])
        self.fields = list(fields or [])
        self.failing_ids = set(failing_ids)
        self.deleted = []
        self.updates = []
        self.calls = []

    async def fetch_all_samples(self):
        self.calls.append(("fetch_all_samples",))
        return list(self.samples)

    async def fetch_team_samples(self, team_name):
        self.calls.append(("fetch_team_samples", team_name))
        return [s for s in self.samples if s["team_name"] == team_name]

    async def fetch_all_fields(self):
        self.calls.append(("fetch_all_fields",))
        return list(self.fields)

    async def fetch_team_fields(self, team_name):
        self.calls.append(("fetch_team_fields", team_name))
        return [f for f in self.fields if f["team_name"] == team_name]

    async def delete_sample(self, sample_id):
        self.deleted.append(sample_id)
        if sample_id in self.failing_ids:
            request = httpx.Request("DELETE", f"http://test/samples/{sample_id}")
            raise httpx.HTTPStatusError("boom", request=request, response=httpx.Response(500, request=request))
        self.samples = [s for s in self.samples if s["id"] != sample_id]

    async def update_sample(self, sample_id, payload):
        self.updates.append((sample_id, payload))
        for sample in self.samples:
            if sample["id"] == sample_id:
                sample.update({k: v for k, v in payload.items() if k != "data"})
                sample["data"] = dict(payload["data"])
                return dict(sample)
        raise KeyError(sample_id)
