"""Tests for the HTTP routes (FastAPI app driven in-process through httpx)."""

import httpx
import pytest
import pytest_asyncio

from compass_badges.db.session import get_db
from compass_badges.main import app
from tests.factories import add_bundle, add_honesty_tiers, add_profile, add_scenario, add_session


@pytest_asyncio.fixture
async def client(db):
    async def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


class TestCalculateScores:
    @pytest.mark.asyncio
    async def test_returns_axis_percentiles(self, client, db, two_path_scenario):
        await add_scenario(db, two_path_scenario)
        await add_bundle(db, "bundle-1", ["scenario-1"])

        response = await client.post(
            "/api/badges/calculate-scores",
            json={"content_bundle_id": "bundle-1", "percentiles": [50]},
        )

        assert response.status_code == 200
        body = {r["axis_name"]: r for r in response.json()}
        assert body["honesty"]["percentile_scores"] == {"50.0": 8.0}
        assert body["bravery"]["path_count"] == 1

    @pytest.mark.asyncio
    async def test_empty_percentiles_is_400(self, client):
        response = await client.post(
            "/api/badges/calculate-scores",
            json={"content_bundle_id": "bundle-1", "percentiles": []},
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_unknown_bundle_is_404(self, client):
        response = await client.post(
            "/api/badges/calculate-scores",
            json={"content_bundle_id": "ghost", "percentiles": [50]},
        )

        assert response.status_code == 404


class TestFinalizeAndProgress:
    @pytest.mark.asyncio
    async def test_finalize_awards_and_lists_badges(self, client, db):
        await add_profile(db)
        await add_honesty_tiers(db, (10, 25, 50))
        await add_session(db, "session-1", "profile-1", "scenario-1", [("honesty", 30)])

        response = await client.post("/api/sessions/session-1/finalize")

        assert response.status_code == 200
        body = response.json()
        assert body["scored"] is True
        assert [b["badge_id"] for b in body["new_badges"]] == ["honesty-bronze", "honesty-silver"]

        badges = await client.get("/api/profiles/profile-1/badges")
        assert badges.status_code == 200
        assert len(badges.json()) == 2

        progress = await client.get("/api/profiles/profile-1/badge-progress")
        assert progress.status_code == 200
        tiers = progress.json()["axes"][0]["tiers"]
        assert [t["is_earned"] for t in tiers] == [True, True, False]

    @pytest.mark.asyncio
    async def test_unknown_session_is_404(self, client):
        response = await client.post("/api/sessions/ghost/finalize")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_unknown_profile_is_404(self, client):
        assert (await client.get("/api/profiles/ghost/badges")).status_code == 404
        assert (await client.get("/api/profiles/ghost/badge-progress")).status_code == 404
