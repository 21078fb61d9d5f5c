"""
Integration tests for the REST API endpoints.

The app is served in-process through ``httpx.ASGITransport``; every
request carries its own listing snapshot so no storage is involved.
"""

from __future__ import annotations

import pytest
from httpx import AsyncClient

from src.domain.geocoding import DEFAULT_COORDINATE


def _listing(listing_id: str, origin: str, destination: str, **extra) -> dict:
    return {
        "id": listing_id,
        "origin": {"name": origin},
        "destination": {"name": destination},
        "asking_price": 20_000,
        "cargo_type": "General",
        **extra,
    }


ROUTE = {
    "origin": {"name": "Davao City"},
    "destination": {"name": "Cebu City"},
}

POOL = [
    _listing("perfect", "Cebu City", "Davao City"),
    _listing("near", "Mandaue City", "Panabo City"),
    _listing("far", "Manila", "Zamboanga City"),
    _listing("taken", "Cebu City", "Davao City", status="contracted"),
]


# ── Tests ─────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    resp = await client.get("/api/v1/admin/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_find_matches(client: AsyncClient):
    resp = await client.post(
        "/api/v1/backload/matches", json={**ROUTE, "listings": POOL}
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["max_detour_km"] == 50
    assert data["total"] == 2
    assert [m["listing"]["id"] for m in data["matches"]] == ["perfect", "near"]
    assert data["matches"][0]["match_score"] == 100
    assert data["matches"][0]["listing"]["origin"] == "Cebu City"


@pytest.mark.asyncio
async def test_find_matches_empty_pool(client: AsyncClient):
    resp = await client.post("/api/v1/backload/matches", json=ROUTE)
    assert resp.status_code == 200
    assert resp.json()["matches"] == []


@pytest.mark.asyncio
async def test_detour_budget_is_bounded(client: AsyncClient):
    resp = await client.post(
        "/api/v1/backload/matches",
        json={**ROUTE, "listings": POOL, "max_detour_km": 5_000},
    )
    assert resp.status_code == 200
    assert resp.json()["max_detour_km"] == 200


@pytest.mark.asyncio
async def test_explicit_coordinates_accepted(client: AsyncClient):
    body = {
        "origin": {"lat": 7.0707, "lng": 125.6087},
        "destination": {"lat": 10.3157, "lng": 123.8854},
        "listings": [
            {
                "id": "coords",
                "origin": {"lat": 10.3157, "lng": 123.8854},
                "destination": {"lat": 7.0707, "lng": 125.6087},
            }
        ],
    }
    resp = await client.post("/api/v1/backload/matches", json=body)
    assert resp.status_code == 200
    assert resp.json()["matches"][0]["detour_km"] == 0


@pytest.mark.asyncio
async def test_out_of_range_latitude_rejected(client: AsyncClient):
    body = {**ROUTE, "origin": {"lat": 95.0, "lng": 125.0}}
    resp = await client.post("/api/v1/backload/matches", json=body)
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_location_needs_name_or_coordinates(client: AsyncClient):
    body = {**ROUTE, "origin": {"lat": 7.0}}
    resp = await client.post("/api/v1/backload/matches", json=body)
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_plan(client: AsyncClient):
    resp = await client.post(
        "/api/v1/backload/plan",
        json={**ROUTE, "listings": POOL, "vehicle": "10W Wing Van"},
    )
    assert resp.status_code == 200
    data = resp.json()

    kinds = [w["kind"] for w in data["route"]["waypoints"]]
    assert kinds[0] == "origin"
    assert kinds[-1] == "destination"
    assert len(kinds) == 6
    assert len(data["route"]["legs_km"]) == 5
    assert sum(data["route"]["legs_km"]) == data["route"]["total_distance_km"]
    assert data["fuel"]["vehicle"] == "10W"
    assert 0 <= data["efficiency"]["score"] <= 100


@pytest.mark.asyncio
async def test_plan_limit(client: AsyncClient):
    resp = await client.post(
        "/api/v1/backload/plan",
        json={**ROUTE, "listings": POOL, "vehicle": "6W", "limit": 1},
    )
    assert resp.status_code == 200
    assert len(resp.json()["selected"]) == 1
    assert len(resp.json()["route"]["waypoints"]) == 4


@pytest.mark.asyncio
async def test_optimize_route(client: AsyncClient):
    waypoints = [
        {"name": "o", "lat": 0, "lng": 0, "kind": "origin"},
        {"name": "three", "lat": 0, "lng": 3, "kind": "pickup", "cargo_ref": "a"},
        {"name": "one", "lat": 0, "lng": 1, "kind": "dropoff", "cargo_ref": "b"},
        {"name": "two", "lat": 0, "lng": 2, "kind": "pickup", "cargo_ref": "c"},
        {"name": "d", "lat": 0, "lng": 4, "kind": "destination"},
    ]
    resp = await client.post("/api/v1/routes/optimize", json={"waypoints": waypoints})
    assert resp.status_code == 200
    data = resp.json()
    assert [w["name"] for w in data["waypoints"]] == ["o", "one", "two", "three", "d"]
    assert data["total_distance_km"] == 444
    assert data["original_distance_km"] == 889
    assert data["savings_km"] == 445
    assert data["savings_percent"] == 50


@pytest.mark.asyncio
async def test_optimize_moves_destination_to_end(client: AsyncClient):
    waypoints = [
        {"name": "o", "lat": 0, "lng": 0, "kind": "origin"},
        {"name": "d", "lat": 0, "lng": 1, "kind": "destination"},
        {"name": "p", "lat": 0, "lng": 5, "kind": "pickup", "cargo_ref": "c"},
    ]
    resp = await client.post("/api/v1/routes/optimize", json={"waypoints": waypoints})
    assert resp.status_code == 200
    data = resp.json()
    assert [w["name"] for w in data["waypoints"]] == ["o", "p", "d"]
    assert data["legs_km"] == [556, 445]


@pytest.mark.asyncio
async def test_optimize_trivial_route(client: AsyncClient):
    resp = await client.post("/api/v1/routes/optimize", json={"waypoints": []})
    assert resp.status_code == 200
    assert resp.json()["savings_km"] == 0
    assert resp.json()["waypoints"] == []


@pytest.mark.asyncio
async def test_fuel_estimate(client: AsyncClient):
    resp = await client.get(
        "/api/v1/estimates/fuel",
        params={"distance_km": 100, "vehicle": "10W Wing Van (12-15 tons)"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["cost"] == 2167
    assert data["vehicle"] == "10W"
    assert data["duration"] == "2h 0m"


@pytest.mark.asyncio
async def test_fuel_estimate_rejects_negative_distance(client: AsyncClient):
    resp = await client.get("/api/v1/estimates/fuel", params={"distance_km": -1})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_efficiency_clamped(client: AsyncClient):
    resp = await client.get(
        "/api/v1/estimates/efficiency",
        params={"earnings": 0, "distance_km": 100, "vehicle": "6W Dropside"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["score"] == 0
    assert data["net_earnings"] < 0


@pytest.mark.asyncio
async def test_resolve_unknown_location(client: AsyncClient):
    resp = await client.get(
        "/api/v1/admin/locations/resolve", params={"name": "Atlantis"}
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["resolved"] is False
    assert data["coordinate"] == {
        "lat": DEFAULT_COORDINATE.lat,
        "lng": DEFAULT_COORDINATE.lng,
    }


@pytest.mark.asyncio
async def test_distance_cache_endpoint(client: AsyncClient):
    await client.post("/api/v1/backload/matches", json={**ROUTE, "listings": POOL})
    resp = await client.get("/api/v1/admin/distance-cache")
    assert resp.status_code == 200
    assert resp.json()["misses"] > 0
