"""
Shared test fixtures.

The engine is pure, so no database or cache server is needed: listings are
built in memory and the HTTP layer is exercised through an in-process
ASGI transport.

Equator points are used wherever exact distances matter: one degree of
longitude at lat 0 is 111.19 km, so legs of 1 / 2 / 3 degrees round to
111 / 222 / 334 km.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.domain.distance import clear_distance_cache
from src.domain.entities import CandidateRoute, CargoListing, Coordinate, Waypoint
from src.domain.enums import ListingStatus, WaypointKind

DAVAO = Coordinate(7.0707, 125.6087)
CEBU = Coordinate(10.3157, 123.8854)
MANDAUE = Coordinate(10.3236, 123.9223)
PANABO = Coordinate(7.3078, 125.6844)
MANILA = Coordinate(14.5995, 120.9842)
ZAMBOANGA = Coordinate(6.9214, 122.0790)


def eq(lng: float) -> Coordinate:
    """A point on the equator."""
    return Coordinate(0.0, lng)


def make_listing(
    listing_id: str,
    origin: Coordinate,
    dest: Coordinate,
    status: ListingStatus = ListingStatus.OPEN,
    asking_price: int = 10_000,
) -> CargoListing:
    return CargoListing(
        id=listing_id,
        origin_coord=origin,
        dest_coord=dest,
        status=status,
        asking_price=asking_price,
        weight=5.0,
        cargo_type="General",
        origin_name=f"{listing_id}-origin",
        dest_name=f"{listing_id}-dest",
    )


def make_waypoint(name: str, coord: Coordinate, kind: WaypointKind) -> Waypoint:
    return Waypoint(name=name, coordinate=coord, kind=kind)


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def _fresh_distance_cache():
    clear_distance_cache()
    yield
    clear_distance_cache()


@pytest.fixture
def davao_to_cebu() -> CandidateRoute:
    return CandidateRoute(
        origin_coord=DAVAO,
        dest_coord=CEBU,
        origin_name="Davao City",
        dest_name="Cebu City",
    )


@pytest.fixture
def listing_pool() -> list[CargoListing]:
    """A mixed pool for the Davao -> Cebu trip."""
    return [
        make_listing("far", MANILA, ZAMBOANGA, asking_price=90_000),
        make_listing("near", MANDAUE, PANABO, asking_price=25_000),
        make_listing("perfect", CEBU, DAVAO, asking_price=30_000),
        make_listing(
            "taken", CEBU, DAVAO, status=ListingStatus.CONTRACTED, asking_price=50_000
        ),
    ]


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    from src.api.app import create_app
    from src.api.middleware import limiter

    limiter.reset()
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
