"""Tests for parking spot and complex endpoints."""

import pytest
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from parkreserve.config import settings
from parkreserve.db.initializers.parking_initializer import initialize_parking_spots, spot_labels
from parkreserve.db.models import ParkingSpot
from parkreserve.services.parking_spots import spot_cache
from tests.conftest import COMPLEX


@pytest.mark.asyncio
async def test_list_complexes(async_client: AsyncClient):
    response = await async_client.get("/api/v1/complexes/")
    assert response.status_code == 200
    assert response.json()["complexes"] == ["Demo Parking 1", "Demo Parking 2"]


@pytest.mark.asyncio
async def test_reservation_options(async_client: AsyncClient):
    """Test the fixed enumerations exposed to clients."""
    response = await async_client.get("/api/v1/complexes/options")
    assert response.status_code == 200
    data = response.json()
    assert data["durations"] == ["30 min", "1 hour", "2 hours", "4 hours", "8 hours", "24 hours"]
    assert len(data["time_slots"]) == 24
    assert data["time_slots"][13] == "1:00 PM"
    assert data["spot_statuses"] == ["available", "occupied", "reserved"]
    assert data["reservation_buckets"] == ["upcoming", "live", "past"]


@pytest.mark.asyncio
async def test_list_parking_spots(async_client: AsyncClient, spots):
    """Test listing the spots of a complex."""
    response = await async_client.get("/api/v1/parking-spots/", params={"parking_complex": COMPLEX})
    assert response.status_code == 200
    data = response.json()
    assert [spot["spot_id"] for spot in data] == ["A1", "A2", "A3"]
    assert [spot["status"] for spot in data] == ["available", "available", "occupied"]
    assert [spot.spot_id for spot in spot_cache.get(COMPLEX)] == ["A1", "A2", "A3"]


@pytest.mark.asyncio
async def test_list_parking_spots_unknown_complex(async_client: AsyncClient):
    response = await async_client.get(
        "/api/v1/parking-spots/", params={"parking_complex": "Nowhere"}
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_parking_spots_served_from_cache(
    async_client: AsyncClient, db_session: AsyncSession, spots
):
    """Test that a second read is answered from the cache without hitting the store."""
    await async_client.get("/api/v1/parking-spots/", params={"parking_complex": COMPLEX})

    db_session.add(ParkingSpot(parking_complex=COMPLEX, spot_id="A4", status="available"))
    await db_session.commit()

    response = await async_client.get("/api/v1/parking-spots/", params={"parking_complex": COMPLEX})
    assert len(response.json()) == 3

    spot_cache.invalidate(COMPLEX)
    response = await async_client.get("/api/v1/parking-spots/", params={"parking_complex": COMPLEX})
    assert len(response.json()) == 4


@pytest.mark.asyncio
async def test_list_all_parking_spots(async_client: AsyncClient, spots):
    response = await async_client.get("/api/v1/parking-spots/all")
    assert response.status_code == 200
    data = response.json()["complexes"]
    assert len(data[COMPLEX]) == 3
    assert data["Demo Parking 2"] == []


def test_spot_labels():
    assert spot_labels(8) == ["A1", "A2", "A3", "A4", "A5", "A6", "B1", "B2"]


@pytest.mark.asyncio
async def test_initialize_parking_spots_is_idempotent(db_session: AsyncSession):
    """Test seeding the demo spots once."""
    created = await initialize_parking_spots(db_session)
    assert created == settings.SPOTS_PER_COMPLEX * len(settings.PARKING_COMPLEXES)

    assert await initialize_parking_spots(db_session) == 0

    result = await db_session.execute(select(ParkingSpot))
    all_spots = result.scalars().all()
    assert len(all_spots) == created
    assert {spot.status for spot in all_spots} == {"available"}


async def failing_execute(*args, **kwargs):
    raise SQLAlchemyError("connection lost")


@pytest.mark.asyncio
async def test_list_parking_spots_store_error(
    async_client: AsyncClient, db_session: AsyncSession, spots, monkeypatch
):
    """Test that a database error while listing spots is reported as a 500."""
    monkeypatch.setattr(db_session, "execute", failing_execute)

    response = await async_client.get(
        "/api/v1/parking-spots/", params={"parking_complex": COMPLEX}
    )
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to load parking spots"
    assert spot_cache.get(COMPLEX) is None


@pytest.mark.asyncio
async def test_list_all_parking_spots_store_error(
    async_client: AsyncClient, db_session: AsyncSession, spots, monkeypatch
):
    monkeypatch.setattr(db_session, "execute", failing_execute)

    response = await async_client.get("/api/v1/parking-spots/all")
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to load parking spots"
