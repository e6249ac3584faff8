"""
Tests for the calendar HTTP endpoints.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from hopigo.application.use_cases.fetch_availability import FetchAvailabilityUseCase
from hopigo.core.config import settings
from hopigo.domain.entities.booking import BookingRecord, BookingStatus
from hopigo.infrastructure.availability.http_availability import HttpAvailability
from hopigo.infrastructure.availability.schedule_availability import ScheduleAvailability
from hopigo.infrastructure.directory.provider_directory_store import ProviderDirectoryStore
from hopigo.infrastructure.store.memory_booking_store import MemoryBookingStore
from hopigo.main import app
from hopigo.wiring.dependencies import (
    get_availability,
    get_booking_store,
    get_fetch_availability_use_case,
    get_provider_directory,
)

TOMORROW = date.today() + timedelta(days=1)


@pytest.fixture
def client():
    directory = ProviderDirectoryStore()
    store = MemoryBookingStore(
        [
            BookingRecord(provider_id="1", status=BookingStatus.accepted, date=datetime(2025, 3, 10, 9)),
            BookingRecord(provider_id="1", status=BookingStatus.pending, date=datetime(2025, 3, 12, 9)),
            BookingRecord(provider_id="1", status=BookingStatus.cancelled, date=datetime(2025, 3, 14, 9)),
            BookingRecord(
                provider_id="2",
                status=BookingStatus.accepted,
                date=datetime.combine(TOMORROW, datetime.min.time()).replace(hour=9),
            ),
        ]
    )
    app.dependency_overrides[get_provider_directory] = lambda: directory
    app.dependency_overrides[get_booking_store] = lambda: store
    app.dependency_overrides[get_fetch_availability_use_case] = lambda: FetchAvailabilityUseCase(
        ScheduleAvailability(directory=directory, bookings=store)
    )
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_health(client: TestClient):
    assert client.get("/health").json() == {"status": "ok"}


def test_list_providers(client: TestClient):
    response = client.get("/api/v1/providers")
    assert response.status_code == 200
    assert {p["provider_id"] for p in response.json()} == {"1", "2", "3", "4", "5", "6"}


def test_calendar_month_grid(client: TestClient):
    response = client.get("/api/v1/calendar/2025/3", params={"provider_id": "1", "selected": "2025-03-10"})
    assert response.status_code == 200

    data = response.json()
    days = {d["key"]: d for d in data["days"]}

    assert data["title"] == "March 2025"
    assert data["weekdays"][0] == "Sun"
    assert len(data["days"]) == 42
    assert data["days"][0]["key"] == "2025-02-23"
    assert data["days"][-1]["key"] == "2025-04-05"
    assert days["2025-02-23"]["in_current_month"] is False
    assert days["2025-03-10"]["is_selected"] is True
    assert days["2025-03-10"]["dot_color"] == "#2196F3"
    assert days["2025-03-12"]["dot_color"] == "#FFC107"
    assert days["2025-03-14"]["marked"] is False


def test_calendar_month_without_provider_has_no_marks(client: TestClient):
    data = client.get("/api/v1/calendar/2025/3").json()
    assert not any(d["marked"] for d in data["days"])


def test_calendar_rejects_bad_month_and_date(client: TestClient):
    assert client.get("/api/v1/calendar/2025/13").status_code == 422
    assert client.get("/api/v1/calendar/2025/3", params={"selected": "tenth"}).status_code == 400
    # Grids for these months would spill past date.min / date.max
    assert client.get("/api/v1/calendar/1/1").status_code == 400
    assert client.get("/api/v1/calendar/9999/12").status_code == 400


def test_provider_availability(client: TestClient):
    # Provider "2" works daily 7AM-7PM; 9AM tomorrow is taken
    response = client.get("/api/v1/providers/2/availability", params={"date": TOMORROW.isoformat()})
    assert response.status_code == 200

    data = response.json()
    assert data["listing"] == "available"
    assert data["failed"] is False
    assert len(data["slots"]) == 12
    assert data["slots"][0]["label"] == "7:00 AM"
    assert [s["label"] for s in data["slots"] if not s["available"]] == ["9:00 AM"]


def test_provider_availability_errors(client: TestClient):
    yesterday = (date.today() - timedelta(days=1)).isoformat()

    assert client.get("/api/v1/providers/2/availability", params={"date": "soon"}).status_code == 400
    assert client.get("/api/v1/providers/2/availability", params={"date": yesterday}).status_code == 400
    assert client.get("/api/v1/providers/nope/availability", params={"date": TOMORROW.isoformat()}).status_code == 404
    assert client.get("/api/v1/providers/2/availability").status_code == 422


def test_shutdown_closes_http_availability_client(monkeypatch):
    monkeypatch.setattr(settings, "AVAILABILITY_BASE_URL", "https://availability.test/v1")
    get_availability.cache_clear()
    try:
        with TestClient(app):
            adapter = get_availability()
            assert isinstance(adapter, HttpAvailability)
            assert adapter._client.is_closed is False

        assert adapter._client.is_closed is True
        assert get_availability.cache_info().currsize == 0
    finally:
        get_availability.cache_clear()
