from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any

import httpx

from hopigo.application.exceptions import AvailabilityContractError, AvailabilityUpstreamError
from hopigo.application.ports.availability import AvailabilityPort
from hopigo.application.utils.month_grid import format_date_key
from hopigo.core.config import settings
from hopigo.domain.entities.availability import AvailabilitySlot


class HttpAvailability(AvailabilityPort):
    """
    Availability backend reached over HTTP.

    Expects `GET {base_url}/providers/{provider_id}/availability?date=YYYY-MM-DD`
    to answer `{"slots": [{"startTime": ..., "endTime": ..., "available": ...}]}`.
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = (base_url or settings.AVAILABILITY_BASE_URL or "").rstrip("/")
        self._api_key = api_key or settings.AVAILABILITY_API_KEY
        if not self._base_url:
            raise ValueError("AVAILABILITY_BASE_URL is required for HTTP availability")

        self._client = client or httpx.AsyncClient(timeout=timeout or settings.AVAILABILITY_TIMEOUT_SECONDS)
        self._logger = logging.getLogger(__name__)

    async def fetch_availability(self, provider_id: str, day: date) -> list[AvailabilitySlot]:
        url = f"{self._base_url}/providers/{provider_id}/availability"
        headers = {"Authorization": f"Bearer {self._api_key}"} if self._api_key else {}

        try:
            response = await self._client.get(url, params={"date": format_date_key(day)}, headers=headers)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise AvailabilityUpstreamError(f"Availability request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise AvailabilityContractError("Availability: response is not JSON.") from e

        if not isinstance(data, dict) or not isinstance(data.get("slots"), list):
            raise AvailabilityContractError("Availability: expected a JSON object with a 'slots' list.")

        return [_parse_slot(item) for item in data["slots"]]

    async def aclose(self) -> None:
        await self._client.aclose()


def _parse_timestamp(value: Any, field: str) -> datetime:
    if not isinstance(value, str):
        raise AvailabilityContractError(f"Availability: '{field}' must be an ISO timestamp string.")
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise AvailabilityContractError(f"Availability: invalid '{field}' timestamp {value!r}.") from e


def _parse_slot(item: Any) -> AvailabilitySlot:
    if not isinstance(item, dict):
        raise AvailabilityContractError("Availability: each slot must be an object.")
    available = item.get("available")
    if not isinstance(available, bool):
        raise AvailabilityContractError("Availability: 'available' must be a boolean.")
    return AvailabilitySlot(
        start_time=_parse_timestamp(item.get("startTime"), "startTime"),
        end_time=_parse_timestamp(item.get("endTime"), "endTime"),
        available=available,
    )
