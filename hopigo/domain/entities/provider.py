from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Provider:
    provider_id: str
    name: str
    availability: str  # working hours, e.g. "Mon-Sat: 8AM-6PM"
    location: str | None = None
