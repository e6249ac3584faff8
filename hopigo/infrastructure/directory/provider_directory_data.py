from __future__ import annotations

from hopigo.domain.entities.provider import Provider

PROVIDERS: dict[str, Provider] = {
    "1": Provider(provider_id="1", name="Sarah Johnson", availability="Mon-Sat: 8AM-6PM", location="Oranjestad"),
    "2": Provider(provider_id="2", name="Mike Rodriguez", availability="Daily: 7AM-7PM", location="San Nicolas"),
    "3": Provider(provider_id="3", name="Elena Vasquez", availability="Mon-Fri: 8AM-5PM", location="Palm Beach"),
    "4": Provider(provider_id="4", name="Carlos Martinez", availability="Mon-Sat: 7AM-6PM", location="Noord"),
    "5": Provider(provider_id="5", name="Lisa Chen", availability="Mon-Sat: 9AM-6PM", location="Eagle Beach"),
    "6": Provider(provider_id="6", name="David Thompson", availability="Mon-Sat: 6AM-4PM", location="Savaneta"),
}
