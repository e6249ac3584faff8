from __future__ import annotations

from hopigo.application.ports.provider_directory import ProviderDirectoryPort
from hopigo.domain.entities.provider import Provider
from hopigo.infrastructure.directory.provider_directory_data import PROVIDERS


class ProviderDirectoryStore(ProviderDirectoryPort):
    def __init__(self, providers: dict[str, Provider] | None = None) -> None:
        self._providers = PROVIDERS if providers is None else providers

    def get_provider(self, provider_id: str) -> Provider | None:
        return self._providers.get(provider_id.strip())

    def list_providers(self) -> list[Provider]:
        return list(self._providers.values())
