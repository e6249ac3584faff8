from __future__ import annotations

from abc import ABC, abstractmethod

from hopigo.domain.entities.provider import Provider


class ProviderDirectoryPort(ABC):
    @abstractmethod
    def get_provider(self, provider_id: str) -> Provider | None:
        """Get provider by id. Returns None if unknown."""
        raise NotImplementedError

    @abstractmethod
    def list_providers(self) -> list[Provider]:
        raise NotImplementedError
