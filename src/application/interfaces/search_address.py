from abc import ABC, abstractmethod


class SearchAddress(ABC):
    """Port for the shareable address that mirrors the current filter state."""

    @abstractmethod
    async def read(self) -> dict[str, str]:
        ...

    @abstractmethod
    async def write(self, params: dict[str, str]) -> None:
        """Replace the address parameters with ``params``."""
        ...
