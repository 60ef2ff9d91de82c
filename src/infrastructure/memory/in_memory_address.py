from src.application.interfaces.search_address import SearchAddress


class InMemoryAddress(SearchAddress):
    """Holds address parameters in memory and records every write."""

    def __init__(self, params: dict[str, str] | None = None) -> None:
        self.params: dict[str, str] = dict(params or {})
        self.history: list[dict[str, str]] = []

    async def read(self) -> dict[str, str]:
        return dict(self.params)

    async def write(self, params: dict[str, str]) -> None:
        self.params = dict(params)
        self.history.append(dict(params))
