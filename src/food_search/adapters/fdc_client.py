"""USDA FoodData Central API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from food_search.domain.errors import DecodeError, NetworkError


class FdcClient(Protocol):
    """Interface for FoodData Central API interactions."""

    async def search_foods(self, query: str) -> dict[str, object]:
        """Search foods by query and return raw API data."""


@dataclass
class HttpxFdcClient(FdcClient):
    """HTTPX-backed FDC client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, base_url: str) -> "HttpxFdcClient":
        """Create an FDC client with a managed httpx session."""
        return cls(api_key=api_key, base_url=base_url, http_client=httpx.AsyncClient())

    async def search_foods(self, query: str) -> dict[str, object]:
        """Search foods by query with a single GET request."""
        url = f"{self.base_url}/foods/search"
        try:
            response = await self.http_client.get(
                url,
                params={"query": query, "api_key": self.api_key},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise NetworkError(
                f"FDC search returned status {exc.response.status_code}", exc
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            # Exception text may include the URL and its api_key.
            raise NetworkError(
                f"FDC search request failed: {type(exc).__name__}", exc
            ) from exc
        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError("FDC search returned a non-JSON body", exc) from exc

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
