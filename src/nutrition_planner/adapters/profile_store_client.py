"""Profile store API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class ProfileStoreClient(Protocol):
    """Interface for reading stored nutrition profiles."""

    async def get_profile(self, profile_id: str) -> dict[str, object]:
        """Fetch a profile by id and return raw API data."""


@dataclass
class HttpxProfileStoreClient(ProfileStoreClient):
    """HTTPX-backed profile store client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(
        cls, base_url: str, timeout_seconds: float = 15
    ) -> "HttpxProfileStoreClient":
        """Create a profile store client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def get_profile(self, profile_id: str) -> dict[str, object]:
        """Fetch a profile by id."""
        url = f"{self.base_url}/api/users/profile/{profile_id}"
        response = await self.http_client.get(url, timeout=self.timeout_seconds)
        response.raise_for_status()
        try:
            payload = response.json()
        except ValueError as exc:
            raise httpx.DecodingError(
                "Profile store returned invalid JSON", request=response.request
            ) from exc
        if not isinstance(payload, dict):
            raise httpx.DecodingError(
                "Profile store returned a non-object profile",
                request=response.request,
            )
        return payload

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
