"""External record store HTTP client."""

from dataclasses import dataclass
from typing import Protocol
from urllib.parse import quote

import httpx


class RecordStoreClient(Protocol):
    """Interface for the external flight record store."""

    async def list_records(self, admin_request: bool = False) -> object:
        """Return the raw store listing."""

    async def create_record(self, payload: dict[str, str]) -> dict[str, object]:
        """Create a record and return the raw store response."""

    async def delete_record(self, record_id: str, user_id: str, is_admin: bool) -> None:
        """Delete a record on behalf of the given identity."""


@dataclass
class HttpxRecordStoreClient(RecordStoreClient):
    """HTTPX-backed record store client.

    Non-2xx responses raise ``httpx.HTTPStatusError``; callers translate them.
    """

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 10.0

    @classmethod
    def create(cls, base_url: str, timeout: float = 10.0) -> "HttpxRecordStoreClient":
        """Create a record store client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def list_records(self, admin_request: bool = False) -> object:
        """Fetch every record from the store."""
        headers = {"X-Admin-Request": "true"} if admin_request else None
        response = await self.http_client.get(
            f"{self.base_url}/db", headers=headers, timeout=self.timeout
        )
        response.raise_for_status()
        return response.json()

    async def create_record(self, payload: dict[str, str]) -> dict[str, object]:
        """Post a new record to the store."""
        response = await self.http_client.post(
            f"{self.base_url}/db", json=payload, timeout=self.timeout
        )
        response.raise_for_status()
        return response.json()

    async def delete_record(self, record_id: str, user_id: str, is_admin: bool) -> None:
        """Delete a record, forwarding the caller identity as headers."""
        response = await self.http_client.delete(
            f"{self.base_url}/db/{quote(record_id, safe='')}",
            headers={
                "X-User-ID": user_id.encode("utf-8"),
                "X-Is-Admin": "true" if is_admin else "false",
            },
            timeout=self.timeout,
        )
        response.raise_for_status()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
