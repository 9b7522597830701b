"""Bounty source backed by the remote bounty listing API."""

from typing import Protocol

import httpx

from ..config import DEFAULT_BOUNTY_API_TIMEOUT, DEFAULT_BOUNTY_API_URL
from ..errors import NotFoundError, UpstreamError
from ..logging_config import get_logger
from ..models import WorkItem

logger = get_logger(__name__)


class IBountySource(Protocol):
    """Fetches the list of bounties."""

    async def start(self) -> None:
        """Open any connections."""
        ...

    async def stop(self) -> None:
        """Close connections."""
        ...

    async def fetch_work_items(self) -> list[WorkItem]:
        """Get all bounties. Raises UpstreamError on failure."""
        ...


def find_work_item(items: list[WorkItem], bounty_id: str | int) -> WorkItem:
    """Look up a bounty by id, comparing ids as strings."""
    wanted = str(bounty_id)
    for item in items:
        if item.id == wanted:
            return item
    raise NotFoundError(f"Bounty not found: {bounty_id}")


class HttpBountySource:
    """Reads bounties from GET <api_url>/bounties."""

    def __init__(
        self,
        api_url: str = DEFAULT_BOUNTY_API_URL,
        timeout: float = DEFAULT_BOUNTY_API_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def start(self) -> None:
        """Open the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            )

    async def stop(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def fetch_work_items(self) -> list[WorkItem]:
        """Get all bounties. Raises UpstreamError on failure."""
        if self._client is None:
            await self.start()

        url = f"{self._api_url}/bounties"
        try:
            response = await self._client.get(url)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            logger.error("Bounty fetch from %s failed: %s", url, e)
            raise UpstreamError(f"Bounty source request failed: {e}") from e
        except ValueError as e:
            logger.error("Bounty source at %s returned invalid JSON: %s", url, e)
            raise UpstreamError(f"Bounty source returned invalid JSON: {e}") from e

        if not isinstance(data, list) or not all(isinstance(d, dict) for d in data):
            logger.error("Bounty source at %s returned an unexpected payload", url)
            raise UpstreamError("Bounty source returned an unexpected payload")

        try:
            return [WorkItem.from_dict(entry) for entry in data]
        except (TypeError, ValueError) as e:
            logger.error("Bounty source at %s returned a malformed bounty: %s", url, e)
            raise UpstreamError(f"Bounty source returned a malformed bounty: {e}") from e
