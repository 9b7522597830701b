"""Tests for HttpBountySource."""

import httpx
import pytest

from swarm.bounties import HttpBountySource, find_work_item
from swarm.decomposition import decompose
from swarm.errors import NotFoundError, UpstreamError


def _source(handler):
    return HttpBountySource(
        api_url="https://bounties.test/",
        transport=httpx.MockTransport(handler),
    )


class TestFetchWorkItems:
    """Tests for HttpBountySource.fetch_work_items()."""

    @pytest.mark.asyncio
    async def test_fetch_parses_bounties(self, sample_bounties):
        """Test that the JSON array is parsed into WorkItems."""
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=sample_bounties)

        source = _source(handler)
        await source.start()
        try:
            items = await source.fetch_work_items()
        finally:
            await source.stop()

        assert str(requests[0].url) == "https://bounties.test/bounties"
        assert requests[0].method == "GET"
        assert [item.id for item in items] == ["1", "2", "3"]
        assert items[0].tags == ["dashboard"]

    @pytest.mark.asyncio
    async def test_fetch_opens_client_lazily(self):
        source = _source(lambda request: httpx.Response(200, json=[]))
        try:
            assert await source.fetch_work_items() == []
        finally:
            await source.stop()

    @pytest.mark.asyncio
    async def test_network_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        source = _source(handler)
        with pytest.raises(UpstreamError, match="request failed"):
            await source.fetch_work_items()
        await source.stop()

    @pytest.mark.asyncio
    async def test_error_status(self):
        source = _source(lambda request: httpx.Response(503, text="maintenance"))
        with pytest.raises(UpstreamError):
            await source.fetch_work_items()
        await source.stop()

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        source = _source(lambda request: httpx.Response(200, text="<html>oops</html>"))
        with pytest.raises(UpstreamError, match="invalid JSON"):
            await source.fetch_work_items()
        await source.stop()

    @pytest.mark.asyncio
    async def test_unexpected_payload(self):
        source = _source(lambda request: httpx.Response(200, json={"bounties": []}))
        with pytest.raises(UpstreamError, match="unexpected payload"):
            await source.fetch_work_items()
        await source.stop()

    @pytest.mark.asyncio
    async def test_non_list_tags(self):
        source = _source(
            lambda request: httpx.Response(200, json=[{"id": 1, "tags": 5}])
        )
        with pytest.raises(UpstreamError, match="malformed bounty"):
            await source.fetch_work_items()
        await source.stop()

    @pytest.mark.asyncio
    async def test_non_string_fields_are_coerced(self):
        """Test that odd field types still give a usable WorkItem."""
        payload = [{"id": 7, "title": 12, "description": 42, "tags": ["api", 3]}]
        source = _source(lambda request: httpx.Response(200, json=payload))
        try:
            items = await source.fetch_work_items()
        finally:
            await source.stop()

        item = items[0]
        assert item.title == "12"
        assert item.description == "42"
        assert item.tags == ["api", "3"]
        assert [task.name for task in decompose(item)] == [
            "API/Backend Development",
            "Documentation & Testing",
        ]

    @pytest.mark.asyncio
    async def test_stop_is_idempotent(self):
        source = _source(lambda request: httpx.Response(200, json=[]))
        await source.start()
        await source.stop()
        await source.stop()


class TestFindWorkItem:
    """Tests for find_work_item()."""

    def test_matches_int_and_str_ids(self, work_items):
        assert find_work_item(work_items, 2).title == "Plain task"
        assert find_work_item(work_items, "1").title == "Build analytics dashboard"

    def test_unknown_id(self, work_items):
        with pytest.raises(NotFoundError):
            find_work_item(work_items, 404)
