"""Test the records client end to end against a mocked endpoint."""
import httpx
import pytest
from records import RecordsClient, RetrieveOptions
from records.transport import HttpxTransport
from core.logging import configure_logging, get_logger

configure_logging()
logger = get_logger(__name__)

BASE_URL = "http://localhost:3000/records"
PAGE_SIZE = 10


class FakeRecordsEndpoint:
    """In-memory /records endpoint keyed by page number."""

    def __init__(self, pages=None, fail_pages=None):
        self.pages = pages or {}
        # page number -> int status or exception to raise
        self.fail_pages = fail_pages or {}
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        page = int(request.url.params["offset"]) // int(request.url.params["limit"]) + 1
        failure = self.fail_pages.get(page)
        if isinstance(failure, Exception):
            raise failure
        if failure is not None:
            return httpx.Response(failure, text="Internal Server Error")
        return httpx.Response(200, json=self.pages.get(page, []))

    def client(self) -> RecordsClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(self))
        return RecordsClient(
            base_url=BASE_URL,
            page_size=PAGE_SIZE,
            transport=HttpxTransport(client=http_client),
        )


def _records(ids, color, disposition):
    return [{"id": i, "color": color, "disposition": disposition} for i in ids]


@pytest.mark.asyncio
async def test_single_page_of_open_red_records():
    """Page 1 full, page 2 empty: no previous or next page."""
    endpoint = FakeRecordsEndpoint(pages={1: _records(range(1, 11), "red", "open")})

    response = await endpoint.client().retrieve({"page": 1})

    assert len(response.ids) == 10
    assert len(response.open) == 10
    assert all(record.is_primary for record in response.open)
    assert response.previous_page is None
    assert response.next_page is None
    assert response.closed_primary_count == 0
    logger.info("✓ Single page retrieved", ids=response.ids)


@pytest.mark.asyncio
async def test_filtered_middle_page():
    """Brown records on page 2 with more data on page 3."""
    endpoint = FakeRecordsEndpoint(pages={
        2: [
            {"id": 11, "color": "brown", "disposition": "closed"},
            {"id": 12, "color": "brown", "disposition": "open"},
        ],
        3: _records([21], "brown", "open"),
    })

    response = await endpoint.client().retrieve(RetrieveOptions(page=2, colors=["brown"]))

    assert response.previous_page == 1
    assert response.next_page == 3
    assert len(response.open) == 1
    assert response.open[0].is_primary is False
    assert response.closed_primary_count == 0
    assert response.ids == [11, 12]


@pytest.mark.asyncio
async def test_wire_requests_for_primary_and_probe():
    """Two sequential GETs: the page, then the following page with identical filters."""
    endpoint = FakeRecordsEndpoint(pages={3: _records([1], "blue", "open")})

    await endpoint.client().retrieve({"page": 3, "colors": ["blue", "green"]})

    assert len(endpoint.requests) == 2
    primary, probe = (request.url.params for request in endpoint.requests)
    assert primary["limit"] == probe["limit"] == "10"
    assert primary["offset"] == "20"
    assert probe["offset"] == "30"
    assert primary.get_list("color[]") == probe.get_list("color[]") == ["blue", "green"]


@pytest.mark.asyncio
async def test_no_options_requests_all_colors_and_page_two_probe():
    endpoint = FakeRecordsEndpoint(pages={
        1: _records([1, 2], "green", "open"),
        2: _records([3], "red", "closed"),
    })

    response = await endpoint.client().retrieve()

    assert response.previous_page is None
    assert response.next_page == 2
    assert response.ids == [1, 2]
    primary = endpoint.requests[0].url.params
    assert primary["offset"] == "0"
    assert primary.get_list("color[]") == ["red", "brown", "blue", "yellow", "green"]


@pytest.mark.asyncio
async def test_color_filter_limits_ids():
    """ids only contain requested colors; closed primaries are counted after filtering."""
    endpoint = FakeRecordsEndpoint(pages={1: [
        {"id": 1, "color": "red", "disposition": "closed"},
        {"id": 2, "color": "blue", "disposition": "closed"},
        {"id": 3, "color": "yellow", "disposition": "open"},
    ]})

    response = await endpoint.client().retrieve({"colors": ["red", "yellow"]})

    assert response.ids == [1, 3]
    assert response.closed_primary_count == 1
    assert [record.id for record in response.open] == [3]


@pytest.mark.asyncio
async def test_primary_http_error_returns_none():
    """A failed primary fetch resolves to None and skips the probe."""
    endpoint = FakeRecordsEndpoint(fail_pages={1: 500})

    assert await endpoint.client().retrieve({"page": 1}) is None
    assert len(endpoint.requests) == 1


@pytest.mark.asyncio
async def test_primary_network_error_returns_none():
    endpoint = FakeRecordsEndpoint(fail_pages={1: httpx.ConnectError("connection refused")})

    assert await endpoint.client().retrieve() is None


@pytest.mark.asyncio
async def test_primary_malformed_body_returns_none():
    endpoint = FakeRecordsEndpoint(pages={1: {"unexpected": "object"}})

    assert await endpoint.client().retrieve() is None


@pytest.mark.asyncio
async def test_probe_network_error_keeps_result():
    """The page is still returned when the look-ahead fails."""
    endpoint = FakeRecordsEndpoint(
        pages={1: _records([1], "red", "open"), 2: _records([2], "red", "open")},
        fail_pages={2: httpx.ConnectError("connection reset")},
    )

    response = await endpoint.client().retrieve({"page": 1})

    assert response is not None
    assert response.ids == [1]
    assert response.next_page is None


@pytest.mark.asyncio
async def test_probe_http_error_keeps_result():
    endpoint = FakeRecordsEndpoint(
        pages={4: _records([31], "yellow", "open")},
        fail_pages={5: 503},
    )

    response = await endpoint.client().retrieve({"page": 4})

    assert response.previous_page == 3
    assert response.next_page is None


@pytest.mark.asyncio
@pytest.mark.parametrize("page", [0, -2, 1.5])
async def test_invalid_page_returns_none_without_request(page):
    """Invalid pages are rejected up front rather than sent as a bad offset."""
    endpoint = FakeRecordsEndpoint(pages={1: _records([1], "red", "open")})

    assert await endpoint.client().retrieve({"page": page}) is None
    assert endpoint.requests == []


@pytest.mark.asyncio
async def test_client_closes_only_owned_transport():
    """A caller-supplied transport stays open after the client closes."""
    endpoint = FakeRecordsEndpoint()
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(endpoint))
    transport = HttpxTransport(client=http_client)

    async with RecordsClient(base_url=BASE_URL, transport=transport) as client:
        await client.retrieve()

    assert not http_client.is_closed
    await http_client.aclose()


@pytest.mark.asyncio
async def test_response_serializes_to_wire_shape():
    endpoint = FakeRecordsEndpoint(pages={
        2: [{"id": 5, "color": "green", "disposition": "open"}],
    })

    response = await endpoint.client().retrieve({"page": 2})

    assert response.to_dict() == {
        "ids": [5],
        "open": [{"id": 5, "color": "green", "disposition": "open", "isPrimary": False}],
        "closedPrimaryCount": 0,
        "previousPage": 1,
        "nextPage": None,
    }


@pytest.mark.asyncio
async def test_unhashable_color_name_still_resolves():
    """A nested list as a color name only warns; nothing on the page matches it."""
    endpoint = FakeRecordsEndpoint(pages={1: _records([1], "red", "open")})

    response = await endpoint.client().retrieve({"colors": [["red"]]})

    assert response is not None
    assert response.ids == []
    assert response.closed_primary_count == 0
    assert len(endpoint.requests) == 2


@pytest.mark.asyncio
async def test_malformed_base_url_returns_none():
    endpoint = FakeRecordsEndpoint(pages={1: _records([1], "red", "open")})
    client = endpoint.client()
    client.base_url = "http://[::1"

    assert await client.retrieve() is None
    assert endpoint.requests == []
