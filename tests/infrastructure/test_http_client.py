import json

import httpx
import pytest
from activity_club.config import Settings
from activity_club.deps import create_http_client
from activity_club.domain.errors import CatalogLoadError, SubmissionError
from activity_club.infrastructure.http_client import HttpCatalogService, HttpOrderEndpoint
from activity_club.infrastructure.store import InMemoryLessonStore
from activity_club.main import create_app
from activity_club.schemas import OrderItem, OrderPayload
from activity_club.state import AppState
from activity_club.usecases.checkout import submit_order
from activity_club.utils.request_id import set_request_id

SETTINGS = Settings(api_base="http://test")


def _client(store: InMemoryLessonStore) -> httpx.AsyncClient:
    return create_http_client(SETTINGS, transport=httpx.ASGITransport(app=create_app(store)))


@pytest.mark.asyncio
async def test_fetch_all_parses_lessons() -> None:
    async with _client(InMemoryLessonStore.seeded()) as client:
        lessons = await HttpCatalogService(client).fetch_all()
    assert len(lessons) == 10
    assert lessons[0].id == "1"
    assert lessons[0].subject == "Football Training"
    assert all(lesson.spaces == 5 for lesson in lessons)


@pytest.mark.asyncio
async def test_fetch_all_raises_on_server_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"error": "down"})

    async with create_http_client(SETTINGS, transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(CatalogLoadError):
            await HttpCatalogService(client).fetch_all()


@pytest.mark.asyncio
async def test_fetch_all_raises_on_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    async with create_http_client(SETTINGS, transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(CatalogLoadError):
            await HttpCatalogService(client).fetch_all()


@pytest.mark.asyncio
async def test_set_capacity_reports_unknown_lesson() -> None:
    store = InMemoryLessonStore.seeded()
    async with _client(store) as client:
        service = HttpCatalogService(client)
        assert await service.set_capacity("2", 1) is True
        assert await service.set_capacity("missing", 5) is False
    lessons = await store.list_lessons()
    assert next(lesson for lesson in lessons if lesson.id == "2").spaces == 1


@pytest.mark.asyncio
async def test_submit_surfaces_backend_error_message() -> None:
    payload = OrderPayload(
        name="Jane Doe",
        phone="0123",
        items=[OrderItem(activity_id="1", quantity=9)],
    )
    async with _client(InMemoryLessonStore.seeded()) as client:
        with pytest.raises(SubmissionError) as excinfo:
            await HttpOrderEndpoint(client).submit(payload)
    assert str(excinfo.value) == "not enough spaces for lesson 1"


@pytest.mark.asyncio
async def test_submit_without_error_body_uses_generic_message() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="boom")

    payload = OrderPayload(name="Jane Doe", phone="0123", items=[OrderItem(activity_id="1", quantity=1)])
    async with create_http_client(SETTINGS, transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(SubmissionError) as excinfo:
            await HttpOrderEndpoint(client).submit(payload)
    assert str(excinfo.value) == "Failed to submit order"


@pytest.mark.asyncio
async def test_requests_carry_current_request_id() -> None:
    seen: list[str | None] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers.get("X-Request-ID"))
        assert json.loads(request.content) == {"spaces": 5}
        return httpx.Response(200, json={})

    async with create_http_client(SETTINGS, transport=httpx.MockTransport(handler)) as client:
        set_request_id("req-42")
        try:
            await HttpCatalogService(client).set_capacity("1", 5)
        finally:
            set_request_id(None)
        await HttpCatalogService(client).set_capacity("1", 5)
    assert seen == ["req-42", None]


@pytest.mark.asyncio
async def test_full_order_round_trip_against_api() -> None:
    store = InMemoryLessonStore.seeded()
    state = AppState()
    async with _client(store) as client:
        catalog_service = HttpCatalogService(client)
        order_endpoint = HttpOrderEndpoint(client)
        state.catalog.set_catalog(await catalog_service.fetch_all())

        for _ in range(3):
            state.add_to_cart("4")
        state.add_to_cart("9")
        state.checkout.name = "Ada Lovelace"
        state.checkout.phone = "07000000000"
        state.checkout.city = "London"

        assert await submit_order(state, catalog_service, order_endpoint) is True

    (order,) = store.orders
    assert [(item.activity_id, item.quantity) for item in order.items] == [("4", 3), ("9", 1)]
    assert all(lesson.spaces == 5 for lesson in state.catalog.items)
    assert all(lesson.spaces == 5 for lesson in await store.list_lessons())
    assert state.order_submitted is True
