import httpx
from fastapi import Request

from .config import Settings, get_settings
from .infrastructure.store import InMemoryLessonStore
from .utils.request_id import request_id_headers


async def _propagate_request_id(request: httpx.Request) -> None:
    request.headers.update(request_id_headers())


def create_http_client(
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    settings = settings or get_settings()
    return httpx.AsyncClient(
        base_url=settings.api_base,
        timeout=httpx.Timeout(settings.http_timeout),
        transport=transport,
        event_hooks={"request": [_propagate_request_id]},
    )


async def get_store(request: Request) -> InMemoryLessonStore:
    return request.app.state.store
