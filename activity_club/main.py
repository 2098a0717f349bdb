from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response

from .infrastructure.store import InMemoryLessonStore
from .routers import lessons, orders
from .utils.request_id import REQUEST_ID_HEADER, generate_request_id, get_request_id, set_request_id


async def request_id_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    request_id = request.headers.get(REQUEST_ID_HEADER) or generate_request_id()
    previous = get_request_id()
    set_request_id(request_id)
    try:
        response = await call_next(request)
    finally:
        set_request_id(previous)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


def create_app(store: InMemoryLessonStore | None = None) -> FastAPI:
    app = FastAPI(title="Activity Club API")
    app.state.store = store or InMemoryLessonStore.seeded()

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.middleware("http")(request_id_middleware)
    app.include_router(lessons.router)
    app.include_router(orders.router)
    return app


app = create_app()
