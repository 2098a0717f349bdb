from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from ..domain.errors import CatalogLoadError, SubmissionError
from ..domain.repositories import CatalogService, OrderEndpoint
from ..models import Activity
from ..schemas import OrderPayload

logger = logging.getLogger(__name__)

_activity_list = TypeAdapter(list[Activity])


def _error_message(response: httpx.Response) -> Optional[str]:
    try:
        body: Any = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    for key in ("error", "detail"):
        value = body.get(key)
        if isinstance(value, str) and value:
            return value
    return None


class HttpCatalogService(CatalogService):
    def __init__(self, client: httpx.AsyncClient) -> None:
        self.client = client

    async def fetch_all(self) -> list[Activity]:
        try:
            response = await self.client.get("/lessons")
        except httpx.HTTPError as exc:
            raise CatalogLoadError("catalog request failed") from exc
        if not response.is_success:
            raise CatalogLoadError(f"catalog request returned {response.status_code}")
        try:
            return _activity_list.validate_python(response.json())
        except (ValueError, ValidationError) as exc:
            raise CatalogLoadError("catalog response is malformed") from exc

    async def set_capacity(self, activity_id: str, value: int) -> bool:
        try:
            response = await self.client.put(f"/lessons/{activity_id}", json={"spaces": value})
        except httpx.HTTPError as exc:
            logger.warning("capacity update for %s failed: %s", activity_id, exc)
            return False
        if not response.is_success:
            logger.warning("capacity update for %s returned %s", activity_id, response.status_code)
            return False
        return True


class HttpOrderEndpoint(OrderEndpoint):
    def __init__(self, client: httpx.AsyncClient) -> None:
        self.client = client

    async def submit(self, payload: OrderPayload) -> None:
        try:
            response = await self.client.post("/orders", json=payload.model_dump(by_alias=True))
        except httpx.HTTPError as exc:
            raise SubmissionError() from exc
        if not response.is_success:
            raise SubmissionError(_error_message(response))
