from __future__ import annotations

from typing import Protocol

from ..models import Activity
from ..schemas import OrderItem, OrderPayload, OrderRead


class CatalogService(Protocol):
    async def fetch_all(self) -> list[Activity]: ...

    async def set_capacity(self, activity_id: str, value: int) -> bool: ...


class OrderEndpoint(Protocol):
    async def submit(self, payload: OrderPayload) -> None: ...


class LessonStore(Protocol):
    async def list_lessons(self) -> list[Activity]: ...

    async def set_spaces(self, lesson_id: str, spaces: int) -> Activity: ...

    async def place_order(
        self,
        *,
        name: str,
        phone: str,
        city: str,
        items: list[OrderItem],
    ) -> OrderRead: ...
