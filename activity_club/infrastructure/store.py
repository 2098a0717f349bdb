from __future__ import annotations

import asyncio
from typing import Any, Iterable

from ..data.lessons import DEFAULT_SPACES, SEED_LESSONS
from ..domain.errors import LessonNotFoundError
from ..domain.repositories import LessonStore
from ..domain.services import LessonSnapshot, validate_order_line
from ..models import Activity
from ..schemas import OrderItem, OrderRead


class InMemoryLessonStore(LessonStore):
    """Process-local lesson catalog and order log used by the demo API."""

    def __init__(self, lessons: Iterable[Activity]) -> None:
        self._lessons: dict[str, Activity] = {lesson.id: lesson for lesson in lessons}
        self._orders: list[OrderRead] = []
        self._lock = asyncio.Lock()

    @classmethod
    def seeded(cls, rows: Iterable[dict[str, Any]] = SEED_LESSONS) -> "InMemoryLessonStore":
        return cls(Activity.model_validate({"spaces": DEFAULT_SPACES, **row}) for row in rows)

    @property
    def orders(self) -> tuple[OrderRead, ...]:
        return tuple(self._orders)

    def _get(self, lesson_id: str) -> Activity:
        lesson = self._lessons.get(lesson_id)
        if lesson is None:
            raise LessonNotFoundError(f"lesson {lesson_id} not found")
        return lesson

    async def list_lessons(self) -> list[Activity]:
        return [lesson.model_copy() for lesson in self._lessons.values()]

    async def set_spaces(self, lesson_id: str, spaces: int) -> Activity:
        async with self._lock:
            lesson = self._get(lesson_id)
            lesson.spaces = spaces
            return lesson.model_copy()

    async def place_order(
        self,
        *,
        name: str,
        phone: str,
        city: str,
        items: list[OrderItem],
    ) -> OrderRead:
        async with self._lock:
            # check every line before taking any capacity
            remaining: dict[str, int] = {}
            for item in items:
                lesson = self._get(item.activity_id)
                spaces = remaining.get(lesson.id, lesson.spaces)
                remaining[lesson.id] = validate_order_line(
                    LessonSnapshot(lesson_id=lesson.id, spaces=spaces),
                    quantity=item.quantity,
                )
            for lesson_id, spaces in remaining.items():
                self._lessons[lesson_id].spaces = spaces

            order = OrderRead(
                order_id=len(self._orders) + 1,
                name=name,
                phone=phone,
                city=city,
                items=list(items),
            )
            self._orders.append(order)
            return order
