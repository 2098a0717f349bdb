from __future__ import annotations

from typing import Any, Iterable

from ..models import Activity, SortAttribute, SortOrder


def number_text(value: float | int) -> str:
    """Decimal text of a number, with integral floats rendered without ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def matches_search(activity: Activity, query: str) -> bool:
    q = query.strip().lower()
    if not q:
        return True
    return (
        q in activity.subject.lower()
        or q in activity.location.lower()
        or q in number_text(activity.price)
        or q in number_text(activity.spaces)
    )


def _sort_key(attribute: SortAttribute):
    def key(activity: Activity) -> Any:
        value = getattr(activity, attribute.value)
        if value is None:
            return ""
        if isinstance(value, str):
            return value.lower()
        return value

    return key


class CatalogView:
    """Locally cached catalog plus its search/sort projection."""

    def __init__(self, items: Iterable[Activity] = ()) -> None:
        self._items: list[Activity] = list(items)

    @property
    def items(self) -> tuple[Activity, ...]:
        return tuple(self._items)

    def set_catalog(self, items: Iterable[Activity]) -> None:
        self._items = list(items)

    def find(self, activity_id: str) -> Activity | None:
        for activity in self._items:
            if activity.id == activity_id:
                return activity
        return None

    def project(
        self,
        search_text: str = "",
        sort_attribute: SortAttribute | str = SortAttribute.SUBJECT,
        sort_order: SortOrder | str = SortOrder.ASC,
    ) -> list[Activity]:
        attribute = SortAttribute(sort_attribute)
        order = SortOrder(sort_order)
        matched = [activity for activity in self._items if matches_search(activity, search_text)]
        # sorted() keeps equal keys in input order for both directions
        return sorted(matched, key=_sort_key(attribute), reverse=order == SortOrder.DESC)
