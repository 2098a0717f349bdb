from __future__ import annotations

from ..schemas import CartLine
from .catalog import CatalogView


class CartLedger:
    """Cart kept as a flat sequence of activity ids, one entry per reserved space.

    Every mutation moves capacity between the ledger and the paired cached
    ``Activity.spaces`` so that ``quantity(id) + spaces == original capacity``.
    """

    def __init__(self, catalog: CatalogView) -> None:
        self._catalog = catalog
        self._entries: list[str] = []

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    @property
    def item_count(self) -> int:
        return len(self._entries)

    def quantity(self, activity_id: str) -> int:
        return self._entries.count(activity_id)

    def can_reserve(self, activity_id: str) -> bool:
        activity = self._catalog.find(activity_id)
        return activity is not None and activity.spaces > 0

    def add(self, activity_id: str) -> bool:
        activity = self._catalog.find(activity_id)
        if activity is None or activity.spaces <= 0:
            return False
        self._entries.append(activity_id)
        activity.spaces -= 1
        return True

    increment = add

    def decrement(self, activity_id: str) -> bool:
        if activity_id not in self._entries:
            return False
        self._entries.remove(activity_id)
        activity = self._catalog.find(activity_id)
        if activity is not None:
            activity.spaces += 1
        return True

    def remove_all(self, activity_id: str) -> int:
        """Drop every entry for ``activity_id`` and return how many were removed."""
        count = self._entries.count(activity_id)
        if count == 0:
            return 0
        self._entries = [entry for entry in self._entries if entry != activity_id]
        activity = self._catalog.find(activity_id)
        if activity is not None:
            activity.spaces += count
        return count

    def lines(self) -> list[CartLine]:
        counts: dict[str, int] = {}
        for entry in self._entries:
            counts[entry] = counts.get(entry, 0) + 1
        return [
            CartLine.from_activity(
                activity_id=activity_id,
                activity=self._catalog.find(activity_id),
                quantity=quantity,
            )
            for activity_id, quantity in counts.items()
        ]

    def total(self) -> float:
        return sum((line.subtotal for line in self.lines()), 0.0)

    def clear(self) -> None:
        # capacities are restored by the post-order reset, not here
        self._entries = []
