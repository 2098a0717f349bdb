from typing import List

import pytest
from activity_club.domain.errors import CatalogLoadError
from activity_club.models import Activity
from activity_club.state import AppState
from activity_club.usecases.catalog import LOAD_ERROR_MESSAGE, fetch_catalog


class FakeCatalogService:
    def __init__(self, rows: List[Activity] | None = None) -> None:
        self.rows = rows

    async def fetch_all(self) -> List[Activity]:
        if self.rows is None:
            raise CatalogLoadError("catalog request returned 503")
        return list(self.rows)

    async def set_capacity(self, activity_id: str, value: int) -> bool:  # pragma: no cover
        return True


@pytest.mark.asyncio
async def test_fetch_replaces_catalog() -> None:
    state = AppState()
    rows = [Activity(id="1", subject="Yoga", location="Studio", price=7, spaces=5)]
    assert await fetch_catalog(state, FakeCatalogService(rows)) is True
    assert [a.id for a in state.catalog.items] == ["1"]
    assert state.loading is False
    assert state.load_error == ""


@pytest.mark.asyncio
async def test_fetch_failure_is_sticky_until_next_success() -> None:
    state = AppState()
    state.catalog.set_catalog([Activity(id="old", subject="Old", location="x", price=1, spaces=1)])

    assert await fetch_catalog(state, FakeCatalogService(None)) is False
    assert state.load_error == LOAD_ERROR_MESSAGE
    assert state.loading is False
    assert [a.id for a in state.catalog.items] == ["old"]

    assert await fetch_catalog(state, FakeCatalogService([])) is True
    assert state.load_error == ""
