from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..deps import get_store
from ..domain.errors import LessonNotFoundError
from ..infrastructure.store import InMemoryLessonStore
from ..models import Activity
from ..schemas import CapacityUpdate

router = APIRouter(prefix="/lessons", tags=["lessons"])


@router.get("", response_model=List[Activity])
async def list_lessons(store: InMemoryLessonStore = Depends(get_store)) -> list[Activity]:
    return await store.list_lessons()


@router.put("/{lesson_id}", response_model=Activity)
async def update_lesson_spaces(
    lesson_id: str,
    payload: CapacityUpdate,
    store: InMemoryLessonStore = Depends(get_store),
):
    try:
        return await store.set_spaces(lesson_id, payload.spaces)
    except LessonNotFoundError as exc:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)})
