from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..deps import get_store
from ..domain.errors import CapacityError, CheckoutValidationError, LessonNotFoundError
from ..domain.services import validate_contact
from ..infrastructure.store import InMemoryLessonStore
from ..schemas import OrderPayload, OrderRead
from ..utils.audit_log import emit_audit_log

router = APIRouter(prefix="", tags=["orders"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post("/orders", response_model=OrderRead, status_code=status.HTTP_201_CREATED)
async def create_order(
    payload: OrderPayload,
    store: InMemoryLessonStore = Depends(get_store),
):
    name = payload.name.strip()
    phone = payload.phone.strip()
    try:
        validate_contact(name=name, phone=phone)
    except CheckoutValidationError as exc:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))
    if not payload.items:
        return _error(status.HTTP_400_BAD_REQUEST, "order has no items")

    try:
        order = await store.place_order(
            name=name,
            phone=phone,
            city=payload.city.strip(),
            items=payload.items,
        )
    except LessonNotFoundError as exc:
        return _error(status.HTTP_404_NOT_FOUND, str(exc))
    except CapacityError as exc:
        return _error(status.HTTP_409_CONFLICT, str(exc))

    emit_audit_log(
        action="order.created",
        initiator="user",
        order_id=order.order_id,
        item_count=len(order.items),
    )
    return order
