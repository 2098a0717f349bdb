from __future__ import annotations

import asyncio
import logging

from ..config import get_settings
from ..domain.errors import CapacityResetError, CheckoutValidationError, SubmissionError
from ..domain.repositories import CatalogService, OrderEndpoint
from ..domain.validation import validate_checkout
from ..models import SubmissionStatus
from ..schemas import OrderPayload
from ..state import AppState
from ..utils.audit_log import emit_audit_log
from ..utils.request_id import generate_request_id, set_request_id
from .catalog import fetch_catalog

logger = logging.getLogger(__name__)


async def submit_order(
    state: AppState,
    catalog_service: CatalogService,
    order_endpoint: OrderEndpoint,
    *,
    reset_capacity: int | None = None,
) -> bool:
    """Validate, submit, reset every activity's capacity, then re-fetch the catalog.

    Returns True only when the order was accepted. A call made while another
    submission is in flight is ignored and returns False.
    """
    if state.submission_in_progress:
        logger.warning("submit ignored: an order is already in flight")
        return False

    if reset_capacity is None:
        reset_capacity = get_settings().reset_capacity
    set_request_id(generate_request_id())
    state.submit_error = ""
    state.order_submitted = False
    state.status = SubmissionStatus.VALIDATING
    try:
        try:
            validate_checkout(state.checkout, state.cart)
        except CheckoutValidationError as exc:
            state.submit_error = str(exc)
            state.status = SubmissionStatus.FAILED
            emit_audit_log(action="order.invalid", initiator="user", message=str(exc))
            return False

        lines = state.cart.lines()
        payload = OrderPayload.from_checkout(details=state.checkout, lines=lines)
        state.status = SubmissionStatus.SUBMITTING
        try:
            await order_endpoint.submit(payload)
        except SubmissionError as exc:
            state.submit_error = str(exc)
            state.status = SubmissionStatus.FAILED
            emit_audit_log(action="order.rejected", initiator="user", level="warning", message=str(exc))
            return False
        emit_audit_log(
            action="order.submitted",
            initiator="user",
            item_count=len(payload.items),
            total=state.cart.total(),
        )

        state.status = SubmissionStatus.RESETTING_CAPACITIES
        await _reset_capacities(state, catalog_service, reset_capacity)

        state.order_submitted = True
        state.cart.clear()
        state.checkout.clear()
        state.status = SubmissionStatus.REFETCHING_CATALOG
        await fetch_catalog(state, catalog_service)

        state.status = SubmissionStatus.SUCCESS
        return True
    except Exception:
        state.status = SubmissionStatus.FAILED
        raise
    finally:
        set_request_id(None)


async def _reset_capacities(state: AppState, catalog_service: CatalogService, value: int) -> None:
    # Blanket reset of every known activity, not only the ones ordered.
    activity_ids = [activity.id for activity in state.catalog.items]
    results = await asyncio.gather(
        *(catalog_service.set_capacity(activity_id, value) for activity_id in activity_ids),
        return_exceptions=True,
    )
    for activity_id, result in zip(activity_ids, results):
        if result is True:
            continue
        # Failures are logged only; the re-fetch shows whatever the server holds.
        error = result if isinstance(result, BaseException) else CapacityResetError(f"reset of {activity_id} failed")
        logger.warning("capacity reset for %s failed: %s", activity_id, error)
        emit_audit_log(
            action="capacity.reset_failed",
            initiator="system",
            activity_id=activity_id,
            level="warning",
            message=str(error),
        )
    emit_audit_log(
        action="capacity.reset",
        initiator="system",
        item_count=len(activity_ids),
        extra={"spaces": value},
    )
