from dataclasses import dataclass

from .errors import CapacityError, CheckoutValidationError
from .validation import name_valid, phone_valid


@dataclass(frozen=True)
class LessonSnapshot:
    lesson_id: str
    spaces: int


def validate_order_line(snapshot: LessonSnapshot, *, quantity: int) -> int:
    """
    Pure validation: ensures the requested quantity fits the remaining spaces.
    Returns remaining spaces after booking if OK. Raises domain errors otherwise.
    """
    if quantity <= 0:
        raise CapacityError("quantity must be positive")
    if quantity > snapshot.spaces:
        raise CapacityError(f"not enough spaces for lesson {snapshot.lesson_id}")
    return snapshot.spaces - quantity


def validate_contact(*, name: str, phone: str) -> None:
    if not name_valid(name):
        raise CheckoutValidationError("invalid name")
    if not phone_valid(phone):
        raise CheckoutValidationError("invalid phone")
