import re

from ..schemas import CheckoutDetails
from .cart import CartLedger
from .errors import CheckoutValidationError

NAME_PATTERN = re.compile(r"[A-Za-z\s]+")
PHONE_PATTERN = re.compile(r"[0-9]+")

INVALID_CHECKOUT_MESSAGE = "Please provide a valid name, phone number, and at least one activity."


def name_valid(name: str) -> bool:
    return NAME_PATTERN.fullmatch(name.strip()) is not None


def phone_valid(phone: str) -> bool:
    return PHONE_PATTERN.fullmatch(phone.strip()) is not None


def checkout_valid(details: CheckoutDetails, cart: CartLedger) -> bool:
    return name_valid(details.name) and phone_valid(details.phone) and len(cart.lines()) > 0


def validate_checkout(details: CheckoutDetails, cart: CartLedger) -> None:
    """Raise CheckoutValidationError unless the order may be submitted."""
    if not checkout_valid(details, cart):
        raise CheckoutValidationError(INVALID_CHECKOUT_MESSAGE)
