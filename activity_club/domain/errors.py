class DomainError(Exception):
    """Base class for booking errors. ``str(exc)`` is safe to show to a user."""


class CatalogLoadError(DomainError):
    """The catalog could not be fetched (transport failure or non-success response)."""


class CheckoutValidationError(DomainError):
    """Checkout details are invalid or the cart is empty."""


class SubmissionError(DomainError):
    """The order endpoint rejected the order or could not be reached."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "Failed to submit order")


class CapacityResetError(DomainError):
    """A post-order capacity reset call failed."""


class LessonNotFoundError(DomainError):
    pass


class CapacityError(DomainError):
    pass
