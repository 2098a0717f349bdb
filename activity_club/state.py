from __future__ import annotations

from dataclasses import dataclass, field

from .domain.cart import CartLedger
from .domain.catalog import CatalogView
from .domain.validation import checkout_valid, name_valid, phone_valid
from .models import IN_FLIGHT_STATUSES, Activity, SortAttribute, SortOrder, SubmissionStatus
from .schemas import CartLine, CheckoutDetails


@dataclass
class AppState:
    """Everything the presentation layer reads: catalog, cart, checkout and status flags."""

    catalog: CatalogView = field(default_factory=CatalogView)
    cart: CartLedger = field(init=False)
    checkout: CheckoutDetails = field(default_factory=CheckoutDetails)
    search_text: str = ""
    sort_attribute: SortAttribute = SortAttribute.SUBJECT
    sort_order: SortOrder = SortOrder.ASC
    show_lessons: bool = True
    loading: bool = False
    load_error: str = ""
    submit_error: str = ""
    order_submitted: bool = False
    status: SubmissionStatus = SubmissionStatus.IDLE

    def __post_init__(self) -> None:
        self.cart = CartLedger(self.catalog)

    @property
    def submission_in_progress(self) -> bool:
        return self.status in IN_FLIGHT_STATUSES

    def visible_activities(self) -> list[Activity]:
        return self.catalog.project(self.search_text, self.sort_attribute, self.sort_order)

    def cart_lines(self) -> list[CartLine]:
        return self.cart.lines()

    @property
    def cart_total(self) -> float:
        return self.cart.total()

    @property
    def cart_item_count(self) -> int:
        return self.cart.item_count

    @property
    def name_valid(self) -> bool:
        return name_valid(self.checkout.name)

    @property
    def phone_valid(self) -> bool:
        return phone_valid(self.checkout.phone)

    @property
    def checkout_valid(self) -> bool:
        return checkout_valid(self.checkout, self.cart)

    def toggle_cart(self) -> None:
        self.show_lessons = not self.show_lessons

    # Cart edits are ignored while an order is in flight.

    def add_to_cart(self, activity_id: str) -> bool:
        if self.submission_in_progress:
            return False
        return self.cart.add(activity_id)

    def increment(self, activity_id: str) -> bool:
        return self.add_to_cart(activity_id)

    def decrement(self, activity_id: str) -> bool:
        if self.submission_in_progress:
            return False
        return self.cart.decrement(activity_id)

    def remove_all(self, activity_id: str) -> int:
        if self.submission_in_progress:
            return 0
        return self.cart.remove_all(activity_id)
