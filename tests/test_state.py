from activity_club.models import Activity, SortAttribute, SortOrder
from activity_club.state import AppState


def _state() -> AppState:
    state = AppState()
    state.catalog.set_catalog(
        [
            Activity(id="1", subject="Yoga", location="Studio 2", price=7, spaces=1),
            Activity(id="2", subject="Coding", location="IT Lab", price=20, spaces=5),
        ]
    )
    return state


def test_visible_activities_follow_search_and_sort_state() -> None:
    state = _state()
    assert [a.subject for a in state.visible_activities()] == ["Coding", "Yoga"]
    state.sort_attribute = SortAttribute.PRICE
    state.sort_order = SortOrder.DESC
    assert [a.subject for a in state.visible_activities()] == ["Coding", "Yoga"]
    state.search_text = "studio"
    assert [a.subject for a in state.visible_activities()] == ["Yoga"]


def test_derived_views_are_never_stale() -> None:
    state = _state()
    state.add_to_cart("1")
    state.add_to_cart("2")
    state.add_to_cart("2")
    assert state.cart_item_count == 3
    assert state.cart_total == 47
    assert [a.spaces for a in state.visible_activities()] == [3, 0]
    state.decrement("2")
    assert state.cart_total == 27
    assert [(line.activity_id, line.quantity) for line in state.cart_lines()] == [("1", 1), ("2", 1)]


def test_validity_flags_track_input() -> None:
    state = _state()
    state.checkout.name = "John Smith"
    state.checkout.phone = "12345"
    assert state.name_valid and state.phone_valid
    assert state.checkout_valid is False
    state.add_to_cart("1")
    assert state.checkout_valid is True
    state.checkout.phone = "12-345"
    assert state.checkout_valid is False


def test_toggle_cart() -> None:
    state = _state()
    state.toggle_cart()
    assert state.show_lessons is False
    state.toggle_cart()
    assert state.show_lessons is True
