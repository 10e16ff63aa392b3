"""
Tests for order and tracking visibility.
"""
from datetime import datetime, timedelta
from decimal import Decimal
import pytest
from gamerental.core.errors import NotFound, VisibilityDenied
from gamerental.models import RentalOrder
from gamerental.services.order_service import place_order
from gamerental.services.visibility_service import (
    visible_order, visible_tracking, all_orders, recent_orders
)

START = datetime(2025, 6, 1, 12, 0, 0)


@pytest.fixture
def bob_order(db):
    return place_order("bob", [("g1", 1), ("g2", 2)], db, now=START)


def test_owner_sees_order(db, bob_order):
    """Test the owner gets full order details."""
    detail = visible_order("bob", bob_order.order.rental_order_id, db)
    
    assert detail.login == "bob"
    assert detail.total_price == Decimal("19.00")
    assert detail.tracking_id == bob_order.tracking_id
    assert [(g.game_name, g.units_ordered) for g in detail.games] == [
        ("Space Raiders", 1), ("Dungeon Tales", 2)
    ]


def test_other_customer_gets_not_found(db, bob_order):
    """Test another customer cannot tell the order exists."""
    with pytest.raises(NotFound) as exc_info:
        visible_order("alice", bob_order.order.rental_order_id, db)
    assert isinstance(exc_info.value, VisibilityDenied)
    
    with pytest.raises(NotFound) as missing_info:
        visible_order("alice", "gamerentalorder9999", db)
    assert str(exc_info.value).startswith("Not found")
    assert str(missing_info.value).startswith("Not found")


@pytest.mark.parametrize("caller", ["erin", "mona"])
def test_staff_sees_any_order(db, bob_order, caller):
    """Test employees and managers see orders they do not own."""
    detail = visible_order(caller, bob_order.order.rental_order_id, db)
    assert detail.rental_order_id == bob_order.order.rental_order_id
    assert len(detail.games) == 2


def test_tracking_visibility(db, bob_order):
    """Test tracking records follow the same visibility rule."""
    detail = visible_tracking("bob", bob_order.tracking_id, db)
    assert detail.status == "Order Placed"
    assert detail.rental_order_id == bob_order.order.rental_order_id
    
    assert visible_tracking("erin", bob_order.tracking_id, db).tracking_id == bob_order.tracking_id
    with pytest.raises(NotFound):
        visible_tracking("alice", bob_order.tracking_id, db)
    with pytest.raises(NotFound):
        visible_tracking("bob", "trackingid9999", db)


def test_order_history_is_owner_scoped(db, bob_order):
    """Test history never lists other users' orders, even for staff."""
    place_order("alice", [("g3", 1)], db, now=START)
    
    assert [o.login for o in all_orders("bob", db)] == ["bob"]
    assert [o.login for o in all_orders("alice", db)] == ["alice"]
    assert all_orders("mona", db) == []


def test_recent_orders_newest_first(db):
    """Test recent history returns the latest five, newest first."""
    placed = [
        place_order("alice", [("g2", 1)], db, now=START + timedelta(days=i)).order.rental_order_id
        for i in range(7)
    ]
    
    recent = recent_orders("alice", db)
    assert [o.rental_order_id for o in recent] == list(reversed(placed))[:5]
    assert len(all_orders("alice", db)) == 7
    assert len(recent_orders("alice", db, limit=2)) == 2


def test_recent_orders_zero_limit(db):
    """Test an explicit limit of zero lists nothing."""
    place_order("alice", [("g2", 1)], db, now=START)

    assert recent_orders("alice", db, limit=0) == []
    assert len(recent_orders("alice", db)) == 1


def test_same_timestamp_orders_by_sequence_number(db):
    """Test ties on timestamp list the higher order number first."""
    for sequence_value in (9999, 10000):
        db.add(RentalOrder(
            rental_order_id=f"gamerentalorder{sequence_value}", login="alice", no_of_games=1,
            total_price=Decimal("4.50"), order_timestamp=START, due_date=(START + timedelta(days=30)).date()
        ))
    db.commit()

    assert [o.rental_order_id for o in all_orders("alice", db)] == [
        "gamerentalorder10000", "gamerentalorder9999"
    ]
    assert recent_orders("alice", db, limit=1)[0].rental_order_id == "gamerentalorder10000"
