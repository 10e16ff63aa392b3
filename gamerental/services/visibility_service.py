"""
Order and tracking visibility.

The owner of an order always sees it; employees and managers see every
order. Anyone else gets NotFound, exactly as if the record did not exist.
"""
import logging
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload
from gamerental.core.config import settings
from gamerental.core.errors import NotFound, VisibilityDenied
from gamerental.models.rental_order import RentalOrder, GamesInOrder
from gamerental.models.tracking import TrackingInfo
from gamerental.models.user import STAFF_ROLES
from gamerental.schemas.order import OrderDetail, OrderLine, OrderSummary
from gamerental.schemas.tracking import TrackingDetail
from gamerental.services.auth_service import find_role

logger = logging.getLogger(__name__)


def can_view(caller: str, owner: str, db: Session) -> bool:
    """True if the caller owns the record or is staff."""
    if caller == owner:
        return True
    return find_role(caller, db) in STAFF_ROLES


def _check_visible(caller: str, owner: str, record_id: str, db: Session) -> None:
    if not can_view(caller, owner, db):
        logger.warning("%s denied access to %s", caller, record_id)
        raise VisibilityDenied(f"Not found: {record_id}")


def visible_order(caller: str, rental_order_id: str, db: Session) -> OrderDetail:
    """Get order details with its games and tracking ID."""
    order = db.query(RentalOrder).options(
        joinedload(RentalOrder.games).joinedload(GamesInOrder.game),
        joinedload(RentalOrder.tracking)
    ).filter(RentalOrder.rental_order_id == rental_order_id).first()
    
    if not order:
        raise NotFound(f"Not found: {rental_order_id}")
    _check_visible(caller, order.login, rental_order_id, db)
    
    games = [
        OrderLine(
            game_id=line.game_id,
            game_name=line.game.game_name if line.game else None,
            units_ordered=line.units_ordered
        )
        for line in sorted(order.games, key=lambda g: g.game_id)
    ]
    
    return OrderDetail(
        **OrderSummary.model_validate(order).model_dump(),
        tracking_id=order.tracking.tracking_id if order.tracking else None,
        games=games
    )


def visible_tracking(caller: str, tracking_id: str, db: Session) -> TrackingDetail:
    """Get a tracking record."""
    tracking = db.query(TrackingInfo).options(
        joinedload(TrackingInfo.order)
    ).filter(TrackingInfo.tracking_id == tracking_id).first()
    
    if not tracking:
        raise NotFound(f"Not found: {tracking_id}")
    _check_visible(caller, tracking.order.login, tracking_id, db)
    
    return TrackingDetail.model_validate(tracking)


def _owned_orders(caller: str, db: Session):
    return db.query(RentalOrder).filter(
        RentalOrder.login == caller
    ).order_by(
        RentalOrder.order_timestamp.desc(),
        # IDs share a prefix; longer means a larger sequence number
        func.length(RentalOrder.rental_order_id).desc(),
        RentalOrder.rental_order_id.desc()
    )


def all_orders(caller: str, db: Session) -> List[OrderSummary]:
    """List the caller's own orders, newest first."""
    return [OrderSummary.model_validate(order) for order in _owned_orders(caller, db).all()]


def recent_orders(caller: str, db: Session, limit: Optional[int] = None) -> List[OrderSummary]:
    """
    List the caller's most recent orders, newest first.
    History is owner-scoped for every role, staff included.
    """
    if limit is None:
        limit = settings.RECENT_ORDERS_LIMIT
    orders = _owned_orders(caller, db).limit(limit).all()
    return [OrderSummary.model_validate(order) for order in orders]
