"""
Order placement service.

An order, its line items and its initial tracking record are written in a
single transaction: either all three exist afterwards or none do.
"""
import logging
from collections import OrderedDict
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple, Union
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from gamerental.core.config import settings
from gamerental.core.errors import EmptyOrder, PersistenceFailure, UnknownGame, InvalidField
from gamerental.core.utils import format_money, to_money, validate_field
from gamerental.db.sequence import next_sequence_value
from gamerental.models.rental_order import RentalOrder, GamesInOrder
from gamerental.models.tracking import TrackingInfo
from gamerental.schemas.order import (
    OrderItemIn, OrderLine, OrderPlacement, OrderSummary, RejectedItem
)
from gamerental.services.auth_service import role_of
from gamerental.services.catalog_service import get_price

logger = logging.getLogger(__name__)

OrderItem = Union[OrderItemIn, Tuple[str, int]]


def _as_item(item: OrderItem) -> OrderItemIn:
    """Raises InvalidField when the quantity is not an integer."""
    if isinstance(item, OrderItemIn):
        return item
    game_id, quantity = item
    return validate_field("units_ordered", OrderItemIn, {"game_id": game_id, "quantity": quantity})


def price_items(
    items: Iterable[OrderItem],
    db: Session
) -> Tuple[List[OrderLine], List[RejectedItem], Decimal]:
    """
    Validate requested items against the catalog.

    Unknown games and non-integer or non-positive quantities are rejected
    individually and left out; the rest are accepted. Repeated game IDs are
    merged into one line with their units summed.

    Returns:
        (accepted lines, rejected items, total price of accepted lines)
    """
    accepted: "OrderedDict[str, OrderLine]" = OrderedDict()
    rejected: List[RejectedItem] = []
    total = Decimal("0")

    for raw in items:
        try:
            item = _as_item(raw)
        except InvalidField as error:
            game_id = str(raw[0])
            rejected.append(RejectedItem(game_id=game_id, reason=str(error)))
            logger.warning("Rejected %s: %s", game_id, error)
            continue

        if item.quantity <= 0:
            error = InvalidField("units_ordered", "must be a positive integer")
            rejected.append(RejectedItem(game_id=item.game_id, reason=str(error)))
            logger.warning("Rejected %s: %s", item.game_id, error)
            continue

        price = get_price(item.game_id, db)
        if price is None:
            error = UnknownGame(item.game_id)
            rejected.append(RejectedItem(game_id=item.game_id, reason=str(error)))
            logger.warning("Rejected %s: %s", item.game_id, error)
            continue

        total += price * item.quantity
        if item.game_id in accepted:
            accepted[item.game_id].units_ordered += item.quantity
        else:
            accepted[item.game_id] = OrderLine(
                game_id=item.game_id,
                units_ordered=item.quantity,
                unit_price=price
            )

    return list(accepted.values()), rejected, to_money(total)


def format_order_id(sequence_value: int) -> str:
    return f"{settings.ORDER_ID_PREFIX}{sequence_value}"


def format_tracking_id(sequence_value: int) -> str:
    return f"{settings.TRACKING_ID_PREFIX}{sequence_value}"


def allocate_order_number(db: Session) -> int:
    """
    Draw the next order number in its own committed step.

    Numbers whose order or tracking ID is already taken (rows loaded from
    elsewhere) are skipped, so the sequence never gets stuck on them. A failed
    order does not give its number back; gaps are expected.
    """
    while True:
        value = next_sequence_value(
            db, settings.ORDER_SEQUENCE_NAME, start=settings.ORDER_SEQUENCE_START
        )
        db.commit()

        order_taken = db.query(RentalOrder.rental_order_id).filter(
            RentalOrder.rental_order_id == format_order_id(value)
        ).first()
        tracking_taken = db.query(TrackingInfo.tracking_id).filter(
            TrackingInfo.tracking_id == format_tracking_id(value)
        ).first()
        if not order_taken and not tracking_taken:
            return value
        logger.warning("Skipping order number %d: ID already in use", value)


def place_order(
    login: str,
    items: Iterable[OrderItem],
    db: Session,
    now: Optional[datetime] = None
) -> OrderPlacement:
    """
    Place a rental order for ``login``.

    Raises:
        AuthFailure: login does not exist
        EmptyOrder: no requested item was accepted; nothing is written
        PersistenceFailure: the store rejected the transaction; rolled back
    """
    try:
        role_of(login, db)
        lines, rejected, total_price = price_items(items, db)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Pricing order for %s failed", login)
        raise PersistenceFailure("Order could not be placed") from exc

    if not lines:
        logger.warning("Empty order for %s (%d rejected)", login, len(rejected))
        raise EmptyOrder(rejected)

    order_timestamp = now or datetime.now()
    due_date = (order_timestamp + timedelta(days=settings.RENTAL_PERIOD_DAYS)).date()

    try:
        sequence_value = allocate_order_number(db)
        rental_order_id = format_order_id(sequence_value)
        tracking_id = format_tracking_id(sequence_value)

        order = RentalOrder(
            rental_order_id=rental_order_id,
            login=login,
            no_of_games=len(lines),
            total_price=total_price,
            order_timestamp=order_timestamp,
            due_date=due_date
        )
        db.add(order)
        db.flush()

        for line in lines:
            db.add(GamesInOrder(
                game_id=line.game_id,
                rental_order_id=rental_order_id,
                units_ordered=line.units_ordered
            ))

        db.add(TrackingInfo(
            tracking_id=tracking_id,
            rental_order_id=rental_order_id,
            status=settings.INITIAL_TRACKING_STATUS,
            current_location=settings.INITIAL_TRACKING_PLACEHOLDER,
            courier_name=settings.INITIAL_TRACKING_PLACEHOLDER,
            last_update_date=order_timestamp,
            additional_comments=""
        ))

        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Order placement for %s rolled back", login)
        raise PersistenceFailure("Order could not be placed") from exc

    db.refresh(order)
    logger.info(
        "Placed order %s for %s: %d game(s), total %s",
        rental_order_id, login, len(lines), format_money(total_price)
    )

    return OrderPlacement(
        order=OrderSummary.model_validate(order),
        tracking_id=tracking_id,
        lines=lines,
        rejected=rejected
    )
