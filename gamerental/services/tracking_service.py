"""
Tracking lifecycle service.

Tracking fields are independently mutable by staff. There is no status state
machine: any employee or manager may set any status text.
"""
import logging
from datetime import datetime
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from gamerental.core.errors import NotFound, PersistenceFailure
from gamerental.core.utils import validate_field
from gamerental.models.tracking import TrackingInfo
from gamerental.models.user import STAFF_ROLES
from gamerental.schemas.common import Ack
from gamerental.schemas.tracking import TrackingField, TRACKING_FIELD_TYPES
from gamerental.services.auth_service import require_role

logger = logging.getLogger(__name__)


def ensure_tracking_exists(caller: str, tracking_id: str, db: Session) -> TrackingInfo:
    """Check role and existence once, before a caller starts updating fields."""
    require_role(caller, STAFF_ROLES, db)
    tracking = db.query(TrackingInfo).filter(TrackingInfo.tracking_id == tracking_id).first()
    if not tracking:
        raise NotFound(f"Tracking record not found: {tracking_id}")
    return tracking


def update_tracking(
    caller: str,
    tracking_id: str,
    field: TrackingField,
    value: str,
    db: Session,
    now: Optional[datetime] = None
) -> Ack:
    """
    Set one tracking field and stamp last_update_date.

    The caller is expected to have passed ensure_tracking_exists() for this
    tracking ID; existence is not re-checked here.

    Raises:
        Forbidden: caller is not an employee or manager
        InvalidField: value is empty or too long; nothing is written
        PersistenceFailure: the update was rolled back
    """
    require_role(caller, STAFF_ROLES, db)
    field = TrackingField(field)
    new_value = validate_field(field.value, TRACKING_FIELD_TYPES[field], value)

    try:
        rows = db.query(TrackingInfo).filter(
            TrackingInfo.tracking_id == tracking_id
        ).update({
            getattr(TrackingInfo, field.value): new_value,
            TrackingInfo.last_update_date: now or datetime.now(),
        })
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Tracking update %s.%s rolled back", tracking_id, field.value)
        raise PersistenceFailure() from exc

    logger.info("%s updated %s of %s", caller, field.value, tracking_id)
    return Ack(target=tracking_id, field=field.value, rows_affected=rows)
