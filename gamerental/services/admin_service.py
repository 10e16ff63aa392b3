"""
Catalog and user administration (manager only).
"""
import logging
from typing import Any, Dict
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from gamerental.core.errors import InvalidField, NotFound, PersistenceFailure
from gamerental.core.security import get_password_hash
from gamerental.core.utils import validate_field
from gamerental.models.catalog import CatalogEntry
from gamerental.models.user import User, Role
from gamerental.schemas.catalog import CatalogField, CATALOG_FIELD_TYPES
from gamerental.schemas.common import Ack
from gamerental.schemas.user import UserField, UserProfile, USER_FIELD_TYPES, ROLE_CHOICES
from gamerental.services.auth_service import require_role

logger = logging.getLogger(__name__)

MANAGER_ONLY = {Role.MANAGER}


def _apply_update(model, key_column, key: str, values: Dict[Any, Any], db: Session) -> int:
    """Run a single-row UPDATE in its own transaction and return the row count."""
    try:
        rows = db.query(model).filter(key_column == key).update(values)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Update of %s %s rolled back", model.__tablename__, key)
        raise PersistenceFailure() from exc
    return rows


def ensure_game_exists(caller: str, game_id: str, db: Session) -> CatalogEntry:
    """Check role and existence once, before a manager starts updating fields."""
    require_role(caller, MANAGER_ONLY, db)
    game = db.query(CatalogEntry).filter(CatalogEntry.game_id == game_id).first()
    if not game:
        raise NotFound(f"Game not found: {game_id}")
    return game


def update_catalog(caller: str, game_id: str, field: CatalogField, value: Any, db: Session) -> Ack:
    """
    Replace one catalog field. Repeating the same update is a no-op.

    Raises:
        Forbidden: caller is not a manager
        InvalidField: value fails the field's rule; nothing is written
        PersistenceFailure: the update was rolled back
    """
    require_role(caller, MANAGER_ONLY, db)
    field = CatalogField(field)
    new_value = validate_field(field.value, CATALOG_FIELD_TYPES[field], value)
    
    rows = _apply_update(
        CatalogEntry, CatalogEntry.game_id, game_id,
        {getattr(CatalogEntry, field.value): new_value}, db
    )
    logger.info("%s updated %s of game %s", caller, field.value, game_id)
    return Ack(target=game_id, field=field.value, rows_affected=rows)


def parse_role(value: Any) -> Role:
    """Accept a role name or its number on the role menu."""
    if isinstance(value, Role):
        return value
    text = str(value).strip().lower()
    if text in ROLE_CHOICES:
        return ROLE_CHOICES[text]
    try:
        return Role(text)
    except ValueError:
        raise InvalidField(UserField.ROLE.value, "must be one of customer, manager, employee") from None


def update_user(caller: str, target_login: str, field: UserField, value: Any, db: Session) -> Ack:
    """
    Replace one field of another user's account.

    The target login is not checked: updating a login that does not exist
    succeeds with rows_affected == 0. fav_games is replaced, unlike the
    self-service add_favorite_game() which appends.

    Raises:
        Forbidden: caller is not a manager
        InvalidField: value fails the field's rule; nothing is written
        PersistenceFailure: the update was rolled back
    """
    require_role(caller, MANAGER_ONLY, db)
    field = UserField(field)
    
    if field == UserField.ROLE:
        new_value = parse_role(value)
    else:
        new_value = validate_field(field.value, USER_FIELD_TYPES[field], value)
    if field == UserField.PASSWORD:
        new_value = get_password_hash(new_value)
    
    rows = _apply_update(
        User, User.login, target_login,
        {getattr(User, field.value): new_value}, db
    )
    logger.info("%s updated %s of user %s (%d row(s))", caller, field.value, target_login, rows)
    return Ack(target=target_login, field=field.value, rows_affected=rows)


def view_user(caller: str, target_login: str, db: Session) -> UserProfile:
    """Manager lookup of any user's profile."""
    require_role(caller, MANAGER_ONLY, db)
    user = db.query(User).filter(User.login == target_login).first()
    if not user:
        raise NotFound(f"User not found: {target_login}")
    return UserProfile.model_validate(user)
