"""
User registration and profile self-service.
"""
import logging
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from gamerental.core.errors import InvalidField, NotFound, PersistenceFailure
from gamerental.core.security import get_password_hash
from gamerental.core.utils import validate_field
from gamerental.models.user import User, Role
from gamerental.schemas.user import (
    UserCreate, UserProfile, Password, PhoneNumber, FavoriteGame
)
from gamerental.services.auth_service import SessionContext

logger = logging.getLogger(__name__)


def create_user(login: str, password: str, phone_num: str, db: Session) -> User:
    """Register a new customer with no favorites and no overdue games."""
    user_data = validate_field("user", UserCreate, {
        "login": login,
        "password": password,
        "phone_num": phone_num,
    })

    existing_user = db.query(User).filter(User.login == user_data.login).first()
    if existing_user:
        raise InvalidField("login", "login already exists")

    new_user = User(
        login=user_data.login,
        password=get_password_hash(user_data.password),
        role=Role.CUSTOMER,
        fav_games="",
        phone_num=user_data.phone_num,
        num_overdue_games=0
    )
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise InvalidField("login", "login already exists") from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Registration of %s rolled back", login)
        raise PersistenceFailure() from exc
    db.refresh(new_user)

    logger.info("Registered user %s", new_user.login)
    return new_user


def _current_user(session: SessionContext, db: Session) -> User:
    user = db.query(User).filter(User.login == session.login).first()
    if not user:
        raise NotFound(f"User not found: {session.login}")
    return user


def _save(user: User, field: str, db: Session) -> None:
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Profile update %s of %s rolled back", field, user.login)
        raise PersistenceFailure() from exc
    logger.info("%s updated own %s", user.login, field)


def view_profile(session: SessionContext, db: Session) -> UserProfile:
    """Get the caller's own profile."""
    return UserProfile.model_validate(_current_user(session, db))


def add_favorite_game(session: SessionContext, game: str, db: Session) -> UserProfile:
    """
    Append a game to the caller's favorites as ", <game>".
    Not idempotent: adding the same game twice lists it twice.
    """
    game = validate_field("fav_games", FavoriteGame, game)
    user = _current_user(session, db)
    user.fav_games = f"{user.fav_games}, {game}" if user.fav_games else game
    _save(user, "fav_games", db)
    return UserProfile.model_validate(user)


def change_password(session: SessionContext, new_password: str, db: Session) -> None:
    """Change the caller's own password."""
    new_password = validate_field("password", Password, new_password)
    user = _current_user(session, db)
    user.password = get_password_hash(new_password)
    _save(user, "password", db)


def change_phone(session: SessionContext, phone_num: str, db: Session) -> UserProfile:
    """Change the caller's own phone number."""
    phone_num = validate_field("phone_num", PhoneNumber, phone_num)
    user = _current_user(session, db)
    user.phone_num = phone_num
    _save(user, "phone_num", db)
    return UserProfile.model_validate(user)
