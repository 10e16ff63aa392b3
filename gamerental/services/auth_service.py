"""
Identity and role resolution.

Every privileged operation calls require_role() with the caller's login and
re-reads the stored role; a role cached in the caller's session is never
trusted for authorization.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple
from sqlalchemy.orm import Session
from gamerental.core.errors import AuthFailure, Forbidden
from gamerental.core.security import verify_password
from gamerental.models.user import User, Role

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionContext:
    """The authenticated caller, passed explicitly to every operation."""
    login: str
    role: Role


def authenticate(login: str, password: str, db: Session) -> User:
    """Return the user matching the login/password pair or raise AuthFailure."""
    user = db.query(User).filter(User.login == login).first()
    if not user or not verify_password(password, user.password):
        logger.warning("Failed login attempt for %r", login)
        raise AuthFailure()
    return user


def open_session(login: str, password: str, db: Session) -> SessionContext:
    """Authenticate and open a session context."""
    user = authenticate(login, password, db)
    logger.info("User %s logged in as %s", user.login, user.role.value)
    return SessionContext(login=user.login, role=user.role)


def authenticate_with_retry(
    prompt_credentials: Callable[[], Tuple[str, str]],
    confirm_retry: Callable[[], bool],
    db: Session
) -> Optional[SessionContext]:
    """
    Keep asking for credentials until they match.

    Args:
        prompt_credentials: Returns a (login, password) pair
        confirm_retry: Called after each failure; returning False opts out
        db: Database session

    Returns:
        SessionContext on success, None when the caller opts out
    """
    while True:
        user_login, password = prompt_credentials()
        try:
            return open_session(user_login, password, db)
        except AuthFailure:
            if not confirm_retry():
                return None


def find_role(login: str, db: Session) -> Optional[Role]:
    """Return the stored role for a login, or None if the login is unknown."""
    row = db.query(User.role).filter(User.login == login).first()
    return row[0] if row else None


def role_of(login: str, db: Session) -> Role:
    """Return the stored role for a login, raising AuthFailure if unknown."""
    role = find_role(login, db)
    if role is None:
        raise AuthFailure(f"Unknown login: {login}")
    return role


def require_role(caller_login: str, allowed_roles: Iterable[Role], db: Session) -> Role:
    """
    Guard for privileged operations.
    Returns the caller's role, or raises Forbidden if it is not allowed.
    Unknown callers are forbidden as well.
    """
    role = find_role(caller_login, db)
    if role is None or role not in set(allowed_roles):
        logger.warning("Forbidden: %r (role=%s)", caller_login, role.value if role else None)
        raise Forbidden()
    return role
