"""
Tests for identity and role resolution.
"""
import pytest
from gamerental.core.errors import AuthFailure, Forbidden
from gamerental.models.user import Role, STAFF_ROLES
from gamerental.services.auth_service import (
    authenticate, open_session, authenticate_with_retry, role_of, require_role
)

PASSWORD = "secret"


def test_authenticate(db):
    """Test login with valid credentials."""
    user = authenticate("alice", PASSWORD, db)
    assert user.login == "alice"
    assert user.role == Role.CUSTOMER


def test_authenticate_invalid_credentials(db):
    """Test login with a wrong password or unknown login."""
    with pytest.raises(AuthFailure):
        authenticate("alice", "wrongpassword", db)
    with pytest.raises(AuthFailure):
        authenticate("nonexistent", PASSWORD, db)


def test_open_session_carries_role(db):
    """Test session context holds login and stored role."""
    session = open_session("mona", PASSWORD, db)
    assert session.login == "mona"
    assert session.role == Role.MANAGER


def test_authenticate_with_retry_succeeds_after_failure(db):
    """Test interactive retry loop eventually logs in."""
    attempts = iter([("alice", "bad"), ("alice", PASSWORD)])
    session = authenticate_with_retry(lambda: next(attempts), lambda: True, db)
    assert session.login == "alice"


def test_authenticate_with_retry_opt_out(db):
    """Test answering no to retry returns None."""
    session = authenticate_with_retry(lambda: ("alice", "bad"), lambda: False, db)
    assert session is None


def test_role_of_reads_stored_role(db):
    """Test role lookup re-reads the database."""
    assert role_of("erin", db) == Role.EMPLOYEE
    with pytest.raises(AuthFailure):
        role_of("ghost", db)


def test_require_role(db):
    """Test role guard allows and forbids."""
    assert require_role("erin", STAFF_ROLES, db) == Role.EMPLOYEE
    with pytest.raises(Forbidden):
        require_role("alice", STAFF_ROLES, db)
    with pytest.raises(Forbidden):
        require_role("ghost", STAFF_ROLES, db)
