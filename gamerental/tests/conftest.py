"""
Shared fixtures: an in-memory SQLite database seeded with one user per role
and a small catalog.
"""
from decimal import Decimal
import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from gamerental.core.config import settings
from gamerental.core.security import get_password_hash
from gamerental.db.base import Base
from gamerental.models import User, Role, CatalogEntry

PASSWORD = "secret"


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch):
    """Use the cheapest bcrypt cost in tests."""
    monkeypatch.setattr(settings, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    """Database session with seeded users and catalog."""
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    hashed = get_password_hash(PASSWORD)
    session.add_all([
        User(login="alice", password=hashed, role=Role.CUSTOMER, fav_games="", phone_num="555-0100"),
        User(login="bob", password=hashed, role=Role.CUSTOMER, fav_games="Tetris", phone_num="555-0101"),
        User(login="erin", password=hashed, role=Role.EMPLOYEE, fav_games="", phone_num="555-0102"),
        User(login="mona", password=hashed, role=Role.MANAGER, fav_games="", phone_num="555-0103"),
        CatalogEntry(game_id="g1", game_name="Space Raiders", genre="Action",
                     price=Decimal("10.00"), description="Shoot them up", image_url="img/g1.png"),
        CatalogEntry(game_id="g2", game_name="Dungeon Tales", genre="RPG",
                     price=Decimal("4.50"), description="Classic crawler", image_url="img/g2.png"),
        CatalogEntry(game_id="g3", game_name="Turbo Kart", genre="Action",
                     price=Decimal("59.99"), description="Racing", image_url="img/g3.png"),
    ])
    session.commit()
    yield session
    session.close()
