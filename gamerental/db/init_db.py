"""
Database initialization script.
"""
from gamerental.core.logging_utils import setup_logging
from gamerental.db.session import init_db

# Import all models so SQLAlchemy can register them
from gamerental.models import (  # noqa: F401
    User, CatalogEntry, RentalOrder, GamesInOrder, TrackingInfo, IdSequence
)

if __name__ == "__main__":
    logger = setup_logging()
    logger.info("Initializing database...")
    init_db()
    logger.info("Database initialized successfully!")
