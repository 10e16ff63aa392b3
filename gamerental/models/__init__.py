"""Models package - Import all models for SQLAlchemy registration."""
from gamerental.models.user import User, Role
from gamerental.models.catalog import CatalogEntry
from gamerental.models.rental_order import RentalOrder, GamesInOrder
from gamerental.models.tracking import TrackingInfo
from gamerental.models.sequence import IdSequence

__all__ = [
    "User",
    "Role",
    "CatalogEntry",
    "RentalOrder",
    "GamesInOrder",
    "TrackingInfo",
    "IdSequence",
]
