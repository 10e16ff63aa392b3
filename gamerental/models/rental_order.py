"""
Rental order and line item models.
"""
from sqlalchemy import Column, String, Numeric, Date, DateTime, ForeignKey, Integer, CheckConstraint
from sqlalchemy.orm import relationship
from gamerental.db.base import Base


class RentalOrder(Base):
    """A multi-item rental order. Immutable once created."""
    __tablename__ = "rental_orders"
    
    rental_order_id = Column(String(50), primary_key=True)
    login = Column(String(50), ForeignKey("users.login"), nullable=False, index=True)
    no_of_games = Column(Integer, nullable=False)
    total_price = Column(Numeric(10, 2), nullable=False)
    order_timestamp = Column(DateTime, nullable=False, index=True)
    due_date = Column(Date, nullable=False)
    
    # Relationships
    user = relationship("User", back_populates="orders")
    games = relationship("GamesInOrder", back_populates="order", cascade="all, delete-orphan")
    tracking = relationship("TrackingInfo", back_populates="order", uselist=False, cascade="all, delete-orphan")


class GamesInOrder(Base):
    """Junction table for RentalOrder and CatalogEntry (one line item)."""
    __tablename__ = "games_in_order"
    
    game_id = Column(String(50), ForeignKey("catalog.game_id"), primary_key=True)
    rental_order_id = Column(String(50), ForeignKey("rental_orders.rental_order_id"), primary_key=True)
    units_ordered = Column(Integer, nullable=False)
    
    # Relationships
    game = relationship("CatalogEntry", back_populates="order_lines")
    order = relationship("RentalOrder", back_populates="games")
    
    __table_args__ = (
        CheckConstraint("units_ordered > 0", name="ck_units_ordered_positive"),
    )
