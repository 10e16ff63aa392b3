"""
Tracking model for order shipment state.
"""
from sqlalchemy import Column, String, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from gamerental.db.base import Base


class TrackingInfo(Base):
    """Shipment record, one per rental order. Status is free text."""
    __tablename__ = "tracking_info"
    
    tracking_id = Column(String(50), primary_key=True)
    rental_order_id = Column(
        String(50), ForeignKey("rental_orders.rental_order_id"),
        unique=True, nullable=False, index=True
    )
    status = Column(String(50), nullable=False)
    current_location = Column(String(60), nullable=True)
    courier_name = Column(String(60), nullable=True)
    last_update_date = Column(DateTime, nullable=False)
    additional_comments = Column(Text, nullable=True)
    
    # Relationships
    order = relationship("RentalOrder", back_populates="tracking")
