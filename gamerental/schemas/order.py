"""
Pydantic schemas for RentalOrder entity.
"""
from pydantic import BaseModel
from typing import List, Optional
from datetime import date, datetime
from decimal import Decimal


class OrderItemIn(BaseModel):
    """One requested (game, quantity) pairing."""
    game_id: str
    quantity: int


class OrderLine(BaseModel):
    """Schema for an accepted line item."""
    game_id: str
    game_name: Optional[str] = None
    units_ordered: int
    unit_price: Optional[Decimal] = None


class RejectedItem(BaseModel):
    """A requested item excluded from the order."""
    game_id: str
    reason: str


class OrderSummary(BaseModel):
    """Schema for order response."""
    rental_order_id: str
    login: str
    no_of_games: int
    total_price: Decimal
    order_timestamp: datetime
    due_date: date
    
    class Config:
        from_attributes = True


class OrderDetail(OrderSummary):
    """Schema for detailed order response with tracking ID and games."""
    tracking_id: Optional[str] = None
    games: List[OrderLine] = []


class OrderPlacement(BaseModel):
    """Result of placing an order."""
    order: OrderSummary
    tracking_id: str
    lines: List[OrderLine]
    rejected: List[RejectedItem] = []
