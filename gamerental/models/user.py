"""
User model for authentication and account management.
"""
from sqlalchemy import Column, String, Integer, Text, Enum as SQLEnum
from sqlalchemy.orm import relationship
from gamerental.db.base import Base
import enum


class Role(str, enum.Enum):
    """User role enumeration."""
    CUSTOMER = "customer"
    EMPLOYEE = "employee"
    MANAGER = "manager"


STAFF_ROLES = frozenset({Role.EMPLOYEE, Role.MANAGER})


class User(Base):
    """User account keyed by an immutable login."""
    __tablename__ = "users"
    
    login = Column(String(50), primary_key=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
    role = Column(
        SQLEnum(Role, name="user_role", values_callable=lambda e: [m.value for m in e]),
        default=Role.CUSTOMER,
        nullable=False
    )
    fav_games = Column(Text, nullable=False, default="")
    phone_num = Column(String(20), nullable=True)
    num_overdue_games = Column(Integer, nullable=False, default=0)
    
    # Relationships
    orders = relationship("RentalOrder", back_populates="user")
