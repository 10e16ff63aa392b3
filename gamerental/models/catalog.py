"""
Catalog model for rentable games.
"""
from sqlalchemy import Column, String, Numeric, Text
from sqlalchemy.orm import relationship
from gamerental.db.base import Base


class CatalogEntry(Base):
    """A game available for rent."""
    __tablename__ = "catalog"
    
    game_id = Column(String(50), primary_key=True)
    game_name = Column(String(300), nullable=False)
    genre = Column(String(30), nullable=False, index=True)
    price = Column(Numeric(10, 2), nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(String(20), nullable=True)
    
    # Relationships
    order_lines = relationship("GamesInOrder", back_populates="game")
