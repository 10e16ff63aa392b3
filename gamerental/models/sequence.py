"""
Sequence model backing generated identifiers.
"""
from sqlalchemy import Column, String, BigInteger
from gamerental.db.base import Base


class IdSequence(Base):
    """Named monotonic counter. See gamerental.db.sequence."""
    __tablename__ = "id_sequences"
    
    name = Column(String(50), primary_key=True)
    value = Column(BigInteger, nullable=False)
