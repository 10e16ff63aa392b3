"""
Pydantic schemas shared across services.
"""
from pydantic import BaseModel


class Ack(BaseModel):
    """Acknowledgement of a single-field update."""
    target: str
    field: str
    rows_affected: int
