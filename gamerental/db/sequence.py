"""
Persistence-backed identifier sequences.
"""
from typing import Optional
from sqlalchemy.orm import Session
from gamerental.models.sequence import IdSequence


def next_sequence_value(db: Session, name: str, start: int = 0) -> int:
    """
    Return the next value of a named sequence.

    The sequence row is locked (SELECT ... FOR UPDATE) for the rest of the
    caller's transaction, so concurrent callers are serialized. The increment
    only becomes durable when the caller commits, and is rolled back with it.
    A missing sequence is created at ``start`` and its first value is
    ``start + 1``.
    """
    seq: Optional[IdSequence] = db.query(IdSequence).filter(
        IdSequence.name == name
    ).with_for_update().first()
    
    if seq is None:
        seq = IdSequence(name=name, value=start)
        db.add(seq)
    
    seq.value += 1
    db.flush()
    return seq.value
