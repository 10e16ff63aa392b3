"""
Catalog queries.
"""
from decimal import Decimal
from typing import List, Optional
from sqlalchemy.orm import Session, Query
from gamerental.models.catalog import CatalogEntry
from gamerental.schemas.catalog import CatalogEntryResponse, CatalogFilter, CatalogFilterMode


def build_query(catalog_filter: CatalogFilter, db: Session) -> Query:
    """Build the read-only catalog query for one view mode."""
    query = db.query(CatalogEntry)
    mode = catalog_filter.mode
    
    if mode == CatalogFilterMode.BY_GENRE:
        query = query.filter(CatalogEntry.genre == catalog_filter.genre)
    elif mode == CatalogFilterMode.BY_MAX_PRICE:
        query = query.filter(CatalogEntry.price <= catalog_filter.max_price)
    elif mode == CatalogFilterMode.PRICE_DESC:
        query = query.order_by(CatalogEntry.price.desc(), CatalogEntry.game_id)
    elif mode == CatalogFilterMode.PRICE_ASC:
        query = query.order_by(CatalogEntry.price.asc(), CatalogEntry.game_id)
    
    return query


def list_catalog(catalog_filter: CatalogFilter, db: Session) -> List[CatalogEntryResponse]:
    """Return the catalog entries for one view mode."""
    return [CatalogEntryResponse.model_validate(game) for game in build_query(catalog_filter, db).all()]


def get_game(game_id: str, db: Session) -> Optional[CatalogEntry]:
    """Get a catalog entry by ID."""
    return db.query(CatalogEntry).filter(CatalogEntry.game_id == game_id).first()


def get_price(game_id: str, db: Session) -> Optional[Decimal]:
    """Look up a game's current price; None if the game is not in the catalog."""
    row = db.query(CatalogEntry.price).filter(CatalogEntry.game_id == game_id).first()
    return row[0] if row else None
