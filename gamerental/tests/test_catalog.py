"""
Tests for catalog queries.
"""
from decimal import Decimal
import pytest
from gamerental.core.errors import InvalidField
from gamerental.schemas.catalog import CatalogEntryResponse, CatalogFilter
from gamerental.services.catalog_service import list_catalog, get_price, get_game


def test_view_all(db):
    """Test the unfiltered catalog."""
    games = list_catalog(CatalogFilter.all(), db)
    assert {g.game_id for g in games} == {"g1", "g2", "g3"}
    assert all(isinstance(g, CatalogEntryResponse) for g in games)
    g2 = next(g for g in games if g.game_id == "g2")
    assert (g2.game_name, g2.genre, g2.price) == ("Dungeon Tales", "RPG", Decimal("4.50"))


def test_filter_by_genre(db):
    """Test genre filter."""
    games = list_catalog(CatalogFilter.by_genre("Action"), db)
    assert {g.game_id for g in games} == {"g1", "g3"}
    assert list_catalog(CatalogFilter.by_genre("Puzzle"), db) == []


def test_filter_by_max_price(db):
    """Test max price filter is inclusive."""
    games = list_catalog(CatalogFilter.by_max_price("10"), db)
    assert {g.game_id for g in games} == {"g1", "g2"}


@pytest.mark.parametrize("value", ["abc", "-1"])
def test_filter_by_max_price_invalid(value):
    """Test non-numeric and negative max prices are rejected."""
    with pytest.raises(InvalidField):
        CatalogFilter.by_max_price(value)


def test_sorted_by_price(db):
    """Test both price orderings."""
    desc = list_catalog(CatalogFilter.sorted_by_price_desc(), db)
    asc = list_catalog(CatalogFilter.sorted_by_price_asc(), db)
    assert [g.game_id for g in desc] == ["g3", "g1", "g2"]
    assert [g.game_id for g in asc] == ["g2", "g1", "g3"]


def test_price_lookup(db):
    """Test price lookup for known and unknown games."""
    assert get_price("g2", db) == Decimal("4.50")
    assert get_price("nope", db) is None
    assert get_game("g1", db).game_name == "Space Raiders"
