"""
Pydantic schemas and field rules for the game catalog.
"""
import enum
from decimal import Decimal
from typing import Annotated, Optional
from pydantic import BaseModel, Field, StringConstraints, AfterValidator, model_validator
from gamerental.core.utils import to_money, validate_field

GameName = Annotated[str, StringConstraints(min_length=1, max_length=300)]
Genre = Annotated[str, StringConstraints(min_length=1, max_length=30)]
Price = Annotated[Decimal, Field(ge=0, allow_inf_nan=False), AfterValidator(to_money)]
Description = str
ImageURL = Annotated[str, StringConstraints(min_length=1, max_length=20)]


class CatalogField(str, enum.Enum):
    """Catalog fields a manager may update."""
    GAME_NAME = "game_name"
    GENRE = "genre"
    PRICE = "price"
    DESCRIPTION = "description"
    IMAGE_URL = "image_url"


CATALOG_FIELD_TYPES = {
    CatalogField.GAME_NAME: GameName,
    CatalogField.GENRE: Genre,
    CatalogField.PRICE: Price,
    CatalogField.DESCRIPTION: Description,
    CatalogField.IMAGE_URL: ImageURL,
}


class CatalogFilterMode(str, enum.Enum):
    """Mutually exclusive catalog view modes."""
    ALL = "all"
    BY_GENRE = "by_genre"
    BY_MAX_PRICE = "by_max_price"
    PRICE_DESC = "sorted_by_price_desc"
    PRICE_ASC = "sorted_by_price_asc"


class CatalogFilter(BaseModel):
    """A single catalog view choice with its argument, if any."""
    mode: CatalogFilterMode = CatalogFilterMode.ALL
    genre: Optional[str] = None
    max_price: Optional[Decimal] = None
    
    @model_validator(mode="after")
    def check_argument(self):
        if self.mode == CatalogFilterMode.BY_GENRE and self.genre is None:
            raise ValueError("genre is required for by_genre")
        if self.mode == CatalogFilterMode.BY_MAX_PRICE and self.max_price is None:
            raise ValueError("max_price is required for by_max_price")
        return self
    
    @classmethod
    def all(cls) -> "CatalogFilter":
        return cls()
    
    @classmethod
    def by_genre(cls, genre: str) -> "CatalogFilter":
        return cls(mode=CatalogFilterMode.BY_GENRE, genre=genre)
    
    @classmethod
    def by_max_price(cls, value) -> "CatalogFilter":
        """Raises InvalidField when value is not a non-negative decimal."""
        max_price = validate_field("max_price", Price, value)
        return cls(mode=CatalogFilterMode.BY_MAX_PRICE, max_price=max_price)
    
    @classmethod
    def sorted_by_price_desc(cls) -> "CatalogFilter":
        return cls(mode=CatalogFilterMode.PRICE_DESC)
    
    @classmethod
    def sorted_by_price_asc(cls) -> "CatalogFilter":
        return cls(mode=CatalogFilterMode.PRICE_ASC)


class CatalogEntryResponse(BaseModel):
    """Schema for catalog entry response."""
    game_id: str
    game_name: str
    genre: str
    price: Decimal
    description: Optional[str] = None
    image_url: Optional[str] = None
    
    class Config:
        from_attributes = True
