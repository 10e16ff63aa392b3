"""
Pydantic schemas and field rules for User entity.
"""
import enum
from typing import Annotated, Optional
from pydantic import BaseModel, Field, StringConstraints
from gamerental.models.user import Role

Login = Annotated[str, StringConstraints(min_length=1, max_length=50)]
Password = Annotated[str, StringConstraints(min_length=1, max_length=30)]
# Documented as at most 20 characters, but only non-emptiness is enforced
PhoneNumber = Annotated[str, StringConstraints(min_length=1)]
FavoriteGames = str
FavoriteGame = Annotated[str, StringConstraints(min_length=1)]
# Zero is rejected even though it means "no overdue games"
OverdueCount = Annotated[int, Field(gt=0)]


class UserField(str, enum.Enum):
    """User fields a manager may update."""
    PASSWORD = "password"
    ROLE = "role"
    FAV_GAMES = "fav_games"
    PHONE_NUM = "phone_num"
    NUM_OVERDUE_GAMES = "num_overdue_games"


USER_FIELD_TYPES = {
    UserField.PASSWORD: Password,
    UserField.FAV_GAMES: FavoriteGames,
    UserField.PHONE_NUM: PhoneNumber,
    UserField.NUM_OVERDUE_GAMES: OverdueCount,
}

# Numbered role menu
ROLE_CHOICES = {
    "1": Role.CUSTOMER,
    "2": Role.MANAGER,
    "3": Role.EMPLOYEE,
}


class UserCreate(BaseModel):
    """Schema for user registration."""
    login: Login
    password: Password
    phone_num: PhoneNumber


class UserProfile(BaseModel):
    """Schema for profile views. Never carries the password."""
    login: str
    role: Role
    fav_games: str
    phone_num: Optional[str] = None
    num_overdue_games: int
    
    class Config:
        from_attributes = True
