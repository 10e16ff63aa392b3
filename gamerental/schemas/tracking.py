"""
Pydantic schemas and field rules for TrackingInfo entity.
"""
import enum
from typing import Annotated, Optional
from datetime import datetime
from pydantic import BaseModel, StringConstraints

Status = Annotated[str, StringConstraints(min_length=1, max_length=50)]
Location = Annotated[str, StringConstraints(min_length=1, max_length=60)]
CourierName = Annotated[str, StringConstraints(min_length=1, max_length=60)]
Comments = str


class TrackingField(str, enum.Enum):
    """Tracking fields staff may update, one at a time."""
    STATUS = "status"
    CURRENT_LOCATION = "current_location"
    COURIER_NAME = "courier_name"
    ADDITIONAL_COMMENTS = "additional_comments"


TRACKING_FIELD_TYPES = {
    TrackingField.STATUS: Status,
    TrackingField.CURRENT_LOCATION: Location,
    TrackingField.COURIER_NAME: CourierName,
    TrackingField.ADDITIONAL_COMMENTS: Comments,
}


class TrackingDetail(BaseModel):
    """Schema for tracking record response."""
    tracking_id: str
    rental_order_id: str
    courier_name: Optional[str] = None
    current_location: Optional[str] = None
    status: str
    last_update_date: datetime
    additional_comments: Optional[str] = None
    
    class Config:
        from_attributes = True
