from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from ..utils.time_helpers import to_naive_utc


class PlaceCreateRequest(BaseModel):
    place_name: str = Field(..., max_length=255, description="Place name")
    address: str = Field(..., max_length=500, description="Street address")
    category_id: str = Field(..., min_length=1, description="Category ID")

    @field_validator('place_name', 'address')
    @classmethod
    def strip_not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class PlaceShareRequest(BaseModel):
    """Message received on the real-time sharing channel."""
    plan_id: str = Field(..., min_length=1)
    place_id: str = Field(..., min_length=1)


class PlaceVisitTimeUpdateRequest(BaseModel):
    # Range checks need the plan, so they run in the service
    started_at: datetime
    ended_at: datetime

    @field_validator('started_at', 'ended_at')
    @classmethod
    def normalize_to_utc(cls, v):
        return to_naive_utc(v)


class PlaceInfoResponse(BaseModel):
    """Projection of a newly proposed place."""
    id: str
    plan_id: str
    member_id: str
    place_name: str
    address: str
    category_id: str
    category_name: str

    @classmethod
    def from_model(cls, place) -> "PlaceInfoResponse":
        return cls(
            id=place.id,
            plan_id=place.plan_id,
            member_id=place.member_id,
            place_name=place.place_name,
            address=place.address,
            category_id=place.category.id,
            category_name=place.category.category_name
        )


class PlaceResponse(PlaceInfoResponse):
    member_name: str
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None
    activated_at: Optional[datetime] = None
    shared: bool

    @classmethod
    def from_model(cls, place) -> "PlaceResponse":
        info = PlaceInfoResponse.from_model(place)
        return cls(
            **info.model_dump(),
            member_name=place.member.name,
            started_at=place.started_at,
            ended_at=place.ended_at,
            activated_at=place.activated_at,
            shared=not place.is_deactivated()
        )

    @classmethod
    def list_of(cls, places) -> List["PlaceResponse"]:
        return [cls.from_model(place) for place in places]
