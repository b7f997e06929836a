"""
Plan request/response schemas
=============================

Request models validate inbound payloads; response models are the
read-optimized projections returned by the services.
"""

from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from ..model.enums import DestinationName, Vehicle, Gender
from ..utils.time_helpers import to_naive_utc


class PlanCreateRequest(BaseModel):
    """
    Payload for creating a plan.

    Start/end ordering is not checked here; see DESIGN.md.
    """
    destination_id: str = Field(..., min_length=1, description="Destination ID")
    started_at: datetime = Field(..., description="Trip start")
    ended_at: datetime = Field(..., description="Trip end")
    vehicle: Vehicle = Field(..., description="Vehicle used for the trip")

    @field_validator('started_at', 'ended_at')
    @classmethod
    def normalize_to_utc(cls, v):
        return to_naive_utc(v)


class DestinationResponse(BaseModel):
    id: str
    destination_name: DestinationName

    @classmethod
    def from_model(cls, destination) -> "DestinationResponse":
        return cls(id=destination.id, destination_name=destination.destination_name)

    @classmethod
    def list_of(cls, destinations) -> List["DestinationResponse"]:
        return [cls.from_model(destination) for destination in destinations]


class MemberSummary(BaseModel):
    id: str
    login_id: str
    name: str
    gender: Optional[Gender] = None

    @classmethod
    def from_model(cls, member) -> "MemberSummary":
        return cls(id=member.id, login_id=member.login_id, name=member.name, gender=member.gender)


class PlanInfoResponse(BaseModel):
    """Projection of a freshly created plan."""
    id: str
    destination_id: str
    destination_name: DestinationName
    started_at: datetime
    ended_at: datetime
    vehicle: Vehicle
    members: List[MemberSummary] = Field(default_factory=list)

    @classmethod
    def from_model(cls, plan) -> "PlanInfoResponse":
        return cls(
            id=plan.id,
            destination_id=plan.destination.id,
            destination_name=plan.destination.destination_name,
            started_at=plan.started_at,
            ended_at=plan.ended_at,
            vehicle=plan.vehicle,
            members=[MemberSummary.from_model(member) for member in plan.members]
        )


class PlanResponse(PlanInfoResponse):
    """Projection of a single plan read by one of its members."""
    duration: int

    @classmethod
    def from_model(cls, plan) -> "PlanResponse":
        info = PlanInfoResponse.from_model(plan)
        return cls(**info.model_dump(), duration=plan.duration)


class PlanSortResponse(BaseModel):
    """Row of the public plan listings."""
    id: str
    destination_name: DestinationName
    started_at: datetime
    ended_at: datetime
    vehicle: Vehicle
    member_count: int

    @classmethod
    def from_model(cls, plan) -> "PlanSortResponse":
        return cls(
            id=plan.id,
            destination_name=plan.destination.destination_name,
            started_at=plan.started_at,
            ended_at=plan.ended_at,
            vehicle=plan.vehicle,
            member_count=len(plan.plan_members)
        )

    @classmethod
    def list_of(cls, plans) -> List["PlanSortResponse"]:
        return [cls.from_model(plan) for plan in plans]
