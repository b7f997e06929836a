"""
Plan aggregate
==============

A Plan is a shared trip: destination, date range, vehicle and the member
roster. Places are not an owned collection; they are queried by plan.

Day indexing counts inclusive calendar days, so a plan running from
2024-06-01 00:00 to 2024-06-03 00:00 lasts 3 days and day 3 is 2024-06-03.
"""
from datetime import datetime, date, timedelta
from typing import List, TYPE_CHECKING
from sqlalchemy import String, DateTime, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .. import Base
from ..core.base_model import BaseModel
from .enums import Vehicle

if TYPE_CHECKING:
    from .member import Member
    from .destination import Destination


class Plan(BaseModel):
    __tablename__ = 'plans'

    destination_id: Mapped[str] = mapped_column(String(36), ForeignKey('destinations.id'), nullable=False, index=True)
    started_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    ended_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    vehicle: Mapped[Vehicle] = mapped_column(SAEnum(Vehicle), nullable=False)

    destination: Mapped["Destination"] = relationship('Destination', lazy='joined')
    plan_members: Mapped[List["PlanMember"]] = relationship(
        'PlanMember',
        back_populates='plan',
        cascade="all, delete-orphan",
        lazy='selectin'
    )

    def __init__(self, destination: "Destination", started_at: datetime, ended_at: datetime,
                 vehicle: Vehicle, **kwargs):
        self.destination = destination
        self.destination_id = destination.id
        self.started_at = started_at
        self.ended_at = ended_at
        self.vehicle = vehicle

    def add_plan_member(self, member: "Member") -> "PlanMember":
        for plan_member in self.plan_members:
            if plan_member.member_id == member.id:
                return plan_member
        plan_member = PlanMember(member=member)
        self.plan_members.append(plan_member)
        return plan_member

    def has_member(self, member: "Member") -> bool:
        # Scan of the loaded roster, so roster changes in the same unit are visible
        for plan_member in self.plan_members:
            if plan_member.member_id == member.id:
                return True
        return False

    @property
    def members(self) -> List["Member"]:
        return [plan_member.member for plan_member in self.plan_members]

    @property
    def duration(self) -> int:
        return (self.ended_at.date() - self.started_at.date()).days + 1

    def get_nth_day_date(self, day: int) -> date:
        return self.started_at.date() + timedelta(days=day - 1)

    def contains(self, moment: datetime) -> bool:
        return self.started_at <= moment <= self.ended_at

    def __repr__(self):
        return f"<Plan id='{self.id}' {self.started_at.isoformat()}..{self.ended_at.isoformat()}>"


class PlanMember(Base):  # Association entity, not from BaseModel
    __tablename__ = 'plan_members'

    plan_id: Mapped[str] = mapped_column(String(36), ForeignKey('plans.id', ondelete='CASCADE'), primary_key=True)
    member_id: Mapped[str] = mapped_column(String(36), ForeignKey('members.id', ondelete='CASCADE'), primary_key=True)

    plan: Mapped["Plan"] = relationship('Plan', back_populates='plan_members')
    member: Mapped["Member"] = relationship('Member', lazy='joined')

    def __init__(self, member: "Member"):
        self.member = member
        self.member_id = member.id

    def __repr__(self):
        return f"<PlanMember plan_id='{self.plan_id}' member_id='{self.member_id}'>"
