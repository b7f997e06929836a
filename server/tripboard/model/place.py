from datetime import datetime
from typing import Optional, TYPE_CHECKING
from sqlalchemy import String, DateTime, ForeignKey, Index, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.base_model import BaseModel

if TYPE_CHECKING:
    from .plan import Plan
    from .member import Member
    from .category import Category


_SHARED_AND_ALIVE = "activated_at IS NOT NULL AND deleted_at IS NULL"


class Place(BaseModel):
    """
    Candidate or shared itinerary item.

    A place is private while `activated_at` is NULL and only its creator may
    see or change it. Sharing stamps `activated_at` and gives it a visit window.
    """
    __tablename__ = 'places'

    plan_id: Mapped[str] = mapped_column(String(36), ForeignKey('plans.id'), nullable=False)
    member_id: Mapped[str] = mapped_column(String(36), ForeignKey('members.id'), nullable=False)
    category_id: Mapped[str] = mapped_column(String(36), ForeignKey('categories.id'), nullable=False)

    place_name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(500), nullable=False)

    started_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    ended_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    activated_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    plan: Mapped["Plan"] = relationship('Plan')
    member: Mapped["Member"] = relationship('Member', lazy='joined')
    category: Mapped["Category"] = relationship('Category', lazy='joined')

    __table_args__ = (
        Index('idx_places_plan_member', 'plan_id', 'member_id'),
        # Two members cannot both share the same physical place in one plan
        Index(
            'uq_places_shared_name_address',
            'plan_id', 'place_name', 'address',
            unique=True,
            postgresql_where=text(_SHARED_AND_ALIVE),
            sqlite_where=text(_SHARED_AND_ALIVE)
        ),
    )

    def __init__(self, plan: "Plan", member: "Member", category: "Category",
                 place_name: str, address: str,
                 started_at: Optional[datetime] = None, ended_at: Optional[datetime] = None,
                 **kwargs):
        self.plan = plan
        self.plan_id = plan.id
        self.member = member
        self.member_id = member.id
        self.category = category
        self.category_id = category.id
        self.place_name = place_name
        self.address = address
        self.started_at = started_at
        self.ended_at = ended_at
        self.activated_at = None

    def is_deactivated(self) -> bool:
        return self.activated_at is None

    def is_created_by(self, member: "Member") -> bool:
        return self.member_id == member.id

    def mark_activated(self):
        self.activated_at = datetime.now()

    def mark_started_at(self, started_at: datetime):
        self.started_at = started_at

    def mark_ended_at(self, ended_at: datetime):
        self.ended_at = ended_at

    def __repr__(self):
        return f"<Place id='{self.id}' name='{self.place_name}' address='{self.address}'>"
