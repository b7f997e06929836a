"""
Place Repository Interface
==========================

Abstract interface for place data access. "Private" means activated_at IS NULL,
"shared" means activated_at IS NOT NULL; every query skips soft-deleted rows.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from datetime import date

from ...model.member import Member as MemberModel
from ...model.plan import Plan as PlanModel
from ...model.place import Place as PlaceModel


class PlaceInterface(ABC):
    """Abstract interface for Place repository operations."""

    def __init__(self):
        pass

    # --- READ OPERATIONS ---

    @abstractmethod
    def get_by_id_and_plan(self, place_id: str, plan: PlanModel) -> Optional[PlaceModel]:
        """Get a non-deleted place belonging to the plan."""
        pass

    @abstractmethod
    def exists_by_place_name_and_address_and_member_and_plan(
        self, place_name: str, address: str, member: MemberModel, plan: PlanModel
    ) -> bool:
        """True if the member already proposed this place in the plan."""
        pass

    @abstractmethod
    def get_by_place_name_and_address_and_member_and_plan(
        self, place_name: str, address: str, member: MemberModel, plan: PlanModel
    ) -> Optional[PlaceModel]:
        """Get the member's place in the plan by its natural key."""
        pass

    @abstractmethod
    def exists_shared_by_plan_and_place_name_and_address(
        self, plan: PlanModel, place_name: str, address: str
    ) -> bool:
        """True if any member already shared this place in the plan."""
        pass

    @abstractmethod
    def get_private_by_member_and_plan(self, member: MemberModel, plan: PlanModel) -> List[PlaceModel]:
        """Get the member's own unshared places in the plan."""
        pass

    @abstractmethod
    def get_shared_by_plan(self, plan: PlanModel) -> List[PlaceModel]:
        """Get every shared place in the plan."""
        pass

    @abstractmethod
    def get_shared_by_plan_and_date(self, plan: PlanModel, visit_date: date) -> List[PlaceModel]:
        """Get shared places whose visit window overlaps the calendar day."""
        pass

    # --- WRITE OPERATIONS ---

    @abstractmethod
    def save(self, place: PlaceModel, commit: bool = False) -> PlaceModel:
        """Persist the place into the current unit of work."""
        pass
