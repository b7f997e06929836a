"""
Plan Repository Interface
=========================

Abstract interface for plan data access. All lookups skip soft-deleted plans.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from datetime import datetime

from ...model.enums import DestinationName
from ...model.plan import Plan as PlanModel


class PlanInterface(ABC):
    """Abstract interface for Plan repository operations."""

    def __init__(self):
        pass

    # --- READ OPERATIONS ---

    @abstractmethod
    def get_by_id(self, plan_id: str) -> Optional[PlanModel]:
        """Get a non-deleted plan by ID."""
        pass

    @abstractmethod
    def get_all(self) -> List[PlanModel]:
        """Get every non-deleted plan in insertion order."""
        pass

    @abstractmethod
    def get_all_order_by_started_at_desc(self) -> List[PlanModel]:
        """Get every non-deleted plan, latest start first."""
        pass

    @abstractmethod
    def get_by_destination_name(self, destination_name: DestinationName) -> List[PlanModel]:
        """Get plans heading to a destination, latest start first."""
        pass

    @abstractmethod
    def get_by_destination_name_and_started_between(
        self,
        destination_name: DestinationName,
        start: datetime,
        end: datetime
    ) -> List[PlanModel]:
        """Get plans heading to a destination whose start lies in [start, end], latest first."""
        pass

    # --- WRITE OPERATIONS ---

    @abstractmethod
    def save(self, plan: PlanModel, commit: bool = False) -> PlanModel:
        """
        Persist the plan with its roster.

        Args:
            plan: Plan instance (new or modified)
            commit: If True, commit immediately; otherwise flush into the current unit of work

        Returns:
            The saved plan
        """
        pass
