"""
Plan Service - Business Logic Layer
====================================

Purpose:
- Create, read, list and soft-delete plans
- Own the membership gate reused by every place operation

Non-membership is reported as NotFound, the same as an absent plan, so a
caller cannot probe which plan ids exist.
"""

import logging
from datetime import datetime
from typing import List

from ..common.error_messages import ErrorMessage
from ..common.exceptions import NotFoundError
from ..core.transaction import transactional
from ..model.enums import DestinationName
from ..model.plan import Plan
from ..repo.interfaces import MemberInterface, DestinationInterface, PlanInterface
from ..schema.plan_schema import (
    PlanCreateRequest,
    DestinationResponse,
    PlanInfoResponse,
    PlanResponse,
    PlanSortResponse
)

logger = logging.getLogger(__name__)


class PlanService:
    def __init__(
        self,
        plan_repo: PlanInterface,
        destination_repo: DestinationInterface,
        member_repo: MemberInterface
    ):
        """
        Initialize PlanService with injected dependencies.

        Args:
            plan_repo: Plan repository implementation
            destination_repo: Destination reference-data repository
            member_repo: Member lookup repository
        """
        self.plan_repository = plan_repo
        self.destination_repository = destination_repo
        self.member_repository = member_repo

    @transactional(read_only=True)
    def list_destinations(self) -> List[DestinationResponse]:
        return DestinationResponse.list_of(self.destination_repository.get_all())

    @transactional
    def create_plan(self, request: PlanCreateRequest, member_id: str) -> PlanInfoResponse:
        member = self.find_member_by_id(member_id)
        destination = self.destination_repository.get_by_id(request.destination_id)
        if destination is None:
            raise NotFoundError(ErrorMessage.DESTINATION_NOT_FOUND, {"destination_id": request.destination_id})

        plan = Plan(destination, request.started_at, request.ended_at, request.vehicle)
        plan.add_plan_member(member)
        self.plan_repository.save(plan)

        logger.info(f"[INFO] Plan {plan.id} created by member {member.id}")
        return PlanInfoResponse.from_model(plan)

    @transactional(read_only=True)
    def get_plan(self, plan_id: str, member_id: str) -> PlanResponse:
        member = self.find_member_by_id(member_id)
        plan = self.find_by_plan_id(plan_id)
        self.validate_plan_member(plan, member)

        return PlanResponse.from_model(plan)

    @transactional(read_only=True)
    def list_all_plans(self) -> List[PlanSortResponse]:
        return PlanSortResponse.list_of(self.plan_repository.get_all())

    @transactional(read_only=True)
    def list_plans_by_start_date(self) -> List[PlanSortResponse]:
        return PlanSortResponse.list_of(self.plan_repository.get_all_order_by_started_at_desc())

    @transactional(read_only=True)
    def list_plans_by_destination(self, destination_name: DestinationName) -> List[PlanSortResponse]:
        return PlanSortResponse.list_of(self.plan_repository.get_by_destination_name(destination_name))

    @transactional(read_only=True)
    def list_plans_by_destination_and_date_range(
        self,
        destination_name: DestinationName,
        start: datetime,
        end: datetime
    ) -> List[PlanSortResponse]:
        plans = self.plan_repository.get_by_destination_name_and_started_between(destination_name, start, end)
        return PlanSortResponse.list_of(plans)

    @transactional
    def delete_plan(self, plan_id: str, member_id: str) -> None:
        member = self.find_member_by_id(member_id)
        plan = self.find_by_plan_id(plan_id)
        self.validate_plan_member(plan, member)

        plan.mark_as_deleted()
        self.plan_repository.save(plan)
        logger.info(f"[INFO] Plan {plan.id} deleted by member {member.id}")

    # --- Helpers reused by PlaceService (they join the caller's unit of work) ---

    def find_member_by_id(self, member_id: str):
        member = self.member_repository.get_member_by_id(member_id)
        if member is None:
            raise NotFoundError(ErrorMessage.MEMBER_NOT_FOUND, {"member_id": member_id})
        return member

    def find_by_plan_id(self, plan_id: str) -> Plan:
        plan = self.plan_repository.get_by_id(plan_id)
        if plan is None:
            raise NotFoundError(ErrorMessage.PLAN_NOT_FOUND, {"plan_id": plan_id})
        return plan

    def validate_plan_member(self, plan: Plan, member) -> None:
        if not plan.has_member(member):
            raise NotFoundError(ErrorMessage.PLAN_MEMBER_NOT_FOUND, {"plan_id": plan.id})

    def find_member_plan(self, plan_id: str, member) -> Plan:
        """Resolve a live plan and require membership; both failures are NotFound."""
        plan = self.find_by_plan_id(plan_id)
        self.validate_plan_member(plan, member)
        return plan
