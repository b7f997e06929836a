"""
Place Service - Business Logic Layer
=====================================

Purpose:
- Propose, read, list and soft-delete places inside a plan
- Enforce deduplication, private-place visibility and visit-time rules
- Share a private place into the group itinerary (real-time path)

Lifecycle of a place:
    propose (private, activated_at NULL)
        ↓ share_place
    shared (activated_at set, visit window = whole plan)
        ↓ update_visit_time
    shared with a narrowed window

Every request-path failure is a TripboardError. The sharing path raises
PlaceShareSessionError instead, so the channel can attribute it to a session.
"""

import logging
from datetime import date
from typing import List

from sqlalchemy.exc import IntegrityError

from ..common.error_messages import ErrorMessage
from ..common.exceptions import (
    NotFoundError,
    ConflictError,
    ForbiddenError,
    BadRequestError,
    PlaceShareSessionError
)
from ..core.transaction import transactional
from ..model.place import Place
from ..model.plan import Plan
from ..repo.interfaces import PlaceInterface, PlanInterface, CategoryInterface
from ..schema.place_schema import (
    PlaceCreateRequest,
    PlaceShareRequest,
    PlaceVisitTimeUpdateRequest,
    PlaceInfoResponse,
    PlaceResponse
)
from .plan_service import PlanService

logger = logging.getLogger(__name__)


class PlaceService:
    def __init__(
        self,
        place_repo: PlaceInterface,
        plan_repo: PlanInterface,
        category_repo: CategoryInterface,
        plan_service: PlanService
    ):
        """
        Initialize PlaceService with injected dependencies.

        Args:
            place_repo: Place repository implementation
            plan_repo: Plan repository (used directly by the sharing path)
            category_repo: Category reference-data repository
            plan_service: Source of the plan lookup and membership gate
        """
        self.place_repository = place_repo
        self.plan_repository = plan_repo
        self.category_repository = category_repo
        self.plan_service = plan_service

    @transactional
    def create_place(self, plan_id: str, member, request: PlaceCreateRequest) -> PlaceInfoResponse:
        plan = self.plan_service.find_by_plan_id(plan_id)
        category = self._find_category_by_id(request.category_id)

        self.plan_service.validate_plan_member(plan, member)
        self._validate_duplicate_place(plan, member, request.place_name, request.address)

        place = Place(plan, member, category, request.place_name, request.address)
        self.place_repository.save(place)

        # Re-read by natural key within the same unit of work
        created = self.place_repository.get_by_place_name_and_address_and_member_and_plan(
            request.place_name, request.address, member, plan
        )
        logger.info(f"[INFO] Place {created.id} proposed in plan {plan.id} by member {member.id}")
        return PlaceInfoResponse.from_model(created)

    @transactional
    def share_place(self, request: PlaceShareRequest, member) -> PlaceResponse:
        plan = self._validate_plan_for_session(request.plan_id, member)
        place = self._validate_place_for_session(request.place_id, plan, member)

        place.mark_activated()
        place.mark_started_at(plan.started_at)
        place.mark_ended_at(plan.ended_at)
        try:
            self.place_repository.save(place)
        except IntegrityError as e:
            # Lost a race against another share of the same place
            raise PlaceShareSessionError(ErrorMessage.SHARED_PLACE_CONFLICT, member, plan) from e

        logger.info(f"[INFO] Place {place.id} shared in plan {plan.id} by member {member.id}")
        return PlaceResponse.from_model(place)

    @transactional(read_only=True)
    def get_place(self, plan_id: str, place_id: str, member) -> PlaceResponse:
        plan = self.plan_service.find_member_plan(plan_id, member)

        place = self._find_place(place_id, plan)
        self._handle_unactive_place(place, member)

        return PlaceResponse.from_model(place)

    @transactional(read_only=True)
    def get_all_places(self, plan_id: str, member) -> List[PlaceResponse]:
        plan = self.plan_service.find_member_plan(plan_id, member)
        return PlaceResponse.list_of(self.place_repository.get_private_by_member_and_plan(member, plan))

    @transactional(read_only=True)
    def get_shared_places(self, plan_id: str, member) -> List[PlaceResponse]:
        plan = self.plan_service.find_member_plan(plan_id, member)
        return PlaceResponse.list_of(self.place_repository.get_shared_by_plan(plan))

    @transactional(read_only=True)
    def get_shared_places_by_day(self, plan_id: str, day: int, member) -> List[PlaceResponse]:
        plan = self.plan_service.find_member_plan(plan_id, member)

        visit_date = self._validate_day_and_get_date(plan, day)
        return PlaceResponse.list_of(self.place_repository.get_shared_by_plan_and_date(plan, visit_date))

    @transactional
    def delete_place(self, plan_id: str, place_id: str, member) -> None:
        plan = self.plan_service.find_member_plan(plan_id, member)

        place = self._find_place(place_id, plan)
        self._handle_unactive_place(place, member)

        place.mark_as_deleted()
        self.place_repository.save(place)
        logger.info(f"[INFO] Place {place.id} deleted from plan {plan.id} by member {member.id}")

    @transactional
    def update_visit_time(self, plan_id: str, place_id: str, member, request: PlaceVisitTimeUpdateRequest) -> PlaceResponse:
        plan = self.plan_service.find_member_plan(plan_id, member)

        place = self._find_place(place_id, plan)
        if place.is_deactivated():
            raise BadRequestError(ErrorMessage.BAD_REQUEST_PLACE_NOT_ACTIVE, {"place_id": place.id})
        self._validate_visit_time(request, plan)

        place.mark_started_at(request.started_at)
        place.mark_ended_at(request.ended_at)
        self.place_repository.save(place)

        logger.info(f"[INFO] Visit time of place {place.id} set to {request.started_at}..{request.ended_at}")
        return PlaceResponse.from_model(place)

    # --- Request-path helpers ---

    def _find_category_by_id(self, category_id: str):
        category = self.category_repository.get_by_id(category_id)
        if category is None:
            raise NotFoundError(ErrorMessage.CATEGORY_NOT_FOUND, {"category_id": category_id})
        return category

    def _find_place(self, place_id: str, plan: Plan) -> Place:
        place = self.place_repository.get_by_id_and_plan(place_id, plan)
        if place is None:
            raise NotFoundError(ErrorMessage.PLACE_NOT_FOUND, {"place_id": place_id})
        return place

    def _validate_duplicate_place(self, plan: Plan, member, place_name: str, address: str) -> None:
        if self.place_repository.exists_by_place_name_and_address_and_member_and_plan(place_name, address, member, plan):
            raise ConflictError(ErrorMessage.PLACE_CONFLICT, {"place_name": place_name, "address": address})

    def _handle_unactive_place(self, place: Place, member) -> None:
        if place.is_deactivated() and not place.is_created_by(member):
            raise ForbiddenError(ErrorMessage.FORBIDDEN_ACCESS, {"place_id": place.id})

    def _validate_day_and_get_date(self, plan: Plan, day: int) -> date:
        if day < 1 or day > plan.duration:
            raise BadRequestError(
                ErrorMessage.BAD_REQUEST_DAY_NOT_IN_DURATION,
                {"day": day, "duration": plan.duration}
            )
        return plan.get_nth_day_date(day)

    def _validate_visit_time(self, request: PlaceVisitTimeUpdateRequest, plan: Plan) -> None:
        start = request.started_at
        end = request.ended_at

        if not plan.contains(start) or not plan.contains(end):
            raise BadRequestError(ErrorMessage.BAD_REQUEST_PLACE_VISIT_TIME)

        if start >= end:
            raise BadRequestError(ErrorMessage.BAD_REQUEST_PLACE_VISIT_START_TIME)

    # --- Session-path helpers ---

    def _validate_plan_for_session(self, plan_id: str, member) -> Plan:
        plan = self.plan_repository.get_by_id(plan_id)
        if plan is None:
            raise PlaceShareSessionError(ErrorMessage.PLAN_NOT_FOUND, member, None)

        if not plan.has_member(member):
            raise PlaceShareSessionError(ErrorMessage.PLAN_MEMBER_NOT_FOUND, member, plan)

        return plan

    def _validate_place_for_session(self, place_id: str, plan: Plan, member) -> Place:
        place = self.place_repository.get_by_id_and_plan(place_id, plan)
        if place is None:
            raise PlaceShareSessionError(ErrorMessage.PLACE_NOT_FOUND, member, plan)

        if not place.is_created_by(member):
            raise PlaceShareSessionError(ErrorMessage.FORBIDDEN_ACCESS, member, plan)

        # Plan-wide: also rejects re-sharing a place that is already shared
        if self.place_repository.exists_shared_by_plan_and_place_name_and_address(plan, place.place_name, place.address):
            raise PlaceShareSessionError(ErrorMessage.SHARED_PLACE_CONFLICT, member, plan)

        return place
