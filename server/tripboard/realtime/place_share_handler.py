"""
Real-time place sharing handler.

Transport-agnostic: the channel layer decodes a message, resolves the
authenticated member and calls `handle`. Success is broadcast to the plan
room; failures are routed only to the acting member's session.
"""

import logging

from pydantic import ValidationError

from ..common.error_messages import ErrorMessage
from ..common.exceptions import PlaceShareSessionError
from ..schema.place_schema import PlaceShareRequest
from ..service.place_service import PlaceService
from .hub import PlanShareHub

logger = logging.getLogger(__name__)


class PlaceShareHandler:
    def __init__(self, place_service: PlaceService, hub: PlanShareHub):
        self.place_service = place_service
        self.hub = hub

    def handle(self, message: dict, member) -> dict:
        """
        Share a place and fan the result out.

        Args:
            message: Raw message with plan_id and place_id
            member: Authenticated member sending the message

        Returns:
            The event that was emitted (place.shared or place.share_error)
        """
        try:
            request = PlaceShareRequest.model_validate(message)
        except ValidationError as e:
            event = {
                "type": "place.share_error",
                "member_id": member.id,
                "plan_id": None,
                "error": ErrorMessage.INVALID_REQUEST.name,
                "code": ErrorMessage.INVALID_REQUEST.code,
                "message": ErrorMessage.INVALID_REQUEST.message,
                "details": [err["msg"] for err in e.errors()]
            }
            self.hub.send_to_member(member.id, event)
            return event

        try:
            place = self.place_service.share_place(request, member)
        except PlaceShareSessionError as e:
            logger.warning(f"[WARNING] Share rejected for member {member.id}: {e.error.name}")
            event = e.to_event()
            self.hub.send_to_member(member.id, event, plan_id=event["plan_id"])
            return event

        event = {
            "type": "place.shared",
            "member_id": member.id,
            "plan_id": request.plan_id,
            "place": place.model_dump(mode="json")
        }
        self.hub.broadcast(request.plan_id, event)
        return event
