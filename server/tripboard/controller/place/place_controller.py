"""
Place Controller - REST API for places inside a plan
=====================================================

Every route requires a member of the plan. Sharing a place is not exposed
here; it goes through the real-time channel (see tripboard.realtime).
"""

from flask import request

from ...service.place_service import PlaceService
from ...middleware import JWT_required, parse_json_body
from ...utils.response_helpers import build_success_response
from ...core.di_container import DIContainer
from ...schema.place_schema import PlaceCreateRequest, PlaceVisitTimeUpdateRequest


class PlaceController:
    """
    Routes (prefix /plans/<plan_id>/places):
    - POST   /                          Propose a private place
    - GET    /                          My private places
    - GET    /shared                    Shared places
    - GET    /shared/days/<day>         Shared places visited on day N
    - GET    /<place_id>                Get place
    - DELETE /<place_id>                Delete place
    - PATCH  /<place_id>/visit-time     Update visit window of a shared place
    """

    def __init__(self, place_service: PlaceService, blueprint):
        self.place_service = place_service
        self.blueprint = blueprint
        self._register_routes()

    def _register_routes(self):
        bp = self.blueprint
        bp.add_url_rule("", "create_place", self._wrap_jwt_required(self.create_place), methods=["POST"])
        bp.add_url_rule("", "get_all_places", self._wrap_jwt_required(self.get_all_places), methods=["GET"])
        bp.add_url_rule("/shared", "get_shared_places", self._wrap_jwt_required(self.get_shared_places), methods=["GET"])
        bp.add_url_rule(
            "/shared/days/<int(signed=True):day>",
            "get_shared_places_by_day",
            self._wrap_jwt_required(self.get_shared_places_by_day),
            methods=["GET"]
        )
        bp.add_url_rule("/<place_id>", "get_place", self._wrap_jwt_required(self.get_place), methods=["GET"])
        bp.add_url_rule("/<place_id>", "delete_place", self._wrap_jwt_required(self.delete_place), methods=["DELETE"])
        bp.add_url_rule(
            "/<place_id>/visit-time",
            "update_visit_time",
            self._wrap_jwt_required(self.update_visit_time),
            methods=["PATCH"]
        )

    def _wrap_jwt_required(self, f):
        @JWT_required
        def wrapper(member, *args, **kwargs):
            return f(member, *args, **kwargs)
        return wrapper

    def create_place(self, member, plan_id):
        place_request = parse_json_body(request, PlaceCreateRequest)
        place = self.place_service.create_place(plan_id, member, place_request)
        return build_success_response(
            "Place proposed successfully.",
            "20101",
            {"place": place.model_dump(mode="json")},
            201
        )

    def get_all_places(self, member, plan_id):
        places = self.place_service.get_all_places(plan_id, member)
        return build_success_response(
            "Places retrieved successfully.",
            "20102",
            {"places": [place.model_dump(mode="json") for place in places]}
        )

    def get_shared_places(self, member, plan_id):
        places = self.place_service.get_shared_places(plan_id, member)
        return build_success_response(
            "Shared places retrieved successfully.",
            "20103",
            {"places": [place.model_dump(mode="json") for place in places]}
        )

    def get_shared_places_by_day(self, member, plan_id, day):
        places = self.place_service.get_shared_places_by_day(plan_id, day, member)
        return build_success_response(
            "Shared places retrieved successfully.",
            "20103",
            {"day": day, "places": [place.model_dump(mode="json") for place in places]}
        )

    def get_place(self, member, plan_id, place_id):
        place = self.place_service.get_place(plan_id, place_id, member)
        return build_success_response(
            "Place retrieved successfully.",
            "20104",
            {"place": place.model_dump(mode="json")}
        )

    def delete_place(self, member, plan_id, place_id):
        self.place_service.delete_place(plan_id, place_id, member)
        return build_success_response("Place deleted successfully.", "20105")

    def update_visit_time(self, member, plan_id, place_id):
        visit_request = parse_json_body(request, PlaceVisitTimeUpdateRequest)
        place = self.place_service.update_visit_time(plan_id, place_id, member, visit_request)
        return build_success_response(
            "Visit time updated successfully.",
            "20106",
            {"place": place.model_dump(mode="json")}
        )


def init_place_controller(blueprint):
    container = DIContainer.get_instance()
    place_service = container.resolve(PlaceService.__name__)
    return PlaceController(place_service, blueprint)
