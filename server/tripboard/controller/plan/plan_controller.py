"""
Plan Controller - REST API for Travel Plans
============================================

Purpose:
- Member endpoints for plan create/read/delete
- Public, server-sorted plan listings
- Destination reference data

Domain errors propagate to the app-level error handler.
"""

from flask import request

from ...service.plan_service import PlanService
from ...middleware import JWT_required, parse_json_body, parse_enum_arg, parse_datetime_arg
from ...utils.response_helpers import build_success_response
from ...core.di_container import DIContainer
from ...model.enums import DestinationName
from ...schema.plan_schema import PlanCreateRequest


def _dump_all(items):
    return [item.model_dump(mode="json") for item in items]


class PlanController:
    """
    Controller for travel plan endpoints.

    Routes:
    - GET    /plans/destinations                         List destinations
    - POST   /plans                                      Create plan
    - GET    /plans                                      List all plans
    - GET    /plans/sorted/start-date                    List by start, latest first
    - GET    /plans/sorted/destination?destination_name= List by destination
    - GET    /plans/sorted/destination-range?destination_name=&start=&end=
    - GET    /plans/<plan_id>                            Get plan (members only)
    - DELETE /plans/<plan_id>                            Delete plan (members only)
    """

    def __init__(self, plan_service: PlanService, blueprint):
        self.plan_service = plan_service
        self.blueprint = blueprint
        self._register_routes()

    def _register_routes(self):
        """Register all routes with Flask."""
        bp = self.blueprint
        bp.add_url_rule("/destinations", "list_destinations", self.list_destinations, methods=["GET"])
        bp.add_url_rule("", "create_plan", self._wrap_jwt_required(self.create_plan), methods=["POST"])
        bp.add_url_rule("", "list_all_plans", self.list_all_plans, methods=["GET"])
        bp.add_url_rule("/sorted/start-date", "list_plans_by_start_date", self.list_plans_by_start_date, methods=["GET"])
        bp.add_url_rule("/sorted/destination", "list_plans_by_destination", self.list_plans_by_destination, methods=["GET"])
        bp.add_url_rule(
            "/sorted/destination-range",
            "list_plans_by_destination_and_range",
            self.list_plans_by_destination_and_range,
            methods=["GET"]
        )
        bp.add_url_rule("/<plan_id>", "get_plan", self._wrap_jwt_required(self.get_plan), methods=["GET"])
        bp.add_url_rule("/<plan_id>", "delete_plan", self._wrap_jwt_required(self.delete_plan), methods=["DELETE"])

    def _wrap_jwt_required(self, f):
        """Helper to maintain JWT required middleware while using class methods."""
        @JWT_required
        def wrapper(member, *args, **kwargs):
            return f(member, *args, **kwargs)
        return wrapper

    def list_destinations(self):
        destinations = self.plan_service.list_destinations()
        return build_success_response(
            "Destinations retrieved successfully.",
            "20000",
            {"destinations": _dump_all(destinations)}
        )

    def create_plan(self, member):
        """
        Create a plan with the caller as its first member.

        POST /plans
        Body:
        {
            "destination_id": "...",
            "started_at": "2024-06-01T00:00:00",
            "ended_at": "2024-06-03T00:00:00",
            "vehicle": "car"
        }
        """
        plan_request = parse_json_body(request, PlanCreateRequest)
        plan = self.plan_service.create_plan(plan_request, member.id)

        return build_success_response(
            "Plan created successfully.",
            "20001",
            {"plan": plan.model_dump(mode="json")},
            201
        )

    def list_all_plans(self):
        plans = self.plan_service.list_all_plans()
        return build_success_response("Plans retrieved successfully.", "20002", {"plans": _dump_all(plans)})

    def list_plans_by_start_date(self):
        plans = self.plan_service.list_plans_by_start_date()
        return build_success_response("Plans retrieved successfully.", "20002", {"plans": _dump_all(plans)})

    def list_plans_by_destination(self):
        destination_name = parse_enum_arg(request, "destination_name", DestinationName)
        plans = self.plan_service.list_plans_by_destination(destination_name)
        return build_success_response("Plans retrieved successfully.", "20002", {"plans": _dump_all(plans)})

    def list_plans_by_destination_and_range(self):
        destination_name = parse_enum_arg(request, "destination_name", DestinationName)
        start = parse_datetime_arg(request, "start")
        end = parse_datetime_arg(request, "end")
        plans = self.plan_service.list_plans_by_destination_and_date_range(destination_name, start, end)
        return build_success_response("Plans retrieved successfully.", "20002", {"plans": _dump_all(plans)})

    def get_plan(self, member, plan_id):
        plan = self.plan_service.get_plan(plan_id, member.id)
        return build_success_response(
            "Plan retrieved successfully.",
            "20003",
            {"plan": plan.model_dump(mode="json")}
        )

    def delete_plan(self, member, plan_id):
        self.plan_service.delete_plan(plan_id, member.id)
        return build_success_response("Plan deleted successfully.", "20004")


def init_plan_controller(blueprint):
    container = DIContainer.get_instance()
    plan_service = container.resolve(PlanService.__name__)
    return PlanController(plan_service, blueprint)
