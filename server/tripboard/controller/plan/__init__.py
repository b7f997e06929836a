"""
Plan Blueprint - API routes for travel plans
=============================================

Purpose:
- Define Flask blueprint for /plans routes
- Public listings plus member-only plan endpoints
"""

from flask import Blueprint


def init_app():
    """Initialize plan controller and return blueprint."""
    from .plan_controller import init_plan_controller
    plan_api = Blueprint('plan_api', __name__, url_prefix='/plans')
    init_plan_controller(plan_api)
    return plan_api
