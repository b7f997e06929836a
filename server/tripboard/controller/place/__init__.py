from flask import Blueprint


def init_app():
    """Initialize place controller and return blueprint."""
    from .place_controller import init_place_controller
    place_api = Blueprint('place_api', __name__, url_prefix='/plans/<plan_id>/places')
    init_place_controller(place_api)
    return place_api
