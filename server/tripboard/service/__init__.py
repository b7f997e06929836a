from .plan_service import PlanService
from .place_service import PlaceService

__all__ = [
    'PlanService',
    'PlaceService'
]
