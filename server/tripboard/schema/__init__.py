from .plan_schema import (
    PlanCreateRequest,
    DestinationResponse,
    MemberSummary,
    PlanInfoResponse,
    PlanResponse,
    PlanSortResponse
)
from .place_schema import (
    PlaceCreateRequest,
    PlaceShareRequest,
    PlaceVisitTimeUpdateRequest,
    PlaceInfoResponse,
    PlaceResponse
)

__all__ = [
    'PlanCreateRequest',
    'DestinationResponse',
    'MemberSummary',
    'PlanInfoResponse',
    'PlanResponse',
    'PlanSortResponse',
    'PlaceCreateRequest',
    'PlaceShareRequest',
    'PlaceVisitTimeUpdateRequest',
    'PlaceInfoResponse',
    'PlaceResponse'
]
