from .hub import PlanShareHub
from .place_share_handler import PlaceShareHandler

__all__ = [
    'PlanShareHub',
    'PlaceShareHandler'
]
