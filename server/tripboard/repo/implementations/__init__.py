"""
Repository Implementations Package

This package contains concrete implementations of repository interfaces.
These implementations handle actual database operations.
"""

from .member_repository import MemberRepository
from .destination_repository import DestinationRepository
from .category_repository import CategoryRepository
from .plan_repository import PlanRepository
from .place_repository import PlaceRepository

__all__ = [
    'MemberRepository',
    'DestinationRepository',
    'CategoryRepository',
    'PlanRepository',
    'PlaceRepository'
]
