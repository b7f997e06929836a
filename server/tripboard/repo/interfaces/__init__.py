"""
Repository Interfaces Package

This package contains all abstract interfaces for data access layer.
Each interface defines the contract that repository implementations must follow.
"""

from .member_repository_interface import MemberInterface
from .destination_repository_interface import DestinationInterface
from .category_repository_interface import CategoryInterface
from .plan_repository_interface import PlanInterface
from .place_repository_interface import PlaceInterface

__all__ = [
    'MemberInterface',
    'DestinationInterface',
    'CategoryInterface',
    'PlanInterface',
    'PlaceInterface'
]
