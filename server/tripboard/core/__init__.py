"""
Core Package
============

Infrastructure shared by every layer:
- BaseModel: soft-deletable entity base
- transactional: unit-of-work decorator for service methods
- DIContainer / init_di: dependency registry and its setup
"""

from .di_container import DIContainer

__all__ = [
    "DIContainer",
]
