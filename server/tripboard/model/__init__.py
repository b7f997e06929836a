from .enums import Vehicle, DestinationName, Gender
from .member import Member
from .destination import Destination
from .category import Category
from .plan import Plan, PlanMember
from .place import Place

__all__ = [
    'Vehicle',
    'DestinationName',
    'Gender',
    'Member',
    'Destination',
    'Category',
    'Plan',
    'PlanMember',
    'Place'
]
