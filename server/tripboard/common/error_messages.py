from enum import Enum


class ErrorMessage(Enum):
    """Error taxonomy shared by the HTTP path and the real-time sharing path."""

    MEMBER_NOT_FOUND = ("M001", "Member not found.")
    DESTINATION_NOT_FOUND = ("D001", "Destination not found.")
    CATEGORY_NOT_FOUND = ("C001", "Category not found.")

    PLAN_NOT_FOUND = ("P001", "Plan not found.")
    PLAN_MEMBER_NOT_FOUND = ("P002", "Member does not belong to this plan.")

    PLACE_NOT_FOUND = ("PL001", "Place not found.")
    PLACE_CONFLICT = ("PL002", "You have already proposed this place in the plan.")
    SHARED_PLACE_CONFLICT = ("PL003", "This place has already been shared in the plan.")

    FORBIDDEN_ACCESS = ("F001", "You do not have access to this resource.")

    BAD_REQUEST_DAY_NOT_IN_DURATION = ("B001", "Day is out of the plan duration.")
    BAD_REQUEST_PLACE_VISIT_TIME = ("B002", "Visit time must be within the plan period.")
    BAD_REQUEST_PLACE_VISIT_START_TIME = ("B003", "Visit start time must be before the end time.")
    BAD_REQUEST_PLACE_NOT_ACTIVE = ("B004", "Visit time can only be set on a shared place.")
    INVALID_REQUEST = ("B005", "Invalid request payload.")

    def __init__(self, code, message):
        self.code = code
        self.message = message
