"""
Exception Hierarchy for Tripboard
=================================

Two error families share the ErrorMessage taxonomy:

- TripboardError and its subclasses are raised on the request/response path
  and rendered by the Flask error handler.
- PlaceShareSessionError is raised only by the real-time sharing path. It is
  not a TripboardError: it carries the acting member and the resolved plan so
  the channel adapter can route it back to the right session.

Usage:
    from tripboard.common.exceptions import NotFoundError
    from tripboard.common.error_messages import ErrorMessage

    raise NotFoundError(ErrorMessage.PLAN_NOT_FOUND, details={"plan_id": plan_id})
"""

from .error_messages import ErrorMessage


class TripboardError(Exception):
    """
    Base exception for all request-path errors.

    Attributes:
        message: Human-readable error message
        code: Result code for API responses
        details: Additional error details
        status_code: HTTP status used by the error handler
    """

    status_code = 500

    def __init__(self, message: str, code: str = "T000", details: dict = None, status_code: int = None):
        self.message = message
        self.code = code
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert exception to dictionary for API response."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "code": self.code,
            "details": self.details
        }


class NotFoundError(TripboardError):
    """Entity is absent, soft-deleted, or hidden from a non-member."""

    status_code = 404

    def __init__(self, error: ErrorMessage, details: dict = None):
        super().__init__(error.message, code=error.code, details=details)
        self.error = error


class ConflictError(TripboardError):
    """Duplicate place proposal or duplicate shared place."""

    status_code = 409

    def __init__(self, error: ErrorMessage, details: dict = None):
        super().__init__(error.message, code=error.code, details=details)
        self.error = error


class ForbiddenError(TripboardError):
    """Requester is not the creator of a private place."""

    status_code = 403

    def __init__(self, error: ErrorMessage = ErrorMessage.FORBIDDEN_ACCESS, details: dict = None):
        super().__init__(error.message, code=error.code, details=details)
        self.error = error


class BadRequestError(TripboardError):
    """Input is well-formed but violates a temporal rule."""

    status_code = 400

    def __init__(self, error: ErrorMessage, details: dict = None):
        super().__init__(error.message, code=error.code, details=details)
        self.error = error


class PlaceShareSessionError(Exception):
    """
    Failure on the real-time place sharing path.

    Attributes:
        error: ErrorMessage from the shared taxonomy
        member: Acting member (always present)
        plan: Resolved plan, or None when the plan itself was not found
    """

    def __init__(self, error: ErrorMessage, member, plan=None):
        self.error = error
        self.member = member
        self.plan = plan
        super().__init__(error.message)

    @property
    def code(self) -> str:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message

    def to_event(self) -> dict:
        """Session-routable error payload for the real-time channel."""
        return {
            "type": "place.share_error",
            "member_id": self.member.id,
            "plan_id": self.plan.id if self.plan is not None else None,
            "error": self.error.name,
            "code": self.error.code,
            "message": self.error.message
        }
