"""Flask error handler that renders exceptions into the standard envelope."""
import logging

from pydantic import ValidationError as PydanticValidationError
from werkzeug.exceptions import HTTPException

from .error_messages import ErrorMessage
from .exceptions import TripboardError
from ..utils.response_helpers import build_error_response

logger = logging.getLogger(__name__)


# A non-member gets the same response as for a missing plan
_MASKED_ERRORS = {
    ErrorMessage.PLAN_MEMBER_NOT_FOUND: ErrorMessage.PLAN_NOT_FOUND,
}


def handle_exception(e):
    if isinstance(e, TripboardError):
        logger.warning(f"[WARNING] {e.__class__.__name__} ({e.code}): {e.message}")
        shown = _MASKED_ERRORS.get(getattr(e, "error", None))
        if shown is not None:
            return build_error_response(shown.message, shown.code, e.status_code, e.details)
        return build_error_response(e.message, e.code, e.status_code, e.details)

    if isinstance(e, PydanticValidationError):
        errors = [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        return build_error_response(
            ErrorMessage.INVALID_REQUEST.message,
            ErrorMessage.INVALID_REQUEST.code,
            400,
            {"errors": errors}
        )

    if isinstance(e, HTTPException):
        return build_error_response(e.description, str(e.code), e.code)

    logger.error(f"[ERROR] Unhandled exception: {e}", exc_info=True)
    return build_error_response("Internal server error.", "50000", 500)
