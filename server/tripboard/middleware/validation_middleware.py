"""
Validation helpers for Flask request data.
"""
from datetime import datetime

from ..common.error_messages import ErrorMessage
from ..common.exceptions import BadRequestError
from ..utils.time_helpers import to_naive_utc


def parse_json_body(request, model):
    """
    Validate the JSON body against a pydantic model.

    Raises:
        BadRequestError: body missing or not JSON
        pydantic.ValidationError: body does not match the model
    """
    data = request.get_json(silent=True)
    if data is None:
        raise BadRequestError(ErrorMessage.INVALID_REQUEST, {"body": "Invalid JSON data."})
    return model.model_validate(data)


def parse_enum_arg(request, name, enum_cls):
    value = request.args.get(name)
    if not value:
        raise BadRequestError(ErrorMessage.INVALID_REQUEST, {name: "required"})
    try:
        return enum_cls(value.lower())
    except ValueError:
        raise BadRequestError(
            ErrorMessage.INVALID_REQUEST,
            {name: f"must be one of {[member.value for member in enum_cls]}"}
        )


def parse_datetime_arg(request, name):
    value = request.args.get(name)
    if not value:
        raise BadRequestError(ErrorMessage.INVALID_REQUEST, {name: "required"})
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        raise BadRequestError(ErrorMessage.INVALID_REQUEST, {name: "must be an ISO datetime"})
    return to_naive_utc(parsed)
