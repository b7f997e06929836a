"""
Response helper functions.

Builders for the standard API envelope:

    {"resultMessage": {"en": "..."}, "resultCode": "...", ...data}
"""
from flask import jsonify


def build_error_response(message_en, result_code, status_code=400, details=None):
    """
    Build standardized error response.

    Args:
        message_en: English error message
        result_code: Application result code
        status_code: HTTP status code (default 400)
        details: Optional dict with extra error context

    Returns:
        tuple: (json_response, status_code)

    Example:
        return build_error_response("Plan not found.", "P001", 404)
    """
    response = {
        "resultMessage": {
            "en": message_en
        },
        "resultCode": result_code
    }
    if details:
        response["details"] = details
    return jsonify(response), status_code


def build_success_response(message_en, result_code, data=None, status_code=200):
    """
    Build standardized success response.

    Args:
        message_en: English success message
        result_code: Application result code
        data: Optional dict merged into the response body
        status_code: HTTP status code (default 200)

    Returns:
        tuple: (json_response, status_code)
    """
    response = {
        "resultMessage": {
            "en": message_en
        },
        "resultCode": result_code
    }
    if data:
        response.update(data)
    return jsonify(response), status_code
