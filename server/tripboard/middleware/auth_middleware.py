"""
Authentication middleware for JWT token validation.

Tokens are issued by the external auth service; this layer only verifies them
and resolves the authenticated member.
"""
from functools import wraps
from inspect import signature
import logging
import jwt

from flask import request, current_app

from config import secret_key, jwt_algorithm
from ..core.di_container import DIContainer
from ..repo.interfaces import MemberInterface
from ..utils.response_helpers import build_error_response

logger = logging.getLogger(__name__)


def _build_token_error_response():
    """Helper to build standardized token error response."""
    return build_error_response("Invalid token.", "A002", 401)


def _build_no_token_response():
    """Helper to build standardized no token provided response."""
    return build_error_response("Access denied. No token provided.", "A001", 401)


def decode_member_id(token):
    """
    Verify a token and extract member_id.

    Returns:
        str: member_id if valid, None if invalid/expired
    """
    try:
        payload = jwt.decode(
            token,
            current_app.config.get("SECRET_KEY", secret_key),
            algorithms=[current_app.config.get("JWT_ALGORITHM", jwt_algorithm)]
        )
    except jwt.ExpiredSignatureError:
        logger.warning("JWT token expired")
        return None
    except jwt.InvalidTokenError:
        logger.warning("Invalid JWT token")
        return None
    return payload.get("member_id")


def JWT_required(f):
    """Decorator to require JSON Web Token for API access."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        auth_header = request.headers.get("Authorization")
        if not auth_header or not auth_header.startswith("Bearer "):
            return _build_no_token_response()

        auth_header_parts = auth_header.split(" ")
        if len(auth_header_parts) != 2 or not auth_header_parts[1]:
            return _build_no_token_response()

        member_id = decode_member_id(auth_header_parts[1])
        if not member_id:
            return _build_token_error_response()

        container = DIContainer.get_instance()
        member_repo = container.resolve(MemberInterface.__name__)
        member = member_repo.get_member_by_id(member_id)
        if not member:
            return _build_token_error_response()

        func_signature = signature(f)
        if "member_id" in func_signature.parameters:
            return f(member.id, *args, **kwargs)
        elif "member" in func_signature.parameters:
            return f(member, *args, **kwargs)

        return f(*args, **kwargs)

    return decorated_function
