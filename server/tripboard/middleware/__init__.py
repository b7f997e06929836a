from .auth_middleware import JWT_required
from .validation_middleware import parse_json_body, parse_enum_arg, parse_datetime_arg

__all__ = [
    'JWT_required',
    'parse_json_body',
    'parse_enum_arg',
    'parse_datetime_arg'
]
