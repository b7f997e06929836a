"""
Unit of work for service operations.

Every public service method runs as one atomic unit against the session:
all mutations commit together, or any exception rolls everything back and
propagates unchanged.
"""
import functools
import logging

from .. import db

logger = logging.getLogger(__name__)


def transactional(func=None, *, read_only=False):
    """
    Decorator that wraps a service method in a single transaction.

    Usage:
        @transactional
        def create_plan(self, ...): ...

        @transactional(read_only=True)
        def get_plan(self, ...): ...

    Read-only units never commit; they end with a rollback so the session
    does not carry a stale snapshot into the next unit.
    """
    def decorator(f):
        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            try:
                result = f(*args, **kwargs)
            except Exception:
                db.session.rollback()
                logger.debug(f"Rolled back unit of work in {f.__qualname__}")
                raise
            if read_only:
                db.session.rollback()
            else:
                db.session.commit()
            return result
        return wrapper

    if func is not None:
        return decorator(func)
    return decorator
