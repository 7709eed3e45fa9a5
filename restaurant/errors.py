"""
Exception types raised inside the store and services.

Services convert these into failed ``OperationResult`` values at their
boundary; they never reach the presentation layer as exceptions.
"""

from restaurant.models.results import ErrorCode


class RestaurantError(Exception):
    """Base class for expected failures in the records core."""

    code: ErrorCode = ErrorCode.PERSISTENCE_ERROR


class NotFoundError(RestaurantError):
    """A referenced id does not exist in its collection."""

    code = ErrorCode.NOT_FOUND


class InvalidInputError(RestaurantError):
    """Malformed or out-of-range input."""

    code = ErrorCode.VALIDATION_ERROR


class PersistenceError(RestaurantError):
    """Reading or writing a collection file failed."""

    code = ErrorCode.PERSISTENCE_ERROR


class ParseError(PersistenceError):
    """A collection file holds invalid JSON or an unexpected shape."""
