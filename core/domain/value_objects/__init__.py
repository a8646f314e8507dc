"""Domain value objects."""

from .value_objects import (
    CheckoutMethod,
    ExecutionID,
    MethodStatus,
    find_method,
    normalize_methods,
    utcnow,
)

__all__ = [
    "CheckoutMethod",
    "ExecutionID",
    "MethodStatus",
    "find_method",
    "normalize_methods",
    "utcnow",
]
