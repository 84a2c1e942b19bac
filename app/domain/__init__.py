"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import SearchEntityType
from app.domain.exceptions import (
    AirmException,
    FilterValidationException,
    InvalidEntityTypeException,
    InvalidQueryException,
    OrganizationNotFoundException,
    SearchFailedException,
    SearchTimeoutException,
    ValidationException,
)

__all__ = [
    # Enums
    "SearchEntityType",
    # Exceptions
    "AirmException",
    "FilterValidationException",
    "InvalidEntityTypeException",
    "InvalidQueryException",
    "OrganizationNotFoundException",
    "SearchFailedException",
    "SearchTimeoutException",
    "ValidationException",
]
