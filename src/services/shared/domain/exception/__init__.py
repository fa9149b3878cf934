from .exceptions import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    ForbiddenException,
    InvalidDateRangeException,
    InvalidTransitionException,
    OptimisticLockException,
    ResourceNotFoundException,
    ValidationException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "ForbiddenException",
    "ValidationException",
    "BusinessRuleViolationException",
    "InvalidDateRangeException",
    "InvalidTransitionException",
    "DuplicateResourceException",
    "OptimisticLockException",
]
