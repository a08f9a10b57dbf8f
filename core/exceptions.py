# core/exceptions.py

class DomainError(Exception):
    """Base class for domain-level errors."""
    def __init__(self, message: str, *, code: str | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when task data is invalid or falls outside its schedule bounds."""
    def __init__(self, message: str, *, code: str | None = None, field: str | None = None):
        super().__init__(message, code=code)
        self.field = field


class NotFoundError(DomainError):
    """Raised when a task (or its parent) is not found."""


class BusinessRuleError(DomainError):
    """Raised when hierarchy rules are violated (e.g. a task parented to itself)."""


class ConcurrencyError(DomainError):
    """Raised when optimistic locking detects a stale update."""
