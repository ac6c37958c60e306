class DomainValidationError(ValueError):
    """Raised when a value object or entity invariant is violated."""
