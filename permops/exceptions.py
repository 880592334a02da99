class IllegalStateError(RuntimeError):
    """Raised when an iterator is advanced after exhaustion or after rollback()."""
