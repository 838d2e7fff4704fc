# utils/errors.py


class StoreError(Exception):
    """Any failure from the underlying persistence call (network, permission, serialization)."""

    def __init__(self, message: str, operation: str = ""):
        super().__init__(message)
        self.operation = operation

    def __str__(self):
        message = super().__str__()
        if self.operation:
            return f"{self.operation}: {message}"
        return message


class ValidationError(Exception):
    """A review rejected before it reaches the store."""
