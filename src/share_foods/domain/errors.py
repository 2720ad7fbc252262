"""Domain exceptions."""


class NotFoundError(LookupError):
    """Raised when a referenced row does not exist."""
