from .base import PatchwrightError


class EmptyContentError(PatchwrightError, ValueError):
    """Raised when a diff is applied to empty content; create the file instead."""
