from .base import PatchwrightError


class PathViolation(PatchwrightError):
    """Raised when a path escapes the workspace root or hits a protected pattern."""
