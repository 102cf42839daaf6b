from .apply import EmptyContentError
from .base import PatchwrightError
from .parse import ParseError
from .path import PathViolation

__all__ = ["PatchwrightError", "ParseError", "EmptyContentError", "PathViolation"]
