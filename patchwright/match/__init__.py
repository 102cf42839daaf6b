from .locator import locate_match
from .similarity import SIMILARITY_THRESHOLD, similarity

__all__ = ["locate_match", "similarity", "SIMILARITY_THRESHOLD"]
