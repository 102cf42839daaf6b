class PatchwrightError(Exception):
    """Base class for every error raised by patchwright."""
