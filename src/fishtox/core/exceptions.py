class FishToxError(Exception):
    """Base class for FishTox errors."""

class DataLoadError(FishToxError):
    """Raised when the raw sample table cannot be fetched or decoded."""
    pass
