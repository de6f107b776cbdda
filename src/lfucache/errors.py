class ForgettingMapError(Exception):
    """Base class for forgetting map errors."""
    pass

class InvalidArgumentError(ForgettingMapError, ValueError):
    """Raised when a map is constructed with an unusable argument."""
    pass
