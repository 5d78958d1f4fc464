"""Domain-specific exceptions for stores services."""


class StoresServiceError(Exception):
    """Base exception for stores services."""
    pass


class InvalidMapError(StoresServiceError):
    """Raised when a submitted map is inconsistent."""
    pass


class CellOutOfBoundsError(StoresServiceError):
    """Raised when a coordinate falls outside the map."""
    pass


class InvalidToolError(StoresServiceError):
    """Raised when the editor sends an unknown tool."""
    pass
