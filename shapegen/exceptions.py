"""Custom exceptions for the shapegen package."""


class ShapegenError(Exception):
    """Base exception for shapegen package."""

    pass


class InvalidParameterError(ShapegenError, ValueError):
    """Shape parameter outside its valid range.

    Args:
        field: Name of the offending parameter.
        message: Human readable description of the violation.
    """

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


class MeshGenerationError(ShapegenError):
    """Generated buffers violate the mesh contract."""

    pass


class DataLoadError(ShapegenError):
    """Failed to load mesh data from file."""

    pass
