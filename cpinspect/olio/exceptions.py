"""Custom exceptions used in cpinspect."""


class GridInspectionError(Exception):
    """Base class for errors raised while inspecting a corner point grid."""
    pass


class ConfigurationError(GridInspectionError):
    """Raised when a data source lacks keywords needed to describe a corner point grid."""
    pass


class SizeMismatchError(GridInspectionError):
    """Raised when the length of a keyword array does not match the length implied by the grid extent."""
    pass


class OutOfBoundsError(GridInspectionError):
    """Raised when a logical cell coordinate or linear cell index lies outside the grid."""
    pass
