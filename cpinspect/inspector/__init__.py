"""Geometric queries on corner point grids."""

__all__ = ['GridInspector', 'cell_geometry_dataframe']

from ._inspector import GridInspector
from ._report import cell_geometry_dataframe

# Set "module" attribute of all public objects to this path.
for _name in __all__:
    _obj = eval(_name)
    if hasattr(_obj, "__module__"):
        _obj.__module__ = __name__
