"""Sources of corner point grid keyword data."""

__all__ = ['GridDataSource', 'SpecGrid', 'KeywordDataSource', 'regular_grid_source']

from ._data_source import GridDataSource, SpecGrid
from ._data_source import COORD_KEYWORD, ZCORN_KEYWORD, SPECGRID_KEYWORD, DIMENS_KEYWORD
from ._keyword_source import KeywordDataSource
from ._regular import regular_grid_source

# Set "module" attribute of all public objects to this path.
for _name in __all__:
    _obj = eval(_name)
    if hasattr(_obj, "__module__"):
        _obj.__module__ = __name__
