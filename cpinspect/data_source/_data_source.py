"""Submodule containing the abstract GridDataSource class and the SpecGrid record."""

from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from typing import Tuple

COORD_KEYWORD = 'COORD'
ZCORN_KEYWORD = 'ZCORN'
SPECGRID_KEYWORD = 'SPECGRID'
DIMENS_KEYWORD = 'DIMENS'


@dataclass(frozen = True)
class SpecGrid:
    """Structured grid specification record, as held for the SPECGRID keyword."""

    dimensions: Tuple[int, int, int]
    number_of_reservoirs: int = 1
    coordinate_type: str = 'F'  # 'F' for cartesian, 'T' for cylindrical


class GridDataSource(metaclass = ABCMeta):
    """Abstract base class for providers of already parsed corner point grid keyword data.

    A data source exposes named arrays (such as COORD and ZCORN) and a grid size record. The
    inspector only ever reads from a data source.

    Example use::

        class MyDeckSource(GridDataSource):

            def has_field(self, name):
                ...
    """

    @abstractmethod
    def has_field(self, name):
        """Returns True if the named keyword is present in the data source."""
        raise NotImplementedError

    def has_fields(self, names):
        """Returns True if all of the named keywords are present in the data source."""
        return all(self.has_field(name) for name in names)

    @abstractmethod
    def floating_point_values(self, name):
        """Returns a 1D numpy float array of the values for the named keyword; raises KeyError if absent."""
        raise NotImplementedError

    @abstractmethod
    def integer_values(self, name):
        """Returns a 1D numpy int array of the values for the named keyword; raises KeyError if absent."""
        raise NotImplementedError

    @abstractmethod
    def specgrid(self):
        """Returns the SpecGrid record; raises KeyError if absent."""
        raise NotImplementedError
