"""Submodule containing the KeywordDataSource class, an in-memory store of grid keyword arrays."""

import logging

log = logging.getLogger(__name__)

import numpy as np

import cpinspect.data_source._data_source as ds


def _standard_keyword(keyword):
    return keyword.strip().upper()


class KeywordDataSource(ds.GridDataSource):
    """Class holding corner point grid keyword arrays in memory, keyed by keyword name.

    notes:
       keyword names are case insensitive; arrays are held as flattened copies of the data supplied;
       the SPECGRID record is held separately from the keyword arrays, as it is structured data
    """

    def __init__(self, arrays = None, specgrid = None):
        """Creates a new keyword data source.

        arguments:
           arrays (dict, optional): maps keyword name to array like data (any shape, flattened when stored)
           specgrid (SpecGrid or triple int, optional): the structured grid size record; if a triple of
              ints is given, it is treated as the dimensions of a SpecGrid with default values for other fields

        returns:
           a newly created KeywordDataSource object
        """

        self._arrays = {}
        self._specgrid = None
        if arrays:
            for keyword, values in arrays.items():
                self.set_array(keyword, values)
        if specgrid is not None:
            self.set_specgrid(specgrid)

    def set_array(self, keyword, values):
        """Stores a flattened copy of the values for the keyword, replacing any existing data."""

        keyword = _standard_keyword(keyword)
        assert keyword != ds.SPECGRID_KEYWORD, 'use set_specgrid() for the SPECGRID record'
        self._arrays[keyword] = np.array(values).flatten()
        log.debug(f'keyword {keyword} set with {self._arrays[keyword].size} values')

    def set_specgrid(self, specgrid, number_of_reservoirs = 1, coordinate_type = 'F'):
        """Stores the SPECGRID record; specgrid may be a SpecGrid object or a triple of dimensions."""

        if not isinstance(specgrid, ds.SpecGrid):
            dimensions = tuple(specgrid)
            assert len(dimensions) == 3, 'SPECGRID dimensions must be a triple'
            specgrid = ds.SpecGrid(dimensions = dimensions,
                                   number_of_reservoirs = number_of_reservoirs,
                                   coordinate_type = coordinate_type)
        self._specgrid = specgrid

    def remove(self, keyword):
        """Removes the keyword (which may be SPECGRID) from the data source, if present."""

        keyword = _standard_keyword(keyword)
        if keyword == ds.SPECGRID_KEYWORD:
            self._specgrid = None
        else:
            self._arrays.pop(keyword, None)

    def keywords(self):
        """Returns a sorted list of the keywords present, including SPECGRID if the record is held."""

        keyword_list = list(self._arrays.keys())
        if self._specgrid is not None:
            keyword_list.append(ds.SPECGRID_KEYWORD)
        return sorted(keyword_list)

    def has_field(self, name):
        """Returns True if the named keyword is present."""

        name = _standard_keyword(name)
        if name == ds.SPECGRID_KEYWORD:
            return self._specgrid is not None
        return name in self._arrays

    def floating_point_values(self, name):
        """Returns a copy of the values for the named keyword as a 1D numpy float array."""

        return np.array(self._values(name), dtype = float)

    def integer_values(self, name):
        """Returns a copy of the values for the named keyword as a 1D numpy int array.

        note:
           a ValueError is raised if any of the values is not a whole number
        """

        values = self._values(name)
        int_values = np.array(values, dtype = int)
        if not np.all(int_values == values):
            raise ValueError(f'non integer value found in keyword {_standard_keyword(name)}')
        return int_values

    def specgrid(self):
        """Returns the SpecGrid record."""

        if self._specgrid is None:
            raise KeyError(ds.SPECGRID_KEYWORD)
        return self._specgrid

    def _values(self, name):
        name = _standard_keyword(name)
        if name not in self._arrays:
            raise KeyError(name)
        return self._arrays[name]
