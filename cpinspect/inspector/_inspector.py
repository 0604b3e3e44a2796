"""Submodule containing the GridInspector class."""

import logging

log = logging.getLogger(__name__)

import numpy as np

import cpinspect.data_source as cds
import cpinspect.olio.exceptions as exc
import cpinspect.olio.indexing as cix
import cpinspect.olio.utility as ut


class GridInspector:
    """Class for answering geometric queries about the cells of a corner point grid.

    notes:
       the inspector holds a reference to a data source and the logical size of the grid; keyword arrays
       are fetched from the data source, and their sizes checked, afresh for every query, so no array
       data is cached between calls; the volume and dip calculations assume vertical pillars, with the
       horizontal layout of each column taken from the tops of its four pillars;
       query methods accept either logical coordinates (i, j, k) or a single linear cell index
    """

    def __init__(self, data_source):
        """Creates a new inspector for the grid described by the data source.

        arguments:
           data_source (GridDataSource): provider of the COORD and ZCORN arrays and the grid size,
              held in either a SPECGRID record or a DIMENS array

        returns:
           a newly created GridInspector object

        notes:
           the SPECGRID record is preferred over DIMENS when both are present;
           a ConfigurationError is raised if COORD or ZCORN is missing, or if no valid grid size is found;
           the sizes of the COORD and ZCORN arrays are not checked until they are used
        """

        required = [cds.COORD_KEYWORD, cds.ZCORN_KEYWORD]
        if not data_source.has_fields(required):
            missing = [keyword for keyword in required if not data_source.has_field(keyword)]
            raise exc.ConfigurationError(f'needed keyword(s) missing from data source: {", ".join(missing)}')

        if data_source.has_field(cds.SPECGRID_KEYWORD):
            dimensions = data_source.specgrid().dimensions
            dimension_source = cds.SPECGRID_KEYWORD
        elif data_source.has_field(cds.DIMENS_KEYWORD):
            try:
                dimensions = data_source.integer_values(cds.DIMENS_KEYWORD)
            except ValueError as e:
                raise exc.ConfigurationError(f'{cds.DIMENS_KEYWORD} grid size must be whole numbers') from e
            dimension_source = cds.DIMENS_KEYWORD
        else:
            raise exc.ConfigurationError(
                f'found neither {cds.SPECGRID_KEYWORD} nor {cds.DIMENS_KEYWORD} in data source; at least one is needed')

        if len(dimensions) != 3:
            raise exc.ConfigurationError(f'{dimension_source} holds {len(dimensions)} values; 3 are needed')
        dimensions = np.asarray(dimensions)
        if dimensions.dtype.kind not in 'iuf' or not np.all(np.mod(dimensions, 1) == 0):
            raise exc.ConfigurationError(f'{dimension_source} grid size must be whole numbers: {list(dimensions)}')
        extent_ijk = tuple(int(n) for n in dimensions)
        if min(extent_ijk) <= 0:
            raise exc.ConfigurationError(f'{dimension_source} grid size must be positive in each axis: ' +
                                         ut.string_ijk_for_extent_ijk(extent_ijk))

        self.data_source = data_source
        self.__extent_ijk = extent_ijk
        log.debug(f'grid inspector extent {ut.string_ijk_for_extent_ijk(extent_ijk)} taken from {dimension_source}')

    @property
    def extent_ijk(self):
        """The logical size of the grid as a tuple (nx, ny, nz)."""
        return self.__extent_ijk

    def grid_size(self):
        """Returns the logical size of the grid as a tuple of 3 ints (nx, ny, nz)."""
        return self.__extent_ijk

    def cell_count(self):
        """Returns the number of cells in the grid."""
        return ut.cell_count_from_extent(self.__extent_ijk)

    def cell_index_to_logical_coords(self, cell_index):
        """Returns the zero based logical coordinates (i, j, k) of the cell with the given linear index."""
        return cix.cell_index_to_logical_coords(cell_index, self.__extent_ijk)

    def check_logical_coords(self, i, j, k):
        """Raises OutOfBoundsError if (i, j, k) lies outside the grid; the error message names the axis."""
        cix.check_logical_coords(i, j, k, self.__extent_ijk)

    def cell_corners(self, i, j, k):
        """Returns the ZCORN depths of the eight corners of cell (i, j, k).

        returns:
           numpy float array of shape (8,) in corner point ordering: LLL, HLL, LHL, HHL, LLH, HLH, LHH, HHH,
           where L and H denote low and high along the x, y and z axes respectively
        """

        self.check_logical_coords(i, j, k)
        zcorn = self._zcorn()
        return zcorn[cix.corner_offsets(i, j, k, self.__extent_ijk)]

    def cell_volume(self, i, j = None, k = None):
        """Returns the volume of a cell, assuming vertical pillars.

        arguments:
           i (int): the logical i coordinate of the cell; or the linear cell index if j and k are None
           j (int, optional): the logical j coordinate of the cell
           k (int, optional): the logical k coordinate of the cell

        returns:
           float, being the horizontal area of the cell's column multiplied by the mean height of the
           cell's four vertical edges

        notes:
           the area is half the 2D cross product of the diagonals of the quadrilateral formed by the tops
           of the four pillars of the column; the result is only exact for vertical pillars and has
           units of xy length squared times z length

        :meta common:
        """

        i, j, k = self._cell_ijk(i, j, k)
        self.check_logical_coords(i, j, k)
        coord = self._coord()
        zcorn = self._zcorn()

        pillar_offsets = cix.column_pillar_offsets(i, j, self.__extent_ijk)
        px = coord[pillar_offsets]
        py = coord[pillar_offsets + 1]
        diag1 = (px[3] - px[0], py[3] - py[0])
        diag2 = (px[2] - px[1], py[2] - py[1])
        area = 0.5 * (diag1[0] * diag2[1] - diag1[1] * diag2[0])

        cell_z = zcorn[cix.corner_offsets(i, j, k, self.__extent_ijk)]
        mean_dz = np.mean(cell_z[4:] - cell_z[:4])  # LLL -> LLH, HLL -> HLH, LHL -> LHH, HHL -> HHH

        return float(area * mean_dz)

    def cell_dips(self, i, j = None, k = None):
        """Returns the dip slopes of a cell in the x and y directions, assuming vertical pillars.

        arguments:
           i (int): the logical i coordinate of the cell; or the linear cell index if j and k are None
           j (int, optional): the logical j coordinate of the cell
           k (int, optional): the logical k coordinate of the cell

        returns:
           pair of floats (x_dip, y_dip), each being the mean rise in depth over the four cell edges running
           in the positive direction of that axis, divided by the cell length in that direction

        note:
           cell lengths are taken from the x (or y) separation of the tops of neighbouring pillars, so this
           is only meaningful for regularly placed, vertical pillars

        :meta common:
        """

        i, j, k = self._cell_ijk(i, j, k)
        self.check_logical_coords(i, j, k)
        coord = self._coord()
        zcorn = self._zcorn()

        cell_z = zcorn[cix.corner_offsets(i, j, k, self.__extent_ijk)]

        pillar_offsets = cix.column_pillar_offsets(i, j, self.__extent_ijk)
        cell_x_length = coord[pillar_offsets[1]] - coord[pillar_offsets[0]]
        cell_y_length = coord[pillar_offsets[2] + 1] - coord[pillar_offsets[0] + 1]
        if cell_x_length == 0.0 or cell_y_length == 0.0:
            log.warning(f'zero length column for cell {ut.string_ijk1_for_cell_ijk0((i, j, k))}; dip not finite')

        # LLL -> HLL, LHL -> HHL, LLH -> HLH, LHH -> HHH
        x_rise = (cell_z[[1, 3, 5, 7]] - cell_z[[0, 2, 4, 6]]) / cell_x_length
        # LLL -> LHL, HLL -> HHL, LLH -> LHH, HLH -> HHH
        y_rise = (cell_z[[2, 3, 6, 7]] - cell_z[[0, 1, 4, 5]]) / cell_y_length

        return (float(np.mean(x_rise)), float(np.mean(y_rise)))

    def cell_volumes(self):
        """Returns a numpy float array of shape (nz, ny, nx) holding the volume of every cell.

        note:
           each volume is computed with cell_volume(), so the same vertical pillar assumption applies
        """

        nx, ny, nz = self.__extent_ijk
        volumes = np.empty(tuple(ut.extent_switch_ijk_kji(self.__extent_ijk)), dtype = float)
        for k in range(nz):
            for j in range(ny):
                for i in range(nx):
                    volumes[k, j, i] = self.cell_volume(i, j, k)
        return volumes

    def grid_limits(self, include_pillar_bases = False):
        """Returns the extent of the grid in x, y and z.

        arguments:
           include_pillar_bases (boolean, default False): if True, the x, y values at the bottom of each
              pillar are included when finding the x & y limits; otherwise only the tops are used

        returns:
           tuple of 6 floats: (xmin, xmax, ymin, ymax, zmin, zmax)

        notes:
           the z limits are the minimum and maximum of all values in the ZCORN array, not the pillar
           end points; SPECGRID, COORD and ZCORN must all be present in the data source

        :meta common:
        """

        required = [cds.SPECGRID_KEYWORD, cds.COORD_KEYWORD, cds.ZCORN_KEYWORD]
        if not self.data_source.has_fields(required):
            raise exc.ConfigurationError(
                f'grid does not have {", ".join(required)} in data source; cannot find grid limits')
        coord = self._coord().reshape((-1, 2, 3))
        zcorn = self._zcorn()

        if include_pillar_bases:
            xy = coord[:, :, :2].reshape((-1, 2))
        else:
            xy = coord[:, 0, :2]
        x_min, y_min = np.min(xy, axis = 0)
        x_max, y_max = np.max(xy, axis = 0)

        return (float(x_min), float(x_max), float(y_min), float(y_max), float(np.min(zcorn)), float(np.max(zcorn)))

    def _cell_ijk(self, i, j, k):
        if j is None and k is None:
            return self.cell_index_to_logical_coords(i)
        assert j is not None and k is not None, 'either a linear cell index or all of i, j & k must be given'
        return (i, j, k)

    def _coord(self):
        return self.__checked_values(cds.COORD_KEYWORD, cix.expected_coord_length(self.__extent_ijk))

    def _zcorn(self):
        return self.__checked_values(cds.ZCORN_KEYWORD, cix.expected_zcorn_length(self.__extent_ijk))

    def __checked_values(self, keyword, expected_length):
        values = np.ravel(np.asarray(self.data_source.floating_point_values(keyword), dtype = float))
        if values.size != expected_length:
            log.error(f'wrong size of {keyword} array for grid of extent ' +
                      ut.string_ijk_for_extent_ijk(self.__extent_ijk))
            raise exc.SizeMismatchError(
                f'wrong size of {keyword} array: {values.size} values found; {expected_length} expected')
        return values
