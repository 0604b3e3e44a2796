"""indexing.py: Index arithmetic for flat corner point grid arrays (COORD and ZCORN).

All functions here are pure: they take the logical extent of the grid as (nx, ny, nz) and return
indices or offsets into flat keyword arrays, without reading any array data.

notes:
   cells are numbered horizon by horizon with i varying fastest, then j, then k;
   in the ZCORN array each cell contributes a low and a high value along each logical axis,
   hence the factor of 2 in the strides used for corner offsets;
   in the COORD array each pillar contributes 6 values: x, y, z at the top then x, y, z at the bottom
"""

import operator

import numpy as np

import cpinspect.olio.exceptions as exc
import cpinspect.olio.utility as ut

values_per_pillar = 6
corners_per_cell = 8

_axis_ordinals = ('First', 'Second', 'Third')


def cell_index_to_logical_coords(cell_index, extent_ijk):
    """Returns the logical coordinates (i, j, k) of a cell identified by its linear index.

    arguments:
       cell_index (int): linear cell index in the range [0, nx * ny * nz)
       extent_ijk (triple int): the logical size of the grid (nx, ny, nz)

    returns:
       triple int (i0, j0, k0) being the zero based logical coordinates of the cell

    notes:
       the arithmetic is carried out in one based index space, where a zero remainder is treated
       as the divisor itself (remainders lie in [1, divisor]); the result is converted back to zero
       based coordinates; this convention matters at the last cell of a row and of a horizon
    """

    cell_index = operator.index(cell_index)
    nx, ny, nz = (int(n) for n in extent_ijk)
    cell_count = nx * ny * nz
    if cell_index < 0 or cell_index >= cell_count:
        raise exc.OutOfBoundsError(f'cell index {cell_index} out of bounds for grid of {cell_count} cells')

    per_horizon = nx * ny
    index1 = cell_index + 1

    horizon_index = index1 - (index1 // per_horizon) * per_horizon  # index within the horizon
    if horizon_index == 0:
        horizon_index = per_horizon

    i = horizon_index - (horizon_index // nx) * nx
    if i == 0:
        i = nx
    j = (horizon_index - i) // nx + 1
    k = (index1 - nx * (j - 1) - 1) // per_horizon + 1

    return (i - 1, j - 1, k - 1)


def check_logical_coords(i, j, k, extent_ijk):
    """Raises OutOfBoundsError if any of the logical coordinates lies outside the grid extent.

    note:
       a TypeError is raised if a coordinate is not an integer (python or numpy int)
    """

    for ordinal, value, n in zip(_axis_ordinals, (i, j, k), extent_ijk):
        value = operator.index(value)
        if value < 0 or value >= n:
            raise exc.OutOfBoundsError(f'{ordinal} coordinate out of bounds: {value} not in [0, {n})')


def pillar_index(i, j, extent_ijk):
    """Returns the natural index of the pillar at the low i, low j corner of column (i, j)."""

    return i + j * (int(extent_ijk[0]) + 1)


def pillar_offset(i, j, extent_ijk):
    """Returns the offset into the flat COORD array of the first value for the pillar at (i, j)."""

    return values_per_pillar * pillar_index(i, j, extent_ijk)


def column_pillar_offsets(i, j, extent_ijk):
    """Returns the COORD offsets of the four pillars bounding column (i, j).

    returns:
       numpy int array of shape (4,) holding offsets for the pillars in the order:
       near, +x, +y, +x+y (ie. (ip, jp) = (0, 0), (1, 0), (0, 1), (1, 1))
    """

    pix = pillar_index(i, j, extent_ijk)
    pillars_per_row = int(extent_ijk[0]) + 1
    return values_per_pillar * np.array((pix, pix + 1, pix + pillars_per_row, pix + pillars_per_row + 1), dtype = int)


def corner_strides(extent_ijk):
    """Returns the ZCORN strides (i, j, k) between the low and high corner values along each logical axis."""

    nx, ny = int(extent_ijk[0]), int(extent_ijk[1])
    return (1, 2 * nx, 4 * nx * ny)


def corner_offset(i, j, k, extent_ijk):
    """Returns the offset into the flat ZCORN array of the low, low, low corner depth of cell (i, j, k)."""

    di, dj, dk = corner_strides(extent_ijk)
    return 2 * (i * di + j * dj + k * dk)


def corner_offsets(i, j, k, extent_ijk):
    """Returns the ZCORN offsets of the eight corner depths of cell (i, j, k).

    returns:
       numpy int array of shape (8,) in corner point ordering: LLL, HLL, LHL, HHL, LLH, HLH, LHH, HHH,
       where L and H denote low and high along the x (i), y (j) and z (k) axes respectively
    """

    di, dj, dk = corner_strides(extent_ijk)
    ix = corner_offset(i, j, k, extent_ijk)
    return ix + np.array((0, di, dj, dj + di, dk, dk + di, dk + dj, dk + dj + di), dtype = int)


def expected_coord_length(extent_ijk):
    """Returns the number of values expected in the COORD array for a grid of the given extent."""

    return values_per_pillar * ut.pillar_count_from_extent_ijk(extent_ijk)


def expected_zcorn_length(extent_ijk):
    """Returns the number of values expected in the ZCORN array for a grid of the given extent."""

    return corners_per_cell * ut.cell_count_from_extent(extent_ijk)
