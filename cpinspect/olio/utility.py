"""Generic small utility functions."""

import numpy as np
import numpy.typing as npt
from typing import Union, List, Tuple


def extent_switch_ijk_kji(
        extent_in: Union[Tuple[int, int, int], npt.NDArray[np.int_]]) -> npt.NDArray[np.int_]:  # reverse order
    """Returns equivalent grid extent switched either way between simulator and python protocols."""
    extent_in = np.array(extent_in, dtype = int)
    dims = extent_in.size
    result = np.zeros(dims, dtype = 'int')
    for d in range(dims):
        result[d] = extent_in[dims - d - 1]
    return result


def cell_count_from_extent(extent: Union[List[int], Tuple[int], npt.NDArray[np.int_]]) -> int:
    """Returns the number of cells in a grid with the given extent."""
    result = 1
    for val in extent:  # list, tuple or 1D numpy array
        result *= int(val)
    return result


def pillar_count_from_extent_ijk(extent_ijk: Union[List[int], Tuple[int], npt.NDArray[np.int_]]) -> int:
    """Returns the number of (unsplit) pillars in a corner point grid with the given extent."""
    return (int(extent_ijk[0]) + 1) * (int(extent_ijk[1]) + 1)


def string_ijk1_for_cell_ijk0(cell_ijk0: Union[Tuple[int, int, int], npt.NDArray[np.int_]]) -> str:
    """Returns a string showing indices for a cell in simulator protocol, from data in python protocol."""
    return '[{:}, {:}, {:}]'.format(cell_ijk0[0] + 1, cell_ijk0[1] + 1, cell_ijk0[2] + 1)


def string_ijk_for_extent_ijk(extent_ijk: Union[Tuple[int, int, int], npt.NDArray[np.int_]]) -> str:
    """Returns a string showing grid extent in simulator protocol."""
    return '[{:}, {:}, {:}]'.format(extent_ijk[0], extent_ijk[1], extent_ijk[2])
