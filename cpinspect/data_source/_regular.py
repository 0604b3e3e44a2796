"""Submodule containing a function to build the keyword data for a regular block grid."""

import logging

log = logging.getLogger(__name__)

import numpy as np

import cpinspect.data_source._data_source as ds
import cpinspect.data_source._keyword_source as dks
import cpinspect.olio.utility as ut


def regular_grid_source(extent_ijk, dxyz = (1.0, 1.0, 1.0), origin = (0.0, 0.0, 0.0), use_specgrid = True):
    """Returns a KeywordDataSource holding COORD, ZCORN and a grid size record for a regular block grid.

    arguments:
       extent_ijk (triple positive integers): the number of cells in the grid (nx, ny, nz)
       dxyz (triple float, default (1.0, 1.0, 1.0)): the size of each cell (dx, dy, dz); dz is the
          increase in depth from one layer to the next
       origin (triple float, default (0.0, 0.0, 0.0)): the location of the top of the first pillar
       use_specgrid (boolean, default True): if True, the grid size is held as a SPECGRID record;
          if False, as a DIMENS integer array

    returns:
       a newly created KeywordDataSource object

    notes:
       pillars are vertical, running from the origin depth down to the base of the deepest layer;
       all cells share corner points with their neighbours, ie. the grid is unfaulted
    """

    assert extent_ijk is not None and len(extent_ijk) == 3, 'extent must be a triple of integers'
    nx, ny, nz = (int(n) for n in extent_ijk)
    assert nx > 0 and ny > 0 and nz > 0, 'extent must be positive in each axis'
    dx, dy, dz = (float(d) for d in dxyz)
    ox, oy, oz = (float(o) for o in origin)

    # pillars: j varies slowest, i fastest; 6 values each, top xyz then bottom xyz
    coord = np.empty((ny + 1, nx + 1, 2, 3), dtype = float)
    coord[..., 0] = (ox + dx * np.arange(nx + 1, dtype = float)).reshape((1, nx + 1, 1))
    coord[..., 1] = (oy + dy * np.arange(ny + 1, dtype = float)).reshape((ny + 1, 1, 1))
    coord[:, :, 0, 2] = oz
    coord[:, :, 1, 2] = oz + dz * nz

    # zcorn: axes are (2 * nz, 2 * ny, 2 * nx), each logical step spanning a low, high pair
    kp_layer = np.arange(2 * nz, dtype = int)
    layer_depths = oz + dz * (kp_layer // 2 + kp_layer % 2)
    zcorn = np.empty((2 * nz, 2 * ny, 2 * nx), dtype = float)
    zcorn[:] = layer_depths.reshape((2 * nz, 1, 1))

    source = dks.KeywordDataSource(arrays = {ds.COORD_KEYWORD: coord, ds.ZCORN_KEYWORD: zcorn})
    if use_specgrid:
        source.set_specgrid((nx, ny, nz))
    else:
        source.set_array(ds.DIMENS_KEYWORD, np.array((nx, ny, nz), dtype = int))
    log.debug(f'regular grid keyword data built for extent {ut.string_ijk_for_extent_ijk((nx, ny, nz))}')

    return source
