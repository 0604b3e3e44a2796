"""Submodule containing a function to tabulate the geometry of every cell of a grid as a pandas dataframe."""

import logging

log = logging.getLogger(__name__)

import numpy as np
import pandas as pd


def cell_geometry_dataframe(inspector):
    """Returns a pandas dataframe with one row per cell, holding logical coordinates, volume and dips.

    arguments:
       inspector (GridInspector): the inspector for the grid of interest

    returns:
       pandas.DataFrame indexed by linear cell index (index name 'cell'), with columns:
       'i', 'j', 'k' (zero based logical coordinates), 'volume', 'x_dip' and 'y_dip'

    note:
       rows are in linear cell index order, ie. i varying fastest, then j, then k
    """

    cell_count = inspector.cell_count()
    ijk = np.empty((cell_count, 3), dtype = int)
    volume = np.empty(cell_count, dtype = float)
    dips = np.empty((cell_count, 2), dtype = float)

    for cell in range(cell_count):
        ijk[cell] = inspector.cell_index_to_logical_coords(cell)
        volume[cell] = inspector.cell_volume(*ijk[cell])
        dips[cell] = inspector.cell_dips(*ijk[cell])

    df = pd.DataFrame({
        'i': ijk[:, 0],
        'j': ijk[:, 1],
        'k': ijk[:, 2],
        'volume': volume,
        'x_dip': dips[:, 0],
        'y_dip': dips[:, 1]
    })
    df.index.name = 'cell'
    log.debug(f'cell geometry dataframe built for {cell_count} cells')

    return df
