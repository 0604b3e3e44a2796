import numpy as np
import pytest

import cpinspect.data_source as cds
from cpinspect.data_source import KeywordDataSource
from cpinspect.inspector import GridInspector


class CountingDataSource(cds.GridDataSource):
    """Wraps another data source, counting fetches of array data."""

    def __init__(self, source):
        self.source = source
        self.fetch_count = 0

    def has_field(self, name):
        return self.source.has_field(name)

    def floating_point_values(self, name):
        self.fetch_count += 1
        return self.source.floating_point_values(name)

    def integer_values(self, name):
        self.fetch_count += 1
        return self.source.integer_values(name)

    def specgrid(self):
        return self.source.specgrid()


@pytest.fixture
def regular_source() -> KeywordDataSource:
    return cds.regular_grid_source((3, 2, 4), dxyz = (100.0, 50.0, 20.0), origin = (1000.0, 2000.0, 3000.0))


@pytest.fixture
def regular_inspector(regular_source) -> GridInspector:
    return GridInspector(regular_source)


@pytest.fixture
def counting_source(regular_source) -> CountingDataSource:
    return CountingDataSource(regular_source)


@pytest.fixture
def numbered_zcorn_source() -> KeywordDataSource:
    """Grid of extent (3, 2, 4) where each ZCORN value equals its own position in the flat array."""
    source = cds.regular_grid_source((3, 2, 4))
    source.set_array('ZCORN', np.arange(8 * 3 * 2 * 4, dtype = float))
    return source


@pytest.fixture
def dipping_source() -> KeywordDataSource:
    """Grid of extent (2, 3, 1) with cells 10 x 20 x 5, depth increasing by 0.5 per unit x and 0.25 per unit y."""
    source = cds.regular_grid_source((2, 3, 1), dxyz = (10.0, 20.0, 5.0), origin = (0.0, 0.0, 100.0))
    zcorn = source.floating_point_values('ZCORN').reshape((2, 6, 4))
    ip_steps = np.arange(4, dtype = int)
    jp_steps = np.arange(6, dtype = int)
    corner_x = 10.0 * (ip_steps // 2 + ip_steps % 2)
    corner_y = 20.0 * (jp_steps // 2 + jp_steps % 2)
    zcorn = zcorn + 0.5 * corner_x.reshape((1, 1, 4)) + 0.25 * corner_y.reshape((1, 6, 1))
    source.set_array('ZCORN', zcorn)
    return source


@pytest.fixture
def sheared_column_source() -> KeywordDataSource:
    """Single cell grid whose column is a parallelogram of area 100, with cell edges 2 deep."""
    coord = np.array([
        [0.0, 0.0, 0.0, 0.0, 0.0, 10.0],
        [10.0, 0.0, 0.0, 10.0, 0.0, 10.0],
        [3.0, 10.0, 0.0, 3.0, 10.0, 10.0],
        [13.0, 10.0, 0.0, 13.0, 10.0, 10.0],
    ])
    zcorn = np.array([0.0, 0.0, 0.0, 0.0, 2.0, 2.0, 2.0, 2.0])
    return KeywordDataSource(arrays = {'COORD': coord, 'ZCORN': zcorn}, specgrid = (1, 1, 1))
