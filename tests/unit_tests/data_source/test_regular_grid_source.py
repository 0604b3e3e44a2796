import numpy as np
import pytest
from numpy.testing import assert_array_almost_equal

import cpinspect.data_source as cds


def test_regular_grid_source_array_lengths(regular_source):
    assert regular_source.floating_point_values('COORD').size == 6 * 4 * 3
    assert regular_source.floating_point_values('ZCORN').size == 8 * 3 * 2 * 4
    assert regular_source.specgrid().dimensions == (3, 2, 4)
    assert not regular_source.has_field('DIMENS')


def test_regular_grid_source_pillars(regular_source):
    coord = regular_source.floating_point_values('COORD').reshape((3, 4, 2, 3))
    # first pillar
    assert_array_almost_equal(coord[0, 0].flatten(), [1000.0, 2000.0, 3000.0, 1000.0, 2000.0, 3080.0])
    # last pillar
    assert_array_almost_equal(coord[2, 3].flatten(), [1300.0, 2100.0, 3000.0, 1300.0, 2100.0, 3080.0])
    # second pillar in first row is one cell along in x
    assert_array_almost_equal(coord[0, 1, 0], [1100.0, 2000.0, 3000.0])
    # all pillars vertical
    assert_array_almost_equal(coord[:, :, 0, :2], coord[:, :, 1, :2])


def test_regular_grid_source_depths(regular_source):
    zcorn = regular_source.floating_point_values('ZCORN').reshape((8, 4, 6))
    expected_layer_depths = [3000.0, 3020.0, 3020.0, 3040.0, 3040.0, 3060.0, 3060.0, 3080.0]
    for kp_layer, depth in enumerate(expected_layer_depths):
        assert np.all(zcorn[kp_layer] == depth)


def test_regular_grid_source_dimens():
    source = cds.regular_grid_source((2, 3, 1), use_specgrid = False)
    assert not source.has_field('SPECGRID')
    assert np.all(source.integer_values('DIMENS') == np.array([2, 3, 1]))
    assert source.floating_point_values('COORD').size == 6 * 3 * 4
    assert_array_almost_equal(np.unique(source.floating_point_values('ZCORN')), [0.0, 1.0])


@pytest.mark.parametrize('extent_ijk', [(0, 1, 1), (2, 2), (1, -1, 1)])
def test_regular_grid_source_bad_extent(extent_ijk):
    with pytest.raises(AssertionError):
        cds.regular_grid_source(extent_ijk)
