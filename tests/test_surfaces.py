import numpy as np
import pytest

from nacafoil.camber import CamberLine
from nacafoil.geometry import gen_airfoil
from nacafoil.surfaces import boundary_from_surfaces, synthesize_surfaces


def test_symmetric_surfaces_are_mirror_images():
    geom = gen_airfoil("0012")
    upper, lower = geom.surfaces.upper, geom.surfaces.lower
    np.testing.assert_array_equal(upper[:, 0], lower[:, 0])
    np.testing.assert_array_equal(upper[:, 1], -lower[:, 1])
    np.testing.assert_array_equal(upper[:, 0], geom.x)


def test_surfaces_straddle_camber_line_near_leading_edge():
    geom = gen_airfoil(2412)
    x_c = geom.camber.x
    x_u = geom.surfaces.upper[:, 0]
    x_l = geom.surfaces.lower[:, 0]
    near_le = (x_c < 0.1) & (geom.camber.theta >= 0)
    assert np.any(near_le)
    assert np.all(x_u[near_le] <= x_c[near_le])
    assert np.all(x_c[near_le] <= x_l[near_le])


def test_upper_surface_above_lower():
    geom = gen_airfoil(4415)
    assert np.all(geom.surfaces.upper[1:, 1] > geom.surfaces.lower[1:, 1])


def test_offset_is_normal_to_camber_line():
    camber = CamberLine(
        x=np.array([0.5]),
        y=np.array([0.1]),
        theta=np.array([np.pi / 6]),
    )
    surfaces = synthesize_surfaces(camber, np.array([0.2]))
    np.testing.assert_allclose(surfaces.upper, [[0.5 - 0.1, 0.1 + 0.2 * np.cos(np.pi / 6)]])
    np.testing.assert_allclose(surfaces.lower, [[0.5 + 0.1, 0.1 - 0.2 * np.cos(np.pi / 6)]])


def test_mismatched_grid_rejected():
    camber = CamberLine(x=np.zeros(3), y=np.zeros(3), theta=np.zeros(3))
    with pytest.raises(ValueError):
        synthesize_surfaces(camber, np.zeros(4))


def test_boundary_ordering():
    geom = gen_airfoil(2412)
    upper, lower = geom.surfaces.upper, geom.surfaces.lower
    n = upper.shape[0]
    boundary = geom.surfaces.boundary
    assert boundary.shape == (2 * n - 1, 2)
    np.testing.assert_array_equal(boundary[0], upper[-1])
    np.testing.assert_array_equal(boundary[n - 1], upper[0])
    np.testing.assert_array_equal(boundary[-1], lower[-1])


def test_boundary_rejects_bad_shapes():
    with pytest.raises(ValueError):
        boundary_from_surfaces(np.zeros((4, 3)), np.zeros((4, 3)))
    with pytest.raises(ValueError):
        boundary_from_surfaces(np.zeros((4, 2)), np.zeros((5, 2)))
