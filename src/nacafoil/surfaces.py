from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from nacafoil.camber import CamberLine


@dataclass(frozen=True)
class SurfaceCoordinates:
    """
    Upper and lower airfoil surfaces, both ordered leading edge -> trailing edge.

    Attributes
    ----------
    upper : numpy.ndarray, shape (N, 2)
    lower : numpy.ndarray, shape (N, 2)
    """

    upper: np.ndarray
    lower: np.ndarray

    @property
    def boundary(self) -> np.ndarray:
        return boundary_from_surfaces(self.upper, self.lower)


def synthesize_surfaces(camber: CamberLine, y_t: np.ndarray) -> SurfaceCoordinates:
    """
    Offset the half-thickness normal to the camber line.

    Parameters
    ----------
    camber : CamberLine
        Camber line (x_c, y_c, theta).
    y_t : numpy.ndarray, shape (N,)
        Half-thickness on the same grid.

    Returns
    -------
    SurfaceCoordinates
        x_u, y_u = x_c - y_t*sin(theta), y_c + y_t*cos(theta)
        x_l, y_l = x_c + y_t*sin(theta), y_c - y_t*cos(theta)
    """
    x_c = np.asarray(camber.x, dtype=float)
    y_c = np.asarray(camber.y, dtype=float)
    theta = np.asarray(camber.theta, dtype=float)
    y_t = np.asarray(y_t, dtype=float)

    if not (x_c.shape == y_c.shape == theta.shape == y_t.shape):
        raise ValueError("camber line and thickness must be sampled on the same grid")

    sin_t = np.sin(theta)
    cos_t = np.cos(theta)

    x_u, y_u = x_c - y_t * sin_t, y_c + y_t * cos_t
    x_l, y_l = x_c + y_t * sin_t, y_c - y_t * cos_t

    return SurfaceCoordinates(
        upper=np.column_stack([x_u, y_u]),
        lower=np.column_stack([x_l, y_l]),
    )


def boundary_from_surfaces(upper: np.ndarray, lower: np.ndarray) -> np.ndarray:
    """
    Join the surfaces into one outline.

    Parameters
    ----------
    upper, lower : numpy.ndarray, shape (N, 2)
        Surfaces ordered leading edge -> trailing edge, sharing the LE point.

    Returns
    -------
    numpy.ndarray, shape (2 * N - 1, 2)
        Outline from the upper trailing edge to the leading edge,
        then back along the lower surface to the trailing edge.
    """
    upper = np.asarray(upper, dtype=float)
    lower = np.asarray(lower, dtype=float)
    if upper.ndim != 2 or upper.shape[1] != 2:
        raise ValueError("upper must have shape (N, 2)")
    if lower.shape != upper.shape:
        raise ValueError("lower must have the same shape as upper")

    return np.vstack([upper[::-1], lower[1:]])
