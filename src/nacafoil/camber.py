from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from nacafoil.designation import FiveDigitSeries, FourDigitSeries, Series


@dataclass(frozen=True)
class CamberLine:
    """
    Mean camber line sampled on a chordwise grid.

    Attributes
    ----------
    x : numpy.ndarray, shape (N,)
        Chordwise positions.
    y : numpy.ndarray, shape (N,)
        Camber ordinates y_c.
    theta : numpy.ndarray, shape (N,)
        Local slope angle of the camber line (radians).
    """

    x: np.ndarray
    y: np.ndarray
    theta: np.ndarray


def camber_naca4(m: float, p: float, x: np.ndarray) -> np.ndarray:
    """
    NACA 4-digit mean camber line y_c(x) on a chord of unit length.
    """
    x = np.asarray(x, dtype=float)
    y_c = np.zeros_like(x)

    # p = 0 is a flat camber line
    if p != 0:
        mask = x <= p
        y_c[mask] = m * (2 * p * x[mask] - x[mask] ** 2) / p**2
        y_c[~mask] = m * ((1 - 2 * p) + 2 * p * x[~mask] - x[~mask] ** 2) / (1 - p) ** 2

    return y_c


def slope_angle_finite_difference(x: np.ndarray, y_c: np.ndarray) -> np.ndarray:
    """
    Slope angle from differences between consecutive points.

    The last interval's angle is repeated at the final point. Zero-length
    intervals (duplicate samples) give an angle of 0.
    """
    x = np.asarray(x, dtype=float)
    y_c = np.asarray(y_c, dtype=float)
    if x.shape != y_c.shape or x.ndim != 1:
        raise ValueError("x and y_c must be 1D arrays of equal length")
    if x.shape[0] < 2:
        return np.zeros_like(x)

    dx = np.diff(x)
    dy = np.diff(y_c)
    slope = np.zeros_like(dx)
    np.divide(dy, dx, out=slope, where=dx != 0)

    theta = np.arctan(slope)
    return np.append(theta, theta[-1])


def camber_naca5(m: float, k1: float, x: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    NACA 5-digit mean camber line and its analytic slope.

    Parameters
    ----------
    m : float
        Junction between the cubic forward branch and the linear aft branch.
    k1 : float
        Camber scaling constant.
    x : numpy.ndarray
        Chordwise positions on a chord of unit length.

    Returns
    -------
    y_c : numpy.ndarray
        Camber ordinates.
    dyc_dx : numpy.ndarray
        Camber slope.
    """
    x = np.asarray(x, dtype=float)
    y_c = np.empty_like(x)
    dyc_dx = np.empty_like(x)

    mask = x <= m
    xf = x[mask]
    y_c[mask] = (k1 / 6) * (xf**3 - 3 * m * xf**2 + m**2 * (3 - m) * xf)
    dyc_dx[mask] = (k1 / 6) * (3 * xf**2 - 6 * m * xf + m**2 * (3 - m))

    y_c[~mask] = (k1 * m**3 / 6) * (1 - x[~mask])
    dyc_dx[~mask] = -(k1 * m**3) / 6

    return y_c, dyc_dx


def gen_camber_line(series: Series, x: np.ndarray) -> CamberLine:
    """
    Evaluate the mean camber line of a parsed designation.

    Parameters
    ----------
    series : FourDigitSeries or FiveDigitSeries
        Parsed designation.
    x : numpy.ndarray
        Normalized chordwise grid (0 <= x <= 1), non-decreasing.

    Returns
    -------
    CamberLine
    """
    x = np.asarray(x, dtype=float)

    if isinstance(series, FourDigitSeries):
        y_c = camber_naca4(series.m, series.p, x)
        theta = slope_angle_finite_difference(x, y_c)
    elif isinstance(series, FiveDigitSeries):
        y_c, dyc_dx = camber_naca5(series.m, series.k1, x)
        theta = np.arctan(dyc_dx)
    else:
        raise TypeError(f"Unknown NACA series {type(series).__name__}")

    return CamberLine(x=x, y=y_c, theta=theta)
