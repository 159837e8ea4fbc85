from __future__ import annotations

import numpy as np
import matplotlib.pyplot as plt

from nacafoil.geometry import AirfoilGeometry


def _as_points(points: np.ndarray, name: str) -> np.ndarray:
    points = np.asarray(points, dtype=float)
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"{name} must have shape (N, 2)")
    return points


def plot_airfoil(
    chord_line: np.ndarray,
    upper: np.ndarray,
    lower: np.ndarray,
    camber: np.ndarray,
    *,
    title: str,
    ax=None,
    show: bool = True,
) -> None:
    """
    Plot the chord line, both surfaces and the camber line of a section.

    Parameters
    ----------
    chord_line, upper, lower, camber : numpy.ndarray, shape (N, 2)
        Point sequences (x, y) in chord units.
    title : str
        Figure title.
    ax : matplotlib.axes.Axes, optional
        Axes to draw into. A new figure is created if omitted.
    show : bool, optional
        If True, call plt.show() once drawn.
    """
    chord_line = _as_points(chord_line, "chord_line")
    upper = _as_points(upper, "upper")
    lower = _as_points(lower, "lower")
    camber = _as_points(camber, "camber")

    if ax is None:
        _, ax = plt.subplots(figsize=(8, 3))

    ax.plot(chord_line[:, 0], chord_line[:, 1], "k--", lw=1.0, label="Chord Line")
    ax.plot(upper[:, 0], upper[:, 1], "b", lw=1.5, label="Upper Surface")
    ax.plot(lower[:, 0], lower[:, 1], "r", lw=1.5, label="Lower Surface")
    ax.plot(camber[:, 0], camber[:, 1], "g--", lw=1.2, label="Camber Line")

    ax.set_aspect("equal")
    ax.grid(True)
    ax.set_xlabel("x / Chord length")
    ax.set_ylabel("y / Chord length")
    ax.legend(loc="upper right")
    ax.set_title(title)

    if show:
        plt.show()


def plot_geometry(geometry: AirfoilGeometry, **kwargs) -> None:
    plot_airfoil(
        geometry.chord_line,
        geometry.surfaces.upper,
        geometry.surfaces.lower,
        geometry.camber_points,
        title=geometry.title,
        **kwargs,
    )
