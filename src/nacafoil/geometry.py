from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from nacafoil.camber import CamberLine, gen_camber_line
from nacafoil.designation import Series, parse_designation
from nacafoil.grid import ChordwiseGrid, gen_chordwise_grid
from nacafoil.surfaces import SurfaceCoordinates, synthesize_surfaces
from nacafoil.thickness import thickness_distribution


@dataclass(frozen=True)
class AirfoilGeometry:
    """
    Complete geometry of one NACA section.

    Attributes
    ----------
    series : FourDigitSeries or FiveDigitSeries
        Parsed designation.
    chord : float
        Chord length all coordinates are scaled by.
    grid : ChordwiseGrid
        Chordwise samples, in chord units.
    camber : CamberLine
        Mean camber line (theta is scale-free).
    y_t : numpy.ndarray
        Half-thickness on the grid.
    surfaces : SurfaceCoordinates
        Upper and lower surfaces.
    """

    series: Series
    chord: float
    grid: ChordwiseGrid
    camber: CamberLine
    y_t: np.ndarray
    surfaces: SurfaceCoordinates

    @property
    def x(self) -> np.ndarray:
        return self.camber.x

    @property
    def chord_line(self) -> np.ndarray:
        return np.column_stack([self.x, np.zeros_like(self.x)])

    @property
    def camber_points(self) -> np.ndarray:
        return np.column_stack([self.camber.x, self.camber.y])

    @property
    def title(self) -> str:
        return f"NACA {self.series.number:05d} Airfoil Geometry"


def gen_airfoil(designation: int | str, chord: float = 1.0) -> AirfoilGeometry:
    """
    Parse a NACA designation and compute its section geometry.

    Parameters
    ----------
    designation : int or str
        NACA 4- or 5-digit designation (e.g. 2412, "0012", 23012).
    chord : float, optional
        Chord length to scale the section. Defaults to 1.0.

    Returns
    -------
    AirfoilGeometry
    """
    if not np.isfinite(chord) or chord <= 0:
        raise ValueError("chord must be a positive finite number")

    series = parse_designation(designation)

    # formulas are defined on x/c; scale afterwards
    grid = gen_chordwise_grid(series.p, series.fine_step, series.coarse_step)
    x = grid.x
    camber = gen_camber_line(series, x)
    y_t = thickness_distribution(series.t, x)
    surfaces = synthesize_surfaces(camber, y_t)

    return AirfoilGeometry(
        series=series,
        chord=chord,
        grid=ChordwiseGrid(forward=grid.forward * chord, aft=grid.aft * chord),
        camber=CamberLine(x=camber.x * chord, y=camber.y * chord, theta=camber.theta),
        y_t=y_t * chord,
        surfaces=SurfaceCoordinates(
            upper=surfaces.upper * chord,
            lower=surfaces.lower * chord,
        ),
    )
