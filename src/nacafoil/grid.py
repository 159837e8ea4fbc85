from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ChordwiseGrid:
    """
    Chordwise sample points split at the position of maximum camber.

    Attributes
    ----------
    forward : numpy.ndarray
        Fine samples on [0, p*c].
    aft : numpy.ndarray
        Coarse samples on [p*c, c].
    """

    forward: np.ndarray
    aft: np.ndarray

    @property
    def x(self) -> np.ndarray:
        # boundary sample p*c appears twice
        return np.concatenate([self.forward, self.aft])

    @property
    def split_index(self) -> int:
        return self.forward.shape[0]


def _uniform_range(start: float, stop: float, step: float) -> np.ndarray:
    n_steps = int(round((stop - start) / step))
    return np.linspace(start, stop, n_steps + 1)


def gen_chordwise_grid(
    p: float,
    fine_step: float,
    coarse_step: float,
    chord: float = 1.0,
) -> ChordwiseGrid:
    """
    Generate the chordwise grid: fine upstream of max camber, coarser aft of it.

    Parameters
    ----------
    p : float
        Position of maximum camber as fraction of chord, 0 <= p < 1.
    fine_step : float
        Sample spacing on [0, p*chord].
    coarse_step : float
        Sample spacing on [p*chord, chord].
    chord : float, optional
        Chord length. Defaults to 1.0.

    Returns
    -------
    ChordwiseGrid
        Both sub-ranges include their endpoints exactly.
    """
    if not np.isfinite(chord) or chord <= 0:
        raise ValueError("chord must be a positive finite number")
    if fine_step <= 0 or coarse_step <= 0:
        raise ValueError("grid steps must be positive")
    if not 0.0 <= p < 1.0:
        raise ValueError("p must lie in [0, 1)")

    x_p = p * chord
    forward = _uniform_range(0.0, x_p, fine_step)
    aft = _uniform_range(x_p, chord, coarse_step)

    return ChordwiseGrid(forward=forward, aft=aft)
