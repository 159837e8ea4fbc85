import numpy as np

# open trailing edge coefficients
THICKNESS_COEFFS = (0.2969, -0.1260, -0.3516, 0.2843, -0.1015)


def thickness_distribution(t: float, x: np.ndarray) -> np.ndarray:
    """
    Half-thickness y_t of the standard NACA symmetric section.

    Parameters
    ----------
    t : float
        Maximum thickness as fraction of chord.
    x : numpy.ndarray
        Normalized chordwise positions (x >= 0).

    Returns
    -------
    numpy.ndarray
        y_t(x). Zero at the leading edge; the trailing edge stays open,
        y_t(1) = t/0.2 * 0.0021.
    """
    x = np.asarray(x, dtype=float)
    if np.any(x < 0):
        raise ValueError("x must be non-negative")

    a0, a1, a2, a3, a4 = THICKNESS_COEFFS
    return (t / 0.2) * (a0 * np.sqrt(x) + a1 * x + a2 * x**2 + a3 * x**3 + a4 * x**4)
