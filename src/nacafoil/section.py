import numpy as np
from shapely.geometry import Polygon


def section_polygon(boundary: np.ndarray) -> Polygon:
    """
    Build a polygon from an airfoil outline.

    Parameters
    ----------
    boundary : np.ndarray, shape (N, 2)
        Outline vertices in order. The open trailing edge is closed
        by a straight segment.

    Returns
    -------
    shapely.geometry.Polygon
        A valid polygon; invalid outlines are repaired with buffer(0).
    """
    boundary = np.asarray(boundary, dtype=float)
    if boundary.ndim != 2 or boundary.shape[1] != 2:
        raise ValueError("boundary must have shape (N, 2)")
    if boundary.shape[0] < 3:
        raise ValueError("boundary must contain at least 3 points")

    poly = Polygon(boundary)
    if not poly.is_valid:
        # Attempt a simple repair (e.g. a pinched trailing edge)
        repaired = poly.buffer(0)
        if repaired.geom_type == "MultiPolygon":
            repaired = max(repaired.geoms, key=lambda g: g.area)
        if not repaired.is_valid or repaired.is_empty:
            raise ValueError("Airfoil outline is invalid (self-intersecting or degenerate).")
        poly = repaired

    if poly.is_empty or poly.area <= 0:
        raise ValueError("Airfoil outline encloses no area.")

    return poly


def section_area(boundary: np.ndarray) -> float:
    """
    Cross-sectional area enclosed by the outline (chord^2 units).
    """
    return float(section_polygon(boundary).area)

