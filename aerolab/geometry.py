# aerolab/geometry.py

"""
2D section outlines used to build the particle simulator's collision body,
plus small polygon helpers.
"""

import math

import numpy as np

NACA_MAX_CAMBER_POSITION = 0.4


def naca_thickness(x, thickness):
    """NACA 4-digit half-thickness distribution at chord fraction x."""
    return 5 * thickness * (
        0.2969 * math.sqrt(x)
        - 0.126 * x
        - 0.3516 * x ** 2
        + 0.2843 * x ** 3
        - 0.1015 * x ** 4
    )


def naca_camber_line(x, camber, p=NACA_MAX_CAMBER_POSITION):
    """Mean camber line height at chord fraction x."""
    if camber == 0:
        return 0.0
    if x < p:
        return camber / (p * p) * (2 * p * x - x * x)
    return camber / ((1 - p) * (1 - p)) * (1 - 2 * p + 2 * p * x - x * x)


def generate_airfoil(kind, thickness, camber=0.0, n=100):
    """
    Closed outline of a unit-chord section: upper surface from the leading
    edge to the trailing edge, then the lower surface back.

    Args:
        kind: "symmetric", "cambered" or "flat-plate"
        thickness: Thickness ratio
        camber: Camber ratio (ignored unless kind == "cambered")
        n: Points per surface

    Returns:
        List of (x, y) tuples
    """
    if kind == "flat-plate":
        return [(i / n, 0.0) for i in range(n + 1)]

    m = camber if kind == "cambered" else 0.0

    points = []
    for i in range(n + 1):
        x = i / n
        points.append((x, naca_camber_line(x, m) + naca_thickness(x, thickness)))
    for i in range(n - 1, -1, -1):
        x = i / n
        points.append((x, naca_camber_line(x, m) - naca_thickness(x, thickness)))
    return points


def generate_cylinder(radius, n=50):
    """Circle centred at mid-chord (0.5, 0)."""
    return [
        (0.5 + radius * math.cos(2 * math.pi * i / n), radius * math.sin(2 * math.pi * i / n))
        for i in range(n + 1)
    ]


def polygon_bounds(polygon):
    """(min_x, min_y, max_x, max_y) of a point list."""
    pts = np.asarray(polygon, dtype=float)
    return pts[:, 0].min(), pts[:, 1].min(), pts[:, 0].max(), pts[:, 1].max()


def point_in_polygon(x, y, polygon):
    """Even-odd ray casting test."""
    inside = False
    j = len(polygon) - 1
    for i in range(len(polygon)):
        xi, yi = polygon[i]
        xj, yj = polygon[j]
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside
