# test_geometry.py
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import math

import numpy as np

from aerolab.geometry import generate_airfoil, generate_cylinder, point_in_polygon, polygon_bounds
from aerolab.streamlines import (
    generate_streamlines,
    generate_potential_streamlines,
    integrate_streamline,
    potential_velocity,
    pressure_coefficient,
)
from aerolab.velocity_field import VelocityField


def test_airfoil_outline():
    print("\n=== TEST: NACA outline ===")
    outline = generate_airfoil("symmetric", 0.12)
    assert len(outline) == 201
    assert outline[0] == (0.0, 0.0)
    assert outline[-1] == (0.0, 0.0)

    max_y = max(y for _, y in outline)
    print(f"Max half-thickness: {max_y:.4f} (expected: ~0.06)")
    assert abs(max_y - 0.06) < 1e-3
    assert abs(min(y for _, y in outline) + max_y) < 1e-12

    min_x, min_y, max_x, max_y = polygon_bounds(outline)
    assert min_x == 0.0 and max_x == 1.0

    assert point_in_polygon(0.3, 0.0, outline)
    assert not point_in_polygon(0.3, 0.2, outline)
    assert not point_in_polygon(-0.1, 0.0, outline)


def test_cambered_and_flat_plate():
    cambered = generate_airfoil("cambered", 0.12, camber=0.04)
    symmetric = generate_airfoil("symmetric", 0.12, camber=0.04)
    assert max(y for _, y in cambered) > max(y for _, y in symmetric)

    plate = generate_airfoil("flat-plate", 0.12)
    assert len(plate) == 101
    assert all(y == 0.0 for _, y in plate)


def test_cylinder():
    circle = generate_cylinder(0.2, n=50)
    assert len(circle) == 51
    for x, y in circle:
        assert abs(math.hypot(x - 0.5, y) - 0.2) < 1e-12


def test_velocity_field():
    print("\n=== TEST: Velocity field ===")
    field = VelocityField(20.0, 10.0)
    assert abs(field.speed - 0.4) < 1e-12

    # Outside the circulation radius only the wobble remains
    far = field.sample((5.0, 5.0, 0.0))
    assert np.all(np.abs(far - field.base_velocity) <= 0.003 + 1e-12)

    # Faster over the top than underneath for positive alpha
    top = field.sample((0.0, 0.5, 0.0))
    bottom = field.sample((0.0, -0.5, 0.0))
    assert top[0] > bottom[0]

    points = np.array([[0.1, 0.2, 0.0], [-1.0, 0.3, 0.4], [2.0, -0.5, -0.2]])
    many = field.sample_many(points)
    for row, point in zip(many, points):
        assert np.allclose(row, field.sample(point))

    level = VelocityField(20.0, 0.0)
    assert level.circulation == 0.0


def test_streamlines():
    field = VelocityField(20.0, 5.0)
    lines = generate_streamlines(field, 5, steps=40)
    assert len(lines) == 5
    for line in lines:
        assert line.shape[1] == 3
        assert line[0][0] == -2.0
        assert line[-1][0] > line[0][0]


def test_potential_flow():
    vx, vy, speed = potential_velocity(-100.0, 0.0, 1.0, 0.0, 0.0)
    assert abs(vx - 1.0) < 1e-4
    assert abs(vy) < 1e-9
    assert pressure_coefficient(1.0, 1.0) == 0.0
    assert pressure_coefficient(0.0, 1.0) == 1.0

    outline = generate_airfoil("symmetric", 0.12)
    trace = integrate_streamline((-0.6, 0.3), 1.0, 5.0, outline)
    assert len(trace["points"]) > 1
    assert len(trace["speeds"]) == len(trace["pressures"]) == len(trace["points"]) - 1

    lines = generate_potential_streamlines(outline, 1.0, 5.0, count=5)
    assert len(lines) == 5


if __name__ == "__main__":
    test_airfoil_outline()
    test_cambered_and_flat_plate()
    test_cylinder()
    test_velocity_field()
    test_streamlines()
    test_potential_flow()
    print("\n" + "=" * 50)
    print("ALL TESTS PASSED!")
    print("=" * 50)
