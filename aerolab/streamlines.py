# aerolab/streamlines.py

"""
Streamline tracing.

Two flavours: quick Euler traces through the particle VelocityField, and
RK4 traces through a lifting-cylinder potential flow that also report local
speed and pressure coefficient along the line.
"""

import math

import numpy as np

from .constants import (
    STREAMLINE_STEPS,
    STREAMLINE_STEP_SIZE,
    POTENTIAL_CYLINDER_RADIUS,
    POTENTIAL_DT,
    POTENTIAL_STEPS,
    POTENTIAL_WINDOW,
)
from .geometry import point_in_polygon


def generate_streamlines(velocity_field, count, steps=STREAMLINE_STEPS, step_size=STREAMLINE_STEP_SIZE):
    """
    Euler-trace `count` lines from x = -2, spread over y in [-1.5, 1.5] and
    five z levels.

    Returns:
        List of (M, 3) arrays
    """
    lines = []
    for i in range(count):
        y = -1.5 + (i / max(count - 1, 1)) * 3.0
        z = -0.6 + (i % 5) * 0.3
        pos = np.array([-2.0, y, z])

        line = []
        for _ in range(steps):
            line.append(pos.copy())
            pos = pos + velocity_field.sample(pos) * step_size
            if pos[0] > 3:
                break
        lines.append(np.array(line))
    return lines


def potential_velocity(x, y, v_inf, alpha, circulation, radius=POTENTIAL_CYLINDER_RADIUS):
    """
    Potential flow around a lifting cylinder at the origin.

    Returns:
        (vx, vy, speed)
    """
    r2 = max(x * x + y * y, 1e-12)
    r = math.sqrt(r2)
    theta = math.atan2(y, x)

    vr = v_inf * (1 - radius * radius / r2) * math.cos(theta - alpha)
    vt = -v_inf * (1 + radius * radius / r2) * math.sin(theta - alpha) - circulation / (2 * math.pi * r)

    vx = vr * math.cos(theta) - vt * math.sin(theta)
    vy = vr * math.sin(theta) + vt * math.cos(theta)
    return vx, vy, math.hypot(vr, vt)


def pressure_coefficient(speed, v_inf):
    """Cp = 1 - (V / V_inf)^2"""
    return 1 - (speed / v_inf) ** 2


def _lifting_circulation(v_inf, alpha):
    return 4 * math.pi * v_inf * math.sin(alpha)


def integrate_streamline(start, v_inf, angle_of_attack, polygon=None,
                         dt=POTENTIAL_DT, steps=POTENTIAL_STEPS):
    """
    RK4 trace through the potential flow, stopping inside the polygon or
    once the point leaves the viewing window.

    Returns:
        Dict with points (list of (x, y)), speeds and pressures
    """
    alpha = math.radians(angle_of_attack)
    circulation = _lifting_circulation(v_inf, alpha)
    x_min, x_max, y_abs_max = POTENTIAL_WINDOW

    def vel(px, py):
        vx, vy, _ = potential_velocity(px, py, v_inf, alpha, circulation)
        return vx, vy

    x, y = start
    points = [(x, y)]
    speeds = []
    pressures = []

    for _ in range(steps):
        k1 = vel(x, y)
        k2 = vel(x + 0.5 * dt * k1[0], y + 0.5 * dt * k1[1])
        k3 = vel(x + 0.5 * dt * k2[0], y + 0.5 * dt * k2[1])
        k4 = vel(x + dt * k3[0], y + dt * k3[1])

        speed = math.hypot(*k1)
        speeds.append(speed)
        pressures.append(pressure_coefficient(speed, v_inf))

        x += dt / 6 * (k1[0] + 2 * k2[0] + 2 * k3[0] + k4[0])
        y += dt / 6 * (k1[1] + 2 * k2[1] + 2 * k3[1] + k4[1])
        points.append((x, y))

        if polygon is not None and point_in_polygon(x, y, polygon):
            break
        if x > x_max or x < x_min or abs(y) > y_abs_max:
            break

    return {"points": points, "speeds": speeds, "pressures": pressures}


def generate_potential_streamlines(polygon, v_inf, angle_of_attack, count=15):
    """Evenly spaced RK4 streamlines starting at x = -0.6."""
    spacing = 1.2 / (count + 1)
    return [
        integrate_streamline((-0.6, -0.6 + i * spacing), v_inf, angle_of_attack, polygon)
        for i in range(1, count + 1)
    ]
