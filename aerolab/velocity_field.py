# aerolab/velocity_field.py

"""
Analytic velocity field driving the particles.

Freestream rotated by the angle of attack, a circulation term near the body
that bends the flow the way lift does, and a small sinusoidal wobble that is
purely cosmetic.
"""

import math

import numpy as np

from .constants import (
    VISUAL_SPEED_SCALE,
    CIRCULATION_RADIUS,
    CIRCULATION_STRENGTH,
    TURBULENCE_SCALE,
    TURBULENCE_CROSS,
    TURBULENCE_STRENGTH,
)


class VelocityField:
    """Stateless sampler; parameters are fixed at construction."""

    def __init__(self, flow_velocity, angle_of_attack):
        self.flow_velocity = flow_velocity
        self.angle_of_attack = angle_of_attack

        alpha = math.radians(angle_of_attack)
        self.speed = flow_velocity * VISUAL_SPEED_SCALE
        self.base_velocity = np.array([self.speed * math.cos(alpha), self.speed * math.sin(alpha), 0.0])
        self.circulation = CIRCULATION_STRENGTH * self.speed * math.sin(alpha)

    def sample(self, position):
        """Velocity at a single (x, y, z) point."""
        return self.sample_many(np.asarray(position, dtype=float).reshape(1, 3))[0]

    def sample_many(self, positions):
        """
        Velocities at an (N, 3) array of points.

        Circulation is clockwise in the x-y plane (faster over the top for
        positive alpha) and fades linearly to zero at CIRCULATION_RADIUS.
        """
        positions = np.asarray(positions, dtype=float)
        x = positions[:, 0]
        y = positions[:, 1]
        z = positions[:, 2]

        velocity = np.tile(self.base_velocity, (len(positions), 1))

        # Near-body circulation
        r = np.hypot(x, y)
        near = (r > 1e-9) & (r < CIRCULATION_RADIUS)
        if np.any(near):
            falloff = 1.0 - r[near] / CIRCULATION_RADIUS
            magnitude = self.circulation * falloff
            velocity[near, 0] += magnitude * y[near] / r[near]
            velocity[near, 1] -= magnitude * x[near] / r[near]

        # Cosmetic turbulence
        velocity[:, 0] += np.sin(x * TURBULENCE_SCALE + y * TURBULENCE_CROSS) * TURBULENCE_STRENGTH
        velocity[:, 1] += np.cos(y * TURBULENCE_SCALE + z * TURBULENCE_CROSS) * TURBULENCE_STRENGTH
        velocity[:, 2] += np.sin(z * TURBULENCE_SCALE + x * TURBULENCE_CROSS) * TURBULENCE_STRENGTH

        return velocity
