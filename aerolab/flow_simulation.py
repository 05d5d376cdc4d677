# aerolab/flow_simulation.py

"""
Particle flow simulator with collision handling.

Particles are advected through a VelocityField with explicit Euler steps at a
fixed timestep. Every step tests the swept segment against a cached spatial
hash of collision spheres built from the section outline, so fast particles
cannot tunnel through thin geometry. On impact the velocity is projected onto
the surface tangent plane and the particle slides along the body.

Particle state is kept as numpy arrays (struct of arrays):
    positions  (N, 3)
    velocities (N, 3)
    ages       (N,)
    active     (N,)

Not reentrant: update() mutates the arrays and expects one caller per frame.
"""

import math

import numpy as np

from .constants import (
    FIXED_TIMESTEP,
    MAX_FRAME_DELTA,
    MAX_STEPS_PER_UPDATE,
    PARTICLE_MAX_AGE,
    INITIAL_AGE_SPREAD,
    PARTICLE_RADIUS,
    COLLISION_RADIUS,
    COLLISION_SPACING,
    COLLISION_Z_LAYERS,
    COLLISION_Z_EXTENT,
    COLLISION_SAMPLES,
    SURFACE_OFFSET,
    HASH_CELL_SIZE,
    INLET_DEPTH,
    DOMAIN_UPSTREAM,
    DOMAIN_DOWNSTREAM,
    DOMAIN_VERTICAL,
    DOMAIN_SPAN,
)
from .debug import dprint
from .geometry import polygon_bounds
from .spatial_hash import SpatialHash
from .velocity_field import VelocityField


def _as_points(geometry):
    """Accept (x, y) pairs or {"x": .., "y": ..} dicts."""
    points = []
    for p in geometry:
        if isinstance(p, dict):
            points.append((float(p["x"]), float(p["y"])))
        else:
            points.append((float(p[0]), float(p[1])))
    return points


def compute_flow_bounds(polygon):
    """Flow domain box around the section: longer downstream than upstream."""
    min_x, min_y, max_x, max_y = polygon_bounds(polygon)
    return (
        np.array([min_x - DOMAIN_UPSTREAM, min_y - DOMAIN_VERTICAL, -DOMAIN_SPAN]),
        np.array([max_x + DOMAIN_DOWNSTREAM, max_y + DOMAIN_VERTICAL, DOMAIN_SPAN]),
    )


def signed_area(polygon):
    """Shoelace area: positive for counter-clockwise outlines."""
    n = len(polygon)
    total = 0.0
    for i in range(n):
        px, py = polygon[i]
        qx, qy = polygon[(i + 1) % n]
        total += px * qy - qx * py
    return 0.5 * total


def build_collision_objects(polygon):
    """
    Collision spheres along every edge of the outline.

    Each edge gets one sphere at its start vertex plus one every
    COLLISION_SPACING units, all carrying the edge's outward normal, and the
    whole ring is repeated over COLLISION_Z_LAYERS layers to give the 2D
    section some span.

    The left-hand normal (-dy, dx) is outward for clockwise outlines and is
    negated for counter-clockwise ones. Open or zero-area outlines keep the
    left-hand normal; step() orients it toward the particle's side.
    """
    z_layers = np.linspace(-COLLISION_Z_EXTENT, COLLISION_Z_EXTENT, COLLISION_Z_LAYERS)
    winding = -1.0 if signed_area(polygon) > 0 else 1.0
    objects = []
    n = len(polygon)
    for i in range(n):
        px, py = polygon[i]
        qx, qy = polygon[(i + 1) % n]
        dx = qx - px
        dy = qy - py
        length = math.hypot(dx, dy)
        if length == 0:
            continue

        normal = winding * np.array([-dy / length, dx / length, 0.0])
        segments = max(1, math.ceil(length / COLLISION_SPACING))
        for s in range(segments):
            t = s / segments
            x = px + dx * t
            y = py + dy * t
            for z in z_layers:
                objects.append({
                    "center": np.array([x, y, z]),
                    "radius": COLLISION_RADIUS,
                    "normal": normal,
                })
    return objects


class FlowSimulation:
    """
    Fixed-timestep particle simulation around one section outline.

    Args:
        geometry: Outline as (x, y) pairs or {"x", "y"} dicts
        particle_count: Number of particles, constant for the lifetime
        flow_velocity: Freestream speed in m/s
        angle_of_attack: Degrees
        seed: Seed for the respawn / seeding random source
        rng: Ready-made numpy Generator (takes precedence over seed)
        collision_samples: Points tested along each swept segment
    """

    def __init__(self, geometry, particle_count, flow_velocity, angle_of_attack,
                 seed=None, rng=None, collision_samples=COLLISION_SAMPLES):
        polygon = _as_points(geometry)
        if len(polygon) < 2:
            raise ValueError("geometry needs at least two points")
        if particle_count < 0:
            raise ValueError(f"particle_count must be >= 0, got {particle_count}")
        if collision_samples < 2:
            raise ValueError(f"collision_samples must be >= 2, got {collision_samples}")

        self.dt = FIXED_TIMESTEP
        self.accumulator = 0.0
        self.collision_samples = collision_samples
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.respawns = 0

        self.bounds_min, self.bounds_max = compute_flow_bounds(polygon)
        self.velocity_field = VelocityField(flow_velocity, angle_of_attack)

        # Collision geometry never moves, so the hash is built once
        self.collision_objects = build_collision_objects(polygon)
        self.spatial_hash = SpatialHash(HASH_CELL_SIZE)
        self.spatial_hash.build(self.collision_objects)

        self._initialize_particles(int(particle_count))

        dprint(f"[SIM] {len(self.collision_objects)} collision objects, "
               f"{self.particle_count} particles, bounds {self.bounds_min} -> {self.bounds_max}")

    # =========================================================================
    # SETUP
    # =========================================================================

    @property
    def particle_count(self):
        return len(self.positions)

    @property
    def bounds(self):
        return {"min": self.bounds_min.copy(), "max": self.bounds_max.copy()}

    def _initialize_particles(self, count):
        """
        Seed particles on a y-z grid across the inlet slab with staggered
        ages so they do not all respawn on the same frame.
        """
        lo = self.bounds_min
        hi = self.bounds_max
        span_y = hi[1] - lo[1]
        span_z = hi[2] - lo[2]

        self.positions = np.zeros((count, 3))
        self.velocities = np.zeros((count, 3))
        self.ages = np.zeros(count)
        self.active = np.ones(count, dtype=bool)
        if count == 0:
            return

        cols = max(1, math.ceil(math.sqrt(count * span_y / span_z)))
        rows = math.ceil(count / cols)
        index = np.arange(count)
        iy = index % cols
        iz = index // cols

        self.positions[:, 0] = lo[0] + self.rng.random(count) * INLET_DEPTH
        self.positions[:, 1] = lo[1] + (iy + 0.5) / cols * span_y
        self.positions[:, 2] = lo[2] + (iz + 0.5) / rows * span_z
        self.ages[:] = self.rng.random(count) * INITIAL_AGE_SPREAD

    def _random_inlet_position(self):
        lo = self.bounds_min
        hi = self.bounds_max
        return np.array([
            lo[0] + self.rng.random() * INLET_DEPTH,
            lo[1] + self.rng.random() * (hi[1] - lo[1]),
            lo[2] + self.rng.random() * (hi[2] - lo[2]),
        ])

    def respawn(self, index):
        """Re-initialize one particle at the inlet with zero velocity and age."""
        self.positions[index] = self._random_inlet_position()
        self.velocities[index] = 0.0
        self.ages[index] = 0.0
        self.active[index] = True
        self.respawns += 1

    # =========================================================================
    # COLLISION
    # =========================================================================

    def check_swept_collision(self, start, end, radius=PARTICLE_RADIUS):
        """
        Test collision_samples evenly spaced points from start to end.

        The returned normal faces the side of the surface the segment starts
        on, so thin plates and open outlines push particles back the way
        they came.

        Returns:
            (normal, impact_point) for the first overlapping sample, or None
        """
        start = np.asarray(start, dtype=float)
        end = np.asarray(end, dtype=float)
        for t in np.linspace(0.0, 1.0, self.collision_samples):
            test_pos = start + (end - start) * t
            hit = self.spatial_hash.query_sphere(test_pos, radius)
            if hit is not None:
                normal = hit["normal"]
                if np.dot(start - hit["center"], normal) < 0:
                    normal = -normal
                return normal, test_pos
        return None

    def _out_of_bounds(self, position):
        return bool(np.any(position < self.bounds_min) or np.any(position > self.bounds_max))

    # =========================================================================
    # TIME STEPPING
    # =========================================================================

    def step(self):
        """Advance every active particle by one fixed timestep."""
        if self.particle_count == 0:
            return

        field_velocities = self.velocity_field.sample_many(self.positions)
        next_positions = self.positions + field_velocities * self.dt

        for i in range(self.particle_count):
            if not self.active[i]:
                continue

            velocity = field_velocities[i]
            collision = self.check_swept_collision(self.positions[i], next_positions[i])

            if collision is not None:
                normal, impact = collision
                # Slide along the surface: drop the normal component
                self.velocities[i] = velocity - np.dot(velocity, normal) * normal
                self.positions[i] = impact + normal * SURFACE_OFFSET
            else:
                self.velocities[i] = velocity
                self.positions[i] = next_positions[i]

            self.ages[i] += self.dt

            if self._out_of_bounds(self.positions[i]) or self.ages[i] > PARTICLE_MAX_AGE:
                self.respawn(i)

    def update(self, delta_time):
        """
        Advance by wall-clock delta_time using fixed steps.

        The delta is clamped to [0, MAX_FRAME_DELTA] (non-finite deltas count
        as 0), at most MAX_STEPS_PER_UPDATE steps run per call, and time left
        over once the cap is hit is dropped.

        Returns:
            Number of fixed steps taken
        """
        if not math.isfinite(delta_time):
            dprint(f"[SIM] Ignoring non-finite frame delta {delta_time}")
            delta_time = 0.0
        safe_delta = min(max(delta_time, 0.0), MAX_FRAME_DELTA)
        self.accumulator += safe_delta

        steps = 0
        while self.accumulator >= self.dt and steps < MAX_STEPS_PER_UPDATE:
            self.step()
            self.accumulator -= self.dt
            steps += 1

        if steps >= MAX_STEPS_PER_UPDATE:
            dprint(f"[SIM] Step cap reached, dropping {self.accumulator:.4f}s")
            self.accumulator = 0.0

        return steps

    # =========================================================================
    # OUTPUT
    # =========================================================================

    def get_positions(self):
        """Flat float32 array, 3 values per particle."""
        return self.positions.astype(np.float32).ravel()

    def get_velocities(self):
        """Flat float32 array, 3 values per particle."""
        return self.velocities.astype(np.float32).ravel()

    def get_particle(self, index):
        """Snapshot of one particle as a dict."""
        return {
            "position": self.positions[index].copy(),
            "velocity": self.velocities[index].copy(),
            "age": float(self.ages[index]),
            "active": bool(self.active[index]),
        }
