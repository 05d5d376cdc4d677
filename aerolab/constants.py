# aerolab/constants.py

"""
Model-wide constants for the aerodynamics visualizer core.
Clamp ranges, empirical coefficients, uncertainty tables and particle
simulation tunables all live here so the physics modules stay formula-only.
"""

import os

# =============================================================================
# DEBUG SETTINGS
# =============================================================================
DEBUG_LOG = os.environ.get("AEROLAB_DEBUG", "false").lower() == "true"

# =============================================================================
# DEFAULT VALUES
# =============================================================================
AIR_VISCOSITY_DEFAULT = 1.81e-5  # Pa·s, air at 15°C
AIR_DENSITY_SL = 1.225  # kg/m³

DEFAULT_GEOMETRY = {
    "type": "symmetric",
    "chord": 1.0,         # m
    "thickness": 0.12,
    "camber": 0.0,
    "angle_of_attack": 5.0,  # degrees
    "area": 0.5,          # m²
}

DEFAULT_FLOW = {
    "velocity": 20.0,     # m/s
    "density": AIR_DENSITY_SL,
    "viscosity": AIR_VISCOSITY_DEFAULT,
}

GEOMETRY_TYPES = ("symmetric", "cambered", "flat-plate")

# =============================================================================
# INPUT CLAMPS (educational safe range)
# =============================================================================
MIN_ANGLE = -15.0  # degrees
MAX_ANGLE = 20.0
MIN_THICKNESS = 0.05
MAX_THICKNESS = 0.25
MIN_CAMBER = 0.0
MAX_CAMBER = 0.08
MIN_VELOCITY = 5.0  # m/s
MAX_VELOCITY = 60.0
MIN_DENSITY = 0.01  # kg/m³, keeps Re > 0
MIN_VISCOSITY = 1e-7
MIN_LENGTH = 1e-3  # m, chord and area floor

# =============================================================================
# COEFFICIENT MODEL
# =============================================================================
LIFT_SLOPE = 2.0  # × π per radian (thin airfoil)
THICKNESS_LIFT_PENALTY = 0.3
STALL_ANGLE_BASE = 15.0  # degrees
STALL_ANGLE_THICKNESS_SLOPE = 10.0
STALL_LIFT_FLOOR = 0.3
STALLED_LIFT_FACTOR = 0.5  # separated-flow lift retention once fully stalled

PROFILE_DRAG_BASE = 0.006
PROFILE_DRAG_THICKNESS = 0.02
PRESSURE_DRAG_FACTOR = 0.1
ASPECT_RATIO = 6.0
OSWALD_EFFICIENCY = 0.85
POST_STALL_DRAG_SLOPE = 0.5

MIN_CD_DIVISOR = 0.001  # floor for cl/cd

# =============================================================================
# REYNOLDS REGIMES
# =============================================================================
RE_VERY_LOW = 5e4
RE_LAMINAR = 5e5
RE_TRANSITIONAL = 1e6
RE_TURBULENT = 3e6
MIN_LIFT_CORRECTION = 0.1  # keeps cl and the stall angle positive at Re < 1

# =============================================================================
# UNCERTAINTY
# =============================================================================
UNCERTAINTY_FACTORS = {
    "high": 0.10,
    "medium": 0.25,
    "low": 0.40,
}
SEPARATION_PENALTY = 0.3
MAX_UNCERTAINTY = 0.6
HIGH_CONFIDENCE_LIMIT = 0.15
MEDIUM_CONFIDENCE_LIMIT = 0.35

CONFIDENCE_RANK = {"low": 0, "medium": 1, "high": 2}

# =============================================================================
# SEPARATION / STABILITY
# =============================================================================
SEPARATION_CONFIDENCE = {
    "attached": 0.9,
    "marginal": 0.6,
    "separated": 0.4,
    "stalled": 0.3,
}
THICK_AIRFOIL_LIMIT = 0.15
THICK_AIRFOIL_CONFIDENCE_FACTOR = 0.8

STABILITY_STABLE_ANGLE = 10.0  # degrees
STABILITY_MARGINAL_ANGLE = 15.0
STALL_RISK_WARNING_FRACTION = 0.6
EXTREME_ANGLE_WARNING = 15.0

# =============================================================================
# FIDELITY PROFILES
# =============================================================================
# "full" is the uncertainty-aware model; "educational" is the clamped,
# simplified configuration with fixed stall angle and fixed ±15 % bounds.
FIDELITY_PROFILES = {
    "full": {
        "fixed_stall_angle": None,
        "reynolds_stall_correction": True,
        "separation_onsets": (0.7, 1.0, 1.2),
        "separation_corrections": {
            "attached": (1.0, 1.0),
            "marginal": (0.95, 1.1),
            "separated": (0.7, 1.5),
            "stalled": (None, 2.0),  # None -> stalled cosine factor
        },
        "cl_range": None,
        "cd_range": None,
        "fixed_uncertainty": None,
        "fixed_separation_confidence": None,
        "stability_from_separation": False,
    },
    "educational": {
        "fixed_stall_angle": 14.0,
        "reynolds_stall_correction": False,
        "separation_onsets": (0.6, 0.85, 1.0),
        "separation_corrections": {
            "attached": (1.0, 1.0),
            "marginal": (0.9, 1.15),
            "separated": (0.6, 1.4),
            "stalled": (0.3, 1.8),
        },
        "cl_range": (-1.5, 1.8),
        "cd_range": (0.008, 2.0),
        "fixed_uncertainty": 0.15,
        "fixed_separation_confidence": 0.7,
        "stability_from_separation": True,
    },
}
DEFAULT_MODE = "full"

# Slider ranges per UI mode, published for the UI layer
MODE_LIMITS = {
    "learning": {
        "angle": {"min": -10, "max": 15, "step": 1},
        "velocity": {"min": 10, "max": 40, "step": 1},
        "thickness": {"min": 0.08, "max": 0.18, "step": 0.01},
        "camber": {"min": 0, "max": 0.04, "step": 0.005},
        "disabled": ["density", "length", "area"],
    },
    "design": {
        "angle": {"min": -20, "max": 20, "step": 0.5},
        "velocity": {"min": 5, "max": 80, "step": 1},
        "thickness": {"min": 0.06, "max": 0.25, "step": 0.01},
        "camber": {"min": 0, "max": 0.08, "step": 0.001},
        "disabled": [],
    },
    "comparison": {
        "angle": {"min": -20, "max": 20, "step": 0.5},
        "velocity": {"min": 5, "max": 80, "step": 1},
        "thickness": {"min": 0.06, "max": 0.25, "step": 0.01},
        "camber": {"min": 0, "max": 0.08, "step": 0.001},
        "disabled": [],
    },
}

# =============================================================================
# PARTICLE SIMULATION
# =============================================================================
FIXED_TIMESTEP = 1.0 / 60.0  # s
MAX_FRAME_DELTA = 0.1        # s, wall-clock clamp
MAX_STEPS_PER_UPDATE = 5
PARTICLE_MAX_AGE = 12.0      # s
INITIAL_AGE_SPREAD = 5.0     # s

PARTICLE_RADIUS = 0.04
COLLISION_RADIUS = 0.05
COLLISION_SPACING = 0.05     # one collision sphere per 0.05 units of edge
COLLISION_Z_LAYERS = 11      # z = -0.5 .. 0.5
COLLISION_Z_EXTENT = 0.5
COLLISION_SAMPLES = 5        # swept test samples per segment
SURFACE_OFFSET = 0.02        # push-out along the normal after impact
HASH_CELL_SIZE = 0.15

INLET_DEPTH = 0.5
DOMAIN_UPSTREAM = 2.0
DOMAIN_DOWNSTREAM = 3.0
DOMAIN_VERTICAL = 1.5
DOMAIN_SPAN = 0.8

# =============================================================================
# VELOCITY FIELD
# =============================================================================
VISUAL_SPEED_SCALE = 0.02     # m/s -> scene units/s
CIRCULATION_RADIUS = 1.0      # scene units around the origin
CIRCULATION_STRENGTH = 0.5    # × base speed × sin(alpha)
TURBULENCE_SCALE = 0.5
TURBULENCE_CROSS = 0.3
TURBULENCE_STRENGTH = 0.003

# =============================================================================
# STREAMLINES
# =============================================================================
STREAMLINE_STEPS = 150
STREAMLINE_STEP_SIZE = 0.05
POTENTIAL_CYLINDER_RADIUS = 0.15
POTENTIAL_DT = 0.008
POTENTIAL_STEPS = 450
POTENTIAL_WINDOW = (-0.7, 1.4, 0.75)  # x_min, x_max, |y|_max
