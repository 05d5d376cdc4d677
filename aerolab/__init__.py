# aerolab/__init__.py

"""
Aerolab core: reduced-order aerodynamic coefficients and particle flow
simulation for the educational airfoil visualizer.
"""

from .constants import (
    DEBUG_LOG,
    DEFAULT_GEOMETRY,
    DEFAULT_FLOW,
    DEFAULT_MODE,
    FIDELITY_PROFILES,
    MODE_LIMITS,
    FIXED_TIMESTEP,
    MAX_STEPS_PER_UPDATE,
    PARTICLE_MAX_AGE,
)

from .reynolds import (
    compute_reynolds,
    classify_flow,
    classify_flow_legacy,
    lift_correction,
    skin_friction_coefficient,
)

from .calculations import (
    # Forces
    compute_dynamic_pressure,
    compute_force,
    compute_efficiency,
    # Coefficients
    estimate_stall_angle,
    compute_stall_lift_factor,
    compute_lift_coefficient,
    compute_induced_drag,
    compute_drag_coefficient,
    compute_moment_coefficient,
    compute_coefficients,
    uncertainty_factor,
)

from .separation import (
    effective_stall_angle,
    detect_separation,
    apply_separation_corrections,
    assess_stability,
    assess_stall_risk,
)

from .uncertainty import (
    generate_bounds,
    fixed_bounds,
    scale_bounds,
    efficiency_bounds,
    combine_confidence,
)

from .engine import (
    simulate,
    simulate_legacy,
    compare_results,
    clamp_geometry,
    clamp_flow,
    limits_for_mode,
)

from .geometry import (
    generate_airfoil,
    generate_cylinder,
    point_in_polygon,
)

from .spatial_hash import SpatialHash
from .velocity_field import VelocityField
from .flow_simulation import FlowSimulation

from .streamlines import (
    generate_streamlines,
    generate_potential_streamlines,
)

from .debug import dprint

from .preset_loader import (
    PRESET_DATA,
    PRESET_OPTIONS,
    preset_data,
    load_presets_from_folder,
    simulate_preset,
    PresetData,
)
