# aerolab/engine.py

"""
Top-level aerodynamic evaluation.

simulate(geometry, flow) is the single entry point the UI calls on every
parameter change. It is pure: inputs are clamped into the supported range
(never rejected), every derived quantity carries uncertainty bounds, and the
same inputs always give the same result dict.

Two fidelity modes share one code path; see constants.FIDELITY_PROFILES.
"""

import math

import numpy as np

from .calculations import (
    compute_dynamic_pressure,
    estimate_stall_angle,
    compute_coefficients,
    clip_coefficients,
)
from .constants import (
    DEFAULT_GEOMETRY,
    DEFAULT_FLOW,
    DEFAULT_MODE,
    FIDELITY_PROFILES,
    GEOMETRY_TYPES,
    MODE_LIMITS,
    MIN_ANGLE,
    MAX_ANGLE,
    MIN_THICKNESS,
    MAX_THICKNESS,
    MIN_CAMBER,
    MAX_CAMBER,
    MIN_VELOCITY,
    MAX_VELOCITY,
    MIN_DENSITY,
    MIN_VISCOSITY,
    MIN_LENGTH,
)
from .debug import dprint
from .explanations import generate_explanation, generate_warnings, list_assumptions
from .reynolds import compute_reynolds, classify_flow, classify_flow_legacy
from .separation import (
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


# =============================================================================
# CLAMPING
# =============================================================================

def _clamp(value, low, high):
    return float(np.clip(value, low, high))


def _floor(value, low):
    return float(max(value, low))


def clamp_geometry(geometry):
    """
    Return a clamped copy of the geometry plus the names of changed fields.
    Missing keys fall back to DEFAULT_GEOMETRY.
    """
    merged = dict(DEFAULT_GEOMETRY)
    merged.update({k: v for k, v in (geometry or {}).items() if v is not None})

    clamped = dict(merged)
    clamped["angle_of_attack"] = _clamp(merged["angle_of_attack"], MIN_ANGLE, MAX_ANGLE)
    clamped["thickness"] = _clamp(merged["thickness"], MIN_THICKNESS, MAX_THICKNESS)
    clamped["camber"] = _clamp(merged["camber"], MIN_CAMBER, MAX_CAMBER)
    clamped["chord"] = _floor(merged["chord"], MIN_LENGTH)
    clamped["area"] = _floor(merged["area"], MIN_LENGTH)
    if clamped["type"] not in GEOMETRY_TYPES:
        clamped["type"] = DEFAULT_GEOMETRY["type"]

    changed = [k for k in ("type", "angle_of_attack", "thickness", "camber", "chord", "area")
               if clamped[k] != merged[k]]
    return clamped, changed


def clamp_flow(flow):
    """Return a clamped copy of the flow conditions plus the changed fields."""
    merged = dict(DEFAULT_FLOW)
    merged.update({k: v for k, v in (flow or {}).items() if v is not None})

    clamped = dict(merged)
    clamped["velocity"] = _clamp(merged["velocity"], MIN_VELOCITY, MAX_VELOCITY)
    clamped["density"] = _floor(merged["density"], MIN_DENSITY)
    clamped["viscosity"] = _floor(merged["viscosity"], MIN_VISCOSITY)

    changed = [k for k in ("velocity", "density", "viscosity") if clamped[k] != merged[k]]
    return clamped, changed


def get_profile(mode):
    """Fidelity profile for a mode name; unknown names use the full model."""
    return FIDELITY_PROFILES.get(mode, FIDELITY_PROFILES[DEFAULT_MODE])


def limits_for_mode(mode):
    """Slider ranges for a UI mode (learning / design / comparison)."""
    return MODE_LIMITS.get(mode, MODE_LIMITS["design"])


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def simulate(geometry, flow, mode=DEFAULT_MODE):
    """
    Evaluate the reduced-order aerodynamic model.

    Args:
        geometry: Dict with type, chord, thickness, camber, angle_of_attack, area
        flow: Dict with velocity, density and optional viscosity
        mode: "full" (uncertainty-aware) or "educational" (clamped, simplified)

    Returns:
        AerodynamicResults dict: clamped inputs, regime, bounded cl/cd/lift/
        drag/efficiency, flow state, stability, stall risk and explanations
    """
    if mode not in FIDELITY_PROFILES:
        dprint(f"[ENGINE] Unknown mode '{mode}', using '{DEFAULT_MODE}'")
        mode = DEFAULT_MODE
    profile = get_profile(mode)

    # Step 1: clamp everything before any other computation
    geom, geom_changed = clamp_geometry(geometry)
    conditions, flow_changed = clamp_flow(flow)
    if geom_changed or flow_changed:
        dprint("[CLAMP] Adjusted inputs:", geom_changed + flow_changed)

    # Step 2: Reynolds number and regime
    reynolds = compute_reynolds(
        conditions["density"], conditions["velocity"], geom["chord"], conditions["viscosity"]
    )
    regime = classify_flow(reynolds)

    # Step 3: dynamic pressure
    q = compute_dynamic_pressure(conditions["density"], conditions["velocity"])

    # Step 4: separation
    separation, separation_confidence, separation_stall_angle = detect_separation(
        geom, reynolds, profile
    )

    # Step 5: raw coefficients (kept uncorrected for diagnostics)
    stall_angle = estimate_stall_angle(geom["thickness"])
    raw = compute_coefficients(geom, reynolds, stall_angle)
    raw = clip_coefficients(raw, profile["cl_range"], profile["cd_range"])

    # Step 6: separation corrections on top of the raw values
    corrected = apply_separation_corrections(
        raw, separation, geom["angle_of_attack"], separation_stall_angle, profile
    )

    # Step 7: uncertainty bounds
    if profile["fixed_uncertainty"] is not None:
        cl = fixed_bounds(corrected["cl"], profile["fixed_uncertainty"])
        cd = fixed_bounds(corrected["cd"], profile["fixed_uncertainty"])
        confidence = "medium"
    else:
        cl = generate_bounds(corrected["cl"], regime["confidence"], separation_confidence)
        cd = generate_bounds(corrected["cd"], regime["confidence"], separation_confidence)
        confidence = combine_confidence(regime["confidence"], cl["confidence"])

    # Step 8: forces and efficiency
    force_factor = q * geom["area"]
    lift = scale_bounds(cl, force_factor)
    drag = scale_bounds(cd, force_factor)
    efficiency = efficiency_bounds(cl, cd)

    # Step 9: stability and stall risk
    stability = assess_stability(geom["angle_of_attack"], separation, profile)
    risk_stall_angle = separation_stall_angle if profile["fixed_stall_angle"] is not None else stall_angle
    stall_risk = assess_stall_risk(geom["angle_of_attack"], risk_stall_angle)

    # Step 10: explanation, warnings, assumptions
    explanation = generate_explanation(geom, separation, corrected, regime)
    warnings = generate_warnings(geom, separation, regime)
    assumptions = list_assumptions(mode)

    alpha = math.radians(geom["angle_of_attack"])

    dprint("[ENGINE]", {
        "mode": mode,
        "reynolds": reynolds,
        "regime": regime["regime"],
        "separation": separation,
        "cl": corrected["cl"],
        "cd": corrected["cd"],
    })

    return {
        "mode": mode,
        "geometry": geom,
        "flow": conditions,
        "reynolds": reynolds,
        "regime": regime,
        "dynamic_pressure": q,
        "confidence": confidence,
        "flow_state": {
            "reynolds": reynolds,
            "regime": regime,
            "dynamic_pressure": q,
            "separation": separation,
            "separation_confidence": separation_confidence,
            "confidence": confidence,
        },
        "stall_angle": separation_stall_angle,
        "raw_coefficients": raw,
        "cl": cl,
        "cd": cd,
        "lift": lift,
        "drag": drag,
        "efficiency": efficiency,
        "moment_coefficient": corrected["cm"],
        "lift_vector": {
            "x": -math.sin(alpha) * lift["nominal"],
            "y": math.cos(alpha) * lift["nominal"],
            "z": 0.0,
        },
        "stability": stability,
        "stall_risk": stall_risk,
        "explanation": explanation,
        "warnings": warnings,
        "assumptions": assumptions,
    }


# =============================================================================
# LEGACY WRAPPER & COMPARISON
# =============================================================================

def simulate_legacy(params, mode=DEFAULT_MODE):
    """
    Run the engine from the flat legacy parameter dict
    (velocity, density, area, length, angle_of_attack, thickness, camber, geometry).
    The legacy four-bucket regime is attached as "legacy_regime".
    """
    geometry = {
        "type": params.get("geometry", DEFAULT_GEOMETRY["type"]),
        "chord": params.get("length", DEFAULT_GEOMETRY["chord"]),
        "thickness": params.get("thickness", DEFAULT_GEOMETRY["thickness"]),
        "camber": params.get("camber", DEFAULT_GEOMETRY["camber"]),
        "angle_of_attack": params.get("angle_of_attack", DEFAULT_GEOMETRY["angle_of_attack"]),
        "area": params.get("area", DEFAULT_GEOMETRY["area"]),
    }
    flow = {
        "velocity": params.get("velocity", DEFAULT_FLOW["velocity"]),
        "density": params.get("density", DEFAULT_FLOW["density"]),
    }
    results = simulate(geometry, flow, mode)
    results["legacy_regime"] = classify_flow_legacy(results["reynolds"])
    return results


def compare_results(baseline, current):
    """
    Nominal deltas between two results (current - baseline), for the
    comparison view.
    """
    deltas = {}
    for key in ("cl", "cd", "lift", "drag", "efficiency"):
        deltas[key] = current[key]["nominal"] - baseline[key]["nominal"]
    deltas["reynolds"] = current["reynolds"] - baseline["reynolds"]
    deltas["angle_of_attack"] = (
        current["geometry"]["angle_of_attack"] - baseline["geometry"]["angle_of_attack"]
    )
    deltas["separation_changed"] = (
        current["flow_state"]["separation"] != baseline["flow_state"]["separation"]
    )
    return deltas
