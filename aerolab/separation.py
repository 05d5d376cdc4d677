# aerolab/separation.py

"""
Separation, stability and stall-risk heuristics.

All three are stateless classifiers over |alpha|. They are
independent of each other: stability and stall risk are simpler UI
indicators and are not derived from the separation state (except in the
educational profile, which ties stability to separation).
"""

import math

from .calculations import estimate_stall_angle
from .constants import (
    STALL_LIFT_FLOOR,
    STALLED_LIFT_FACTOR,
    SEPARATION_CONFIDENCE,
    THICK_AIRFOIL_LIMIT,
    THICK_AIRFOIL_CONFIDENCE_FACTOR,
    STABILITY_STABLE_ANGLE,
    STABILITY_MARGINAL_ANGLE,
    STALL_RISK_WARNING_FRACTION,
)
from .reynolds import lift_correction


def effective_stall_angle(thickness, reynolds, profile):
    """
    Stall angle used for separation onset.

    The full profile shrinks the thickness-based estimate at low Re by the
    same log10(Re)/6 factor used for lift; the educational profile uses a
    fixed angle.
    """
    if profile["fixed_stall_angle"] is not None:
        return profile["fixed_stall_angle"]
    stall_angle = estimate_stall_angle(thickness)
    if profile["reynolds_stall_correction"]:
        stall_angle *= lift_correction(reynolds)
    return stall_angle


def detect_separation(geometry, reynolds, profile):
    """
    Bucket |alpha| against the profile onsets.

    Returns:
        (state, confidence, stall_angle)
    """
    stall_angle = effective_stall_angle(geometry["thickness"], reynolds, profile)
    abs_angle = abs(geometry["angle_of_attack"])
    marginal_onset, separated_onset, stalled_onset = profile["separation_onsets"]

    if abs_angle < stall_angle * marginal_onset:
        state = "attached"
    elif abs_angle < stall_angle * separated_onset:
        state = "marginal"
    elif abs_angle < stall_angle * stalled_onset:
        state = "separated"
    else:
        state = "stalled"

    if profile["fixed_separation_confidence"] is not None:
        confidence = profile["fixed_separation_confidence"]
    else:
        confidence = SEPARATION_CONFIDENCE[state]
        # Thick sections separate less predictably
        if geometry["thickness"] > THICK_AIRFOIL_LIMIT:
            confidence *= THICK_AIRFOIL_CONFIDENCE_FACTOR

    return state, confidence, stall_angle


def stalled_lift_factor(angle_deg, stall_angle):
    """0.5 * cos(excess angle), floored at 0.3."""
    excess = max(0.0, abs(angle_deg) - stall_angle)
    return max(STALL_LIFT_FLOOR, STALLED_LIFT_FACTOR * math.cos(math.radians(excess)))


def apply_separation_corrections(coefficients, separation, angle_deg, stall_angle, profile):
    """
    Multiplicative CL / CD corrections for the separation state.
    Applied on top of the raw coefficients, which are kept for diagnostics.
    """
    cl_factor, cd_factor = profile["separation_corrections"][separation]
    if cl_factor is None:
        cl_factor = stalled_lift_factor(angle_deg, stall_angle)

    corrected = dict(coefficients)
    corrected["cl"] = coefficients["cl"] * cl_factor
    corrected["cd"] = coefficients["cd"] * cd_factor
    return corrected


def assess_stability(angle_deg, separation, profile):
    """stable / marginal / unstable"""
    if profile["stability_from_separation"]:
        if separation == "attached":
            return "stable"
        if separation in ("marginal", "separated"):
            return "marginal"
        return "unstable"

    abs_angle = abs(angle_deg)
    if abs_angle < STABILITY_STABLE_ANGLE:
        return "stable"
    if abs_angle < STABILITY_MARGINAL_ANGLE:
        return "marginal"
    return "unstable"


def assess_stall_risk(angle_deg, stall_angle):
    """none below 0.6 × stall angle, warning below stall, critical beyond."""
    abs_angle = abs(angle_deg)
    if abs_angle < stall_angle * STALL_RISK_WARNING_FRACTION:
        return "none"
    if abs_angle < stall_angle:
        return "warning"
    return "critical"
