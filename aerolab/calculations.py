# aerolab/calculations.py

"""
Centralized aerodynamic coefficient calculations.
Thin airfoil lift, empirical drag build-up, stall approximations and the
force / efficiency helpers all live here. These are closed-form educational
approximations, not CFD.
"""

import math

import numpy as np

from .constants import (
    LIFT_SLOPE,
    THICKNESS_LIFT_PENALTY,
    STALL_ANGLE_BASE,
    STALL_ANGLE_THICKNESS_SLOPE,
    STALL_LIFT_FLOOR,
    PROFILE_DRAG_BASE,
    PROFILE_DRAG_THICKNESS,
    PRESSURE_DRAG_FACTOR,
    ASPECT_RATIO,
    OSWALD_EFFICIENCY,
    POST_STALL_DRAG_SLOPE,
    MIN_CD_DIVISOR,
    UNCERTAINTY_FACTORS,
)
from .reynolds import lift_correction, turbulent_skin_friction


def compute_dynamic_pressure(rho, V):
    """q = 0.5 * rho * V^2"""
    return 0.5 * rho * (V ** 2)


def estimate_stall_angle(thickness):
    """
    Thickness-dependent stall angle in degrees.
    Thicker sections stall earlier: 15° - 10 * t.
    """
    return STALL_ANGLE_BASE - thickness * STALL_ANGLE_THICKNESS_SLOPE


def compute_stall_lift_factor(angle_deg, stall_angle):
    """
    1.0 up to the stall angle, then a cosine decay that starts at 1.0
    (no jump) and is floored at 0.3.
    """
    abs_angle = abs(angle_deg)
    if abs_angle <= stall_angle:
        return 1.0
    excess = abs_angle - stall_angle
    decay = math.cos(excess * math.pi / (90.0 - stall_angle))
    return max(STALL_LIFT_FLOOR, decay)


def compute_lift_coefficient(geometry, reynolds, stall_angle=None):
    """
    CL = (2π α + π camber) * (1 - 0.3 t) * Re_correction * stall_factor
    """
    thickness = geometry["thickness"]
    angle = geometry["angle_of_attack"]
    if stall_angle is None:
        stall_angle = estimate_stall_angle(thickness)

    alpha = math.radians(angle)
    slope_lift = LIFT_SLOPE * math.pi * alpha
    camber_lift = geometry["camber"] * math.pi

    thickness_correction = 1 - THICKNESS_LIFT_PENALTY * thickness
    reynolds_correction = lift_correction(reynolds)
    stall_factor = compute_stall_lift_factor(angle, stall_angle)

    return (slope_lift + camber_lift) * thickness_correction * reynolds_correction * stall_factor


def compute_induced_drag(CL, AR=ASPECT_RATIO, e=OSWALD_EFFICIENCY):
    """CDi = CL^2 / (pi * AR * e)"""
    return (CL ** 2) / (math.pi * AR * e)


def compute_post_stall_drag_multiplier(angle_deg, stall_angle):
    """Grows linearly with how far |alpha| is past the stall angle."""
    abs_angle = abs(angle_deg)
    if abs_angle <= stall_angle:
        return 1.0
    return 1 + POST_STALL_DRAG_SLOPE * (abs_angle - stall_angle) / stall_angle


def compute_drag_coefficient(geometry, CL, reynolds, stall_angle=None):
    """
    CD = (CD0 + CDi + CDp + Cf) * post_stall_multiplier

    CD0 = 0.006 + 0.02 t        profile drag
    CDi = CL^2 / (pi AR e)      induced drag, AR = 6, e = 0.85
    CDp = 0.1 sin^2(alpha)      form drag at angle
    Cf  = 0.074 / Re^0.2        turbulent skin friction
    """
    thickness = geometry["thickness"]
    angle = geometry["angle_of_attack"]
    if stall_angle is None:
        stall_angle = estimate_stall_angle(thickness)

    cd0 = PROFILE_DRAG_BASE + PROFILE_DRAG_THICKNESS * thickness
    cdi = compute_induced_drag(CL)
    alpha = abs(math.radians(angle))
    cdp = math.sin(alpha) ** 2 * PRESSURE_DRAG_FACTOR
    cf = turbulent_skin_friction(reynolds)

    multiplier = compute_post_stall_drag_multiplier(angle, stall_angle)
    return (cd0 + cdi + cdp + cf) * multiplier


def compute_moment_coefficient(camber, CL):
    """
    Quarter-chord pitching moment.
    Symmetric sections sit near zero; camber and lift add nose-down moment.
    """
    return -camber * 0.1 - CL * 0.05


def compute_coefficients(geometry, reynolds, stall_angle=None):
    """Raw (uncorrected) CL, CD and CM for one geometry."""
    CL = compute_lift_coefficient(geometry, reynolds, stall_angle)
    CD = compute_drag_coefficient(geometry, CL, reynolds, stall_angle)
    CM = compute_moment_coefficient(geometry["camber"], CL)
    return {"cl": CL, "cd": CD, "cm": CM}


def clip_coefficients(coefficients, cl_range=None, cd_range=None):
    """Hard coefficient limits used by the educational profile."""
    clipped = dict(coefficients)
    if cl_range is not None:
        clipped["cl"] = float(np.clip(clipped["cl"], cl_range[0], cl_range[1]))
    if cd_range is not None:
        clipped["cd"] = float(np.clip(clipped["cd"], cd_range[0], cd_range[1]))
    return clipped


def compute_efficiency(CL, CD):
    """L/D with CD floored to avoid division by zero."""
    return CL / max(CD, MIN_CD_DIVISOR)


def compute_force(q, area, coefficient):
    """F = q S C"""
    return q * area * coefficient


def uncertainty_factor(confidence):
    """Regime-based relative uncertainty (±10 / 25 / 40 %)."""
    return UNCERTAINTY_FACTORS[confidence]
