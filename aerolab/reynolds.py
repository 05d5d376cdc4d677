# aerolab/reynolds.py

"""
Reynolds number and flow regime classification.
"""

import math

from .constants import (
    AIR_VISCOSITY_DEFAULT,
    RE_VERY_LOW,
    RE_LAMINAR,
    RE_TRANSITIONAL,
    RE_TURBULENT,
    MIN_LIFT_CORRECTION,
)


def compute_reynolds(density, velocity, length, viscosity=None):
    """Re = rho * V * L / mu"""
    mu = AIR_VISCOSITY_DEFAULT if viscosity is None else viscosity
    return density * velocity * length / mu


def classify_flow(reynolds):
    """
    Classify the flow regime from the Reynolds number.

    Thresholds are exclusive upper bounds, so 5e5 is already transitional.
    The confidence tag depends only on Re.
    """
    if reynolds < RE_VERY_LOW:
        return {
            "reynolds": reynolds,
            "regime": "very-low-Re",
            "confidence": "low",
            "description": "Very low Reynolds - viscous effects dominate, high uncertainty",
        }
    if reynolds < RE_LAMINAR:
        return {
            "reynolds": reynolds,
            "regime": "laminar",
            "confidence": "high",
            "description": "Laminar boundary layer - smooth, predictable flow",
        }
    if reynolds < RE_TRANSITIONAL:
        return {
            "reynolds": reynolds,
            "regime": "transitional",
            "confidence": "medium",
            "description": "Transitional regime - flow becoming turbulent",
        }
    if reynolds < RE_TURBULENT:
        return {
            "reynolds": reynolds,
            "regime": "turbulent",
            "confidence": "medium",
            "description": "Fully turbulent boundary layer",
        }
    return {
        "reynolds": reynolds,
        "regime": "high-Re-turbulent",
        "confidence": "low",
        "description": "High Reynolds turbulent - complex flow, increased uncertainty",
    }


def classify_flow_legacy(reynolds):
    """Four-bucket classifier kept for the legacy parameter wrapper."""
    if reynolds < RE_LAMINAR:
        return {"type": "laminar", "confidence": "high"}
    if reynolds < RE_TRANSITIONAL:
        return {"type": "transitional", "confidence": "medium"}
    if reynolds < RE_TURBULENT:
        return {"type": "turbulent", "confidence": "medium"}
    return {"type": "separation-likely", "confidence": "low"}


def lift_correction(reynolds):
    """Viscous lift penalty: min(1, log10(Re) / 6), floored at MIN_LIFT_CORRECTION."""
    return max(MIN_LIFT_CORRECTION, min(1.0, math.log10(reynolds) / 6.0))


def skin_friction_coefficient(reynolds):
    """
    Flat plate skin friction.
    Laminar (Blasius) Cf = 1.328 / sqrt(Re) below the laminar limit,
    turbulent Cf = 0.074 / Re^0.2 above it.
    """
    if reynolds < RE_LAMINAR:
        return 1.328 / math.sqrt(reynolds)
    return turbulent_skin_friction(reynolds)


def turbulent_skin_friction(reynolds):
    """Cf = 0.074 / Re^0.2"""
    return 0.074 / reynolds ** 0.2
