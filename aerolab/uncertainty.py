# aerolab/uncertainty.py

"""
Uncertainty bounds for every derived quantity.

Bounds are dicts {min, nominal, max, confidence} with
min <= nominal <= max guaranteed, also for negative nominals.
"""

from .constants import (
    UNCERTAINTY_FACTORS,
    SEPARATION_PENALTY,
    MAX_UNCERTAINTY,
    HIGH_CONFIDENCE_LIMIT,
    MEDIUM_CONFIDENCE_LIMIT,
    CONFIDENCE_RANK,
    MIN_CD_DIVISOR,
)


def confidence_from_uncertainty(uncertainty):
    """<15 % -> high, <35 % -> medium, else low."""
    if uncertainty < HIGH_CONFIDENCE_LIMIT:
        return "high"
    if uncertainty < MEDIUM_CONFIDENCE_LIMIT:
        return "medium"
    return "low"


def combine_confidence(*tiers):
    """The weakest tier wins."""
    return min(tiers, key=lambda tier: CONFIDENCE_RANK[tier])


def combined_uncertainty(regime_confidence, separation_confidence):
    """
    u = base(regime) + (1 - separation_confidence) * 0.3, capped at 60 %.
    """
    base = UNCERTAINTY_FACTORS[regime_confidence]
    penalty = (1 - separation_confidence) * SEPARATION_PENALTY
    return min(MAX_UNCERTAINTY, base + penalty)


def _symmetric_bounds(nominal, uncertainty, confidence):
    spread = abs(nominal) * uncertainty
    return {
        "min": nominal - spread,
        "nominal": nominal,
        "max": nominal + spread,
        "confidence": confidence,
    }


def generate_bounds(nominal, regime_confidence, separation_confidence):
    """Bounds from the regime confidence and the separation confidence."""
    uncertainty = combined_uncertainty(regime_confidence, separation_confidence)
    return _symmetric_bounds(nominal, uncertainty, confidence_from_uncertainty(uncertainty))


def fixed_bounds(nominal, uncertainty, confidence="medium"):
    """Flat ±uncertainty bounds with a fixed confidence tag."""
    return _symmetric_bounds(nominal, uncertainty, confidence)


def scale_bounds(bounds, factor):
    """
    Scale coefficient bounds into force bounds (factor = q * S > 0).
    A positive factor keeps the ordering.
    """
    return {
        "min": bounds["min"] * factor,
        "nominal": bounds["nominal"] * factor,
        "max": bounds["max"] * factor,
        "confidence": bounds["confidence"],
    }


def efficiency_bounds(cl, cd):
    """
    L/D bounds from the CL / CD bounds.

    The division inverts the CD direction: the lowest L/D pairs the lowest
    CL with the highest CD, the highest pairs the highest CL with the lowest
    CD. For negative CL the smaller divisor gives the more negative ratio,
    so both corners are compared.
    """
    cd_min = max(cd["min"], MIN_CD_DIVISOR)
    cd_nominal = max(cd["nominal"], MIN_CD_DIVISOR)
    cd_max = max(cd["max"], MIN_CD_DIVISOR)

    low = min(cl["min"] / cd_max, cl["min"] / cd_min)
    high = max(cl["max"] / cd_min, cl["max"] / cd_max)

    return {
        "min": low,
        "nominal": cl["nominal"] / cd_nominal,
        "max": high,
        "confidence": combine_confidence(cl["confidence"], cd["confidence"]),
    }
