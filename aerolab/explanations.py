# aerolab/explanations.py

"""
Plain-language explanation, warnings and model assumptions that go along
with every engine result.
"""

from .calculations import compute_efficiency
from .constants import EXTREME_ANGLE_WARNING


def _lift_mechanism(angle):
    if angle > 2:
        return f"At {angle:.1f}°, air is deflected downward. Wing pushes up."
    if angle < -2:
        return "Negative angle creates downforce (pushes wing down)."
    return "Near zero angle = minimal lift."


def _key_insight(separation, coefficients):
    if separation == "stalled":
        return "STALLED: Reduce angle immediately!"
    if separation == "separated":
        return "Flow breaking away. Getting close to stall."

    efficiency = compute_efficiency(coefficients["cl"], coefficients["cd"])
    if efficiency > 15:
        return "Good efficiency. Flow is smooth."
    if efficiency > 8:
        return "Moderate efficiency. Could be better."
    return "Low efficiency. Check angle and shape."


def generate_explanation(geometry, separation, coefficients, regime):
    """
    Build the explanation dict shown next to the numbers.

    Args:
        geometry: Clamped geometry dict
        separation: Separation state string
        coefficients: Corrected {cl, cd} dict
        regime: FlowClassification dict

    Returns:
        Dict with regime, lift_mechanism, drag_sources, key_insight, suggestion
    """
    angle = geometry["angle_of_attack"]

    drag_text = "Drag comes from air friction and flow deflection."
    if separation != "attached":
        drag_text += " Flow separation adds extra drag."

    suggestion = None
    if separation != "attached":
        suggestion = "Try reducing the angle of attack."
    elif abs(angle) < 3:
        suggestion = "Increase angle to generate more lift."

    return {
        "regime": regime["description"],
        "lift_mechanism": _lift_mechanism(angle),
        "drag_sources": drag_text,
        "key_insight": _key_insight(separation, coefficients),
        "suggestion": suggestion,
    }


def generate_warnings(geometry, separation, regime):
    """
    List of user-facing warnings; empty when nothing is unusual.
    Clamped inputs are not reported here: clamping is silent.
    """
    warnings = []

    if separation == "stalled":
        warnings.append("STALL DETECTED: Results are approximate.")
    elif separation == "separated":
        warnings.append("Flow separation active.")

    if abs(geometry["angle_of_attack"]) > EXTREME_ANGLE_WARNING:
        warnings.append("Extreme angle: behavior simplified.")

    if regime["confidence"] == "low":
        warnings.append(f"Reynolds regime '{regime['regime']}' is outside the model's comfort zone.")

    return warnings


def list_assumptions(mode):
    """Model assumptions, listed with every result."""
    assumptions = [
        "2D flow (no wing tips)",
        "Steady conditions (no gusts)",
        "Clean airfoil (no dirt or ice)",
        "Thin airfoil theory with empirical drag corrections",
        "For learning only - NOT for real designs",
    ]
    if mode == "educational":
        assumptions.insert(0, "Simplified educational model (not accurate)")
    else:
        assumptions.insert(0, "Uncertainty ranges combine flow regime and separation confidence")
    return assumptions
