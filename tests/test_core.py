# test_core.py
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from aerolab.calculations import *
from aerolab.reynolds import *
import math


def test_basic_coefficients():
    # Reference scenario: symmetric 12% section, 1 m chord, 20 m/s sea level air
    rho = 1.225         # kg/m³
    V = 20              # m/s
    chord = 1.0
    geometry = {"thickness": 0.12, "camber": 0.0, "angle_of_attack": 5.0}

    print("\n=== TEST: Dynamic Pressure ===")
    q = compute_dynamic_pressure(rho, V)
    print("q:", q)
    assert abs(q - 245.0) < 1e-9, "Dynamic pressure incorrect"

    print("\n=== TEST: Reynolds ===")
    Re = compute_reynolds(rho, V, chord)
    print("Re:", Re)
    assert abs(Re - 1353591.16) < 1.0, "Reynolds number incorrect"

    print("\n=== TEST: CL ===")
    CL = compute_lift_coefficient(geometry, Re)
    print("CL:", CL)
    # 2π * 5° in rad * (1 - 0.3 * 0.12), Re correction saturated at 1
    assert abs(CL - 0.5286) < 1e-3, "Lift coefficient incorrect"

    print("\n=== TEST: CD ===")
    CD = compute_drag_coefficient(geometry, CL, Re)
    print("CD:", CD)
    assert abs(CD - 0.0310) < 1e-3, "Drag coefficient incorrect"

    print("\n=== TEST: Efficiency ===")
    LD = compute_efficiency(CL, CD)
    print("L/D:", LD)
    assert abs(LD - CL / CD) < 1e-12

    print("\n=== TEST: Lift Force ===")
    L = compute_force(q, 0.5, CL)
    print("Lift:", L)
    assert abs(L - 245.0 * 0.5 * CL) < 1e-9


def test_reynolds_classification():
    """Exact threshold behaviour of the regime classifier."""
    print("\n" + "=" * 50)
    print("REYNOLDS CLASSIFICATION TESTS")
    print("=" * 50)

    cases = [
        (1e3, "very-low-Re", "low"),
        (49999, "very-low-Re", "low"),
        (50000, "laminar", "high"),
        (499999, "laminar", "high"),
        (500000, "transitional", "medium"),
        (999999, "transitional", "medium"),
        (1e6, "turbulent", "medium"),
        (2999999, "turbulent", "medium"),
        (3e6, "high-Re-turbulent", "low"),
        (1e8, "high-Re-turbulent", "low"),
    ]
    for re, regime, confidence in cases:
        result = classify_flow(re)
        print(f"Re={re:.0f}: {result['regime']} / {result['confidence']}")
        assert result["regime"] == regime, f"Regime wrong at Re={re}"
        assert result["confidence"] == confidence, f"Confidence wrong at Re={re}"
        assert result["reynolds"] == re
        assert result["description"]

    assert classify_flow_legacy(3e6)["type"] == "separation-likely"
    assert classify_flow_legacy(1e4)["type"] == "laminar"


def test_reynolds_corrections():
    assert lift_correction(1e6) == 1.0
    assert lift_correction(1e8) == 1.0
    assert abs(lift_correction(1e3) - 0.5) < 1e-12
    # Floored so that Re < 1 never flips the sign of lift
    assert lift_correction(0.5) == 0.1
    assert lift_correction(1e-6) == 0.1

    # Laminar Blasius below 5e5, turbulent above
    assert abs(skin_friction_coefficient(1e5) - 1.328 / math.sqrt(1e5)) < 1e-12
    assert abs(skin_friction_coefficient(1e6) - 0.074 / 1e6 ** 0.2) < 1e-12
    assert abs(turbulent_skin_friction(1e6) - 0.00467) < 1e-4


def test_stall_model():
    """Stall angle estimate and post-stall factors."""
    print("\n" + "=" * 50)
    print("STALL MODEL TESTS")
    print("=" * 50)

    stall = estimate_stall_angle(0.12)
    print(f"Stall angle at 12% thickness: {stall:.2f}° (expected: 13.8)")
    assert abs(stall - 13.8) < 1e-9
    assert estimate_stall_angle(0.25) < estimate_stall_angle(0.05), "Thick sections should stall earlier"

    # Continuous at the stall angle, floored far past it
    assert compute_stall_lift_factor(13.8, 13.8) == 1.0
    assert abs(compute_stall_lift_factor(13.8001, 13.8) - 1.0) < 1e-5
    assert compute_stall_lift_factor(-5.0, 13.8) == 1.0
    assert compute_stall_lift_factor(90.0, 13.8) == 0.3

    multiplier = compute_post_stall_drag_multiplier(20.0, 13.8)
    print(f"Post-stall drag multiplier at 20°: {multiplier:.4f}")
    assert abs(multiplier - (1 + 0.5 * 6.2 / 13.8)) < 1e-9
    assert compute_post_stall_drag_multiplier(10.0, 13.8) == 1.0


def test_coefficient_details():
    Re = 2e6
    zero = {"thickness": 0.12, "camber": 0.0, "angle_of_attack": 0.0}
    assert compute_lift_coefficient(zero, Re) == 0.0

    cambered = {"thickness": 0.12, "camber": 0.02, "angle_of_attack": 0.0}
    expected = math.pi * 0.02 * (1 - 0.3 * 0.12)
    assert abs(compute_lift_coefficient(cambered, Re) - expected) < 1e-12

    # Lift is reduced at low Reynolds number
    geom = {"thickness": 0.12, "camber": 0.0, "angle_of_attack": 5.0}
    assert compute_lift_coefficient(geom, 1e4) < compute_lift_coefficient(geom, 1e6)

    assert abs(compute_induced_drag(1.0) - 1 / (math.pi * 6 * 0.85)) < 1e-12
    assert abs(compute_moment_coefficient(0.02, 0.5) - (-0.027)) < 1e-12

    coeffs = compute_coefficients(geom, Re)
    assert set(coeffs) == {"cl", "cd", "cm"}
    assert coeffs["cd"] > 0

    clipped = clip_coefficients({"cl": 2.5, "cd": 0.001, "cm": 0.0}, (-1.5, 1.8), (0.008, 2.0))
    assert clipped["cl"] == 1.8
    assert clipped["cd"] == 0.008

    # Division guard
    assert compute_efficiency(1.0, 0.0) == 1000.0
    assert uncertainty_factor("high") == 0.1
    assert uncertainty_factor("low") == 0.4


if __name__ == "__main__":
    test_basic_coefficients()
    test_reynolds_classification()
    test_reynolds_corrections()
    test_stall_model()
    test_coefficient_details()
    print("\n" + "=" * 50)
    print("ALL TESTS PASSED!")
    print("=" * 50)
