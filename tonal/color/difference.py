"""Support for computing the difference between two colors"""
import math


def deltaE_cam16_ucs(
    J1: float, a1: float, b1: float,
    J2: float, a2: float, b2: float,
) -> float:
    """
    Determine the difference between two colors in CAM16-UCS.

    The coordinates are the uniform color space's J*, a*, and b*. The Euclidian
    distance between them is compressed by the power function recommended by Li
    et al. (2017), so that the result tracks perceived differences more closely
    than the plain distance would.
    """
    ΔJ = J1 - J2
    Δa = a1 - a2
    Δb = b1 - b2
    ΔE_prime = math.sqrt(ΔJ * ΔJ + Δa * Δa + Δb * Δb)
    return 1.41 * math.pow(ΔE_prime, 0.63)
