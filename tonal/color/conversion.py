"""
Conversion between packed ARGB colors, CIE XYZ, and CIE L*.

This module serves as the lightness adapter for HCT. Tone is L*, which is
computed from the Y component of XYZ, which in turn is computed from linear
sRGB. All XYZ coordinates use a white point with Y = 100.
"""
import math

from .numeric import clamp, clamp_int, matrix_multiply, round_half_up
from .spec import Argb, Matrix, Vector


_SRGB_TO_XYZ: Matrix = (
    ( 0.41233895, 0.35762064, 0.18051042 ),
    ( 0.2126,     0.7152,     0.0722     ),
    ( 0.01932141, 0.11916382, 0.95034478 ),
)

_XYZ_TO_SRGB: Matrix = (
    (  3.2413774792388685, -1.5376652402851851, -0.49885366846268053 ),
    ( -0.9691452513005321,  1.8758853451067872,  0.04156585616912061 ),
    (  0.05562093689691305, -0.20395524564742123, 1.0571799111220335 ),
)

_EPSILON = 216.0 / 24389.0
_KAPPA = 24389.0 / 27.0


# --------------------------------------------------------------------------------------
# Packed ARGB


def rgb_to_argb(red: int, green: int, blue: int) -> Argb:
    """Pack the 8-bit channels into a fully opaque ARGB color."""
    return (255 << 24) | ((red & 255) << 16) | ((green & 255) << 8) | (blue & 255)


def alpha_from_argb(argb: Argb) -> int:
    """Extract the alpha channel."""
    return (argb >> 24) & 255


def red_from_argb(argb: Argb) -> int:
    """Extract the red channel."""
    return (argb >> 16) & 255


def green_from_argb(argb: Argb) -> int:
    """Extract the green channel."""
    return (argb >> 8) & 255


def blue_from_argb(argb: Argb) -> int:
    """Extract the blue channel."""
    return argb & 255


def is_opaque(argb: Argb) -> bool:
    return alpha_from_argb(argb) == 255


# --------------------------------------------------------------------------------------
# sRGB and Linear sRGB


def linearize(channel: int) -> float:
    """
    Convert an 8-bit sRGB channel into a linear sRGB channel.

    Args:
        channel: is the gamma-encoded channel between 0 and 255
    Returns:
        the linear channel between 0 and 100
    """
    normalized = channel / 255.0
    if normalized <= 0.040449936:
        return normalized / 12.92 * 100.0
    return math.pow((normalized + 0.055) / 1.055, 2.4) * 100.0


def delinearize(channel: float) -> int:
    """
    :bdg-warning:`Lossy conversion` Convert a linear sRGB channel into an 8-bit
    sRGB channel.

    Args:
        channel: is the linear channel, nominally between 0 and 100
    Returns:
        the gamma-encoded channel, rounded and clamped to 0–255
    """
    normalized = clamp(0.0, 1.0, channel / 100.0)
    if normalized <= 0.0031308:
        encoded = normalized * 12.92
    else:
        encoded = 1.055 * math.pow(normalized, 1.0 / 2.4) - 0.055
    return clamp_int(0, 255, round_half_up(encoded * 255.0))


# --------------------------------------------------------------------------------------
# XYZ


def argb_to_xyz(argb: Argb) -> Vector:
    """Convert the color to XYZ, ignoring its alpha channel."""
    linear = (
        linearize(red_from_argb(argb)),
        linearize(green_from_argb(argb)),
        linearize(blue_from_argb(argb)),
    )
    return matrix_multiply(linear, _SRGB_TO_XYZ)


def xyz_to_argb(x: float, y: float, z: float) -> Argb:
    """
    :bdg-warning:`Lossy conversion` Convert XYZ coordinates to an opaque ARGB
    color. Out-of-gamut coordinates are clipped channel by channel.
    """
    r, g, b = matrix_multiply((x, y, z), _XYZ_TO_SRGB)
    return rgb_to_argb(delinearize(r), delinearize(g), delinearize(b))


# --------------------------------------------------------------------------------------
# L* and Y


def _lab_f(t: float) -> float:
    if t > _EPSILON:
        return math.cbrt(t)
    return (_KAPPA * t + 16.0) / 116.0


def _lab_inverse_f(ft: float) -> float:
    ft3 = ft * ft * ft
    if ft3 > _EPSILON:
        return ft3
    return (116.0 * ft - 16.0) / _KAPPA


def y_to_lstar(y: float) -> float:
    """Convert relative luminance Y (0–100) to perceptual lightness L* (0–100)."""
    return 116.0 * _lab_f(y / 100.0) - 16.0


def lstar_to_y(lstar: float) -> float:
    """Convert perceptual lightness L* (0–100) to relative luminance Y (0–100)."""
    return 100.0 * _lab_inverse_f((lstar + 16.0) / 116.0)


def argb_to_lstar(argb: Argb) -> float:
    """Determine the L* of the color."""
    _, y, _ = argb_to_xyz(argb)
    return y_to_lstar(y)


def lstar_to_argb(lstar: float) -> Argb:
    """
    :bdg-warning:`Lossy conversion` Determine the gray with the given L*. The
    result always has equal red, green, and blue channels.
    """
    component = delinearize(lstar_to_y(lstar))
    return rgb_to_argb(component, component, component)
