"""Numeric primitives used throughout the color modules."""
import math

from .spec import Matrix, Vector


def signum(number: float) -> int:
    """
    Determine the sign of a number.

    Returns:
        1 if the number is positive, -1 if it is negative, and 0 otherwise.
    """
    if number < 0:
        return -1
    if number == 0:
        return 0
    return 1


def lerp(start: float, stop: float, amount: float) -> float:
    """
    Linearly interpolate between start and stop. The result is start for an
    amount of 0 and stop for an amount of 1.
    """
    return (1.0 - amount) * start + amount * stop


def clamp_int(min: int, max: int, value: int) -> int:
    """Clamp an integer to the range from min to max, inclusive."""
    if value < min:
        return min
    if value > max:
        return max
    return value


def clamp(min: float, max: float, value: float) -> float:
    """Clamp a floating point number to the range from min to max, inclusive."""
    if value < min:
        return min
    if value > max:
        return max
    return value


def sanitize_degrees_int(degrees: int) -> int:
    """Fold an integral angle into the range 0 (inclusive) to 360 (exclusive)."""
    return degrees % 360


def sanitize_degrees(degrees: float) -> float:
    """
    Fold an angle into the range 0.0 (inclusive) to 360.0 (exclusive).

    The remainder carries the sign of the input, so that negative angles
    are shifted up by a full turn afterwards.
    """
    degrees = math.fmod(degrees, 360.0)
    if degrees < 0:
        degrees += 360.0
        # Tiny negative angles round up to a full turn
        if degrees >= 360.0:
            degrees -= 360.0
    return degrees


def difference_degrees(a: float, b: float) -> float:
    """Determine the distance between two angles on the circle."""
    return 180.0 - math.fabs(math.fabs(a - b) - 180.0)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halfway cases going up."""
    return math.floor(value + 0.5)


def matrix_multiply(row: Vector, matrix: Matrix) -> Vector:
    """
    Multiply the 1x3 vector with the 3x3 matrix. Each component of the result
    is the dot product of the vector with the corresponding row of the matrix.
    """
    r0, r1, r2 = row
    return (
        r0 * matrix[0][0] + r1 * matrix[0][1] + r2 * matrix[0][2],
        r0 * matrix[1][0] + r1 * matrix[1][1] + r2 * matrix[1][2],
        r0 * matrix[2][0] + r1 * matrix[2][1] + r2 * matrix[2][2],
    )
