"""
Equality of HCT colors.

Equality comparison for colors is complicated by two problems:

 1. Converting between ARGB and CAM16 accrues some amount of floating point
    error, which may differ between processors and operating systems.
 2. Python requires that, if a class redefines ``__eq__()`` it must also
    redefine ``__hash__()``, so that two equal instances also have the same
    hash codes.

Testing whether the difference between two coordinates is smaller than some
epsilon would address the first problem but makes computing the hash
impossible. Instead, this module normalizes the coordinates to a canonical
representation that serves for both hash computation and equality comparison.
"""
import math


PRECISION = 10
"""
The default precision for rounding coordinates during normalization.
"""


def normalize(
    coordinates: tuple[float, ...],
    *,
    angular_index: int = -1,
    precision: int = PRECISION,
) -> tuple[None | float, ...]:
    """
    Normalize the coordinates.

    Args:
        coordinates: are the color's components.
        angular_index: is the index of the angular coordinate, if there is one.
        precision: is the number of decimals to round to.
    Returns:
        The normalized coordinates.

    Not-a-numbers become ``None``, which equals itself. The angle is folded
    into 0–360 and rounded to two decimal digits less than precision, since
    hues near zero carry fewer significant digits than other coordinates. All
    other coordinates are rounded to as many decimal digits as precision.
    """
    result: list[None | float] = []

    for index, value in enumerate(coordinates):
        if math.isnan(value):
            result.append(None)
            continue

        if index == angular_index:
            value = round(value % 360, precision - 2) % 360
        else:
            value = round(value, precision)

        result.append(value)

    return tuple(result)
