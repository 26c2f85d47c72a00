"""
Basic type declarations shared by the color modules:

  * ``Argb`` is a color packed into a non-negative integer as ``0xAARRGGBB``
  * ``Vector`` is a triple of floating point values
  * ``Matrix`` is a 3x3 matrix given as a triple of row vectors

All container types are immutable.
"""
from typing import TypeAlias

Argb: TypeAlias = int
Vector: TypeAlias = tuple[float, float, float]
Matrix: TypeAlias = tuple[Vector, Vector, Vector]
