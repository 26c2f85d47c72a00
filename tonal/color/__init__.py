"""
Colors in HCT.

:class:`Hct` is the high-level API. The submodules implement the algorithms
behind it and may be used on their own:

  * :mod:`.numeric` for numeric primitives
  * :mod:`.conversion` for ARGB, XYZ, and L*
  * :mod:`.conditions` for CAM16 viewing conditions
  * :mod:`.cam` for the CAM16 appearance model
  * :mod:`.difference` for perceptual distance
  * :mod:`.gamut` for gamut mapping
  * :mod:`.serde` for hex notation
"""
from .cam import Cam16
from .conditions import DEFAULT, ViewingConditions
from .conversion import argb_to_lstar, lstar_to_argb
from .gamut import Found, map_into_gamut, NOT_FOUND, NotFound
from .hct import Hct
from .serde import parse_hex, to_hex
from .spec import Argb

__all__ = [
    "Argb",
    "argb_to_lstar",
    "Cam16",
    "DEFAULT",
    "Found",
    "Hct",
    "lstar_to_argb",
    "map_into_gamut",
    "NOT_FOUND",
    "NotFound",
    "parse_hex",
    "to_hex",
    "ViewingConditions",
]
