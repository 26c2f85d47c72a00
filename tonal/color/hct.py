"""
HCT, a color system built on CAM16's hue and chroma and L*a*b*'s L*.

Using L* creates a link between the color system, contrast, and thus
accessibility. Contrast ratio depends on relative luminance, i.e., Y in the XYZ
color space. L* is computed from Y, but unlike Y it is linear to human
perception, which makes creating accurate color tones trivial. Measuring
contrast in L* also is linear and simple: A difference of 40 in HCT tone
guarantees a contrast ratio of at least 3.0, and a difference of 50 guarantees a
contrast ratio of at least 4.5.
"""
import dataclasses
import math
from typing import Self

from .cam import Cam16
from .conditions import DEFAULT, ViewingConditions
from .conversion import argb_to_lstar
from .equality import normalize
from .gamut import map_into_gamut
from .numeric import sanitize_degrees
from .spec import Argb


@dataclasses.dataclass(frozen=True, slots=True, init=False, eq=False)
class Hct:
    """
    A color in HCT.

    Attributes:
        hue: is the CAM16 hue, 0 <= hue < 360
        chroma: is the CAM16 chroma, informally the colorfulness; its maximum
            differs for every hue and tone
        tone: is the L* lightness, 0 <= tone <= 100
        environment: are the viewing conditions

    An HCT color always is displayable. When created from an ARGB color, that is
    trivially true. When created from hue, chroma, and tone with :meth:`of`,
    the coordinates are gamut mapped first. The chroma of the result may thus
    be lower than the requested one.

    Instances of this class are immutable. Methods that update a coordinate
    return a new color, which is gamut mapped again. Consequently, updates do
    not compose independently: Updating the hue after the chroma may change
    the chroma once more.

    This class implements ``__hash__()`` and ``__eq__()`` so that colors with
    coordinates equal after rounding to 10 decimal digits are treated as equal.
    """
    hue: float
    chroma: float
    tone: float
    environment: ViewingConditions = dataclasses.field(repr=False)

    def __init__(self, argb: Argb, environment: ViewingConditions = DEFAULT) -> None:
        if isinstance(argb, bool) or not isinstance(argb, int):
            raise ValueError(f'{argb!r} is not an integer ARGB color')
        if not 0 <= argb <= 0xFFFFFFFF:
            raise ValueError(f'{argb:#x} is out of range for an ARGB color')

        cam = Cam16.from_argb(argb, environment)
        object.__setattr__(self, 'hue', cam.hue)
        object.__setattr__(self, 'chroma', cam.chroma)
        object.__setattr__(self, 'tone', argb_to_lstar(argb))
        object.__setattr__(self, 'environment', environment)

    @classmethod
    def of(
        cls,
        hue: float,
        chroma: float,
        tone: float,
        environment: ViewingConditions = DEFAULT,
    ) -> Self:
        """
        Create an HCT color from hue, chroma, and tone.

        Args:
            hue: is the hue in degrees; invalid values are corrected
            chroma: is the requested chroma; the color's chroma may be lower
            tone: is the lightness between 0 and 100; invalid values are
                corrected
            environment: are the viewing conditions
        Returns:
            the closest displayable color
        Raises:
            ValueError: if a coordinate is not-a-number or infinite
        """
        for name, value in (('hue', hue), ('chroma', chroma), ('tone', tone)):
            if not math.isfinite(value):
                raise ValueError(f'{name} {value} is not a finite number')

        hue = sanitize_degrees(hue)
        return cls(map_into_gamut(hue, chroma, tone, environment), environment)

    @classmethod
    def from_argb(cls, argb: Argb, environment: ViewingConditions = DEFAULT) -> Self:
        """Create an HCT color from an ARGB color."""
        return cls(argb, environment)

    # ----------------------------------------------------------------------------------
    # Updates

    def with_hue(self, hue: float) -> Self:
        """
        Update this color's hue. The chroma may decrease because chroma has a
        different maximum for every hue and tone.
        """
        return type(self).of(hue, self.chroma, self.tone, self.environment)

    def with_chroma(self, chroma: float) -> Self:
        """
        Update this color's chroma. The result may have a lower chroma than
        requested because chroma has a different maximum for every hue and tone.
        """
        return type(self).of(self.hue, chroma, self.tone, self.environment)

    def with_tone(self, tone: float) -> Self:
        """
        Update this color's tone. The chroma may decrease because chroma has a
        different maximum for every hue and tone.
        """
        return type(self).of(self.hue, self.chroma, tone, self.environment)

    # ----------------------------------------------------------------------------------
    # Conversion to ARGB

    def to_argb(self) -> Argb:
        """
        Convert this color to ARGB. The result is recomputed on every
        invocation and always is opaque.
        """
        return map_into_gamut(self.hue, self.chroma, self.tone, self.environment)

    def viewed_in(self, environment: ViewingConditions) -> Argb:
        """
        Determine the ARGB color that looks like this color when observed in
        the given viewing conditions.
        """
        cam = Cam16.from_argb(self.to_argb(), self.environment)
        return cam.viewed(environment)

    # ----------------------------------------------------------------------------------
    # Distance, Hash, and Equality

    def distance(self, other: Self) -> float:
        """Determine the perceptual distance ΔE from the other color in CAM16-UCS."""
        return Cam16.from_argb(self.to_argb(), self.environment).distance(
            Cam16.from_argb(other.to_argb(), other.environment)
        )

    def _normalized(self) -> tuple[None | float, ...]:
        return normalize((self.hue, self.chroma, self.tone), angular_index=0)

    def __hash__(self) -> int:
        return hash(self._normalized())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hct):
            return NotImplemented
        return (
            self.environment == other.environment
            and self._normalized() == other._normalized()
        )

    def __str__(self) -> str:
        return f'hct({self.hue:.2f}, {self.chroma:.2f}, {self.tone:.2f})'
