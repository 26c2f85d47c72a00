"""
The CAM16 color appearance model.

CAM16 predicts how a color is perceived in a given viewing environment. Of its
correlates, HCT uses hue and chroma, while gamut mapping additionally relies on
J, the model's lightness, and on the coordinates of the CAM16 uniform color
space (CAM16-UCS) for measuring distance.

Converting from ARGB to CAM16 is exact. Converting from CAM16 back to ARGB is
not, since CAM16 happily describes colors that cannot be displayed. Such colors
are clipped into the sRGB gamut channel by channel.
"""
import dataclasses
import math
from typing import Self

from .conditions import XYZ_TO_CAM16RGB, ViewingConditions
from .conversion import argb_to_xyz, xyz_to_argb
from .difference import deltaE_cam16_ucs
from .numeric import matrix_multiply, sanitize_degrees, signum
from .spec import Argb, Matrix


_CAM16RGB_TO_XYZ: Matrix = (
    (  1.86206786, -1.01125463,  0.14918677 ),
    (  0.38752654,  0.62144744, -0.00897398 ),
    ( -0.01584150, -0.03412294,  1.04996444 ),
)


def _ucs(j: float, m: float, hue: float) -> tuple[float, float, float]:
    """Compute the CAM16-UCS coordinates J*, a*, b*."""
    hue_radians = math.radians(hue)
    jstar = (1.0 + 100.0 * 0.007) * j / (1.0 + 0.007 * j)
    mstar = 1.0 / 0.0228 * math.log1p(0.0228 * m)
    return jstar, mstar * math.cos(hue_radians), mstar * math.sin(hue_radians)


@dataclasses.dataclass(frozen=True, slots=True)
class Cam16:
    """
    The correlates of a color in CAM16.

    Attributes:
        hue: is the hue angle in degrees, 0 <= hue < 360
        chroma: is the colorfulness relative to a similarly lit white
        j: is the lightness
        q: is the brightness
        m: is the colorfulness
        s: is the saturation
        jstar: is J* in CAM16-UCS
        astar: is a* in CAM16-UCS
        bstar: is b* in CAM16-UCS

    Instances of this class are immutable.
    """
    hue: float
    chroma: float
    j: float
    q: float
    m: float
    s: float
    jstar: float
    astar: float
    bstar: float

    @classmethod
    def from_argb(cls, argb: Argb, environment: ViewingConditions) -> Self:
        """Determine the correlates of the color in the viewing environment."""
        x, y, z = argb_to_xyz(argb)
        r_c, g_c, b_c = matrix_multiply((x, y, z), XYZ_TO_CAM16RGB)

        # Chromatic adaptation and cone response compression
        def compress(channel: float, discount: float) -> float:
            adapted = discount * channel
            factor = math.pow(environment.fl * math.fabs(adapted) / 100.0, 0.42)
            return signum(adapted) * 400.0 * factor / (factor + 27.13)

        r_a = compress(r_c, environment.rgb_d[0])
        g_a = compress(g_c, environment.rgb_d[1])
        b_a = compress(b_c, environment.rgb_d[2])

        # Opponent color dimensions
        a = (11.0 * r_a + -12.0 * g_a + b_a) / 11.0
        b = (r_a + g_a - 2.0 * b_a) / 9.0
        u = (20.0 * r_a + 20.0 * g_a + 21.0 * b_a) / 20.0
        p2 = (40.0 * r_a + 20.0 * g_a + b_a) / 20.0

        hue = sanitize_degrees(math.degrees(math.atan2(b, a)))

        ac = p2 * environment.nbb
        j = 100.0 * math.pow(ac / environment.aw, environment.c * environment.z)
        q = (
            4.0 / environment.c
            * math.sqrt(j / 100.0)
            * (environment.aw + 4.0)
            * environment.fl_root
        )

        hue_prime = hue + 360.0 if hue < 20.14 else hue
        e_hue = 0.25 * (math.cos(math.radians(hue_prime) + 2.0) + 3.8)
        p1 = 50000.0 / 13.0 * e_hue * environment.nc * environment.ncb
        t = p1 * math.hypot(a, b) / (u + 0.305)
        alpha = (
            math.pow(1.64 - math.pow(0.29, environment.n), 0.73)
            * math.pow(t, 0.9)
        )
        chroma = alpha * math.sqrt(j / 100.0)
        m = chroma * environment.fl_root
        s = 50.0 * math.sqrt(alpha * environment.c / (environment.aw + 4.0))

        jstar, astar, bstar = _ucs(j, m, hue)
        return cls(hue, chroma, j, q, m, s, jstar, astar, bstar)

    @classmethod
    def from_jch(
        cls,
        j: float,
        chroma: float,
        hue: float,
        environment: ViewingConditions,
    ) -> Self:
        """
        Create the correlates for the given lightness, chroma, and hue. The
        result may describe a color that cannot be displayed.
        """
        q = (
            4.0 / environment.c
            * math.sqrt(j / 100.0)
            * (environment.aw + 4.0)
            * environment.fl_root
        )
        m = chroma * environment.fl_root
        alpha = 0.0 if j == 0 else chroma / math.sqrt(j / 100.0)
        s = 50.0 * math.sqrt(alpha * environment.c / (environment.aw + 4.0))

        jstar, astar, bstar = _ucs(j, m, hue)
        return cls(hue, chroma, j, q, m, s, jstar, astar, bstar)

    def viewed(self, environment: ViewingConditions) -> Argb:
        """
        :bdg-warning:`Lossy conversion` Determine the ARGB color that has these
        correlates in the given viewing environment. Colors outside the sRGB
        gamut are clipped.
        """
        if self.chroma == 0 or self.j == 0:
            alpha = 0.0
        else:
            alpha = self.chroma / math.sqrt(self.j / 100.0)

        t = math.pow(
            alpha / math.pow(1.64 - math.pow(0.29, environment.n), 0.73),
            1.0 / 0.9,
        )
        hue_radians = math.radians(self.hue)

        e_hue = 0.25 * (math.cos(hue_radians + 2.0) + 3.8)
        ac = environment.aw * math.pow(
            self.j / 100.0, 1.0 / environment.c / environment.z
        )
        p1 = e_hue * (50000.0 / 13.0) * environment.nc * environment.ncb
        p2 = ac / environment.nbb

        h_sin = math.sin(hue_radians)
        h_cos = math.cos(hue_radians)

        gamma = (
            23.0 * (p2 + 0.305) * t
            / (23.0 * p1 + 11.0 * t * h_cos + 108.0 * t * h_sin)
        )
        a = gamma * h_cos
        b = gamma * h_sin

        r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
        g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
        b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0

        # Undo cone response compression and chromatic adaptation
        def expand(channel: float, discount: float) -> float:
            magnitude = math.fabs(channel)
            base = max(0.0, 27.13 * magnitude / (400.0 - magnitude))
            return (
                signum(channel)
                * (100.0 / environment.fl)
                * math.pow(base, 1.0 / 0.42)
                / discount
            )

        r_f = expand(r_a, environment.rgb_d[0])
        g_f = expand(g_a, environment.rgb_d[1])
        b_f = expand(b_a, environment.rgb_d[2])

        x, y, z = matrix_multiply((r_f, g_f, b_f), _CAM16RGB_TO_XYZ)
        return xyz_to_argb(x, y, z)

    def distance(self, other: Self) -> float:
        """Determine the perceptual distance ΔE from the other color in CAM16-UCS."""
        return deltaE_cam16_ucs(
            self.jstar, self.astar, self.bstar,
            other.jstar, other.astar, other.bstar,
        )
