"""
Viewing conditions for the CAM16 color appearance model.

The appearance of a color depends on the environment it is observed in: the
white point of the illuminant, how bright the surroundings are, and the
lightness of the background. CAM16 folds those parameters into a handful of
precomputed terms, which are captured by :class:`ViewingConditions`. Computing
those terms is somewhat expensive but needs to happen only once per
environment. The default environment, :data:`DEFAULT`, is computed when this
module is first imported.
"""
import dataclasses
import math
from typing import Self

from .conversion import lstar_to_y
from .numeric import clamp, lerp, matrix_multiply
from .spec import Matrix, Vector


WHITE_POINT_D65: Vector = (95.047, 100.0, 108.883)
"""The standard white point, D65, in XYZ with Y = 100."""

XYZ_TO_CAM16RGB: Matrix = (
    (  0.401288, 0.650173, -0.051461 ),
    ( -0.250268, 1.204414,  0.045854 ),
    ( -0.002079, 0.048952,  0.953127 ),
)


@dataclasses.dataclass(frozen=True, slots=True)
class ViewingConditions:
    """
    A viewing environment for CAM16.

    Attributes:
        n: is the ratio of background to white point luminance
        aw: is the achromatic response of the white point
        nbb: is the brightness induction factor
        ncb: is the chromatic induction factor
        c: is the exponential nonlinearity for the surround
        nc: is the chromatic induction factor for the surround
        rgb_d: are the per-channel discounting factors for chromatic adaptation
        fl: is the luminance-level adaptation factor
        fl_root: is the fourth root of ``fl``
        z: is the base exponential nonlinearity

    Use :meth:`make` to derive these terms from a physical description of the
    environment. Instances of this class are immutable.
    """
    n: float
    aw: float
    nbb: float
    ncb: float
    c: float
    nc: float
    rgb_d: Vector
    fl: float
    fl_root: float
    z: float

    @classmethod
    def make(
        cls,
        *,
        white_point: Vector = WHITE_POINT_D65,
        adapting_luminance: None | float = None,
        background_lstar: float = 50.0,
        surround: float = 2.0,
        discounting_illuminant: bool = False,
    ) -> Self:
        """
        Create viewing conditions.

        Args:
            white_point: is the color of the illuminant in XYZ with Y = 100
            adapting_luminance: is the luminance of the adapting field in
                cd/m². It defaults to ``200 / π`` times the relative luminance
                of a mid gray, i.e., L* = 50, which models a gray world under a
                200 lux illuminant.
            background_lstar: is the lightness of the area surrounding the
                color
            surround: is 0 for a dark room, 1 for dim light, and 2 for
                average light; intermediate values are interpolated
            discounting_illuminant: indicates whether the eye fully adapts to
                the illuminant
        Returns:
            the precomputed terms for the environment
        Raises:
            ValueError: if any of the parameters is out of range
        """
        if len(white_point) != 3 or not all(c > 0 for c in white_point):
            raise ValueError(
                f'white point {white_point} must have three positive components'
            )
        if adapting_luminance is None:
            adapting_luminance = 200.0 / math.pi * lstar_to_y(50.0) / 100.0
        if not adapting_luminance > 0:
            raise ValueError(
                f'adapting luminance {adapting_luminance} must be positive'
            )
        if not background_lstar > 0:
            raise ValueError(f'background L* {background_lstar} must be positive')
        if not 0.0 <= surround <= 2.0:
            raise ValueError(f'surround {surround} must be between 0 and 2')

        r_w, g_w, b_w = matrix_multiply(white_point, XYZ_TO_CAM16RGB)

        f = 0.8 + surround / 10.0
        if f >= 0.9:
            c = lerp(0.59, 0.69, (f - 0.9) * 10.0)
        else:
            c = lerp(0.525, 0.59, (f - 0.8) * 10.0)

        if discounting_illuminant:
            d = 1.0
        else:
            d = f * (1.0 - (1.0 / 3.6) * math.exp((-adapting_luminance - 42.0) / 92.0))
        d = clamp(0.0, 1.0, d)

        nc = f
        rgb_d = (
            d * (100.0 / r_w) + 1.0 - d,
            d * (100.0 / g_w) + 1.0 - d,
            d * (100.0 / b_w) + 1.0 - d,
        )

        k = 1.0 / (5.0 * adapting_luminance + 1.0)
        k4 = k * k * k * k
        k4f = 1.0 - k4
        fl = k4 * adapting_luminance + 0.1 * k4f * k4f * math.cbrt(5.0 * adapting_luminance)

        n = lstar_to_y(background_lstar) / white_point[1]
        z = 1.48 + math.sqrt(n)
        nbb = 0.725 / math.pow(n, 0.2)
        ncb = nbb

        def adapt(channel: float, discount: float) -> float:
            factor = math.pow(fl * discount * channel / 100.0, 0.42)
            return 400.0 * factor / (factor + 27.13)

        r_a = adapt(r_w, rgb_d[0])
        g_a = adapt(g_w, rgb_d[1])
        b_a = adapt(b_w, rgb_d[2])
        aw = (2.0 * r_a + g_a + 0.05 * b_a) * nbb

        return cls(
            n=n,
            aw=aw,
            nbb=nbb,
            ncb=ncb,
            c=c,
            nc=nc,
            rgb_d=rgb_d,
            fl=fl,
            fl_root=math.pow(fl, 0.25),
            z=z,
        )


DEFAULT = ViewingConditions.make()
"""
The default viewing conditions: sRGB's D65 white point, a mid-gray world
under 200 lux, a mid-gray background, and an average surround.
"""
