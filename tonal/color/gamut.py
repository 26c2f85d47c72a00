"""
Support for gamut mapping HCT colors.

Gamut mapping makes extensive use of other color algorithms: it renders CAM16
correlates as ARGB colors, measures their tone, and computes the distance
between correlates. As a result, this module has more dependencies than most of
the color modules, importing symbols from :mod:`.cam`, :mod:`.conditions`,
:mod:`.conversion`, and :mod:`.numeric`.

The algorithm nests two binary searches. The outer search, :func:`search_chroma`,
looks for the largest chroma that can be displayed at the requested hue and
tone. For each candidate chroma, the inner search, :func:`find_cam_by_j`, looks
for a CAM16 lightness J whose rendering has the requested tone. Both searches
return either a :class:`Found` outcome or :data:`NOT_FOUND`.
"""
import dataclasses
import logging
import math
from typing import TypeAlias

from .cam import Cam16
from .conditions import ViewingConditions
from .conversion import argb_to_lstar, lstar_to_argb
from .numeric import round_half_up, sanitize_degrees
from .spec import Argb


logger = logging.getLogger(__name__)


CHROMA_SEARCH_ENDPOINT = 0.4
"""
The outer search terminates once the bracket for the maximum chroma is
narrower than this.
"""

DE_MAX = 1.0
"""The maximum distance ΔE in CAM16-UCS between a requested and returned color."""

DL_MAX = 0.2
"""The maximum difference between a requested and returned tone."""

DE_MAX_ERROR = 0.000000001
"""
The distance ΔE below which a match counts as exact. The inner search
terminates early upon finding such a match.
"""

LIGHTNESS_SEARCH_ENDPOINT = 0.01
"""The inner search terminates once the bracket for J is this narrow or narrower."""

CHROMA_LIMIT = 1000.0
"""
The largest chroma handed to the searches. No displayable color comes close,
whereas astronomically large chroma overflows when rendering correlates.
"""


@dataclasses.dataclass(frozen=True, slots=True)
class Found:
    """
    A successful search.

    Attributes:
        cam: are the correlates of the rendered, displayable color
        delta_l: is the difference between requested and rendered tone
        delta_e: is the distance between the rendered color and the ideal
            color with the requested hue
    """
    cam: Cam16
    delta_l: float
    delta_e: float


@dataclasses.dataclass(frozen=True, slots=True)
class NotFound:
    """An unsuccessful search."""


NOT_FOUND = NotFound()

Outcome: TypeAlias = Found | NotFound


def find_cam_by_j(
    hue: float,
    chroma: float,
    tone: float,
    environment: ViewingConditions,
) -> Outcome:
    """
    Find a displayable color with the given hue, chroma, and tone.

    Args:
        hue: is the CAM16 hue
        chroma: is the CAM16 chroma
        tone: is the L* lightness
        environment: are the viewing conditions
    Returns:
        the displayable color within tolerance of the three dimensions or
        :data:`NOT_FOUND`

    This function performs a binary search over CAM16's J. For each candidate,
    it renders the color, which clips it into gamut, and compares the tone of
    the result with the requested one. Among candidates within :data:`DL_MAX`
    of the tone, it keeps the one closest to the ideal color with the requested
    hue, as long as that one is within :data:`DE_MAX`. Since rendering clips
    out-of-gamut colors, a chroma that is too large for hue and tone shows up
    as a distance that is too large.
    """
    low = 0.0
    high = 100.0
    best: Outcome = NOT_FOUND
    best_ΔL = 1000.0
    best_ΔE = 1000.0

    while math.fabs(low - high) > LIGHTNESS_SEARCH_ENDPOINT:
        j = low + (high - low) / 2
        clipped = Cam16.from_jch(j, chroma, hue, environment).viewed(environment)
        clipped_lstar = argb_to_lstar(clipped)
        ΔL = math.fabs(tone - clipped_lstar)

        if ΔL < DL_MAX:
            clipped_cam = Cam16.from_argb(clipped, environment)
            ΔE = clipped_cam.distance(
                Cam16.from_jch(clipped_cam.j, clipped_cam.chroma, hue, environment)
            )
            if ΔE <= DE_MAX and ΔE <= best_ΔE:
                best_ΔL = ΔL
                best_ΔE = ΔE
                best = Found(clipped_cam, ΔL, ΔE)

        if best_ΔL == 0 and best_ΔE < DE_MAX_ERROR:
            break

        if clipped_lstar < tone:
            low = j
        else:
            high = j

    return best


def search_chroma(
    hue: float,
    chroma: float,
    tone: float,
    environment: ViewingConditions,
) -> Outcome:
    """
    Find the displayable color with the largest chroma up to the given chroma.

    Args:
        hue: is the CAM16 hue, 0 <= hue < 360
        chroma: is the requested CAM16 chroma
        tone: is the L* lightness
        environment: are the viewing conditions
    Returns:
        the displayable color with the largest feasible chroma or
        :data:`NOT_FOUND`

    The search first probes the requested chroma. If that succeeds, it returns
    the result right away, without checking whether the result also sits on
    the gamut boundary. Otherwise, it performs a binary search across the
    chroma range between zero and the requested chroma. It always retains the
    largest chroma that succeeded, not the one closest to the request, and it
    terminates once the bracket is narrower than
    :data:`CHROMA_SEARCH_ENDPOINT`.
    """
    outcome = find_cam_by_j(hue, chroma, tone, environment)
    if isinstance(outcome, Found):
        logger.debug(
            'hct(%.2f, %.2f, %.2f) is in gamut after first probe', hue, chroma, tone
        )
        return outcome

    low = 0.0
    high = chroma
    best: Outcome = NOT_FOUND
    probes = 1

    while math.fabs(low - high) >= CHROMA_SEARCH_ENDPOINT:
        mid = low + (high - low) / 2.0
        outcome = find_cam_by_j(hue, mid, tone, environment)
        probes += 1

        if isinstance(outcome, Found):
            best = outcome
            low = mid
        else:
            high = mid

    if isinstance(best, Found):
        logger.debug(
            'hct(%.2f, %.2f, %.2f) reduced to chroma %.2f after %d probes',
            hue, chroma, tone, best.cam.chroma, probes,
        )
    return best


def map_into_gamut(
    hue: float,
    chroma: float,
    tone: float,
    environment: ViewingConditions,
) -> Argb:
    """
    Map the HCT coordinates to the closest displayable color.

    Args:
        hue: is the hue in degrees; invalid values are corrected
        chroma: is, informally, the colorfulness, ranging from 0 to roughly
            150; the result's chroma may be lower, since chroma has a different
            maximum for every hue and tone
        tone: is the lightness, ranging from 0 to 100
        environment: are the viewing conditions
    Returns:
        the ARGB color

    Requests with a chroma below 1 or a tone that rounds to 0 or 100 are
    practically gray. Since searching amongst them is numerically unstable,
    this function returns the gray with the requested tone instead. The same
    gray also serves as fallback when no displayable color is found.
    Chroma above :data:`CHROMA_LIMIT` is searched as if it were the limit.
    """
    if chroma < 1.0 or round_half_up(tone) <= 0 or round_half_up(tone) >= 100:
        logger.debug('hct(%.2f, %.2f, %.2f) maps to neutral', hue, chroma, tone)
        return lstar_to_argb(tone)

    hue = sanitize_degrees(hue)
    chroma = min(chroma, CHROMA_LIMIT)
    outcome = search_chroma(hue, chroma, tone, environment)
    if isinstance(outcome, Found):
        return outcome.cam.viewed(environment)

    logger.debug(
        'hct(%.2f, %.2f, %.2f) has no displayable match, falling back to neutral',
        hue, chroma, tone,
    )
    return lstar_to_argb(tone)
