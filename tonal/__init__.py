"""
Tonal: perceptually accurate color in hue, chroma, and tone.

The :mod:`tonal.color` package implements the HCT color system along with the
CAM16 appearance model and the L* conversions it builds on. :mod:`tonal.plot`
visualizes the sRGB gamut in HCT and requires matplotlib.
"""
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
