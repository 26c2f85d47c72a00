import unittest

from tonal.color.cam import Cam16
from tonal.color.conditions import DEFAULT, ViewingConditions


class CamValues:

    def __init__(
        self,
        argb: int,
        hue: float,
        chroma: float,
        j: float,
        m: float,
        s: float,
        q: float,
    ) -> None:
        self.argb = argb
        self.hue = hue
        self.chroma = chroma
        self.j = j
        self.m = m
        self.s = s
        self.q = q


class TestCam16(unittest.TestCase):

    RED = CamValues(
        argb = 0xFFFF0000,
        hue = 27.408,
        chroma = 113.357,
        j = 46.445,
        m = 89.494,
        s = 91.889,
        q = 105.988,
    )

    GREEN = CamValues(
        argb = 0xFF00FF00,
        hue = 142.139,
        chroma = 108.410,
        j = 79.331,
        m = 85.587,
        s = 78.604,
        q = 138.520,
    )

    BLUE = CamValues(
        argb = 0xFF0000FF,
        hue = 282.788,
        chroma = 87.230,
        j = 25.465,
        m = 68.867,
        s = 93.674,
        q = 78.481,
    )

    WHITE = CamValues(
        argb = 0xFFFFFFFF,
        hue = 209.492,
        chroma = 2.869,
        j = 100.0,
        m = 2.265,
        s = 12.068,
        q = 155.521,
    )

    def test_correlates(self) -> None:
        for name in ('RED', 'GREEN', 'BLUE', 'WHITE'):
            values = getattr(self, name)
            cam = Cam16.from_argb(values.argb, DEFAULT)
            with self.subTest(color=name):
                self.assertAlmostEqual(cam.hue, values.hue, delta=0.01)
                self.assertAlmostEqual(cam.chroma, values.chroma, delta=0.01)
                self.assertAlmostEqual(cam.j, values.j, delta=0.01)
                self.assertAlmostEqual(cam.m, values.m, delta=0.01)
                self.assertAlmostEqual(cam.s, values.s, delta=0.01)
                self.assertAlmostEqual(cam.q, values.q, delta=0.01)

    def test_black(self) -> None:
        cam = Cam16.from_argb(0xFF000000, DEFAULT)
        self.assertEqual(cam.hue, 0.0)
        self.assertEqual(cam.chroma, 0.0)
        self.assertEqual(cam.j, 0.0)
        self.assertEqual(cam.m, 0.0)
        self.assertEqual(cam.s, 0.0)
        self.assertEqual(cam.q, 0.0)
        self.assertEqual(cam.viewed(DEFAULT), 0xFF000000)

    def test_round_trip(self) -> None:
        dim = ViewingConditions.make(surround=1.0, background_lstar=20.0)
        for argb in (
            0xFFFF0000, 0xFF00FF00, 0xFF0000FF, 0xFFFFFFFF, 0xFF4285F4, 0xFF808080,
        ):
            for environment in (DEFAULT, dim):
                with self.subTest(argb=f'{argb:#x}', default=environment is DEFAULT):
                    cam = Cam16.from_argb(argb, environment)
                    self.assertEqual(cam.viewed(environment), argb)

    def test_from_jch(self) -> None:
        cam = Cam16.from_argb(0xFF4285F4, DEFAULT)
        same = Cam16.from_jch(cam.j, cam.chroma, cam.hue, DEFAULT)
        self.assertAlmostEqual(same.q, cam.q)
        self.assertAlmostEqual(same.m, cam.m)
        self.assertAlmostEqual(same.s, cam.s)
        self.assertAlmostEqual(same.jstar, cam.jstar)
        self.assertAlmostEqual(same.astar, cam.astar)
        self.assertAlmostEqual(same.bstar, cam.bstar)
        self.assertEqual(same.viewed(DEFAULT), 0xFF4285F4)

    def test_from_jch_at_zero_lightness(self) -> None:
        cam = Cam16.from_jch(0.0, 50.0, 120.0, DEFAULT)
        self.assertEqual(cam.s, 0.0)
        self.assertEqual(cam.viewed(DEFAULT), 0xFF000000)

    def test_out_of_gamut_is_clipped(self) -> None:
        argb = Cam16.from_jch(50.0, 250.0, 120.0, DEFAULT).viewed(DEFAULT)
        self.assertEqual(argb >> 24, 0xFF)
        clipped = Cam16.from_argb(argb, DEFAULT)
        self.assertLess(clipped.chroma, 250.0)

    def test_distance(self) -> None:
        red = Cam16.from_argb(0xFFFF0000, DEFAULT)
        blue = Cam16.from_argb(0xFF0000FF, DEFAULT)
        self.assertEqual(red.distance(red), 0.0)
        self.assertAlmostEqual(red.distance(blue), blue.distance(red))
        self.assertGreater(red.distance(blue), 10.0)
