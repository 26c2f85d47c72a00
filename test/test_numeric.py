import unittest

from tonal.color.numeric import (
    clamp,
    clamp_int,
    difference_degrees,
    lerp,
    matrix_multiply,
    round_half_up,
    sanitize_degrees,
    sanitize_degrees_int,
    signum,
)


class TestNumeric(unittest.TestCase):

    def test_signum(self) -> None:
        self.assertEqual(signum(-0.001), -1)
        self.assertEqual(signum(0.0), 0)
        self.assertEqual(signum(-0.0), 0)
        self.assertEqual(signum(42), 1)

    def test_lerp(self) -> None:
        self.assertEqual(lerp(2.0, 4.0, 0.0), 2.0)
        self.assertEqual(lerp(2.0, 4.0, 1.0), 4.0)
        self.assertAlmostEqual(lerp(2.0, 4.0, 0.25), 2.5)
        self.assertAlmostEqual(lerp(2.0, 4.0, 2.0), 6.0)

    def test_clamp(self) -> None:
        self.assertEqual(clamp(0.0, 1.0, -0.5), 0.0)
        self.assertEqual(clamp(0.0, 1.0, 0.5), 0.5)
        self.assertEqual(clamp(0.0, 1.0, 1.5), 1.0)
        self.assertEqual(clamp_int(0, 255, -3), 0)
        self.assertEqual(clamp_int(0, 255, 128), 128)
        self.assertEqual(clamp_int(0, 255, 300), 255)

    def test_sanitize_degrees(self) -> None:
        for degrees, expected in [
            (0.0, 0.0),
            (359.5, 359.5),
            (360.0, 0.0),
            (-30.0, 330.0),
            (720.5, 0.5),
            (-720.0, 0.0),
            (-1e-14, 0.0),
        ]:
            with self.subTest(degrees=degrees):
                self.assertAlmostEqual(sanitize_degrees(degrees), expected)
                self.assertGreaterEqual(sanitize_degrees(degrees), 0.0)
                self.assertLess(sanitize_degrees(degrees), 360.0)

        self.assertEqual(sanitize_degrees_int(-1), 359)
        self.assertEqual(sanitize_degrees_int(360), 0)
        self.assertEqual(sanitize_degrees_int(725), 5)

    def test_difference_degrees(self) -> None:
        self.assertEqual(difference_degrees(10.0, 350.0), 20.0)
        self.assertEqual(difference_degrees(350.0, 10.0), 20.0)
        self.assertEqual(difference_degrees(0.0, 180.0), 180.0)
        self.assertEqual(difference_degrees(90.0, 90.0), 0.0)

    def test_round_half_up(self) -> None:
        self.assertEqual(round_half_up(0.5), 1)
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(-0.5), 0)
        self.assertEqual(round_half_up(-0.6), -1)
        self.assertEqual(round_half_up(99.49), 99)

    def test_matrix_multiply(self) -> None:
        identity = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))
        self.assertEqual(matrix_multiply((1.0, 2.0, 3.0), identity), (1.0, 2.0, 3.0))

        matrix = ((1.0, 2.0, 3.0), (4.0, 5.0, 6.0), (7.0, 8.0, 9.0))
        self.assertEqual(
            matrix_multiply((1.0, 0.0, -1.0), matrix),
            (-2.0, -2.0, -2.0),
        )
        self.assertEqual(
            matrix_multiply((0.0, 1.0, 0.0), matrix),
            (2.0, 5.0, 8.0),
        )
