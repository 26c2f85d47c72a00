from typing import Any
import unittest
from unittest import mock

from tonal.color import gamut
from tonal.color.cam import Cam16
from tonal.color.conditions import DEFAULT, ViewingConditions
from tonal.color.conversion import argb_to_lstar, lstar_to_argb
from tonal.color.gamut import (
    CHROMA_SEARCH_ENDPOINT,
    DE_MAX,
    DL_MAX,
    find_cam_by_j,
    Found,
    map_into_gamut,
    NOT_FOUND,
    search_chroma,
)


def ceiling_probe(ceiling: float) -> Any:
    """
    Create a stand-in for the inner search that succeeds for all chroma up to
    and including the ceiling.
    """
    def probe(
        hue: float, chroma: float, tone: float, environment: ViewingConditions
    ) -> gamut.Outcome:
        if chroma <= ceiling:
            return Found(Cam16.from_jch(50.0, chroma, hue, environment), 0.0, 0.0)
        return NOT_FOUND

    return probe


class TestNeutralFastPath(unittest.TestCase):

    def test_low_chroma(self) -> None:
        with mock.patch.object(gamut, 'find_cam_by_j') as probe:
            for hue in (0.0, 27.4, 120.0, 282.8, 359.9):
                with self.subTest(hue=hue):
                    self.assertEqual(
                        map_into_gamut(hue, 0.5, 50.0, DEFAULT), lstar_to_argb(50.0)
                    )
            probe.assert_not_called()

    def test_extreme_tones(self) -> None:
        with mock.patch.object(gamut, 'find_cam_by_j') as probe:
            for tone in (-10.0, 0.0, 0.4, 99.5, 100.0, 120.0):
                with self.subTest(tone=tone):
                    self.assertEqual(
                        map_into_gamut(120.0, 50.0, tone, DEFAULT), lstar_to_argb(tone)
                    )
            probe.assert_not_called()

        self.assertEqual(map_into_gamut(120.0, 50.0, 0.0, DEFAULT), 0xFF000000)
        self.assertEqual(map_into_gamut(120.0, 50.0, 100.0, DEFAULT), 0xFFFFFFFF)

    def test_almost_extreme_tones_are_searched(self) -> None:
        for tone in (0.5, 99.4):
            with self.subTest(tone=tone):
                with mock.patch.object(
                    gamut, 'find_cam_by_j', wraps=gamut.find_cam_by_j
                ) as probe:
                    map_into_gamut(120.0, 50.0, tone, DEFAULT)
                    self.assertGreater(probe.call_count, 0)


class TestLightnessSearch(unittest.TestCase):

    def test_in_gamut(self) -> None:
        outcome = find_cam_by_j(282.0, 20.0, 50.0, DEFAULT)
        assert isinstance(outcome, Found)
        self.assertLess(outcome.delta_l, DL_MAX)
        self.assertLessEqual(outcome.delta_e, DE_MAX)
        self.assertAlmostEqual(
            argb_to_lstar(outcome.cam.viewed(DEFAULT)), 50.0, delta=DL_MAX
        )
        self.assertAlmostEqual(outcome.cam.hue, 282.0, delta=3.0)

    def test_unreachable_tone(self) -> None:
        for hue in (0.0, 90.0, 180.0, 270.0):
            with self.subTest(hue=hue):
                self.assertIs(find_cam_by_j(hue, 50.0, 150.0, DEFAULT), NOT_FOUND)


class TestChromaSearch(unittest.TestCase):

    def test_first_probe_uses_requested_chroma(self) -> None:
        with mock.patch.object(
            gamut, 'find_cam_by_j', side_effect=ceiling_probe(37.0)
        ) as probe:
            search_chroma(120.0, 100.0, 50.0, DEFAULT)
            self.assertEqual(probe.call_args_list[0].args, (120.0, 100.0, 50.0, DEFAULT))

    def test_largest_feasible_chroma(self) -> None:
        with mock.patch.object(
            gamut, 'find_cam_by_j', side_effect=ceiling_probe(37.0)
        ) as probe:
            outcome = search_chroma(120.0, 100.0, 50.0, DEFAULT)
            assert isinstance(outcome, Found)
            self.assertLessEqual(outcome.cam.chroma, 37.0)
            self.assertGreater(outcome.cam.chroma, 37.0 - CHROMA_SEARCH_ENDPOINT)
            # One probe at the requested chroma, then log2(100 / 0.4) bisections
            self.assertLessEqual(probe.call_count, 10)

    def test_feasible_request_is_not_refined(self) -> None:
        with mock.patch.object(
            gamut, 'find_cam_by_j', side_effect=ceiling_probe(37.0)
        ) as probe:
            outcome = search_chroma(120.0, 30.0, 50.0, DEFAULT)
            assert isinstance(outcome, Found)
            self.assertEqual(outcome.cam.chroma, 30.0)
            self.assertEqual(probe.call_count, 1)

    def test_nothing_feasible(self) -> None:
        with mock.patch.object(gamut, 'find_cam_by_j', return_value=NOT_FOUND):
            self.assertIs(search_chroma(120.0, 100.0, 50.0, DEFAULT), NOT_FOUND)
            self.assertEqual(
                map_into_gamut(120.0, 100.0, 50.0, DEFAULT), lstar_to_argb(50.0)
            )

    def test_in_gamut_request_takes_single_probe(self) -> None:
        with mock.patch.object(
            gamut, 'find_cam_by_j', wraps=gamut.find_cam_by_j
        ) as probe:
            map_into_gamut(282.0, 20.0, 50.0, DEFAULT)
            self.assertEqual(probe.call_count, 1)


class TestMapIntoGamut(unittest.TestCase):

    def test_out_of_gamut(self) -> None:
        argb = map_into_gamut(120.0, 200.0, 50.0, DEFAULT)
        self.assertEqual(argb >> 24, 0xFF)
        self.assertAlmostEqual(argb_to_lstar(argb), 50.0, delta=DL_MAX)

        cam = Cam16.from_argb(argb, DEFAULT)
        self.assertLess(cam.chroma, 200.0)
        self.assertGreater(cam.chroma, 20.0)

    def test_hue_is_corrected(self) -> None:
        self.assertEqual(
            map_into_gamut(-78.0, 20.0, 50.0, DEFAULT),
            map_into_gamut(282.0, 20.0, 50.0, DEFAULT),
        )
        self.assertEqual(
            map_into_gamut(642.0, 20.0, 50.0, DEFAULT),
            map_into_gamut(282.0, 20.0, 50.0, DEFAULT),
        )

    def test_always_opaque(self) -> None:
        for hue in range(0, 360, 45):
            for tone in (10.0, 50.0, 90.0):
                with self.subTest(hue=hue, tone=tone):
                    argb = map_into_gamut(float(hue), 60.0, tone, DEFAULT)
                    self.assertEqual(argb >> 24, 0xFF)
                    self.assertAlmostEqual(argb_to_lstar(argb), tone, delta=DL_MAX)
