"""
Tests for color classifier module
"""

import pytest

from core.enums import HueMode
from core.pixel_sampler import RGBSample
from schemas.detection import BoundaryDetectionParams
from vision.color_classifier import ColorClassifier, HSVSample, is_boundary_color, to_hsv


class TestToHSV:
    """Test RGB to HSV conversion"""

    @pytest.mark.parametrize("level", [0, 1, 128, 255])
    def test_gray_has_no_hue_or_saturation(self, level):
        """Test R=G=B yields hue 0 and saturation 0"""
        hsv = to_hsv(RGBSample(level, level, level))

        assert hsv.hue == 0
        assert hsv.saturation == 0
        assert hsv.value == level

    def test_orange_formula(self):
        """Test red-max branch on RGB (255, 128, 0)"""
        hsv = to_hsv(RGBSample(255, 128, 0))

        assert hsv.hue == pytest.approx(60 * 128 / 255)
        assert hsv.hue == pytest.approx(30.1, abs=0.05)
        assert hsv.value == 255
        assert hsv.saturation == pytest.approx(1.0)

    def test_value_is_raw_channel_magnitude(self):
        """Test value is not normalized to 0-1"""
        hsv = to_hsv(RGBSample(200, 133, 100))

        assert hsv.value == 200
        assert hsv.saturation == pytest.approx(0.5)
        assert hsv.hue == pytest.approx(19.8)

    def test_green_max(self):
        """Test green-max branch"""
        assert to_hsv(RGBSample(0, 255, 0)).hue == pytest.approx(120)

    def test_blue_max(self):
        """Test blue-max branch"""
        assert to_hsv(RGBSample(0, 0, 255)).hue == pytest.approx(240)
        assert to_hsv(RGBSample(128, 0, 255)).hue == pytest.approx(60 * 128 / 255 + 240)

    def test_red_wins_ties_with_blue(self):
        """Test R=B max takes the red branch, so magenta reads as 60 in absolute mode"""
        sample = RGBSample(255, 0, 255)

        assert to_hsv(sample).hue == pytest.approx(60)
        assert to_hsv(sample, hue_mode=HueMode.WRAPPED).hue == pytest.approx(300)

    def test_absolute_mode_drops_sign(self):
        """Test negative red-max hue is mirrored in the default mode"""
        # G < B: 60 * (100 - 133) / 100 = -19.8
        hsv = to_hsv(RGBSample(200, 100, 133))

        assert hsv.hue == pytest.approx(19.8)

    def test_wrapped_mode_adds_full_turn(self):
        """Test negative red-max hue wraps around in the corrected mode"""
        hsv = to_hsv(RGBSample(200, 100, 133), hue_mode=HueMode.WRAPPED)

        assert hsv.hue == pytest.approx(340.2)

    def test_modes_agree_for_non_negative_hue(self):
        """Test both modes match when no correction is needed"""
        sample = RGBSample(255, 128, 0)

        assert to_hsv(sample, HueMode.ABSOLUTE) == to_hsv(sample, HueMode.WRAPPED)

    def test_black(self):
        """Test black has zero saturation"""
        assert to_hsv(RGBSample(0, 0, 0)) == HSVSample(0.0, 0.0, 0.0)


class TestIsBoundaryColor:
    """Test the orange marker predicate"""

    def test_orange_is_boundary(self):
        assert is_boundary_color(HSVSample(hue=20, saturation=0.5, value=200))

    def test_hue_outside_range(self):
        assert not is_boundary_color(HSVSample(hue=40, saturation=0.5, value=200))

    def test_value_too_low(self):
        assert not is_boundary_color(HSVSample(hue=20, saturation=0.5, value=100))

    def test_saturation_too_low(self):
        assert not is_boundary_color(HSVSample(hue=20, saturation=0.2, value=200))

    @pytest.mark.parametrize(
        "hsv",
        [
            HSVSample(hue=0, saturation=0.25, value=150),
            HSVSample(hue=35, saturation=0.25, value=150),
        ],
    )
    def test_thresholds_are_inclusive(self, hsv):
        """Test range limits themselves classify as boundary"""
        assert is_boundary_color(hsv)

    def test_custom_params(self):
        """Test thresholds can be recalibrated"""
        params = BoundaryDetectionParams(hue_min=100, hue_max=140, value_min=50)

        assert is_boundary_color(HSVSample(hue=120, saturation=0.5, value=60), params)
        assert not is_boundary_color(HSVSample(hue=20, saturation=0.5, value=200), params)


class TestColorClassifier:
    """Test ColorClassifier convenience wrapper"""

    def test_classify_orange_pixel(self):
        classifier = ColorClassifier()

        assert classifier.classify(RGBSample(200, 133, 100))
        assert not classifier.classify(RGBSample(140, 160, 180))

    def test_hue_mode_changes_classification(self):
        """Test a magenta-leaning red only passes with the absolute approximation"""
        sample = RGBSample(200, 100, 133)

        assert ColorClassifier().classify(sample)
        assert not ColorClassifier(BoundaryDetectionParams(hue_mode="wrapped")).classify(sample)


class TestBoundaryDetectionParams:
    """Test parameter validation"""

    def test_defaults(self):
        params = BoundaryDetectionParams()

        assert params.hue_min == 0
        assert params.hue_max == 35
        assert params.value_min == 150
        assert params.saturation_min == 0.25
        assert params.scan_step == 5
        assert params.inward_margin == 10
        assert params.start_divisor == 3
        assert params.hue_mode == HueMode.ABSOLUTE

    def test_inverted_hue_range_rejected(self):
        with pytest.raises(ValueError):
            BoundaryDetectionParams(hue_min=50, hue_max=10)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValueError):
            BoundaryDetectionParams(hue_maximum=50)

    def test_zero_step_rejected(self):
        with pytest.raises(ValueError):
            BoundaryDetectionParams(scan_step=0)
