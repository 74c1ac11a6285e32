"""
Tests for boundary locator module
"""

import pytest

from core.pixel_sampler import decode
from schemas.common import BoundaryRect
from schemas.detection import BoundaryDetectionParams
from vision.boundary_locator import BoundaryLocator, candidate_offsets, first_hit


class TestScanHelpers:
    """Test the offset sequence and first-hit search"""

    def test_candidate_offsets(self):
        assert list(candidate_offsets(12, 5)) == [12, 7, 2]

    def test_candidate_offsets_exclude_zero(self):
        assert list(candidate_offsets(10, 5)) == [10, 5]

    def test_candidate_offsets_restartable(self):
        offsets = candidate_offsets(20, 5)

        assert list(offsets) == list(offsets)

    @pytest.mark.parametrize("start", [0, -3])
    def test_candidate_offsets_empty(self, start):
        assert list(candidate_offsets(start, 5)) == []

    def test_candidate_offsets_invalid_step(self):
        with pytest.raises(ValueError):
            candidate_offsets(10, 0)

    def test_first_hit(self):
        assert first_hit([9, 6, 3], lambda o: o < 7) == 6

    def test_first_hit_not_found(self):
        assert first_hit([9, 6, 3], lambda o: o > 100) is None

    def test_first_hit_distinguishes_zero_from_missing(self):
        assert first_hit([0], lambda o: True) == 0


class TestBoundaryLocator:
    """Test marker scanning on synthetic images"""

    @pytest.fixture
    def locator(self):
        return BoundaryLocator()

    def test_no_marker(self, locator, flat_image, layout):
        """Test a flat image yields no hits and a (0, 0) origin"""
        result = locator.locate(decode(flat_image))

        assert result.vertical_hit is None
        assert result.horizontal_hit is None
        assert not result.found
        assert result.rect == BoundaryRect(
            x=0, y=0, width=layout.width - 1, height=layout.height - 1
        )

    def test_marker_found(self, locator, marked_image, layout):
        """Test hits are moved inward by the margin and anchored at the far corner"""
        result = locator.locate(decode(marked_image))

        x2 = layout.width - 1
        y2 = layout.height - 1
        y1 = layout.marker_row - 10
        x1 = layout.marker_column - 10

        assert result.vertical_hit == layout.marker_row
        assert result.horizontal_hit == layout.marker_column
        assert result.found
        assert result.rect.x == x1
        assert result.rect.y == y1
        assert result.rect.width == x2 - x1
        assert result.rect.height == y2 - y1

    def test_find_boundary_returns_rect(self, locator, marked_image):
        rect = locator.find_boundary(decode(marked_image))

        assert rect == locator.locate(decode(marked_image)).rect

    def test_single_axis(self, locator, make_marked_image, layout):
        """Test a marker on one axis leaves the other origin at 0"""
        result = locator.locate(decode(make_marked_image(column=None)))

        assert result.horizontal_hit is None
        assert result.rect.x == 0
        assert result.rect.y == layout.marker_row - 10

    def test_first_marker_from_anchor_wins(self, locator, make_marked_image, layout):
        """Test scanning stops at the marker closest to the anchor corner"""
        image = make_marked_image()
        image[layout.marker_row - 50, :] = layout.orange

        result = locator.locate(decode(image))

        assert result.vertical_hit == layout.marker_row

    def test_near_third_is_skipped(self, locator, make_marked_image, layout):
        """Test markers next to the anchor corner are not sampled"""
        # Start row is 299 - 100 = 199; row 250 lies in the skipped region
        result = locator.locate(decode(make_marked_image(row=250, column=None)))

        assert result.vertical_hit is None

    def test_marker_between_samples_is_missed(self, locator, make_marked_image):
        """Test a one pixel line off the sampling grid is stepped over"""
        result = locator.locate(decode(make_marked_image(row=150, column=None)))

        assert result.vertical_hit is None

    def test_thick_marker_always_hit(self, locator, make_flat_image, layout):
        """Test a band at least one step wide is found at its lowest sampled row"""
        image = make_flat_image()
        image[140:146, :] = layout.orange

        result = locator.locate(decode(image))

        assert result.vertical_hit == 144

    def test_custom_scan_geometry(self, make_marked_image):
        """Test step, margin and start offset come from the parameters"""
        params = BoundaryDetectionParams(scan_step=1, inward_margin=0, start_divisor=2)
        locator = BoundaryLocator(params)

        # Vertical scan starts at 299 - 150 = 149, horizontal at 450 // 2 = 225
        result = locator.locate(decode(make_marked_image(row=121, column=201)))

        assert result.vertical_hit == 121
        assert result.horizontal_hit == 201
        assert result.rect.x == 201
        assert result.rect.y == 121

    def test_hit_within_margin_gives_negative_origin(self, locator, make_marked_image):
        """Test a hit closer to the origin than the margin is reported as is"""
        # Rows sampled: 199, 194, ..., 9, 4
        result = locator.locate(decode(make_marked_image(row=4, column=None)))

        assert result.vertical_hit == 4
        assert result.rect.y == -6
        assert not result.rect.is_within(450, 300)

    def test_row_alignment_does_not_change_result(self, locator, marked_image):
        plain = locator.locate(decode(marked_image))
        padded = locator.locate(decode(marked_image, row_alignment=64))

        assert plain == padded

    @pytest.mark.parametrize("height,width", [(1, 1), (2, 2), (3, 1)])
    def test_tiny_images(self, locator, make_flat_image, height, width):
        """Test scans on images too small to sample stay in bounds"""
        result = locator.locate(decode(make_flat_image(height, width)))

        assert not result.found
        assert result.rect.x == 0
        assert result.rect.y == 0

    def test_start_divisor_one_stays_in_bounds(self, make_flat_image):
        params = BoundaryDetectionParams(start_divisor=1)
        locator = BoundaryLocator(params)

        result = locator.locate(decode(make_flat_image(20, 30)))

        assert not result.found
