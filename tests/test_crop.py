"""Tests for window cropping."""

import numpy as np
import pytest

import cfprep
from cfprep import InvalidArgument


@pytest.fixture
def frame():
    # 10 wide, 8 tall
    return np.arange(80, dtype=np.uint8).reshape(8, 10)


class TestCropCorner:

    def test_centered(self):
        assert cfprep.crop_corner((10, 8), (4, 4), (5, 4)) == (3, 2)

    def test_odd_window(self):
        assert cfprep.crop_corner((10, 8), (3, 3), (5, 4)) == (4, 3)

    def test_top_left_edge(self):
        assert cfprep.crop_corner((10, 8), (4, 4), (0, 0)) == (0, 0)
        assert cfprep.crop_corner((10, 8), (4, 4), (-5, -5)) == (0, 0)

    def test_bottom_right_edge(self):
        assert cfprep.crop_corner((10, 8), (4, 4), (9, 7)) == (6, 4)
        assert cfprep.crop_corner((10, 8), (4, 4), (100, 100)) == (6, 4)


class TestWindowCrop:

    def test_pixel_exact(self, frame):
        crop = cfprep.window_crop(frame, 4, 4, (5, 4))
        np.testing.assert_array_equal(crop, frame[2:6, 3:7])

    def test_dimensions_for_any_center(self, frame):
        for cx in range(-3, 14):
            for cy in range(-3, 12):
                crop = cfprep.window_crop(frame, 5, 3, (cx, cy))
                assert crop.shape == (3, 5)

    def test_full_frame_is_a_copy(self, frame):
        crop = cfprep.window_crop(frame, 10, 8, (5, 4))
        np.testing.assert_array_equal(crop, frame)
        crop[0, 0] = 255
        assert frame[0, 0] == 0

    def test_window_too_wide(self, frame):
        with pytest.raises(InvalidArgument):
            cfprep.window_crop(frame, 11, 4, (5, 4))

    def test_window_too_tall(self, frame):
        with pytest.raises(InvalidArgument):
            cfprep.window_crop(frame, 4, 9, (5, 4))

    def test_empty_window(self, frame):
        with pytest.raises(InvalidArgument):
            cfprep.window_crop(frame, 0, 4, (5, 4))

    def test_crop_then_preprocess(self, frame):
        prepped = cfprep.preprocess(cfprep.window_crop(frame, 6, 4, (2, 2)))
        assert len(prepped) == 24
