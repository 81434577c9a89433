"""
Tests for pixel operations on RGBA arrays
"""

import numpy as np
import pytest

from core.image.processors import (
    _row_bands,
    composite_over,
    extract_region,
    grayscale,
    resize_image,
)


@pytest.fixture
def random_pixels():
    rng = np.random.default_rng(seed=7)
    return rng.integers(0, 256, size=(37, 23, 4), dtype=np.uint8)


class TestResizeAndExtract:
    """Test resizing and region extraction"""

    def test_resize_to_exact_size(self, random_pixels):
        resized = resize_image(random_pixels, 50, 10)
        assert resized.shape == (10, 50, 4)

    def test_resize_same_size_is_noop(self, random_pixels):
        assert resize_image(random_pixels, 23, 37) is random_pixels

    def test_extract_region_copies(self, random_pixels):
        region = extract_region(random_pixels, 3, 5, 10, 7)

        assert region.shape == (7, 10, 4)
        np.testing.assert_array_equal(region, random_pixels[5:12, 3:13])
        region[...] = 0
        assert random_pixels[5:12, 3:13].any()


class TestGrayscale:
    """Test luminance conversion"""

    def test_channels_equal_and_alpha_preserved(self, random_pixels):
        gray = grayscale(random_pixels, workers=4)

        np.testing.assert_array_equal(gray[..., 0], gray[..., 1])
        np.testing.assert_array_equal(gray[..., 1], gray[..., 2])
        np.testing.assert_array_equal(gray[..., 3], random_pixels[..., 3])

    def test_known_colours(self):
        pixels = np.array(
            [[[255, 0, 0, 255], [0, 255, 0, 128], [0, 0, 255, 0], [255, 255, 255, 255]]],
            dtype=np.uint8,
        )
        gray = grayscale(pixels, workers=1)

        # ITU-R BT.601 weights: 0.299 R + 0.587 G + 0.114 B
        expected = np.array([76, 150, 29, 255])
        assert np.abs(gray[0, :, 0].astype(int) - expected).max() <= 1
        assert gray[0, :, 3].tolist() == [255, 128, 0, 255]

    def test_gray_pixels_map_to_themselves(self):
        levels = np.arange(256, dtype=np.uint8)
        pixels = np.stack([levels, levels, levels, np.full(256, 255, np.uint8)], axis=-1)

        gray = grayscale(pixels[np.newaxis], workers=1)

        np.testing.assert_array_equal(gray[0], pixels)

    def test_idempotent(self, random_pixels):
        once = grayscale(random_pixels)
        twice = grayscale(once)

        np.testing.assert_array_equal(once, twice)

    def test_worker_count_does_not_change_result(self, random_pixels):
        np.testing.assert_array_equal(
            grayscale(random_pixels, workers=1), grayscale(random_pixels, workers=8)
        )

    def test_input_not_modified(self, random_pixels):
        original = random_pixels.copy()
        grayscale(random_pixels)

        np.testing.assert_array_equal(random_pixels, original)

    @pytest.mark.parametrize("height,workers", [(37, 4), (3, 8), (10, 1), (1, 4)])
    def test_row_bands_cover_all_rows_once(self, height, workers):
        bands = _row_bands(height, workers)
        rows = [row for start, end in bands for row in range(start, end)]

        assert rows == list(range(height))
        assert len(bands) <= workers


class TestCompositeOver:
    """Test masked alpha compositing"""

    @pytest.fixture
    def base(self):
        pixels = np.zeros((20, 20, 4), dtype=np.uint8)
        pixels[..., 0] = 10
        pixels[..., 1] = 20
        pixels[..., 2] = 30
        pixels[..., 3] = 255
        pixels[0, 0, 3] = 0
        return pixels

    @pytest.fixture
    def overlay(self):
        pixels = np.zeros((10, 10, 4), dtype=np.uint8)
        pixels[..., 0] = 250
        pixels[..., 3] = 255
        return pixels

    def test_zero_opacity_leaves_base_unchanged(self, base, overlay):
        original = base.copy()
        composite_over(base, overlay, (5, 5), 0)

        np.testing.assert_array_equal(base, original)

    def test_full_opacity_replaces_region(self, base, overlay):
        composite_over(base, overlay, (5, 5), 255)

        np.testing.assert_array_equal(base[5:15, 5:15], overlay)
        assert base[4, 4].tolist() == [10, 20, 30, 255]

    def test_half_opacity_blends(self, base, overlay):
        composite_over(base, overlay, (0, 5), 128)

        red = base[10, 5, 0]
        assert 10 < red < 250
        assert base[10, 5, 3] == 255

    def test_overlay_is_clipped_to_base(self, base, overlay):
        composite_over(base, overlay, (15, -5), 255)

        np.testing.assert_array_equal(base[0:5, 15:20], overlay[5:10, 0:5])

    def test_overlay_outside_base(self, base, overlay):
        original = base.copy()
        composite_over(base, overlay, (40, 40), 255)

        np.testing.assert_array_equal(base, original)
