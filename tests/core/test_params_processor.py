"""
Tests for process parameter normalization
"""

import pytest

from core.enums import CropPoint, FitMode
from core.utils.params_processor import clean_int, get_crop_point, get_fit_mode, is_grayscale
from schemas import ProcessOptions


class TestCleanInt:
    """Test dimension parsing"""

    @pytest.mark.parametrize("value", [1, 2, 99, 640, 1920, 9999])
    def test_valid_values_pass_through(self, value):
        assert clean_int(str(value)) == value

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("0", 0),
            ("-3", 0),
            ("10005", 5),
            ("10000", 0),
            ("abc", 0),
            ("", 0),
            ("12.5", 0),
            ("1_000", 0),
            ("+7", 7),
            ("007", 7),
            ("99999999999999999999", 5807),
            ("-99999999999999999999", 0),
        ],
    )
    def test_malformed_and_out_of_range(self, raw, expected):
        assert clean_int(raw) == expected

    @pytest.mark.parametrize(
        "raw", [" 200", "200 ", "200\n", "\t200", "٢٠٠", "２００", "+", "2 00"]
    )
    def test_whitespace_and_non_ascii_digits_are_unparsable(self, raw):
        assert clean_int(raw) == 0

    def test_none_is_unspecified(self):
        assert clean_int(None) == 0


class TestGetCropPoint:
    """Test crop anchor parsing"""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("top", CropPoint.TOP),
            ("top,left", CropPoint.TOP_LEFT),
            ("top,right", CropPoint.TOP_RIGHT),
            ("left", CropPoint.LEFT),
            ("right", CropPoint.RIGHT),
            ("bottom", CropPoint.BOTTOM),
            ("bottom,left", CropPoint.BOTTOM_LEFT),
            ("bottom,right", CropPoint.BOTTOM_RIGHT),
        ],
    )
    def test_known_anchors(self, raw, expected):
        assert get_crop_point(raw) == expected

    @pytest.mark.parametrize("raw", ["", "TOP", "center", "left,top", "top, left", None])
    def test_unknown_anchors_fall_back_to_center(self, raw):
        assert get_crop_point(raw) == CropPoint.CENTER


class TestFitAndMono:
    """Test fit mode and grayscale flags"""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("", FitMode.NONE),
            (None, FitMode.NONE),
            ("crop", FitMode.CROP),
            ("CROP", FitMode.UNSUPPORTED),
            ("scale", FitMode.UNSUPPORTED),
        ],
    )
    def test_fit_mode(self, raw, expected):
        assert get_fit_mode(raw) == expected

    def test_only_black_hex_code_requests_grayscale(self):
        assert is_grayscale("000000") is True
        assert is_grayscale("ffffff") is False
        assert is_grayscale("") is False


class TestProcessOptions:
    """Test typed options built from a parameter bag"""

    def test_from_params(self):
        options = ProcessOptions.from_params(
            {"w": "300", "h": "20000", "fit": "crop", "crop": "bottom,right", "mono": "000000"}
        )

        assert options.width == 300
        assert options.height == 0
        assert options.fit_mode == FitMode.CROP
        assert options.crop_point == CropPoint.BOTTOM_RIGHT
        assert options.grayscale is True

    def test_empty_params_are_defaults(self):
        options = ProcessOptions.from_params({})

        assert options == ProcessOptions()
        assert options.has_dimensions is False

    def test_unknown_keys_are_ignored(self):
        options = ProcessOptions.from_params({"w": "10", "q": "90", "format": "webp"})

        assert options.width == 10
        assert options.has_dimensions is True

    def test_params_are_not_modified(self):
        params = {"w": "abc", "crop": "nowhere"}
        ProcessOptions.from_params(params)

        assert params == {"w": "abc", "crop": "nowhere"}
