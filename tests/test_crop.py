import pytest

from reframe.crop_math import CropAlgorithm, max_crop_size, plan_centered_crop, plan_crop, plan_legacy_crop
from reframe.geometry import EMPTY_ENCLOSING, Region

IMAGE_SIZES = [(1000, 500), (500, 1000), (800, 600), (1024, 1024), (333, 777)]
RATIOS = [0.5, 2.0 / 3.0, 0.8, 1.0, 1.25, 1.5, 2.0]


def _rois(width: int, height: int):
    return [
        (0.0, 0.0, width * 0.2, height * 0.2),
        (width * 0.4, height * 0.4, width * 0.6, height * 0.6),
        (width * 0.7, height * 0.1, width * 0.95, height * 0.3),
        (width * 0.05, height * 0.75, width * 0.25, height * 1.0),
    ]


def test_max_crop_size_wide_image() -> None:
    assert max_crop_size(1000, 500, 1) == (500, 500)


def test_max_crop_size_tall_image() -> None:
    assert max_crop_size(500, 1000, 1) == (500, 500)


def test_max_crop_size_same_ratio_keeps_image() -> None:
    assert max_crop_size(1000, 500, 2) == (1000, 500)


def test_max_crop_size_rejects_bad_ratio() -> None:
    with pytest.raises(ValueError):
        max_crop_size(1000, 500, 0)


def test_planners_hit_ratio_and_stay_maximal() -> None:
    for width, height in IMAGE_SIZES:
        for ratio in RATIOS:
            for roi in _rois(width, height):
                for region in (
                    plan_legacy_crop(width, height, ratio, roi),
                    plan_centered_crop(width, height, ratio, roi),
                ):
                    assert abs(region.width / region.height - ratio) < 0.01
                    assert region.width <= width
                    assert region.height <= height
                    assert region.width == width or region.height == height


def test_legacy_crop_stays_inside_image() -> None:
    for width, height in IMAGE_SIZES:
        for ratio in RATIOS:
            for roi in _rois(width, height):
                region = plan_legacy_crop(width, height, ratio, roi)
                assert region.left >= 0
                assert region.top >= 0
                assert region.right <= width + 1
                assert region.bottom <= height + 1


def test_legacy_crop_pinned_wide_image() -> None:
    region = plan_legacy_crop(1000, 500, 1.0, (100.0, 100.0, 200.0, 200.0))
    assert region == Region(left=89, top=0, width=500, height=500)


def test_legacy_crop_pinned_tall_image() -> None:
    region = plan_legacy_crop(800, 1200, 1.0, (300.0, 700.0, 500.0, 900.0))
    assert region == Region(left=0, top=190, width=800, height=800)


def test_legacy_crop_roi_spanning_image_width() -> None:
    region = plan_legacy_crop(600, 400, 1.5, (0.0, 0.0, 600.0, 100.0))
    assert region == Region(left=0, top=0, width=600, height=400)


def test_centered_crop_pinned_wide_image() -> None:
    region = plan_centered_crop(1000, 500, 1.0, (100.0, 100.0, 300.0, 300.0))
    assert region == Region(left=100, top=0, width=500, height=500)


def test_centered_crop_pinned_zoom() -> None:
    region = plan_centered_crop(1000, 500, 1.0, (100.0, 100.0, 300.0, 300.0), zoom=2.0)
    assert region == Region(left=150, top=100, width=250, height=250)


def test_centered_crop_full_image_when_ratio_matches() -> None:
    region = plan_centered_crop(1000, 800, 1.25, (400.0, 300.0, 600.0, 500.0))
    assert region == Region(left=0, top=0, width=1000, height=800)


def test_centered_crop_zoom_halves_around_center() -> None:
    roi = (400.0, 300.0, 600.0, 500.0)
    full = plan_centered_crop(1000, 800, 1.25, roi, zoom=1.0)
    zoomed = plan_centered_crop(1000, 800, 1.25, roi, zoom=2.0)
    assert zoomed.width * 2 == full.width
    assert zoomed.height * 2 == full.height
    assert zoomed == Region(left=250, top=200, width=500, height=400)
    assert zoomed.left + zoomed.width / 2 == 500
    assert zoomed.top + zoomed.height / 2 == 400


def test_centered_crop_zoom_out_is_ignored() -> None:
    roi = (100.0, 100.0, 300.0, 300.0)
    assert plan_centered_crop(1000, 500, 1.0, roi, zoom=0.5) == plan_centered_crop(1000, 500, 1.0, roi)


def test_centered_crop_zoom_is_not_clamped() -> None:
    # ROI center lies past the right edge
    region = plan_centered_crop(1000, 1000, 1.0, (1100.0, 400.0, 1300.0, 600.0), zoom=2.0)
    assert region == Region(left=600, top=250, width=500, height=500)
    assert region.right > 1000


def test_centered_crop_rejects_bad_zoom() -> None:
    with pytest.raises(ValueError):
        plan_centered_crop(1000, 500, 1.0, (100.0, 100.0, 300.0, 300.0), zoom=0)


def test_algorithms_diverge() -> None:
    roi = (100.0, 100.0, 200.0, 200.0)
    assert plan_legacy_crop(1000, 500, 1.0, roi).left == 89
    assert plan_centered_crop(1000, 500, 1.0, roi).left == 75


def test_plan_crop_selects_by_name() -> None:
    roi = (100.0, 100.0, 200.0, 200.0)
    assert plan_crop("legacy", 1000, 500, 1.0, roi) == plan_legacy_crop(1000, 500, 1.0, roi)
    assert plan_crop(CropAlgorithm.CENTERED, 1000, 500, 1.0, roi, zoom=2.0) == plan_centered_crop(
        1000, 500, 1.0, roi, zoom=2.0
    )


def test_plan_crop_legacy_ignores_zoom() -> None:
    roi = (100.0, 100.0, 200.0, 200.0)
    assert plan_crop("legacy", 1000, 500, 1.0, roi, zoom=3.0) == plan_legacy_crop(1000, 500, 1.0, roi)


def test_plan_crop_unknown_algorithm() -> None:
    with pytest.raises(ValueError):
        plan_crop("diagonal", 1000, 500, 1.0, (100.0, 100.0, 200.0, 200.0))


def test_planners_reject_empty_roi() -> None:
    with pytest.raises(ValueError):
        plan_legacy_crop(1000, 500, 1.0, EMPTY_ENCLOSING)
    with pytest.raises(ValueError):
        plan_centered_crop(1000, 500, 1.0, EMPTY_ENCLOSING)


def test_centered_crop_rounds_half_pixels_up() -> None:
    # 1001 / 2 leaves a 500.5 pixel height
    region = plan_centered_crop(1001, 1000, 2.0, (400.0, 400.0, 600.0, 600.0))
    assert region == Region(left=0, top=250, width=1001, height=501)


def test_legacy_crop_rounds_half_pixels_up() -> None:
    region = plan_legacy_crop(1001, 1000, 2.0, (0.0, 0.0, 100.0, 100.0))
    assert region == Region(left=0, top=0, width=1001, height=501)


def test_centered_crop_rounds_negative_half_left_up() -> None:
    # zoomed left lands on exactly -3.5
    region = plan_centered_crop(1024, 1024, 1.0, (-17.0, 502.0, 3.0, 522.0), zoom=2.0)
    assert region == Region(left=-3, top=256, width=512, height=512)
