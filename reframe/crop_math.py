import math
from enum import Enum
from typing import Callable, Dict, Union

from reframe.alpha import box_to_alpha
from reframe.geometry import BBox, Region, Vector2, bbox_center, is_empty_enclosing, lerp
from reframe.transform import shift_into_bounds


class CropAlgorithm(str, Enum):
    LEGACY = "legacy"
    CENTERED = "centered"


def max_crop_size(image_width: float, image_height: float, aspect_ratio: float) -> Vector2:
    """
    Largest ``(width, height)`` with the given width/height ratio that fits in the image.

    One side always equals the image's, e.g. ``max_crop_size(1000, 500, 1) == (500, 500)``.
    """
    if image_width <= 0 or image_height <= 0:
        raise ValueError(f"Invalid image size {image_width}x{image_height}")
    if aspect_ratio <= 0:
        raise ValueError(f"Invalid aspect ratio {aspect_ratio}")
    crop_width = float(image_width)
    crop_height = float(image_height)
    if image_width / image_height > aspect_ratio:
        crop_width = image_height * aspect_ratio
    else:
        crop_height = image_width / aspect_ratio
    return crop_width, crop_height


def _check_roi(roi: BBox) -> None:
    if is_empty_enclosing(roi):
        raise ValueError("Region of interest is empty")


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _to_region(left: float, top: float, width: float, height: float) -> Region:
    # halves round up, also for negative values: -3.5 -> -3
    return Region(
        left=_round_half_up(left),
        top=_round_half_up(top),
        width=_round_half_up(width),
        height=_round_half_up(height),
    )


def plan_legacy_crop(image_width: float, image_height: float, aspect_ratio: float, roi: BBox) -> Region:
    """
    Corner-anchored crop planning, kept so older crops stay reproducible.

    Two windows of the maximal size are placed, one sharing the ROI's top-left
    corner and one sharing its bottom-right corner, both pushed back inside the
    image. The result interpolates between them by the ROI's position in the
    image, so an ROI near the top-left ends up near the top-left of the crop.
    """
    _check_roi(roi)
    x1, y1, x2, y2 = roi
    crop_width, crop_height = max_crop_size(image_width, image_height, aspect_ratio)
    shares_bottom_right = shift_into_bounds(
        (x2 - crop_width, y2 - crop_height, x2, y2), image_width, image_height
    )
    shares_top_left = shift_into_bounds(
        (x1, y1, x1 + crop_width, y1 + crop_height), image_width, image_height
    )

    alpha = box_to_alpha(roi, image_width, image_height)
    middle = lerp(shares_top_left, shares_bottom_right, alpha)
    return _to_region(middle[0], middle[1], crop_width, crop_height)


def plan_centered_crop(
    image_width: float,
    image_height: float,
    aspect_ratio: float,
    roi: BBox,
    zoom: float = 1.0,
) -> Region:
    """
    Crop planning that keeps the ROI's center at the same relative position.

    If the ROI center sits at 30% of the image width it also sits at 30% of the
    crop width. ``zoom > 1`` shrinks the crop around that center; ``zoom <= 1``
    leaves the maximal crop as is. A zoomed region is not clamped and may
    reach past the image edges.
    """
    _check_roi(roi)
    if zoom <= 0:
        raise ValueError(f"Invalid zoom {zoom}")
    x, y = bbox_center(roi)
    xp, yp = x / image_width, y / image_height

    crop_width, crop_height = max_crop_size(image_width, image_height, aspect_ratio)
    left = x - xp * crop_width
    top = y - yp * crop_height
    width = crop_width
    height = crop_height

    shrink = 1.0 / zoom
    if shrink < 1:
        left = x - (x - left) * shrink
        top = y - (y - top) * shrink
        width *= shrink
        height *= shrink

    return _to_region(left, top, width, height)


def _legacy_strategy(image_width, image_height, aspect_ratio, roi, zoom):
    return plan_legacy_crop(image_width, image_height, aspect_ratio, roi)


_STRATEGIES: Dict[CropAlgorithm, Callable[..., Region]] = {
    CropAlgorithm.LEGACY: _legacy_strategy,
    CropAlgorithm.CENTERED: plan_centered_crop,
}


def plan_crop(
    algorithm: Union[CropAlgorithm, str],
    image_width: float,
    image_height: float,
    aspect_ratio: float,
    roi: BBox,
    zoom: float = 1.0,
) -> Region:
    """Plan a crop with the named algorithm. The legacy one has no zoom and ignores ``zoom``."""
    try:
        algorithm = CropAlgorithm(algorithm)
    except ValueError as exc:
        raise ValueError(f"Unknown crop algorithm: {algorithm}") from exc
    return _STRATEGIES[algorithm](image_width, image_height, aspect_ratio, roi, zoom)
