from typing import Tuple

from reframe.geometry import BBox, Vector2

# Slack for boxes whose size was rebuilt from corner coordinates.
SIZE_TOLERANCE = 1e-6


def rescale(bbox: BBox, original_size: Vector2, new_size: Vector2) -> BBox:
    """Move a box from an image of ``original_size`` into the same image resized to ``new_size``."""
    x1, y1, x2, y2 = bbox
    # ratio first so equal sizes give an exact identity
    scale_x = new_size[0] / original_size[0]
    scale_y = new_size[1] / original_size[1]
    return x1 * scale_x, y1 * scale_y, x2 * scale_x, y2 * scale_y


def shift_into_bounds(bbox: BBox, image_width: float, image_height: float) -> BBox:
    """
    Translate a box that overruns the image back inside it, keeping its size.

    Each axis is fixed independently: a left (top) overrun first, then a right
    (bottom) one. The box must not be larger than the image.
    """
    x1, y1, x2, y2 = bbox
    box_width = x2 - x1
    box_height = y2 - y1
    if box_width - image_width > SIZE_TOLERANCE or box_height - image_height > SIZE_TOLERANCE:
        raise ValueError(
            f"Box of size {box_width}x{box_height} cannot fit inside image {image_width}x{image_height}"
        )

    if x1 < 0:
        x1 = 0.0
        x2 = x1 + box_width
    if y1 < 0:
        y1 = 0.0
        y2 = y1 + box_height
    if x2 > image_width:
        x2 = float(image_width)
        x1 = x2 - box_width
    if y2 > image_height:
        y2 = float(image_height)
        y1 = y2 - box_height
    return x1, y1, x2, y2


def downscaled_size(width: int, height: int, max_side: int) -> Tuple[int, int]:
    # fit inside a max_side square, never enlarge
    if max_side <= 0:
        return width, height
    long_side = max(width, height)
    if long_side <= max_side:
        return width, height
    scale = long_side / max_side
    return max(1, int(round(width / scale))), max(1, int(round(height / scale)))
