from reframe.geometry import BBox, Vector2, bbox_size, lerp


def box_to_alpha(bbox: BBox, image_width: float, image_height: float) -> Vector2:
    """
    Position of a box inside an image as ``(alpha_x, alpha_y)``.

    Each alpha says where the box's top-left corner sits along the range of
    top-left positions a box of that size can take in the image: 0 is flush
    with the left/top edge, 1 with the right/bottom edge. An axis on which the
    box fills the image has no such range and reports 0.
    """
    x1, y1, _, _ = bbox
    box_width, box_height = bbox_size(bbox)
    range_x = image_width - box_width
    range_y = image_height - box_height
    alpha_x = x1 / range_x if range_x != 0 else 0.0
    alpha_y = y1 / range_y if range_y != 0 else 0.0
    return alpha_x, alpha_y


def alpha_to_box(
    image_width: float,
    image_height: float,
    box_width: float,
    box_height: float,
    alpha: Vector2,
) -> BBox:
    """Inverse of ``box_to_alpha`` for a box of the given size. Stays inside the image for alphas in [0, 1]."""
    top_left_box = (0.0, 0.0, box_width, box_height)
    bottom_right_box = (image_width - box_width, image_height - box_height, image_width, image_height)
    return lerp(top_left_box, bottom_right_box, alpha)
