from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterable, Sequence, Tuple, Union

import numpy as np

# (x1, y1, x2, y2); the frame is named by the parameter holding the box
BBox = Tuple[float, float, float, float]
Vector2 = Tuple[float, float]
BBoxLike = Union[Sequence[float], np.ndarray]

# Identity element of ``enclosing``: any real box unioned with it is itself.
EMPTY_ENCLOSING: BBox = (math.inf, math.inf, -math.inf, -math.inf)


@dataclass(frozen=True)
class Region:
    """
    A crop window cut from an image, as origin plus size.

    The centered planner may return a zoomed region that reaches past the image edges.
    """
    left: int
    top: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    def as_box(self) -> BBox:
        return (float(self.left), float(self.top), float(self.right), float(self.bottom))

    def as_pil_box(self) -> Tuple[int, int, int, int]:
        return (self.left, self.top, self.right, self.bottom)

    def as_dict(self) -> Dict[str, int]:
        return {"left": self.left, "top": self.top, "width": self.width, "height": self.height}

    def contained_in(self, image_width: float, image_height: float) -> bool:
        return (
            self.left >= 0
            and self.top >= 0
            and self.right <= image_width
            and self.bottom <= image_height
        )


def as_bbox(value: BBoxLike) -> BBox:
    arr = np.asarray(value, dtype=float)
    if arr.shape != (4,):
        raise ValueError(f"Expected 4 box coordinates, got shape {arr.shape}")
    x1, y1, x2, y2 = (float(v) for v in arr)
    return x1, y1, x2, y2


def bbox_size(bbox: BBox) -> Vector2:
    x1, y1, x2, y2 = bbox
    return x2 - x1, y2 - y1


def bbox_center(bbox: BBox) -> Vector2:
    x1, y1, x2, y2 = bbox
    return (x1 + x2) / 2.0, (y1 + y2) / 2.0


def is_empty_enclosing(bbox: BBox) -> bool:
    return tuple(bbox) == EMPTY_ENCLOSING


def area(bbox: BBox) -> float:
    x1, y1, x2, y2 = bbox
    return (x2 - x1) * (y2 - y1)


def translate(bbox: BBox, left: float, top: float) -> BBox:
    x1, y1, x2, y2 = bbox
    return x1 - left, y1 - top, x2 - left, y2 - top


def clip(bbox: BBox, width: float, height: float) -> BBox:
    """
    Clamp a box into ``[0, width] x [0, height]``.

    A box lying fully outside the frame, or an inverted one, collapses to a
    zero-area box; the result always has ``x2 >= x1`` and ``y2 >= y1``.
    """
    x1, y1, x2, y2 = bbox
    new_x1 = max(0.0, min(x1, width))
    new_y1 = max(0.0, min(y1, height))
    new_x2 = max(new_x1, max(0.0, min(x2, width)))
    new_y2 = max(new_y1, max(0.0, min(y2, height)))
    return new_x1, new_y1, new_x2, new_y2


def crop_translate(bbox: BBox, region: Region) -> BBox:
    """Re-express a box in the frame of an image cropped to ``region``."""
    moved = translate(bbox, region.left, region.top)
    return clip(moved, region.width, region.height)


def lerp(box_a: BBox, box_b: BBox, alpha: Vector2) -> BBox:
    """
    Linearly interpolate two boxes, ``alpha[0]`` along x and ``alpha[1]`` along y.

    ``alpha == (0, 0)`` gives ``box_a`` and ``alpha == (1, 1)`` gives ``box_b``
    exactly. Values outside ``[0, 1]`` extrapolate.
    """
    ax1, ay1, ax2, ay2 = box_a
    bx1, by1, bx2, by2 = box_b
    tx, ty = alpha
    return (
        (1.0 - tx) * ax1 + tx * bx1,
        (1.0 - ty) * ay1 + ty * by1,
        (1.0 - tx) * ax2 + tx * bx2,
        (1.0 - ty) * ay2 + ty * by2,
    )


def enclosing(bboxes: Iterable[BBoxLike]) -> BBox:
    # empty input gives EMPTY_ENCLOSING
    boxes = [as_bbox(b) for b in bboxes]
    if not boxes:
        return EMPTY_ENCLOSING
    arr = np.asarray(boxes, dtype=float)
    mins = arr[:, :2].min(axis=0)
    maxs = arr[:, 2:].max(axis=0)
    return float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1])
