import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from reframe.crop_math import CropAlgorithm, plan_crop
from reframe.faces import MAX_FACES, region_of_interest, validate_face_count
from reframe.geometry import BBox, BBoxLike, Region, as_bbox, crop_translate
from reframe.resolution import SUPPORTED_RESOLUTIONS, Resolution, closest_resolution, parse_resolution_list
from reframe.transform import downscaled_size, rescale

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReframeConfig:
    max_image_side: int = 800
    aspect_ratio: Optional[float] = None
    zoom: float = 1.0
    algorithm: str = CropAlgorithm.CENTERED.value
    roi_strategy: str = "enclosing"
    max_faces: int = MAX_FACES
    resolutions: List[Resolution] = field(default_factory=lambda: list(SUPPORTED_RESOLUTIONS))


@dataclass(frozen=True)
class ReframePlan:
    """
    Everything the caller needs to crop and synthesize.

    ``roi`` and ``region`` are in the frame of the downscaled image
    (``image_size``); ``roi_in_crop`` is in the frame of the cropped image.
    """
    image_size: Tuple[int, int]
    scale: float
    roi: BBox
    region: Region
    roi_in_crop: BBox
    resolution: Resolution


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or value.strip() == "":
        return None
    return float(value)


def load_config() -> ReframeConfig:
    resolutions = os.getenv("SUPPORTED_RESOLUTIONS")
    return ReframeConfig(
        max_image_side=int(os.getenv("MAX_IMAGE_SIDE", "800")),
        aspect_ratio=_optional_float(os.getenv("CROP_ASPECT_RATIO")),
        zoom=float(os.getenv("CROP_ZOOM", "1.0")),
        algorithm=os.getenv("CROP_ALGORITHM", CropAlgorithm.CENTERED.value),
        roi_strategy=os.getenv("ROI_STRATEGY", "enclosing"),
        max_faces=int(os.getenv("MAX_FACES", str(MAX_FACES))),
        resolutions=parse_resolution_list(resolutions) if resolutions else list(SUPPORTED_RESOLUTIONS),
    )


def plan_reframe(
    image_size: Tuple[int, int],
    face_boxes: Sequence[BBoxLike],
    config: ReframeConfig,
    detection_size: Optional[Tuple[int, int]] = None,
) -> ReframePlan:
    """
    Plan the downscale, crop and synthesis size for one photo.

    ``face_boxes`` are in the frame of the image that was sent to face
    detection, whose size is ``detection_size`` (defaults to ``image_size``).
    """
    width, height = image_size
    frame_width, frame_height = downscaled_size(width, height, config.max_image_side)
    scale = frame_width / width
    logger.debug("Downscaled %dx%d to %dx%d", width, height, frame_width, frame_height)

    validate_face_count(face_boxes, config.max_faces)
    source_size = detection_size or image_size
    boxes_in_frame = [rescale(as_bbox(b), source_size, (frame_width, frame_height)) for b in face_boxes]
    roi = region_of_interest(boxes_in_frame, config.roi_strategy)
    logger.debug("Region of interest from %d face(s): %s", len(boxes_in_frame), roi)

    aspect_ratio = config.aspect_ratio
    if aspect_ratio is None:
        target_width, target_height = closest_resolution(frame_width, frame_height, config.resolutions)
        aspect_ratio = target_width / target_height
    region = plan_crop(config.algorithm, frame_width, frame_height, aspect_ratio, roi, config.zoom)
    if region.width <= 0 or region.height <= 0:
        raise ValueError("Invalid crop region")
    logger.debug("Planned %s crop %s for aspect ratio %.4f", config.algorithm, region.as_dict(), aspect_ratio)
    if not region.contained_in(frame_width, frame_height):
        logger.warning(
            "Crop region %s reaches past the %dx%d image", region.as_dict(), frame_width, frame_height
        )

    roi_in_crop = crop_translate(roi, region)
    resolution = closest_resolution(region.width, region.height, config.resolutions)
    logger.info(
        "Reframed %dx%d image: crop %s, synthesis resolution %dx%d",
        width,
        height,
        region.as_dict(),
        resolution[0],
        resolution[1],
    )
    return ReframePlan(
        image_size=(frame_width, frame_height),
        scale=scale,
        roi=roi,
        region=region,
        roi_in_crop=roi_in_crop,
        resolution=resolution,
    )
