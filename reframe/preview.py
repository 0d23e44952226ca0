from typing import List, Tuple

from PIL import Image, ImageDraw

from reframe.pipeline import ReframePlan

ROI_COLOR = (0, 255, 0)
REGION_COLOR = (255, 0, 0)


def _to_plan_frame(image: Image.Image, plan: ReframePlan) -> Image.Image:
    if image.size == tuple(plan.image_size):
        return image.convert("RGB").copy()
    return image.convert("RGB").resize(plan.image_size, Image.Resampling.LANCZOS)


def draw_plan(image: Image.Image, plan: ReframePlan) -> Image.Image:
    """Copy of ``image`` in the plan's frame with the ROI (green) and crop region (red) outlined."""
    canvas = _to_plan_frame(image, plan)
    draw = ImageDraw.Draw(canvas)
    draw.rectangle(plan.roi, outline=ROI_COLOR, width=3)
    region = plan.region
    draw.rectangle((region.left, region.top, region.right - 1, region.bottom - 1), outline=REGION_COLOR, width=3)
    return canvas


def crop_with_plan(image: Image.Image, plan: ReframePlan) -> Image.Image:
    return _to_plan_frame(image, plan).crop(plan.region.as_pil_box())


def debug_steps(image: Image.Image, plan: ReframePlan) -> List[Tuple[str, Image.Image]]:
    steps = [("01", draw_plan(image, plan))]
    cropped = crop_with_plan(image, plan)
    draw = ImageDraw.Draw(cropped)
    draw.rectangle(plan.roi_in_crop, outline=ROI_COLOR, width=3)
    steps.append(("02", cropped))
    return steps
