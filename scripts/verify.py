import argparse
import logging
from dataclasses import replace
from pathlib import Path

from PIL import Image, ImageOps

from reframe.crop_math import CropAlgorithm
from reframe.pipeline import load_config, plan_reframe
from reframe.preview import crop_with_plan, debug_steps


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("input", type=Path)
    parser.add_argument("output", type=Path)
    parser.add_argument(
        "--face",
        type=float,
        nargs=4,
        action="append",
        required=True,
        metavar=("X1", "Y1", "X2", "Y2"),
        help="face box in input image pixels, repeat for several faces",
    )
    parser.add_argument("--aspect-ratio", type=float, default=None)
    parser.add_argument("--zoom", type=float, default=None)
    parser.add_argument("--algorithm", choices=[a.value for a in CropAlgorithm], default=None)
    parser.add_argument("--debug-roi", action="store_true")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = load_config()
    if args.aspect_ratio is not None:
        config = replace(config, aspect_ratio=args.aspect_ratio)
    if args.zoom is not None:
        config = replace(config, zoom=args.zoom)
    if args.algorithm is not None:
        config = replace(config, algorithm=args.algorithm)

    image = ImageOps.exif_transpose(Image.open(args.input)).convert("RGB")
    plan = plan_reframe(image.size, args.face, config)

    if args.debug_roi:
        base = args.output
        stem = base.stem
        suffix = base.suffix or ".png"
        for label, step in debug_steps(image, plan):
            step_path = base.with_name(f"{stem}_{label}{suffix}")
            step.save(step_path, format="PNG")
    else:
        crop_with_plan(image, plan).save(args.output, format="PNG")


if __name__ == "__main__":
    main()
