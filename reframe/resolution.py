from typing import Dict, Iterable, List, Tuple

Resolution = Tuple[int, int]

# Output sizes the synthesis model supports, landscape to portrait.
SUPPORTED_RESOLUTIONS: List[Resolution] = [
    (768, 512),
    (640, 512),
    (512, 512),
    (512, 640),
    (512, 768),
]


def format_resolution(resolution: Resolution) -> str:
    width, height = resolution
    return f"{width}x{height}"


SUPPORTED_RESOLUTIONS_MAP: Dict[str, Resolution] = {
    format_resolution(resolution): resolution for resolution in SUPPORTED_RESOLUTIONS
}


def _parse_size(text: str) -> Resolution:
    try:
        width, height = (int(v) for v in text.strip().lower().split("x"))
    except ValueError as exc:
        raise ValueError(f"Invalid resolution: {text}") from exc
    return width, height


def parse_resolution(text: str) -> Resolution:
    """Parse a supported ``"WIDTHxHEIGHT"`` string."""
    resolution = _parse_size(text)
    if format_resolution(resolution) not in SUPPORTED_RESOLUTIONS_MAP:
        raise ValueError(f"Unsupported resolution: {text}")
    return resolution


def parse_resolution_list(text: str) -> List[Resolution]:
    """Parse a comma separated ``"WIDTHxHEIGHT"`` catalog, keeping its order."""
    resolutions = [_parse_size(item) for item in text.split(",") if item.strip()]
    if not resolutions:
        raise ValueError("Resolution list is empty")
    return resolutions


def _ratio_distance(ar: float, other: float) -> float:
    return max(ar, other) / min(ar, other)


def closest_resolution(image_width: float, image_height: float, catalog: Iterable[Resolution]) -> Resolution:
    """
    Catalog entry whose aspect ratio is closest to the image's.

    Ratios are compared by ``max(a, b) / min(a, b)``, so 2:1 is as far from 1:1
    as 1:2 is. The first entry wins a tie, so catalog order matters.
    """
    ar = image_width / image_height
    best = None
    best_distance = 0.0
    for entry in catalog:
        distance = _ratio_distance(ar, entry[0] / entry[1])
        if best is None or distance < best_distance:
            best = entry
            best_distance = distance
    if best is None:
        raise ValueError("Resolution catalog is empty")
    return best
