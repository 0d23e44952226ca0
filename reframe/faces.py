from __future__ import annotations

from typing import Sequence

from reframe.geometry import BBox, BBoxLike, area, as_bbox, enclosing

# The synthesis model takes at most this many face embeddings per request.
MAX_FACES = 5


def validate_face_count(face_boxes: Sequence[BBoxLike], max_faces: int = MAX_FACES) -> None:
    if len(face_boxes) == 0:
        raise ValueError(
            "We could not find a face in the photo. Maybe the face is too close to the camera "
            "or too far away. Please try a different photo."
        )
    if len(face_boxes) > max_faces:
        noun = "face is" if max_faces == 1 else "faces are"
        raise ValueError(
            f"Only {max_faces} {noun} allowed but we detected {len(face_boxes)} faces in your photo. "
            "Try a different photo with fewer faces."
        )


def biggest_face(face_boxes: Sequence[BBoxLike]) -> BBox:
    if len(face_boxes) == 0:
        raise ValueError("No face detected")
    # last box wins a tie
    boxes = [as_bbox(b) for b in face_boxes]
    return max(reversed(boxes), key=area)


def region_of_interest(face_boxes: Sequence[BBoxLike], strategy: str = "enclosing") -> BBox:
    # an empty list never reaches enclosing, so its infinite sentinel stays out of the planners
    if len(face_boxes) == 0:
        raise ValueError("No face detected")
    if strategy == "enclosing":
        return enclosing(face_boxes)
    if strategy == "biggest":
        return biggest_face(face_boxes)
    raise ValueError(f"Unknown region of interest strategy: {strategy}")
