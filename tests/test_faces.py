import numpy as np
import pytest

from reframe.faces import MAX_FACES, biggest_face, region_of_interest, validate_face_count

FACES = [
    (100.0, 100.0, 200.0, 200.0),
    (300.0, 150.0, 450.0, 300.0),
    (50.0, 400.0, 100.0, 450.0),
]


def test_validate_face_count_accepts() -> None:
    validate_face_count(FACES)
    validate_face_count(FACES[:1], max_faces=1)


def test_validate_face_count_no_face() -> None:
    with pytest.raises(ValueError, match="could not find a face"):
        validate_face_count([])


def test_validate_face_count_too_many() -> None:
    with pytest.raises(ValueError, match="Only 1 face is allowed but we detected 3 faces"):
        validate_face_count(FACES, max_faces=1)
    with pytest.raises(ValueError, match="Only 5 faces are allowed"):
        validate_face_count(FACES * 2, max_faces=MAX_FACES)


def test_biggest_face() -> None:
    assert biggest_face(FACES) == (300.0, 150.0, 450.0, 300.0)


def test_biggest_face_last_wins_on_tie() -> None:
    assert biggest_face([(0.0, 0.0, 10.0, 10.0), (50.0, 50.0, 60.0, 60.0)]) == (50.0, 50.0, 60.0, 60.0)
    assert biggest_face([(0.0, 0.0, 10.0, 10.0), (5.0, 5.0, 25.0, 25.0), (50.0, 50.0, 60.0, 60.0)]) == (
        5.0,
        5.0,
        25.0,
        25.0,
    )


def test_biggest_face_from_detector_arrays() -> None:
    faces = [np.array([10, 10, 20, 20], dtype=np.float32), np.array([0, 0, 40, 40], dtype=np.float32)]
    assert biggest_face(faces) == (0.0, 0.0, 40.0, 40.0)


def test_region_of_interest_enclosing() -> None:
    assert region_of_interest(FACES) == (50.0, 100.0, 450.0, 450.0)


def test_region_of_interest_biggest() -> None:
    assert region_of_interest(FACES, strategy="biggest") == (300.0, 150.0, 450.0, 300.0)


def test_region_of_interest_rejects_empty() -> None:
    with pytest.raises(ValueError):
        region_of_interest([])


def test_region_of_interest_unknown_strategy() -> None:
    with pytest.raises(ValueError):
        region_of_interest(FACES, strategy="smallest")
