import numpy as np
from dlib import rectangle

from landmarkflow.face.detector import (
    FaceDetector,
    downsample,
    full_frame_rect,
    rescale_rect,
)
from tests.fakes import FakeFaceDetector


def test_rescale_rect_half_ratio():
    r = rescale_rect(rectangle(10, 20, 30, 41), 0.5)
    assert (r.left(), r.top(), r.right(), r.bottom()) == (20, 40, 60, 82)


def test_rescale_rect_truncates():
    r = rescale_rect(rectangle(10, 10, 11, 11), 0.3)
    assert (r.left(), r.top(), r.right(), r.bottom()) == (33, 33, 36, 36)


def test_full_frame_rect_covers_image():
    r = full_frame_rect(np.zeros((480, 640, 3), dtype=np.uint8))
    assert (r.left(), r.top(), r.right(), r.bottom()) == (0, 0, 640, 480)


def test_downsample_halves_image():
    small = downsample(np.zeros((240, 320, 3), dtype=np.uint8), 0.5)
    assert small.shape == (120, 160, 3)


def test_detect_first_picks_first_box():
    fake = FakeFaceDetector([rectangle(1, 2, 3, 4), rectangle(5, 6, 7, 8)])
    detector = FaceDetector(upsample=1, detector=fake)

    face = detector.detect_first(np.zeros((10, 10, 3), dtype=np.uint8))

    assert face.left() == 1
    assert fake.calls == [((10, 10, 3), 1)]


def test_detect_first_none_without_faces():
    detector = FaceDetector(detector=FakeFaceDetector())
    assert detector.detect_first(np.zeros((10, 10, 3), dtype=np.uint8)) is None


def test_real_detector_finds_nothing_on_blank_frame():
    detector = FaceDetector()
    assert detector.detect(np.zeros((100, 100, 3), dtype=np.uint8)) == []
