from __future__ import annotations

from typing import List, Optional

import cv2
import numpy as np
from dlib import get_frontal_face_detector, rectangle


class FaceDetector:
    def __init__(self, upsample: int = 0, detector=None):
        self.upsample = upsample
        self._detector = detector if detector is not None else get_frontal_face_detector()

    def detect(self, image: np.ndarray) -> List[rectangle]:
        return list(self._detector(image, self.upsample))

    def detect_first(self, image: np.ndarray) -> Optional[rectangle]:
        faces = self.detect(image)
        if not faces:
            return None
        return faces[0]


def downsample(image: np.ndarray, ratio: float) -> np.ndarray:
    return cv2.resize(image, None, fx=ratio, fy=ratio)


def rescale_rect(face: rectangle, ratio: float) -> rectangle:
    """
    Map a box found on a downsampled image back to full resolution.
    """
    return rectangle(
        int(face.left() / ratio),
        int(face.top() / ratio),
        int(face.right() / ratio),
        int(face.bottom() / ratio),
    )


def full_frame_rect(image: np.ndarray) -> rectangle:
    h, w = image.shape[:2]
    return rectangle(0, 0, w, h)
