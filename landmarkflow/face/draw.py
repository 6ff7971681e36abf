from __future__ import annotations

import cv2
import numpy as np

from .models import FrameLandmarks

BOX_COLOR = (255, 0, 0)
POINT_COLOR = (0, 255, 0)


def annotate(frame: np.ndarray, record: FrameLandmarks) -> np.ndarray:
    """
    Draw the face box and landmark dots onto the frame in place.
    """
    if record.box is not None:
        left, top, right, bottom = record.box
        cv2.rectangle(frame, (left, top), (right, bottom), BOX_COLOR, 1)

    if not record.has_face:
        return frame

    for x, y in record.points:
        cv2.circle(frame, (int(x), int(y)), 2, POINT_COLOR, -1)

    return frame
