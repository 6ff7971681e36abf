from __future__ import annotations

from enum import IntEnum

import cv2
import numpy as np

from ..utils.logger import get_logger

log = get_logger("rotation")


class Rotation(IntEnum):
    NONE = 0
    CW = 1  # 90° clockwise
    HALF = 2  # 180°
    CCW = 3  # 90° counter-clockwise


def rotate_frame(frame: np.ndarray, flag: int) -> np.ndarray:
    """
    Rotate a frame by a multiple of 90°.

    Unknown flags leave the frame untouched (a warning is logged).
    """
    if flag == Rotation.CW:
        return cv2.flip(cv2.transpose(frame), 1)
    if flag == Rotation.HALF:
        return cv2.flip(frame, -1)
    if flag == Rotation.CCW:
        return cv2.flip(cv2.transpose(frame), 0)
    if flag != Rotation.NONE:
        log.warning(f"Unknown rotation flag({flag})")
    return frame
