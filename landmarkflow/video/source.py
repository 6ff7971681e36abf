from __future__ import annotations

from typing import Iterator

import cv2
import numpy as np

from ..utils.logger import get_logger

log = get_logger("video")


class VideoSourceError(RuntimeError):
    pass


def _capture_target(source: str) -> int | str:
    # "0", "1", ... select a camera
    return int(source) if source.isdecimal() else source


def open_capture(source: str) -> cv2.VideoCapture:
    cap = cv2.VideoCapture(_capture_target(source))
    if not cap.isOpened():
        cap.release()
        raise VideoSourceError(f"Unable to open {source}")
    return cap


def iter_frames(capture) -> Iterator[np.ndarray]:
    """
    Yield frames until the stream is exhausted or a read fails.
    """
    while True:
        ok, frame = capture.read()
        if not ok or frame is None:
            log.info("Unable to retrieve frame from video stream.")
            return
        yield frame
