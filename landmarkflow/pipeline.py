from __future__ import annotations

import cv2
import numpy as np

from .config.settings import settings
from .face.detector import FaceDetector, downsample, full_frame_rect, rescale_rect
from .face.draw import annotate
from .face.landmarks import LandmarkPredictor
from .face.models import FrameLandmarks
from .io.landmarks_file import LandmarksWriter
from .utils.logger import get_logger
from .video.rotation import Rotation, rotate_frame
from .video.source import iter_frames

log = get_logger("pipeline")

QUIT_KEYS = (ord("q"), 27)  # q, Esc


class LandmarkPipeline:
    def __init__(
        self,
        detector: FaceDetector,
        predictor: LandmarkPredictor,
        downsample_ratio: float = settings.downsample_ratio,
        full_frame: bool = False,
    ):
        if not 0 < downsample_ratio <= 1:
            raise ValueError(
                f"downsample_ratio must be in (0, 1], got {downsample_ratio}"
            )
        self.detector = detector
        self.predictor = predictor
        self.downsample_ratio = downsample_ratio
        self.full_frame = full_frame

    # -----------------------------------------------------------------
    # PER FRAME
    # -----------------------------------------------------------------

    def process(self, frame: np.ndarray, index: int) -> FrameLandmarks:
        if self.full_frame:
            log.info(f"Frame {index}")
            coords = self.predictor.predict(frame, full_frame_rect(frame))
            return FrameLandmarks(index=index, points=[tuple(p) for p in coords.tolist()])

        small = downsample(frame, self.downsample_ratio)
        faces = self.detector.detect(small)
        log.info(f"Frame {index}: {len(faces)} face(s) detected")

        if not faces:
            return FrameLandmarks(index=index)

        face = rescale_rect(faces[0], self.downsample_ratio)
        coords = self.predictor.predict(frame, face)
        return FrameLandmarks(
            index=index,
            points=[tuple(p) for p in coords.tolist()],
            faces_detected=len(faces),
            box=(face.left(), face.top(), face.right(), face.bottom()),
        )

    # -----------------------------------------------------------------
    # CONTROL LOOP
    # -----------------------------------------------------------------

    def run(
        self,
        capture,
        writer: LandmarksWriter,
        rotation: int = Rotation.NONE,
        display: bool = True,
        window_name: str = settings.window_name,
        wait_key_ms: int = settings.wait_key_ms,
    ) -> int:
        """
        Process frames until the stream ends (or q / Esc in the window).

        Returns the number of frames processed.
        """
        if display:
            cv2.namedWindow(window_name, cv2.WINDOW_NORMAL)

        count = 0
        for frame in iter_frames(capture):
            frame = rotate_frame(frame, rotation)
            record = self.process(frame, count)
            writer.write(record)
            count += 1

            if display:
                cv2.imshow(window_name, annotate(frame, record))
                key = cv2.waitKey(wait_key_ms) & 0xFF
                if key in QUIT_KEYS:
                    log.info("Stopped by user.")
                    break

        return count
