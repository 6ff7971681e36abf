from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import cv2

from .config.settings import settings
from .face.detector import FaceDetector
from .face.landmarks import LandmarkPredictor
from .io.landmarks_file import LandmarksWriter
from .pipeline import LandmarkPipeline
from .utils.logger import get_logger
from .video.source import VideoSourceError, open_capture

log = get_logger("main")


# ---------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="landmarkflow",
        description="68-point face landmark detection on a video stream.",
    )

    parser.add_argument(
        "source",
        help="Video file, stream URL or camera index (e.g. 0)",
    )

    parser.add_argument(
        "output_dir",
        type=Path,
        help=f"Directory that receives {settings.landmarks_filename}",
    )

    parser.add_argument(
        "rotation",
        nargs="?",
        type=int,
        default=0,
        help="0 = none, 1 = 90° CW, 2 = 180°, 3 = 90° CCW",
    )

    parser.add_argument(
        "--full-frame",
        action="store_true",
        help="Skip face detection and predict on the whole frame",
    )

    parser.add_argument(
        "--predictor",
        type=Path,
        default=settings.predictor_path,
        help="Path to shape_predictor_68_face_landmarks.dat",
    )

    parser.add_argument(
        "--downsample",
        type=float,
        default=settings.downsample_ratio,
        help="Scale factor applied before face detection",
    )

    parser.add_argument(
        "--no-display",
        action="store_true",
        help="Do not open a preview window",
    )

    return parser


def run(args: argparse.Namespace) -> int:
    try:
        cap = open_capture(args.source)
    except VideoSourceError as e:
        log.error(str(e))
        return 1

    try:
        predictor = LandmarkPredictor(args.predictor)
    except FileNotFoundError as e:
        cap.release()
        log.error(str(e))
        return 1

    pipeline = LandmarkPipeline(
        detector=FaceDetector(upsample=settings.detector_upsample),
        predictor=predictor,
        downsample_ratio=args.downsample,
        full_frame=args.full_frame,
    )

    out_path = settings.landmarks_path(args.output_dir)
    display = not args.no_display

    try:
        with LandmarksWriter(out_path) as writer:
            count = pipeline.run(
                cap,
                writer,
                rotation=args.rotation,
                display=display,
            )
    finally:
        cap.release()
        if display:
            cv2.destroyAllWindows()

    log.info(f"✅ {count} frame(s) → {out_path.as_posix()}")
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not 0 < args.downsample <= 1:
        parser.error("--downsample must be in (0, 1]")

    sys.exit(run(args))


if __name__ == "__main__":
    main()
