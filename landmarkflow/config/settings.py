from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    predictor_path: Path = Path(
        os.getenv("PREDICTOR_PATH", "models/shape_predictor_68_face_landmarks.dat")
    )

    # Detection
    downsample_ratio: float = float(os.getenv("DOWNSAMPLE_RATIO", "0.5"))
    detector_upsample: int = int(os.getenv("DETECTOR_UPSAMPLE", "0"))

    # Output
    landmarks_filename: str = os.getenv("LANDMARKS_FILENAME", "landmarks.txt")

    # Display
    window_name: str = os.getenv("WINDOW_NAME", "DLib Face Detector")
    wait_key_ms: int = int(os.getenv("WAIT_KEY_MS", "5"))

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    def landmarks_path(self, output_dir: Path) -> Path:
        return Path(output_dir) / self.landmarks_filename


settings = Settings()
