from __future__ import annotations

from pathlib import Path

import numpy as np
from dlib import rectangle, shape_predictor

NUM_LANDMARKS = 68

# iBUG 300-W index groups
JAW = range(0, 17)
BROWS = range(17, 27)
NOSE = range(27, 36)
EYES = range(36, 48)
MOUTH = range(48, 68)


class LandmarkPredictor:
    def __init__(self, predictor_path: Path, predictor=None):
        self.predictor_path = Path(predictor_path)
        if predictor is None:
            if not self.predictor_path.exists():
                raise FileNotFoundError(
                    f"Missing shape predictor model: {self.predictor_path}"
                )
            predictor = shape_predictor(str(self.predictor_path))
        self._predictor = predictor

    def predict(self, image: np.ndarray, face: rectangle) -> np.ndarray:
        shape = self._predictor(image, face)
        coords = np.zeros((shape.num_parts, 2), dtype="int32")
        for i in range(shape.num_parts):
            coords[i] = (shape.part(i).x, shape.part(i).y)
        return coords
