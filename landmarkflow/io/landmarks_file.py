from __future__ import annotations

from pathlib import Path
from typing import List, Optional, TextIO

from ..face.models import FrameLandmarks


class LandmarksWriter:
    """
    Line-per-frame landmarks file. Truncated on open.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._fh: Optional[TextIO] = None

    def open(self) -> "LandmarksWriter":
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._fh = self.path.open("w", encoding="utf-8")
        return self

    def write(self, record: FrameLandmarks) -> None:
        if self._fh is None:
            raise RuntimeError("LandmarksWriter is not open")
        self._fh.write(record.to_line() + "\n")

    def close(self) -> None:
        if self._fh is not None:
            self._fh.close()
            self._fh = None

    def __enter__(self) -> "LandmarksWriter":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def read_landmarks(path: Path) -> List[FrameLandmarks]:
    records = []
    for line in Path(path).read_text(encoding="utf-8").splitlines():
        if line.strip():
            records.append(FrameLandmarks.from_line(line))
    return records
