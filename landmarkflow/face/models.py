from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field


class FrameLandmarks(BaseModel):
    index: int
    points: List[Tuple[int, int]] = Field(default_factory=list)

    # Detection info (not serialized to the landmarks file)
    faces_detected: int = 0
    box: Optional[Tuple[int, int, int, int]] = None  # left, top, right, bottom

    @property
    def has_face(self) -> bool:
        return bool(self.points)

    def to_line(self) -> str:
        """
        Serialize as `Frame <index> <x0> <y0> ... <xN> <yN>`.
        """
        parts = [f"Frame {self.index}"]
        parts.extend(f"{x} {y}" for x, y in self.points)
        return " ".join(parts)

    @classmethod
    def from_line(cls, line: str) -> "FrameLandmarks":
        tokens = line.split()
        if len(tokens) < 2 or tokens[0] != "Frame":
            raise ValueError(f"Not a landmarks line: {line!r}")

        try:
            index = int(tokens[1])
            coords = [int(t) for t in tokens[2:]]
        except ValueError as e:
            raise ValueError(f"Bad number in landmarks line: {line!r}") from e

        if len(coords) % 2:
            raise ValueError(f"Odd number of coordinates in line: {line!r}")

        points = list(zip(coords[0::2], coords[1::2]))
        return cls(index=index, points=points)
