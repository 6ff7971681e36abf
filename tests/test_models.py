import pytest

from landmarkflow.face.models import FrameLandmarks


def test_line_with_points():
    record = FrameLandmarks(index=4, points=[(1, 2), (30, 40)])
    assert record.to_line() == "Frame 4 1 2 30 40"


def test_line_without_face():
    assert FrameLandmarks(index=0).to_line() == "Frame 0"
    assert not FrameLandmarks(index=0).has_face


def test_from_line_parses_points():
    record = FrameLandmarks.from_line("Frame 12 5 6 7 8\n")
    assert record.index == 12
    assert record.points == [(5, 6), (7, 8)]


@pytest.mark.parametrize(
    "line",
    ["", "Frame", "Image 1 2 3", "Frame x", "Frame 1 2", "Frame 1 2 a"],
)
def test_from_line_rejects_malformed(line):
    with pytest.raises(ValueError):
        FrameLandmarks.from_line(line)
