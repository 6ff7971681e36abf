from __future__ import annotations

import pytest

from tests.fakes import FakeShapePredictor


@pytest.fixture
def fake_predictor() -> FakeShapePredictor:
    return FakeShapePredictor()
