import logging
from pathlib import Path
from typing import List

import pytest
import structlog

from polyrecover.models import Point

DATA_DIR = Path(__file__).resolve().parent / "data"


def quadratic(x: int) -> int:
    return 3 * x * x + 2 * x + 5


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def genuine_points() -> List[Point]:
    return [Point(x, quadratic(x)) for x in range(1, 6)]


@pytest.fixture
def outlier_points(genuine_points: List[Point]) -> List[Point]:
    return genuine_points + [Point(6, 999)]


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    structlog.reset_defaults()
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
