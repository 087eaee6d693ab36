import pytest

from bmp_writer import encode
from pixel_grid import PixelGrid

SAMPLE_ROWS = [
    [(10, 20, 30), (40, 50, 60)],
    [(70, 80, 90), (100, 110, 120)],
]


@pytest.fixture
def sample_grid():
    return PixelGrid.from_rows(SAMPLE_ROWS)


@pytest.fixture
def varied_grid():
    # 4x3 grid with no zero channels and no repeated pixels
    rows = [[(1 + 20 * r + 3 * c, 100 + 7 * r + c, 255 - 13 * r - 5 * c) for c in range(4)]
            for r in range(3)]
    return PixelGrid.from_rows(rows)


@pytest.fixture
def sample_image(tmp_path, sample_grid):
    """Base path (no extension) of a 2x2 image written by the tool itself."""
    base = str(tmp_path / "sample")
    encode(sample_grid, base)
    return base


@pytest.fixture
def varied_image(tmp_path, varied_grid):
    base = str(tmp_path / "varied")
    encode(varied_grid, base)
    return base
