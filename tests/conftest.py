import pytest

from rasterdraw import BLACK, DrawBuffer


@pytest.fixture
def canvas() -> DrawBuffer:
    """10x10 RGB8 buffer on black."""
    return DrawBuffer(10, 10, BLACK)


@pytest.fixture
def small() -> DrawBuffer:
    """5x5 RGB8 buffer on black."""
    return DrawBuffer(5, 5, BLACK)
