import pytest

from bmpcanvas.buffer import DrawBitmap


@pytest.fixture
def bmp():
    return DrawBitmap(21, 21, 24)
