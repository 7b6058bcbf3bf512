from bmpcanvas.buffer import BLACK


def painted(bmp) -> set:
    """Every point whose color differs from the zeroed background."""
    return {
        (x, y)
        for y in range(bmp.height)
        for x in range(bmp.width)
        if bmp.get_pixel((x, y)) != BLACK
    }
