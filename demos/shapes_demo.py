"""
Shapes Demo - Reference Scenes
==============================
Draws two reference images with every primitive and writes them as .bmp
files for inspection in an image viewer.

    python demos/shapes_demo.py [output_dir]
"""

import logging
import sys
import time
from pathlib import Path

from bmpcanvas import Canvas, RED, GREEN, BLUE, WHITE


# =============================================================================
# Demo Functions
# =============================================================================

def demo_primitives(canvas):
    """Demo 1: Corner points, rectangle, disk, text and a polygon (40x40)."""
    for p in ((20, 20), (0, 0), (39, 39), (0, 39), (39, 0)):
        canvas.pixel(p, RED)

    canvas.rect((38, 38), (1, 1), GREEN)
    canvas.circle((20, 20), 10, BLUE)
    canvas.pixel((20, 20), RED)
    canvas.text("!", (20, 20), RED)

    canvas.polygon(
        [(10, 30), (26, 33), (35, 20), (27, 6), (12, 5), (5, 14)],
        WHITE,
    )


def demo_clipping(canvas):
    """Demo 2: Shapes running past the right and top edges (100x80)."""
    canvas.pixel((50, 40), RED)

    # Lines leave the canvas; off-canvas points are dropped
    canvas.line((10, 22), (110, 102), GREEN)
    canvas.line((70, 22), (170, 102), GREEN)
    canvas.line((70, 3), (170, 83), GREEN)

    canvas.rect((10, 3), (70, 22), GREEN)
    canvas.circle((14, 60), 10, BLUE)
    canvas.text("Hello!", (14, 7), WHITE)


DEMOS = [
    ("primitives", 40, 40, demo_primitives),
    ("clipping", 100, 80, demo_clipping),
]


def run(output_dir: Path) -> None:
    output_dir.mkdir(parents=True, exist_ok=True)
    for name, w, h, func in DEMOS:
        start = time.monotonic()
        canvas = Canvas(w, h, 24)
        func(canvas)
        path = output_dir / f"{name}.bmp"
        size = canvas.save(path)
        print(f"  {name:<12} {w}x{h}  {size:>6} bytes  {(time.monotonic() - start) * 1000:.1f} ms")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    run(Path(sys.argv[1]) if len(sys.argv) > 1 else Path("."))
