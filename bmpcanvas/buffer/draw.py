"""
DrawBitmap - Shape Drawing Primitives
=====================================
Extends Bitmap with lines, circles, rectangles and polygons.

Every shape is plotted through Bitmap.pixel(), so off-canvas points are
dropped individually and never abort the rest of the shape.
"""

from .bitmap import Bitmap, Point, Color, BLACK, WHITE, RED, GREEN, BLUE
__all__ = ["DrawBitmap", "Point", "Color", "BLACK", "WHITE", "RED", "GREEN", "BLUE"]


class DrawBitmap(Bitmap):
    """
    Bitmap with shape drawing capabilities.
    """

    # =========================================================================
    # Line
    # =========================================================================

    def line(self, start, end, color: Color = WHITE) -> None:
        """Draw a line using Bresenham's algorithm (integer only)."""
        x0, y0 = start
        x1, y1 = end
        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx - dy

        while True:
            self.pixel((x0, y0), color)
            if x0 == x1 and y0 == y1:
                break
            e2 = 2 * err
            # Both steps may fire in one iteration (diagonal move)
            if e2 > -dy:
                err -= dy
                x0 += sx
            if e2 < dx:
                err += dx
                y0 += sy

    # =========================================================================
    # Rectangle
    # =========================================================================

    def rect(self, corner1, corner2, color: Color = WHITE) -> None:
        """Draw the outline of the box spanned by two opposite corners."""
        corner3 = Point(corner1[0], corner2[1])
        corner4 = Point(corner2[0], corner1[1])
        self.line(corner1, corner3, color)
        self.line(corner3, corner2, color)
        self.line(corner2, corner4, color)
        self.line(corner4, corner1, color)

    # =========================================================================
    # Circle
    # =========================================================================

    def circle(self, center, radius: int, color: Color = WHITE) -> None:
        """
        Draw a filled disk.

        Scans the bounding square (clamped at zero) and plots every point
        whose squared distance to the center is within radius**2.
        Cost is O(radius**2).
        """
        cx, cy = center
        r2 = radius * radius
        min_x = max(cx - radius, 0)
        min_y = max(cy - radius, 0)

        for y in range(min_y, cy + radius + 1):
            dy = y - cy
            for x in range(min_x, cx + radius + 1):
                dx = x - cx
                if dx * dx + dy * dy <= r2:
                    self.pixel((x, y), color)

    # =========================================================================
    # Polygon
    # =========================================================================

    def polygon(self, points, color: Color = WHITE) -> None:
        """
        Draw a closed polygon outline.

        Raises:
            ValueError: If fewer than 2 points are given
        """
        points = list(points)
        if len(points) < 2:
            raise ValueError(f"polygon needs at least 2 points, got {len(points)}")

        for i in range(len(points) - 1):
            self.line(points[i], points[i + 1], color)
        self.line(points[-1], points[0], color)

    def triangle(self, p0, p1, p2, color: Color = WHITE) -> None:
        self.polygon((p0, p1, p2), color)
