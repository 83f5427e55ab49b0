"""Distance calculations on the slanted hex grid."""


def hex_distance(x1: int, y1: int, x2: int, y2: int) -> int:
    """Calculate the number of hex steps between two slanted points.

    On the slanted grid the diagonal unit steps are (1, 1) and (-1, -1), so
    a delta whose components share a sign can be covered diagonally
    (max of the two), while mixed signs need one step per unit (sum).

    Args:
        x1: X coordinate of first point
        y1: Y coordinate of first point
        x2: X coordinate of second point
        y2: Y coordinate of second point

    Returns:
        Hex distance between the two points

    Examples:
        >>> hex_distance(0, 0, 3, 3)
        3
        >>> hex_distance(0, 0, 2, -1)
        3
    """
    dx = x2 - x1
    dy = y2 - y1
    if (dx >= 0) == (dy >= 0):
        return max(abs(dx), abs(dy))
    return abs(dx) + abs(dy)
