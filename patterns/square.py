"""
Concentric square rendered by diagonal decomposition.

The ``m x m`` grid (``m = 2n - 1``) is split along the anti-diagonal ``i + j = m - 1``.
Cells with ``i + j < m`` (the upper-left triangle, diagonal included) measure their
distance from the top or left edge as ``max(n - i, n - j)``. The remaining cells measure
it from the bottom or right edge as ``max(i - n, j - n) + 2``.

Both branches equal the edge-distance value ``n - min(i, j, m-1-i, m-1-j)``:

- upper-left: ``i + j <= m - 1`` gives ``i <= m-1-j`` and ``j <= m-1-i``, so the nearest edge is
  the top or left one and the value is ``n - min(i, j) = max(n - i, n - j)``.
- lower-right: ``i + j >= m`` puts the bottom or right edge nearest, so the value is
  ``n - (m - 1 - max(i, j)) = max(i, j) - n + 2`` since ``m - 1 = 2n - 2``.
"""
from patterns.exceptions import validate_size

UPPER_LEFT: str = "U"
LOWER_RIGHT: str = "L"


def grid_dimension(size: int) -> int:
    return 2 * size - 1


def cell_value(i: int, j: int, size: int) -> int:
    m = grid_dimension(size)
    if i + j < m:
        return max(size - i, size - j)
    return max(i - size, j - size) + 2


def region_of(i: int, j: int, size: int) -> str:
    if i + j < grid_dimension(size):
        return UPPER_LEFT
    return LOWER_RIGHT


def concentric_square(size: int) -> list[list[int]]:
    """
    Build the concentric square grid of a given size.

    :param size: Size parameter, the grid is ``(2n-1) x (2n-1)``
    :return: Rows of ring values, 1 in the centre and ``size`` on the border
    :raises InvalidArgumentException: if size is not a positive integer
    """
    validate_size(size)
    m = grid_dimension(size)
    return [[cell_value(i, j, size) for j in range(m)] for i in range(m)]


def render_concentric_square(size: int) -> str:
    rows = concentric_square(size)
    return "".join("".join(f"{value} " for value in row) + "\n" for row in rows)


def print_concentric_square(size: int):
    print(render_concentric_square(size), end="")


def render_regions(size: int) -> str:
    """
    Render which side of the anti-diagonal each cell falls on.
    """
    validate_size(size)
    m = grid_dimension(size)

    text = "Region visualization (U = Upper-left, L = Lower-right):\n"
    for i in range(m):
        text += "".join(f"{region_of(i, j, size)} " for j in range(m))
        text += "\n"
    text += "\n"

    return text
