"""
Right triangle rendered with a single counter.

Row ``k`` of the triangle ends exactly at the k-th triangular number, so a linear counter
over all ``T(n)`` symbols knows when to break the line without a second loop index.
For n=4 the rows end at positions 1, 3, 6 and 10.
"""
from patterns.exceptions import validate_size

SYMBOL: str = "* "


def triangular_number(k: int) -> int:
    return k * (k + 1) // 2


def render_triangle(size: int) -> str:
    """
    Render a right triangle of height ``size``.

    :param size: Height of the triangle (number of rows)
    :return: ``size`` lines, line ``k`` holding ``k`` symbols
    :raises InvalidArgumentException: if size is not a positive integer
    """
    validate_size(size)

    total: int = triangular_number(size)
    row: int = 1
    chunks: list[str] = []

    for i in range(1, total + 1):
        chunks.append(SYMBOL)

        # Row `row` is complete once the counter reaches T(row)
        if i == triangular_number(row):
            chunks.append("\n")
            row += 1

    return "".join(chunks)


def print_triangle(size: int):
    # Render fully before printing so invalid sizes never produce partial output
    print(render_triangle(size), end="")
