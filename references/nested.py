from patterns.exceptions import validate_size


def triangle(size: int):
    validate_size(size)

    for row in range(1, size + 1):
        line = ""
        for _ in range(1, row + 1):
            line += "* "
        print(line)


def edge_distance_value(i: int, j: int, size: int) -> int:
    m = 2 * size - 1
    # Distance to the nearest of the four edges, counted inwards from `size`
    return size - min(min(i, j), min(m - 1 - i, m - 1 - j))


def concentric_square(size: int):
    validate_size(size)

    m = 2 * size - 1
    for i in range(m):
        row = ""
        for j in range(m):
            row += f"{edge_distance_value(i, j, size)} "
        print(row)
