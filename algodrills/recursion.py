"""Recursive exercises: Z-order indexing, towers of Hanoi and modular powers."""

__all__ = ["z_order_index", "hanoi_moves", "mod_pow"]

Move = tuple[int, int]


def _z_index(n: int, row: int, col: int) -> int:
    if n == 0:
        return 0
    half = 1 << (n - 1)
    quadrant = 2 * (row >= half) + (col >= half)
    return quadrant * half * half + _z_index(n - 1, row % half, col % half)


def z_order_index(n: int, row: int, col: int) -> int:
    """Return the visiting order of cell (``row``, ``col``) in a 2**n by 2**n
    grid traversed in Z order, counting from 0."""
    if n < 0:
        raise ValueError(f"grid exponent must not be negative, got {n}")
    size = 1 << n
    if not (0 <= row < size and 0 <= col < size):
        raise ValueError(f"cell ({row}, {col}) lies outside a {size}x{size} grid")
    return _z_index(n, row, col)


def hanoi_moves(disks: int) -> list[Move]:
    """Return the moves that carry ``disks`` disks from peg 1 to peg 3.

    Each move is a ``(from_peg, to_peg)`` pair; there are 2**disks - 1 of them.
    """
    if disks < 1:
        raise ValueError(f"need at least one disk, got {disks}")
    moves: list[Move] = []

    def carry(source: int, target: int, count: int) -> None:
        if count == 1:
            moves.append((source, target))
            return
        spare = 6 - source - target
        carry(source, spare, count - 1)
        moves.append((source, target))
        carry(spare, target, count - 1)

    carry(1, 3, disks)
    return moves


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Return ``base`` to the power ``exponent`` modulo ``modulus`` by repeated squaring."""
    if exponent < 0:
        raise ValueError(f"exponent must not be negative, got {exponent}")
    if modulus < 1:
        raise ValueError(f"modulus must be positive, got {modulus}")
    if exponent == 0:
        return 1 % modulus
    half = mod_pow(base, exponent // 2, modulus)
    value = half * half % modulus
    if exponent % 2 == 0:
        return value
    return value * base % modulus