"""
Integer division and remainder that truncate toward zero.

The calendar formulas were written for truncating arithmetic. Python's ``//``
and ``%`` floor instead, which gives different answers for negative operands
(``-1 // 4 == -1`` but ``div(-1, 4) == 0``; ``-1 % 4 == 3`` but
``mod(-1, 4) == -1``).
"""


def div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def mod(a: int, b: int) -> int:
    return a - div(a, b) * b
