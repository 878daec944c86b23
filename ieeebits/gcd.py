"""Greatest common divisor by Euclid's subtraction and Stein's binary method."""

from __future__ import annotations

from collections.abc import Callable, Sequence


class GcdArgumentError(ValueError):
    """Operand or operand sequence rejected by a GCD routine."""

    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg = msg


def _check_operands(x: int, y: int) -> None:
    for v in (x, y):
        if isinstance(v, bool) or not isinstance(v, int):
            raise GcdArgumentError(f"operand must be an integer, got {v!r}")
    if x == 0 or y == 0:
        raise GcdArgumentError("operands must be non-zero")
    if x < 0 or y < 0:
        raise GcdArgumentError("operands must be positive")


def _check_sequence(values: Sequence[int] | None) -> None:
    if values is None:
        raise GcdArgumentError("values must not be None")
    if len(values) < 2:
        raise GcdArgumentError("at least two values are required")


def euclid(x: int, y: int) -> int:
    """GCD by repeatedly subtracting the smaller operand from the larger.

    Runs max(x, y) / min(x, y) iterations in the worst case; use stein for
    operands of very different magnitude.
    """
    _check_operands(x, y)
    while x != y:
        if x > y:
            x, y = y, x
        y = y - x
    return x


def _stein(x: int, y: int) -> int:
    shift = 0
    while x != y:
        if (x & 1) == 0:
            if (y & 1) == 0:
                x >>= 1
                y >>= 1
                shift += 1
            else:
                x >>= 1
        elif (y & 1) == 0:
            y >>= 1
        else:
            x, y = y, x - y if x > y else y - x
    return x << shift


def stein(x: int, y: int) -> int:
    """Binary GCD: shifts, parity tests and subtraction only.

    Common factors of two are counted and shifted back in at the end.
    """
    _check_operands(x, y)
    return _stein(x, y)


def _fold(pair: Callable[[int, int], int], values: Sequence[int] | None) -> int:
    _check_sequence(values)
    result = pair(values[0], values[1])
    for v in values[2:]:
        result = pair(result, v)
    return result


def euclid_all(values: Sequence[int] | None) -> int:
    return _fold(euclid, values)


def stein_all(values: Sequence[int] | None) -> int:
    return _fold(stein, values)


ALGORITHMS: dict[str, Callable[[Sequence[int] | None], int]] = {
    "euclid": euclid_all,
    "stein": stein_all,
}
