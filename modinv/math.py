#!/usr/bin/env/ python
# encoding: utf-8

"""Math related tools: GCD, coprimality and modular inverses."""

import collections

__author__ = 'aldur'

# Operands are unsigned 64 bits integers.
# Bézout coefficients never exceed the modulo in magnitude.
MAX_OPERAND = 2 ** 64 - 1

Step = collections.namedtuple(
    'Step',
    ['quotient', 'dividend', 'divisor', 'remainder', 'x', 'y', 't']
)


class NotInvertibleException(Exception):
    """
    Thrown when an integer has no inverse under the given modulo,
    i.e. the two operands are not relatively prime.
    """

    def __init__(self, a: int, b: int):
        super().__init__("{} and {} aren't relatively prime".format(a, b))
        self.a = a
        self.b = b


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor of a and b.
    Assumes a, b >= 0.

    :param a: An integer.
    :param b: An integer.
    :return: GCD(a, b), with GCD(a, 0) = a.
    """
    if b == 0:
        return a
    return gcd(b, a % b)


def is_coprime(a: int, b: int) -> bool:
    """Whether a and b are relatively prime."""
    return gcd(a, b) == 1


def extended_gcd(a: int, b: int) -> tuple:
    """
    The extended Euclidean algorithm.
    Return GCD(a, b), x and y such that:

    ax + by = GCD(a, b)

    :param a: An integer.
    :param b: An integer.
    :return: The GCD and the x and y factors of the Bézout's identity.
    """
    last_remainder, remainder = abs(a), abs(b)
    x, last_x, y, last_y = 0, 1, 1, 0

    while remainder:
        last_remainder, (quotient, remainder) = remainder, divmod(last_remainder, remainder)
        x, last_x = last_x - quotient * x, x
        y, last_y = last_y - quotient * y, y

    return (
        last_remainder,
        last_x * (-1 if a < 0 else 1),
        last_y * (-1 if b < 0 else 1)
    )


def _check_operands(a: int, b: int):
    assert 0 <= a <= MAX_OPERAND, \
        "{} is out of range.".format(a)
    assert 1 <= b <= MAX_OPERAND, \
        "Modulo {} is out of range.".format(b)


def modular_inverse(a: int, b: int) -> int:
    """
    Compute the inverse mod(b) of a.

    The modulo seeds the dividend, a the divisor.
    Each iteration computes t = x - y * q and shifts
    the registers, until the divisor becomes 0.
    The last x is the inverse, up to a final shift by b.

    :param a: The integer whose inverse has to be found.
    :param b: The modulo.
    :return: The inverse of a mod(b), in [0, b).
    :raise NotInvertibleException: If a and b aren't relatively prime.
    """
    _check_operands(a, b)

    if b == 1:
        return 0

    if not is_coprime(a, b):
        raise NotInvertibleException(a, b)

    x, y, t = 0, 1, 0
    dividend, divisor = b, a

    while divisor > 0:
        quotient, remainder = divmod(dividend, divisor)
        t = x - y * quotient
        dividend, divisor = divisor, remainder
        x, y = y, t

    if x < 0:
        x += b

    return x


def inverse_steps(a: int, b: int) -> list:
    """
    Trace the iterations performed by `modular_inverse`.

    :param a: The integer whose inverse has to be found.
    :param b: The modulo.
    :return: A list of `Step`, one for each iteration (empty if b is 1).
    :raise NotInvertibleException: If a and b aren't relatively prime.
    """
    _check_operands(a, b)

    if b == 1:
        return []

    if not is_coprime(a, b):
        raise NotInvertibleException(a, b)

    steps = []
    x, y = 0, 1
    dividend, divisor = b, a

    while divisor > 0:
        quotient, remainder = divmod(dividend, divisor)
        t = x - y * quotient
        steps.append(Step(quotient, dividend, divisor, remainder, x, y, t))
        dividend, divisor = divisor, remainder
        x, y = y, t

    return steps


def format_steps(steps: list) -> str:
    """
    Render the steps as a table.

    :param steps: The `Step` list returned by `inverse_steps`.
    :return: One header line, a separator and a line for each step.
    """
    rows = [('Q', 'A', 'B', 'R', 'x', 'y', 'T')]
    rows += [tuple(str(v) for v in step) for step in steps]

    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]

    def _line(cells) -> str:
        return "| " + " | ".join(c.rjust(w) for c, w in zip(cells, widths)) + " |"

    lines = [_line(rows[0]), _line(["-" * w for w in widths])]
    lines += [_line(row) for row in rows[1:]]
    return "\n".join(lines)
