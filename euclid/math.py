#!/usr/bin/env/ python
# encoding: utf-8

"""Modular inverses through the extended Euclidean algorithm."""

import collections

import Crypto.Util.number

import euclid.util

__author__ = 'aldur'


Step = collections.namedtuple("Step", ["a", "b", "g", "x", "y"])
Step.__doc__ = """
A level of the extended Euclidean recursion:
a * x + b * y == g == GCD(a, b).
"""


class NoInverseError(ValueError):

    """
    The value has no inverse for the given modulo.
    :param a: The value.
    :param m: The modulo.
    :param g: GCD(a, m), always different from 1.
    """

    def __init__(self, a: int, m: int, g: int):
        super().__init__(
            "{} is not invertible mod({}), GCD is {}.".format(a, m, g)
        )
        self.a, self.m, self.g = a, m, g


def _check_gcd_arguments(a: int, b: int):
    if a < 0 or b < 0:
        raise ValueError(
            "Arguments must be non-negative, got {} and {}.".format(a, b)
        )


def _check_modulo(m: int):
    if m <= 1:
        raise ValueError("Modulo must be greater than 1, got {}.".format(m))


def gcd_extended(a: int, b: int) -> tuple:
    """
    The recursive extended Euclidean algorithm.
    Return GCD(a, b), x and y such that:

    ax + by = GCD(a, b)

    :param a: A non-negative integer.
    :param b: A non-negative integer.
    :return: The GCD and the x and y factors of the Bézout's identity.
    :raise ValueError: On negative arguments.
    """
    _check_gcd_arguments(a, b)

    if a == 0:
        return b, 0, 1

    g, x, y = gcd_extended(b % a, a)
    return g, y - (b // a) * x, x


def extended_gcd(a: int, b: int) -> tuple:
    """
    The extended Euclidean algorithm, iteratively.
    Walks the same remainders of `gcd_extended`
    and returns the same factors on non-negative arguments,
    without growing the stack.

    Signed arguments are accepted: the factors
    change sign along with their argument, so that
    ax + by = GCD(a, b) with GCD(a, b) >= 0.

    :param a: An integer.
    :param b: An integer.
    :return: The GCD and the x and y factors of the Bézout's identity.
    """
    last_remainder, remainder = abs(b), abs(a)
    x, last_x, y, last_y = 1, 0, 0, 1

    while remainder:
        last_remainder, (quotient, remainder) = remainder, divmod(last_remainder, remainder)
        x, last_x = last_x - quotient * x, x
        y, last_y = last_y - quotient * y, y

    return (
        last_remainder,
        last_x * (-1 if a < 0 else 1),
        last_y * (-1 if b < 0 else 1)
    )


def euclid_steps(a: int, b: int) -> list:
    """
    Trace the recursion of `gcd_extended(a, b)`.

    :param a: A non-negative integer.
    :param b: A non-negative integer.
    :return: The list of steps, outermost call first, base case last.
    """
    _check_gcd_arguments(a, b)

    pairs = []
    while a:
        pairs.append((a, b))
        a, b = b % a, a

    g, x, y = b, 0, 1
    steps = [Step(0, g, g, x, y)]
    for a, b in reversed(pairs):
        x, y = y - (b // a) * x, x
        steps.append(Step(a, b, g, x, y))

    steps.reverse()
    return steps


def mod_inverse(a: int, m: int) -> int:
    """
    Compute the inverse mod(m) of a, for signed 32 bits integers.
    A negative a is first reduced mod(m).

    :param a: The integer whose inverse has to be found.
    :param m: The modulo, greater than 1.
    :return: The inverse of a mod(m), in [0, m), or 0 if it doesn't exist.
    :raise Int32OverflowError: If a or m don't fit 32 bits.
    :raise ValueError: If m <= 1.
    """
    euclid.util.check_int32(a, m)
    _check_modulo(m)

    g, x, _ = gcd_extended(a % m, m)
    if g != 1:
        return 0
    return x % m


def modinv(a: int, m: int) -> int:
    """
    Compute the inverse mod(m) of a.

    :param a: The integer whose inverse has to be found.
    :param m: The modulo, greater than 1.
    :return: The inverse of a mod(m), in [0, m).
    :raise NoInverseError: If an inverse doesn't exist.
    :raise ValueError: If m <= 1.
    """
    _check_modulo(m)

    g, x, _ = extended_gcd(a, m)
    if g != 1:
        raise NoInverseError(a, m, g)
    return x % m


def is_coprime(a: int, b: int) -> bool:
    """
    :return: True if GCD(a, b) == 1.
    """
    return extended_gcd(a, b)[0] == 1


def random_prime(N: int=31) -> int:
    """
    Generate a random prime of exactly N bits.
    The default fits a signed 32 bits integer.

    :param N: The number of bits, at least 2.
    :return: A new random prime.
    """
    assert N >= 2
    return Crypto.Util.number.getPrime(N)
