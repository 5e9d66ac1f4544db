#!/usr/bin/env python
# encoding: utf-8

__author__ = "aldur"

"""Fixed width integer utils."""

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


class Int32OverflowError(OverflowError):

    """
    A value does not fit a signed 32 bits integer.
    :param value: The offending value.
    """

    def __init__(self, value: int):
        super().__init__(
            "{} does not fit a signed 32 bits integer.".format(value)
        )
        self.value = value


def fits_int32(x: int) -> bool:
    """
    Tell whether x is representable as a signed 32 bits integer.

    :param x: A number.
    :return: True if INT32_MIN <= x <= INT32_MAX.
    """
    return INT32_MIN <= x <= INT32_MAX


def check_int32(*values: int) -> tuple:
    """
    Make sure that every value fits a signed 32 bits integer.

    :param values: The numbers to be checked.
    :return: The values, unchanged.
    :raise Int32OverflowError: On the first value out of range.
    """
    for x in values:
        if not fits_int32(x):
            raise Int32OverflowError(x)
    return values
