#!/usr/bin/env python
# encoding: utf-8

"""The main file."""

import euclid.math
import euclid.util

import argparse
import io
import sys
import contextlib
import functools
import random
import colorama

__author__ = "aldur"

demonstrations = []


def demonstration(demonstration_f):
    """
    Decorator for demonstration functions.
    Register the function among the `demonstrations`.

    :param demonstration_f: The demonstration function.
    :return: The decorated function.
    """

    class Tee(io.StringIO):
        """
        Print standard output as usual,
        and at the same time keep track of what
        is being printed.
        """

        def write(self, b: str):
            """
            Write the buffer on the standard output
            before calling the super implementation.

            :param b: The buffer to be written.
            """
            sys.__stdout__.write(b)
            return super().write(b)

    @functools.wraps(demonstration_f)
    def decorated_demonstration():
        """
        Execute the function and return to screen the result.
        """
        captured_stdout = Tee()
        print("Executing demonstration: {}.\n".format(demonstration_f.__name__))

        with contextlib.redirect_stdout(captured_stdout):
            result = demonstration_f()

        v = captured_stdout.getvalue()
        if v and not v.endswith("\n\n"):
            print("")

        print(
            "{}Demonstration {}.{}".format(
                colorama.Fore.GREEN if result else colorama.Fore.RED,
                "completed" if result else "failed",
                colorama.Fore.RESET
            ))

        return result

    demonstrations.append(decorated_demonstration)
    return decorated_demonstration


def describe(a: int, m: int, inverse: int=None) -> str:
    """
    Describe the inverse of a mod(m) in plain words.

    :param a: The integer to be inverted.
    :param m: The modulo.
    :param inverse: The result of `mod_inverse(a, m)`, computed if missing.
    :return: A sentence, telling the inverse or that it doesn't exist.
    """
    if inverse is None:
        inverse = euclid.math.mod_inverse(a, m)
    if inverse == 0:
        return "{} does not have a multiplicative inverse in modulo {}".format(a, m)
    return "The modulo inverse of {} mod {} is {}".format(a, m, inverse)


def _print_steps(a: int, m: int):
    for step in euclid.math.euclid_steps(a % m, m):
        print("{} * {} + {} * {} = {}".format(
            step.a, step.x, step.b, step.y, step.g
        ))


@demonstration
def three_mod_eleven():
    """3 * 4 = 12 = 1 mod(11)."""
    a, m = 3, 11
    _print_steps(a, m)
    print(describe(a, m))

    return euclid.math.mod_inverse(a, m) == 4


@demonstration
def ten_mod_seventeen():
    """10 * 12 = 120 = 1 mod(17)."""
    a, m = 10, 17
    _print_steps(a, m)
    print(describe(a, m))

    return euclid.math.mod_inverse(a, m) == 12


@demonstration
def four_mod_eight():
    """GCD(4, 8) = 4, no inverse."""
    a, m = 4, 8
    _print_steps(a, m)
    print(describe(a, m))

    try:
        euclid.math.modinv(a, m)
    except euclid.math.NoInverseError as e:
        print("{}".format(e))
        return euclid.math.mod_inverse(a, m) == 0 and e.g == 4

    return False


@demonstration
def one_mod_five():
    """1 is its own inverse."""
    a, m = 1, 5
    print(describe(a, m))

    return euclid.math.mod_inverse(a, m) == 1


@demonstration
def negative_value():
    """-3 = 8 mod(11), and 8 * 7 = 56 = 1 mod(11)."""
    a, m = -3, 11
    print(describe(a, m))

    return euclid.math.mod_inverse(a, m) == euclid.math.mod_inverse(a % m, m) == 7


@demonstration
def random_prime_modulo():
    """Every non-zero residue is invertible mod(p)."""
    p = euclid.math.random_prime()
    assert euclid.util.fits_int32(p)
    a = random.randint(1, p - 1)

    print(describe(a, p))
    inverse = euclid.math.mod_inverse(a, p)
    print("{} * {} mod {} = {}".format(a, inverse, p, a * inverse % p))

    return 0 < inverse < p and a * inverse % p == 1


def main(argv: list=None) -> int:
    """
    Read the arguments from the command line,
    and print the related inverse.

    :param argv: The command line arguments, defaults to sys.argv.
    :return: The exit status.
    """
    def _int32(s: str) -> int:
        """
        Parse a signed 32 bits integer.

        :param s: The command line argument.
        :return: The parsed integer.
        """
        try:
            return euclid.util.check_int32(int(s))[0]
        except (ValueError, OverflowError) as e:
            raise argparse.ArgumentTypeError(str(e))

    def _create_parser() -> argparse.ArgumentParser:
        """
        Create the command line argument parser.

        :return: The command line argument parser for this module.
        """
        parser = argparse.ArgumentParser(
            description='Modular multiplicative inverse, '
                        'through the extended Euclidean algorithm.'
        )

        parser.add_argument(
            'a',
            nargs='?',
            type=_int32,
            default=3,
            help='the integer to be inverted (default: 3)'
        )

        parser.add_argument(
            'm',
            nargs='?',
            type=_int32,
            default=11,
            help='the modulo, greater than 1 (default: 11)'
        )

        parser.add_argument(
            '--all',
            action='store_true',
            help='run every demonstration'
        )

        return parser

    colorama.init()

    command_line_parser = _create_parser()
    args = command_line_parser.parse_args(argv)

    if args.all:
        results = [d() for d in demonstrations]
        return 0 if all(results) else 1

    if args.m <= 1:
        command_line_parser.error(
            "the modulo must be greater than 1, got {}".format(args.m)
        )

    inverse = euclid.math.mod_inverse(args.a, args.m)
    print(describe(args.a, args.m, inverse))
    return 0 if inverse else 1


if __name__ == '__main__':
    sys.exit(main())
