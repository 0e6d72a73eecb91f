#!/usr/bin/env python
# encoding: utf-8

"""The main file."""

import modinv.math

import argparse
import sys
import colorama

__author__ = "aldur"


def _operand(s: str) -> int:
    """
    Parse a command line operand.

    :param s: The raw argument.
    :return: The operand, as a non-negative integer.
    """
    try:
        n = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError("{} is not an integer".format(s))

    if not 0 <= n <= modinv.math.MAX_OPERAND:
        raise argparse.ArgumentTypeError(
            "{} is out of range [0, {}]".format(s, modinv.math.MAX_OPERAND)
        )
    return n


def _create_parser() -> argparse.ArgumentParser:
    """
    Create the command line argument parser.

    :return: The command line argument parser for this module.
    """
    parser = argparse.ArgumentParser(
        prog='modinv',
        description='Modular multiplicative inverse of a Mod b.'
    )

    parser.add_argument(
        'a',
        nargs='?',
        default=3,
        type=_operand,
        help='the integer to be inverted (default: 3)'
    )

    parser.add_argument(
        'b',
        nargs='?',
        default=5,
        type=_operand,
        help='the modulo, at least 1 (default: 5)'
    )

    parser.add_argument(
        '--steps',
        action='store_true',
        help='print each iteration of the extended Euclidean algorithm'
    )

    return parser


def main(argv: list=None) -> int:
    """
    Read the operands from the command line,
    and print the inverse of a Mod b.

    :param argv: The arguments, defaults to sys.argv.
    :return: The exit status.
    """
    command_line_parser = _create_parser()
    args = command_line_parser.parse_args(argv)
    a, b = args.a, args.b

    if b < 1:
        command_line_parser.error("the modulo must be at least 1")

    try:
        if args.steps:
            print(modinv.math.format_steps(modinv.math.inverse_steps(a, b)))
        result = modinv.math.modular_inverse(a, b)
    except modinv.math.NotInvertibleException as e:
        print(
            "{}{}{}".format(colorama.Fore.RED, e, colorama.Fore.RESET),
            file=sys.stderr
        )
        return 1

    print("The modular multiplicative inverse of {} Mod {} is {}".format(a, b, result))
    return 0


def run():
    """Entry point of the installed script."""
    colorama.init()
    sys.exit(main())
