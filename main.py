"""Command line tool for big integer conversion and modular exponentiation."""

import argparse
import logging
import sys
from typing import List, Optional

from bigint import BigInt, BigIntError
from bigint.converters import BigIntConverter
from bigint.mpc import MPCFactory


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Convert big integers between bases and evaluate modular powers."
    )
    parser.add_argument(
        "--backend",
        choices=MPCFactory.available(),
        default=None,
        help="Multi-precision backend (defaults to BIGINT_BACKEND)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    convert = commands.add_parser("convert", help="Rewrite a value in another base")
    convert.add_argument("value", type=str, help="The value to convert")
    convert.add_argument("--from-base", type=int, default=10, help="Base of VALUE (0 detects a prefix)")
    convert.add_argument("--to-base", type=int, default=10, help="Base of the output")
    convert.add_argument("--save", metavar="LABEL", help="Persist the value under LABEL")

    powm = commands.add_parser("powm", help="Compute BASE^EXPONENT mod MODULUS")
    powm.add_argument("base_value", metavar="BASE", type=str, help="The base")
    powm.add_argument("exponent", type=str, help="The non-negative exponent")
    powm.add_argument("modulus", type=str, help="The non-zero modulus")
    powm.add_argument("--base", dest="digit_base", type=int, default=10, help="Digit base of all inputs and the output")
    powm.add_argument("--save", metavar="LABEL", help="Persist the result under LABEL")

    pow10 = commands.add_parser("pow10", help="Print 10^EXPONENT exactly")
    pow10.add_argument("exponent", type=int, help="The power of ten")

    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> BigInt:
    """Execute the selected command and return its result."""
    if args.command == "convert":
        value = BigInt(args.value, args.from_base, mpc=args.backend)
        print(value.to_string(args.to_base))
        return value

    if args.command == "powm":
        base = args.digit_base
        value = BigInt(args.base_value, base, mpc=args.backend)
        exponent = BigInt(args.exponent, base, mpc=args.backend)
        modulus = BigInt(args.modulus, base, mpc=args.backend)
        result = value.powm(exponent, modulus)
        print(result.to_string(base))
        return result

    result = BigInt.big_pow10(args.exponent, mpc=args.backend)
    print(result)
    return result


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line tool."""
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        result = run(args)
    except BigIntError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    label = getattr(args, "save", None)
    if label:
        entity = BigIntConverter.to_entity(label, result)
        entity.save()
        print(f"Saved {label} as {entity.id}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
