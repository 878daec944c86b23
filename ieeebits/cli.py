"""ieeebits CLI — print IEEE 754 bit strings and greatest common divisors."""

from __future__ import annotations

import sys

from .bits import BitsError, to_fields
from .gcd import ALGORITHMS, GcdArgumentError


USAGE: str = """\
ieeebits bits [--split] [NUMBER ...]
ieeebits gcd [--algorithm ALGORITHM] INTEGER INTEGER [INTEGER ...]

Commands:
  bits               Print the 64-bit IEEE 754 representation of each NUMBER
                     (one per line of stdin when no NUMBER is given)
  gcd                Print the greatest common divisor of the INTEGERs

Options:
  --split            Separate sign, exponent and mantissa with spaces
  --algorithm NAME   GCD algorithm: euclid (default), stein
  --help             Show this help message
"""


def _error(msg: str) -> None:
    print("ieeebits: " + msg, file=sys.stderr)


def _split_args(
    args: list[str], flags: set[str], options: set[str]
) -> tuple[dict[str, str], list[str], int]:
    """Separate flags/options from positionals. Returns (opts, positionals, exit_code)."""
    opts: dict[str, str] = {}
    positionals: list[str] = []
    i = 0
    while i < len(args):
        arg = args[i]
        if arg in flags:
            opts[arg] = ""
            i += 1
        elif arg in options:
            if i + 1 >= len(args):
                _error("missing value for '" + arg + "'")
                return (opts, positionals, 2)
            opts[arg] = args[i + 1]
            i += 2
        elif arg.startswith("-") and not _looks_numeric(arg):
            _error("unknown flag '" + arg + "'")
            return (opts, positionals, 2)
        else:
            positionals.append(arg)
            i += 1
    return (opts, positionals, 0)


def _looks_numeric(arg: str) -> bool:
    """Negative numbers such as -1.5 are positionals, not flags."""
    try:
        float(arg)
    except ValueError:
        return False
    return True


def run_bits(args: list[str]) -> int:
    opts, numbers, code = _split_args(args, {"--split"}, set())
    if code != 0:
        return code
    if not numbers:
        lines = sys.stdin.read().split("\n")
        numbers = [line.strip() for line in lines if line.strip()]
    split = "--split" in opts
    status = 0
    for text in numbers:
        try:
            value = float(text)
        except ValueError:
            _error("invalid number '" + text + "'")
            status = 1
            continue
        try:
            fields = to_fields(value)
        except BitsError as e:
            _error("error: " + str(e))
            status = 1
            continue
        if split:
            print(fields.sign + " " + fields.exponent + " " + fields.mantissa)
        else:
            print(fields.joined())
    return status


def run_gcd(args: list[str]) -> int:
    opts, operands, code = _split_args(args, set(), {"--algorithm"})
    if code != 0:
        return code
    algorithm = opts.get("--algorithm", "euclid")
    if algorithm not in ALGORITHMS:
        _error("unknown algorithm '" + algorithm + "'")
        return 2
    values: list[int] = []
    for text in operands:
        try:
            values.append(int(text))
        except ValueError:
            _error("invalid integer '" + text + "'")
            return 1
    try:
        result = ALGORITHMS[algorithm](values)
    except GcdArgumentError as e:
        _error("error: " + str(e))
        return 1
    print(result)
    return 0


COMMANDS = {
    "bits": run_bits,
    "gcd": run_gcd,
}


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]
    if not args:
        _error("missing command")
        print(USAGE, end="", file=sys.stderr)
        return 2
    command = args[0]
    if command == "--help" or command == "-h":
        print(USAGE, end="")
        return 0
    if "--help" in args[1:] or "-h" in args[1:]:
        print(USAGE, end="")
        return 0
    if command not in COMMANDS:
        _error("unknown command '" + command + "'")
        return 2
    return COMMANDS[command](args[1:])


if __name__ == "__main__":
    sys.exit(main())
