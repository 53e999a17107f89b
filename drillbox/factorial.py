"""Factorial of a non-negative integer, with a small interactive command."""

from __future__ import annotations

import argparse
import re
import sys

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def factorial(n: int) -> int:
    """Return n! for n >= 0; raise ValueError for negative n."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compute the factorial of an integer.")
    parser.add_argument("number", nargs="?", help="value to compute the factorial of")
    args = parser.parse_args(argv)

    sys.stdout.write("\n---------- Fatorial ----------\n\n")
    if args.number is None:
        try:
            text = input("Insira um valor para calcular fatorial: ")
        except EOFError:
            text = ""
    else:
        text = args.number

    try:
        number = _leading_int(text)
        result = factorial(number)
    except ValueError as exc:
        print(f"Erro: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(f"{number}! = {result}\n\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())