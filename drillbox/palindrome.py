"""Palindrome check for a single word."""

from __future__ import annotations

import argparse
import sys


def is_palindrome(word: str) -> bool:
    """Return whether word reads the same forwards and backwards."""
    return word == word[::-1]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check whether a word is a palindrome.")
    parser.add_argument("word", nargs="?", help="word to check")
    args = parser.parse_args(argv)

    sys.stdout.write("\n---------- Verificação de Palíndromo ----------\n\n")
    if args.word is None:
        try:
            line = input("Insira uma palavra: ")
        except EOFError:
            line = ""
    else:
        line = args.word
    tokens = line.split()
    word = tokens[0] if tokens else ""

    verdict = "é palíndroma" if is_palindrome(word) else "não é palíndroma"
    sys.stdout.write(f"\nA palavra inserida {verdict}.\n\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())