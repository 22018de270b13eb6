"""Fast exponentiation by repeated squaring."""

from __future__ import annotations

import argparse


def power(a: int, n: int) -> int:
    """Return ``a`` raised to the non-negative integer power ``n``."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    # Walk the exponent's bits from the most significant: square, then
    # multiply by the base where the bit is set.
    for bit in format(n, "b") if n else "":
        result *= result
        if bit == "1":
            result *= a
    return result


def main(argv: list[str] | None = None) -> int:
    """Read a base and an exponent and print the power."""
    parser = argparse.ArgumentParser(description="Raise a number to a power.")
    parser.parse_args(argv)

    base = int(input("Введите основание: "))
    exponent = int(input("Введите показатель степени: "))
    print(f"{base} ^ {exponent} = {power(base, exponent)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())