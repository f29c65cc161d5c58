"""Integer calculator driven by a small text menu."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

MENU = (
    "Press 1 for + ",
    "Press 2 for - ",
    "Press 3 for * ",
    "Press 4 for / ",
    "Press 5 for % ",
    "Press 0 for exit ",
)


def addition(a: int, b: int) -> int:
    """Return the sum of ``a`` and ``b``."""
    return a + b


def subtraction(a: int, b: int) -> int:
    """Return the difference of the larger and the smaller operand."""
    return a - b if a > b else b - a


def multiplication(a: int, b: int) -> int:
    """Return the product of ``a`` and ``b``."""
    return a * b


def division(a: int, b: int) -> int:
    """Return the quotient of ``a`` by ``b``, truncated toward zero."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def modulus(a: int, b: int) -> int:
    """Return the remainder of ``a`` by ``b``; it takes the sign of ``a``."""
    return a - b * division(a, b)


_OPERATIONS: dict[int, tuple[str, Callable[[int, int], int]]] = {
    1: ("Addition", addition),
    2: ("Subtraction", subtraction),
    3: ("Multiplication", multiplication),
    4: ("Division", division),
    5: ("Modulus", modulus),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Show the menu, read a choice and two numbers, and print the result."""
    for line in MENU:
        print(line)
    try:
        choice = int(input("Enter a choice:"))
        a = int(input("Enter the first number: "))
        b = int(input("Enter the second number: "))
    except ValueError:
        print("Invalid number", file=sys.stderr)
        return 1
    except EOFError:
        return 1

    if choice == 0:
        print("Please visit again!!!")
        return 0

    operation = _OPERATIONS.get(choice)
    if operation is None:
        print("Invalid choice", file=sys.stderr)
        return 1

    name, func = operation
    try:
        result = func(a, b)
    except ZeroDivisionError:
        print("Cannot divide by zero", file=sys.stderr)
        return 1
    print(f"{name} of {a} and {b} is : {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())