"""Fixed-capacity integer stack with a menu front end."""

from __future__ import annotations

import sys
from collections.abc import Sequence

_RULE = "\n----------------------------------------------\n"


class Stack:
    """A stack that holds at most ``size`` items."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, data: int) -> None:
        """Put ``data`` on top of the stack."""
        if self.is_full():
            raise OverflowError("Stack is full......")
        self._items.append(data)

    def pop(self) -> int:
        """Remove and return the top item."""
        if self.is_empty():
            raise IndexError("Stack is empty or underflown...")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.size

    def render(self) -> str:
        """Return the items top first, one ``|item|`` per line."""
        if self.is_empty():
            return "Stack is empty..."
        return "\n".join(f"|{item}|" for item in reversed(self._items))


_MENU = (
    "Enter 1: To push the element inside the stack",
    "Enter 2: To pop the element from stack",
    "Enter 3: To check the stack is empty or not",
    "Enter 4: To check the stack is full or not",
    "Enter 5: To display all the elements",
    "Enter 0: To exit from the stack",
)


def _boxed(message: str) -> None:
    print(f"{_RULE}{message}{_RULE}", end="")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive stack of capacity 5 until the user chooses 0."""
    stack = Stack(5)
    while True:
        print(_RULE, end="")
        for line in _MENU:
            print(line)
        print("----------------------------------------------")
        try:
            choice = int(input("Enter your choice :"))
            if choice == 1:
                stack.push(int(input("Enter the data u want to push :")))
                _boxed("Element is successfully pushed")
            elif choice == 2:
                stack.pop()
                _boxed("Element is successfully popped")
            elif choice == 3:
                _boxed("Stack is empty....." if stack.is_empty() else "Stack is not empty...")
            elif choice == 4:
                _boxed("Stack is Full....." if stack.is_full() else "Stack is Not Full...")
            elif choice == 5:
                print(stack.render())
            elif choice == 0:
                _boxed("Thank you for using the stack..")
                return 0
        except EOFError:
            return 0
        except ValueError:
            print("Invalid number", file=sys.stderr)
        except (OverflowError, IndexError) as exc:
            print(exc)


if __name__ == "__main__":
    sys.exit(main())