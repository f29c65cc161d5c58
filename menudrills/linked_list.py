"""Singly linked list of integers with a menu front end."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

_RULE = "\n------------------------------------------\n"


@dataclass
class _Node:
    data: int
    next: _Node | None = None


class LinkedList:
    """A singly linked list that grows at either end."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def insert_at_start(self, data: int) -> None:
        """Put ``data`` in front of the first node."""
        self._head = _Node(data, self._head)
        self._count += 1

    def insert_at_end(self, data: int) -> None:
        """Put ``data`` after the last node."""
        new_node = _Node(data)
        if self._head is None:
            self._head = new_node
        else:
            last = self._head
            for last in self._nodes():
                pass
            last.next = new_node
        self._count += 1

    def delete_at(self, pos: int) -> int:
        """Remove the node at ``pos`` and return its data.

        The head, at position 0, cannot be removed this way.
        """
        if self._count == 0 or pos == 0:
            raise IndexError("Linked list is empty..")
        if pos < 0 or pos >= self._count:
            raise IndexError("Invalid position........")
        prev = next(node for index, node in enumerate(self._nodes()) if index == pos - 1)
        current = prev.next
        assert current is not None
        prev.next = current.next
        self._count -= 1
        return current.data

    def get(self, pos: int) -> int:
        """Return the data at ``pos``."""
        if pos < 0 or pos >= self._count:
            raise IndexError("Invalid position........")
        return next(data for index, data in enumerate(self) if index == pos)

    def render(self) -> str:
        """Return the list as ``a->b->...->NULL``."""
        return "".join(f"{data}->" for data in self) + "NULL"


_MENU = (
    "Press 1 for Inserting at the start",
    "Press 2 for Inserting at the end",
    "Press 3 for Deleting at any position",
    "Press 4 for Searching the list by the postition",
    "Press 5 for View list",
    "Press 0 for Exit",
)


def _boxed(message: str) -> None:
    print(f"{_RULE}{message}{_RULE}", end="")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive linked list until the user chooses 0."""
    items = LinkedList()
    while True:
        print(_RULE, end="")
        for line in _MENU:
            print(line)
        print("------------------------------------------")
        try:
            choice = int(input("Enter the choice : "))
            if choice == 1:
                items.insert_at_start(int(input("Enter the data u want to insert:")))
                _boxed("Insertion successful")
            elif choice == 2:
                items.insert_at_end(int(input("Enter the data u want to insert:")))
                _boxed("Insertion successful")
            elif choice == 3:
                items.delete_at(
                    int(input("Enter the position at which u want your data deleted:"))
                )
                _boxed("Deletion successful")
            elif choice == 4:
                data = items.get(int(input("Enter the position u want to data of:")))
                print(f"Searched data : {data} ")
            elif choice == 5:
                print(items.render())
            elif choice == 0:
                return 0
        except EOFError:
            return 0
        except ValueError:
            print("Invalid number", file=sys.stderr)
        except IndexError as exc:
            print(exc)


if __name__ == "__main__":
    sys.exit(main())