"""A list of students kept by id, with a menu front end."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

_RULE = "----------------------------------------------------\n"


@dataclass
class Student:
    """A student with an id and a name."""

    student_id: int
    name: str

    def render(self) -> str:
        """Return a printable summary of the student."""
        return (
            f"\n{_RULE}"
            f"The id of the student is : {self.student_id}\n"
            f"The name of the student is : {self.name}\n"
            f"{_RULE}"
        )


class StudentRegistry:
    """Students in the order they were added; ids need not be unique."""

    def __init__(self) -> None:
        self._students: list[Student] = []

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)

    def __len__(self) -> int:
        return len(self._students)

    def add(self, student_id: int, name: str) -> Student:
        """Append a student and return it."""
        student = Student(student_id, name)
        self._students.append(student)
        return student

    def remove(self, student_id: int) -> list[Student]:
        """Remove every student with ``student_id`` and return them."""
        removed = [s for s in self._students if s.student_id == student_id]
        if not removed:
            raise KeyError(student_id)
        self._students = [s for s in self._students if s.student_id != student_id]
        return removed

    def find(self, student_id: int) -> list[Student]:
        """Return every student with ``student_id``."""
        return [s for s in self._students if s.student_id == student_id]


_MENU = (
    "Press 1 To add the student in the list",
    "Press 2 To display all the student in the list",
    "Press 3 To remove the student from the list from Id",
    "Press 4 To search a student by ID",
    "Press 0 To exit the list of students",
)

_NOT_FOUND = "Id is not found in the list"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive student list until the user chooses 0."""
    registry = StudentRegistry()
    while True:
        print(f"\n{_RULE}", end="")
        for line in _MENU:
            print(line)
        print(_RULE, end="")
        try:
            choice = int(input("Enter the choice : "))
            if choice == 1:
                student_id = int(input("Enter the Id :"))
                name = input("Enter your name :")
                registry.add(student_id, name)
                print(f"\n{_RULE}Successfully added to the list..\n{_RULE}", end="")
            elif choice == 2:
                for student in registry:
                    print(student.render(), end="")
            elif choice == 3:
                student_id = int(input("Enter the Id :"))
                try:
                    removed = registry.remove(student_id)
                except KeyError:
                    print(_NOT_FOUND)
                else:
                    for _ in removed:
                        print("Id has been deleted successfully.......")
            elif choice == 4:
                student_id = int(input("Enter the Id :"))
                found = registry.find(student_id)
                if not found:
                    print(_NOT_FOUND)
                for student in found:
                    print(student.render(), end="")
            elif choice == 0:
                print("Thank you visit again.......")
                return 0
        except EOFError:
            return 0
        except ValueError:
            print("Invalid number", file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())