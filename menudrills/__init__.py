"""Small menu-driven programs: a calculator, a bank, a stack, a linked list and a student registry."""

__version__ = "0.1.0"