"""A stack of integers with a fixed capacity."""

from __future__ import annotations

import sys


class StackFullError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackEmptyError(IndexError):
    """Raised when popping from an empty stack."""


class BoundedStack:
    """Integer stack that holds at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Push a value; raise StackFullError if there is no room."""
        if self.is_full():
            raise StackFullError("Stack is full")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value; raise StackEmptyError if empty."""
        if self.is_empty():
            raise StackEmptyError("Stack is empty")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def format(self) -> str:
        """Render the stack from bottom to top, one value per line."""
        if self.is_empty():
            return "Stack is empty\n"
        return "\nStack:\n" + "".join(f"{value}\n" for value in self._items)


def main(argv: list[str] | None = None) -> int:
    """Exercise a small stack and print its state."""
    out = sys.stdout
    stack = BoundedStack(3)
    stack.push(123)
    stack.push(13453)
    out.write(f"{stack.pop()}\n")
    out.write(stack.format())
    stack.push(13123453)
    out.write(stack.format())
    return 0


if __name__ == "__main__":
    sys.exit(main())