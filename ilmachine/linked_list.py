"""A singly linked list of integers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from ilmachine.textio import TokenReader


@dataclass
class _Node:
    value: int
    next: _Node | None = None


class LinkedList:
    """Singly linked list of integers."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._length = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: int) -> None:
        """Insert a value at the start."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._length += 1

    def push_back(self, value: int) -> None:
        """Append a value at the end."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def last(self) -> int | None:
        """Return the last value, or None if the list is empty."""
        return None if self._tail is None else self._tail.value

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def total(self) -> int:
        """Return the sum of all values."""
        return sum(self)

    def at(self, index: int) -> int | None:
        """Return the value at a position, or None if there is none."""
        if index < 0:
            return None
        for position, value in enumerate(self):
            if position == index:
                return value
        return None

    def reversed(self) -> LinkedList:
        """Return a new list with the values in reverse order."""
        result = LinkedList()
        for value in self:
            result.push_front(value)
        return result

    def format(self) -> str:
        """Render the list as one line of space-terminated values."""
        if not self._length:
            return "List is empty\n"
        return "".join(f"{value} " for value in self) + "\n"


def read_list(reader: TokenReader) -> LinkedList:
    """Read integers until the input stops yielding them."""
    result = LinkedList()
    while (value := reader.read_int()) is not None:
        result.push_back(value)
    return result


def main(argv: list[str] | None = None) -> int:
    """Demonstrate the list, then read one from standard input and print it."""
    out = sys.stdout
    mylist = LinkedList([3])
    mylist.push_front(2)
    mylist.push_front(1)
    out.write(mylist.format())
    out.write(f"{mylist.total()} \n{len(mylist)} \n\n")

    reversed_list = mylist.reversed()
    out.write(reversed_list.format())
    out.write(f"{reversed_list.total()} \n{len(mylist)} \n\n")

    mylist = LinkedList()
    out.write(mylist.format())
    out.write(f"{len(mylist)} \n\n")

    out.write(read_list(TokenReader(sys.stdin)).format())
    return 0


if __name__ == "__main__":
    sys.exit(main())