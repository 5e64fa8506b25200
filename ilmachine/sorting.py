"""Reversing and sorting integer lists, and sorting user records."""

from __future__ import annotations

import sys
from collections.abc import Iterable, MutableSequence
from dataclasses import dataclass
from enum import Enum


class City(Enum):
    """Cities a user may live in, valued by display name."""

    SARATOV = "Saratov"
    MOSCOW = "Moscow"
    PARIS = "Paris"
    LOS_ANGELES = "Los Angeles"
    OTHER = "Other"


@dataclass
class User:
    """A user record."""

    id: int
    name: str
    city: City


_USER_KEYS = {
    "id": lambda user: user.id,
    "name": lambda user: user.name,
    "city": lambda user: user.city.value,
}


def reverse_in_place(values: MutableSequence[int]) -> None:
    """Reverse a sequence in place by swapping ends towards the middle."""
    for left in range(len(values) // 2):
        right = len(values) - 1 - left
        values[left], values[right] = values[right], values[left]


def bubble_sort(values: MutableSequence[int]) -> None:
    """Sort a sequence in place in ascending order with bubble sort."""
    end = len(values) - 1
    swapped = True
    while swapped and end > 0:
        swapped = False
        for i in range(end):
            if values[i] > values[i + 1]:
                values[i], values[i + 1] = values[i + 1], values[i]
                swapped = True
        end -= 1


def sort_users(users: Iterable[User], key: str) -> list[User]:
    """Return users sorted by ``"id"``, ``"name"`` or ``"city"`` (city name)."""
    try:
        key_function = _USER_KEYS[key]
    except KeyError:
        raise ValueError(f"unknown sort key: {key!r}") from None
    return sorted(users, key=key_function)


def format_users(users: Iterable[User]) -> str:
    """Render one ``id name city`` line per user, followed by a blank line."""
    return "".join(f"{user.id} {user.name} {user.city.value}\n" for user in users) + "\n"


def _format_values(values: Iterable[int]) -> str:
    return "".join(f"{value} " for value in values) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Show reversing and sorting of fixed arrays and of a user table."""
    out = sys.stdout

    array = list(range(1, 12))
    out.write("Array to reverse  = " + _format_values(array))
    reverse_in_place(array)
    out.write("Reverse array     = " + _format_values(array))
    reverse_in_place(array)
    reverse_in_place(array)
    out.write("Reverse_ptr array = " + _format_values(array))
    out.write("\n")

    array = list(range(11, 0, -1))
    out.write("Array to sort = " + _format_values(array))
    bubble_sort(array)
    out.write("Sorted array  = " + _format_values(array))
    out.write("\n")
    array = [5, 4, 1, 7, 10, 2, 9, 11, 6, 8, 3]
    out.write("Array to sort_ptr = " + _format_values(array))
    bubble_sort(array)
    out.write("Sorted_ptr array  = " + _format_values(array))
    out.write("\n")

    users = [
        User(10, "Alex", City.LOS_ANGELES),
        User(2, "Maria", City.MOSCOW),
        User(8, "Ivan", City.SARATOV),
        User(12, "Julia", City.PARIS),
    ]
    for key in ("id", "name", "city"):
        users = sort_users(users, key)
        out.write(format_users(users))
    return 0


if __name__ == "__main__":
    sys.exit(main())