"""A simple student record."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """A student identified by name, age and group; equal when all three match."""

    name: str = ""
    age: int = 0
    group: str = ""

    def __str__(self) -> str:
        return f"[Name: {self.name}, Age: {self.age}, Group: {self.group}]"