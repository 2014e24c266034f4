"""A list of student records with insert-at-front, removal, lookup and sort by number."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class Student:
    """One student record."""

    number: int
    name: str
    total_marks: int


class StudentList:
    """Student records kept in insertion order, newest first."""

    def __init__(self) -> None:
        self._students: list[Student] = []

    def add(self, number: int, name: str, total_marks: int) -> Student:
        """Add a student at the front of the list and return the record."""
        student = Student(number, name, total_marks)
        self._students.insert(0, student)
        return student

    def remove(self, number: int) -> Student:
        """Remove and return the first student with the given number."""
        if not self._students:
            raise KeyError("list empty")
        for index, student in enumerate(self._students):
            if student.number == number:
                return self._students.pop(index)
        raise KeyError(f"student with number {number} not found")

    def search(self, number: int) -> Student | None:
        """Return the first student with the given number, or None."""
        return next((s for s in self._students if s.number == number), None)

    def sort(self) -> None:
        """Order the records by number with an exchange sort."""
        students = self._students
        for i in range(len(students) - 1):
            for j in range(i + 1, len(students)):
                if students[i].number > students[j].number:
                    students[i], students[j] = students[j], students[i]

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)