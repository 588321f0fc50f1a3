"""Patient records kept in an ordered list, with an interactive menu."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, TextIO


@dataclass
class Patient:
    """A patient record: name, age and telephone number."""

    name: str
    age: int
    tel: str

    def format(self) -> str:
        """Return the record as tab-separated fields."""
        return f"{self.name}\t{self.age}\t{self.tel}"


class PatientList:
    """An ordered collection of patients addressed by position."""

    def __init__(self, patients: Iterable[Patient] = ()) -> None:
        self._items: list[Patient] = list(patients)

    def __iter__(self) -> Iterator[Patient]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def _check_insert_index(self, index: int) -> None:
        if index < 0:
            raise ValueError("index cannot be negative.")
        if index > len(self._items):
            raise IndexError("index out of range.")

    def insert(self, index: int, patient: Patient) -> None:
        """Insert after the index-th record; index 0 puts it first."""
        self._check_insert_index(index)
        self._items.insert(index, patient)

    def delete(self, index: int) -> Patient:
        """Remove and return the record at 1-based position index."""
        if index <= 0:
            raise ValueError("index cannot be negative or zero.")
        if index > len(self._items):
            raise IndexError("index out of range.")
        return self._items.pop(index - 1)

    def find_by_tel(self, tel: str) -> Patient | None:
        """Return the first patient with this telephone number, or None."""
        return next((p for p in self._items if p.tel == tel), None)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None


def _read_patient(tokens: Iterator[str]) -> Patient:
    name = _next(tokens)
    age = int(_next(tokens))
    tel = _next(tokens)
    return Patient(name, age, tel)


def _display(patients: PatientList) -> None:
    print()
    print("Latest List")
    for patient in patients:
        print(patient.format())


def main(argv: list[str] | None = None) -> int:
    """Run the interactive patient menu on standard input."""
    tokens = _tokens(sys.stdin)
    print("Input Data")
    try:
        count = int(_next(tokens))
        patients = PatientList([_read_patient(tokens) for _ in range(count)])
        while True:
            print("1. Insert")
            print("2. Delete")
            print("3. Search")
            print("-1. Exit")
            option = int(_next(tokens))
            if option == 1:
                print("Insert: Enter the index")
                index = int(_next(tokens))
                try:
                    patients._check_insert_index(index)
                except (ValueError, IndexError) as exc:
                    print(f"Error: {exc}")
                else:
                    print("Input data")
                    patients.insert(index, _read_patient(tokens))
                _display(patients)
            elif option == 2:
                print("Delete: Enter the index")
                index = int(_next(tokens))
                try:
                    patients.delete(index)
                except (ValueError, IndexError) as exc:
                    print(f"Error: {exc}")
                _display(patients)
            elif option == 3:
                print("Search: enter the telephone number")
                found = patients.find_by_tel(_next(tokens))
                print(f"the name is {found.name}" if found else "Not Found")
            elif option == -1:
                return 0
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())