"""Hash tables of people keyed by name: separate chaining and linear probing."""

from __future__ import annotations

from dataclasses import dataclass


def hash_name(name: str, table_size: int = 10) -> int:
    """Hash a name into 0..table_size-1 by mixing in each character code."""
    address = 0
    for ch in name:
        code = ord(ch)
        address += code
        address = (address * code) % table_size
    return address


@dataclass
class Person:
    """A person stored in a hash table."""

    name: str
    age: int


def _same_name(a: str, b: str) -> bool:
    return a.lower() == b.lower()


class ChainedHashTable:
    """Hash table whose buckets are chains; new entries go to the front of their chain.

    Names compare case-insensitively within a chain, though the hash itself
    is case-sensitive.
    """

    def __init__(self, size: int = 10) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self._buckets: list[list[Person]] = [[] for _ in range(size)]

    @property
    def size(self) -> int:
        return len(self._buckets)

    def _bucket(self, name: str) -> list[Person]:
        return self._buckets[hash_name(name, len(self._buckets))]

    def insert(self, name: str, age: int) -> Person:
        """Add a person at the front of the name's chain and return the record."""
        person = Person(name, age)
        self._bucket(name).insert(0, person)
        return person

    def delete(self, name: str) -> Person:
        """Remove and return the first person with the name."""
        bucket = self._bucket(name)
        for index, person in enumerate(bucket):
            if _same_name(person.name, name):
                return bucket.pop(index)
        raise KeyError(name)

    def search(self, name: str) -> Person | None:
        """Return the first person with the name, or None."""
        return next((p for p in self._bucket(name) if _same_name(p.name, name)), None)

    def buckets(self) -> list[list[Person]]:
        """A copy of every chain, in bucket order."""
        return [list(bucket) for bucket in self._buckets]

    def format(self) -> str:
        """The table as text: one line per bucket between START and END."""
        lines = ["START"]
        for index, bucket in enumerate(self._buckets):
            if bucket:
                lines.append(f"\t{index}  " + "".join(f"{p.name} -> " for p in bucket))
            else:
                lines.append(f"\t{index}  ------")
        lines.append("END")
        return "\n".join(lines)


class _Tombstone:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<deleted>"


DELETED = _Tombstone()


class LinearProbingTable:
    """Open-addressing hash table using linear probing and tombstones for deletion."""

    def __init__(self, size: int = 10) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self._slots: list[Person | _Tombstone | None] = [None] * size

    @property
    def size(self) -> int:
        return len(self._slots)

    def _probe(self, name: str) -> list[int]:
        start = hash_name(name, len(self._slots))
        return [(start + i) % len(self._slots) for i in range(len(self._slots))]

    def insert(self, name: str, age: int) -> list[int]:
        """Store a person in the first free or deleted slot; return the slots probed."""
        probed: list[int] = []
        for index in self._probe(name):
            probed.append(index)
            if self._slots[index] is None or self._slots[index] is DELETED:
                self._slots[index] = Person(name, age)
                return probed
        raise OverflowError("table overflow")

    def _find(self, name: str) -> int | None:
        for index in self._probe(name):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot is DELETED:
                continue
            if _same_name(slot.name, name):
                return index
        return None

    def delete(self, name: str) -> Person:
        """Remove and return the person with the name, leaving a tombstone."""
        index = self._find(name)
        if index is None:
            raise KeyError(name)
        person = self._slots[index]
        self._slots[index] = DELETED
        return person

    def search(self, name: str) -> Person | None:
        """Return the person with the name, or None."""
        index = self._find(name)
        return None if index is None else self._slots[index]

    def slots(self) -> list[Person | _Tombstone | None]:
        """A copy of the slots: a Person, DELETED, or None when never used."""
        return list(self._slots)

    def format(self) -> str:
        """The table as text: one line per slot between START and END."""
        lines = ["START"]
        for index, slot in enumerate(self._slots):
            if slot is None:
                lines.append(f"\t{index}  ------")
            elif slot is DELETED:
                lines.append(f"\t{index}  <deleted>")
            else:
                lines.append(f"\t{index}  {slot.name}")
        lines.append("END")
        return "\n".join(lines)