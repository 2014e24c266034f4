import pytest

from dsakit.hashing import (
    ChainedHashTable,
    LinearProbingTable,
    Person,
    hash_name,
)


def _colliding_pair(size=10):
    seen = {}
    for name in (f"name{i}" for i in range(1000)):
        h = hash_name(name, size)
        if h in seen:
            return seen[h], name
        seen[h] = name
    raise AssertionError("no collision found")


def test_hash_empty_name_is_zero():
    assert hash_name("") == 0


def test_hash_single_letter():
    assert hash_name("a") == 9


@pytest.mark.parametrize("name", ["alice", "bob", "carol", "Zed"])
@pytest.mark.parametrize("size", [1, 7, 10, 13])
def test_hash_in_range(name, size):
    assert 0 <= hash_name(name, size) < size


def test_chained_insert_and_search():
    table = ChainedHashTable()
    table.insert("alice", 30)
    assert table.search("alice") == Person("alice", 30)


def test_chained_search_missing():
    assert ChainedHashTable().search("nobody") is None


def test_chained_delete_returns_record():
    table = ChainedHashTable()
    table.insert("bob", 41)
    assert table.delete("bob") == Person("bob", 41)
    assert table.search("bob") is None


def test_chained_delete_missing_raises():
    with pytest.raises(KeyError):
        ChainedHashTable().delete("ghost")


def test_chained_delete_is_case_insensitive_within_bucket():
    table = ChainedHashTable(1)
    table.insert("Alice", 22)
    assert table.delete("ALICE").age == 22
    assert len(table) if False else table.buckets() == [[]]


def test_chained_bucket_placement_and_order():
    first, second = _colliding_pair()
    table = ChainedHashTable()
    table.insert(first, 1)
    table.insert(second, 2)
    bucket = table.buckets()[hash_name(first)]
    assert [p.name for p in bucket] == [second, first]


def test_chained_buckets_count():
    assert len(ChainedHashTable(7).buckets()) == 7


def test_chained_format():
    table = ChainedHashTable()
    table.insert("alice", 30)
    lines = table.format().split("\n")
    assert lines[0] == "START"
    assert lines[-1] == "END"
    index = hash_name("alice")
    assert lines[1 + index] == f"\t{index}  alice -> "
    other = (index + 1) % 10
    assert lines[1 + other] == f"\t{other}  ------"


def test_chained_rejects_bad_size():
    with pytest.raises(ValueError):
        ChainedHashTable(0)


def test_probing_insert_returns_home_slot():
    table = LinearProbingTable()
    assert table.insert("alice", 30) == [hash_name("alice")]
    assert table.search("alice") == Person("alice", 30)


def test_probing_collision_moves_to_next_slot():
    first, second = _colliding_pair()
    table = LinearProbingTable()
    table.insert(first, 1)
    home = hash_name(first)
    assert table.insert(second, 2) == [home, (home + 1) % 10]
    assert table.slots()[(home + 1) % 10] == Person(second, 2)


def test_probing_delete_leaves_tombstone_and_search_continues():
    first, second = _colliding_pair()
    table = LinearProbingTable()
    table.insert(first, 1)
    table.insert(second, 2)
    assert table.delete(first) == Person(first, 1)
    home = hash_name(first)
    assert f"\t{home}  <deleted>" in table.format().split("\n")
    assert table.search(second) == Person(second, 2)
    assert table.search(first) is None


def test_probing_reuses_tombstone():
    first, second = _colliding_pair()
    table = LinearProbingTable()
    table.insert(first, 1)
    table.insert(second, 2)
    table.delete(first)
    assert table.insert(first, 5) == [hash_name(first)]


def test_probing_delete_missing_raises():
    with pytest.raises(KeyError):
        LinearProbingTable().delete("ghost")


def test_probing_overflow():
    table = LinearProbingTable(3)
    for name in ("a", "b", "c"):
        table.insert(name, 1)
    with pytest.raises(OverflowError):
        table.insert("d", 1)
    assert all(isinstance(slot, Person) for slot in table.slots())


def test_probing_format_empty_and_filled():
    table = LinearProbingTable()
    table.insert("carol", 50)
    lines = table.format().split("\n")
    index = hash_name("carol")
    assert lines[0] == "START" and lines[-1] == "END"
    assert lines[1 + index] == f"\t{index}  carol"
    other = (index + 1) % 10
    assert lines[1 + other] == f"\t{other}  ------"