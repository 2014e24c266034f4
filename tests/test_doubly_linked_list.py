import pytest

from dsakit.doubly_linked_list import DoublyLinkedList, palindrome_ignoring_case


def test_forward_and_backward_iteration_agree():
    data = [1, 2, 3, 4]
    lst = DoublyLinkedList(data)
    assert list(lst) == data
    assert list(reversed(lst)) == data[::-1]
    assert len(lst) == len(data)


def test_insert_beginning_and_end():
    lst = DoublyLinkedList()
    lst.insert_beginning(2)
    lst.insert_beginning(1)
    lst.insert_end(3)
    assert list(lst) == [1, 2, 3]
    assert list(reversed(lst)) == [3, 2, 1]


def test_insert_after_and_before_keep_back_links():
    lst = DoublyLinkedList([1, 3])
    lst.insert_after(2, 1)
    lst.insert_before(0, 1)
    assert list(lst) == [0, 1, 2, 3]
    assert list(reversed(lst)) == list(lst)[::-1]


def test_insert_with_missing_key_raises():
    lst = DoublyLinkedList([1])
    with pytest.raises(ValueError):
        lst.insert_after(5, 99)
    with pytest.raises(ValueError):
        lst.insert_before(5, 99)
    assert list(lst) == [1]


def test_delete_operations_return_items():
    lst = DoublyLinkedList([10, 20, 30, 40])
    assert lst.delete_beginning() == 10
    assert lst.delete_end() == 40
    assert lst.delete(20) == 20
    assert list(lst) == [30]
    assert list(reversed(lst)) == [30]


def test_delete_on_empty_raises():
    lst = DoublyLinkedList()
    with pytest.raises(IndexError):
        lst.delete_beginning()
    with pytest.raises(IndexError):
        lst.delete_end()
    with pytest.raises(IndexError):
        lst.delete(1)


def test_delete_missing_key_raises():
    with pytest.raises(ValueError):
        DoublyLinkedList([1, 2]).delete(3)


def test_reverse_in_place():
    data = [5, 6, 7, 8, 9]
    lst = DoublyLinkedList(data)
    lst.reverse()
    assert list(lst) == data[::-1]
    assert list(reversed(lst)) == data
    lst.insert_end(0)
    assert list(lst)[-1] == 0
    lst.reverse()
    assert list(lst) == [0] + data


def test_reverse_single_and_empty():
    single = DoublyLinkedList([1])
    single.reverse()
    assert list(single) == [1]
    empty = DoublyLinkedList()
    empty.reverse()
    assert list(empty) == []


@pytest.mark.parametrize("text", ["Madam", "racecar", "a", "Never odd or even"[:0] + "abBA", ""])
def test_palindromes(text):
    assert palindrome_ignoring_case(text) is True


@pytest.mark.parametrize("text", ["hello", "ab", "Abc"])
def test_not_palindromes(text):
    assert palindrome_ignoring_case(text) is False