import pytest

from spellwise.hashtable import HashTable, fold


def test_fold_single_letter_is_its_code():
    assert fold("a") == ord("a")


def test_fold_ignores_case_and_non_letters():
    assert fold("ABC") == fold("abc")
    assert fold("a-b-c!9") == fold("abc")


def test_fold_empty():
    assert fold("") == 0
    assert fold("123 !?") == 0


def test_insert_and_find():
    table = HashTable(10)
    table.insert("apple")
    table.insert("banana")
    assert table.find("apple")
    assert "banana" in table
    assert not table.find("cherry")


def test_colliding_keys_are_both_found():
    table = HashTable(10)
    assert fold("listen") == fold("silent")
    table.insert("listen")
    table.insert("silent")
    assert table.find("listen")
    assert table.find("silent")
    assert not table.find("enlist")


def test_lookup_is_case_sensitive():
    table = HashTable(5)
    table.insert("Word")
    assert table.find("Word")
    assert not table.find("word")


def test_full_table_raises():
    table = HashTable(1)
    table.insert("a")
    table.insert("b")
    with pytest.raises(OverflowError):
        table.insert("c")


def test_find_in_full_table_terminates():
    table = HashTable(1)
    table.insert("a")
    table.insert("b")
    assert not table.find("zzz")
    assert table.find("b")


def test_non_string_not_contained():
    table = HashTable(2)
    table.insert("a")
    assert 5 not in table


@pytest.mark.parametrize("size", [0, -3])
def test_bad_size_rejected(size):
    with pytest.raises(ValueError):
        HashTable(size)