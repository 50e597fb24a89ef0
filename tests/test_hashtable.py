import pytest

from indexbench.hashtable import (
    ChainedHashTable,
    Probe,
    first_char_hash,
    int_hash,
)


@pytest.fixture
def table():
    t = ChainedHashTable(int_hash, 26)
    for key in (1, 27, 53, 5, 499, 488):
        t.insert(key)
    return t


def test_int_hash_stays_in_range():
    for key in range(0, 200, 7):
        assert 0 <= int_hash(key, 26) < 26
    assert int_hash(27, 26) == int_hash(1, 26)


def test_first_char_hash_depends_only_on_first_character():
    assert first_char_hash("Apple", 26) == first_char_hash("Avocado", 26)
    assert 0 <= first_char_hash("Maurice", 26) < 26
    assert first_char_hash("", 26) == 0


def test_insert_and_contains(table):
    assert len(table) == 6
    for key in (1, 27, 53, 5, 499, 488):
        assert key in table
    assert 77 not in table


def test_duplicate_insert_rejected(table):
    assert table.insert(27) is False
    assert len(table) == 6


def test_new_keys_go_to_front_of_chain(table):
    chain = table.buckets()[int_hash(1, 26)]
    assert chain == (53, 27, 1)


def test_search_iterations_match_position(table):
    chain = table.buckets()[int_hash(1, 26)]
    for key in chain:
        probe = table.search(key)
        assert probe.found
        assert probe.iterations == chain.index(key) + 1


def test_search_missing_walks_whole_chain(table):
    chain = table.buckets()[int_hash(79, 26)]
    probe = table.search(79)
    assert probe == Probe(False, len(chain))
    assert not probe


def test_remove_existing(table):
    chain = table.buckets()[int_hash(1, 26)]
    probe = table.remove(1)
    assert probe.found
    assert probe.iterations == len(chain)
    assert 1 not in table
    assert len(table) == 5


def test_remove_missing(table):
    probe = table.remove(77)
    assert not probe.found
    assert len(table) == 6


def test_update_success(table):
    probe = table.update(488, 601)
    assert probe.found
    assert 488 not in table
    assert 601 in table
    assert len(table) == 6


def test_update_rejected_when_new_key_exists(table):
    before = table.buckets()
    probe = table.update(1, 27)
    assert probe.found is False
    assert probe.iterations == 0
    assert table.buckets() == before


def test_update_rejected_when_old_key_missing(table):
    before = table.buckets()
    probe = table.update(9999, 600)
    assert not probe.found
    assert probe.iterations == len(before[int_hash(9999, 26)])
    assert table.buckets() == before


def test_display_format():
    t = ChainedHashTable(int_hash, 3)
    t.insert(3)
    assert t.display() == "0: 3 -> NULL\n1: NULL\n2: NULL\n"


def test_string_table_round_trip():
    t = ChainedHashTable(first_char_hash)
    names = ["Maurice", "Major", "Jagger", "Lennox", "Lesley"]
    for name in names:
        assert t.insert(name)
    assert len(t) == len(names)
    assert sorted(k for b in t.buckets() for k in b) == sorted(names)
    assert t.remove("Lennox").found
    assert "Lennox" not in t


def test_invalid_size():
    with pytest.raises(ValueError):
        ChainedHashTable(int_hash, 0)