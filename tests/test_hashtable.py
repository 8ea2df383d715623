import itertools

import pytest

from classics.hashtable import ChainedHashTable, djb2

FRUITS = {"apple": 100, "banana": 200, "cherry": 300, "date": 400, "elderberry": 500}


def _filled():
    table = ChainedHashTable()
    for key, value in FRUITS.items():
        table[key] = value
    return table


def _colliding_pair(size):
    seen = {}
    for letters in itertools.product("abcdefgh", repeat=2):
        key = "".join(letters)
        index = djb2(key, size)
        if index in seen:
            return seen[index], key
        seen[index] = key
    raise AssertionError("no collision found")


def test_djb2_empty_is_seed():
    assert djb2("", 10**9) == 5381


def test_djb2_in_range_and_deterministic():
    for key in FRUITS:
        assert 0 <= djb2(key, 10) < 10
        assert djb2(key, 10) == djb2(key, 10)


def test_djb2_handles_non_ascii():
    assert 0 <= djb2("café", 7) < 7


def test_insert_and_lookup():
    table = _filled()
    assert len(table) == 5
    for key, value in FRUITS.items():
        assert table[key] == value
        assert key in table
    assert "grape" not in table


def test_missing_key_raises_and_get_default():
    table = _filled()
    with pytest.raises(KeyError):
        table["grape"]
    assert table.get("grape") is None
    assert table.get("grape", -1) == -1


def test_update_keeps_count():
    table = _filled()
    table["apple"] = 150
    assert table["apple"] == 150
    assert len(table) == 5


def test_delete():
    table = _filled()
    del table["banana"]
    assert "banana" not in table
    assert len(table) == 4
    with pytest.raises(KeyError):
        del table["banana"]


def test_load_factor_and_collisions_invariants():
    table = _filled()
    assert table.load_factor() == pytest.approx(len(table) / table.size)
    nonempty = sum(1 for chain in table.buckets() if chain)
    assert table.collisions() == len(table) - nonempty


def test_new_entries_go_to_chain_head():
    first, second = _colliding_pair(10)
    table = ChainedHashTable(10)
    table[first] = 1
    table[second] = 2
    chain = table.buckets()[djb2(first, 10)]
    assert chain == [(second, 2), (first, 1)]
    assert table.collisions() == 1


def test_render_format():
    table = _filled()
    lines = table.render().splitlines()
    assert lines[0] == "Hash Table (size=10, count=5, load=0.50):"
    assert len(lines) == 11
    empty = sum(1 for chain in table.buckets() if not chain)
    assert sum(1 for line in lines[1:] if line.endswith("empty")) == empty
    for line in lines[1:]:
        assert line.endswith("empty") or line.endswith("-> NULL")


def test_bucket_contents_match_entries():
    table = _filled()
    pairs = {k: v for chain in table.buckets() for k, v in chain}
    assert pairs == FRUITS


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        ChainedHashTable(0)