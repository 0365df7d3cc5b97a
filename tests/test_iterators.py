"""Tests for fail-fast iteration."""

import pytest

from linkedmap import IteratorInvalidatedError, LinkedMap


def _sample() -> LinkedMap[str, int]:
    return LinkedMap([("a", 1), ("b", 2), ("c", 3)])


def test_insert_new_key_invalidates() -> None:
    """Test that adding a key breaks an iteration in progress."""
    m = _sample()
    it = m.iterate()
    assert next(it) == ("a", 1)

    m.insert("d", 4)
    with pytest.raises(IteratorInvalidatedError):
        next(it)


def test_remove_invalidates() -> None:
    """Test that removing a key breaks an iteration in progress."""
    m = _sample()
    it = iter(m)
    assert next(it) == "a"

    m.remove("c")
    with pytest.raises(IteratorInvalidatedError):
        next(it)


@pytest.mark.parametrize(
    "mutate",
    [
        lambda m: m.move_to_end("a"),
        lambda m: m.popitem(),
        lambda m: m.pop("b"),
        lambda m: m.clear(),
        lambda m: m.__delitem__("a"),
    ],
)
def test_structural_mutations_invalidate(mutate) -> None:
    """Test every structural mutation invalidates live iterators."""
    m = _sample()
    it = iter(m.items())
    next(it)

    mutate(m)
    with pytest.raises(IteratorInvalidatedError):
        next(it)


def test_value_update_does_not_invalidate() -> None:
    """Test that value-only updates leave iterators valid and are visible."""
    m = _sample()
    it = m.iterate()
    assert next(it) == ("a", 1)

    m.insert("b", 20)
    m["c"] = 30

    assert list(it) == [("b", 20), ("c", 30)]


def test_invalidated_error_is_runtime_error() -> None:
    """Test the error matches the built-in dict contract for changed size."""
    m = _sample()
    with pytest.raises(RuntimeError):
        for key in m:
            m.remove(key)


def test_exhausted_iterator_stays_exhausted() -> None:
    """Test that a finished iterator keeps raising StopIteration."""
    m = _sample()
    it = m.iterate()
    assert len(list(it)) == 3

    with pytest.raises(StopIteration):
        next(it)
    m.insert("d", 4)
    with pytest.raises(StopIteration):
        next(it)


def test_fresh_iterator_after_mutation() -> None:
    """Test that iteration restarts cleanly once the mutation is done."""
    m = _sample()
    it = m.iterate()
    next(it)
    m.remove("a")

    assert list(m.iterate()) == [("b", 2), ("c", 3)]


def test_iterating_copy_while_mutating() -> None:
    """Test the usual pattern of iterating a snapshot while mutating the map."""
    m = LinkedMap((str(i), i) for i in range(10))
    for key, value in list(m.items()):
        if value % 2:
            m.remove(key)

    assert list(m) == ["0", "2", "4", "6", "8"]


def test_views_reflect_live_state() -> None:
    """Test that views are live and support membership and length."""
    m = _sample()
    keys = m.keys()
    values = m.values()
    items = m.items()

    m.insert("d", 4)
    assert len(keys) == 4
    assert "d" in keys
    assert 4 in values
    assert ("d", 4) in items
    assert ("d", 5) not in items
