"""Tests for basic LinkedOrderedDict operations."""

from linkedodict import LinkedOrderedDict


def make_dict() -> LinkedOrderedDict[int, int]:
    d = LinkedOrderedDict[int, int]()
    d.set(1, 10)
    d.set(2, 20)
    d.set(3, 30)
    return d


def test_dict_creation() -> None:
    """Test creating an empty dict."""
    d = LinkedOrderedDict[str, int]()
    assert len(d) == 0
    assert not d
    assert list(d.entries()) == []
    assert str(d) == "$ empty $"


def test_set() -> None:
    """Test set appends keys in insertion order."""
    d = make_dict()
    assert str(d) == "$ -> (1, 10) -> (2, 20) -> (3, 30) -> $"
    assert list(d.entries()) == [(1, 10), (2, 20), (3, 30)]
    assert len(d) == 3


def test_set_existing_key() -> None:
    """Test updating a key keeps its position."""
    d = make_dict()
    d.set(2, 40)

    assert list(d.entries()) == [(1, 10), (2, 40), (3, 30)]
    assert d.get(2) == 40
    assert len(d) == 3


def test_set_returns_self_for_chaining() -> None:
    """Test set() can be chained."""
    d = LinkedOrderedDict[str, int]()
    result = d.set("a", 1).set("b", 2).set("a", 3)

    assert result is d
    assert list(d.entries()) == [("a", 3), ("b", 2)]


def test_get() -> None:
    """Test looking up values."""
    d = make_dict()
    assert d.get(2) == 20


def test_get_missing_key() -> None:
    """Test get() on an absent key returns None or the default."""
    d = LinkedOrderedDict[int, int]()
    assert d.get(2) is None
    assert d.get(2, -1) == -1


def test_get_does_not_reorder() -> None:
    """Test get() leaves order unchanged."""
    d = make_dict()
    d.get(1)
    d.get(3)
    assert list(d.keys()) == [1, 2, 3]


def test_none_value_is_distinguishable_from_absent() -> None:
    """Test a stored None is told apart from a missing key via has()."""
    d = LinkedOrderedDict[str, None]()
    d.set("present", None)

    assert d.get("present") is None
    assert d.has("present")
    assert not d.has("absent")
    assert d.pop() == ("present", None)
    assert d.pop() is None


def test_has() -> None:
    """Test existence checks."""
    d = make_dict()
    assert d.has(2)
    assert not d.has(4)
    assert not LinkedOrderedDict[int, int]().has(2)


def test_delete() -> None:
    """Test removing a key from the middle."""
    d = make_dict()
    assert d.delete(2) is True

    assert str(d) == "$ -> (1, 10) -> (3, 30) -> $"
    assert not d.has(2)
    assert 2 not in list(d.keys())
    assert len(d) == 2


def test_delete_missing_key() -> None:
    """Test delete() on an absent key is a no-op returning False."""
    d = make_dict()
    assert d.delete(4) is False
    assert list(d.entries()) == [(1, 10), (2, 20), (3, 30)]
    assert LinkedOrderedDict[int, int]().delete(2) is False


def test_delete_then_set_appends_at_end() -> None:
    """Test a deleted key re-enters at the back."""
    d = make_dict()
    d.delete(1)
    d.set(1, 11)
    assert list(d.entries()) == [(2, 20), (3, 30), (1, 11)]


def test_pop() -> None:
    """Test pop() removes and returns the last pair."""
    d = make_dict()
    assert d.pop() == (3, 30)
    assert str(d) == "$ -> (1, 10) -> (2, 20) -> $"
    assert not d.has(3)


def test_pop_empty_dict() -> None:
    """Test pop() on an empty dict returns None and stays empty."""
    d = LinkedOrderedDict[int, int]()
    assert d.pop() is None
    assert len(d) == 0
    assert str(d) == "$ empty $"


def test_shift() -> None:
    """Test shift() removes and returns the first pair."""
    d = make_dict()
    assert d.shift() == (1, 10)
    assert str(d) == "$ -> (2, 20) -> (3, 30) -> $"
    assert not d.has(1)


def test_shift_scenario() -> None:
    """Test shift() leaves the remaining entry in place."""
    d = LinkedOrderedDict[int, int]()
    d.set(1, 10)
    d.set(2, 20)

    assert d.shift() == (1, 10)
    assert list(d.entries()) == [(2, 20)]


def test_shift_empty_dict() -> None:
    """Test shift() on an empty dict returns None and stays empty."""
    d = LinkedOrderedDict[int, int]()
    assert d.shift() is None
    assert len(d) == 0


def test_drain_from_both_ends() -> None:
    """Test alternating pop() and shift() until empty."""
    d = LinkedOrderedDict[int, int]()
    for i in range(5):
        d.set(i, i * 10)

    assert d.shift() == (0, 0)
    assert d.pop() == (4, 40)
    assert d.shift() == (1, 10)
    assert d.pop() == (3, 30)
    assert d.pop() == (2, 20)
    assert d.shift() is None
    assert d.pop() is None
    assert str(d) == "$ empty $"


def test_clear() -> None:
    """Test clear() resets to the empty state."""
    d = make_dict()
    d.clear()

    assert str(d) == "$ empty $"
    assert list(d.entries()) == []
    assert len(d) == 0
    assert not d.has(1)


def test_reuse_after_clear() -> None:
    """Test the dict works normally after clear()."""
    d = make_dict()
    d.clear()
    d.set(3, 33).set(1, 11)

    assert list(d.entries()) == [(3, 33), (1, 11)]
    assert d.shift() == (3, 33)
    assert d.pop() == (1, 11)


def test_to_string_uses_str_of_keys_and_values() -> None:
    """Test rendering uses the plain text form of keys and values."""
    d = LinkedOrderedDict[str, object]()
    d.set("k1", "v1").set("k2", None).set("k3", 1.5)
    assert d.to_string() == "$ -> (k1, v1) -> (k2, None) -> (k3, 1.5) -> $"
    assert str(d) == d.to_string()
