from __future__ import annotations

import random

import numpy as np

import pytest

from plotutils import DuplicateNameError, HandleRegistry, NotFoundError


def _assert_dense(registry: HandleRegistry) -> None:
    names = registry.names()
    assert len(set(names)) == len(names)
    assert [registry.index_of(n) for n in names] == list(range(1, len(names) + 1))
    assert [registry.name_of(i) for i in range(1, len(names) + 1)] == names


def test_add_assigns_sequential_indices() -> None:
    registry = HandleRegistry()
    assert registry.add("h1", "A") == "A"
    assert registry.add("h2", "B") == "B"
    assert registry.index_of("A") == 1
    assert registry.index_of("B") == 2
    assert registry.get(2) == "h2"
    assert registry.get("A") == "h1"


def test_empty_name_uses_next_count() -> None:
    registry = HandleRegistry()
    assert registry.add(object()) == "1"
    assert registry.add(object(), "named") == "named"
    assert registry.add(object()) == "3"


def test_auto_name_skips_taken_names() -> None:
    registry = HandleRegistry()
    registry.add("a")
    registry.add("b")
    registry.delete("1")
    # len + 1 == "2" is still taken
    assert registry.add("c") == "3"
    _assert_dense(registry)


def test_duplicate_name_raises() -> None:
    registry = HandleRegistry()
    registry.add("h1", "A")
    with pytest.raises(DuplicateNameError, match="'A'"):
        registry.add("h2", "A")
    assert registry.handles() == ["h1"]


def test_delete_shifts_later_indices_only() -> None:
    registry = HandleRegistry()
    for name in "ABCDE":
        registry.add(f"h{name}", name)

    assert registry.delete(3) == "hC"

    assert registry.index_of("A") == 1
    assert registry.index_of("B") == 2
    assert registry.index_of("D") == 3
    assert registry.index_of("E") == 4
    _assert_dense(registry)


def test_end_to_end_rename_free_delete() -> None:
    registry = HandleRegistry()
    registry.add("first", "A")
    registry.add("second", "B")
    registry.delete("A")
    assert registry.index_of("B") == 1
    assert registry.get(1) == "second"


@pytest.mark.parametrize("key", ["missing", 0, 3, -1, True])
def test_missing_keys_raise_not_found(key) -> None:
    registry = HandleRegistry()
    registry.add("h1", "A")
    registry.add("h2", "B")
    with pytest.raises(NotFoundError):
        registry.get(key)
    with pytest.raises(NotFoundError):
        registry.delete(key)
    assert len(registry) == 2


def test_not_found_is_a_key_error() -> None:
    with pytest.raises(KeyError):
        HandleRegistry().get("nope")


def test_contains_and_iteration() -> None:
    registry = HandleRegistry()
    registry.add("h1", "A")
    registry.add("h2", "B")
    assert "A" in registry
    assert 2 in registry
    assert 3 not in registry
    assert list(registry) == ["A", "B"]
    assert registry.items() == [("A", "h1"), ("B", "h2")]
    registry.clear()
    assert len(registry) == 0


def test_random_add_delete_sequences_stay_dense() -> None:
    rng = random.Random(1234)
    registry = HandleRegistry()
    mirror: list[str] = []
    for step in range(500):
        if mirror and rng.random() < 0.4:
            index = rng.randint(1, len(mirror))
            before = {n: registry.index_of(n) for n in mirror}
            deleted = mirror.pop(index - 1)
            registry.delete(index if rng.random() < 0.5 else deleted)
            for n in mirror:
                expected = before[n] - 1 if before[n] > index else before[n]
                assert registry.index_of(n) == expected
        else:
            name = "" if rng.random() < 0.5 else f"s{step}"
            mirror.append(registry.add(step, name))
        assert registry.names() == mirror
        _assert_dense(registry)


def test_numpy_integer_indices() -> None:
    reg = HandleRegistry()
    reg.add("h1", "a")
    reg.add("h2", "b")
    assert reg.get(np.int64(2)) == "h2"
    assert np.int32(1) in reg
    assert reg.delete(np.int64(1)) == "h1"
    with pytest.raises(NotFoundError, match="index 5"):
        reg.get(np.int64(5))
