import pytest
from hypothesis import given
from hypothesis import strategies as st

from commonkit.fifo import Fifo, FifoEmpty, FifoFull


def _attempt(action, *args):
    try:
        return True, action(*args)
    except (FifoFull, FifoEmpty) as exc:
        return False, type(exc)


def test_push_pop_order():
    fifo = Fifo(8)
    for item in "abc":
        fifo.push(item)
    assert [fifo.pop() for _ in range(3)] == ["a", "b", "c"]


def test_capacity_is_size_minus_one():
    fifo = Fifo(4)
    for item in range(3):
        fifo.push(item)
    assert fifo.is_full()
    with pytest.raises(FifoFull):
        fifo.push(99)
    assert len(fifo) == 3


def test_pop_empty_raises():
    with pytest.raises(FifoEmpty):
        Fifo(4).pop()


def test_peek_empty_raises():
    with pytest.raises(FifoEmpty):
        Fifo(4).peek()


def test_peek_does_not_remove():
    fifo = Fifo(4)
    fifo.push("x")
    assert fifo.peek() == "x"
    assert len(fifo) == 1
    assert fifo.pop() == "x"
    assert len(fifo) == 0


def test_size_one_is_always_full():
    fifo = Fifo(1)
    assert fifo.is_full()
    with pytest.raises(FifoFull):
        fifo.push(1)


def test_invalid_size():
    with pytest.raises(ValueError):
        Fifo(0)


def test_wraps_around():
    fifo = Fifo(3)
    results = []
    for item in range(10):
        fifo.push(item)
        results.append(fifo.pop())
    assert results == list(range(10))
    assert len(fifo) == 0


@given(st.integers(min_value=2, max_value=20), st.lists(st.booleans(), max_size=100))
def test_matches_list_model(size, ops):
    fifo = Fifo(size)
    model = []
    counter = 0
    for do_push in ops:
        if do_push:
            ok, outcome = _attempt(fifo.push, counter)
            assert ok == (len(model) < size - 1)
            if ok:
                model.append(counter)
            else:
                assert outcome is FifoFull
            counter += 1
        else:
            ok, outcome = _attempt(fifo.pop)
            expected = (True, model.pop(0)) if model else (False, FifoEmpty)
            assert (ok, outcome) == expected
        assert len(fifo) == len(model)
        assert fifo.is_full() == (len(model) == size - 1)