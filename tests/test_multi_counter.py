import pytest

from osroute.multi_counter import MultiCounter


def test_single_increment_is_not_multi():
    c = MultiCounter()
    c.increment(5)
    assert not c.is_multi(5)
    assert list(c.multi_indices()) == []


def test_double_increment_is_multi():
    c = MultiCounter()
    c.increment(5)
    c.increment(5)
    assert c.is_multi(5)
    assert list(c.multi_indices()) == [5]


def test_length_is_highest_index_plus_one():
    c = MultiCounter()
    assert len(c) == 0
    c.increment(9)
    c.increment(2)
    assert len(c) == 10


def test_multi_indices_ascending():
    c = MultiCounter()
    for i in [8, 3, 8, 1, 3, 1, 1, 4]:
        c.increment(i)
    indices = list(c.multi_indices())
    assert indices == sorted(indices)
    assert set(indices) == {1, 3, 8}


def test_unseen_index_is_not_multi():
    c = MultiCounter()
    c.increment(1)
    c.increment(1)
    assert not c.is_multi(1000)


def test_negative_index_raises():
    with pytest.raises(ValueError):
        MultiCounter().increment(-1)