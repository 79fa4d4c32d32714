import random

import pytest

from roadgraph.constants import INVALID_ID
from roadgraph.id_set_queue import IDSetMinQueue


def drain(q):
    result = []
    while q:
        result.append(q.pop())
    return result


@pytest.mark.parametrize("n", [1, 2, 3, 5, 6, 7, 8, 9, 17, 100])
def test_pops_all_ids_in_increasing_order(n):
    ids = list(range(n))
    random.Random(n).shuffle(ids)
    q = IDSetMinQueue(n)
    for i in ids:
        q.push(i)
    assert drain(q) == sorted(ids)


def test_duplicates_are_kept_once():
    q = IDSetMinQueue(10)
    pushed = [4, 7, 4, 2, 7, 9, 2]
    for i in pushed:
        q.push(i)
    assert drain(q) == sorted(set(pushed))


def test_empty_queue_peeks_invalid_id():
    q = IDSetMinQueue(5)
    assert not q
    assert q.peek() == INVALID_ID


def test_peek_returns_minimum_without_removing():
    q = IDSetMinQueue(12)
    for i in [9, 3, 11]:
        q.push(i)
    assert q.peek() == 3
    assert 3 in q
    assert q.pop() == 3
    assert 3 not in q
    assert q.peek() == 9


def test_contains_tracks_membership():
    q = IDSetMinQueue(6)
    q.push(5)
    assert 5 in q
    assert 0 not in q


def test_clear_empties_queue():
    q = IDSetMinQueue(9)
    for i in [1, 8, 3]:
        q.push(i)
    q.clear()
    assert not q
    assert all(i not in q for i in range(9))
    q.push(8)
    assert q.pop() == 8


def test_pop_from_empty_raises():
    q = IDSetMinQueue(3)
    with pytest.raises(IndexError):
        q.pop()


def test_push_out_of_range_raises():
    q = IDSetMinQueue(3)
    with pytest.raises(IndexError):
        q.push(3)
    with pytest.raises(IndexError):
        _ = -1 in q


@pytest.mark.parametrize("n", [1, 5, 13, 64])
def test_random_operations_match_set_model(n):
    rng = random.Random(1000 + n)
    q = IDSetMinQueue(n)
    model = set()
    for _ in range(500):
        if model and rng.random() < 0.4:
            assert q.pop() == min(model)
            model.remove(min(model))
        else:
            x = rng.randrange(n)
            q.push(x)
            model.add(x)
        assert q.peek() == (min(model) if model else INVALID_ID)
        assert bool(q) == bool(model)