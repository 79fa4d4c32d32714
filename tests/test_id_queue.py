import random

import pytest

from roadgraph.id_queue import IDKeyPair, MinIDQueue


def _drain(queue):
    out = []
    while queue:
        out.append(queue.pop())
    return out


def test_new_queue_is_empty():
    q = MinIDQueue(5)
    assert len(q) == 0
    assert not q
    assert q.id_count == 5
    assert not q.contains_id(3)


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_pops_in_key_order(seed):
    rng = random.Random(seed)
    n = 100
    q = MinIDQueue(n)
    keys = {i: rng.randrange(1000) for i in range(n)}
    for i, k in keys.items():
        q.push(IDKeyPair(i, k))
    assert len(q) == n
    popped = _drain(q)
    assert [p.key for p in popped] == sorted(keys.values())
    assert sorted(p.id for p in popped) == list(range(n))
    assert all(keys[p.id] == p.key for p in popped)


def test_peek_does_not_remove():
    q = MinIDQueue(4)
    q.push(IDKeyPair(2, 10))
    q.push(IDKeyPair(1, 5))
    assert q.peek() == IDKeyPair(1, 5)
    assert len(q) == 2
    assert q.pop() == IDKeyPair(1, 5)
    assert not q.contains_id(1)


def test_decrease_key():
    q = MinIDQueue(3)
    q.push(IDKeyPair(0, 10))
    q.push(IDKeyPair(1, 20))
    assert q.decrease_key(IDKeyPair(1, 5))
    assert q.get_key(1) == 5
    assert not q.decrease_key(IDKeyPair(1, 7))
    assert q.get_key(1) == 5
    assert q.pop().id == 1


def test_increase_key():
    q = MinIDQueue(3)
    q.push(IDKeyPair(0, 1))
    q.push(IDKeyPair(1, 2))
    q.push(IDKeyPair(2, 3))
    assert q.increase_key(IDKeyPair(0, 50))
    assert not q.increase_key(IDKeyPair(0, 40))
    assert [p.id for p in _drain(q)] == [1, 2, 0]


def test_random_key_changes_keep_order():
    rng = random.Random(42)
    n = 60
    q = MinIDQueue(n)
    keys = {}
    for i in range(n):
        keys[i] = rng.randrange(500)
        q.push(IDKeyPair(i, keys[i]))
    for _ in range(200):
        i = rng.randrange(n)
        k = rng.randrange(500)
        if k < keys[i]:
            assert q.decrease_key(IDKeyPair(i, k))
            keys[i] = k
        elif k > keys[i]:
            assert q.increase_key(IDKeyPair(i, k))
            keys[i] = k
    popped = _drain(q)
    assert [p.key for p in popped] == sorted(keys.values())
    assert all(keys[p.id] == p.key for p in popped)


def test_clear_allows_reuse():
    q = MinIDQueue(4)
    for i in range(4):
        q.push(IDKeyPair(i, i))
    q.clear()
    assert len(q) == 0
    assert not any(q.contains_id(i) for i in range(4))
    q.push(IDKeyPair(3, 1))
    assert q.pop() == IDKeyPair(3, 1)


def test_push_duplicate_raises():
    q = MinIDQueue(2)
    q.push(IDKeyPair(0, 1))
    with pytest.raises(ValueError):
        q.push(IDKeyPair(0, 2))


def test_out_of_range_id_raises():
    q = MinIDQueue(2)
    with pytest.raises(IndexError):
        q.push(IDKeyPair(2, 0))
    with pytest.raises(IndexError):
        q.contains_id(5)


def test_missing_id_raises_key_error():
    q = MinIDQueue(3)
    with pytest.raises(KeyError):
        q.get_key(1)
    with pytest.raises(KeyError):
        q.decrease_key(IDKeyPair(1, 0))
    with pytest.raises(KeyError):
        q.increase_key(IDKeyPair(1, 0))


def test_empty_pop_and_peek_raise():
    q = MinIDQueue(1)
    with pytest.raises(IndexError):
        q.pop()
    with pytest.raises(IndexError):
        q.peek()