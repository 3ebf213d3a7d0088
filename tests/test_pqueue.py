from pqueue import StablePriorityQueue


def _queue(*items):
    q = StablePriorityQueue.empty(lambda item: item[0])
    for item in items:
        q.insert(item)
    return q


def test_empty_queue():
    q = _queue()
    assert len(q) == 0
    assert not q
    assert q.take(2) == []


def test_take_returns_lowest_in_ascending_order():
    q = _queue((5, "e"), (1, "a"), (3, "c"))
    assert q.take(2) == [(1, "a"), (3, "c")]


def test_take_does_not_remove():
    q = _queue((2, "b"), (1, "a"))
    q.take(1)
    assert len(q) == 2
    assert q.take(1) == [(1, "a")]


def test_take_more_than_available():
    q = _queue((4, "x"))
    assert q.take(2) == [(4, "x")]


def test_ties_follow_insertion_order():
    q = _queue((1, "first"), (1, "second"), (0, "lowest"), (1, "third"))
    assert q.take(4) == [(0, "lowest"), (1, "first"), (1, "second"), (1, "third")]


def test_drop_removes_what_take_returned():
    q = _queue((3, "c"), (1, "a"), (1, "b"), (2, "d"))
    taken = q.take(2)
    q.drop(2)
    assert taken == [(1, "a"), (1, "b")]
    assert q.take(10) == [(2, "d"), (3, "c")]


def test_insert_after_drop_keeps_stable_ties():
    q = _queue((2, "old"), (1, "x"), (1, "y"))
    q.drop(2).insert((2, "new"))
    assert q.take(2) == [(2, "old"), (2, "new")]


def test_drop_past_end():
    q = _queue((1, "a"))
    q.drop(5)
    assert len(q) == 0


def test_take_then_drop_many_elements_stays_fast():
    import time

    q = StablePriorityQueue.empty(lambda item: item[0])
    for i in range(20_000):
        q.insert((1 + i % 7, i))
    t0 = time.perf_counter()
    popped = []
    while len(q) > 1:
        a, b = q.take(2)
        q.drop(2).insert((a[0] + b[0], -1))
        popped.append(a)
    assert time.perf_counter() - t0 < 5.0
    assert popped[0] == (1, 0)


def test_take_keeps_heap_consistent():
    q = _queue((3, "c"), (1, "a"), (2, "b"), (1, "a2"))
    for _ in range(3):
        assert q.take(2) == [(1, "a"), (1, "a2")]
    assert q.take(4) == [(1, "a"), (1, "a2"), (2, "b"), (3, "c")]
