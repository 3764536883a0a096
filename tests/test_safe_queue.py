"""
Tests for SafeQueue: FIFO order, empty dequeue, and no loss under threads.
"""

import threading

from safe_queue import SafeQueue


def test_fifo_order():
    q = SafeQueue()
    for i in range(10):
        q.enqueue(i)
    assert [q.dequeue() for _ in range(10)] == list(range(10))


def test_empty_dequeue_is_idempotent():
    q = SafeQueue()
    for _ in range(5):
        assert q.dequeue() is None
        assert q.size() == 0
    q.enqueue("a")
    assert q.dequeue() == "a"
    assert q.dequeue() is None
    assert len(q) == 0


def test_size_tracks_enqueues_minus_dequeues():
    q = SafeQueue()
    q.enqueue(1)
    q.enqueue(2)
    q.enqueue(3)
    q.dequeue()
    assert q.size() == 2
    assert q.snapshot() == [2, 3]


def test_no_loss_or_duplication_under_concurrency():
    n = 20000
    q = SafeQueue()
    got = []
    bad_sizes = []

    def produce():
        for i in range(n):
            q.enqueue(i)
            # at most i + 1 items were ever enqueued at this point
            size = q.size()
            if not 0 <= size <= i + 1:
                bad_sizes.append((i, size))

    def consume():
        while len(got) < n:
            item = q.dequeue()
            if item is None:
                continue
            got.append(item)
            size = q.size()
            # consumed len(got), so at most n - len(got) remain
            if not 0 <= size <= n - len(got):
                bad_sizes.append((len(got), size))

    threads = [threading.Thread(target=produce), threading.Thread(target=consume)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)

    assert got == list(range(n))
    assert q.size() == 0
    assert bad_sizes == []
