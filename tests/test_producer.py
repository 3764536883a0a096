"""
Producer tests: emission count, enqueue-before-signal, fatal invariant
violations, and cancellation.
"""

import random
import threading
import time

import pytest

from chip_model import ChipInvariantError
from producer import DEFAULT_EMISSIONS, Producer
from safe_queue import SafeQueue
from signal_channel import SignalChannel


class _BrokenRng:
    def randint(self, a, b):
        return 0


def _producer(**kwargs):
    logs = []
    kwargs.setdefault("period", 0)
    p = Producer(SafeQueue(), SignalChannel(), log=logs.append, **kwargs)
    return p, logs


def test_default_emission_count_matches_generation_window():
    assert DEFAULT_EMISSIONS == 11


def test_emits_exactly_k_items_then_finishes():
    p, logs = _producer(emissions=3, rng=random.Random(0))
    assert p.state == "IDLE"
    p.start()
    p.join(timeout=5)
    assert p.is_finished()
    assert p.tick_count == 3
    assert p.queue.size() == 3
    assert [c.chip_id for c in p.queue.snapshot()] == [0, 1, 2]
    assert logs[-1].startswith("Generation finished")


def test_enqueue_precedes_signal():
    queue, signal = SafeQueue(), SignalChannel()
    seen = []
    original = signal.notify

    def checking_notify():
        seen.append(queue.size() - signal.raised)
        original()

    signal.notify = checking_notify
    p = Producer(queue, signal, emissions=4, period=0, log=lambda m: None)
    p.run()
    assert seen == [1, 1, 1, 1]
    assert signal.raised == queue.size() == 4


def test_finished_never_observed_before_last_item_is_queued():
    p, _ = _producer(emissions=50)
    observed = []

    def watch():
        while not p.is_finished():
            time.sleep(0)
        observed.append(p.queue.size())

    watcher = threading.Thread(target=watch)
    watcher.start()
    p.start()
    p.join(timeout=5)
    watcher.join(timeout=5)
    assert observed == [50]


def test_invalid_cost_is_fatal_and_reraised_on_join():
    p, logs = _producer(emissions=3, rng=_BrokenRng())
    p.start()
    with pytest.raises(ChipInvariantError):
        p.join(timeout=5)
    assert p.is_finished()
    assert p.cancel_event.is_set()
    assert p.queue.size() == 0
    assert any("aborted" in m for m in logs)


def test_cancel_stops_emission_early():
    cancel = threading.Event()
    p, logs = _producer(emissions=1000, period=0.05, cancel_event=cancel)
    p.start()
    time.sleep(0.12)
    cancel.set()
    p.join(timeout=5)
    assert p.is_finished()
    assert p.tick_count < 1000
    assert "Generation cancelled" in logs


def test_start_twice_is_rejected():
    p, _ = _producer(emissions=0)
    p.start()
    p.join(timeout=5)
    with pytest.raises(RuntimeError):
        p.start()


def test_rejects_negative_settings():
    with pytest.raises(ValueError):
        Producer(SafeQueue(), SignalChannel(), emissions=-1)
