# scheduler.py
# Wires the chip line: one queue, one signal, one producer, one consumer
import logging
import random
import threading
import time

from config import LineConfig
from consumer import Consumer
from producer import Producer
from safe_queue import SafeQueue
from signal_channel import SignalChannel

logger = logging.getLogger(__name__)


class ProductionLine:
    def __init__(self, config=None):
        self.config = config or LineConfig()
        self.logs = []
        self._log_lock = threading.Lock()
        self._started_at = None
        self.reset()

    def reset(self):
        """Rebuilds the line. Refuses while threads are still working."""
        if self.is_running():
            raise RuntimeError("Cannot reset a running line")
        cfg = self.config
        self.queue = SafeQueue()
        self.signal = SignalChannel()
        self.cancel_event = threading.Event()
        self._started_at = None
        with self._log_lock:
            self.logs = []

        rng = random.Random(cfg.seed) if cfg.seed is not None else None
        self.producer = Producer(
            self.queue, self.signal,
            emissions=cfg.emissions, period=cfg.period_s, rng=rng,
            cancel_event=self.cancel_event, log=self.log,
        )
        self.consumer = Consumer(
            self.queue, self.signal, self.producer.is_finished,
            time_unit=cfg.time_unit_s, poll_interval=cfg.poll_interval_s,
            cancel_event=self.cancel_event, log=self.log,
        )

    def elapsed(self):
        if self._started_at is None:
            return 0.0
        return time.monotonic() - self._started_at

    def log(self, message):
        entry = f"[{self.elapsed():07.2f}] {message}"
        with self._log_lock:
            self.logs.insert(0, entry)
        logger.info(message)

    # --- LIFECYCLE ---

    def start(self):
        self._started_at = time.monotonic()
        self.log(f"Line started ({self.config.emissions} chips every {self.config.period_s:g}s)")
        self.producer.start()
        self.consumer.start()

    def join(self, timeout=None):
        """Waits for both stages. Re-raises a fatal producer error."""
        deadline = None if timeout is None else time.monotonic() + timeout
        self.producer.join(timeout)
        remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
        self.consumer.join(remaining)
        return self.producer.is_finished() and self.consumer.finished.is_set()

    def cancel(self):
        self.cancel_event.set()

    def stop(self):
        """Cancels and waits. The consumer only sees the cancel between chips,
        so this can block for one full solder."""
        self.cancel()
        try:
            return self.join()
        finally:
            self.consumer.join()

    def is_running(self):
        if self._started_at is None:
            return False
        return not (self.producer.is_finished() and self.consumer.finished.is_set())

    # --- MONITORING ---

    def snapshot(self):
        return self.queue.snapshot()

    def stats(self):
        return {
            "produced": self.producer.tick_count,
            "processed": self.consumer.completed,
            "queued": self.queue.size(),
            "idle_wakeups": self.consumer.idle_wakeups,
            "producer_state": self.producer.state,
            "consumer_done": self.consumer.finished.is_set(),
        }
