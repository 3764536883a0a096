# consumer.py
import logging
import threading

logger = logging.getLogger(__name__)


class Consumer:
    """
    Drains the shared queue and solders each chip.
    Stops once the queue is empty and the producer reports finished.
    """
    def __init__(self, queue, signal, is_finished, time_unit=1.0, poll_interval=0.5,
                 cancel_event=None, log=None):
        if poll_interval <= 0:
            raise ValueError("poll_interval must be > 0")
        self.queue = queue
        self.signal = signal
        self.is_finished = is_finished
        self.time_unit = time_unit
        self.poll_interval = poll_interval
        self.cancel_event = cancel_event or threading.Event()
        self._log = log or logger.info

        self.completed = 0
        self.idle_wakeups = 0
        self.processed = []
        self.finished = threading.Event()
        self._thread = None

    def start(self):
        if self._thread is not None:
            raise RuntimeError("Consumer already started")
        self._thread = threading.Thread(target=self.run, name="consumer", daemon=True)
        self._thread.start()

    def join(self, timeout=None):
        if self._thread is not None:
            self._thread.join(timeout)
        return self.finished.is_set()

    def should_continue(self):
        return self.queue.size() != 0 or not self.is_finished()

    def run(self):
        try:
            while self.should_continue():
                if self.cancel_event.is_set():
                    self._log("Soldering cancelled")
                    break
                # Bounded wait: no signal follows the last emission
                self.signal.wait(self.poll_interval)
                chip = self.queue.dequeue()
                if chip is None:
                    self.idle_wakeups += 1
                    continue
                chip.solder(self.time_unit)
                self.processed.append(chip)
                self.completed += 1
                self._log(f"Chip {chip.chip_id} was soldered ({self.completed} done)")
            else:
                self._log("Soldering finished ✅")
        finally:
            self.finished.set()
