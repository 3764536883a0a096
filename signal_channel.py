# signal_channel.py
import threading


class SignalChannel:
    """Counting notification between the producer and the consumer."""

    def __init__(self):
        self._sem = threading.Semaphore(0)
        self._count_lock = threading.Lock()
        self.raised = 0
        self.consumed = 0

    def notify(self):
        with self._count_lock:
            self.raised += 1
        self._sem.release()

    def wait(self, timeout=None):
        got = self._sem.acquire(timeout=timeout)
        if got:
            with self._count_lock:
                self.consumed += 1
        return got
