# safe_queue.py
import threading
from collections import deque


class SafeQueue:
    """
    FIFO shared by the producer and consumer threads.
    Every access goes through one lock, so size() never disagrees with
    the contents.
    """
    def __init__(self, items=()):
        self._lock = threading.Lock()
        self._elements = deque(items)

    def enqueue(self, item):
        with self._lock:
            self._elements.append(item)

    def dequeue(self):
        """Returns the head, or None when the queue is empty."""
        with self._lock:
            if not self._elements:
                return None
            return self._elements.popleft()

    def size(self):
        with self._lock:
            return len(self._elements)

    def snapshot(self):
        with self._lock:
            return list(self._elements)

    def __len__(self):
        return self.size()
