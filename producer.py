# producer.py
import logging
import threading

from chip_model import ChipInvariantError, ChipModel

logger = logging.getLogger(__name__)

GENERATION_TIME = 2
END_TIME = 20
DEFAULT_EMISSIONS = END_TIME // GENERATION_TIME + 1


class Producer:
    """
    Timed chip generator. Sleeps one period, emits one chip, and stops
    after a fixed number of emissions. Runs on its own daemon thread.
    """
    def __init__(self, queue, signal, emissions=DEFAULT_EMISSIONS, period=GENERATION_TIME,
                 rng=None, cancel_event=None, log=None):
        if emissions < 0:
            raise ValueError("emissions must be >= 0")
        if period < 0:
            raise ValueError("period must be >= 0")
        self.queue = queue
        self.signal = signal
        self.emissions = emissions
        self.period = period
        self.rng = rng
        self.cancel_event = cancel_event or threading.Event()
        self._log = log or logger.info

        self._state = "IDLE"
        self._state_lock = threading.Lock()
        self._tick_count = 0
        self.error = None
        self._thread = None

    @property
    def state(self):
        with self._state_lock:
            return self._state

    @property
    def tick_count(self):
        with self._state_lock:
            return self._tick_count

    def is_finished(self):
        return self.state == "FINISHED"

    def start(self):
        with self._state_lock:
            if self._state != "IDLE":
                raise RuntimeError(f"Producer already {self._state.lower()}")
            self._state = "RUNNING"
        self._thread = threading.Thread(target=self.run, name="producer", daemon=True)
        self._thread.start()

    def join(self, timeout=None):
        if self._thread is not None:
            self._thread.join(timeout)
        if self.error is not None:
            raise self.error
        return self.is_finished()

    # --- EMISSION LOOP ---

    def run(self):
        with self._state_lock:
            self._state = "RUNNING"
        try:
            cancelled = False
            while self.tick_count < self.emissions:
                # Event.wait doubles as the ticker and the cancellation check
                if self.cancel_event.wait(self.period):
                    cancelled = True
                    break
                self.emit()
            self._log("Generation cancelled" if cancelled else "Generation finished ✅")
        except ChipInvariantError as e:
            self.error = e
            self.cancel_event.set()
            self._log(f"Generation aborted: {e}")
        finally:
            # last enqueue and signal happen before this flip
            with self._state_lock:
                self._state = "FINISHED"

    def emit(self):
        """One emission cycle: make, enqueue, signal, advance."""
        tick = self.tick_count
        chip = ChipModel.make(tick, self.rng)
        self.queue.enqueue(chip)
        self.signal.notify()
        with self._state_lock:
            self._tick_count += 1
        elapsed = (tick + 1) * self.period
        self._log(f"Chip {chip.chip_id} was made ({chip.chip_type.name}). Time {elapsed:g} seconds")
        return chip
