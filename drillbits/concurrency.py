"""Demonstrations of a mutex-guarded counter and a counting semaphore."""

from __future__ import annotations

import threading
import time


class SharedCounter:
    """An integer shared between threads, incremented under a lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.value = 0

    def increment(self) -> int:
        """Add one and return the new value."""
        with self._lock:
            self.value += 1
            return self.value


def run_mutex_demo(threads: int = 2) -> list[int]:
    """Have ``threads`` threads each increment one shared counter.

    Returns the value each thread saw right after its increment.
    """
    if threads < 0:
        raise ValueError(f"thread count must be non-negative, got {threads}")
    counter = SharedCounter()
    seen: list[int] = []
    seen_lock = threading.Lock()

    def work() -> None:
        value = counter.increment()
        with seen_lock:
            seen.append(value)

    workers = [threading.Thread(target=work) for _ in range(threads)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return seen


def run_semaphore_demo(
    workers: int = 5, permits: int = 3, hold: float = 1.0
) -> list[str]:
    """Let ``workers`` threads share ``permits`` slots of a critical section.

    Each thread holds its slot for ``hold`` seconds. Returns the entry and
    exit messages in the order they happened.
    """
    if workers < 0:
        raise ValueError(f"worker count must be non-negative, got {workers}")
    if permits < 1:
        raise ValueError(f"permits must be at least 1, got {permits}")
    if hold < 0:
        raise ValueError(f"hold time must be non-negative, got {hold}")

    semaphore = threading.BoundedSemaphore(permits)
    events: list[str] = []
    events_lock = threading.Lock()

    def record(message: str) -> None:
        with events_lock:
            events.append(message)

    def work(number: int) -> None:
        with semaphore:
            record(f"Thread {number} is in the critical section")
            time.sleep(hold)
            record(f"Thread {number} is leaving the critical section")

    threads = [threading.Thread(target=work, args=(n,)) for n in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return events