"""
Per-drone mutual exclusion.
Serializes check-then-act workflows that target the same drone.
"""
import threading
from contextlib import contextmanager
from typing import Dict, Iterator


class DroneLockRegistry:
    """Registry handing out one lock per drone serial number."""
    
    def __init__(self):
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()
    
    def lock_for(self, serial_number: str) -> threading.Lock:
        """Get (or lazily create) the lock guarding a drone."""
        with self._registry_lock:
            lock = self._locks.get(serial_number)
            if lock is None:
                lock = threading.Lock()
                self._locks[serial_number] = lock
            return lock
    
    @contextmanager
    def hold(self, serial_number: str) -> Iterator[None]:
        """Hold the drone's lock for the duration of the block."""
        lock = self.lock_for(serial_number)
        with lock:
            yield
