"""
Debounce decorator built on threading.Timer.
"""

import functools
import logging
import threading
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class Debounced:
    """
    Callable wrapper that delays ``func`` until calls stop for ``delay`` seconds.

    Every call cancels the pending one and schedules a new call with the
    latest arguments. The wrapped function runs on a timer thread and its
    return value is discarded.
    """

    def __init__(self, func: Callable[..., Any], delay: float):
        if delay < 0:
            raise ValueError("delay cannot be negative")
        self.func = func
        self.delay = delay
        self._timer: Optional[threading.Timer] = None
        self._pending = None
        self._generation = 0
        self._lock = threading.Lock()
        functools.update_wrapper(self, func)

    def __call__(self, *args, **kwargs) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._pending = (args, kwargs)
            self._generation += 1
            self._timer = threading.Timer(self.delay, self._fire, args=(self._generation,))
            self._timer.daemon = True
            self._timer.start()

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._pending is not None

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._pending = None

    def flush(self) -> None:
        """Run the pending call now instead of waiting for the timer."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
        self._fire()

    def _fire(self, generation: Optional[int] = None) -> None:
        with self._lock:
            # A superseded timer that was already running must not steal the newer call
            if generation is not None and generation != self._generation:
                return
            pending, self._pending = self._pending, None
            self._timer = None
        if pending is None:
            return

        args, kwargs = pending
        try:
            self.func(*args, **kwargs)
        except Exception:
            logger.exception(f"Debounced call to {getattr(self.func, '__name__', self.func)!r} failed")
            raise


def debounce(delay: Optional[float] = None) -> Callable[[Callable[..., Any]], Debounced]:
    """
    Decorator form of Debounced.

    Without an explicit delay the configured debounce delay is used.

    Example:
        @debounce(0.3)
        def push_search(query):
            ...
    """
    def decorator(func: Callable[..., Any]) -> Debounced:
        return Debounced(func, delay if delay is not None else _configured_delay())
    return decorator


def _configured_delay() -> float:
    from config_manager import get_config
    return get_config().debounce.delay_seconds
