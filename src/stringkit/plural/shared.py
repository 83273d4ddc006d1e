"""
Lazily constructed, process-wide shared instance.

SharedResource wraps a zero-argument factory. The first get() builds the
instance under a lock; every later get() returns the published instance
without locking. Tests substitute an instance with override().
"""

__all__ = ["SharedResource"]

import threading
from contextlib import contextmanager
from typing import Callable, Generic, Iterator, Optional, TypeVar

from loguru import logger

T = TypeVar("T")


class SharedResource(Generic[T]):
    """
    Once-only holder for an expensive shared object.

    Construction is double-checked: concurrent first callers block on the
    lock, exactly one of them calls the factory, and all of them receive
    the same fully constructed instance. If the factory raises, nothing is
    published and the next get() tries again. The factory must not return
    None.

    Example:
        >>> engine = SharedResource(dict, name="cache")
        >>> engine.get() is engine.get()
        True
    """

    def __init__(self, factory: Callable[[], T], name: Optional[str] = None):
        self._factory = factory
        self._name = name or getattr(factory, "__name__", repr(factory))
        self._lock = threading.Lock()
        self._instance: Optional[T] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_initialized(self) -> bool:
        return self._instance is not None

    def get(self) -> T:
        """Return the shared instance, constructing it on first use."""
        instance = self._instance
        if instance is not None:
            return instance

        with self._lock:
            if self._instance is None:
                logger.debug("Constructing shared resource {}", self._name)
                # Publish only after the factory returns a complete object
                self._instance = self._factory()
            return self._instance

    def reset(self) -> None:
        """Drop the instance; the next get() constructs a new one."""
        with self._lock:
            self._instance = None

    @contextmanager
    def override(self, instance: T) -> Iterator[T]:
        """
        Use instance instead of the factory's product inside a with block.

        Args:
            instance: Replacement object returned by get() within the block

        Example:
            >>> resource = SharedResource(list)
            >>> with resource.override(["stub"]):
            ...     resource.get()
            ['stub']
        """
        with self._lock:
            previous = self._instance
            self._instance = instance
        try:
            yield instance
        finally:
            with self._lock:
                self._instance = previous
