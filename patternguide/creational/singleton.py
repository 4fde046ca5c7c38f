"""
Singleton pattern: a single shared instance behind one accessor.

The shared object is a small ``Logger`` that keeps a history of entries and
forwards them to the standard logging module. Several accessor variants show
the classic trade-offs:

- ``LazyLogger``: creates on first use, unguarded (racy under threads)
- ``SynchronizedLogger``: takes a lock on every access
- ``DoubleCheckedLogger``: locks only while the instance is missing
- ``EagerLogger``: built at import time, so there is nothing to race on
- ``SingletonMeta`` / ``MetaLogger``: the Python metaclass idiom
"""

import logging
import threading
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Logger:
    """Console-style logger whose entries are kept in memory."""

    instances_created = 0

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # Each variant counts its own constructions
        cls.instances_created = 0

    def __init__(self, name: str = "app"):
        type(self).instances_created += 1
        self.name = name
        self.history: List[str] = []

    def log(self, message: str, level: str = "INFO") -> str:
        """Record a message and return the formatted entry."""
        level = level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {level}")

        entry = f"[{level}] {message}"
        self.history.append(entry)
        logger.log(getattr(logging, level), "%s: %s", self.name, message)
        return entry

    def clear(self) -> None:
        self.history.clear()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, entries={len(self.history)})"


class LazyLogger(Logger):
    """Lazy initialization without any locking."""

    _instance = None

    @classmethod
    def get_instance(cls) -> "LazyLogger":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the cached instance (used by tests and demos)."""
        cls._instance = None
        cls.instances_created = 0


class SynchronizedLogger(Logger):
    """Lazy initialization with a lock around every access."""

    _instance = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "SynchronizedLogger":
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        with cls._lock:
            cls._instance = None
            cls.instances_created = 0


class DoubleCheckedLogger(Logger):
    """
    Double-checked locking.

    The first check skips the lock once the instance exists; the second check
    inside the lock stops two threads that both saw ``None`` from creating
    two loggers.
    """

    _instance = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "DoubleCheckedLogger":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        with cls._lock:
            cls._instance = None
            cls.instances_created = 0


class EagerLogger(Logger):
    """Instance created when the module is imported."""

    _instance: "EagerLogger"

    @classmethod
    def get_instance(cls) -> "EagerLogger":
        return cls._instance


EagerLogger._instance = EagerLogger("eager")


class SingletonMeta(type):
    """Metaclass that hands out one instance per class."""

    _instances: Dict[type, Any] = {}
    _lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        if cls not in SingletonMeta._instances:
            with SingletonMeta._lock:
                if cls not in SingletonMeta._instances:
                    SingletonMeta._instances[cls] = super().__call__(*args, **kwargs)
        return SingletonMeta._instances[cls]

    def get_instance(cls):
        return cls()

    def reset_instance(cls) -> None:
        with SingletonMeta._lock:
            SingletonMeta._instances.pop(cls, None)
            cls.instances_created = 0


class MetaLogger(Logger, metaclass=SingletonMeta):
    """Logger made unique by ``SingletonMeta``; constructor arguments after the first call are ignored."""

    pass


VARIANTS = (LazyLogger, SynchronizedLogger, DoubleCheckedLogger, EagerLogger, MetaLogger)


def demo(transcript) -> None:
    """Show that every accessor variant returns the same object."""
    transcript.write("Singleton: one shared Logger per accessor variant")

    for variant in VARIANTS:
        first = variant.get_instance()
        second = variant.get_instance()
        first.log(f"started via {variant.__name__}")
        transcript.write(
            f"  {variant.__name__}: first is second -> {first is second}, "
            f"entries seen through second -> {len(second.history)}"
        )

    meta = MetaLogger("configured-once")
    again = MetaLogger("ignored")
    transcript.write(
        f"  MetaLogger() twice -> same object: {meta is again}, "
        f"name kept from first construction: {again.name!r}"
    )
