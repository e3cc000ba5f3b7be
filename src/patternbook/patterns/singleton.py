"""Singleton pattern: one shared application configuration.

In Python a module is already a singleton; the metaclass below is the explicit
version of the pattern for when a class is genuinely needed.
"""

from __future__ import annotations

import threading
from typing import Any, ClassVar


class SingletonMeta(type):
    """Metaclass that creates at most one instance per class."""

    _instances: ClassVar[dict[type, Any]] = {}
    _lock: ClassVar[threading.RLock] = threading.RLock()

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        # Double-checked so the lock is only taken on first construction.
        # Reentrant: one singleton may build another inside its __init__.
        if cls not in SingletonMeta._instances:
            with SingletonMeta._lock:
                if cls not in SingletonMeta._instances:
                    SingletonMeta._instances[cls] = super().__call__(*args, **kwargs)
        return SingletonMeta._instances[cls]

    def reset(cls) -> None:
        """Forget the instance of `cls` (used by tests)."""
        with SingletonMeta._lock:
            SingletonMeta._instances.pop(cls, None)


class AppConfig(metaclass=SingletonMeta):
    """Process-wide settings; every `AppConfig()` call returns the same object."""

    def __init__(self) -> None:
        self._values: dict[str, Any] = {"debug": False, "site_name": "Patternbook"}

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value


def demo() -> list[str]:
    AppConfig.reset()
    first = AppConfig()
    first.set("debug", True)
    second = AppConfig()
    return [
        f"same instance: {first is second}",
        f"debug seen through second reference: {second.get('debug')}",
    ]
