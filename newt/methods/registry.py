"""Registry mapping ``alg`` identifiers to signing method factories."""

from __future__ import annotations

import threading
from typing import Callable, Dict, List, Optional

from .base import SigningMethod

MethodFactory = Callable[[], SigningMethod]


class MethodRegistry:
    """Thread-safe in-memory registry of signing method factories.

    A later registration for the same ``alg`` replaces the earlier one.
    """

    def __init__(self) -> None:
        self._factories: Dict[str, MethodFactory] = {}
        self._lock = threading.Lock()

    def register(self, alg: str, factory: MethodFactory) -> None:
        with self._lock:
            self._factories[alg] = factory

    def get(self, alg: str) -> Optional[SigningMethod]:
        """Return a method instance for ``alg`` or ``None`` when unregistered."""
        with self._lock:
            factory = self._factories.get(alg)
        if factory is None:
            return None
        return factory()

    def algorithms(self) -> List[str]:
        with self._lock:
            return sorted(self._factories)


def register_signing_method(alg: str, factory: MethodFactory, *, registry: Optional[MethodRegistry] = None) -> None:
    """Register ``factory`` under ``alg``, in ``DEFAULT_REGISTRY`` unless told otherwise."""
    (registry or DEFAULT_REGISTRY).register(alg, factory)


def get_signing_method(alg: str, *, registry: Optional[MethodRegistry] = None) -> Optional[SigningMethod]:
    return (registry or DEFAULT_REGISTRY).get(alg)


DEFAULT_REGISTRY = MethodRegistry()
