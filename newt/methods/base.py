"""Base signing method interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class SigningMethod(ABC):
    """Abstract base class for token transforms.

    Subclass and register a factory to add new methods for signing or verifying
    tokens.
    """

    @abstractmethod
    def alg(self) -> str:
        """Return the ``alg`` header identifier for this method (e.g. ``AES128``)."""

    @abstractmethod
    def sign(self, signing_string: str, key: Any) -> str:
        """Return the encoded third token segment for ``signing_string``."""

    @abstractmethod
    def verify(self, signing_string: str, signature: str, key: Any) -> None:
        """Return ``None`` if ``signature`` is valid; raise otherwise."""
