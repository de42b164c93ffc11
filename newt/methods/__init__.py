"""Signing method interface, registry and the built-in AES methods."""

from .aes import AES128, AES192, AES256, SigningMethodAES
from .base import SigningMethod
from .registry import DEFAULT_REGISTRY, MethodRegistry, get_signing_method, register_signing_method

__all__ = [
    "SigningMethod",
    "SigningMethodAES",
    "AES128",
    "AES192",
    "AES256",
    "DEFAULT_REGISTRY",
    "MethodRegistry",
    "get_signing_method",
    "register_signing_method",
]
