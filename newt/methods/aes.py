"""AES signing methods (AES in full-block CFB mode).

These methods provide confidentiality only. ``verify`` always succeeds because a
CFB keystream carries no integrity check, so a token using an AES method is not
protected against forgery. Register a MAC or signature based method when
authenticity matters.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

from cryptography.hazmat.decrepit.ciphers.modes import CFB
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms

from ..errors import KeyInitError
from ..segment import decode_segment, encode_segment
from .base import SigningMethod
from .registry import register_signing_method

KeyMaterial = Union[str, bytes]

IV_SIZE = 16


def _as_bytes(value: KeyMaterial) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise KeyInitError("AES key and iv entries must be str or bytes.")


class SigningMethodAES(SigningMethod):
    """AES family of signing methods.

    ``sign`` expects a mapping with ``"key"`` and ``"iv"`` entries, each a ``str``
    or ``bytes``. The key length must match ``key_size`` and the IV must be one
    16-byte AES block.
    """

    def __init__(self, name: str, key_size: int) -> None:
        self.name = name
        self.key_size = key_size

    def alg(self) -> str:
        return self.name

    def sign(self, signing_string: str, key: Any) -> str:
        aes_key, aes_iv = self._split_key(key)
        return encode_segment(self.encrypt(signing_string.encode("utf-8"), aes_key, aes_iv))

    def verify(self, signing_string: str, signature: str, key: Any) -> None:
        # CFB has no authentication tag; there is nothing to check.
        return None

    def decrypt_signature(self, signature: str, key: Any) -> bytes:
        """Invert :meth:`sign`, returning the plaintext signing string bytes."""
        aes_key, aes_iv = self._split_key(key)
        return self.decrypt(decode_segment(signature), aes_key, aes_iv)

    def encrypt(self, raw: bytes, key: KeyMaterial, iv: KeyMaterial) -> bytes:
        encryptor = self._cipher(key, iv).encryptor()
        return encryptor.update(raw) + encryptor.finalize()

    def decrypt(self, encrypted: bytes, key: KeyMaterial, iv: KeyMaterial) -> bytes:
        decryptor = self._cipher(key, iv).decryptor()
        return decryptor.update(encrypted) + decryptor.finalize()

    def _cipher(self, key: KeyMaterial, iv: KeyMaterial) -> Cipher:
        key_bytes = _as_bytes(key)
        iv_bytes = _as_bytes(iv)
        if len(key_bytes) != self.key_size:
            raise KeyInitError(f"{self.name} requires a {self.key_size}-byte key, got {len(key_bytes)} bytes.")
        if len(iv_bytes) != IV_SIZE:
            raise KeyInitError(f"{self.name} requires a {IV_SIZE}-byte iv, got {len(iv_bytes)} bytes.")
        try:
            return Cipher(algorithms.AES(key_bytes), CFB(iv_bytes))
        except (TypeError, ValueError) as exc:
            raise KeyInitError(str(exc)) from exc

    @staticmethod
    def _split_key(key: Any) -> tuple[KeyMaterial, KeyMaterial]:
        if not isinstance(key, Mapping):
            raise KeyInitError("AES key must be a mapping with 'key' and 'iv' entries.")
        return key.get("key", b""), key.get("iv", b"")


AES128 = SigningMethodAES("AES128", 16)
AES192 = SigningMethodAES("AES192", 24)
AES256 = SigningMethodAES("AES256", 32)

for _method in (AES128, AES192, AES256):
    register_signing_method(_method.alg(), lambda method=_method: method)
