import warnings

import pytest

from newt.errors import KeyInitError
from newt.methods.aes import AES128, AES256

KEY = b"0123456789abcdef"
KEY_MAP = {"key": KEY, "iv": KEY}


def test_cfb_known_answer() -> None:
    # NIST SP 800-38A, CFB128-AES128 block 1
    key = bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c")
    iv = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
    plaintext = bytes.fromhex("6bc1bee22e409f96e93d7e117393172a")
    assert AES128.encrypt(plaintext, key, iv) == bytes.fromhex("3b3fd92eb72dad20333449f8e83cfb4a")


def test_encrypt_preserves_length_and_decrypt_inverts() -> None:
    for raw in (b"", b"x", b'{"foo":"bar"}', b"a" * 37):
        encrypted = AES128.encrypt(raw, KEY, KEY)
        assert len(encrypted) == len(raw)
        assert AES128.decrypt(encrypted, KEY, KEY) == raw


def test_sign_then_decrypt_signature() -> None:
    signature = AES128.sign("header.claims", KEY_MAP)
    assert "." not in signature
    assert AES128.decrypt_signature(signature, KEY_MAP) == b"header.claims"


def test_text_key_material_is_accepted() -> None:
    text_key = {"key": KEY.decode(), "iv": KEY.decode()}
    assert AES128.sign("payload", text_key) == AES128.sign("payload", KEY_MAP)


def test_aes256_requires_32_byte_key() -> None:
    key = {"key": KEY * 2, "iv": KEY}
    assert AES256.decrypt_signature(AES256.sign("payload", key), key) == b"payload"
    with pytest.raises(KeyInitError):
        AES256.sign("payload", KEY_MAP)


@pytest.mark.parametrize(
    "key",
    [
        {"key": b"short", "iv": KEY},
        {"key": KEY, "iv": b"short"},
        {"iv": KEY},
        {"key": KEY},
        {"key": 5, "iv": KEY},
        "not-a-mapping",
        None,
    ],
)
def test_bad_key_material_raises_key_init_error(key: object) -> None:
    with pytest.raises(KeyInitError):
        AES128.sign("payload", key)


def test_verify_always_succeeds() -> None:
    assert AES128.verify("header.claims", "tampered", None) is None
    assert AES128.alg() == "AES128"


def test_cipher_construction_emits_no_deprecation_warning() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        signature = AES128.sign("payload", KEY_MAP)
        assert AES128.decrypt_signature(signature, KEY_MAP) == b"payload"

