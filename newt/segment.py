"""Base64url segment codec for the three token fields.

Padding is stripped on encode because ``.`` delimits the fields and ``=`` would
otherwise have to be escaped; decode restores it before decoding.
"""

from __future__ import annotations

import base64
import binascii
import re

from .errors import MalformedSegmentError

_SEGMENT_RE = re.compile(r"[A-Za-z0-9_-]*={0,2}")


def encode_segment(data: bytes) -> str:
    """Return URL-safe base64 text for ``data`` with trailing padding removed."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def decode_segment(segment: str) -> bytes:
    """Decode a segment produced by :func:`encode_segment`.

    Raises ``MalformedSegmentError`` when the text is not URL-safe base64.
    """
    remainder = len(segment) % 4
    if remainder:
        segment += "=" * (4 - remainder)
    if not _SEGMENT_RE.fullmatch(segment):
        raise MalformedSegmentError()
    try:
        return base64.urlsafe_b64decode(segment.encode("ascii"))
    except (binascii.Error, ValueError) as exc:
        raise MalformedSegmentError() from exc
