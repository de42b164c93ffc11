"""Token datatypes."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Callable, Dict, Mapping, Optional

from ..methods.base import SigningMethod
from ..segment import encode_segment

TOKEN_TYPE = "NEWT"
DELIMITER = "."

HEADER_TYPE = "typ"
HEADER_ALG = "alg"
CLAIM_EXPIRATION = "exp"
CLAIM_NOT_BEFORE = "nbf"


def numeric_claim(claims: Mapping[str, Any], name: str) -> Optional[int]:
    """Return claim ``name`` as whole seconds, or ``None`` when absent or not numeric.

    Integers, floats and ``Decimal`` values are accepted. Strings and booleans are
    ignored so the caller skips the check rather than failing.
    """
    value = claims.get(name)
    if isinstance(value, bool):
        return None
    if not isinstance(value, (int, float, Decimal)):
        return None
    try:
        return int(value)
    except (ValueError, OverflowError):
        # NaN and infinities
        return None


@dataclass
class Token:
    """A NEWT token, either being built for signing or produced by a parser.

    ``valid`` is only ever set by a successful parse.
    """

    raw: str = ""
    method: Optional[SigningMethod] = None
    header: Dict[str, Any] = field(default_factory=dict)
    claims: Dict[str, Any] = field(default_factory=dict)
    signature: str = ""
    valid: bool = False

    @classmethod
    def new(cls, method: SigningMethod) -> "Token":
        """Create an unsigned token bound to ``method``."""
        return cls(
            method=method,
            header={HEADER_TYPE: TOKEN_TYPE, HEADER_ALG: method.alg()},
            claims={},
        )

    @property
    def expires_at(self) -> Optional[int]:
        return numeric_claim(self.claims, CLAIM_EXPIRATION)

    @property
    def not_before(self) -> Optional[int]:
        return numeric_claim(self.claims, CLAIM_NOT_BEFORE)

    def signing_string(self) -> str:
        """Return ``base64url(header).base64url(claims)``."""
        parts = []
        for source in (self.header, self.claims):
            payload = json.dumps(source, sort_keys=True, separators=(",", ":"), allow_nan=False).encode("utf-8")
            parts.append(encode_segment(payload))
        return DELIMITER.join(parts)

    def signed_string(self, key: Any) -> str:
        """Return the complete token string, signed with the bound method."""
        if self.method is None:
            raise ValueError("Token has no signing method bound.")
        signing_string = self.signing_string()
        signature = self.method.sign(signing_string, key)
        return DELIMITER.join((signing_string, signature))


KeyFunc = Callable[[Token], Any]
