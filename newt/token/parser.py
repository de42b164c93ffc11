"""Token parsing and validation pipeline."""

from __future__ import annotations

import json
import math
import os
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Dict, Optional, Sequence

import structlog

from ..errors import (
    AlgNotAllowedError,
    AlgUnavailableError,
    AlgUnspecifiedError,
    ContainsBearerPrefixError,
    InvalidSegmentCountError,
    InvalidSignatureError,
    KeyFuncError,
    MalformedSegmentError,
    MalformedTokenError,
    NewtError,
    NoKeyFuncError,
    TokenExpiredError,
    TokenNotYetValidError,
)
from ..methods.registry import DEFAULT_REGISTRY, MethodRegistry
from ..segment import decode_segment
from ..utils.time import unix_seconds, utc_now
from .types import DELIMITER, HEADER_ALG, KeyFunc, Token

logger = structlog.get_logger(__name__)

BEARER_PREFIX = "bearer"

_TRUTHY = {"1", "true", "yes", "on"}

# float64 range
_MAX_DECIMAL_EXPONENT = 308


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-finite JSON constant {name}")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"JSON number {text} overflows a float")
    return value


def _finite_decimal(text: str) -> Decimal:
    value = Decimal(text)
    if not value.is_finite() or value.adjusted() > _MAX_DECIMAL_EXPONENT:
        raise ValueError(f"JSON number {text} is out of range")
    return value


@dataclass
class ParserConfig:
    """Parser options.

    ``valid_methods`` restricts accepted ``alg`` values when non-empty.
    ``use_json_number`` decodes claim floats as ``Decimal``.
    ``time_func`` supplies "now" for the ``exp`` and ``nbf`` checks.
    """

    valid_methods: Optional[Sequence[str]] = None
    use_json_number: bool = False
    time_func: Callable[[], datetime] = field(default=utc_now)

    @classmethod
    def from_env(cls) -> "ParserConfig":
        methods = os.getenv("NEWT_VALID_METHODS", "")
        return cls(
            valid_methods=[m.strip() for m in methods.split(",") if m.strip()] or None,
            use_json_number=os.getenv("NEWT_USE_JSON_NUMBER", "").strip().lower() in _TRUTHY,
        )


class Parser:
    """Parse and validate NEWT token strings.

    Checks run in a fixed order and the first failure is raised. Apart from a
    segment count failure, the raised error carries the partially populated token
    as ``exc.token``.
    """

    def __init__(self, config: Optional[ParserConfig] = None, *, registry: Optional[MethodRegistry] = None) -> None:
        self.config = config or ParserConfig()
        self.registry = registry or DEFAULT_REGISTRY

    def parse(self, token_string: str, key_func: Optional[KeyFunc]) -> Token:
        try:
            return self._parse(token_string, key_func)
        except NewtError as exc:
            logger.info("token_rejected", reason=exc.reason)
            raise

    def _parse(self, token_string: str, key_func: Optional[KeyFunc]) -> Token:
        parts = token_string.split(DELIMITER)
        if len(parts) != 3:
            raise InvalidSegmentCountError()

        logger.debug("segments_identified", segment_lengths=[len(p) for p in parts])

        token = Token(raw=token_string)

        try:
            header_bytes = decode_segment(parts[0])
        except MalformedSegmentError as exc:
            if token_string.lower().startswith(BEARER_PREFIX):
                raise ContainsBearerPrefixError(token=token) from exc
            raise MalformedTokenError(token=token) from exc
        token.header = self._load_object(header_bytes, token, use_json_number=False)

        try:
            claims_bytes = decode_segment(parts[1])
        except MalformedSegmentError as exc:
            raise MalformedTokenError(token=token) from exc
        token.claims = self._load_object(claims_bytes, token, use_json_number=self.config.use_json_number)

        alg = token.header.get(HEADER_ALG)
        if not isinstance(alg, str):
            raise AlgUnspecifiedError(token=token)
        token.method = self.registry.get(alg)
        if token.method is None:
            raise AlgUnavailableError(token=token)

        if self.config.valid_methods:
            method_alg = token.method.alg()
            if method_alg not in self.config.valid_methods:
                raise AlgNotAllowedError(method_alg, token=token)

        if key_func is None:
            raise NoKeyFuncError(token=token)
        try:
            key = key_func(token)
        except Exception as exc:
            raise KeyFuncError(str(exc) or None, token=token) from exc

        now = unix_seconds(self.config.time_func)
        exp = token.expires_at
        if exp is not None and now > exp:
            raise TokenExpiredError(token=token)
        nbf = token.not_before
        if nbf is not None and now < nbf:
            raise TokenNotYetValidError(token=token)

        token.signature = parts[2]
        try:
            token.method.verify(DELIMITER.join(parts[:2]), token.signature, key)
        except Exception as exc:
            raise InvalidSignatureError(token=token) from exc

        token.valid = True
        logger.debug("token_accepted", alg=alg)
        return token

    @staticmethod
    def _load_object(data: bytes, token: Token, *, use_json_number: bool) -> Dict[str, Any]:
        try:
            value = json.loads(
                data,
                parse_float=_finite_decimal if use_json_number else _finite_float,
                parse_constant=_reject_constant,
            )
        except (ValueError, RecursionError) as exc:
            raise MalformedTokenError(token=token) from exc
        if not isinstance(value, dict):
            raise MalformedTokenError(token=token)
        return value


def parse(token_string: str, key_func: Optional[KeyFunc]) -> Token:
    """Parse ``token_string`` with a default parser and the default registry."""
    return Parser().parse(token_string, key_func)
