"""NEWT token package.

This package encodes claims into compact ``header.claims.signature`` tokens and
parses them back through a validation pipeline with pluggable signing methods.
"""

from .errors import (
    AlgNotAllowedError,
    AlgUnavailableError,
    AlgUnspecifiedError,
    ContainsBearerPrefixError,
    InvalidSegmentCountError,
    InvalidSignatureError,
    KeyFuncError,
    KeyInitError,
    MalformedSegmentError,
    MalformedTokenError,
    NewtError,
    NoKeyFuncError,
    NoTokenInRequestError,
    TokenExpiredError,
    TokenNotYetValidError,
)
from .methods import (
    AES128,
    AES192,
    AES256,
    DEFAULT_REGISTRY,
    MethodRegistry,
    SigningMethod,
    SigningMethodAES,
    get_signing_method,
    register_signing_method,
)
from .segment import decode_segment, encode_segment
from .token import KeyFunc, Parser, ParserConfig, Token, extract_token, parse, parse_from_request

__all__ = [
    "Token",
    "KeyFunc",
    "Parser",
    "ParserConfig",
    "parse",
    "extract_token",
    "parse_from_request",
    "encode_segment",
    "decode_segment",
    "SigningMethod",
    "SigningMethodAES",
    "AES128",
    "AES192",
    "AES256",
    "MethodRegistry",
    "DEFAULT_REGISTRY",
    "get_signing_method",
    "register_signing_method",
    "NewtError",
    "MalformedSegmentError",
    "InvalidSegmentCountError",
    "ContainsBearerPrefixError",
    "MalformedTokenError",
    "AlgUnspecifiedError",
    "AlgUnavailableError",
    "AlgNotAllowedError",
    "NoKeyFuncError",
    "KeyFuncError",
    "TokenExpiredError",
    "TokenNotYetValidError",
    "InvalidSignatureError",
    "KeyInitError",
    "NoTokenInRequestError",
]
