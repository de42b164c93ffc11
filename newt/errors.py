"""Exception taxonomy for token encoding and validation.

Every failure is terminal for the call that raised it. Callers branch on the
exception class (or its ``reason`` code), never on message text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .token.types import Token


class NewtError(Exception):
    """Base class for all token errors."""

    reason = "newt_error"
    message = "Token error."

    def __init__(self, message: Optional[str] = None, *, token: Optional["Token"] = None) -> None:
        super().__init__(message or self.message)
        self.token = token


class MalformedSegmentError(NewtError):
    """A segment is not valid URL-safe base64."""

    reason = "malformed_segment"
    message = "Segment is not valid base64url."


class InvalidSegmentCountError(NewtError):
    reason = "invalid_segment_count"
    message = "Token contains an invalid number of segments."


class ContainsBearerPrefixError(NewtError):
    """The caller passed a whole ``Authorization`` header value instead of a token."""

    reason = "contains_bearer_prefix"
    message = "Token string should not contain 'bearer'."


class MalformedTokenError(NewtError):
    reason = "malformed"
    message = "Token is malformed."


class AlgUnspecifiedError(NewtError):
    reason = "alg_unspecified"
    message = "Signing method (alg) is unspecified."


class AlgUnavailableError(NewtError):
    reason = "alg_unavailable"
    message = "Signing method (alg) is unavailable."


class AlgNotAllowedError(NewtError):
    """The algorithm is registered but not in the parser's allow-list."""

    reason = "alg_not_allowed"

    def __init__(self, alg: str, *, token: Optional["Token"] = None) -> None:
        super().__init__(f"Signing method (alg) {alg} is invalid.", token=token)
        self.alg = alg


class NoKeyFuncError(NewtError):
    reason = "no_key_func"
    message = "No KeyFunc was provided."


class KeyFuncError(NewtError):
    """The key-resolution callback raised; the original exception is ``__cause__``."""

    reason = "key_func_error"
    message = "KeyFunc failed to resolve a key."


class TokenExpiredError(NewtError):
    reason = "expired"
    message = "Token is expired."


class TokenNotYetValidError(NewtError):
    reason = "not_yet_valid"
    message = "Token is not valid yet."


class InvalidSignatureError(NewtError):
    reason = "invalid_signature"
    message = "Invalid signature."


class KeyInitError(NewtError):
    """Key material cannot initialize the cipher."""

    reason = "key_init_error"
    message = "Key material is invalid for this signing method."


class NoTokenInRequestError(NewtError):
    reason = "no_token_in_request"
    message = "No token in request."
