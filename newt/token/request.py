"""Locate a token in an incoming HTTP request and parse it."""

from __future__ import annotations

from typing import Optional

import structlog
from starlette.requests import Request

from ..errors import NoTokenInRequestError
from .parser import Parser
from .types import KeyFunc, Token

logger = structlog.get_logger(__name__)

AUTHORIZATION_HEADER = "Authorization"
BEARER_SCHEME = "BEARER "
ACCESS_TOKEN_FIELD = "access_token"
MAX_FORM_MEMORY = 10 * 1024 * 1024


async def extract_token(request: Request) -> str:
    """Return the raw token carried by ``request``.

    Looks at a ``Bearer`` Authorization header, then the ``access_token`` form
    field, then the ``access_token`` query parameter.
    """
    auth_header = request.headers.get(AUTHORIZATION_HEADER, "")
    if auth_header[: len(BEARER_SCHEME)].upper() == BEARER_SCHEME:
        return auth_header[len(BEARER_SCHEME):]

    form = await request.form(max_part_size=MAX_FORM_MEMORY)
    candidate = form.get(ACCESS_TOKEN_FIELD)
    if isinstance(candidate, str) and candidate:
        return candidate

    candidate = request.query_params.get(ACCESS_TOKEN_FIELD)
    if candidate:
        return candidate

    logger.info("token_not_found", path=request.url.path)
    raise NoTokenInRequestError()


async def parse_from_request(request: Request, key_func: Optional[KeyFunc], *, parser: Optional[Parser] = None) -> Token:
    """Extract the token from ``request`` and run it through ``parser``."""
    token_string = await extract_token(request)
    return (parser or Parser()).parse(token_string, key_func)
