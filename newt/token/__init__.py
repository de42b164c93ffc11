"""Token entity, parser and request extraction."""

from .parser import Parser, ParserConfig, parse
from .request import extract_token, parse_from_request
from .types import KeyFunc, Token, numeric_claim

__all__ = [
    "Token",
    "KeyFunc",
    "numeric_claim",
    "Parser",
    "ParserConfig",
    "parse",
    "extract_token",
    "parse_from_request",
]
