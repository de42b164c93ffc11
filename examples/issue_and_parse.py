"""Example issuing an AES128 token and parsing it back."""

from __future__ import annotations

import os
import time

from newt import AES128, NewtError, Parser, ParserConfig, Token


def resolve_key(token: Token) -> dict:
    # A real key function would look up key material by a header hint.
    return {"key": os.getenv("NEWT_AES_KEY", "0123456789abcdef"), "iv": os.getenv("NEWT_AES_IV", "fedcba9876543210")}


def main() -> None:
    token = Token.new(AES128)
    token.claims = {"sub": "user-42", "scope": "read", "exp": int(time.time()) + 300}
    token_string = token.signed_string(resolve_key(token))
    print("Issued:", token_string)

    parser = Parser(ParserConfig(valid_methods=[AES128.alg()]))
    try:
        parsed = parser.parse(token_string, resolve_key)
    except NewtError as exc:
        print("Rejected:", exc.reason, exc)
        return
    print("Claims:", parsed.claims, "valid:", parsed.valid)

    plaintext = AES128.decrypt_signature(parsed.signature, resolve_key(parsed))
    print("Decrypted signing string:", plaintext.decode("utf-8"))


if __name__ == "__main__":
    main()
