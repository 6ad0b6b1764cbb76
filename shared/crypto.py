"""
Credential encoding helpers for HTTP Basic authentication.
"""

from __future__ import annotations

import base64


def encode_basic_auth(username: str, password: str) -> str:
    """Return the ``Authorization`` header value for *username*/*password*.

    The pair is joined as ``username:password``, UTF-8 encoded and
    base64-encoded with the standard alphabet.

    Returns:
        ``"Basic <encoded>"``, e.g. ``"Basic YWxpY2U6c2VjcmV0"`` for
        ``alice``/``secret``.
    """
    token = base64.b64encode(f"{username}:{password}".encode("utf-8"))
    return "Basic " + token.decode("ascii")
