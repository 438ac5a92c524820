"""URL-safe base64 helpers used for JWT segments."""
from __future__ import annotations

import base64


def b64url_encode(data: bytes | str) -> str:
    """Encode bytes (or UTF-8 text) as unpadded URL-safe base64."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def b64url_decode(data: str | bytes) -> bytes:
    """Decode URL-safe base64, with or without trailing padding."""
    if isinstance(data, bytes):
        data = data.decode("ascii")
    padded = data + "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(padded.encode("ascii"))


def b64url_decode_to_str(data: str | bytes) -> str:
    return b64url_decode(data).decode("utf-8")
