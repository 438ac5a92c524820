"""
Encode and inspect JSON Web Tokens for OAuth service-account assertions.

This module provides:
- `encode_jwt` to build a signed token from a claims payload
- `decode_jwt` / `decode_jwt_header` to read token segments back
- `is_jwt_expired` to decide whether a cached token needs refreshing

Notes
-----
- Decoding never verifies the signature. Do not use decoded claims for
  trust decisions; they are only meant for introspection (e.g. reading `exp`).
- JSON is serialized in mapping iteration order. Two payloads with the same
  claims in a different order produce different tokens.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Callable

from google.auth import crypt
from loguru import logger

from oauth2_utils.core import config
from oauth2_utils.core.core_helpers import get_time_in_seconds
from oauth2_utils.core.encoding import b64url_decode_to_str, b64url_encode

# (string_to_sign, key) -> signature string
JwtSigner = Callable[[str, Any], str]


def _to_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def compute_jwt_signature_default(to_sign: str, key: str | bytes | crypt.Signer) -> str:
    """
    Default RS256 signer.

    Parameters
    ----------
    to_sign : str
        The "<header>.<payload>" signing input.
    key : str | bytes | google.auth.crypt.Signer
        PEM-encoded RSA private key, or an already constructed signer.

    Returns
    -------
    str
        URL-safe base64 RSA-SHA256 signature.

    Raises
    ------
    ValueError
        If the key cannot be parsed as an RSA private key.
    """
    signer = key if isinstance(key, crypt.Signer) else crypt.RSASigner.from_string(key)
    return b64url_encode(signer.sign(to_sign))


def encode_jwt(
    payload: Any,
    key: Any,
    *,
    header: Mapping[str, Any] | None = None,
    compute_jwt_signature: JwtSigner | None = None,
) -> str:
    """
    Encode and sign a JWT.

    Parameters
    ----------
    payload : Any
        JSON-serializable claims, usually a mapping.
    key : Any
        Key material handed to the signing function unchanged.
    header : Mapping[str, Any] | None, default None
        Extra header fields merged over {"alg": "RS256", "typ": "JWT"}.
    compute_jwt_signature : JwtSigner | None, default None
        Custom signing function. Anything not callable falls back to
        `compute_jwt_signature_default`.

    Returns
    -------
    str
        "<header>.<payload>.<signature>"
    """
    jwt_header: dict[str, Any] = {"alg": "RS256", "typ": "JWT"}
    jwt_header.update(header or {})

    signer = compute_jwt_signature if callable(compute_jwt_signature) else compute_jwt_signature_default

    to_sign = f"{b64url_encode(_to_json(jwt_header))}.{b64url_encode(_to_json(payload))}"
    logger.debug(f"Encoding JWT with header keys={list(jwt_header)}")

    signature = signer(to_sign, key)
    return f"{to_sign}.{signature}"


def decode_jwt(jwt: str) -> Any:
    """
    Decode and return the JWT payload. The signature is not verified.

    Raises
    ------
    IndexError
        If the token has no payload segment.
    binascii.Error
        If the payload segment is not valid base64url.
    json.JSONDecodeError
        If the payload segment is not valid JSON.
    """
    payload = jwt.split(".")[1]
    return json.loads(b64url_decode_to_str(payload))


def decode_jwt_header(jwt: str) -> Any:
    """Decode and return the JWT header. The signature is not verified."""
    header = jwt.split(".")[0]
    return json.loads(b64url_decode_to_str(header))


def is_jwt_expired(
    jwt: str,
    *,
    now: datetime | None = None,
    leeway_seconds: int | None = None,
) -> bool:
    """
    Check the `exp` claim of a token against the current time.

    Tokens without a numeric `exp` claim are reported as not expired.
    `leeway_seconds` treats tokens that are about to expire as expired,
    so callers refresh slightly early.
    """
    claims = decode_jwt(jwt)
    exp = claims.get("exp") if isinstance(claims, Mapping) else None
    if isinstance(exp, bool) or not isinstance(exp, (int, float)):
        logger.debug("JWT has no numeric exp claim; treating as non-expiring.")
        return False

    if leeway_seconds is None:
        leeway_seconds = config.jwt_leeway_seconds()
    now_seconds = get_time_in_seconds(now or datetime.now(timezone.utc))
    return now_seconds + leeway_seconds >= exp
