"""
Print the claims of a JWT without verifying its signature.

Useful for checking what a cached access token or service-account assertion
carries, and whether it is due for a refresh.
"""

from __future__ import annotations

import argparse
import json
from collections.abc import Iterable

from loguru import logger

from oauth2_utils.core import config
from oauth2_utils.core.tokens import decode_jwt, decode_jwt_header, is_jwt_expired

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_EXPIRED = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inspect JWT claims (signature is NOT verified).")
    parser.add_argument("token", help="Encoded JWT (<header>.<payload>.<signature>).")
    parser.add_argument(
        "--header",
        action="store_true",
        help="Also print the decoded token header.",
    )
    parser.add_argument(
        "--check-expiry",
        action="store_true",
        help=f"Exit with status {EXIT_EXPIRED} if the exp claim has passed.",
    )
    parser.add_argument(
        "--leeway",
        type=int,
        default=None,
        help=(
            "Seconds before exp at which the token already counts as expired "
            f"(default: ${config.LEEWAY_ENV_VAR} or {config.DEFAULT_JWT_LEEWAY_SECONDS})."
        ),
    )
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    token = args.token.strip()
    leeway = args.leeway if args.leeway is not None else config.jwt_leeway_seconds()

    try:
        output = {"payload": decode_jwt(token)}
        if args.header:
            output["header"] = decode_jwt_header(token)
        expired = is_jwt_expired(token, leeway_seconds=leeway) if args.check_expiry else False
    except (IndexError, ValueError) as exc:
        logger.error(f"Could not decode token: {exc}")
        return EXIT_INVALID

    print(json.dumps(output, indent=2, ensure_ascii=False))

    if expired:
        logger.warning("Token is expired (leeway={}s).", leeway)
        return EXIT_EXPIRED
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
