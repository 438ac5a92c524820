from __future__ import annotations

import json
import time

import pytest

from oauth2_utils.core.tokens import encode_jwt
from oauth2_utils.scripts import inspect_jwt


def _token(claims: dict) -> str:
    return encode_jwt(claims, "k", header={"kid": "abc"}, compute_jwt_signature=lambda s, k: "sig")


def test_prints_payload(capsys: pytest.CaptureFixture[str]) -> None:
    assert inspect_jwt.main([_token({"sub": "user-1"})]) == inspect_jwt.EXIT_OK
    assert json.loads(capsys.readouterr().out) == {"payload": {"sub": "user-1"}}


def test_prints_header_when_requested(capsys: pytest.CaptureFixture[str]) -> None:
    assert inspect_jwt.main([_token({"sub": "user-1"}), "--header"]) == inspect_jwt.EXIT_OK
    output = json.loads(capsys.readouterr().out)
    assert output["header"] == {"alg": "RS256", "typ": "JWT", "kid": "abc"}


def test_check_expiry_flags_expired_token(capsys: pytest.CaptureFixture[str]) -> None:
    token = _token({"exp": int(time.time()) - 10})
    assert inspect_jwt.main([token, "--check-expiry", "--leeway", "0"]) == inspect_jwt.EXIT_EXPIRED


def test_check_expiry_accepts_fresh_token(capsys: pytest.CaptureFixture[str]) -> None:
    token = _token({"exp": int(time.time()) + 3600})
    assert inspect_jwt.main([token, "--check-expiry", "--leeway", "0"]) == inspect_jwt.EXIT_OK


@pytest.mark.parametrize("bad", ["garbage", "e30.A.sig", "e30.bm90IGpzb24.sig"])
def test_invalid_token_returns_error_code(bad: str, capsys: pytest.CaptureFixture[str]) -> None:
    assert inspect_jwt.main([bad]) == inspect_jwt.EXIT_INVALID
    assert capsys.readouterr().out == ""
