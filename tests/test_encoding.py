from __future__ import annotations

import binascii

import pytest

from oauth2_utils.core.encoding import b64url_decode, b64url_decode_to_str, b64url_encode


def test_encode_strips_padding_and_uses_url_safe_alphabet() -> None:
    assert b64url_encode(b"\xfb\xff") == "-_8"
    assert b64url_encode("ab") == "YWI"


def test_decode_accepts_padded_and_unpadded_input() -> None:
    assert b64url_decode("YWI") == b"ab"
    assert b64url_decode("YWI=") == b"ab"
    assert b64url_decode(b"-_8") == b"\xfb\xff"


def test_decode_to_str_reads_utf8() -> None:
    assert b64url_decode_to_str(b64url_encode("héllo")) == "héllo"


def test_decode_rejects_invalid_length() -> None:
    with pytest.raises(binascii.Error):
        b64url_decode("A")
