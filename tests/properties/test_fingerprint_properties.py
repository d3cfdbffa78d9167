"""Property-based tests for signing-certificate fingerprints.

Verifies:
- Fingerprints are deterministic.
- Every fingerprint is 32 lowercase hex characters.
- The fingerprint is the MD5 of the lowercase hex text of the input.
"""
from __future__ import annotations

import hashlib
import re

from hypothesis import given
from hypothesis import strategies as st

from apkprovenance.core.signature import fingerprint, hex_encode

HEX32 = re.compile(r"[0-9a-f]{32}")


@given(raw=st.binary(max_size=2048))
def test_fingerprint_is_deterministic(raw: bytes) -> None:
    assert fingerprint(raw) == fingerprint(bytes(raw))


@given(raw=st.binary(max_size=2048))
def test_fingerprint_is_32_lowercase_hex(raw: bytes) -> None:
    assert HEX32.fullmatch(fingerprint(raw))


@given(raw=st.binary(max_size=2048))
def test_hex_encoding_doubles_length(raw: bytes) -> None:
    encoded = hex_encode(raw)
    assert len(encoded) == 2 * len(raw)
    assert encoded == raw.hex().encode("ascii")


@given(raw=st.binary(max_size=2048))
def test_fingerprint_is_md5_of_hex_text(raw: bytes) -> None:
    assert fingerprint(raw) == hashlib.md5(raw.hex().encode("ascii")).hexdigest()
