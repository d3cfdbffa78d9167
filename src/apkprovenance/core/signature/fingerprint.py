"""Catalog-compatible signing-certificate fingerprint.

The fingerprint stored in a catalog's ``sig`` field is not the usual X.509
fingerprint. Repository tooling hex-encodes the DER bytes of the first
signer certificate and hashes that *text* with MD5::

    sig = md5(hexlify(cert_der)).hexdigest()

The package manager side must reproduce this bit for bit, otherwise every
installed package silently stops matching its catalog entry. MD5 is used
purely as an identifier here, not for any security decision.
"""

from __future__ import annotations

import hashlib

_HEX_DIGITS = b"0123456789abcdef"


def hex_encode(raw: bytes) -> bytes:
    """Encode each byte as two lowercase ASCII hex digits, high nibble first."""
    out = bytearray(len(raw) * 2)
    for i, v in enumerate(raw):
        out[i * 2] = _HEX_DIGITS[(v >> 4) & 0xF]
        out[i * 2 + 1] = _HEX_DIGITS[v & 0xF]
    return bytes(out)


def fingerprint(raw_certificate: bytes) -> str:
    """Compute the ``sig`` of an encoded signing certificate.

    Args:
        raw_certificate: DER bytes of the signer certificate.

    Returns:
        32 lowercase hex characters: the MD5 of the hex text of the input.
    """
    return hashlib.md5(hex_encode(raw_certificate)).hexdigest()  # nosec: identifier only
