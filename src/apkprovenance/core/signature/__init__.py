"""Signing-certificate extraction and fingerprinting.

- ``fingerprint``: the catalog-compatible ``sig`` digest.
- ``guard``: the certificate-read critical section around the
  compatibility shim.
- ``archive``: the APK reader that pairs the manifest entry with the
  certificates of the archive signature.
"""

from apkprovenance.core.signature.archive import (
    ApkArchive,
    ArchiveEntry,
    SIGNATURE_BLOCK_RE,
)
from apkprovenance.core.signature.fingerprint import fingerprint, hex_encode
from apkprovenance.core.signature.guard import (
    CertificateReadGuard,
    CompatibilityShim,
    GuardToken,
    NullShim,
    default_guard,
)

__all__ = [
    "ApkArchive",
    "ArchiveEntry",
    "CertificateReadGuard",
    "CompatibilityShim",
    "GuardToken",
    "NullShim",
    "SIGNATURE_BLOCK_RE",
    "default_guard",
    "fingerprint",
    "hex_encode",
]
