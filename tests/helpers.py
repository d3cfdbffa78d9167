"""Shared test helpers for building signed APK archives.

The archives are minimal but structurally real: a jar manifest that names
the signed entries and a PKCS#7 ``SignedData`` signature block that
carries a self-described X.509 certificate. Signatures are not
cryptographically valid, which is fine because nothing in the package
verifies them.
"""

from __future__ import annotations

import zipfile
from datetime import datetime, timezone
from pathlib import Path

from asn1crypto import cms, keys, x509

MANIFEST_ENTRY = "AndroidManifest.xml"


def make_certificate(common_name: str = "Test Signer", serial: int = 1) -> x509.Certificate:
    """Build an X.509 certificate with a dummy RSA key and signature."""
    name = x509.Name.build({"common_name": common_name})
    public_key = keys.RSAPublicKey({
        "modulus": int("c0ffee" * 40, 16) + serial,
        "public_exponent": 65537,
    })
    tbs = x509.TbsCertificate({
        "version": "v3",
        "serial_number": serial,
        "signature": {"algorithm": "sha256_rsa"},
        "issuer": name,
        "validity": {
            "not_before": x509.Time(
                name="utc_time", value=datetime(2020, 1, 1, tzinfo=timezone.utc)
            ),
            "not_after": x509.Time(
                name="utc_time", value=datetime(2045, 1, 1, tzinfo=timezone.utc)
            ),
        },
        "subject": name,
        "subject_public_key_info": keys.PublicKeyInfo.wrap(public_key, "rsa"),
    })
    return x509.Certificate({
        "tbs_certificate": tbs,
        "signature_algorithm": {"algorithm": "sha256_rsa"},
        "signature_value": b"\x5a" * 64,
    })


def make_signature_block(*certificates: x509.Certificate) -> bytes:
    """Wrap certificates in a DER-encoded PKCS#7 ``SignedData``."""
    signed_data = cms.SignedData({
        "version": "v1",
        "digest_algorithms": [{"algorithm": "sha256"}],
        "encap_content_info": {"content_type": "data"},
        "certificates": [
            cms.CertificateChoices(name="certificate", value=cert)
            for cert in certificates
        ],
        "signer_infos": [],
    })
    return cms.ContentInfo({
        "content_type": "signed_data",
        "content": signed_data,
    }).dump()


def jar_manifest(*signed_names: str) -> str:
    """Render a jar manifest naming the given entries."""
    lines = ["Manifest-Version: 1.0", "Created-By: tests", ""]
    for name in signed_names:
        lines += [f"Name: {name}", "SHA-256-Digest: AAAA", ""]
    return "\r\n".join(lines)


def build_apk(
    path: Path,
    certificate: x509.Certificate | None = None,
    *,
    include_manifest_entry: bool = True,
    signed_names: tuple[str, ...] = (MANIFEST_ENTRY, "classes.dex"),
    signature_block: bytes | None = None,
    block_name: str = "META-INF/CERT.RSA",
) -> Path:
    """Write a jar-signed APK to ``path``.

    Args:
        path: Destination file.
        certificate: Signer certificate. None writes no signature block.
        include_manifest_entry: Whether ``AndroidManifest.xml`` exists.
        signed_names: Entries listed in ``META-INF/MANIFEST.MF``.
        signature_block: Raw block bytes overriding ``certificate``.
        block_name: Archive name of the signature block.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        if include_manifest_entry:
            zf.writestr(MANIFEST_ENTRY, b"\x03\x00\x08\x00" + b"\x00" * 4096)
        zf.writestr("classes.dex", b"dex\n035\x00")
        zf.writestr("META-INF/MANIFEST.MF", jar_manifest(*signed_names))
        if signature_block is None and certificate is not None:
            signature_block = make_signature_block(certificate)
        if signature_block is not None:
            zf.writestr("META-INF/CERT.SF", "Signature-Version: 1.0\r\n")
            zf.writestr(block_name, signature_block)
    return path


class RecordingShim:
    """Compatibility shim that records every toggle."""

    def __init__(self) -> None:
        self.enabled = True
        self.events: list[str] = []

    def disable(self) -> None:
        self.enabled = False
        self.events.append("disable")

    def enable(self) -> None:
        self.enabled = True
        self.events.append("enable")


_CENTRAL_HEADER = b"PK\x01\x02"


def patch_central_header(
    path: Path,
    name: str,
    *,
    compress_type: int | None = None,
    flag_bits: int = 0,
) -> Path:
    """Rewrite the central-directory record of ``name`` in place.

    ``compress_type`` replaces the compression method; ``flag_bits`` is
    OR-ed into the general purpose flags (0x1 marks the entry encrypted).
    """
    data = bytearray(path.read_bytes())
    encoded = name.encode("utf-8")
    pos = data.find(_CENTRAL_HEADER)
    while pos != -1:
        name_len = int.from_bytes(data[pos + 28:pos + 30], "little")
        if bytes(data[pos + 46:pos + 46 + name_len]) == encoded:
            if compress_type is not None:
                data[pos + 10:pos + 12] = compress_type.to_bytes(2, "little")
            flags = int.from_bytes(data[pos + 8:pos + 10], "little") | flag_bits
            data[pos + 8:pos + 10] = flags.to_bytes(2, "little")
            path.write_bytes(bytes(data))
            return path
        pos = data.find(_CENTRAL_HEADER, pos + 4)
    raise KeyError(name)
