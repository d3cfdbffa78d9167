"""Read-only access to an installed APK and the certificates that sign it.

An APK is a jar-signed ZIP archive. ``META-INF/MANIFEST.MF`` names every
signed entry, and each signature block (``META-INF/*.RSA``, ``*.DSA`` or
``*.EC``) is a PKCS#7 ``SignedData`` whose certificate set starts with the
signer certificate. Mirroring ``java.util.jar``, an entry only reports its
certificates once its content stream has been read to the end.

Usage::

    with ApkArchive(path) as apk:
        entry = apk.entry("AndroidManifest.xml")
        entry.consume()
        certs = entry.certificates()
"""

from __future__ import annotations

import logging
import re
import zipfile
import zlib
from pathlib import Path

from asn1crypto import cms

from apkprovenance.exceptions import ArchiveReadError, CertificateEncodingError

logger = logging.getLogger(__name__)

MANIFEST_NAME = "META-INF/MANIFEST.MF"
SIGNATURE_BLOCK_RE = re.compile(r"^META-INF/.*\.(DSA|EC|RSA)$")

_READ_CHUNK = 2048
# zipfile raises NotImplementedError for unsupported compression methods and
# RuntimeError for encrypted entries.
_READ_ERRORS = (
    OSError,
    zipfile.BadZipFile,
    zlib.error,
    EOFError,
    NotImplementedError,
    RuntimeError,
)


def _signed_names(manifest_text: str) -> set[str]:
    """Collect the ``Name:`` attributes of a jar manifest.

    Long values wrap onto continuation lines that start with one space.
    """
    lines: list[str] = []
    for raw in manifest_text.splitlines():
        if raw.startswith(" ") and lines:
            lines[-1] += raw[1:]
        else:
            lines.append(raw)
    return {
        line[len("Name:"):].strip()
        for line in lines
        if line.startswith("Name:")
    }


def first_certificate(block: bytes, block_name: str = "") -> bytes | None:
    """Return the DER bytes of the first certificate in a PKCS#7 block.

    Returns:
        The encoded certificate, or None if the block carries none.

    Raises:
        CertificateEncodingError: If the block is not a parseable
            ``SignedData`` structure.
    """
    try:
        info = cms.ContentInfo.load(block)
        if info["content_type"].native != "signed_data":
            raise CertificateEncodingError(
                f"Signature block {block_name!r} is not PKCS#7 signed data"
            )
        certs = info["content"]["certificates"]
        if not certs:
            return None
        return certs[0].chosen.dump()
    except (ValueError, TypeError, KeyError) as exc:
        raise CertificateEncodingError(
            f"Cannot decode signature block {block_name!r}: {exc}"
        ) from exc


class ArchiveEntry:
    """A named entry of an open ``ApkArchive``."""

    def __init__(self, archive: ApkArchive, info: zipfile.ZipInfo) -> None:
        self._archive = archive
        self._info = info
        self._consumed = False

    @property
    def name(self) -> str:
        return self._info.filename

    @property
    def consumed(self) -> bool:
        return self._consumed

    def consume(self) -> int:
        """Read the entry stream to its end and close it.

        Returns:
            Number of bytes read.

        Raises:
            ArchiveReadError: If the entry data is corrupt or unreadable.
        """
        total = 0
        try:
            with self._archive.zip.open(self._info) as stream:
                for chunk in iter(lambda: stream.read(_READ_CHUNK), b""):
                    total += len(chunk)
        except _READ_ERRORS as exc:
            raise ArchiveReadError(
                f"Cannot read {self.name} from {self._archive.path}: {exc}"
            ) from exc
        self._consumed = True
        return total

    def certificates(self) -> list[bytes] | None:
        """DER certificates that sign this entry.

        Returns:
            None until ``consume()`` has run. Afterwards the first
            certificate of every signature block, in block-name order, or an
            empty list if the entry is not covered by the signature.
        """
        if not self._consumed:
            return None
        if self.name not in self._archive.signed_names():
            logger.debug("%s is not listed in %s", self.name, MANIFEST_NAME)
            return []
        return self._archive.signer_certificates()


class ApkArchive:
    """An installed package archive opened for reading.

    Raises:
        ArchiveReadError: If the file cannot be opened as a ZIP archive.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        try:
            self.zip = zipfile.ZipFile(self.path, "r")
        except _READ_ERRORS as exc:
            raise ArchiveReadError(f"Cannot open archive {self.path}: {exc}") from exc
        self._signed: set[str] | None = None

    def close(self) -> None:
        self.zip.close()

    def __enter__(self) -> ApkArchive:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def entry(self, name: str) -> ArchiveEntry | None:
        """Look up an entry by name, or None if the archive lacks it."""
        try:
            info = self.zip.getinfo(name)
        except KeyError:
            return None
        return ArchiveEntry(self, info)

    def _read(self, name: str) -> bytes:
        try:
            return self.zip.read(name)
        except _READ_ERRORS as exc:
            raise ArchiveReadError(f"Cannot read {name} from {self.path}: {exc}") from exc

    def signed_names(self) -> set[str]:
        """Entry names listed in the jar manifest (empty if unsigned)."""
        if self._signed is None:
            if MANIFEST_NAME in self.zip.namelist():
                text = self._read(MANIFEST_NAME).decode("utf-8", errors="replace")
                self._signed = _signed_names(text)
            else:
                self._signed = set()
        return self._signed

    def signer_certificates(self) -> list[bytes]:
        """First certificate of each signature block, in block-name order."""
        certs: list[bytes] = []
        for name in sorted(self.zip.namelist()):
            if not SIGNATURE_BLOCK_RE.match(name):
                continue
            cert = first_certificate(self._read(name), name)
            if cert is not None:
                certs.append(cert)
        return certs
