"""Build an ``App`` entity from a locally installed package.

Inspection is a point-in-time snapshot. Each call reads the metadata
service and the installed artifact again, and nothing is cached between
calls. The work is blocking file and archive I/O, so callers on a
latency-sensitive thread should run it elsewhere.

Failures propagate to the caller without retries:

- ``PackageNotFoundError``: the identifier is not installed, or no
  installed version (positive code and non-empty name) is recorded for it.
- ``ArchiveReadError``: the artifact is missing, unreadable or corrupt.
- ``CertificateMissingError``: the manifest entry is absent or unsigned.
- ``CertificateEncodingError``: the signature block does not decode.

Only the installer label lookup degrades gracefully (to the raw installer
identifier).
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from apkprovenance.config import Settings
from apkprovenance.core.entities import App, Apk, make_tags
from apkprovenance.core.signature import (
    ApkArchive,
    CertificateReadGuard,
    default_guard,
    fingerprint,
)
from apkprovenance.exceptions import (
    ArchiveReadError,
    CertificateMissingError,
    PackageNotFoundError,
)
from apkprovenance.inspector.service import PackageInfo, PackageMetadataService

logger = logging.getLogger(__name__)

# Used when the platform does not report a minimum SDK level.
DEFAULT_MIN_SDK_VERSION = 3
ANONYMOUS_INSTALLER = "unknown"

_DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"
_HASH_CHUNK = 1024 * 64


def hash_file(path: Path, hash_type: str) -> str:
    """Hex digest of a file with the given hashlib algorithm.

    Raises:
        ArchiveReadError: If the file cannot be read.
    """
    h = hashlib.new(hash_type)
    try:
        with open(path, "rb") as f:
            for chunk in iter(lambda: f.read(_HASH_CHUNK), b""):
                h.update(chunk)
    except OSError as exc:
        raise ArchiveReadError(f"Cannot hash {path}: {exc}") from exc
    return h.hexdigest()


def signer_certificate(
    path: Path,
    guard: CertificateReadGuard | None = None,
    manifest_entry: str = "AndroidManifest.xml",
) -> bytes:
    """DER bytes of the first certificate signing ``manifest_entry``.

    The entry stream is consumed and its certificates read inside the
    certificate-read guard. The archive is closed and the guard released
    on every exit path.

    Raises:
        ArchiveReadError: If the archive cannot be read.
        CertificateMissingError: If the entry is absent or unsigned.
        CertificateEncodingError: If the signature block does not decode.
    """
    guard = guard if guard is not None else default_guard()
    with ApkArchive(path) as archive:
        entry = archive.entry(manifest_entry)
        if entry is None:
            raise CertificateMissingError(f"{path} has no {manifest_entry} entry")
        with guard:
            entry.consume()
            certs = entry.certificates()
            if not certs:
                raise CertificateMissingError(
                    f"No certificates found for {manifest_entry} in {path}"
                )
            return certs[0]


def read_signature(
    path: Path,
    guard: CertificateReadGuard | None = None,
    manifest_entry: str = "AndroidManifest.xml",
) -> str:
    """Catalog ``sig`` of an APK file."""
    return fingerprint(signer_certificate(Path(path), guard, manifest_entry))


class InstalledPackageInspector:
    """Assembles ``App``/``Apk`` snapshots of installed packages.

    Args:
        service: Source of installed-package metadata.
        guard: Certificate-read guard. Defaults to the process-wide guard so
            that all inspectors serialise on the same shim.
        settings: Hash algorithm, summary length and manifest entry name.
        clock: Returns the current time, used when the platform does not
            report install times.
    """

    def __init__(
        self,
        service: PackageMetadataService,
        guard: CertificateReadGuard | None = None,
        settings: Settings | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.service = service
        self.guard = guard if guard is not None else default_guard()
        self.settings = settings if settings is not None else Settings()
        self.clock = clock

    def inspect(self, package_name: str) -> App:
        """Snapshot an installed package as an ``App`` owning its ``Apk``."""
        logger.debug("Inspecting installed package %s", package_name)
        app_info = self.service.get_application_info(package_name)
        package_info = self.service.get_package_info(package_name)
        if package_info.version_code <= 0 or not package_info.version_name:
            raise PackageNotFoundError(
                f"No installed version recorded for {package_name} "
                f"(version {package_info.version_name!r}, code {package_info.version_code})"
            )
        installer = self._installer_label(package_name)

        app = App(
            id=app_info.package_name,
            name=app_info.label or app_info.package_name,
        )
        description = app_info.description
        if not description:
            app.summary = f"(installed by {installer})"
        else:
            app.summary = description[: self.settings.summary_length]

        app.added, app.last_updated = self._install_times(package_info)
        app.description = "<p>"
        if description:
            app.description += description + "\n"
        app.description += (
            f"(installed by {installer}"
            f", first installed on {app.added.strftime(_DISPLAY_FORMAT)}"
            f", last updated on {app.last_updated.strftime(_DISPLAY_FORMAT)})</p>"
        )

        source = app_info.public_source_dir
        if source is None:
            raise ArchiveReadError(f"No installed artifact recorded for {package_name}")

        min_sdk = package_info.min_sdk_version
        apk = Apk(
            id=app.id,
            version=package_info.version_name,
            vercode=package_info.version_code,
            hash_type=self.settings.hash_type,
            hash=hash_file(source, self.settings.hash_type),
            min_sdk_version=min_sdk if min_sdk is not None else DEFAULT_MIN_SDK_VERSION,
            permissions=make_tags(package_info.requested_permissions),
            features=make_tags(package_info.required_features),
            installed_file=source,
            added=app.added,
        )
        apk.sig = read_signature(source, self.guard, self.settings.manifest_entry)

        app.installed_version_name = apk.version
        app.installed_version_code = apk.vercode
        app.installed_apk = apk
        logger.debug("%s %s signed by %s", app.id, apk.version, apk.sig)
        return app

    def _installer_label(self, package_name: str) -> str:
        installer = self.service.get_installer_of(package_name)
        label = ""
        if installer:
            try:
                label = self.service.get_application_info(installer).label
            except PackageNotFoundError as exc:
                logger.debug("Installer label unavailable: %s", exc)
        return label or installer or ANONYMOUS_INSTALLER

    def _install_times(self, info: PackageInfo) -> tuple[datetime, datetime]:
        if info.first_install_time is None or info.last_update_time is None:
            now = self.clock()
            return now, now
        return (
            datetime.fromtimestamp(info.first_install_time / 1000),
            datetime.fromtimestamp(info.last_update_time / 1000),
        )
