"""Package metadata service backed by a package index file.

The index describes the packages installed on a device (for example, a
snapshot pulled from it) as YAML, or JSON since JSON is valid YAML::

    packages:
      org.example.notes:
        label: Notes
        description: Take notes offline.
        artifact: apks/org.example.notes.apk
        version_name: "2.1"
        version_code: 21
        first_install_time: 1700000000000
        last_update_time: 1710000000000
        min_sdk_version: 21
        permissions: [android.permission.INTERNET]
        features: [android.hardware.camera]
        installer: org.fdroid.fdroid
      org.fdroid.fdroid:
        label: F-Droid
        artifact: apks/org.fdroid.fdroid.apk
        version_name: "1.19"
        version_code: 1019050

Relative ``artifact`` paths resolve against the index file's directory.
Every package needs a non-empty ``version_name`` and a positive
``version_code``. The whole index is validated when it is loaded.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from apkprovenance.exceptions import PackageIndexError, PackageNotFoundError
from apkprovenance.inspector.service import ApplicationInfo, PackageInfo

logger = logging.getLogger(__name__)

_KNOWN_KEYS = frozenset({
    "label",
    "description",
    "artifact",
    "version_name",
    "version_code",
    "first_install_time",
    "last_update_time",
    "min_sdk_version",
    "permissions",
    "features",
    "installer",
})


def _optional_int(package: str, entry: dict[str, Any], key: str) -> int | None:
    value = entry.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise PackageIndexError(f"{package}: {key} must be an integer, got {value!r}")
    return value


def _string_list(package: str, entry: dict[str, Any], key: str) -> tuple[str, ...] | None:
    value = entry.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise PackageIndexError(f"{package}: {key} must be a list of strings")
    return tuple(value)


class IndexPackageService:
    """``PackageMetadataService`` over an in-memory package index.

    Usage::

        service = IndexPackageService.from_file(Path("installed.yaml"))
        info = service.get_package_info("org.example.notes")
    """

    def __init__(self, packages: dict[str, Any], base_dir: Path | None = None) -> None:
        self._base_dir = base_dir if base_dir is not None else Path.cwd()
        self._apps: dict[str, ApplicationInfo] = {}
        self._packages: dict[str, PackageInfo] = {}
        self._installers: dict[str, str | None] = {}
        for name, entry in packages.items():
            self._load_entry(str(name), entry or {})

    @classmethod
    def from_file(cls, path: Path) -> IndexPackageService:
        """Load and validate an index file.

        Raises:
            PackageIndexError: If the file is unreadable or malformed.
        """
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise PackageIndexError(f"Cannot read package index {path}: {exc}") from exc
        if not isinstance(data, dict) or not isinstance(data.get("packages"), dict):
            raise PackageIndexError(f"Package index {path} has no 'packages' mapping")
        service = cls(data["packages"], base_dir=path.resolve().parent)
        logger.debug("Loaded %d packages from %s", len(service), path)
        return service

    def __len__(self) -> int:
        return len(self._apps)

    @property
    def package_names(self) -> list[str]:
        return sorted(self._apps)

    def _load_entry(self, name: str, entry: Any) -> None:
        if not isinstance(entry, dict):
            raise PackageIndexError(f"{name}: entry must be a mapping")
        unknown = sorted(set(entry) - _KNOWN_KEYS)
        if unknown:
            raise PackageIndexError(f"{name}: unknown keys {', '.join(unknown)}")

        artifact = entry.get("artifact")
        source: Path | None = None
        if artifact:
            source = Path(str(artifact))
            if not source.is_absolute():
                source = self._base_dir / source

        self._apps[name] = ApplicationInfo(
            package_name=name,
            label=str(entry.get("label") or ""),
            description=str(entry.get("description") or ""),
            public_source_dir=source,
        )
        version_name = str(entry.get("version_name") or "")
        if not version_name:
            raise PackageIndexError(f"{name}: version_name is required")
        version_code = _optional_int(name, entry, "version_code")
        if version_code is None or version_code <= 0:
            raise PackageIndexError(
                f"{name}: version_code must be a positive integer, got {version_code!r}"
            )

        self._packages[name] = PackageInfo(
            package_name=name,
            version_name=version_name,
            version_code=version_code,
            first_install_time=_optional_int(name, entry, "first_install_time"),
            last_update_time=_optional_int(name, entry, "last_update_time"),
            requested_permissions=_string_list(name, entry, "permissions"),
            required_features=_string_list(name, entry, "features"),
            min_sdk_version=_optional_int(name, entry, "min_sdk_version"),
        )
        installer = entry.get("installer")
        self._installers[name] = str(installer) if installer else None

    def get_application_info(self, package_name: str) -> ApplicationInfo:
        try:
            return self._apps[package_name]
        except KeyError:
            raise PackageNotFoundError(f"Package not installed: {package_name}") from None

    def get_package_info(self, package_name: str) -> PackageInfo:
        try:
            return self._packages[package_name]
        except KeyError:
            raise PackageNotFoundError(f"Package not installed: {package_name}") from None

    def get_installer_of(self, package_name: str) -> str | None:
        try:
            return self._installers[package_name]
        except KeyError:
            raise PackageNotFoundError(f"Package not installed: {package_name}") from None
