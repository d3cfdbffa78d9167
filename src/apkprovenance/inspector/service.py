"""Package metadata service interface.

The service is whatever knows which packages are installed: the platform
package manager on a device, or an index file on a workstation. The
inspector only depends on this protocol.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class ApplicationInfo:
    """Application-level metadata of an installed package.

    Attributes:
        package_name: The package identifier.
        label: Human-readable application name.
        description: Free-text description, empty if the package has none.
        public_source_dir: Path of the installed, world-readable artifact.
    """

    package_name: str
    label: str = ""
    description: str = ""
    public_source_dir: Path | None = None


@dataclass(frozen=True)
class PackageInfo:
    """Version-level metadata of an installed package.

    Install times are epoch milliseconds, or None where the platform does
    not report them. Permission and feature lists are None when the package
    declares none.
    """

    package_name: str
    version_name: str = ""
    version_code: int = 0
    first_install_time: int | None = None
    last_update_time: int | None = None
    requested_permissions: tuple[str, ...] | None = None
    required_features: tuple[str, ...] | None = None
    min_sdk_version: int | None = None


class PackageMetadataService(Protocol):
    """Resolves package identifiers to installed-package metadata.

    ``get_application_info`` and ``get_package_info`` raise
    ``PackageNotFoundError`` for unknown identifiers.
    """

    def get_application_info(self, package_name: str) -> ApplicationInfo: ...

    def get_package_info(self, package_name: str) -> PackageInfo: ...

    def get_installer_of(self, package_name: str) -> str | None: ...
