"""App and Apk entities.

An ``App`` is one cataloged or installed application; an ``Apk`` is one
concrete installable release of it. These are plain data holders with no
I/O, safe to import from every other module.

An ``App`` built by the inspector owns at most one ``Apk`` in
``installed_apk`` that describes the binary currently on the device.
Entities describing installed state are rebuilt on every inspection and are
never cached.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path


@dataclass
class Apk:
    """A single release of an application.

    Attributes:
        id: Package identifier of the owning app.
        version: Human-readable version name (e.g. "1.4.2").
        vercode: Monotonic integer version code.
        hash_type: hashlib algorithm name used for ``hash``.
        hash: Hex digest of the installable file.
        sig: Signing-certificate fingerprint (32 lowercase hex chars).
        min_sdk_version: Lowest platform API level the release supports.
        permissions: Requested permissions, or None if there are none.
        features: Declared hardware features, or None if there are none.
        installed_file: On-disk artifact, set only for installed packages.
        added: When the release was first seen.
    """

    id: str = ""
    version: str = ""
    vercode: int = 0
    hash_type: str = "sha256"
    hash: str = ""
    sig: str = ""
    min_sdk_version: int = 0
    permissions: list[str] | None = None
    features: list[str] | None = None
    installed_file: Path | None = None
    added: datetime | None = None

    @property
    def apk_name(self) -> str:
        """Canonical file name of the release: ``{id}_{vercode}.apk``."""
        return f"{self.id}_{self.vercode}.apk"


@dataclass
class App:
    """An application known to the catalog or installed on the device.

    Unlike the other fields, ``suggested_version`` is read-only. It is
    derived from whichever release ``suggested_vercode`` points at and can
    only be populated by row hydration.
    """

    id: str = "unknown"
    name: str = "Unknown"
    summary: str = "Unknown application"
    icon: str | None = None
    icon_url: str | None = None
    description: str | None = None
    license: str = "Unknown"

    web_url: str | None = None
    tracker_url: str | None = None
    source_url: str | None = None
    donate_url: str | None = None
    bitcoin_addr: str | None = None
    litecoin_addr: str | None = None
    dogecoin_addr: str | None = None
    flattr_id: str | None = None

    upstream_version: str | None = None
    upstream_vercode: int = 0
    suggested_vercode: int = 0

    added: datetime | None = None
    last_updated: datetime | None = None

    # Each is None rather than empty when there are no tags.
    categories: list[str] | None = None
    anti_features: list[str] | None = None
    requirements: list[str] | None = None

    # True if at least one release is installable on this device.
    compatible: bool = False
    include_in_repo: bool = False
    ignore_all_updates: bool = False
    # Updates with a version code at or below this are not announced.
    ignore_this_update: int = 0

    # Scratch flag for a single catalog refresh pass.
    updated: bool = False

    installed_version_name: str | None = None
    installed_version_code: int = 0
    installed_apk: Apk | None = None

    _suggested_version: str | None = field(default=None, init=False, repr=False)

    @property
    def suggested_version(self) -> str | None:
        """Version name of the release the catalog suggests installing."""
        return self._suggested_version
