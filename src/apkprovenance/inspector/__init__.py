"""Inspection of locally installed packages.

- ``service``: the package metadata service interface and its records.
- ``index_service``: a service backed by a YAML/JSON package index file.
- ``inspector``: ``InstalledPackageInspector``, which builds an ``App``
  with its installed ``Apk`` and signing fingerprint.
"""

from apkprovenance.inspector.index_service import IndexPackageService
from apkprovenance.inspector.inspector import InstalledPackageInspector, read_signature
from apkprovenance.inspector.service import (
    ApplicationInfo,
    PackageInfo,
    PackageMetadataService,
)

__all__ = [
    "ApplicationInfo",
    "IndexPackageService",
    "InstalledPackageInspector",
    "PackageInfo",
    "PackageMetadataService",
    "read_signature",
]
