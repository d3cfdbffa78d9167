"""Shared fixtures for apk-provenance tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from asn1crypto import x509

from apkprovenance.core.signature import CertificateReadGuard

from tests.helpers import RecordingShim, build_apk, make_certificate


@pytest.fixture
def signer_certificate() -> x509.Certificate:
    """A signer certificate shared by the signed APK fixtures."""
    return make_certificate("F-Droid Test Signer", serial=7)


@pytest.fixture
def signed_apk(tmp_path: Path, signer_certificate: x509.Certificate) -> Path:
    """A jar-signed APK whose manifest entry is covered by the signature."""
    return build_apk(tmp_path / "apks" / "org.example.notes.apk", signer_certificate)


@pytest.fixture
def recording_shim() -> RecordingShim:
    return RecordingShim()


@pytest.fixture
def guard(recording_shim: RecordingShim) -> CertificateReadGuard:
    """A private certificate-read guard around a recording shim."""
    return CertificateReadGuard(recording_shim)


@pytest.fixture
def package_index(tmp_path: Path, signed_apk: Path) -> Path:
    """A package index describing the signed APK and its installer."""
    index = {
        "packages": {
            "org.example.notes": {
                "label": "Notes",
                "description": "Take notes offline, sync them when you want to.",
                "artifact": "apks/org.example.notes.apk",
                "version_name": "2.1",
                "version_code": 21,
                "first_install_time": 1700000000000,
                "last_update_time": 1710000000000,
                "min_sdk_version": 21,
                "permissions": [
                    "android.permission.INTERNET",
                    "android.permission.CAMERA",
                ],
                "features": ["android.hardware.camera"],
                "installer": "org.fdroid.fdroid",
            },
            "org.fdroid.fdroid": {
                "label": "F-Droid",
                "artifact": "apks/org.fdroid.fdroid.apk",
                "version_name": "1.19",
                "version_code": 1019050,
            },
        }
    }
    path = tmp_path / "installed.yaml"
    path.write_text(yaml.safe_dump(index), encoding="utf-8")
    return path
