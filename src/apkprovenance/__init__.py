"""apk-provenance: signing-certificate fingerprints and update eligibility for installed packages."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
