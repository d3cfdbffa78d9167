"""Runtime settings for inspection and update filtering.

Settings are plain data with defaults that match the behaviour expected by
catalog tooling. A YAML file can override any of them::

    hash_type: sha256
    summary_length: 40
    show_anti_feature_apps: false
    show_root_apps: true
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from apkprovenance.exceptions import ConfigError


@dataclass
class Settings:
    """Tunable knobs for the inspector and the app filter.

    Attributes:
        hash_type: hashlib algorithm used for the installed artifact digest.
        summary_length: Number of description characters kept in a
            synthesized summary.
        manifest_entry: Archive entry whose signer identifies the package.
        show_anti_feature_apps: When False, apps carrying anti-features are
            filtered out of update notifications.
        show_root_apps: When False, apps requiring root are filtered out of
            update notifications.
    """

    hash_type: str = "sha256"
    summary_length: int = 40
    manifest_entry: str = "AndroidManifest.xml"
    show_anti_feature_apps: bool = True
    show_root_apps: bool = True

    def __post_init__(self) -> None:
        if self.hash_type not in hashlib.algorithms_available:
            raise ConfigError(f"Unsupported hash algorithm: {self.hash_type!r}")
        if (
            isinstance(self.summary_length, bool)
            or not isinstance(self.summary_length, int)
            or self.summary_length <= 0
        ):
            raise ConfigError(
                f"summary_length must be a positive integer, got {self.summary_length!r}"
            )

    @classmethod
    def load(cls, path: Path | None) -> Settings:
        """Load settings from a YAML file, or return defaults for None.

        Raises:
            ConfigError: If the file cannot be read, is not a mapping, or
                contains unknown keys.
        """
        if path is None:
            return cls()
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Cannot read settings from {path}: {exc}") from exc

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {path} must contain a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown settings in {path}: {', '.join(unknown)}")
        return cls(**data)
