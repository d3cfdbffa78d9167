"""apk-provenance exception hierarchy.

All public exceptions inherit from ApkProvenanceError, giving callers a single
base class to catch when they want to handle any inspection failure without
swallowing unrelated errors.
"""


class ApkProvenanceError(Exception):
    """Base exception for all apk-provenance errors."""


class PackageNotFoundError(ApkProvenanceError):
    """Raised when a package identifier is unknown to the metadata service."""


class CertificateMissingError(ApkProvenanceError):
    """Raised when an installed archive carries no usable signing certificate.

    Covers a missing manifest entry, an entry that is not covered by the
    archive's signature, and signature blocks without certificates.
    """


class CertificateEncodingError(ApkProvenanceError):
    """Raised when the raw encoded bytes of a certificate cannot be produced.

    Covers malformed PKCS#7 signature blocks and certificates that fail
    to decode.
    """


class ArchiveReadError(ApkProvenanceError):
    """Raised when an installed package archive cannot be opened or read."""


class RowPositionError(ApkProvenanceError):
    """Raised when a row is hydrated while not positioned on a record."""


class PackageIndexError(ApkProvenanceError):
    """Raised when a package index file is missing or malformed."""


class ConfigError(ApkProvenanceError):
    """Raised for unreadable or invalid settings files."""
