"""Certificate-read guard.

Some platform builds ship a security provider that breaks signature
verification of jar-signed archives while it is registered. Reading the
signer certificate therefore happens inside a critical section that turns
the workaround shim off and back on again::

    with guard:
        entry.consume()
        certs = entry.certificates()

The shim is process-wide state, so every guard serialises on a lock and
the shim is re-enabled on every exit path. ``default_guard()`` returns the
single process-wide guard, created at import and never reset. Tests and
embedders can construct their own guard around their own shim.
"""

from __future__ import annotations

import logging
import threading
from typing import Protocol

logger = logging.getLogger(__name__)


class CompatibilityShim(Protocol):
    """Process-wide toggle that must be off while certificates are read."""

    def disable(self) -> None: ...

    def enable(self) -> None: ...


class NullShim:
    """Shim for platforms without the defect; only records its state."""

    def __init__(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def enable(self) -> None:
        self.enabled = True


class GuardToken:
    """Proof of an acquired guard. ``release()`` is idempotent."""

    def __init__(self, guard: CertificateReadGuard) -> None:
        self._guard = guard
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        self._guard._exit()


class CertificateReadGuard:
    """Serialised "disable shim, read certificate, re-enable shim" region."""

    def __init__(
        self,
        shim: CompatibilityShim | None = None,
        lock: threading.Lock | None = None,
    ) -> None:
        self.shim = shim if shim is not None else NullShim()
        self._lock = lock if lock is not None else threading.Lock()
        self._token: GuardToken | None = None

    def acquire(self) -> GuardToken:
        """Enter the critical section and disable the shim.

        Blocks while another thread holds the guard. If disabling the shim
        fails, the shim is re-enabled and the lock released before the
        error propagates.
        """
        self._lock.acquire()
        try:
            self.shim.disable()
        except BaseException:
            try:
                self.shim.enable()
            finally:
                self._lock.release()
            raise
        logger.debug("Compatibility shim disabled for certificate read")
        return GuardToken(self)

    def _exit(self) -> None:
        try:
            self.shim.enable()
            logger.debug("Compatibility shim re-enabled")
        finally:
            self._lock.release()

    def __enter__(self) -> GuardToken:
        self._token = self.acquire()
        return self._token

    def __exit__(self, *exc_info: object) -> None:
        token, self._token = self._token, None
        if token is not None:
            token.release()


_DEFAULT_GUARD = CertificateReadGuard()


def default_guard() -> CertificateReadGuard:
    """Return the process-wide guard shared by inspectors by default."""
    return _DEFAULT_GUARD
