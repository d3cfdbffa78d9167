"""Content filter deciding which apps are hidden from update notifications."""

from __future__ import annotations

import logging

from apkprovenance.config import Settings
from apkprovenance.core.entities import App

logger = logging.getLogger(__name__)

ROOT_REQUIREMENT = "root"


class AppFilter:
    """Callable predicate: True means the app is filtered out.

    An app is filtered when it requires root and root apps are hidden, or
    when it carries anti-features and such apps are hidden.

    Usage::

        is_filtered = AppFilter(settings)
        visible = [a for a in apps if not is_filtered(a)]
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings if settings is not None else Settings()

    def __call__(self, app: App) -> bool:
        if not self.settings.show_root_apps and ROOT_REQUIREMENT in (app.requirements or ()):
            logger.debug("Filtered %s: requires root", app.id)
            return True
        if not self.settings.show_anti_feature_apps and app.anti_features:
            logger.debug("Filtered %s: anti-features %s", app.id, app.anti_features)
            return True
        return False
