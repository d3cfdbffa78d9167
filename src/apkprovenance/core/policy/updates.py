"""Update-eligibility decisions over ``App`` entities.

All functions are pure apart from ``is_valid``, which checks that the
installed artifact is still readable on disk.

``ignore_this_update`` suppresses a single version threshold: once the
catalog suggests a version code above it, notifications resume without the
flag being cleared.
"""

from __future__ import annotations

import functools
import os
from collections.abc import Callable, Iterable

from apkprovenance.core.entities import App

FilterPredicate = Callable[[App], bool]


def is_valid(app: App) -> bool:
    """True if an installed-package snapshot is complete enough to trust.

    Requires a non-empty name and id, an installed ``Apk`` with a
    fingerprint, and an installed file that exists and is readable.
    """
    if not app.name or not app.id:
        return False
    apk = app.installed_apk
    if apk is None or not apk.sig:
        return False
    path = apk.installed_file
    if path is None or not path.is_file():
        return False
    return os.access(path, os.R_OK)


def is_installed(app: App) -> bool:
    return app.installed_version_code > 0


def has_updates(app: App) -> bool:
    """True if the catalog suggests a newer version than the installed one."""
    if app.suggested_vercode <= 0:
        return False
    return 0 < app.installed_version_code < app.suggested_vercode


def can_and_want_to_update(app: App, is_filtered: FilterPredicate) -> bool:
    """True if an update exists and the user wants to hear about it.

    Args:
        app: The app to decide for.
        is_filtered: Predicate returning True for apps hidden from update
            notifications (see ``AppFilter``).
    """
    if not has_updates(app):
        return False
    wants_update = (
        not app.ignore_all_updates
        and app.ignore_this_update < app.suggested_vercode
    )
    return wants_update and not is_filtered(app)


def compare(a: App, b: App) -> int:
    """Order apps by case-insensitive name. For display, not identity."""
    left, right = a.name.casefold(), b.name.casefold()
    return (left > right) - (left < right)


sort_key = functools.cmp_to_key(compare)


def apps_with_updates(apps: Iterable[App], is_filtered: FilterPredicate) -> list[App]:
    """Apps worth notifying about, sorted by name."""
    return sorted(
        (app for app in apps if can_and_want_to_update(app, is_filtered)),
        key=sort_key,
    )
