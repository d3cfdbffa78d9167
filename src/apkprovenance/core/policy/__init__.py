"""Update-eligibility decisions and the app filter that feeds them."""

from apkprovenance.core.policy.filters import AppFilter
from apkprovenance.core.policy.updates import (
    apps_with_updates,
    can_and_want_to_update,
    compare,
    has_updates,
    is_installed,
    is_valid,
    sort_key,
)

__all__ = [
    "AppFilter",
    "apps_with_updates",
    "can_and_want_to_update",
    "compare",
    "has_updates",
    "is_installed",
    "is_valid",
    "sort_key",
]
