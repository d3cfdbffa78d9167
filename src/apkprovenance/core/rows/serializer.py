"""``App`` / ``Apk`` -> row serialization.

The write side is a strict subset of the columns the hydrator reads. The
suggested version, the ``updated`` scratch flag and installed state are
owned by other tables or by a single refresh pass, so they are never
written from an ``App``.
"""

from __future__ import annotations

from typing import Any

from apkprovenance.core.entities import App, Apk, format_date, join_tags
from apkprovenance.core.rows import columns as col

APP_WRITE_COLUMNS = (
    col.APP_ID,
    col.NAME,
    col.SUMMARY,
    col.ICON,
    col.ICON_URL,
    col.DESCRIPTION,
    col.LICENSE,
    col.WEB_URL,
    col.TRACKER_URL,
    col.SOURCE_URL,
    col.DONATE_URL,
    col.BITCOIN_ADDR,
    col.LITECOIN_ADDR,
    col.DOGECOIN_ADDR,
    col.FLATTR_ID,
    col.ADDED,
    col.LAST_UPDATED,
    col.SUGGESTED_VERSION_CODE,
    col.UPSTREAM_VERSION,
    col.UPSTREAM_VERSION_CODE,
    col.CATEGORIES,
    col.ANTI_FEATURES,
    col.REQUIREMENTS,
    col.IS_COMPATIBLE,
    col.IGNORE_ALL_UPDATES,
    col.IGNORE_THIS_UPDATE,
)


def app_to_row(app: App) -> dict[str, Any]:
    """Serialize an ``App`` into the values of one app-table row.

    Tag lists become comma-joined text (None when empty), dates become
    ``YYYY-MM-DD`` (empty text when absent) and booleans become 0/1.
    """
    values: dict[str, Any] = {
        col.APP_ID: app.id,
        col.NAME: app.name,
        col.SUMMARY: app.summary,
        col.ICON: app.icon,
        col.ICON_URL: app.icon_url,
        col.DESCRIPTION: app.description,
        col.LICENSE: app.license,
        col.WEB_URL: app.web_url,
        col.TRACKER_URL: app.tracker_url,
        col.SOURCE_URL: app.source_url,
        col.DONATE_URL: app.donate_url,
        col.BITCOIN_ADDR: app.bitcoin_addr,
        col.LITECOIN_ADDR: app.litecoin_addr,
        col.DOGECOIN_ADDR: app.dogecoin_addr,
        col.FLATTR_ID: app.flattr_id,
        col.ADDED: format_date(app.added, ""),
        col.LAST_UPDATED: format_date(app.last_updated, ""),
        col.SUGGESTED_VERSION_CODE: app.suggested_vercode,
        col.UPSTREAM_VERSION: app.upstream_version,
        col.UPSTREAM_VERSION_CODE: app.upstream_vercode,
        col.CATEGORIES: join_tags(app.categories),
        col.ANTI_FEATURES: join_tags(app.anti_features),
        col.REQUIREMENTS: join_tags(app.requirements),
        col.IS_COMPATIBLE: 1 if app.compatible else 0,
        col.IGNORE_ALL_UPDATES: 1 if app.ignore_all_updates else 0,
        col.IGNORE_THIS_UPDATE: app.ignore_this_update,
    }
    return values


def apk_to_row(apk: Apk) -> dict[str, Any]:
    """Serialize the persisted fields of an ``Apk``."""
    return {
        col.APP_ID: apk.id,
        col.APK_VERSION: apk.version,
        col.APK_VERCODE: apk.vercode,
        col.APK_HASH_TYPE: apk.hash_type,
        col.APK_HASH: apk.hash,
        col.APK_SIG: apk.sig,
        col.APK_MIN_SDK_VERSION: apk.min_sdk_version,
        col.APK_PERMISSIONS: join_tags(apk.permissions),
        col.APK_FEATURES: join_tags(apk.features),
        col.APK_NAME: apk.apk_name,
        col.ADDED: format_date(apk.added, ""),
    }
