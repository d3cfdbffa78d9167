"""Column names of the app table and the columns joined onto it."""

APP_ID = "id"
NAME = "name"
SUMMARY = "summary"
ICON = "icon"
ICON_URL = "iconUrl"
DESCRIPTION = "description"
LICENSE = "license"
WEB_URL = "webURL"
TRACKER_URL = "trackerURL"
SOURCE_URL = "sourceURL"
DONATE_URL = "donateURL"
BITCOIN_ADDR = "bitcoinAddr"
LITECOIN_ADDR = "litecoinAddr"
DOGECOIN_ADDR = "dogecoinAddr"
FLATTR_ID = "flattrID"
ADDED = "added"
LAST_UPDATED = "lastUpdated"
SUGGESTED_VERSION_CODE = "suggestedVercode"
UPSTREAM_VERSION = "upstreamVersion"
UPSTREAM_VERSION_CODE = "upstreamVercode"
CATEGORIES = "categories"
ANTI_FEATURES = "antiFeatures"
REQUIREMENTS = "requirements"
IS_COMPATIBLE = "compatible"
IGNORE_ALL_UPDATES = "ignoreAllUpdates"
IGNORE_THIS_UPDATE = "ignoreThisUpdate"

# Joined from the suggested release.
SUGGESTED_APK_VERSION = "suggestedApkVersion"

# Joined from the installed-app table.
INSTALLED_VERSION_CODE = "installedVersionCode"
INSTALLED_VERSION_NAME = "installedVersionName"

# Apk table.
APK_VERSION = "version"
APK_VERCODE = "vercode"
APK_HASH_TYPE = "hashType"
APK_HASH = "hash"
APK_SIG = "sig"
APK_MIN_SDK_VERSION = "minSdkVersion"
APK_PERMISSIONS = "permissions"
APK_FEATURES = "features"
APK_NAME = "apkName"
