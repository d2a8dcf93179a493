"""Constants shared across the deployment module."""

WAR_EXTENSION = "war"
ZIP_SUFFIX = ".zip"

# Local-only secrets file that must never reach the remote bundle
LOCAL_SETTINGS_FILE = "local.settings.json"

DEFAULT_MAX_RETRY_TIMES = 3
DEFAULT_STAGING_PREFIX = "webapp-publisher"
DEFAULT_INCLUDES = ("**/*",)

ZIP_DEPLOY_PATH = "/api/zipdeploy"
WAR_DEPLOY_PATH = "/api/wardeploy"
