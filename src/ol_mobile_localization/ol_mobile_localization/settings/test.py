"""
Settings for running the ol_mobile_localization tests
"""

from .common import *  # pylint: disable=wildcard-import, unused-wildcard-import  # noqa: F403


class SettingsClass:  # pylint: disable=useless-object-inheritance
    """dummy settings class"""


SETTINGS = SettingsClass()
plugin_settings(SETTINGS)  # noqa: F405
vars().update(SETTINGS.__dict__)


SECRET_KEY = "test-secret-key"  # noqa: S105
INSTALLED_APPS = ["ol_mobile_localization"]
USE_TZ = True

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {"console": {"class": "logging.StreamHandler"}},
    "loggers": {
        "ol_mobile_localization": {"handlers": ["console"], "level": "INFO"},
    },
}
