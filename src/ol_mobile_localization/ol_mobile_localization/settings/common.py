# noqa: INP001

"""Common settings for the mobile localization converter"""


def apply_common_settings(settings):
    """
    Apply default mobile localization settings.
    """
    # Also write plural variants into Localizable.strings as `key#category`
    settings.MOBILE_LOCALIZATION_INCLUDE_PLURALS = False
    # Empty means the current working directory
    settings.MOBILE_LOCALIZATION_OUTPUT_DIR = ""


def plugin_settings(settings):
    """
    Populate common settings
    """
    apply_common_settings(settings)
