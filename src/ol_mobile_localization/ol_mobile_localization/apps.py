"""
ol_mobile_localization Django application initialization.
"""

from django.apps import AppConfig


class OLMobileLocalizationConfig(AppConfig):
    """
    Configuration for the ol_mobile_localization Django application.
    """

    name = "ol_mobile_localization"
    verbose_name = "Mobile Localization Converter"
