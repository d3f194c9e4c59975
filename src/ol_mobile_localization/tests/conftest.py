"""Common test configuration"""

import pytest

from ol_mobile_localization.constants import LocalizationType, PluralType
from ol_mobile_localization.localization import (
    LocalizationMap,
    LocalizationPlurals,
    LocalizationString,
)
from tests.utils import (
    FRENCH_STRINGS_XML,
    SIMPLE_STRINGS_XML,
    STRINGS_ONLY_XML,
    write_values_folder,
)


@pytest.fixture
def android_localization():
    """A small Android localization with one string and one plural"""
    return LocalizationMap(
        LocalizationType.ANDROID,
        {
            "greeting": LocalizationString("Hello %s"),
            "items": LocalizationPlurals(
                {
                    PluralType.ONE: "%1$s item",
                    PluralType.OTHER: "%1$s items",
                }
            ),
        },
    )


@pytest.fixture
def android_resource_dir(tmp_path):
    """An Android res folder with base, French and qualifier-only values folders"""
    resource_dir = tmp_path / "res"
    write_values_folder(resource_dir, "values", SIMPLE_STRINGS_XML)
    write_values_folder(resource_dir, "values-fr", FRENCH_STRINGS_XML)
    write_values_folder(resource_dir, "values-pt-rBR", STRINGS_ONLY_XML)
    (resource_dir / "values-night").mkdir()
    (resource_dir / "drawable").mkdir()
    return resource_dir
