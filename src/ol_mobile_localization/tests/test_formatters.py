"""Tests for the Localizable.strings and stringsdict formatters"""

import plistlib

import pytest

from ol_mobile_localization.constants import LocalizationType, PluralType
from ol_mobile_localization.exceptions import NoPluralsError
from ol_mobile_localization.formatters import (
    LocalizableFormatter,
    StringsDictFormatter,
    escape_strings_value,
    plural_strings_key,
)
from ol_mobile_localization.localization import (
    LocalizationMap,
    LocalizationPlurals,
    LocalizationString,
)
from ol_mobile_localization.parsers import AndroidStringsParser
from tests.utils import SIMPLE_STRINGS_XML


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("plain", "plain"),
        ('say "hi"', 'say \\"hi\\"'),
        ("back\\slash", "back\\\\slash"),
        ("two\nlines", "two\\nlines"),
        ('\\"', '\\\\\\"'),
    ],
)
def test_escape_strings_value(value, expected):
    """Quotes, backslashes and newlines are escaped"""
    assert escape_strings_value(value) == expected


def test_localizable_skips_plurals_by_default(android_localization):
    """Only plain strings are written unless plurals are included"""
    content = LocalizableFormatter().format(android_localization)
    assert content == '"greeting" = "Hello %@";\n'


def test_localizable_include_plurals(android_localization):
    """Each plural variant gets its own `key#category` line"""
    content = LocalizableFormatter(include_plurals=True).format(android_localization)
    assert content.splitlines() == [
        '"greeting" = "Hello %@";',
        '"items#one" = "%1$@ item";',
        '"items#other" = "%1$@ items";',
    ]
    assert plural_strings_key("items", PluralType.ONE) == "items#one"


def test_localizable_keeps_insertion_order():
    """Entries are written in the order they were added"""
    localization = LocalizationMap.from_strings(
        LocalizationType.IOS, {"zeta": "z", "alpha": "a", "mid": "m"}
    )
    content = LocalizableFormatter().format(localization)
    assert content == '"zeta" = "z";\n"alpha" = "a";\n"mid" = "m";\n'


def test_localizable_escapes_values():
    """Values are escaped for the .strings syntax"""
    localization = LocalizationMap.from_strings(
        LocalizationType.IOS, {"quote": 'He said "%@"\nthen \\ left'}
    )
    content = LocalizableFormatter().format(localization)
    assert content == '"quote" = "He said \\"%@\\"\\nthen \\\\ left";\n'


def test_localizable_empty_map():
    """An empty map gives an empty file"""
    assert LocalizableFormatter().format(LocalizationMap(LocalizationType.IOS)) == ""


def test_stringsdict(android_localization):
    """Plurals are written as plural rules, strings are left out"""
    content = StringsDictFormatter().format(android_localization)
    assert content.startswith(b"<?xml")

    document = plistlib.loads(content)
    assert document == {
        "items": {
            "NSStringLocalizedFormatKey": "%#@value@",
            "value": {
                "NSStringFormatSpecTypeKey": "NSStringPluralRuleType",
                "NSStringFormatValueTypeKey": "d",
                "one": "%1$@ item",
                "other": "%1$@ items",
            },
        }
    }


def test_stringsdict_keeps_categories_and_order():
    """Categories pass through unchanged and keys keep their order"""
    localization = LocalizationMap(
        LocalizationType.IOS,
        {
            "second": LocalizationPlurals({PluralType.FEW: "few", "many": "many"}),
            "text": LocalizationString("ignored"),
            "first": LocalizationPlurals({PluralType.ZERO: "zero"}),
        },
    )
    document = plistlib.loads(StringsDictFormatter().format(localization))
    assert list(document) == ["second", "first"]
    assert list(document["second"]["value"])[2:] == ["few", "many"]
    assert document["first"]["value"]["zero"] == "zero"


def test_stringsdict_is_stable(android_localization):
    """Formatting the same map twice gives identical bytes"""
    formatter = StringsDictFormatter()
    assert formatter.format(android_localization) == formatter.format(
        android_localization
    )


def test_stringsdict_without_plurals():
    """A map without plurals signals that there is nothing to write"""
    localization = LocalizationMap.from_strings(LocalizationType.IOS, {"a": "b"})
    with pytest.raises(NoPluralsError):
        StringsDictFormatter().format(localization)


def test_end_to_end_conversion():
    """An Android document converts to matching strings and stringsdict files"""
    localization = AndroidStringsParser().parse(SIMPLE_STRINGS_XML)
    ios_localization = localization.converted(LocalizationType.IOS)

    strings = LocalizableFormatter().format(ios_localization)
    assert strings == '"greeting" = "Hello %@";\n'

    document = plistlib.loads(StringsDictFormatter().format(ios_localization))
    assert list(document) == ["items"]
    rules = document["items"]["value"]
    assert rules["one"] == "%1$@ item"
    assert rules["other"] == "%1$@ items"
