"""Formatters producing iOS Localizable.strings and Localizable.stringsdict."""

import plistlib

from ol_mobile_localization.constants import (
    PLURAL_KEY_SEPARATOR,
    STRINGSDICT_FORMAT,
    STRINGSDICT_FORMAT_KEY,
    STRINGSDICT_PLURAL_RULE_TYPE,
    STRINGSDICT_SPEC_TYPE_KEY,
    STRINGSDICT_VALUE_TYPE,
    STRINGSDICT_VALUE_TYPE_KEY,
    STRINGSDICT_VARIABLE_NAME,
    LocalizationType,
)
from ol_mobile_localization.exceptions import NoPluralsError
from ol_mobile_localization.localization import (
    LocalizationMap,
    LocalizationPlurals,
    LocalizationString,
)

_STRINGS_ESCAPES = str.maketrans({"\\": "\\\\", '"': '\\"', "\n": "\\n"})


def escape_strings_value(value: str) -> str:
    """Escape a key or value for a .strings file."""
    return value.translate(_STRINGS_ESCAPES)


def plural_strings_key(key: str, plural_type: str) -> str:
    """Key used for one plural variant in Localizable.strings, e.g. `items#one`."""
    return f"{key}{PLURAL_KEY_SEPARATOR}{plural_type}"


class LocalizableFormatter:
    """
    Format a localization as a Localizable.strings file.

    Plurals belong in the stringsdict. With `include_plurals` they are also
    written here, one `"<key>#<category>"` line per variant.
    """

    def __init__(self, *, include_plurals: bool = False):
        self.include_plurals = include_plurals

    def format(self, localization: LocalizationMap) -> str:
        """Return the Localizable.strings content, one entry per line."""
        localization = localization.converted(LocalizationType.IOS)
        lines = []
        for key, item in localization.items():
            if isinstance(item, LocalizationString):
                lines.append(self._format_line(key, item.value))
            elif isinstance(item, LocalizationPlurals):
                if not self.include_plurals:
                    continue
                lines.extend(
                    self._format_line(plural_strings_key(key, plural_type), value)
                    for plural_type, value in item.values.items()
                )
        return "".join(lines)

    @staticmethod
    def _format_line(key: str, value: str) -> str:
        return f'"{escape_strings_value(key)}" = "{escape_strings_value(value)}";\n'


class StringsDictFormatter:
    """
    Format the plurals of a localization as a Localizable.stringsdict plist.

    Each plural entry becomes:

        <key>items</key>
        <dict>
            <key>NSStringLocalizedFormatKey</key>
            <string>%#@value@</string>
            <key>value</key>
            <dict>
                <key>NSStringFormatSpecTypeKey</key>
                <string>NSStringPluralRuleType</string>
                <key>NSStringFormatValueTypeKey</key>
                <string>d</string>
                <key>one</key>
                <string>%1$@ item</string>
                ...
            </dict>
        </dict>

    Plural categories are written as they are found in the localization.
    """

    def format(self, localization: LocalizationMap) -> bytes:
        """
        Return the stringsdict document as UTF-8 XML plist bytes.

        Raises:
            NoPluralsError: If the localization has no plurals, in which
                case no stringsdict should be written
        """
        localization = localization.converted(LocalizationType.IOS)
        plurals = localization.plurals()
        if not plurals:
            msg = "No plurals found in localization"
            raise NoPluralsError(msg)

        document = {key: self._format_plurals(item) for key, item in plurals}
        return plistlib.dumps(document, fmt=plistlib.FMT_XML, sort_keys=False)

    @staticmethod
    def _format_plurals(item: LocalizationPlurals) -> dict:
        rules = {
            STRINGSDICT_SPEC_TYPE_KEY: STRINGSDICT_PLURAL_RULE_TYPE,
            STRINGSDICT_VALUE_TYPE_KEY: STRINGSDICT_VALUE_TYPE,
        }
        rules.update(
            (str(plural_type), value) for plural_type, value in item.values.items()
        )
        return {
            STRINGSDICT_FORMAT_KEY: STRINGSDICT_FORMAT,
            STRINGSDICT_VARIABLE_NAME: rules,
        }
