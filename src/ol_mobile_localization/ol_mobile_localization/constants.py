"""Constants for mobile localization conversion."""

from enum import StrEnum


class LocalizationType(StrEnum):
    """
    Platform dialect of a localization.

    String parameters differ between the two: Java's `%s` on Android is
    `%@` on iOS.
    """

    ANDROID = "android"
    IOS = "ios"


class PluralType(StrEnum):
    """Plural quantity categories shared by Android and iOS."""

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


# Android strings.xml vocabulary
ANDROID_RESOURCES_TAG = "resources"
ANDROID_STRING_TAG = "string"
ANDROID_PLURALS_TAG = "plurals"
ANDROID_ITEM_TAG = "item"
ANDROID_NAME_ATTRIBUTE = "name"
ANDROID_QUANTITY_ATTRIBUTE = "quantity"
ANDROID_STRINGS_FILE_NAME = "strings.xml"
ANDROID_VALUES_FOLDER_PREFIX = "values"

# `%s`, `%1$s` -> `%@`, `%1$@`
STRING_PARAMETER_PATTERN = r"%([0-9]+\$)?s"
STRING_PARAMETER_TEMPLATE = r"%\1@"

# iOS output files
IOS_LOCALIZABLE_STRINGS_FILE_NAME = "Localizable.strings"
IOS_STRINGSDICT_FILE_NAME = "Localizable.stringsdict"
IOS_BASE_FOLDER_NAME = "Base.lproj"
IOS_FOLDER_SUFFIX = ".lproj"

# Separator between a plurals key and its category in Localizable.strings.
# `#` is not allowed in Android resource names so it cannot collide.
PLURAL_KEY_SEPARATOR = "#"

# stringsdict plist keys
STRINGSDICT_FORMAT_KEY = "NSStringLocalizedFormatKey"
STRINGSDICT_SPEC_TYPE_KEY = "NSStringFormatSpecTypeKey"
STRINGSDICT_VALUE_TYPE_KEY = "NSStringFormatValueTypeKey"
STRINGSDICT_PLURAL_RULE_TYPE = "NSStringPluralRuleType"
STRINGSDICT_VARIABLE_NAME = "value"
STRINGSDICT_FORMAT = f"%#@{STRINGSDICT_VARIABLE_NAME}@"
STRINGSDICT_VALUE_TYPE = "d"

# Setting names
INCLUDE_PLURALS_SETTING = "MOBILE_LOCALIZATION_INCLUDE_PLURALS"
OUTPUT_DIR_SETTING = "MOBILE_LOCALIZATION_OUTPUT_DIR"

TRUTHY_VALUES = {"1", "true", "yes", "on"}
FALSY_VALUES = {"0", "false", "no", "off", ""}
