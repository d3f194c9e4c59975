"""
Utility functions for converting Android resources into iOS localizations.

This module drives the conversion engine: it resolves configuration, reads
and writes files, and walks Android resource folders.
"""

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from django.conf import settings

from ol_mobile_localization.constants import (
    ANDROID_STRINGS_FILE_NAME,
    ANDROID_VALUES_FOLDER_PREFIX,
    FALSY_VALUES,
    INCLUDE_PLURALS_SETTING,
    IOS_BASE_FOLDER_NAME,
    IOS_FOLDER_SUFFIX,
    IOS_LOCALIZABLE_STRINGS_FILE_NAME,
    IOS_STRINGSDICT_FILE_NAME,
    OUTPUT_DIR_SETTING,
    TRUTHY_VALUES,
    LocalizationType,
)
from ol_mobile_localization.exceptions import MobileLocalizationError, NoPluralsError
from ol_mobile_localization.formatters import LocalizableFormatter, StringsDictFormatter
from ol_mobile_localization.localization import LocalizationMap
from ol_mobile_localization.parsers import AndroidStringsParser

logger = logging.getLogger(__name__)

_VALUES_FOLDER_RE = re.compile(r"^values-(.+)$")
_REGION_QUALIFIER_RE = re.compile(r"^r([A-Za-z]{2}|\d{3})$")


@dataclass
class ConversionResult:
    """Files written for one converted strings.xml."""

    source: Path
    strings_path: Path
    stringsdict_path: Path | None = None


@dataclass
class FolderConversionReport:
    """Outcome of converting an Android resource folder."""

    converted: list[ConversionResult] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    failed: dict[Path, str] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return not self.failed


# ============================================================================
# Configuration Helpers
# ============================================================================


def get_config_value(
    key: str, options: dict, setting_key: str, default: Any = None
) -> Any:
    """
    Get configuration value from options, settings, or environment.

    An option counts as given unless it is None, so an explicit False wins.
    """
    if options.get(key) is not None:
        return options[key]
    if hasattr(settings, setting_key):
        return getattr(settings, setting_key)
    return os.environ.get(setting_key, default)


def to_bool(value: Any) -> bool:
    """
    Interpret a configuration value as a boolean.

    Examples:
        >>> to_bool("true")
        True
        >>> to_bool("0")
        False
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    normalized = str(value).strip().lower()
    if normalized in TRUTHY_VALUES:
        return True
    if normalized in FALSY_VALUES:
        return False
    msg = f"Invalid boolean value: {value!r}"
    raise ValueError(msg)


# ============================================================================
# Locale Folder Names
# ============================================================================


def ios_folder_name(values_folder_name: str) -> str | None:
    """
    Convert an Android values folder name to its iOS .lproj counterpart.

    Examples:
        values          -> Base.lproj
        values-fr       -> fr.lproj
        values-pt-rBR   -> pt-BR.lproj
        values-es-r419  -> es-419.lproj
        values-b+sr+Latn -> sr-Latn.lproj
        drawable        -> None
    """
    if values_folder_name == ANDROID_VALUES_FOLDER_PREFIX:
        return IOS_BASE_FOLDER_NAME
    match = _VALUES_FOLDER_RE.match(values_folder_name)
    if not match:
        return None
    qualifier = match.group(1)
    if qualifier.startswith("b+"):
        # BCP 47 qualifier, e.g. b+sr+Latn
        locale = qualifier[2:].replace("+", "-")
    else:
        parts = []
        for idx, part in enumerate(qualifier.split("-")):
            region_match = _REGION_QUALIFIER_RE.match(part) if idx else None
            parts.append(region_match.group(1) if region_match else part)
        locale = "-".join(parts)
    return f"{locale}{IOS_FOLDER_SUFFIX}"


# ============================================================================
# File Helpers
# ============================================================================


def read_file(file_path: Path) -> bytes:
    """Read raw file bytes; the XML parser detects the encoding."""
    with file_path.open("rb") as f:
        return f.read()


def write_file(file_path: Path, content: str | bytes) -> None:
    """Write text as UTF-8, or bytes as they are."""
    file_path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, str):
        content = content.encode("utf-8")
    with file_path.open("wb") as f:
        f.write(content)


def parse_android_file(file_path: Path) -> LocalizationMap:
    """Read and parse an Android strings.xml file."""
    return AndroidStringsParser().parse(read_file(file_path))


# ============================================================================
# Conversion
# ============================================================================


def convert_android_file(
    file_path: Path, output_dir: Path, *, include_plurals: bool = False
) -> ConversionResult:
    """
    Convert one Android strings.xml into Localizable.strings and
    Localizable.stringsdict files in `output_dir`.

    The stringsdict is not written when the source has no plurals.

    Raises:
        OSError: If a file can't be read or written
        MobileLocalizationError: If the source can't be parsed
    """
    file_path = Path(file_path)
    output_dir = Path(output_dir)
    localization = parse_android_file(file_path).converted(LocalizationType.IOS)

    strings_path = output_dir / IOS_LOCALIZABLE_STRINGS_FILE_NAME
    strings_content = LocalizableFormatter(include_plurals=include_plurals).format(
        localization
    )
    write_file(strings_path, strings_content)
    logger.info("Wrote %s", strings_path)
    result = ConversionResult(source=file_path, strings_path=strings_path)

    try:
        stringsdict_content = StringsDictFormatter().format(localization)
    except NoPluralsError:
        logger.info("No plural found in %s, skipping stringsdict file", file_path)
        return result

    stringsdict_path = output_dir / IOS_STRINGSDICT_FILE_NAME
    write_file(stringsdict_path, stringsdict_content)
    logger.info("Wrote %s", stringsdict_path)
    result.stringsdict_path = stringsdict_path
    return result


def get_values_folders(resource_dir: Path) -> list[Path]:
    """Return the `values*` folders of an Android resource folder, sorted by name."""
    return sorted(
        path
        for path in resource_dir.iterdir()
        if path.is_dir() and path.name.startswith(ANDROID_VALUES_FOLDER_PREFIX)
    )


def convert_android_folder(
    resource_dir: Path, output_dir: Path, *, include_plurals: bool = False
) -> FolderConversionReport:
    """
    Convert every `values*/strings.xml` of an Android resource folder into
    the matching `.lproj` folder under `output_dir`.

    A failing folder does not stop the others; check
    `FolderConversionReport.succeeded`.

    Raises:
        OSError: If `resource_dir` can't be listed
    """
    resource_dir = Path(resource_dir)
    output_dir = Path(output_dir)
    report = FolderConversionReport()

    for values_dir in get_values_folders(resource_dir):
        source = values_dir / ANDROID_STRINGS_FILE_NAME
        if not source.is_file():
            logger.warning("No %s in %s, skipping", ANDROID_STRINGS_FILE_NAME, values_dir)
            report.skipped.append(values_dir)
            continue

        folder_name = ios_folder_name(values_dir.name)
        if folder_name is None:
            msg = f"Could not convert values folder name '{values_dir.name}'"
            logger.error(msg)
            report.failed[source] = msg
            continue

        try:
            result = convert_android_file(
                source, output_dir / folder_name, include_plurals=include_plurals
            )
        except (OSError, MobileLocalizationError) as e:
            logger.exception("Failed to convert %s", source)
            report.failed[source] = str(e)
            continue
        report.converted.append(result)

    return report


def get_conversion_options(options: dict) -> tuple[Path, bool]:
    """
    Resolve the output folder and plural inclusion for a conversion command.

    Falls back to Django settings, then environment, then the current
    working directory and `False`.
    """
    output_dir = get_config_value("output_dir", options, OUTPUT_DIR_SETTING)
    include_plurals = get_config_value(
        "include_plurals", options, INCLUDE_PLURALS_SETTING, default=False
    )
    return Path(output_dir or Path.cwd()), to_bool(include_plurals)
