"""
Management command to convert an Android strings.xml file into iOS
Localizable.strings and Localizable.stringsdict files.
"""

import logging
from argparse import BooleanOptionalAction
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from ol_mobile_localization.exceptions import MobileLocalizationError
from ol_mobile_localization.utils import convert_android_file, get_conversion_options

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Convert an Android strings.xml file into iOS localization files."""

    help = (
        "Read an Android strings.xml file and generate the corresponding "
        "Localizable.strings and Localizable.stringsdict files for iOS."
    )

    def add_arguments(self, parser) -> None:
        """Entry point for subclassed commands to add custom arguments."""
        parser.add_argument(
            "strings_file",
            help="The source Android strings.xml file.",
        )
        parser.add_argument(
            "--output",
            dest="output_dir",
            required=False,
            help=(
                "Folder where the iOS files are written. "
                "Defaults to the current working directory."
            ),
        )
        parser.add_argument(
            "--include-plurals",
            dest="include_plurals",
            action=BooleanOptionalAction,
            default=None,
            help=(
                "Also write plural keys into Localizable.strings. "
                "Overrides MOBILE_LOCALIZATION_INCLUDE_PLURALS."
            ),
        )

    def handle(self, **options) -> None:
        """Handle the convert_android_file command."""
        strings_file = Path(options["strings_file"])
        if not strings_file.is_file():
            error_msg = f"Strings file not found: {strings_file}"
            raise CommandError(error_msg)

        try:
            output_dir, include_plurals = get_conversion_options(options)
        except ValueError as e:
            raise CommandError(str(e)) from e

        try:
            result = convert_android_file(
                strings_file, output_dir, include_plurals=include_plurals
            )
        except (OSError, MobileLocalizationError) as e:
            logger.exception("Conversion of %s failed", strings_file)
            error_msg = f"Conversion failed: {e}"
            raise CommandError(error_msg) from e

        if result.stringsdict_path is None:
            self.stdout.write("No plural found, skipping stringsdict file.")
        self.stdout.write(
            self.style.SUCCESS(f"Conversion completed. Files written to: {output_dir}")
        )
