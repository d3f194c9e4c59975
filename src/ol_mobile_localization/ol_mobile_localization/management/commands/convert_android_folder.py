"""
Management command to convert an Android string resource folder into iOS
localization folders.
"""

import logging
from argparse import BooleanOptionalAction
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from ol_mobile_localization.utils import (
    convert_android_folder,
    get_conversion_options,
)

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Convert every values* folder of an Android res folder into .lproj folders."""

    help = (
        "Convert an Android strings resource folder into iOS localization "
        "folders (values -> Base.lproj, values-fr -> fr.lproj, ...)."
    )

    def add_arguments(self, parser) -> None:
        """Entry point for subclassed commands to add custom arguments."""
        parser.add_argument(
            "resource_dir",
            help="The Android string resource folder to process.",
        )
        parser.add_argument(
            "--output",
            dest="output_dir",
            required=False,
            help=(
                "Folder where the .lproj folders are written. "
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
        """Handle the convert_android_folder command."""
        resource_dir = Path(options["resource_dir"])
        if not resource_dir.is_dir():
            error_msg = f"Resource folder not found: {resource_dir}"
            raise CommandError(error_msg)

        try:
            output_dir, include_plurals = get_conversion_options(options)
        except ValueError as e:
            raise CommandError(str(e)) from e

        try:
            report = convert_android_folder(
                resource_dir, output_dir, include_plurals=include_plurals
            )
        except OSError as e:
            logger.exception("Conversion of %s failed", resource_dir)
            error_msg = f"Conversion failed: {e}"
            raise CommandError(error_msg) from e

        for result in report.converted:
            self.stdout.write(f"Converted {result.source} -> {result.strings_path.parent}")
        for skipped in report.skipped:
            self.stdout.write(f"Skipped {skipped}: no strings file")

        if not report.succeeded:
            failures = "\n".join(
                f"  {source}: {reason}" for source, reason in report.failed.items()
            )
            error_msg = f"{len(report.failed)} file(s) failed to convert:\n{failures}"
            raise CommandError(error_msg)

        self.stdout.write(
            self.style.SUCCESS(
                f"Conversion completed. {len(report.converted)} folder(s) "
                f"written to: {output_dir}"
            )
        )
