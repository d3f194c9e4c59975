"""Regex based rewriting of string format parameters."""

import re

from ol_mobile_localization.constants import (
    STRING_PARAMETER_PATTERN,
    STRING_PARAMETER_TEMPLATE,
)
from ol_mobile_localization.exceptions import ReplacerInitializationError


class RegexReplacer:
    """
    Replace every match of a pattern with a template.

    The template uses `re` group references (`\\1`); an unmatched optional
    group is substituted with an empty string.
    """

    def __init__(self, pattern: str, template: str):
        try:
            self.regex = re.compile(pattern)
        except re.error as e:
            msg = f"Could not compile replacer pattern {pattern!r}: {e}"
            raise ReplacerInitializationError(msg) from e
        self.template = template

    def replacing_matches(self, text: str) -> str:
        """Return `text` with all matches replaced."""
        return self.regex.sub(self.template, text)


# Built once: a broken pattern is a defect and must fail at import.
STRING_PARAMETER_REPLACER = RegexReplacer(
    STRING_PARAMETER_PATTERN, STRING_PARAMETER_TEMPLATE
)


def android_to_ios_parameters(text: str) -> str:
    """
    Rewrite Android string parameters into their iOS form.

    Examples:
        %s       -> %@
        %1$s     -> %1$@
        %d, %.2f -> unchanged
    """
    return STRING_PARAMETER_REPLACER.replacing_matches(text)
