"""
In-memory representation of a localization bundle.

A LocalizationMap holds LocalizationItems by key, and is tagged with the
platform dialect its string parameters are written in. The dialect can only
change through `LocalizationMap.converted`, which rewrites every value.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ol_mobile_localization.constants import LocalizationType, PluralType
from ol_mobile_localization.exceptions import UnsupportedConversionError
from ol_mobile_localization.replacer import android_to_ios_parameters


@dataclass(frozen=True)
class LocalizationString:
    """A single translated string."""

    value: str


@dataclass(frozen=True)
class LocalizationPlurals:
    """One translated string per plural category."""

    values: Mapping[PluralType, str] = field(default_factory=dict)

    def __post_init__(self):
        # Private read-only copy
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def __eq__(self, other):
        if not isinstance(other, LocalizationPlurals):
            return NotImplemented
        return dict(self.values) == dict(other.values)

    def __hash__(self):
        return hash(frozenset(self.values.items()))


LocalizationItem = LocalizationString | LocalizationPlurals


def convert_item(item: LocalizationItem, convert_text) -> LocalizationItem:
    """Apply `convert_text` to every string held by `item`."""
    if isinstance(item, LocalizationString):
        return LocalizationString(convert_text(item.value))
    if isinstance(item, LocalizationPlurals):
        return LocalizationPlurals(
            {
                plural_type: convert_text(value)
                for plural_type, value in item.values.items()
            }
        )
    msg = f"Unknown localization item: {item!r}"
    raise TypeError(msg)


class LocalizationMap:
    """Ordered mapping of localization keys to items, for one platform."""

    def __init__(
        self,
        localization_type: LocalizationType,
        localizations: Mapping[str, LocalizationItem] | None = None,
    ):
        self._type = LocalizationType(localization_type)
        self._localizations: dict[str, LocalizationItem] = dict(localizations or {})

    @classmethod
    def from_strings(
        cls, localization_type: LocalizationType, strings: Mapping[str, str]
    ) -> "LocalizationMap":
        """Build a map holding only plain strings."""
        return cls(
            localization_type,
            {key: LocalizationString(value) for key, value in strings.items()},
        )

    @property
    def localization_type(self) -> LocalizationType:
        return self._type

    def __getitem__(self, key: str) -> LocalizationItem:
        return self._localizations[key]

    def __setitem__(self, key: str, item: LocalizationItem | None) -> None:
        if item is None:
            self._localizations.pop(key, None)
            return
        if not isinstance(item, (LocalizationString, LocalizationPlurals)):
            msg = f"Expected a localization item for '{key}', got {item!r}"
            raise TypeError(msg)
        self._localizations[key] = item

    def __delitem__(self, key: str) -> None:
        del self._localizations[key]

    def __contains__(self, key: object) -> bool:
        return key in self._localizations

    def __iter__(self) -> Iterator[str]:
        return iter(self._localizations)

    def __len__(self) -> int:
        return len(self._localizations)

    def __eq__(self, other):
        if not isinstance(other, LocalizationMap):
            return NotImplemented
        return (
            self._type == other._type and self._localizations == other._localizations
        )

    def __repr__(self):
        return (
            f"{self.__class__.__name__}({self._type!s}, "
            f"{len(self._localizations)} localizations)"
        )

    def get(self, key: str, default=None) -> LocalizationItem | None:
        return self._localizations.get(key, default)

    def keys(self) -> list[str]:
        return list(self._localizations)

    def items(self) -> list[tuple[str, LocalizationItem]]:
        return list(self._localizations.items())

    def strings(self) -> list[tuple[str, LocalizationString]]:
        """Plain string entries, in insertion order."""
        return [
            (key, item)
            for key, item in self._localizations.items()
            if isinstance(item, LocalizationString)
        ]

    def plurals(self) -> list[tuple[str, LocalizationPlurals]]:
        """Plural entries, in insertion order."""
        return [
            (key, item)
            for key, item in self._localizations.items()
            if isinstance(item, LocalizationPlurals)
        ]

    def converted(self, localization_type: LocalizationType) -> "LocalizationMap":
        """
        Return this localization in another platform dialect.

        Converting to the current type returns the map itself. Only
        Android -> iOS is supported; every string parameter is rewritten
        while keys and plural categories are kept as they are.

        Raises:
            UnsupportedConversionError: for iOS -> Android
        """
        localization_type = LocalizationType(localization_type)
        if localization_type == self._type:
            return self
        if localization_type == LocalizationType.IOS:
            return LocalizationMap(
                LocalizationType.IOS,
                {
                    key: convert_item(item, android_to_ios_parameters)
                    for key, item in self._localizations.items()
                },
            )
        raise UnsupportedConversionError(self._type, localization_type)
