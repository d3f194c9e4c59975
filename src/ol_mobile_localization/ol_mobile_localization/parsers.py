"""Read and write Android strings.xml resource documents."""

import re

from lxml import etree

from ol_mobile_localization.constants import (
    ANDROID_ITEM_TAG,
    ANDROID_NAME_ATTRIBUTE,
    ANDROID_PLURALS_TAG,
    ANDROID_QUANTITY_ATTRIBUTE,
    ANDROID_RESOURCES_TAG,
    ANDROID_STRING_TAG,
    LocalizationType,
    PluralType,
)
from ol_mobile_localization.exceptions import (
    AndroidStringsFormatError,
    AndroidStringsParseError,
)
from ol_mobile_localization.localization import (
    LocalizationMap,
    LocalizationPlurals,
    LocalizationString,
)

_XML_DECLARATION_RE = re.compile(r"^\s*<\?xml[^>]*\?>")


def _text_content(element: etree._Element, key: str) -> str:
    """Concatenate the text of an element and its child elements, skipping comments."""
    parts = [element.text or ""]
    for child in element:
        if isinstance(child, etree._Entity):
            # Only external entities are left unresolved by the parser
            msg = f"Unresolved entity reference {child.text}"
            raise AndroidStringsParseError(msg, key=key, line=child.sourceline)
        if isinstance(child.tag, str):
            parts.append(_text_content(child, key))
        parts.append(child.tail or "")
    return "".join(parts)


class AndroidStringsParser:
    """
    Parse an Android strings.xml document into a LocalizationMap.

    Only `<string>` and `<plurals>` elements are read; any other resource
    (string-array, integer, ...) is ignored. When two elements share a name
    the last one wins.
    """

    def parse(self, content: str | bytes) -> LocalizationMap:
        """
        Parse a complete strings.xml document.

        Args:
            content: Raw bytes (encoding taken from the BOM or XML declaration)
                or already decoded text

        Returns:
            LocalizationMap of type ANDROID

        Raises:
            AndroidStringsParseError: If the document is not well formed, or
                an element is missing a required attribute, or a plural
                quantity is unknown
        """
        root = self._parse_document(content)
        localizations = {}
        for element in root:
            if not isinstance(element.tag, str):
                continue
            if element.tag == ANDROID_STRING_TAG:
                key = self._get_name(element)
                localizations[key] = LocalizationString(_text_content(element, key))
            elif element.tag == ANDROID_PLURALS_TAG:
                key = self._get_name(element)
                localizations[key] = self._parse_plurals(key, element)
        return LocalizationMap(LocalizationType.ANDROID, localizations)

    def _parse_document(self, content: str | bytes) -> etree._Element:
        if isinstance(content, str):
            # lxml refuses decoded text carrying an encoding declaration
            content = _XML_DECLARATION_RE.sub("", content.lstrip("\ufeff"), count=1)
            try:
                content = content.encode("utf-8")
            except UnicodeEncodeError as e:
                msg = f"Invalid text, not encodable as UTF-8: {e.reason}"
                raise AndroidStringsParseError(msg) from e
        parser = etree.XMLParser(
            resolve_entities="internal",
            no_network=True,
            recover=False,
            remove_blank_text=False,
        )
        try:
            return etree.fromstring(content, parser=parser)
        except etree.XMLSyntaxError as e:
            raise AndroidStringsParseError(
                f"Invalid XML document: {e.msg}", line=e.lineno
            ) from e

    def _get_name(self, element: etree._Element) -> str:
        name = element.get(ANDROID_NAME_ATTRIBUTE)
        if name is None:
            msg = f"<{element.tag}> element has no '{ANDROID_NAME_ATTRIBUTE}'"
            raise AndroidStringsParseError(msg, line=element.sourceline)
        return name

    def _parse_plurals(self, key: str, element: etree._Element) -> LocalizationPlurals:
        values = {}
        for item in element:
            if item.tag != ANDROID_ITEM_TAG:
                continue
            quantity = item.get(ANDROID_QUANTITY_ATTRIBUTE)
            if quantity is None:
                msg = (
                    f"<{ANDROID_ITEM_TAG}> element has no "
                    f"'{ANDROID_QUANTITY_ATTRIBUTE}'"
                )
                raise AndroidStringsParseError(msg, key=key, line=item.sourceline)
            try:
                plural_type = PluralType(quantity)
            except ValueError as e:
                msg = f"Unknown plural quantity '{quantity}'"
                raise AndroidStringsParseError(
                    msg, key=key, line=item.sourceline
                ) from e
            values[plural_type] = _text_content(item, key)
        if not values:
            msg = f"<{ANDROID_PLURALS_TAG}> element has no <{ANDROID_ITEM_TAG}>"
            raise AndroidStringsParseError(msg, key=key, line=element.sourceline)
        return LocalizationPlurals(values)


class AndroidStringsSerializer:
    """Write a LocalizationMap back as an Android strings.xml document."""

    def format(self, localization: LocalizationMap) -> bytes:
        """
        Serialize `localization` as UTF-8 strings.xml.

        Raises:
            UnsupportedConversionError: If `localization` is an iOS map
            AndroidStringsFormatError: If a key or value holds characters
                XML can't represent, such as control characters
        """
        localization = localization.converted(LocalizationType.ANDROID)
        root = etree.Element(ANDROID_RESOURCES_TAG)
        for key, item in localization.items():
            if isinstance(item, LocalizationString):
                element = self._sub_element(
                    root, key, ANDROID_STRING_TAG, {ANDROID_NAME_ATTRIBUTE: key}
                )
                self._set_text(element, key, item.value)
            else:
                element = self._sub_element(
                    root, key, ANDROID_PLURALS_TAG, {ANDROID_NAME_ATTRIBUTE: key}
                )
                for plural_type, value in item.values.items():
                    child = etree.SubElement(
                        element,
                        ANDROID_ITEM_TAG,
                        {ANDROID_QUANTITY_ATTRIBUTE: str(plural_type)},
                    )
                    self._set_text(child, key, value)
        return etree.tostring(
            root, xml_declaration=True, encoding="utf-8", pretty_print=True
        )

    @staticmethod
    def _sub_element(
        parent: etree._Element, key: str, tag: str, attributes: dict
    ) -> etree._Element:
        try:
            return etree.SubElement(parent, tag, attributes)
        except ValueError as e:
            msg = f"Key can't be written as XML: {e}"
            raise AndroidStringsFormatError(msg, key=key) from e

    @staticmethod
    def _set_text(element: etree._Element, key: str, value: str) -> None:
        try:
            element.text = value
        except ValueError as e:
            msg = f"Value can't be written as XML: {e}"
            raise AndroidStringsFormatError(msg, key=key) from e
