"""Sample documents shared by the ol_mobile_localization tests."""

from pathlib import Path

SIMPLE_STRINGS_XML = """<?xml version="1.0" encoding="utf-8"?>
<resources>
    <string name="greeting">Hello %s</string>
    <plurals name="items">
        <item quantity="one">%1$s item</item>
        <item quantity="other">%1$s items</item>
    </plurals>
</resources>
"""

STRINGS_ONLY_XML = """<?xml version="1.0" encoding="utf-8"?>
<resources>
    <string name="app_name">Converter</string>
    <string name="welcome">Welcome %1$s, you are %2$d years old</string>
</resources>
"""

FRENCH_STRINGS_XML = """<?xml version="1.0" encoding="utf-8"?>
<resources>
    <string name="greeting">Bonjour %s</string>
    <plurals name="items">
        <item quantity="one">%1$s élément</item>
        <item quantity="other">%1$s éléments</item>
    </plurals>
</resources>
"""

INVALID_QUANTITY_XML = """<resources>
    <plurals name="items">
        <item quantity="bogus">%1$s items</item>
    </plurals>
</resources>
"""


def write_values_folder(resource_dir: Path, folder_name: str, content: str) -> Path:
    """Create `<resource_dir>/<folder_name>/strings.xml`."""
    values_dir = resource_dir / folder_name
    values_dir.mkdir(parents=True, exist_ok=True)
    strings_file = values_dir / "strings.xml"
    strings_file.write_text(content, encoding="utf-8")
    return strings_file
