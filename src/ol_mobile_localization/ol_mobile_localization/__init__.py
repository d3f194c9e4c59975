"""Convert Android string resources into iOS localization files."""

__version__ = "0.1.0"
