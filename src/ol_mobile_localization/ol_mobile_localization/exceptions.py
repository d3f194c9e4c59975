"""Exceptions for the mobile localization converter."""


class MobileLocalizationError(Exception):
    """Base class for all localization conversion errors."""


class AndroidStringsParseError(MobileLocalizationError):
    """
    Raised when an Android strings.xml document can't be turned into a
    LocalizationMap.
    """

    def __init__(self, reason, key=None, line=None):
        self.reason = reason
        self.key = key
        self.line = line
        super().__init__(str(self))

    def __str__(self):
        location = []
        if self.key is not None:
            location.append(f"key '{self.key}'")
        if self.line is not None:
            location.append(f"line {self.line}")
        if not location:
            return self.reason
        return f"{self.reason} ({', '.join(location)})"


class UnsupportedConversionError(MobileLocalizationError):
    """Raised when converting between two types that are not supported."""

    def __init__(self, source_type, target_type):
        self.source_type = source_type
        self.target_type = target_type
        super().__init__(str(self))

    def __str__(self):
        return f"Unsupported conversion {self.source_type} -> {self.target_type}"


class NoPluralsError(MobileLocalizationError):
    """Raised when a stringsdict is requested for a map without plurals."""


class ReplacerInitializationError(MobileLocalizationError):
    """Raised when a replacer pattern can't be compiled."""


class AndroidStringsFormatError(MobileLocalizationError):
    """Raised when a LocalizationMap can't be written as strings.xml."""

    def __init__(self, reason, key=None):
        self.reason = reason
        self.key = key
        super().__init__(str(self))

    def __str__(self):
        if self.key is None:
            return self.reason
        return f"{self.reason} (key '{self.key}')"
