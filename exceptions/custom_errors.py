class InvalidTimeFormatError(Exception):
    """Raised when a clock time is not a valid 24-hour "HH:MM" string."""

    pass


class NonChronologicalMealsError(Exception):
    """Raised when wake time and meal times are not in chronological order."""

    pass


class InvalidRuleError(Exception):
    """Raised when a caller-supplied interaction rule is malformed."""

    pass


class CatalogLoadError(Exception):
    """Raised when a bundled catalog file cannot be read."""

    pass


class CatalogContentError(Exception):
    """Raised when the content of a catalog file is not as expected."""

    pass


# Mapping of custom exceptions to HTTP status codes
CUSTOM_ERRORS = {
    InvalidTimeFormatError: 400,
    NonChronologicalMealsError: 400,
    InvalidRuleError: 400,
    CatalogLoadError: 500,
    CatalogContentError: 500,
}
