"""Custom exceptions for the typeahead core."""


class TypeaheadError(Exception):
    """Base class for typeahead errors."""


class TypeaheadConfigError(TypeaheadError):
    """Raised when a typeahead is constructed from an invalid candidate list."""


class TypeaheadIntegrationError(TypeaheadError):
    """Raised when the host reports an index that is not currently rendered."""
