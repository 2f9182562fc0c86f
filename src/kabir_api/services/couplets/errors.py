class CoupletsError(RuntimeError):
    pass


class ValidationError(CoupletsError):
    """An enumerated query option holds a value outside its accepted set."""


class DataUnavailable(CoupletsError):
    """The couplets data file is missing, unreadable or malformed."""


class ConversionError(CoupletsError, ValueError):
    """A boolean-like option could not be converted."""
