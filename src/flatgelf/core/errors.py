"""Exception types raised by flatgelf."""


class GelfError(Exception):
    """Base class for recoverable flatgelf failures."""


class ValueConversionError(GelfError):
    """Raised when an object cannot be converted to a Value."""


class EncodingError(GelfError):
    """Raised when a record or flat mapping cannot be encoded as JSON."""


class InvalidKeyError(TypeError):
    """Raised when a mapping key is neither a string nor a character.

    This is a programming error, not a recoverable condition, so it does not
    derive from GelfError and is never caught inside the package.
    """
