"""
Error types raised by the codecs

Both errors follow the same shape: a ``ValueError`` subclass carrying an
``ErrorType`` enum so callers can branch on the failure kind without parsing
messages.
"""

from enum import Enum


class ConfigurationError(ValueError):
    """An alphabet or padding character that cannot be used by a codec"""

    class ErrorType(Enum):
        """Reasons an AlphabetSpec is rejected"""
        BAD_PADDING_LENGTH = "bad_padding_length"
        RESERVED_PADDING_CHARACTER = "reserved_padding_character"
        WRONG_ALPHABET_LENGTH = "wrong_alphabet_length"
        RESERVED_ALPHABET_CHARACTER = "reserved_alphabet_character"
        PADDING_IN_ALPHABET = "padding_in_alphabet"
        DUPLICATE_SYMBOL = "duplicate_symbol"

    def __init__(self, error_type: ErrorType, message: str = ""):
        self.error_type = error_type
        super().__init__(f"{error_type.value}: {message}" if message else error_type.value)


class DecodeError(ValueError):
    """Encoded data rejected by a strict decoder"""

    class ErrorType(Enum):
        """Kinds of malformed input"""
        INVALID_LENGTH = "invalid_length"
        UNKNOWN_CHARACTER = "unknown_character"
        INVALID_PADDING_LENGTH = "invalid_padding_length"
        MISPLACED_PADDING = "misplaced_padding"

    def __init__(self, error_type: ErrorType, message: str = ""):
        self.error_type = error_type
        super().__init__(f"{error_type.value}: {message}" if message else error_type.value)
