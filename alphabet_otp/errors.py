"""
Errors raised by the one-time-pad engine.

All of them derive from ValueError: every failure here is a deterministic
input-validation failure, never a transient fault, so nothing is retried.
"""


class OTPError(ValueError):
    """Base class for all alphabet_otp errors."""


class AlphabetError(OTPError):
    pass


class AlphabetTooSmall(AlphabetError):
    def __init__(self, size: int):
        self.size = size
        super().__init__(f"Alphabet must contain at least 2 symbols, got {size}.")


class DuplicateSymbol(AlphabetError):
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"Alphabet contains duplicate symbol '{symbol}'")


class KeyTooShort(OTPError):
    """Key is shorter than the message being encrypted."""

    def __init__(self, key_length: int, required: int):
        self.key_length = key_length
        self.required   = required
        super().__init__(f"Message too long for key of size {key_length}")


class KeyExhausted(OTPError):
    """Ciphertext is longer than the key it is decrypted with."""

    def __init__(self, ciphertext_length: int, key_length: int):
        self.ciphertext_length = ciphertext_length
        self.key_length        = key_length
        super().__init__(
            f"Ciphertext of length {ciphertext_length} exhausts key of size {key_length}"
        )


_SOURCES = {
    "message": "Message",
    "key":     "Key",
    "pad":     "Pad symbol",
}


class InvalidSymbol(OTPError):
    """
    A symbol outside the alphabet was met.
    `source` is "message", "key", "pad" or None for a bare lookup.
    """

    def __init__(self, symbol, source: str = None):
        self.symbol = symbol
        self.source = source
        if source is None:
            text = f"Symbol '{symbol}' is not in the alphabet"
        elif source == "pad":
            text = f"Pad symbol '{symbol}' is not in the alphabet"
        else:
            text = f"{_SOURCES[source]} contains invalid symbol '{symbol}'"
        super().__init__(text)
