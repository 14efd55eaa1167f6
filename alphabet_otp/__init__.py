"""
alphabet_otp — One-Time Pad over a custom alphabet
==================================================
Classical one-time-pad cipher on any ordered set of distinct symbols.

    size == 2^n   ->  XOR pairing           [P xor K]
    otherwise     ->  modular pairing       [(P + K) mod s]

Modules:
    otp         OneTimePad engine, Mode
    errors      exception hierarchy
    randomness  secure / seeded key sources
    printer     symbol/index tables
    cli         `alphabet-otp` command line

Not a general cryptographic library: no authentication, no key exchange,
no persistence.
"""

__version__ = "1.0.0"

from .errors     import (
    OTPError,
    AlphabetError,
    AlphabetTooSmall,
    DuplicateSymbol,
    KeyTooShort,
    KeyExhausted,
    InvalidSymbol,
)
from .otp        import OneTimePad, Mode, is_power_of_two
from .randomness import RandomSource, SecureRandomSource, SeededRandomSource
from .printer    import format_table, pretty_print, format_summary

__all__ = [
    "OneTimePad",
    "Mode",
    "is_power_of_two",
    "OTPError",
    "AlphabetError",
    "AlphabetTooSmall",
    "DuplicateSymbol",
    "KeyTooShort",
    "KeyExhausted",
    "InvalidSymbol",
    "RandomSource",
    "SecureRandomSource",
    "SeededRandomSource",
    "format_table",
    "pretty_print",
    "format_summary",
]
