"""
One-Time Pad over an arbitrary alphabet
=======================================
Every symbol is replaced by its position in the alphabet, combined with the
key symbol at the same position, and mapped back to a symbol.

Pairing is chosen once from the alphabet size:

    size == 2^n   ->  c = p XOR k          (self-inverse)
    otherwise     ->  c = (p + k) mod size,  p = (c - k) mod size

XOR only stays inside [0, size) when size is a power of two; modular
addition is closed for any size and is undone by modular subtraction.

Messages shorter than the key are right-padded with the pad symbol so the
ciphertext is always as long as the key and does not reveal the message
length. Nothing is padded message-ward: a short key still leaks length.
"""

import enum
import logging
from typing import Sequence

from .config import DEFAULT_PAD_SYMBOL
from .errors import (
    AlphabetTooSmall,
    DuplicateSymbol,
    InvalidSymbol,
    KeyExhausted,
    KeyTooShort,
)
from .randomness import SecureRandomSource

logger = logging.getLogger(__name__)


class Mode(enum.Enum):
    XOR     = "xor"
    MODULAR = "modular"


def is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


class OneTimePad:
    """
    Alphabet-indexed one-time-pad engine.

    The alphabet is either a string (each character is a symbol, results are
    strings) or any sequence of distinct hashable symbols (results are
    tuples). The engine holds no per-call state and is safe to share between
    threads.
    """

    def __init__(self, alphabet: Sequence, pad_symbol=None, rng=None):
        if len(alphabet) < 2:
            raise AlphabetTooSmall(len(alphabet))

        index = {}
        for position, symbol in enumerate(alphabet):
            if symbol in index:
                raise DuplicateSymbol(symbol)
            index[symbol] = position

        self._as_text  = isinstance(alphabet, str)
        self._alphabet = alphabet if self._as_text else tuple(alphabet)
        self._index    = index
        self._size     = len(alphabet)
        self._rng      = rng if rng is not None else SecureRandomSource()

        if pad_symbol is None:
            pad_symbol = DEFAULT_PAD_SYMBOL if DEFAULT_PAD_SYMBOL in index else self._alphabet[-1]
        elif pad_symbol not in index:
            raise InvalidSymbol(pad_symbol, source="pad")
        self._pad = pad_symbol

        if is_power_of_two(self._size):
            self._mode = Mode.XOR
            logger.info(
                "Alphabet is of size 2^n (%d), will use [P xor K] instead of [(P + K) %% s]",
                self._size,
            )
        else:
            self._mode = Mode.MODULAR
            logger.info("Alphabet is of size %d, will use [(P + K) %% s]", self._size)

    # -- read-only state -----------------------------------------------------

    @property
    def alphabet(self):
        return self._alphabet

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def pad_symbol(self):
        return self._pad

    @property
    def size(self) -> int:
        return self._size

    @property
    def rng(self):
        return self._rng

    def __len__(self):
        return self._size

    def __contains__(self, symbol):
        try:
            return symbol in self._index
        except TypeError:
            return False

    # -- lookups -------------------------------------------------------------

    def index_of(self, symbol) -> int:
        """Position of `symbol` in the alphabet. Raises InvalidSymbol if absent."""
        try:
            return self._index[symbol]
        except (KeyError, TypeError):
            raise InvalidSymbol(symbol) from None

    def symbol_at(self, index: int):
        if not 0 <= index < self._size:
            raise IndexError(f"Index {index} outside alphabet of size {self._size}")
        return self._alphabet[index]

    # -- pairing -------------------------------------------------------------

    def combine(self, p: int, k: int) -> int:
        """Encrypt pairing of a plaintext index and a key index."""
        if self._mode is Mode.XOR:
            return p ^ k
        return (p + k) % self._size

    def uncombine(self, c: int, k: int) -> int:
        """Decrypt pairing; Python's % is non-negative for a positive modulus."""
        if self._mode is Mode.XOR:
            return c ^ k
        return (c - k) % self._size

    # -- cipher --------------------------------------------------------------

    def encrypt(self, message: Sequence, key: Sequence):
        """
        Encrypt `message` with `key`.
        The message is right-padded to the key length; the result always has
        len(key) symbols. Raises KeyTooShort if the message is longer.
        """
        diff = len(key) - len(message)
        if diff < 0:
            raise KeyTooShort(key_length=len(key), required=len(message))

        if self._as_text and isinstance(message, str):
            padded = message + self._pad * diff
        else:
            padded = tuple(message) + (self._pad,) * diff

        logger.debug("encrypt: message=%d key=%d padding=%d", len(message), len(key), diff)
        return self.one_time_pad(padded, key, decrypting=False)

    def decrypt(self, ciphertext: Sequence, key: Sequence):
        """
        Decrypt `ciphertext` with `key`. Padding is kept; see strip_padding().
        A longer key is only consumed up to len(ciphertext).
        Raises KeyExhausted if the ciphertext is longer than the key.
        """
        logger.debug("decrypt: ciphertext=%d key=%d", len(ciphertext), len(key))
        return self.one_time_pad(ciphertext, key, decrypting=True)

    def one_time_pad(self, text: Sequence, key: Sequence, decrypting: bool = False):
        """
        Combine `text` and `key` symbol by symbol.
        Stops at the first symbol outside the alphabet; no partial result.
        """
        if len(text) > len(key):
            raise KeyExhausted(ciphertext_length=len(text), key_length=len(key))

        pair = self.uncombine if decrypting else self.combine
        out  = []
        for i, char in enumerate(text):
            try:
                p = self.index_of(char)
            except InvalidSymbol:
                raise InvalidSymbol(char, source="message") from None

            key_char = key[i]
            try:
                k = self.index_of(key_char)
            except InvalidSymbol:
                raise InvalidSymbol(key_char, source="key") from None

            out.append(self.symbol_at(pair(p, k)))

        return self._join(out)

    def strip_padding(self, text: Sequence):
        """Drop trailing pad symbols from a decrypted message."""
        symbols = list(text)
        while symbols and symbols[-1] == self._pad:
            symbols.pop()
        return self._join(symbols)

    # -- keys ----------------------------------------------------------------

    def random_key(self, length: int):
        """
        `length` symbols drawn uniformly and independently from the alphabet
        through the engine's randomness source.
        """
        if length < 0:
            raise ValueError(f"Key length must not be negative, got {length}")
        return self._join(self._rng.choices(self._alphabet, k=length))

    def _join(self, symbols):
        if self._as_text:
            return "".join(symbols)
        return tuple(symbols)

    def __repr__(self):
        return f"OneTimePad(size={self._size}, mode={self._mode.value})"
