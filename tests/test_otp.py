"""
alphabet_otp — engine test suite
================================
Run with:  python -m pytest tests/ -v
"""

import logging
import string

import pytest

from alphabet_otp import otp as otp_module
from alphabet_otp import (
    OneTimePad,
    Mode,
    is_power_of_two,
    AlphabetTooSmall,
    DuplicateSymbol,
    InvalidSymbol,
    KeyExhausted,
    KeyTooShort,
    OTPError,
    SecureRandomSource,
    SeededRandomSource,
)

ALPHA   = "ABCDEFGHIJKLMNOPQRSTUVWXYZ "
HEX     = "0123456789ABCDEF"


@pytest.fixture
def otp():
    return OneTimePad(ALPHA)


# ── Construction ─────────────────────────────────────────────────────────────
@pytest.mark.parametrize("size", [2, 4, 8, 16, 32, 64])
def test_power_of_two_alphabet_uses_xor(size):
    alphabet = (string.ascii_letters + string.digits + "+/")[:size]
    assert OneTimePad(alphabet).mode is Mode.XOR

@pytest.mark.parametrize("size", [3, 5, 10, 27, 30])
def test_other_alphabet_sizes_use_modular(size):
    alphabet = (string.ascii_letters + string.digits)[:size]
    assert OneTimePad(alphabet).mode is Mode.MODULAR

def test_is_power_of_two():
    assert [n for n in range(0, 70) if is_power_of_two(n)] == [1, 2, 4, 8, 16, 32, 64]

@pytest.mark.parametrize("alphabet", ["", "A"])
def test_alphabet_too_small(alphabet):
    with pytest.raises(AlphabetTooSmall):
        OneTimePad(alphabet)

def test_duplicate_symbol_rejected():
    with pytest.raises(DuplicateSymbol) as e:
        OneTimePad("ABCA")
    assert e.value.symbol == "A"

def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        OneTimePad("AA")
    assert issubclass(KeyTooShort, OTPError)

def test_mode_selection_logged(caplog):
    caplog.set_level(logging.INFO, logger="alphabet_otp.otp")
    OneTimePad(HEX)
    assert "2^n" in caplog.text


# ── Lookups ──────────────────────────────────────────────────────────────────
def test_index_of_and_symbol_at(otp):
    assert otp.index_of("A") == 0
    assert otp.index_of(" ") == 26
    assert otp.symbol_at(19) == "T"

def test_index_of_unknown_symbol(otp):
    with pytest.raises(InvalidSymbol) as e:
        otp.index_of("a")
    assert e.value.symbol == "a"
    assert e.value.source is None

@pytest.mark.parametrize("index", [-1, 27])
def test_symbol_at_out_of_range(otp, index):
    with pytest.raises(IndexError):
        otp.symbol_at(index)

def test_contains(otp):
    assert "Q" in otp
    assert "q" not in otp
    assert [] not in otp


# ── Pairing ──────────────────────────────────────────────────────────────────
def test_xor_pairing_self_inverse():
    pad = OneTimePad(HEX)
    for p in range(16):
        for k in range(16):
            assert pad.combine(p, k) == p ^ k
            assert pad.uncombine(pad.combine(p, k), k) == p

def test_modular_pairing_inverse(otp):
    for p in range(27):
        for k in range(27):
            c = otp.combine(p, k)
            assert 0 <= c < 27
            assert otp.uncombine(c, k) == p

def test_modular_uncombine_never_negative(otp):
    assert otp.uncombine(0, 26) == 1


# ── Encrypt ──────────────────────────────────────────────────────────────────
def test_encrypt(otp):
    assert otp.encrypt("TEST", "ASDF") == "TWVY"

def test_encrypt_pads_to_key_size(otp):
    ct = otp.encrypt("TEST", "ASDFASDF")
    assert len(ct) == 8
    assert otp.decrypt(ct, "ASDFASDF") == "TEST    "

def test_encrypt_message_not_longer_than_key(otp):
    with pytest.raises(KeyTooShort) as e:
        otp.encrypt("AB", "A")
    assert str(e.value) == "Message too long for key of size 1"
    assert e.value.key_length == 1
    assert e.value.required == 2

def test_encrypt_limits_alphabet(otp):
    with pytest.raises(InvalidSymbol) as e:
        otp.encrypt("test", "ASDF")
    assert str(e.value) == "Message contains invalid symbol 't'"
    assert (e.value.symbol, e.value.source) == ("t", "message")

    with pytest.raises(InvalidSymbol) as e:
        otp.encrypt("TEST", "asdf")
    assert str(e.value) == "Key contains invalid symbol 'a'"
    assert (e.value.symbol, e.value.source) == ("a", "key")

def test_invalid_symbol_fails_fast(otp):
    # first bad symbol wins even though later ones are also bad
    with pytest.raises(InvalidSymbol) as e:
        otp.encrypt("AxBy", "ABCD")
    assert e.value.symbol == "x"


# ── Decrypt ──────────────────────────────────────────────────────────────────
def test_decrypt(otp):
    assert otp.decrypt("TWVY", "ASDF") == "TEST"

def test_decrypt_limits_alphabet(otp):
    with pytest.raises(InvalidSymbol, match="Message contains invalid symbol 't'"):
        otp.decrypt("test", "ASDF")
    with pytest.raises(InvalidSymbol, match="Key contains invalid symbol 'a'"):
        otp.decrypt("TEST", "asdf")

def test_decrypt_ciphertext_longer_than_key(otp):
    with pytest.raises(KeyExhausted) as e:
        otp.decrypt("TWVYA", "ASDF")
    assert e.value.ciphertext_length == 5
    assert e.value.key_length == 4

def test_decrypt_uses_key_prefix(otp):
    assert otp.decrypt("TWVY", "ASDFQQQ") == "TEST"

def test_strip_padding(otp):
    assert otp.strip_padding("TEST    ") == "TEST"
    assert otp.strip_padding("    ") == ""


# ── Shared transform ─────────────────────────────────────────────────────────
def test_one_time_pad_both_directions(otp):
    assert otp.one_time_pad("TEST", "ASDF") == "TWVY"
    assert otp.one_time_pad("TWVY", "ASDF", decrypting=True) == "TEST"

@pytest.mark.parametrize("decrypting", [False, True])
def test_one_time_pad_key_shorter_than_text(otp, decrypting):
    with pytest.raises(KeyExhausted) as e:
        otp.one_time_pad("AB", "A", decrypting=decrypting)
    assert (e.value.ciphertext_length, e.value.key_length) == (2, 1)
    assert isinstance(e.value, OTPError)


# ── Round-trip ───────────────────────────────────────────────────────────────
def test_xor_roundtrip_equal_length():
    pad = OneTimePad(HEX)
    msg, key = "DEADBEEF0123", "0F1E2D3C4B5A"
    ct = pad.encrypt(msg, key)
    assert len(ct) == len(msg)
    assert pad.decrypt(ct, key) == msg

def test_roundtrip_with_random_keys():
    rng = SeededRandomSource(1553)
    for alphabet in (ALPHA, HEX, "01", "ABC", string.printable):
        pad = OneTimePad(alphabet, rng=rng)
        for length in range(0, 20):
            msg = pad.random_key(length)
            key = pad.random_key(length + 5)
            ct  = pad.encrypt(msg, key)
            assert len(ct) == len(key)
            assert pad.decrypt(ct, key) == msg + pad.pad_symbol * 5


# ── Pad symbol ───────────────────────────────────────────────────────────────
def test_default_pad_symbol_is_space(otp):
    assert otp.pad_symbol == " "

def test_default_pad_symbol_without_space():
    assert OneTimePad(HEX).pad_symbol == "F"

def test_default_pad_symbol_from_config(monkeypatch):
    monkeypatch.setattr(otp_module, "DEFAULT_PAD_SYMBOL", "X")
    pad = OneTimePad(ALPHA)
    assert pad.pad_symbol == "X"
    assert pad.decrypt(pad.encrypt("AB", "AAAA"), "AAAA") == "ABXX"

def test_explicit_pad_symbol():
    pad = OneTimePad(HEX, pad_symbol="0")
    ct  = pad.encrypt("AB", "1234")
    assert pad.decrypt(ct, "1234") == "AB00"

def test_pad_symbol_outside_alphabet():
    with pytest.raises(InvalidSymbol) as e:
        OneTimePad(HEX, pad_symbol="x")
    assert e.value.source == "pad"


# ── Non-text alphabets ───────────────────────────────────────────────────────
def test_sequence_alphabet_returns_tuples():
    pad = OneTimePad(list(range(10)))
    assert pad.mode is Mode.MODULAR
    assert pad.pad_symbol == 9
    ct = pad.encrypt([1, 2, 3], [9, 9, 9, 9])
    assert ct == (0, 1, 2, 8)
    assert pad.decrypt(ct, [9, 9, 9, 9]) == (1, 2, 3, 9)

def test_word_alphabet_xor():
    words = ["north", "east", "south", "west"]
    pad = OneTimePad(words)
    assert pad.mode is Mode.XOR
    ct = pad.encrypt(["east", "west"], ["west", "west"])
    assert ct == ("south", "north")


# ── Random keys ──────────────────────────────────────────────────────────────
def test_random_key_length_and_symbols(otp):
    key = otp.random_key(48)
    assert isinstance(key, str)
    assert len(key) == 48
    assert set(key) <= set(ALPHA)

def test_random_key_zero_and_negative(otp):
    assert otp.random_key(0) == ""
    with pytest.raises(ValueError):
        otp.random_key(-1)

def test_seeded_random_key_is_reproducible():
    a = OneTimePad(ALPHA, rng=SeededRandomSource(42)).random_key(32)
    b = OneTimePad(ALPHA, rng=SeededRandomSource(42)).random_key(32)
    assert a == b

def test_seeded_source_warns(caplog):
    caplog.set_level(logging.WARNING, logger="alphabet_otp.randomness")
    SeededRandomSource(7)
    assert "not suitable" in caplog.text

def test_secure_source_covers_alphabet():
    src  = SecureRandomSource()
    seen = set(src.choices("AB", k=200))
    assert seen == {"A", "B"}

def test_default_source_is_secure(otp):
    assert isinstance(otp.rng, SecureRandomSource)

def test_injected_source_is_used():
    src = SeededRandomSource(3)
    otp = OneTimePad(ALPHA, rng=src)
    assert otp.rng is src
    assert otp.random_key(16) == OneTimePad(ALPHA, rng=SeededRandomSource(3)).random_key(16)
