"""
Command line front end.

    alphabet-otp [--key KEY] [--alphabet ALPHABET] [message ...]

Encrypts the message, decrypts it again and prints both as symbol/index
tables. Unlike the engine, which stops at the first bad symbol, the command
line checks key and message up front and reports every bad symbol it finds.
"""

import argparse
import logging
import sys

from .config import DEFAULT_ALPHABET, DEFAULT_MESSAGE, LOG_FORMAT, LOG_LEVELS, load_settings
from .errors import OTPError
from .otp import OneTimePad
from .printer import format_summary, pretty_print

logger = logging.getLogger(__name__)


def find_invalid_symbols(text, alphabet) -> list:
    """Every distinct symbol of `text` missing from `alphabet`, in first-seen order."""
    allowed = set(alphabet)
    bad = []
    for symbol in text:
        if symbol not in allowed and symbol not in bad:
            bad.append(symbol)
    return bad


def has_duplicates(alphabet) -> bool:
    return len(set(alphabet)) != len(alphabet)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="alphabet-otp",
        description="One-time pad over a custom alphabet",
    )
    p.add_argument("-k", "--key", help="Encryption key (default: random)")
    p.add_argument("-a", "--alphabet", help="Alphabet (default: A-Z plus space)")
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                   help="Logging level (default: WARNING)")
    p.add_argument("message", nargs="*", help=f"Message (default: {DEFAULT_MESSAGE!r})")
    return p


def main(argv=None, rng=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format=LOG_FORMAT,
    )

    alphabet = settings.alphabet
    if args.alphabet is not None:
        if has_duplicates(args.alphabet):
            print("Ignoring provided alphabet as it includes duplicate symbols")
        else:
            alphabet = args.alphabet
    if has_duplicates(alphabet):
        logger.warning("Configured alphabet includes duplicate symbols, using the default")
        alphabet = DEFAULT_ALPHABET

    message = " ".join(args.message) if args.message else DEFAULT_MESSAGE

    try:
        otp = OneTimePad(alphabet, rng=rng)
    except OTPError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    key = args.key if args.key is not None else otp.random_key(settings.key_length)

    err = False
    bad_key = find_invalid_symbols(key, alphabet)
    if bad_key:
        print("Key contains symbols not included in the alphabet. "
              f"Bad symbols: {''.join(bad_key)}")
        err = True

    bad_message = find_invalid_symbols(message, alphabet)
    if bad_message:
        print("Message contains symbols not included in the alphabet. "
              f"Bad symbols: {''.join(bad_message)}")
        err = True

    if err:
        print("Cannot continue, exiting")
        return 1

    try:
        ciphertext = otp.encrypt(message, key)
        decrypted  = otp.decrypt(ciphertext, key)
    except OTPError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    pretty_print(otp, "Alphabet",   otp.alphabet)
    pretty_print(otp, "Message",    message)
    pretty_print(otp, "Key",        key)
    pretty_print(otp, "Ciphertext", ciphertext)
    pretty_print(otp, "Decrypted",  decrypted)

    print(format_summary("Message",    message))
    print(format_summary("Key",        key))
    print(format_summary("Ciphertext", ciphertext))
    print(format_summary("Decrypted",  decrypted))
    return 0


def main_entry():
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
