"""
Defaults for the command line and the demo, with environment overrides.

    ALPHABET_OTP_ALPHABET     alphabet used when --alphabet is not given
    ALPHABET_OTP_KEY_LENGTH   length of the generated key when --key is not given
    ALPHABET_OTP_LOG_LEVEL    logging level name (DEBUG, INFO, ...)
"""

import os
from dataclasses import dataclass

DEFAULT_ALPHABET   = "ABCDEFGHIJKLMNOPQRSTUVWXYZ "
DEFAULT_MESSAGE    = "THERE IS NO SPOON"
DEFAULT_KEY_LENGTH = 48
DEFAULT_PAD_SYMBOL = " "
DEFAULT_LOG_LEVEL  = "WARNING"
LOG_FORMAT         = " %(levelname)s %(name)s: %(message)s"
LOG_LEVELS         = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

ENV_PREFIX = "ALPHABET_OTP_"


@dataclass(frozen=True)
class Settings:
    alphabet:   str = DEFAULT_ALPHABET
    key_length: int = DEFAULT_KEY_LENGTH
    log_level:  str = DEFAULT_LOG_LEVEL


def load_settings(environ=None) -> Settings:
    """Build Settings from the environment, falling back to the defaults."""
    env = os.environ if environ is None else environ

    alphabet = env.get(ENV_PREFIX + "ALPHABET") or DEFAULT_ALPHABET

    raw_length = env.get(ENV_PREFIX + "KEY_LENGTH")
    if raw_length is None or raw_length == "":
        key_length = DEFAULT_KEY_LENGTH
    else:
        try:
            key_length = int(raw_length)
        except ValueError:
            raise ValueError(f"{ENV_PREFIX}KEY_LENGTH must be an integer, got {raw_length!r}")
        if key_length < 0:
            raise ValueError(f"{ENV_PREFIX}KEY_LENGTH must not be negative, got {key_length}")

    log_level = (env.get(ENV_PREFIX + "LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"{ENV_PREFIX}LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    return Settings(alphabet=alphabet, key_length=key_length, log_level=log_level)
