"""
alphabet_otp — Live Demo: modular and XOR one-time pads
=======================================================
Run:  python examples/demo.py

Encrypts and decrypts the same kind of message over three alphabets and
prints the symbol/index tables for each, so the pairing can be checked by
hand.
"""

import logging
import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from alphabet_otp        import OneTimePad, SeededRandomSource, pretty_print, format_summary
from alphabet_otp.config import LOG_FORMAT

LINE = "═" * 70
MSG  = "WE CANT STOP THIS THING WEVE STARTED"

def header(tag, name):
    print(f"\n{LINE}")
    print(f"  {tag} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  alphabet_otp — One-Time Pad Demo")
print(LINE)
print(f"  Message: {MSG}\n")

# ── MODULAR ──────────────────────────────────────────────────────────────────
header("1", "MODULAR — 27 symbols, A-Z plus space")
otp = OneTimePad("ABCDEFGHIJKLMNOPQRSTUVWXYZ ")
key = otp.random_key(48)
t0  = time.perf_counter()
ct  = otp.encrypt(MSG, key)
pt  = otp.decrypt(ct, key)
elapsed = time.perf_counter() - t0
pretty_print(otp, "Message",    MSG)
pretty_print(otp, "Key",        key)
pretty_print(otp, "Ciphertext", ct)
pretty_print(otp, "Decrypted",  pt)
ok("Mode",       otp.mode.value)
ok("Ciphertext", f"{len(ct)} symbols (padded to key length)")
ok("Round-trip", f"{elapsed*1000:.3f} ms")
ok("Stripped",   otp.strip_padding(pt))

# ── XOR ──────────────────────────────────────────────────────────────────────
header("2", "XOR — 16 symbols, hexadecimal")
hex_otp = OneTimePad("0123456789ABCDEF")
msg     = "C0FFEE15B00B1E5"
key     = hex_otp.random_key(len(msg))
ct      = hex_otp.encrypt(msg, key)
pt      = hex_otp.decrypt(ct, key)
pretty_print(hex_otp, "Message",    msg)
pretty_print(hex_otp, "Key",        key)
pretty_print(hex_otp, "Ciphertext", ct)
ok("Mode",       hex_otp.mode.value)
ok("Decrypted",  pt)
ok("Round-trip", str(pt == msg))

# ── Reproducible keys ────────────────────────────────────────────────────────
header("3", "SEEDED — reproducible keys for tests only")
seeded = OneTimePad("ABCDEFGHIJKLMNOPQRSTUVWXYZ ", rng=SeededRandomSource(1917))
key_a  = seeded.random_key(24)
key_b  = OneTimePad("ABCDEFGHIJKLMNOPQRSTUVWXYZ ", rng=SeededRandomSource(1917)).random_key(24)
print(format_summary("Key (seed)", key_a))
print(format_summary("Key (again)", key_b))
ok("Same seed, same key", str(key_a == key_b))

# ── Summary ──────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  DEMO COMPLETE")
print("  size == 2^n  ->  P xor K")
print("  otherwise    ->  (P + K) mod size")
print(LINE + "\n")
