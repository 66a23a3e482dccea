# constants.py

MIN_BASE = 2                # Smallest supported digit base
MAX_BASE = 62               # Largest supported digit base (GMP alphabet)
DEFAULT_BASE = 10
AUTO_BASE = 0               # Detect base from a 0x / 0o / 0b prefix

LOWER_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
MIXED_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
CASE_INSENSITIVE_MAX_BASE = 36

BASE_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}

NATIVE_WIDTHS = (8, 16, 32, 64)
DEFAULT_NATIVE_WIDTH = 64
