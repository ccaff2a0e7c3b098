"""Deterministic string hashing for seeded colors.

Both hashes are DJB2 (``hash * 33 + code_point``) kept to unsigned 32-bit
arithmetic, so they give the same answer on every platform and interpreter.
Python's built-in ``hash()`` is salted per process and cannot be used here.
"""

DJB2_SEED = 5381
_MASK_32 = 0xFFFFFFFF

FLOAT_RESOLUTION = 10000


def _djb2(text, seed):
    value = seed & _MASK_32
    for ch in text:
        value = ((value << 5) + value + ord(ch)) & _MASK_32
    return value


def hash_string_to_hue(text):
    """Hash a string to an integer hue in [0, 360)."""
    return _djb2(text, DJB2_SEED) % 360


def hash_string_to_float(text, seed_offset=0):
    """Hash a string to a float in [0, 1).

    Args:
        text: Input string (may be empty)
        seed_offset: Added to the DJB2 seed; different offsets give
            independent floats for the same string

    Returns:
        float with four decimal digits of resolution
    """
    return _djb2(text, DJB2_SEED + seed_offset) % FLOAT_RESOLUTION / FLOAT_RESOLUTION
