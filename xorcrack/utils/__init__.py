"""Codec and XOR primitives"""

from .codec import (
    decode_base16,
    decode_base64,
    decode_base64_lines,
    encode_base16,
    encode_base64,
)
from .xor_tools import (
    ENGLISH_FREQUENCIES,
    MAX_SEARCHED_KEY_LENGTH,
    englishness,
    find_repeating_key_xor_key,
    find_repeating_key_xor_key_length,
    find_single_byte_xor_key,
    hamming_distance,
    repeating_key_xor,
    xor,
)

__all__ = [
    'decode_base16',
    'decode_base64',
    'decode_base64_lines',
    'encode_base16',
    'encode_base64',
    'ENGLISH_FREQUENCIES',
    'MAX_SEARCHED_KEY_LENGTH',
    'englishness',
    'find_repeating_key_xor_key',
    'find_repeating_key_xor_key_length',
    'find_single_byte_xor_key',
    'hamming_distance',
    'repeating_key_xor',
    'xor',
]
