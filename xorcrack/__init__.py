"""
xorcrack - classical XOR cryptanalysis toolkit.

Base-16/base-64 codecs plus single-byte and repeating-key XOR breaking by
English letter-frequency scoring.
"""

from .__version__ import __version__
from .error_handling import MalformedInputError, XorCrackError
from .utils import (
    decode_base16,
    decode_base64,
    encode_base16,
    encode_base64,
    englishness,
    find_repeating_key_xor_key,
    find_repeating_key_xor_key_length,
    find_single_byte_xor_key,
    hamming_distance,
    repeating_key_xor,
    xor,
)

__all__ = [
    '__version__',
    'MalformedInputError',
    'XorCrackError',
    'decode_base16',
    'decode_base64',
    'encode_base16',
    'encode_base64',
    'englishness',
    'find_repeating_key_xor_key',
    'find_repeating_key_xor_key_length',
    'find_single_byte_xor_key',
    'hamming_distance',
    'repeating_key_xor',
    'xor',
]
