"""
XOR Analysis Tools

Provides utilities for:
- XOR of byte sequences (fixed, single-byte and repeating key)
- English-likeness scoring of candidate plaintexts
- Single-byte XOR key search
- Hamming distance and repeating-key length estimation
- Repeating-key XOR key recovery

None of these raise: every byte input, empty included, has a defined result.
"""

import math
from collections import Counter
from itertools import cycle, islice
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

MAX_SEARCHED_KEY_LENGTH = 40

# Relative frequencies in reference English text, uppercase letters and space.
# https://crypto.stackexchange.com/a/56477
ENGLISH_FREQUENCIES: Mapping[int, float] = MappingProxyType({
    ord('A'): 0.0651738, ord('B'): 0.0124248, ord('C'): 0.0217339,
    ord('D'): 0.0349835, ord('E'): 0.1041442, ord('F'): 0.0197881,
    ord('G'): 0.0158610, ord('H'): 0.0492888, ord('I'): 0.0558094,
    ord('J'): 0.0009033, ord('K'): 0.0050529, ord('L'): 0.0331490,
    ord('M'): 0.0202124, ord('N'): 0.0564513, ord('O'): 0.0596302,
    ord('P'): 0.0137645, ord('Q'): 0.0008606, ord('R'): 0.0497563,
    ord('S'): 0.0515760, ord('T'): 0.0729357, ord('U'): 0.0225134,
    ord('V'): 0.0082903, ord('W'): 0.0171272, ord('X'): 0.0013692,
    ord('Y'): 0.0145984, ord('Z'): 0.0007836, ord(' '): 0.1918182,
})

_BIT_COUNTS = tuple(bin(i).count('1') for i in range(256))


def xor(bytes1: Iterable[int], bytes2: Iterable[int]) -> bytes:
    """
    XOR two byte sequences position by position.

    The result is as long as the shorter input; trailing unmatched bytes are
    dropped. Either side may be infinite, e.g. ``itertools.repeat(key)``.
    """
    return bytes(b1 ^ b2 for b1, b2 in zip(bytes1, bytes2))


def repeating_key_xor(data: Iterable[int], key: bytes) -> bytes:
    """XOR data against key repeated cyclically (encrypts and decrypts)"""
    if not key:
        return b''
    return xor(data, cycle(key))


def englishness(data: Iterable[int]) -> float:
    """
    Score how closely the letter distribution of data matches English.

    This is the Bhattacharyya coefficient between the observed distribution
    (case-folded) and ENGLISH_FREQUENCIES. Bytes outside the table still count
    towards the total, so they dilute the score. Empty input scores 0.0.
    """
    counts = Counter(b - 32 if 0x61 <= b <= 0x7A else b for b in data)
    total = sum(counts.values())

    if total == 0:
        return 0.0

    return sum(
        math.sqrt(counts[symbol] / total * frequency)
        for symbol, frequency in ENGLISH_FREQUENCIES.items()
    )


def find_single_byte_xor_key(ciphertext: Iterable[int]) -> Tuple[int, float]:
    """
    Find the single-byte XOR key that makes ciphertext look most like English.

    Keys are tried in ascending order 0x00-0xFF and only a strictly higher
    score replaces the best so far, so ties go to the lowest key.

    Returns:
        (key, score); (0, 0.0) if nothing scores above zero
    """
    ciphertext = bytes(ciphertext)

    best_key = 0
    best_score = 0.0

    for key in range(256):
        score = englishness(b ^ key for b in ciphertext)

        if score > best_score:
            best_key = key
            best_score = score

    return best_key, best_score


def hamming_distance(bytes1: Iterable[int], bytes2: Iterable[int]) -> Tuple[int, int]:
    """
    Count differing bits between two byte sequences.

    Only the overlapping prefix is compared.

    Returns:
        (differing bits, compared bits)
    """
    distance = 0
    count = 0

    for b1, b2 in zip(bytes1, bytes2):
        distance += _BIT_COUNTS[b1 ^ b2]
        count += 1

    return distance, count * 8


# https://crypto.stackexchange.com/a/66402
def find_repeating_key_xor_key_length(
    ciphertext: Iterable[int],
    max_key_length: int = MAX_SEARCHED_KEY_LENGTH,
) -> Tuple[int, float]:
    """
    Estimate the key length of repeating-key XOR ciphertext.

    Each candidate length L compares the ciphertext with itself shifted by L
    bytes; at the true period the key cancels out and the normalised bit
    distance drops to that of the plaintext. Candidates run from 1 up to
    ``min(len(ciphertext) - 1, max_key_length)``, lowest first, and only a
    strictly smaller distance replaces the best.

    Returns:
        (key length, normalised distance); (1, 1.0) when nothing can be compared
    """
    ciphertext = bytes(ciphertext)

    best_length = 1
    best_distance = 1.0

    for length in range(1, min(len(ciphertext), max_key_length + 1)):
        differing, compared = hamming_distance(islice(ciphertext, length, None), ciphertext)
        distance = differing / compared

        if distance < best_distance:
            best_length = length
            best_distance = distance

    return best_length, best_distance


def find_repeating_key_xor_key(
    ciphertext: Iterable[int],
    max_key_length: int = MAX_SEARCHED_KEY_LENGTH,
) -> bytes:
    """
    Recover the key of repeating-key XOR ciphertext.

    The ciphertext is split into one column per key byte (every L-th byte),
    and each column is broken as single-byte XOR on its own.
    """
    ciphertext = bytes(ciphertext)
    length, _ = find_repeating_key_xor_key_length(ciphertext, max_key_length)

    return bytes(
        find_single_byte_xor_key(ciphertext[i::length])[0]
        for i in range(length)
    )
